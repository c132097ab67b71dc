"""Exceptions raised while parsing names."""

from __future__ import annotations


class NameParserError(Exception):
    """Base class for every error raised by the library."""


class EncodingError(NameParserError, ValueError):
    """The input is not well-formed Unicode text."""


class FormatError(NameParserError, ValueError):
    """The name has a shape the pipeline cannot take apart safely."""


class ArgumentError(NameParserError, ValueError):
    """An accessor was called with an unsupported argument."""


__all__ = ["NameParserError", "EncodingError", "FormatError", "ArgumentError"]
