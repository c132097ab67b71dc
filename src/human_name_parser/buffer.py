"""Mutable name string that pipeline stages cut pieces out of."""

from __future__ import annotations

import re
from typing import Union

from .errors import EncodingError, FormatError


_MULTI_SPACE_PATTERN = re.compile(r"\s+")

PatternLike = Union[str, re.Pattern[str]]


def compile_pattern(pattern: PatternLike) -> re.Pattern[str]:
    """Compile `pattern` with the flags every stage matches with."""

    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.IGNORECASE)


def validate_text(text: str | bytes) -> str:
    """Return `text` as a well-formed ``str`` or raise :class:`EncodingError`."""

    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(f"Name is not valid UTF-8: {exc}") from exc
    if not isinstance(text, str):
        raise TypeError(f"Name must be str or bytes, not {type(text).__name__}")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"Name contains invalid Unicode: {exc}") from exc
    return text


def normalize_text(text: str) -> str:
    """Collapse whitespace runs and strip surrounding whitespace and trailing commas."""

    collapsed = _MULTI_SPACE_PATTERN.sub(" ", text).strip()
    return collapsed.rstrip(" ,")


class NameBuffer:
    """Owns the part of a name that no stage has claimed yet.

    Every mutation leaves the text normalized: no surrounding whitespace,
    single spaces only, and no trailing comma.
    """

    def __init__(self, text: str | bytes) -> None:
        self._text = validate_text(text)
        self.normalize()

    @property
    def text(self) -> str:
        return self._text

    def normalize(self) -> str:
        self._text = normalize_text(self._text)
        return self._text

    def flip(self, delimiter: PatternLike) -> bool:
        """Swap the text before and after `delimiter`.

        Returns ``True`` when the text was flipped. Raises :class:`FormatError`
        when the delimiter occurs more than once.
        """

        parts = compile_pattern(delimiter).split(self._text)
        if len(parts) > 2:
            raise FormatError(f"Can't flip around multiple delimiters in name '{self._text}'")
        if len(parts) < 2:
            return False
        head, tail = parts
        self._text = f"{tail} {head}"
        self.normalize()
        return True

    def chop(self, pattern: PatternLike, group: int | str = 0) -> str:
        """Remove the first match of `pattern` from either end of the text.

        The whole match is removed, but only `group` is returned. A match that
        touches neither end raises :class:`FormatError`. No match returns ``""``.
        """

        match = compile_pattern(pattern).search(self._text)
        if match is None:
            return ""
        start, end = match.span()
        if start == 0:
            remainder = self._text[end:]
        elif end == len(self._text):
            remainder = self._text[:start]
        else:
            raise FormatError(f"The substring '{match.group(0)}' is in the middle of the name '{self._text}'")
        self._text = remainder
        self.normalize()
        return match.group(group) or ""

    def splice(self, pattern: PatternLike, group: int | str = 0) -> str:
        """Remove the first match of `pattern` when it is a whitespace-delimited run.

        Unlike :meth:`chop` the match may sit inside the text, but it must be
        bounded by whitespace on both sides so no neighbouring token is cut.
        The check holds for any pattern, including ones without lookarounds
        for the surrounding whitespace; a glued match raises :class:`FormatError`.
        """

        match = compile_pattern(pattern).search(self._text)
        if match is None:
            return ""
        start, end = match.span()
        text = self._text
        if start == 0 or end == len(text) or not text[start - 1].isspace() or not text[end].isspace():
            raise FormatError(f"The substring '{match.group(0)}' is not a separate part of the name '{text}'")
        self._text = f"{text[:start]} {text[end:]}"
        self.normalize()
        return match.group(group) or ""

    def tokens(self) -> list[str]:
        return self._text.split()

    def token_count(self) -> int:
        return len(self.tokens())

    def is_single_token(self) -> bool:
        return self.token_count() == 1

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"NameBuffer({self._text!r})"


__all__ = ["NameBuffer", "compile_pattern", "normalize_text", "validate_text"]
