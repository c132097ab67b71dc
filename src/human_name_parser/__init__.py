"""Human Name Parser library initialization."""

from .buffer import NameBuffer
from .errors import ArgumentError, EncodingError, FormatError, NameParserError
from .parser import FIELDS, HumanName, NameParser, ParsedName, ParserConfig, parse_name
from .runner import ParseFileConfig, parse_dataframe, parse_file, parse_series
from .tables import PREFIXES, SUFFIXES, TITLES, normalize_title

__all__ = [
    "FIELDS",
    "HumanName",
    "NameBuffer",
    "NameParser",
    "ParsedName",
    "ParserConfig",
    "parse_name",
    "ParseFileConfig",
    "parse_dataframe",
    "parse_file",
    "parse_series",
    "PREFIXES",
    "SUFFIXES",
    "TITLES",
    "normalize_title",
    "NameParserError",
    "EncodingError",
    "FormatError",
    "ArgumentError",
]
