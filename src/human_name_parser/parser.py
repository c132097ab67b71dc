"""Core extraction pipeline for the Human Name Parser library."""

from __future__ import annotations

import functools
import re
from dataclasses import asdict, dataclass, field, fields
from typing import Dict, FrozenSet, List, Mapping

import ftfy

from .buffer import NameBuffer, validate_text
from .errors import ArgumentError
from .tables import PREFIXES, SUFFIXES, TITLES, alternation, normalize_title


_FLAGS = re.IGNORECASE
_COMMA_PATTERN = re.compile(",")
_QUOTED_NICKNAME_PATTERN = re.compile(r"""(?<=\s)(\()?(['"])(.+?)\2(?(1)\))(?=\s)""", _FLAGS)
_BRACKETED_NICKNAME_PATTERN = re.compile(r"""(?<=\s)\(([^()'"]+)\)(?=\s)""", _FLAGS)
_SOLE_COMPONENT_PATTERN = re.compile(r"^\S+$", _FLAGS)
# The lookahead keeps the following word in the buffer.
_LEADING_INITIAL_PATTERN = re.compile(r"^(\S\.*)(?=\s[^\W\d_]{2})", _FLAGS)
_FIRST_PATTERN = re.compile(r"^\S+", _FLAGS)


@dataclass(frozen=True)
class ParsedName:
    """The components of one parsed name. Missing parts are empty strings."""

    leading_initial: str = ""
    title: str = ""
    first: str = ""
    nicknames: str = ""
    middle: str = ""
    last: str = ""
    suffix: str = ""

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)

    def as_list(self) -> List[str]:
        return [getattr(self, name) for name in FIELDS]

    def to_array(self, mode: str = "assoc") -> Dict[str, str] | List[str]:
        """Return every component, keyed by field name (``"assoc"``) or positionally (``"int"``)."""

        if mode == "assoc":
            return self.as_dict()
        if mode == "int":
            return self.as_list()
        raise ArgumentError(f"Array mode must be 'assoc' or 'int', not {mode!r}")

    def full_name(self) -> str:
        return " ".join(part for part in self.as_list() if part)

    def is_empty(self) -> bool:
        return not any(self.as_list())


FIELDS = tuple(f.name for f in fields(ParsedName))


@dataclass
class ParserConfig:
    """Reference data and input handling for :class:`NameParser`."""

    suffixes: FrozenSet[str] = SUFFIXES
    prefixes: FrozenSet[str] = PREFIXES
    titles: Mapping[str, str] = field(default_factory=lambda: TITLES)
    fix_text: bool = False


class NameParser:
    """Split name strings into their components.

    Each stage cuts its piece off the ends of a :class:`NameBuffer`, so the
    stages only work in the order :meth:`parse` runs them: the comma flip
    puts the surname last, the suffix and nickname come out before the title
    and surname are looked for, and whatever survives every stage is the
    middle name.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()
        self._suffix_pattern = self._build_suffix_pattern(self.config.suffixes)
        self._title_pattern = self._build_title_pattern(self.config.titles)
        self._last_pattern = self._build_last_pattern(self.config.prefixes)

    def parse(self, text: str | bytes) -> ParsedName:
        """Return the :class:`ParsedName` for `text`.

        Raises :class:`EncodingError` for malformed input and :class:`FormatError`
        for names the pipeline cannot take apart unambiguously.
        """

        raw = validate_text(text)
        if self.config.fix_text:
            raw = ftfy.fix_text(raw)
        name = NameBuffer(raw)

        name.flip(_COMMA_PATTERN)

        suffix = name.chop(self._suffix_pattern, 1).strip(" .,")

        nicknames = name.splice(_QUOTED_NICKNAME_PATTERN, 3)
        if not nicknames:
            nicknames = name.splice(_BRACKETED_NICKNAME_PATTERN, 1)

        title = normalize_title(name.chop(self._title_pattern, 1), self.config.titles) or ""

        last = name.chop(self._last_pattern).strip()

        # "Mrs Bloggs" or "Bloggs Jr": a lone leftover word next to a title or suffix is a surname.
        if not last and (title or suffix) and name.is_single_token():
            last = name.chop(_SOLE_COMPONENT_PATTERN).strip()

        leading_initial = name.chop(_LEADING_INITIAL_PATTERN, 1).strip()
        first = name.chop(_FIRST_PATTERN).strip()

        return ParsedName(
            leading_initial=leading_initial,
            title=title,
            first=first,
            nicknames=nicknames.strip(),
            middle=name.text.strip(),
            last=last,
            suffix=suffix,
        )

    @staticmethod
    def _build_suffix_pattern(suffixes: FrozenSet[str]) -> re.Pattern[str]:
        return re.compile(rf"[\s,]*(?<![^\s,])({alternation(suffixes)})\.*$", _FLAGS)

    @staticmethod
    def _build_title_pattern(titles: Mapping[str, str]) -> re.Pattern[str]:
        return re.compile(rf"^\(?({alternation(titles)})\.?\)?(?!\S)", _FLAGS)

    @staticmethod
    def _build_last_pattern(prefixes: FrozenSet[str]) -> re.Pattern[str]:
        return re.compile(rf"(?<=\s)(?:(?:\S+\s+y|{alternation(prefixes)})\s+)*\S+$", _FLAGS)


@functools.lru_cache(maxsize=1)
def _default_parser() -> NameParser:
    return NameParser()


def parse_name(text: str | bytes, config: ParserConfig | None = None) -> ParsedName:
    """Parse `text` with `config`, reusing a shared parser for the default tables."""

    parser = NameParser(config) if config is not None else _default_parser()
    return parser.parse(text)


class HumanName:
    """A name string parsed on construction.

    Example::

        name = HumanName("John Q. Smith")
        f"{name.last}, {name.first}"  # "Smith, John"
    """

    def __init__(self, text: str | bytes, config: ParserConfig | None = None) -> None:
        self._raw = validate_text(text)
        self._parsed = parse_name(self._raw, config)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def parsed(self) -> ParsedName:
        return self._parsed

    @property
    def leading_initial(self) -> str:
        return self._parsed.leading_initial

    @property
    def title(self) -> str:
        return self._parsed.title

    @property
    def first(self) -> str:
        return self._parsed.first

    @property
    def nicknames(self) -> str:
        return self._parsed.nicknames

    @property
    def middle(self) -> str:
        return self._parsed.middle

    @property
    def last(self) -> str:
        return self._parsed.last

    @property
    def suffix(self) -> str:
        return self._parsed.suffix

    def as_dict(self) -> Dict[str, str]:
        return self._parsed.as_dict()

    def to_array(self, mode: str = "assoc") -> Dict[str, str] | List[str]:
        return self._parsed.to_array(mode)

    def __str__(self) -> str:
        return self._parsed.full_name()

    def __repr__(self) -> str:
        return f"HumanName({self._raw!r})"


__all__ = [
    "FIELDS",
    "HumanName",
    "NameParser",
    "ParsedName",
    "ParserConfig",
    "parse_name",
]
