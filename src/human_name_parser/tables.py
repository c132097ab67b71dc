"""Reference tables for suffixes, surname prefixes and titles."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, Mapping


SUFFIXES = frozenset({"esq", "esquire", "jr", "sr", "2", "ii", "iii", "iv"})

PREFIXES = frozenset(
    {
        "bar",
        "ben",
        "bin",
        "da",
        "dal",
        "de la",
        "de",
        "del",
        "der",
        "di",
        "ibn",
        "la",
        "le",
        "san",
        "st",
        "ste",
        "van",
        "van der",
        "van den",
        "vel",
        "von",
        "al",
    }
)

# Ordered by how often each spelling shows up in practice.
TITLES: Mapping[str, str] = MappingProxyType(
    {
        "Mrs": "Mrs",
        "Mr": "Mr",
        "Ms": "Ms",
        "Miss": "Miss",
        "Dr": "Dr",
        "Mister": "Mr",
        "Master": "Master",
        "Doctor": "Dr",
        "Sir": "Sir",
        "Professor": "Prof",
        "Prof": "Prof",
        "Madam": "Madam",
        "Dame": "Dame",
    }
)

_TITLE_STRIP = " .()"
_INNER_SPACE = re.compile(r"\\ ")


def normalize_title(token: str, titles: Mapping[str, str] = TITLES) -> str | None:
    """Return the canonical spelling of the title `token`.

    Exact spellings from `titles` map to their canonical form; anything else
    is capitalized as written, so "DOCTOR" stays "Doctor". Empty tokens yield ``None``.
    """

    cleaned = (token or "").strip(_TITLE_STRIP)
    if not cleaned:
        return None
    if cleaned in titles:
        return titles[cleaned]
    return cleaned.capitalize()


def alternation(tokens: Iterable[str]) -> str:
    """Return a regex alternation matching any of `tokens`, longest first."""

    ordered = sorted({t for t in tokens if t}, key=lambda t: (-len(t), t))
    return "|".join(_INNER_SPACE.sub(r"\\s+", re.escape(token)) for token in ordered)


__all__ = ["SUFFIXES", "PREFIXES", "TITLES", "normalize_title", "alternation"]
