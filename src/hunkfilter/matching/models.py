"""Matcher data model: one pattern plus its polarity, compiled up front."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Polarity(str, Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


class MatchKind(str, Enum):
    LITERAL = "literal"
    REGEX = "regex"


class PatternError(Exception):
    """Raised when a pattern does not compile as a regular expression."""

    def __init__(self, pattern: str, detail: str = "") -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid regexp {pattern}")


@dataclass(frozen=True)
class Matcher:
    """A single include/exclude pattern.

    ``kind`` selects the test used by :meth:`matches`: plain substring
    containment for ``LITERAL``, ``re.search`` for ``REGEX``. Regex
    patterns are compiled at construction so a bad pattern fails before
    any input is read.
    """

    polarity: Polarity
    pattern: str
    kind: MatchKind = MatchKind.REGEX

    _compiled: Optional[re.Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.kind is MatchKind.REGEX:
            try:
                compiled = re.compile(self.pattern)
            except re.error as exc:
                raise PatternError(self.pattern, str(exc)) from exc
            object.__setattr__(self, "_compiled", compiled)

    @property
    def is_include(self) -> bool:
        return self.polarity is Polarity.INCLUDE

    def matches(self, text: str) -> bool:
        """True if *text* contains this pattern."""
        if self._compiled is not None:
            return self._compiled.search(text) is not None
        return self.pattern in text

    def describe(self) -> str:
        """Human-readable form for diagnostics, e.g. ``in /fo+/``."""
        label = "in" if self.is_include else "out"
        if self.kind is MatchKind.REGEX:
            return f"{label} /{self.pattern}/"
        return f'{label} "{self.pattern}"'
