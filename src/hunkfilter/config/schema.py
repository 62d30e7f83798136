"""Configuration schema: one dataclass built from the command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from hunkfilter.matching.models import Polarity


@dataclass(frozen=True)
class PatternSpec:
    """One ``--in`` / ``--out`` occurrence, before compilation."""

    polarity: Polarity
    pattern: str


@dataclass
class FilterConfig:
    raw_mode: bool = False  # literal substring matching instead of regex
    match_context: bool = False  # context lines (leading space) are eligible
    match_headers: bool = False  # ---/+++/@@ and digit range lines are eligible
    verbose: bool = False
    patterns: List[PatternSpec] = field(default_factory=list)  # command-line order
