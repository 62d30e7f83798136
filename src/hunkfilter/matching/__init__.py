"""Pattern matching: matcher model and ordered registry."""

from hunkfilter.matching.models import Matcher, MatchKind, PatternError, Polarity
from hunkfilter.matching.registry import MatcherRegistry, build_registry

__all__ = [
    "MatchKind",
    "Matcher",
    "MatcherRegistry",
    "PatternError",
    "Polarity",
    "build_registry",
]
