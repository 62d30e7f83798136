"""Matcher registry: the ordered matcher list built from configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from hunkfilter.matching.models import Matcher, MatchKind

if TYPE_CHECKING:
    from hunkfilter.config.schema import FilterConfig


class MatcherRegistry:
    """Matchers in command-line order.

    Order is the whole semantics here: the first matcher that hits a line
    decides, so lookups are always a front-to-back scan.
    """

    def __init__(self) -> None:
        self._matchers: List[Matcher] = []

    # ---- registration ----

    def register(self, matcher: Matcher) -> None:
        self._matchers.append(matcher)

    def register_many(self, matchers: list[Matcher]) -> None:
        for m in matchers:
            self.register(m)

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._matchers)

    def __iter__(self) -> Iterator[Matcher]:
        return iter(self._matchers)

    @property
    def has_include(self) -> bool:
        return any(m.is_include for m in self._matchers)

    def first_match(self, text: str) -> Optional[Tuple[int, Matcher]]:
        """Return ``(index, matcher)`` for the first matcher hitting *text*."""
        for idx, matcher in enumerate(self._matchers):
            if matcher.matches(text):
                return idx, matcher
        return None


def build_registry(config: FilterConfig) -> MatcherRegistry:
    """Compile every configured pattern, in order. Raises PatternError."""
    kind = MatchKind.LITERAL if config.raw_mode else MatchKind.REGEX
    registry = MatcherRegistry()
    registry.register_many(
        [Matcher(polarity=spec.polarity, pattern=spec.pattern, kind=kind) for spec in config.patterns]
    )
    return registry
