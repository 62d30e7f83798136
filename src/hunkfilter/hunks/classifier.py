"""Hunk classifier: first matching pattern decides whether a hunk is kept.

Lines are scanned in order and, for each eligible line, matchers are tried
in command-line order. The first line/matcher hit ends the scan:

* an include hit keeps the hunk,
* an exclude hit drops it,
* no hit at all keeps the hunk only when no include pattern is configured.

A kept hunk is written out whole, headers and context included, exactly as
it was read.
"""

from __future__ import annotations

from typing import BinaryIO, Optional

from hunkfilter.hunks.models import FilterStats, Hunk, Verdict
from hunkfilter.matching.registry import MatcherRegistry
from hunkfilter.output.diagnostics import Diagnostics


def classify(
    hunk: Hunk,
    registry: MatcherRegistry,
    diagnostics: Optional[Diagnostics] = None,
) -> Verdict:
    """Decide whether *hunk* is kept. Does not write anything."""
    for line_index, line in enumerate(hunk):
        if not line.eligible:
            continue
        hit = registry.first_match(line.body)
        if hit is None:
            continue
        matcher_index, matcher = hit
        if diagnostics is not None:
            diagnostics.matched(matcher_index, matcher, line_index, line)
        return Verdict(
            keep=matcher.is_include,
            reason="included" if matcher.is_include else "excluded",
            matcher_index=matcher_index,
            line_index=line_index,
        )

    if registry.has_include:
        return Verdict(keep=False, reason="no-include-match")
    return Verdict(keep=True, reason="no-match")


class HunkClassifier:
    """Classifies flushed hunks and writes the kept ones to *sink*."""

    def __init__(
        self,
        registry: MatcherRegistry,
        sink: BinaryIO,
        diagnostics: Optional[Diagnostics] = None,
        stats: Optional[FilterStats] = None,
    ) -> None:
        self.registry = registry
        self.sink = sink
        self.diagnostics = diagnostics or Diagnostics()
        self.stats = stats if stats is not None else FilterStats()

    def flush(self, hunk: Hunk) -> Verdict:
        self.diagnostics.hunk(hunk)
        verdict = classify(hunk, self.registry, self.diagnostics)

        self.stats.hunks_seen += 1
        if verdict.keep:
            self.sink.write(hunk.to_bytes())
            self.stats.hunks_kept += 1
            self.stats.lines_written += len(hunk)

        self.diagnostics.decision(verdict, hunk)
        return verdict
