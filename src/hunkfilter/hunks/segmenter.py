"""Stream segmenter: split a diff stream into hunks by textual markers.

This is deliberately not a diff parser. Each line is classified by its
prefix alone:

* ``--- `` or a leading digit (classic ``12,14c12,15`` range) starts a new
  hunk, flushing whatever was pending;
* ``+++ `` and ``@@ `` join the pending hunk as header lines;
* ``+``/``>`` and ``-``/``<`` are changed lines, a leading space is context;
* ``\\`` (``\\ No newline at end of file``) stays with the pending hunk;
* anything else (``diff --git``, ``index ...``, ``Only in ...``) is outside
  a hunk: a hunk in progress is flushed and the line starts a separate run
  that lasts until the next boundary.
"""

from __future__ import annotations

from typing import Iterable, Optional

from hunkfilter.config.schema import FilterConfig
from hunkfilter.hunks.classifier import HunkClassifier
from hunkfilter.hunks.models import BufferedLine, Hunk, LineRole
from hunkfilter.output.diagnostics import Diagnostics

_FILE_OLD = b"--- "
_FILE_NEW = b"+++ "
_RANGE = b"@@ "
_NO_NEWLINE = b"\\"

_ADDED = (b"+", b">")
_REMOVED = (b"-", b"<")
_CONTEXT = b" "


def line_role(raw: bytes) -> LineRole:
    """Classify a raw line by its prefix."""
    if raw.startswith(_FILE_OLD) or raw.startswith(_FILE_NEW):
        return LineRole.HEADER
    if raw.startswith(_RANGE) or raw[:1].isdigit():
        return LineRole.RANGE
    lead = raw[:1]
    if lead in _ADDED:
        return LineRole.ADDED
    if lead in _REMOVED:
        return LineRole.REMOVED
    if lead == _CONTEXT:
        return LineRole.CONTEXT
    if lead == _NO_NEWLINE:
        return LineRole.MARKER
    return LineRole.OTHER


def starts_hunk(raw: bytes) -> bool:
    """True for lines that close the pending hunk and open a new one."""
    return raw.startswith(_FILE_OLD) or raw[:1].isdigit()


class StreamSegmenter:
    """Buffers lines of one source at a time and hands hunks to a classifier."""

    def __init__(
        self,
        config: FilterConfig,
        classifier: HunkClassifier,
        diagnostics: Optional[Diagnostics] = None,
    ) -> None:
        self.config = config
        self.classifier = classifier
        self.diagnostics = diagnostics or classifier.diagnostics

    def _eligible(self, role: LineRole) -> bool:
        if role in (LineRole.ADDED, LineRole.REMOVED):
            return True
        if role is LineRole.CONTEXT:
            return self.config.match_context
        if role is LineRole.MARKER:
            return False
        # headers, range lines and out-of-hunk lines
        return self.config.match_headers

    def _flush(self, pending: Hunk) -> Hunk:
        if pending:
            self.classifier.flush(pending)
        return Hunk()

    def process(self, stream: Iterable[bytes]) -> None:
        """Consume *stream* to exhaustion. Nothing carries over between calls."""
        stats = self.classifier.stats
        stats.sources += 1

        pending = Hunk()
        in_hunk = False

        for raw in stream:
            role = line_role(raw)
            line = BufferedLine(raw=raw, role=role, eligible=self._eligible(role))

            if starts_hunk(raw):
                pending = self._flush(pending)
                in_hunk = True
            elif role is LineRole.OTHER:
                stats.unexpected_lines += 1
                self.diagnostics.unexpected(line)
                if in_hunk:
                    pending = self._flush(pending)
                    in_hunk = False
            elif role is not LineRole.MARKER:
                in_hunk = True

            pending.append(line)

        self._flush(pending)
