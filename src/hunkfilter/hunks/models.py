"""Data models for buffered hunks and their classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class LineRole(str, Enum):
    HEADER = "header"  # "--- " / "+++ " file headers
    RANGE = "range"  # "@@ " or a classic "12,14c12,15" range line
    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"
    MARKER = "marker"  # "\ No newline at end of file"
    OTHER = "other"  # anything outside a hunk: "diff --git", "index", ...


@dataclass(frozen=True, slots=True)
class BufferedLine:
    """A single input line, kept byte-for-byte for re-emission."""

    raw: bytes
    role: LineRole
    eligible: bool

    @property
    def text(self) -> str:
        """Decoded line, terminator included; undecodable bytes are replaced."""
        return self.raw.decode("utf-8", errors="replace")

    @property
    def body(self) -> str:
        """Decoded text without its line terminator; what patterns see."""
        return self.text.rstrip("\r\n")


@dataclass
class Hunk:
    """An ordered run of buffered lines, emitted or dropped as a whole."""

    lines: List[BufferedLine] = field(default_factory=list)

    def append(self, line: BufferedLine) -> None:
        self.lines.append(line)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[BufferedLine]:
        return iter(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)

    @property
    def eligible_count(self) -> int:
        return sum(1 for line in self.lines if line.eligible)

    def to_bytes(self) -> bytes:
        return b"".join(line.raw for line in self.lines)


@dataclass(frozen=True)
class Verdict:
    """Outcome of classifying one hunk."""

    keep: bool
    reason: str  # 'included' | 'excluded' | 'no-include-match' | 'no-match'
    matcher_index: Optional[int] = None
    line_index: Optional[int] = None


@dataclass
class FilterStats:
    """Counters for a whole run, across every input source."""

    sources: int = 0
    hunks_seen: int = 0
    hunks_kept: int = 0
    lines_written: int = 0
    unexpected_lines: int = 0

    @property
    def hunks_discarded(self) -> int:
        return self.hunks_seen - self.hunks_kept
