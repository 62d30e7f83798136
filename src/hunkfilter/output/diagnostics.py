"""Verbose trace on stderr: hunk dumps, matches, decisions, run summary."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from hunkfilter.hunks.models import BufferedLine, FilterStats, Hunk, Verdict
    from hunkfilter.matching.models import Matcher

_REASON_TEXT = {
    "excluded": "matched an exclude pattern",
    "no-include-match": "no line matched an include pattern",
}


def _shown(line: BufferedLine) -> str:
    return escape(line.body)


class Diagnostics:
    """Writes the diagnostic trace when *enabled*.

    Unexpected-line notices are the exception: they always go to stderr.
    """

    def __init__(self, enabled: bool = False, console: Optional[Console] = None) -> None:
        self.enabled = enabled
        self.console = console or Console(stderr=True)

    def _print(self, message: str) -> None:
        self.console.print(message, soft_wrap=True, highlight=False)

    def source(self, name: str) -> None:
        if self.enabled:
            self._print(f"[bold]Reading {escape(name)}[/bold]")

    def hunk(self, hunk: Hunk) -> None:
        if not self.enabled:
            return
        self._print(f"[dim]Hunk: {len(hunk)} line(s), {hunk.eligible_count} eligible[/dim]")
        for idx, line in enumerate(hunk):
            flag = "[green]*[/green]" if line.eligible else " "
            self._print(f"  {flag} [dim]{idx:>4}[/dim] {_shown(line)}")

    def matched(self, matcher_index: int, matcher: Matcher, line_index: int, line: BufferedLine) -> None:
        if self.enabled:
            self._print(
                f"  [cyan]match[/cyan] #{matcher_index} {escape(matcher.describe())} "
                f"on line {line_index}: {_shown(line)}"
            )

    def decision(self, verdict: Verdict, hunk: Hunk) -> None:
        if not self.enabled:
            return
        if verdict.keep:
            self._print(f"  [green]kept[/green] ({verdict.reason}), wrote {len(hunk)} line(s)")
        else:
            why = _REASON_TEXT.get(verdict.reason, verdict.reason)
            self._print(f"  [red]discarded[/red]: {why}")

    def unexpected(self, line: BufferedLine) -> None:
        """Reported whether or not the trace is enabled."""
        bracketed = escape("[" + line.body + "]")
        self._print(f"[yellow]Unexpected line:[/yellow] {bracketed}")

    def summary(self, stats: FilterStats) -> None:
        if not self.enabled:
            return
        self._print("")
        self._print(f"[dim]Sources read:[/dim]     {stats.sources}")
        self._print(f"[dim]Hunks seen:[/dim]       {stats.hunks_seen}")
        self._print(f"[dim]Kept:[/dim]             {stats.hunks_kept}")
        self._print(f"[dim]Discarded:[/dim]        {stats.hunks_discarded}")
        self._print(f"[dim]Lines written:[/dim]    {stats.lines_written}")
        self._print(f"[dim]Unexpected lines:[/dim] {stats.unexpected_lines}")
