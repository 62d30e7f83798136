"""hunk CLI: keep or drop whole diff hunks by include/exclude patterns."""

from __future__ import annotations

from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from hunkfilter import __version__
from hunkfilter.matching.models import Polarity

app = typer.Typer(
    name="hunk",
    help="Filter diff output, keeping or dropping whole hunks by pattern.",
    add_completion=False,
)

console = Console(stderr=True)

_ORDER_KEY = "hunkfilter.pattern_order"
_PATTERN_PARAMS = {
    "include": Polarity.INCLUDE,
    "exclude": Polarity.EXCLUDE,
}


class PatternOrderCommand(TyperCommand):
    """Records the command-line order of ``--in`` / ``--out`` occurrences.

    The parser groups repeated values per option, which loses how ``--in``
    and ``--out`` were interleaved. Its own occurrence order is kept in
    ``ctx.meta`` so the two lists can be merged back. Usage errors (unknown
    option, missing option value) exit 1.
    """

    def parse_args(self, ctx: typer.Context, args: List[str]) -> List[str]:
        try:
            parser = self.make_parser(ctx)
            _, _, order = parser.parse_args(args=list(args))
            ctx.meta[_ORDER_KEY] = [
                param.name for param in order if param.name in _PATTERN_PARAMS
            ]
            return super().parse_args(ctx, args)
        except typer.TyperException as exc:
            exc.exit_code = 1
            raise


def _ordered_patterns(
    ctx: typer.Context,
    include: Optional[List[str]],
    exclude: Optional[List[str]],
) -> List[Tuple[Polarity, str]]:
    """Merge the per-option value lists back into command-line order."""
    values = {"include": iter(include or []), "exclude": iter(exclude or [])}
    order = ctx.meta.get(_ORDER_KEY)
    if order is None:
        order = ["include"] * len(include or []) + ["exclude"] * len(exclude or [])
    return [(_PATTERN_PARAMS[name], next(values[name])) for name in order]


def _version_callback(value: bool) -> None:
    if value:
        print(f"hunk {__version__}")
        raise typer.Exit()


@app.command(
    cls=PatternOrderCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
def main(
    ctx: typer.Context,
    files: Optional[List[str]] = typer.Argument(
        None, metavar="[FILE]...", help="Diff files to read (default: stdin)", show_default=False,
    ),
    include: Optional[List[str]] = typer.Option(
        None, "--in", "-i", metavar="PATTERN", help="Keep hunks that match this pattern",
    ),
    exclude: Optional[List[str]] = typer.Option(
        None, "--out", "-o", "-d", metavar="PATTERN", help="Filter out hunks that match this pattern",
    ),
    match_raw: bool = typer.Option(False, "--match-raw", "-r", help="Don't treat patterns as regexps"),
    match_context: bool = typer.Option(False, "--match-context", "-c", help="Match against context lines too"),
    match_headers: bool = typer.Option(False, "--match-headers", "-H", help="Match against header and range lines too"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace decisions on stderr"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Keep or drop whole diff hunks by the first pattern their changed lines match."""
    from hunkfilter.config.builder import ConfigError, build_config
    from hunkfilter.hunks.classifier import HunkClassifier
    from hunkfilter.hunks.segmenter import StreamSegmenter
    from hunkfilter.matching.models import PatternError
    from hunkfilter.matching.registry import build_registry
    from hunkfilter.output.diagnostics import Diagnostics

    # --- Build config ---
    try:
        cfg = build_config(
            _ordered_patterns(ctx, include, exclude),
            raw_mode=match_raw,
            match_context=match_context,
            match_headers=match_headers,
            verbose=verbose,
        )
    except ConfigError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=4) from exc

    # --- Compile patterns ---
    try:
        registry = build_registry(cfg)
    except PatternError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", soft_wrap=True)
        if exc.detail:
            console.print(f"[dim]{escape(exc.detail)}[/dim]")
        raise typer.Exit(code=3) from exc

    diagnostics = Diagnostics(enabled=cfg.verbose, console=console)
    if cfg.verbose:
        console.print(f"[dim]Patterns loaded: {len(registry)}[/dim]")
        for idx, matcher in enumerate(registry):
            console.print(f"[dim]  #{idx} {escape(matcher.describe())}[/dim]", highlight=False)

    sink = typer.get_binary_stream("stdout")
    classifier = HunkClassifier(registry, sink, diagnostics)
    segmenter = StreamSegmenter(cfg, classifier)

    # --- Filter each source in turn ---
    try:
        if not files:
            diagnostics.source("<stdin>")
            segmenter.process(typer.get_binary_stream("stdin"))
        else:
            for path in files:
                try:
                    handle = open(path, "rb")
                except OSError as exc:
                    console.print(
                        f"[bold red]Error:[/bold red] Can't open {escape(path)} for reading",
                        soft_wrap=True,
                    )
                    raise typer.Exit(code=2) from exc
                with handle:
                    diagnostics.source(path)
                    segmenter.process(handle)
    finally:
        sink.flush()

    diagnostics.summary(classifier.stats)
