"""Build a FilterConfig from parsed command-line values."""

from __future__ import annotations

from typing import Iterable, Tuple

from hunkfilter.config.schema import FilterConfig, PatternSpec
from hunkfilter.matching.models import Polarity


class ConfigError(Exception):
    """Raised when the command line does not describe a usable filter."""


def build_config(
    patterns: Iterable[Tuple[Polarity, str]],
    *,
    raw_mode: bool = False,
    match_context: bool = False,
    match_headers: bool = False,
    verbose: bool = False,
) -> FilterConfig:
    """Validate and return a FilterConfig.

    *patterns* must already be in command-line order; at least one is
    required.
    """
    specs = [PatternSpec(polarity=Polarity(pol), pattern=pat) for pol, pat in patterns]
    if not specs:
        raise ConfigError("No matches")

    return FilterConfig(
        raw_mode=raw_mode,
        match_context=match_context,
        match_headers=match_headers,
        verbose=verbose,
        patterns=specs,
    )
