"""Configuration building and schema."""

from hunkfilter.config.builder import ConfigError, build_config
from hunkfilter.config.schema import FilterConfig, PatternSpec

__all__ = [
    "ConfigError",
    "FilterConfig",
    "PatternSpec",
    "build_config",
]
