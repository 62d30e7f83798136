"""Tests for building the filter configuration."""

import pytest

from hunkfilter.config.builder import ConfigError, build_config
from hunkfilter.config.schema import FilterConfig, PatternSpec
from hunkfilter.matching.models import Polarity


class TestBuildConfig:
    def test_no_patterns_rejected(self):
        with pytest.raises(ConfigError):
            build_config([])

    def test_order_preserved(self):
        cfg = build_config([
            (Polarity.EXCLUDE, "b"),
            (Polarity.INCLUDE, "a"),
            (Polarity.EXCLUDE, "c"),
        ])
        assert [p.pattern for p in cfg.patterns] == ["b", "a", "c"]
        assert cfg.patterns[0] == PatternSpec(Polarity.EXCLUDE, "b")

    def test_polarity_from_string(self):
        cfg = build_config([("include", "x")])
        assert cfg.patterns[0].polarity is Polarity.INCLUDE

    def test_flags(self):
        cfg = build_config(
            [(Polarity.INCLUDE, "x")],
            raw_mode=True, match_context=True, match_headers=True, verbose=True,
        )
        assert cfg.raw_mode and cfg.match_context and cfg.match_headers and cfg.verbose


class TestFilterConfig:
    def test_defaults(self):
        cfg = FilterConfig()
        assert cfg.raw_mode is False
        assert cfg.match_context is False
        assert cfg.match_headers is False
        assert cfg.patterns == []
