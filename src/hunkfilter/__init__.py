"""hunkfilter: keep or drop diff hunks by pattern."""

__version__ = "0.1.0"
