"""Hunk buffering, segmentation and classification."""

from hunkfilter.hunks.classifier import HunkClassifier, classify
from hunkfilter.hunks.models import BufferedLine, FilterStats, Hunk, LineRole, Verdict
from hunkfilter.hunks.segmenter import StreamSegmenter, line_role, starts_hunk

__all__ = [
    "BufferedLine",
    "FilterStats",
    "Hunk",
    "HunkClassifier",
    "LineRole",
    "StreamSegmenter",
    "Verdict",
    "classify",
    "line_role",
    "starts_hunk",
]
