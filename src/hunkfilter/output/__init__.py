"""Diagnostic output."""

from hunkfilter.output.diagnostics import Diagnostics

__all__ = ["Diagnostics"]
