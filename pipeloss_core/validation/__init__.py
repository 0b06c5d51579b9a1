"""Validation module for PipeLoss core."""

from .diagnostics import WarningCheckParams, generate_segment_warnings

__all__ = [
    "WarningCheckParams",
    "generate_segment_warnings",
]
