"""Analysis module for PipeLoss core."""

from .calculator import (
    OperatingConditions,
    SegmentDefinition,
    PressureDropCalculator,
)

__all__ = [
    "OperatingConditions",
    "SegmentDefinition",
    "PressureDropCalculator",
]
