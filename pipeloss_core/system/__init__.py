"""System pressure drop module for PipeLoss core."""

from .segment import calc_segment_pressure_drop
from .aggregator import (
    DENSITY_TOLERANCE,
    check_fluid_consistency,
    calc_system_pressure_drop,
)

__all__ = [
    "calc_segment_pressure_drop",
    "DENSITY_TOLERANCE",
    "check_fluid_consistency",
    "calc_system_pressure_drop",
]
