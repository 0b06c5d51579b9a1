"""
Segment warning diagnostics.

Inspects the computed values of a segment and reports conditions where
the correlations lose accuracy or the design deserves a second look.
Warnings never interrupt a calculation; they only annotate a successful
result.
"""

from dataclasses import dataclass
import math
from typing import List, Sequence

from ..models import CalcWarning, FittingResult, FlowRegime, KValueMethod, Severity
from ..units import MM_PER_INCH

# Thresholds
RE_VERY_LOW = 100.0
VELOCITY_HIGH = 3.0          # m/s, erosion and noise
VELOCITY_LOW = 0.5           # m/s, settling and scaling
REL_ROUGHNESS_HIGH = 0.001
THREE_K_MIN_INCH = 0.5       # Darby 3-K validated bore range
THREE_K_MAX_INCH = 24.0
ELEVATION_LARGE = 30.0       # m


@dataclass(frozen=True)
class WarningCheckParams:
    """Computed segment values inspected by the diagnostics."""
    reynolds: float
    flow_regime: FlowRegime
    velocity_m_s: float
    roughness_mm: float
    id_mm: float
    fitting_details: Sequence[FittingResult]
    elevation_m: float
    friction_factor: float
    length_m: float


def generate_segment_warnings(params: WarningCheckParams) -> List[CalcWarning]:
    """
    Evaluate every diagnostic rule against one segment.

    Rules are independent; any subset may fire, and they are reported in
    a fixed order:

    1. very low Reynolds number
    2. transitional flow
    3. high velocity
    4. low velocity
    5. high relative roughness
    6. Darby 3-K fitting outside its diameter range
    7. fittings dominate straight-pipe friction
    8. large elevation change

    Args:
        params: Computed segment values

    Returns:
        List of warnings (possibly empty)
    """
    warnings: List[CalcWarning] = []

    _check_reynolds(params, warnings)
    _check_velocity(params, warnings)
    _check_roughness(params, warnings)
    _check_3k_range(params, warnings)
    _check_fittings_dominant(params, warnings)
    _check_elevation(params, warnings)

    return warnings


def _check_reynolds(params: WarningCheckParams, warnings: List[CalcWarning]):
    if 0 < params.reynolds < RE_VERY_LOW:
        warnings.append(CalcWarning(
            Severity.CAUTION, "friction", "warn.very_low_reynolds",
            {"re": _round_int(params.reynolds)},
        ))

    if params.flow_regime == FlowRegime.TRANSITIONAL:
        warnings.append(CalcWarning(
            Severity.WARNING, "friction", "warn.transitional_flow",
            {"re": _round_int(params.reynolds)},
        ))


def _check_velocity(params: WarningCheckParams, warnings: List[CalcWarning]):
    v = params.velocity_m_s
    if v > VELOCITY_HIGH:
        warnings.append(CalcWarning(
            Severity.WARNING, "velocity", "warn.high_velocity",
            {"v": _round(v, 2)},
        ))

    if 0 < v < VELOCITY_LOW:
        warnings.append(CalcWarning(
            Severity.INFO, "velocity", "warn.low_velocity",
            {"v": _round(v, 3)},
        ))


def _check_roughness(params: WarningCheckParams, warnings: List[CalcWarning]):
    if params.id_mm <= 0:
        return
    rel_roughness = params.roughness_mm / params.id_mm
    if rel_roughness > REL_ROUGHNESS_HIGH:
        warnings.append(CalcWarning(
            Severity.INFO, "friction", "warn.high_relative_roughness",
            {
                "eps_d": _round(rel_roughness, 5),
                "roughness": params.roughness_mm,
                "id": _round(params.id_mm, 1),
            },
        ))


def _check_3k_range(params: WarningCheckParams, warnings: List[CalcWarning]):
    id_inch = params.id_mm / MM_PER_INCH
    has_3k = any(f.method == KValueMethod.THREE_K for f in params.fitting_details)
    if has_3k and not (THREE_K_MIN_INCH <= id_inch <= THREE_K_MAX_INCH):
        warnings.append(CalcWarning(
            Severity.WARNING, "fittings", "warn.3k_diameter_range",
            {"d_inch": _round(id_inch, 2)},
        ))


def _check_fittings_dominant(params: WarningCheckParams, warnings: List[CalcWarning]):
    if params.length_m <= 0 or params.id_mm <= 0 or not params.fitting_details:
        return

    sum_k = sum(f.k_value * f.quantity for f in params.fitting_details)
    f_ld = params.friction_factor * params.length_m / (params.id_mm / 1000.0)
    if f_ld > 0 and sum_k > 0 and sum_k > f_ld:
        warnings.append(CalcWarning(
            Severity.INFO, "fittings", "warn.fittings_dominant",
            {"sum_k": _round(sum_k, 1), "f_ld": _round(f_ld, 1)},
        ))


def _check_elevation(params: WarningCheckParams, warnings: List[CalcWarning]):
    if abs(params.elevation_m) > ELEVATION_LARGE:
        warnings.append(CalcWarning(
            Severity.INFO, "elevation", "warn.large_elevation",
            {"dz": _round(params.elevation_m, 1)},
        ))


def _round(value: float, decimals: int) -> float:
    """Round half up (toward +inf) for display parameters; non-finite values pass through."""
    if not math.isfinite(value):
        return value
    factor = 10.0 ** decimals
    return math.floor(value * factor + 0.5) / factor


def _round_int(value: float):
    rounded = _round(value, 0)
    return int(rounded) if math.isfinite(rounded) else rounded
