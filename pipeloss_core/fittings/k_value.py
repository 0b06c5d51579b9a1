"""
Fitting loss coefficient (K) formulas.

- Crane L/D:   K = f_T × (L/D)
- Darby 3-K:   K = K1/Re + Ki × (1 + Kd/D^0.3),  D in inches
- From Cv:     K = 894 × d⁴ / Cv²,  d in inches
- Fixed K:     entrances and exits (size independent)
"""

from typing import Iterable, Optional, Tuple

from ..errors import InputValidationError
from ..models import Reference
from ..units import GRAVITY, MM_PER_INCH

CRANE_REF = Reference(
    source="Crane TP-410",
    page="A-26 to A-29",
    equation="K = f_T × (L/D)",
)

DARBY_3K_REF = Reference(
    source="Darby, 2001",
    equation="K = K₁/Re + K_i×(1 + K_d/D^0.3)",
)

CV_REF = Reference(
    source="Crane TP-410",
    equation="K = 894 × d⁴ / Cv²",
)

FIXED_K_REF = Reference(source="Crane TP-410", page="A-29")

# Plausible K range for a valve specified by Cv
CV_K_MIN = 0.01
CV_K_MAX = 1000.0


def calc_k_crane(ld_ratio: float, ft: float) -> float:
    """Crane L/D method."""
    return ft * ld_ratio


def calc_k_3k(re: float, id_inch: float, k1: float, ki: float, kd: float) -> float:
    """
    Darby 3-K method.

    Args:
        re: Reynolds number
        id_inch: Inner diameter (inches)
        k1, ki, kd: Fitting coefficients
    """
    return k1 / re + ki * (1.0 + kd / id_inch**0.3)


def calc_k_from_cv(cv: float, id_mm: float) -> float:
    """
    Convert a flow coefficient Cv (US gpm at 1 psi, SG=1) to K.

    Args:
        cv: Flow coefficient (> 0)
        id_mm: Pipe inner diameter (mm)
    """
    if cv <= 0:
        raise InputValidationError(f"Cv must be positive (got {cv})")
    id_inch = id_mm / MM_PER_INCH
    return 894.0 * id_inch**4 / cv**2


def check_cv_k_bounds(k: float, cv: float, id_mm: float) -> Optional[str]:
    """Message when a Cv-derived K is implausible for the pipe size, else None."""
    if k < CV_K_MIN:
        return (
            f"Cv={cv:g} gives K={k:.4f} on a {id_mm:.1f} mm bore; "
            f"the valve looks oversized for this pipe"
        )
    if k > CV_K_MAX:
        return (
            f"Cv={cv:g} gives K={k:.0f} on a {id_mm:.1f} mm bore; "
            f"the valve looks undersized for this pipe"
        )
    return None


def calc_fitting_loss(k: float, density: float, velocity: float) -> Tuple[float, float]:
    """
    Pressure and head loss for a single fitting.

    Returns:
        (ΔP in Pa, head in m) with ΔP = K·ρV²/2 and h = K·V²/(2g)
    """
    dynamic_pressure = density * velocity**2 / 2.0
    return k * dynamic_pressure, k * velocity**2 / (2.0 * GRAVITY)


def calc_total_fitting_loss(
    fittings: Iterable[Tuple[float, int]],
    density: float,
    velocity: float,
) -> Tuple[float, float, float]:
    """
    Combined loss for (K, quantity) pairs.

    Returns:
        (ΣK, ΔP in Pa, head in m)
    """
    total_k = sum(k * qty for k, qty in fittings)
    dp, head = calc_fitting_loss(total_k, density, velocity)
    return total_k, dp, head
