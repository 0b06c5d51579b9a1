"""
Table interpolation for fluid property data.

Tables must be sorted ascending by abscissa. Queries outside the table
range raise RangeError; tables never extrapolate.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple
import numpy as np
from numpy.typing import ArrayLike

from ..errors import InputValidationError, RangeError


@dataclass(frozen=True)
class ViscosityPoint:
    """One tabulated viscosity value at (temperature, concentration)."""
    temp_c: float
    concentration: float   # wt% or °Brix, depending on the table
    viscosity_mpa_s: float


def linear_interpolate(x_target: float, xs: ArrayLike, ys: ArrayLike) -> float:
    """
    Linear interpolation in a 1-D table.

    An exact hit on a tabulated abscissa returns that row's value unmodified.

    Args:
        x_target: Query point
        xs: Abscissae, sorted ascending
        ys: Ordinates (same length as xs)

    Returns:
        Interpolated value

    Raises:
        RangeError: if x_target lies outside [xs[0], xs[-1]]
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)

    if xs.size < 2:
        raise InputValidationError("Table must have at least 2 points")
    if xs.shape != ys.shape:
        raise InputValidationError("Table columns must have equal length")
    if np.any(np.diff(xs) < 0):
        raise InputValidationError("Table abscissae must be sorted ascending")

    if x_target < xs[0] or x_target > xs[-1]:
        raise RangeError(
            f"Value {x_target} is outside table range [{xs[0]:g}, {xs[-1]:g}]"
        )

    hits = np.flatnonzero(xs == x_target)
    if hits.size:
        return float(ys[hits[0]])

    return float(np.interp(x_target, xs, ys))


def interpolate_2d(
    temp_c: float,
    concentration: float,
    table: Sequence[ViscosityPoint],
    label: str = "Viscosity",
) -> float:
    """
    Two-stage interpolation: temperature first, then concentration.

    For every tabulated concentration whose temperature column covers
    temp_c, the value at temp_c is interpolated. The resulting
    (concentration, value) pairs are then interpolated at concentration.

    Args:
        temp_c: Temperature (°C)
        concentration: Concentration in the table's own unit
        table: Tabulated points in any order
        label: Name used in error messages

    Returns:
        Interpolated value in the table's unit (mPa·s for viscosity tables)

    Raises:
        RangeError: if fewer than two concentration columns cover temp_c,
            or concentration lies outside the covered columns
    """
    columns = sorted({p.concentration for p in table})

    pairs: List[Tuple[float, float]] = []
    for conc in columns:
        column = sorted(
            (p.temp_c, p.viscosity_mpa_s) for p in table if p.concentration == conc
        )
        if len(column) < 2:
            continue
        temps = [c[0] for c in column]
        if temp_c < temps[0] or temp_c > temps[-1]:
            continue
        value = linear_interpolate(temp_c, temps, [c[1] for c in column])
        pairs.append((conc, value))

    if len(pairs) < 2:
        raise RangeError(
            f"{label}: insufficient data for T={temp_c}°C, concentration={concentration}"
        )

    if concentration < pairs[0][0] or concentration > pairs[-1][0]:
        raise RangeError(
            f"{label}: concentration {concentration} is outside table range "
            f"[{pairs[0][0]:g}, {pairs[-1][0]:g}] at T={temp_c}°C"
        )

    return linear_interpolate(
        concentration,
        [p[0] for p in pairs],
        [p[1] for p in pairs],
    )
