"""
Sucrose (sugar) solution properties.

Density: ICUMSA / NBS Circular 440 polynomial in °Brix at 20°C, with a
linear temperature correction approximated from the NBS 440 supplement:

    ρ(T, B) = ρ20(B) − (0.33 + 0.003·B)·(T − 20)

Viscosity: 2-D table interpolation (temperature, then Brix).

Typical table coverage: 0–75 °Brix, 20–80°C.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import numpy as np

from ..models import Reference
from .interpolate import ViscosityPoint, interpolate_2d


@dataclass(frozen=True)
class SucroseModel:
    """
    Sucrose solution data.

    Attributes:
        density_20c_coefficients: Polynomial in Brix, lowest power first
        viscosity_table: Points with concentration in °Brix
        reference: Data source
    """
    density_20c_coefficients: Tuple[float, ...]
    viscosity_table: Tuple[ViscosityPoint, ...]
    reference: Reference

    def __post_init__(self):
        object.__setattr__(self, "density_20c_coefficients", tuple(self.density_20c_coefficients))
        object.__setattr__(self, "viscosity_table", tuple(self.viscosity_table))


def sucrose_density_20c(brix: float, coeffs: Sequence[float]) -> float:
    """ρ20(B) = a0 + a1·B + ... (kg/m³)."""
    return float(np.polynomial.polynomial.polyval(brix, coeffs))


def sucrose_density(t: float, brix: float, coeffs: Sequence[float]) -> float:
    """Temperature-corrected density (kg/m³)."""
    alpha = 0.33 + 0.003 * brix
    return sucrose_density_20c(brix, coeffs) - alpha * (t - 20.0)


def sucrose_viscosity(t: float, brix: float, table: Sequence[ViscosityPoint]) -> float:
    """
    Viscosity from the (temperature, Brix) table.

    Raises:
        RangeError: outside the tabulated domain

    Returns:
        Viscosity (Pa·s)
    """
    return interpolate_2d(t, brix, table, label="Sucrose viscosity") * 1e-3
