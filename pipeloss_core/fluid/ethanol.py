"""
Ethanol–water mixture properties.

Density: Redlich-Kister excess-volume model (Danahy et al. 2018)

    V^E = x1·x2 · Σ_i A_i(T)·(x1 − x2)^i,   A_i(T) = a_i0 + a_i1·(T − 298.15)

Viscosity: 2-D table interpolation (temperature, then wt%).
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..errors import InputValidationError
from ..models import Reference
from .interpolate import ViscosityPoint, interpolate_2d
from .water import kell_water_density

M_WATER = 18.015    # g/mol
M_ETHANOL = 46.069  # g/mol


@dataclass(frozen=True)
class RedlichKisterCoeffs:
    """A_i(T) = a_i0[i] + a_i1[i]·(T − 298.15), cm³/mol."""
    a_i0: Tuple[float, ...]
    a_i1: Tuple[float, ...]

    def __post_init__(self):
        object.__setattr__(self, "a_i0", tuple(self.a_i0))
        object.__setattr__(self, "a_i1", tuple(self.a_i1))
        if len(self.a_i0) != len(self.a_i1):
            raise InputValidationError("Redlich-Kister a_i0 and a_i1 must have equal length")


@dataclass(frozen=True)
class EthanolWaterModel:
    """Ethanol–water data: excess-volume coefficients plus viscosity table (wt%)."""
    redlich_kister: RedlichKisterCoeffs
    viscosity_table: Tuple[ViscosityPoint, ...]
    reference: Reference

    def __post_init__(self):
        object.__setattr__(self, "viscosity_table", tuple(self.viscosity_table))


def pure_ethanol_density(t: float) -> float:
    """Pure ethanol density (kg/m³), CRC Handbook fit for 10–60°C."""
    return 806.59 - 0.8403 * t - 1.655e-3 * t**2


def wt_to_mole_fraction(w_ethanol: float) -> Tuple[float, float]:
    """Return (x_water, x_ethanol) for an ethanol mass fraction."""
    if w_ethanol <= 0:
        return 1.0, 0.0
    if w_ethanol >= 1:
        return 0.0, 1.0
    n_ethanol = w_ethanol / M_ETHANOL
    n_water = (1.0 - w_ethanol) / M_WATER
    total = n_ethanol + n_water
    return n_water / total, n_ethanol / total


def ethanol_water_density(t: float, w_ethanol: float, coeffs: RedlichKisterCoeffs) -> float:
    """
    Mixture density from pure molar volumes plus excess volume.

    Args:
        t: Temperature (°C)
        w_ethanol: Ethanol mass fraction (0–1)
        coeffs: Redlich-Kister coefficients

    Returns:
        Density (kg/m³)
    """
    rho_w = kell_water_density(t)
    rho_e = pure_ethanol_density(t)

    if w_ethanol <= 0:
        return rho_w
    if w_ethanol >= 1:
        return rho_e

    x1, x2 = wt_to_mole_fraction(w_ethanol)
    d_t = (t + 273.15) - 298.15

    # Pure molar volumes (cm³/mol)
    v1 = M_WATER / (rho_w * 1e-3)
    v2 = M_ETHANOL / (rho_e * 1e-3)

    diff = x1 - x2
    v_excess = x1 * x2 * sum(
        (a0 + a1 * d_t) * diff**i
        for i, (a0, a1) in enumerate(zip(coeffs.a_i0, coeffs.a_i1))
    )

    v_mix = x1 * v1 + x2 * v2 + v_excess
    m_mix = x1 * M_WATER + x2 * M_ETHANOL
    return m_mix / v_mix * 1000.0


def ethanol_water_viscosity(t: float, w_ethanol: float, table: Sequence[ViscosityPoint]) -> float:
    """
    Viscosity from the (temperature, wt%) table.

    Raises:
        RangeError: outside the tabulated domain

    Returns:
        Viscosity (Pa·s)
    """
    return interpolate_2d(t, w_ethanol * 100.0, table, label="Ethanol-water viscosity") * 1e-3
