"""
Methanol–water mixture properties.

Pure methanol density and viscosity come from Asada (2012) piecewise
quartic polynomials; the mixture uses ideal mixing rules:

- density: linear in volume fraction, ρ = φ_m·ρ_m + φ_w·ρ_w
- viscosity: log mixing, ln μ = φ_w·ln μ_w + φ_m·ln μ_m

The log rule underestimates the viscosity maximum near 40 wt%. Reference
values are pinned to this approximation.

Source: Asada, "Material Characterization of Alcohol-Water Mixtures",
University of Hawaii thesis, 2012.
"""

from dataclasses import dataclass
from typing import Tuple
import math
import numpy as np

from ..errors import InputValidationError
from ..models import Reference
from .water import kell_water_density, laliberte_water_viscosity


@dataclass(frozen=True)
class PiecewisePolynomial:
    """
    Quartic polynomial split at a breakpoint temperature.

    Coefficients are ordered highest power first: a1·t⁴ + a2·t³ + a3·t² + a4·t + a5.
    """
    breakpoint_c: float
    low: Tuple[float, ...]   # t < breakpoint
    high: Tuple[float, ...]  # t >= breakpoint

    def __post_init__(self):
        object.__setattr__(self, "low", tuple(self.low))
        object.__setattr__(self, "high", tuple(self.high))
        if len(self.low) != 5 or len(self.high) != 5:
            raise InputValidationError("Piecewise quartic needs 5 coefficients per branch")

    def __call__(self, t: float) -> float:
        coeffs = self.low if t < self.breakpoint_c else self.high
        return float(np.polyval(coeffs, t))


@dataclass(frozen=True)
class AlcoholPiecewiseModel:
    """Pure-alcohol property polynomials for alcohol–water mixing."""
    density: PiecewisePolynomial    # kg/m³
    viscosity: PiecewisePolynomial  # Pa·s
    reference: Reference
    alcohol: str = "methanol"


def mass_to_volume_fraction(w_alcohol: float, rho_alcohol: float, rho_water: float) -> float:
    """φ_a = (w_a/ρ_a) / (w_a/ρ_a + w_w/ρ_w), clamped to [0, 1]."""
    if w_alcohol <= 0:
        return 0.0
    if w_alcohol >= 1:
        return 1.0
    v_alcohol = w_alcohol / rho_alcohol
    v_water = (1.0 - w_alcohol) / rho_water
    return v_alcohol / (v_alcohol + v_water)


def alcohol_water_density(t: float, w_alcohol: float, model: AlcoholPiecewiseModel) -> float:
    """
    Mixture density by volume-fraction linear mixing.

    Args:
        t: Temperature (°C)
        w_alcohol: Alcohol mass fraction (0–1)
        model: Pure-alcohol polynomials

    Returns:
        Density (kg/m³)
    """
    rho_w = kell_water_density(t)
    rho_a = model.density(t)
    phi = mass_to_volume_fraction(w_alcohol, rho_a, rho_w)
    return phi * rho_a + (1.0 - phi) * rho_w


def alcohol_water_viscosity(t: float, w_alcohol: float, model: AlcoholPiecewiseModel) -> float:
    """
    Mixture viscosity by log mixing on volume fraction.

    Args:
        t: Temperature (°C)
        w_alcohol: Alcohol mass fraction (0–1)
        model: Pure-alcohol polynomials

    Returns:
        Viscosity (Pa·s)
    """
    rho_w = kell_water_density(t)
    rho_a = model.density(t)
    phi = mass_to_volume_fraction(w_alcohol, rho_a, rho_w)

    mu_w = laliberte_water_viscosity(t) * 1e-3
    mu_a = model.viscosity(t)
    return math.exp((1.0 - phi) * math.log(mu_w) + phi * math.log(mu_a))
