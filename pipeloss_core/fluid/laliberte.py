"""
Laliberté universal electrolyte model.

One mathematical framework for the density and viscosity of aqueous
electrolyte solutions. Each solute carries 5 density coefficients
(c0–c4) and 6 viscosity coefficients (v1–v6):

- Apparent solute density:
    ρ_app,i = (c0·(1−w_w) + c1)·exp(1e-6·(t+c4)²) / ((1−w_w) + c2 + c3·t)
- Mixture density (volume additive):
    ρ = 1 / (w_w/ρ_w + Σ w_i/ρ_app,i)
- Apparent solute viscosity:
    η_i = exp((v1·(1−w_w)^v2 + v3) / (v4·t + 1)) / (v5·(1−w_w)^v6 + 1)
- Mixture viscosity (log mixing):
    η = η_w^w_w · Π η_i^w_i

Sources:
- Density: Laliberté & Cooper (2004) J. Chem. Eng. Data 49:1141
- Viscosity: Laliberté (2007) J. Chem. Eng. Data 52:321
- Coefficient update: Laliberté (2009) J. Chem. Eng. Data 54:1725
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import numpy as np
from numpy.typing import NDArray

from ..errors import InputValidationError
from ..models import Reference
from .water import kell_water_density, laliberte_water_viscosity


@dataclass(frozen=True)
class LaliberteDensityCoeffs:
    c0: float
    c1: float
    c2: float
    c3: float
    c4: float

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.c0, self.c1, self.c2, self.c3, self.c4], dtype=np.float64)


@dataclass(frozen=True)
class LaliberteViscosityCoeffs:
    v1: float
    v2: float
    v3: float
    v4: float
    v5: float
    v6: float

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.v1, self.v2, self.v3, self.v4, self.v5, self.v6], dtype=np.float64)


@dataclass(frozen=True)
class ElectrolyteSolute:
    """Coefficient set for one dissolved electrolyte."""
    formula: str
    density: LaliberteDensityCoeffs
    viscosity: LaliberteViscosityCoeffs
    name: str = ""
    molar_mass: Optional[float] = None  # g/mol


@dataclass(frozen=True)
class ElectrolyteModel:
    """Laliberté model for a solution of one or more electrolytes."""
    solutes: Tuple[ElectrolyteSolute, ...]
    reference: Reference

    def __post_init__(self):
        object.__setattr__(self, "solutes", tuple(self.solutes))
        if not self.solutes:
            raise InputValidationError("Electrolyte model needs at least one solute")


def _fractions(mass_fractions: Sequence[float], n_coeffs: int) -> Tuple[NDArray[np.float64], float]:
    w = np.asarray(mass_fractions, dtype=np.float64)
    if w.shape != (n_coeffs,):
        raise InputValidationError(
            f"Expected {n_coeffs} solute mass fractions, got {w.size}"
        )
    if np.any(w < 0) or w.sum() > 1.0:
        raise InputValidationError(f"Invalid solute mass fractions: {w.tolist()}")
    return w, 1.0 - float(w.sum())


def laliberte_density(
    t: float,
    mass_fractions: Sequence[float],
    coeffs: Sequence[LaliberteDensityCoeffs],
) -> float:
    """
    Density of an electrolyte solution.

    Args:
        t: Temperature (°C)
        mass_fractions: Mass fraction of each solute (0–1)
        coeffs: Density coefficients, one set per solute

    Returns:
        Density (kg/m³)
    """
    w, ww = _fractions(mass_fractions, len(coeffs))
    ws = 1.0 - ww
    c = np.array([cf.as_array() for cf in coeffs], dtype=np.float64).reshape(-1, 5)

    rho_app = (
        (c[:, 0] * ws + c[:, 1]) * np.exp(1e-6 * (t + c[:, 4]) ** 2)
        / (ws + c[:, 2] + c[:, 3] * t)
    )
    return float(1.0 / (ww / kell_water_density(t) + np.sum(w / rho_app)))


def laliberte_viscosity(
    t: float,
    mass_fractions: Sequence[float],
    coeffs: Sequence[LaliberteViscosityCoeffs],
) -> float:
    """
    Dynamic viscosity of an electrolyte solution.

    Args:
        t: Temperature (°C)
        mass_fractions: Mass fraction of each solute (0–1)
        coeffs: Viscosity coefficients, one set per solute

    Returns:
        Viscosity (Pa·s)
    """
    w, ww = _fractions(mass_fractions, len(coeffs))
    ws = 1.0 - ww
    v = np.array([cf.as_array() for cf in coeffs], dtype=np.float64).reshape(-1, 6)

    eta_i = (
        np.exp((v[:, 0] * ws ** v[:, 1] + v[:, 2]) / (v[:, 3] * t + 1.0))
        / (v[:, 4] * ws ** v[:, 5] + 1.0)
    )
    eta_mpa_s = laliberte_water_viscosity(t) ** ww * np.prod(eta_i ** w)
    return float(eta_mpa_s) * 1e-3


def electrolyte_density(t: float, mass_fractions: Sequence[float], model: ElectrolyteModel) -> float:
    """Density (kg/m³) for the solutes of an ElectrolyteModel."""
    return laliberte_density(t, mass_fractions, [s.density for s in model.solutes])


def electrolyte_viscosity(t: float, mass_fractions: Sequence[float], model: ElectrolyteModel) -> float:
    """Viscosity (Pa·s) for the solutes of an ElectrolyteModel."""
    return laliberte_viscosity(t, mass_fractions, [s.viscosity for s in model.solutes])
