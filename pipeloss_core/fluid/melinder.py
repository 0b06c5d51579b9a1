"""
Melinder (2010) glycol–water polynomial.

Ethylene glycol–water and propylene glycol–water density and viscosity
from a double-variable polynomial:

    P(T, x) = Σ_k a_k · (100·(x − x_ref))^i(k) · (T − T_ref)^j(k)

Terms are grouped by the concentration exponent i; group i holds
n_terms[i] temperature exponents j = 0..n_terms[i]−1. The usual grouping
[4, 4, 4, 3, 2, 1] gives 18 terms.

Density is the polynomial value (kg/m³). The viscosity polynomial gives
ln(μ / mPa·s).

Source: Melinder (2010), "Properties of Secondary Working Fluids".
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import numpy as np

from ..errors import InputValidationError
from ..models import Reference


@dataclass(frozen=True)
class GlycolPolynomialModel:
    """
    Melinder coefficient set for one glycol.

    Attributes:
        fluid: Glycol identifier, e.g. "ethylene_glycol"
        x_ref: Reference mass fraction
        t_ref_k: Reference temperature (K)
        n_terms: Number of temperature terms per concentration group
        density_coefficients: Density polynomial coefficients
        viscosity_coefficients: ln(μ/mPa·s) polynomial coefficients
        reference: Data source
    """
    fluid: str
    x_ref: float
    t_ref_k: float
    n_terms: Tuple[int, ...]
    density_coefficients: Tuple[float, ...]
    viscosity_coefficients: Tuple[float, ...]
    reference: Reference

    def __post_init__(self):
        for name in ("n_terms", "density_coefficients", "viscosity_coefficients"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        expected = sum(self.n_terms)
        if len(self.density_coefficients) != expected or len(self.viscosity_coefficients) != expected:
            raise InputValidationError(
                f"Melinder {self.fluid}: n_terms {list(self.n_terms)} needs {expected} coefficients "
                f"(got {len(self.density_coefficients)} density, "
                f"{len(self.viscosity_coefficients)} viscosity)"
            )


def melinder_poly(
    x: float,
    t_k: float,
    x_ref: float,
    t_ref_k: float,
    n_terms: Sequence[int],
    coeffs: Sequence[float],
) -> float:
    """
    Evaluate the Melinder double-variable polynomial.

    Args:
        x: Glycol mass fraction (0–1)
        t_k: Temperature (K)
        x_ref: Reference mass fraction
        t_ref_k: Reference temperature (K)
        n_terms: Temperature terms per concentration group
        coeffs: Coefficients, sum(n_terms) of them

    Returns:
        Polynomial value
    """
    dx = 100.0 * (x - x_ref)
    dy = t_k - t_ref_k

    i_exp = np.repeat(np.arange(len(n_terms)), n_terms)
    j_exp = np.concatenate([np.arange(n) for n in n_terms])
    return float(np.sum(np.asarray(coeffs, dtype=np.float64) * dx**i_exp * dy**j_exp))


def melinder_density(x: float, t_c: float, model: GlycolPolynomialModel) -> float:
    """Glycol–water density (kg/m³)."""
    return melinder_poly(
        x, t_c + 273.15, model.x_ref, model.t_ref_k, model.n_terms, model.density_coefficients
    )


def melinder_viscosity(x: float, t_c: float, model: GlycolPolynomialModel) -> float:
    """Glycol–water viscosity (Pa·s)."""
    ln_mu = melinder_poly(
        x, t_c + 273.15, model.x_ref, model.t_ref_k, model.n_terms, model.viscosity_coefficients
    )
    return float(np.exp(ln_mu)) * 1e-3
