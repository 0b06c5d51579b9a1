"""
Darcy friction factor correlations.

- Churchill (1977): one explicit formula across laminar, transitional and
  turbulent flow. Used for straight-pipe loss.
- Von Kármán: fully turbulent f_T, Reynolds independent. Used only for
  fitting K values (Crane TP-410).
- Swamee-Jain (1976): explicit turbulent-only approximation, kept as a
  reference method.

None of these iterate.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import math

from ..errors import InputValidationError
from ..models import PipeMaterial, PipeSpec, Reference

CHURCHILL_REF = Reference(
    source="Churchill, S.W., 1977",
    equation="f = 8×[(8/Re)¹² + (A+B)^(-3/2)]^(1/12)",
)

SWAMEE_JAIN_REF = Reference(
    source="Swamee & Jain, 1976",
    equation="f = 0.25/[log₁₀(ε/(3.7D) + 5.74/Re⁰·⁹)]²",
)

VON_KARMAN_REF = Reference(
    source="Crane TP-410, Von Kármán equation",
    equation="f_T = 1/[2×log₁₀(3.7D/ε)]²",
)

FT_TABLE_REF = Reference(source="Crane TP-410", page="A-26", equation="f_T by nominal size")


@dataclass(frozen=True)
class FrictionFactorResult:
    """Darcy friction factor with the method that produced it."""
    f: float
    method: str
    reference: Reference


def churchill_friction_factor(re: float, roughness_mm: float, id_mm: float) -> FrictionFactorResult:
    """
    Churchill (1977) Darcy friction factor.

        f = 8·[(8/Re)¹² + (A + B)^(−3/2)]^(1/12)
        A = [2.457·ln(1/((7/Re)^0.9 + 0.27·ε/D))]¹⁶
        B = (37530/Re)¹⁶

    Args:
        re: Reynolds number (> 0)
        roughness_mm: Absolute roughness ε (mm)
        id_mm: Inner diameter D (mm)
    """
    if re <= 0:
        raise InputValidationError(f"Reynolds number must be positive (got {re})")

    rel_roughness = roughness_mm / id_mm

    term1 = (8.0 / re) ** 12
    inner_a = (7.0 / re) ** 0.9 + 0.27 * rel_roughness
    a = (2.457 * math.log(1.0 / inner_a)) ** 16
    b = (37530.0 / re) ** 16

    f = 8.0 * (term1 + (a + b) ** -1.5) ** (1.0 / 12.0)
    return FrictionFactorResult(f=f, method="churchill", reference=CHURCHILL_REF)


def swamee_jain_friction_factor(re: float, roughness_mm: float, id_mm: float) -> FrictionFactorResult:
    """
    Swamee-Jain (1976) turbulent approximation of Colebrook-White.

    Valid for 5000 ≤ Re ≤ 1e8 and 1e-6 ≤ ε/D ≤ 1e-2 (±1%).
    """
    if re <= 0:
        raise InputValidationError(f"Reynolds number must be positive (got {re})")

    rel_roughness = roughness_mm / id_mm
    log_term = math.log10(rel_roughness / 3.7 + 5.74 / re**0.9)
    f = 0.25 / log_term**2
    return FrictionFactorResult(f=f, method="swamee-jain", reference=SWAMEE_JAIN_REF)


def calc_ft_fully_turbulent(roughness_mm: float, id_mm: float) -> FrictionFactorResult:
    """
    Von Kármán fully turbulent friction factor f_T = 1/[2·log₁₀(3.7D/ε)]².
    """
    if roughness_mm <= 0:
        raise InputValidationError(f"Roughness must be positive (got {roughness_mm})")
    if id_mm <= 0:
        raise InputValidationError(f"Diameter must be positive (got {id_mm})")

    log_term = math.log10(3.7 * id_mm / roughness_mm)
    f = 1.0 / (2.0 * log_term) ** 2
    return FrictionFactorResult(f=f, method="von-karman", reference=VON_KARMAN_REF)


def resolve_ft(
    pipe: PipeSpec,
    material: PipeMaterial,
    ft_values: Optional[Mapping[str, float]] = None,
) -> FrictionFactorResult:
    """
    Fully turbulent f_T for fitting K values.

    A tabulated value for the pipe's nominal size wins; otherwise the
    Von Kármán equation is used.
    """
    if ft_values and pipe.nps in ft_values:
        return FrictionFactorResult(f=ft_values[pipe.nps], method="ft-table", reference=FT_TABLE_REF)
    return calc_ft_fully_turbulent(material.roughness_mm, pipe.id_mm)
