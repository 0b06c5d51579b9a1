"""
Pipe hydraulics: flow area, velocity, Reynolds number, flow regime and
Darcy-Weisbach straight-pipe and elevation losses.
"""

import math

from ..errors import InputValidationError
from ..models import FlowRegime
from ..units import GRAVITY

# Regime boundaries on Reynolds number
RE_LAMINAR_MAX = 2100.0
RE_TURBULENT_MIN = 4000.0


def calc_flow_area(id_mm: float) -> float:
    """
    Circular flow area A = π(D/2)².

    Args:
        id_mm: Inner diameter (mm)

    Returns:
        Flow area (m²)
    """
    id_m = id_mm / 1000.0
    return math.pi * (id_m / 2.0) ** 2


def calc_velocity(flow_rate_m3s: float, area_m2: float) -> float:
    """Mean velocity V = Q/A (m/s)."""
    if area_m2 <= 0:
        raise InputValidationError(f"Flow area must be positive (got {area_m2})")
    return flow_rate_m3s / area_m2


def calc_reynolds(density: float, velocity: float, id_m: float, viscosity: float) -> float:
    """
    Reynolds number Re = ρVD/μ.

    Args:
        density: Fluid density (kg/m³)
        velocity: Mean velocity (m/s)
        id_m: Inner diameter (m)
        viscosity: Dynamic viscosity (Pa·s)
    """
    if viscosity <= 0:
        raise InputValidationError(f"Viscosity must be positive (got {viscosity})")
    return density * velocity * id_m / viscosity


def classify_flow(re: float) -> FlowRegime:
    """Laminar below 2100, transitional up to 4000, turbulent above."""
    if re < RE_LAMINAR_MAX:
        return FlowRegime.LAMINAR
    if re < RE_TURBULENT_MIN:
        return FlowRegime.TRANSITIONAL
    return FlowRegime.TURBULENT


def calc_straight_pipe_loss(
    friction_factor: float,
    length_m: float,
    id_mm: float,
    density: float,
    velocity: float,
) -> float:
    """
    Darcy-Weisbach straight-pipe loss ΔP = f·(L/D)·(ρV²/2).

    Returns:
        Pressure loss (Pa)
    """
    id_m = id_mm / 1000.0
    return friction_factor * (length_m / id_m) * (density * velocity**2 / 2.0)


def calc_elevation_loss(density: float, elevation_m: float) -> float:
    """Static head ΔP = ρ·g·Δz (Pa), negative for a downhill segment."""
    return density * GRAVITY * elevation_m
