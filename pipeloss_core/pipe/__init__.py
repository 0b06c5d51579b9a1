"""Pipe hydraulics module for PipeLoss core."""

from .hydraulics import (
    calc_flow_area,
    calc_velocity,
    calc_reynolds,
    classify_flow,
    calc_straight_pipe_loss,
    calc_elevation_loss,
)
from .friction import (
    FrictionFactorResult,
    churchill_friction_factor,
    swamee_jain_friction_factor,
    calc_ft_fully_turbulent,
    resolve_ft,
)

__all__ = [
    "calc_flow_area",
    "calc_velocity",
    "calc_reynolds",
    "classify_flow",
    "calc_straight_pipe_loss",
    "calc_elevation_loss",
    "FrictionFactorResult",
    "churchill_friction_factor",
    "swamee_jain_friction_factor",
    "calc_ft_fully_turbulent",
    "resolve_ft",
]
