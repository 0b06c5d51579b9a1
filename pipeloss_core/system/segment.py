"""
Single-segment pressure drop.

Pipeline:
1. Flow area and velocity V = Q/A
2. Reynolds number and flow regime
3. Darcy friction factor (Churchill)
4. Fully turbulent f_T for fitting K values
5. Straight-pipe loss ΔP = f·(L/D)·ρV²/2
6. Fitting losses ΔP = ΣK·ρV²/2
7. Elevation ΔP = ρgΔz
8. Totals and heads
"""

import logging

from ..errors import InputValidationError
from ..fittings.catalog import FittingCatalog
from ..fittings.resolver import FittingContext, resolve_fittings
from ..models import SegmentInput, SegmentResult
from ..pipe.friction import churchill_friction_factor, resolve_ft
from ..pipe.hydraulics import (
    calc_elevation_loss,
    calc_flow_area,
    calc_reynolds,
    calc_straight_pipe_loss,
    calc_velocity,
    classify_flow,
)
from ..units import pressure_to_head
from ..validation.diagnostics import WarningCheckParams, generate_segment_warnings

logger = logging.getLogger(__name__)


def calc_segment_pressure_drop(segment: SegmentInput, catalog: FittingCatalog) -> SegmentResult:
    """
    Compute the pressure drop breakdown of one segment.

    Args:
        segment: Pipe, material, fluid, flow and geometry of the segment
        catalog: Fitting catalog used to resolve the segment's fittings

    Returns:
        SegmentResult with component losses, heads, references and warnings

    Raises:
        InputValidationError: zero flow, zero bore or non-positive viscosity
        FittingNotFoundError: a requested fitting is not in the catalog
    """
    pipe, material, fluid = segment.pipe, segment.material, segment.fluid

    if segment.flow_rate_m3s <= 0:
        raise InputValidationError(
            f"Flow rate must be positive to compute a segment (got {segment.flow_rate_m3s})"
        )

    area = calc_flow_area(pipe.id_mm)
    velocity = calc_velocity(segment.flow_rate_m3s, area)
    reynolds = calc_reynolds(fluid.density, velocity, pipe.id_m, fluid.viscosity)
    regime = classify_flow(reynolds)

    friction = churchill_friction_factor(reynolds, material.roughness_mm, pipe.id_mm)
    ft = resolve_ft(pipe, material, catalog.ft_values)

    dp_friction = calc_straight_pipe_loss(
        friction.f, segment.length_m, pipe.id_mm, fluid.density, velocity
    )

    ctx = FittingContext(
        catalog=catalog,
        ft=ft.f,
        id_mm=pipe.id_mm,
        density=fluid.density,
        velocity=velocity,
        reynolds=reynolds,
    )
    fitting_details = resolve_fittings(segment.fittings, ctx)
    dp_fittings = sum(fd.dp_pa for fd in fitting_details)

    dp_elevation = calc_elevation_loss(fluid.density, segment.elevation_m)
    dp_total = dp_friction + dp_fittings + dp_elevation

    references = (
        friction.reference,
        fluid.reference,
        material.reference,
        *(fd.reference for fd in fitting_details),
    )

    warnings = generate_segment_warnings(WarningCheckParams(
        reynolds=reynolds,
        flow_regime=regime,
        velocity_m_s=velocity,
        roughness_mm=material.roughness_mm,
        id_mm=pipe.id_mm,
        fitting_details=fitting_details,
        elevation_m=segment.elevation_m,
        friction_factor=friction.f,
        length_m=segment.length_m,
    ))

    logger.debug(
        "Segment %s: V=%.4f m/s, Re=%.0f (%s), f=%.5f, f_T=%.5f (%s), ΔP=%.1f Pa",
        pipe.nps, velocity, reynolds, regime.value, friction.f, ft.f, ft.method, dp_total,
    )

    return SegmentResult(
        velocity_m_s=velocity,
        reynolds=reynolds,
        flow_regime=regime,
        friction_factor=friction.f,
        friction_factor_method=friction.method,
        dp_friction=dp_friction,
        dp_fittings=dp_fittings,
        dp_elevation=dp_elevation,
        dp_total=dp_total,
        head_friction_m=pressure_to_head(dp_friction, fluid.density),
        head_fittings_m=pressure_to_head(dp_fittings, fluid.density),
        head_elevation_m=segment.elevation_m,
        head_total_m=pressure_to_head(dp_total, fluid.density),
        fitting_details=tuple(fitting_details),
        references=references,
        warnings=tuple(warnings),
    )
