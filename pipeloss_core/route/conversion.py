"""
Route to segment conversion and route preview.

Conversion rules:
- one segment per straight run (node i → node i+1)
- an elbow detected at node i+1 belongs to the run arriving there
- node i's manual fittings belong to the run starting at node i
- the last node's manual fittings belong to the final run
"""

from typing import List, Optional

from ..errors import InputValidationError
from ..models import FittingRequest, FluidState, PipeMaterial, PipeSpec, SegmentInput
from .elbows import detect_elbows
from .geometry import calc_straight_runs
from .models import PipeRoute, RouteAnalysis, RouteConversionConfig


def _detect(route: PipeRoute, config: RouteConversionConfig):
    return detect_elbows(
        route.nodes,
        connection=config.connection,
        use_90_long_radius=config.use_90_long_radius,
        tolerance_deg=config.angle_tolerance,
    )


def convert_route_to_segments(
    route: PipeRoute,
    pipe: PipeSpec,
    material: PipeMaterial,
    fluid: FluidState,
    flow_rate_m3s: float,
    config: Optional[RouteConversionConfig] = None,
) -> List[SegmentInput]:
    """
    Convert a route into series segments with detected elbows attached.

    Raises:
        InputValidationError: fewer than 2 nodes or coincident neighbours
    """
    if len(route.nodes) < 2:
        raise InputValidationError(
            f"At least 2 nodes are required to create segments (got {len(route.nodes)})"
        )
    config = config or RouteConversionConfig()

    runs = calc_straight_runs(route.nodes)
    elbow_by_node = {e.node_index: e for e in _detect(route, config)}

    segments = []
    for i, run in enumerate(runs):
        fittings: List[FittingRequest] = list(route.nodes[i].fittings)

        elbow = elbow_by_node.get(run.to_node_index)
        if elbow is not None:
            fittings.append(FittingRequest(fitting_id=elbow.fitting_id, quantity=1))

        if i == len(runs) - 1:
            fittings.extend(route.nodes[-1].fittings)

        segments.append(SegmentInput(
            pipe=pipe,
            material=material,
            fluid=fluid,
            flow_rate_m3s=flow_rate_m3s,
            length_m=run.length_m,
            elevation_m=run.elevation_m,
            fittings=tuple(fittings),
        ))
    return segments


def analyze_route(route: PipeRoute, config: Optional[RouteConversionConfig] = None) -> RouteAnalysis:
    """
    Preview a route without building segments.

    An empty or single-node route gives an all-zero analysis.
    """
    if len(route.nodes) < 2:
        return RouteAnalysis()
    config = config or RouteConversionConfig()

    runs = calc_straight_runs(route.nodes)
    elbows = _detect(route, config)

    return RouteAnalysis(
        straight_runs=tuple(runs),
        detected_elbows=tuple(elbows),
        total_length_m=sum(r.length_m for r in runs),
        total_elevation_m=sum(r.elevation_m for r in runs),
        elbow_count_90=sum(1 for e in elbows if e.standard_angle == 90),
        elbow_count_45=sum(1 for e in elbows if e.standard_angle == 45),
        elbow_count_180=sum(1 for e in elbows if e.standard_angle == 180),
        warnings=tuple(e.warning for e in elbows if e.warning),
    )
