"""Route geometry module for PipeLoss core."""

from .models import (
    STANDARD_ANGLES,
    ElbowConnection,
    Point3D,
    RouteNode,
    PipeRoute,
    StraightRun,
    DetectedElbow,
    RouteConversionConfig,
    RouteAnalysis,
)
from .geometry import calc_distance, calc_direction, calc_elevation, calc_straight_runs
from .elbows import calc_bend_angle, classify_angle, resolve_elbow_fitting_id, detect_elbows
from .conversion import convert_route_to_segments, analyze_route

__all__ = [
    "STANDARD_ANGLES",
    "ElbowConnection",
    "Point3D",
    "RouteNode",
    "PipeRoute",
    "StraightRun",
    "DetectedElbow",
    "RouteConversionConfig",
    "RouteAnalysis",
    "calc_distance",
    "calc_direction",
    "calc_elevation",
    "calc_straight_runs",
    "calc_bend_angle",
    "classify_angle",
    "resolve_elbow_fitting_id",
    "detect_elbows",
    "convert_route_to_segments",
    "analyze_route",
]
