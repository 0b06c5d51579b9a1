"""
Elbow detection.

The bend at an interior node B of A → B → C is the angle between the AB
and BC directions: 0° is straight, 90° a right angle, 180° a reversal.
Bends are snapped to the nearest standard elbow and mapped to a catalog
fitting id.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .geometry import calc_direction
from .models import (
    DEFAULT_ANGLE_TOLERANCE,
    STANDARD_ANGLES,
    DetectedElbow,
    ElbowConnection,
    Point3D,
    RouteNode,
)

logger = logging.getLogger(__name__)


def calc_bend_angle(a: Point3D, b: Point3D, c: Point3D) -> float:
    """Bend angle at b in degrees."""
    d_in = calc_direction(a, b)
    d_out = calc_direction(b, c)
    # clip absorbs rounding that would push the dot product past ±1
    cos_angle = np.clip(np.dot(d_in, d_out), -1.0, 1.0)
    return float(np.degrees(np.arccos(cos_angle)))


def classify_angle(
    angle_deg: float,
    tolerance_deg: float = DEFAULT_ANGLE_TOLERANCE,
) -> Tuple[int, Optional[str]]:
    """
    Snap a bend angle to the nearest standard elbow angle.

    Args:
        angle_deg: Bend angle (degrees)
        tolerance_deg: Deviation allowed without a warning

    Returns:
        (standard_angle, warning); a straight (0°) match never warns
    """
    deviations = [abs(angle_deg - s) for s in STANDARD_ANGLES]
    best = int(np.argmin(deviations))
    standard, deviation = STANDARD_ANGLES[best], deviations[best]

    if standard != 0 and deviation > tolerance_deg:
        return standard, (
            f"Bend angle {angle_deg:.1f}° deviates from standard "
            f"{standard}° by {deviation:.1f}°"
        )
    return standard, None


def resolve_elbow_fitting_id(
    standard_angle: int,
    connection: ElbowConnection,
    use_90_long_radius: bool,
) -> str:
    """Catalog fitting id for a standard elbow; empty for 0°."""
    if standard_angle == 180:
        return "return_bend_180"
    if standard_angle == 90:
        if connection == ElbowConnection.THREADED:
            return "elbow_90_std_threaded"
        return "elbow_90_lr_welded" if use_90_long_radius else "elbow_90_std_welded"
    if standard_angle == 45:
        if connection == ElbowConnection.THREADED:
            return "elbow_45_std_threaded"
        return "elbow_45_std_welded"
    return ""


def detect_elbows(
    nodes: Sequence[RouteNode],
    connection: ElbowConnection = ElbowConnection.WELDED,
    use_90_long_radius: bool = True,
    tolerance_deg: float = DEFAULT_ANGLE_TOLERANCE,
) -> List[DetectedElbow]:
    """
    Scan interior nodes (1..N-2) for elbows, skipping straight passes.

    Returns:
        Detected elbows in node order; empty for fewer than 3 nodes
    """
    elbows = []
    for i in range(1, len(nodes) - 1):
        angle = calc_bend_angle(nodes[i - 1].position, nodes[i].position, nodes[i + 1].position)
        standard, warning = classify_angle(angle, tolerance_deg)
        if standard == 0:
            continue

        fitting_id = resolve_elbow_fitting_id(standard, connection, use_90_long_radius)
        if warning:
            logger.warning("Node %s: %s", nodes[i].id, warning)
        logger.debug("Elbow at node %d: %.2f° -> %s", i, angle, fitting_id)

        elbows.append(DetectedElbow(
            node_index=i,
            angle_deg=angle,
            standard_angle=standard,
            fitting_id=fitting_id,
            warning=warning,
        ))
    return elbows
