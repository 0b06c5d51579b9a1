"""
Route geometry: distances, directions and straight runs.
"""

from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray

from ..errors import InputValidationError
from .models import Point3D, RouteNode, StraightRun


def calc_distance(a: Point3D, b: Point3D) -> float:
    """3-D Euclidean distance (m)."""
    return float(np.linalg.norm(b.to_array() - a.to_array()))


def calc_direction(a: Point3D, b: Point3D) -> NDArray[np.float64]:
    """
    Unit vector from a to b.

    Raises:
        InputValidationError: if the points coincide
    """
    delta = b.to_array() - a.to_array()
    norm = np.linalg.norm(delta)
    if norm == 0:
        raise InputValidationError(
            f"Cannot compute a direction between identical points {a.to_dict()}"
        )
    return delta / norm


def calc_elevation(a: Point3D, b: Point3D) -> float:
    """Signed Z change from a to b (m), positive upward."""
    return b.z - a.z


def calc_straight_runs(nodes: Sequence[RouteNode]) -> List[StraightRun]:
    """
    Straight runs between consecutive nodes.

    Args:
        nodes: Ordered route nodes

    Returns:
        N-1 runs for N nodes

    Raises:
        InputValidationError: fewer than 2 nodes or coincident neighbours
    """
    if len(nodes) < 2:
        raise InputValidationError(
            f"At least 2 nodes are required for a straight run (got {len(nodes)})"
        )

    runs = []
    for i in range(len(nodes) - 1):
        a, b = nodes[i].position, nodes[i + 1].position
        runs.append(StraightRun(
            from_node_index=i,
            to_node_index=i + 1,
            length_m=calc_distance(a, b),
            elevation_m=calc_elevation(a, b),
            direction=calc_direction(a, b),
        ))
    return runs
