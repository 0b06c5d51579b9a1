"""
Route data model.

A route is an ordered list of 3-D nodes (meters). Consecutive nodes define
straight runs; direction changes at interior nodes become elbows.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from ..models import FittingRequest

# Standard elbow angles (degrees); 0 means a straight pass-through
STANDARD_ANGLES: Tuple[int, ...] = (0, 45, 90, 180)

DEFAULT_ANGLE_TOLERANCE = 5.0  # degrees


class ElbowConnection(Enum):
    """Elbow end connection."""
    WELDED = "welded"
    THREADED = "threaded"


@dataclass(frozen=True)
class Point3D:
    """Cartesian point (m)."""
    x: float
    y: float
    z: float

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "z": self.z}

    @classmethod
    def from_dict(cls, data: dict) -> "Point3D":
        return cls(x=data.get("x", 0.0), y=data.get("y", 0.0), z=data.get("z", 0.0))


@dataclass(frozen=True)
class RouteNode:
    """
    A route waypoint.

    Attributes:
        id: Node identifier
        position: Location in meters
        fittings: Manually attached fittings (valves, strainers, exits...)
    """
    id: str
    position: Point3D
    fittings: Tuple[FittingRequest, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "fittings", tuple(self.fittings))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "position": self.position.to_dict(),
            "fittings": [f.to_dict() for f in self.fittings],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RouteNode":
        return cls(
            id=data["id"],
            position=Point3D.from_dict(data.get("position", {})),
            fittings=tuple(FittingRequest.from_dict(f) for f in data.get("fittings", [])),
        )


@dataclass(frozen=True)
class PipeRoute:
    """Ordered route nodes; at least 2 are needed for a straight run."""
    nodes: Tuple[RouteNode, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "nodes", tuple(self.nodes))

    @classmethod
    def from_points(cls, points: List[Tuple[float, float, float]]) -> "PipeRoute":
        """Build a route without fittings from (x, y, z) tuples."""
        return cls(nodes=tuple(
            RouteNode(id=f"n{i}", position=Point3D(*p)) for i, p in enumerate(points)
        ))

    def to_dict(self) -> dict:
        return {"nodes": [n.to_dict() for n in self.nodes]}

    @classmethod
    def from_dict(cls, data: dict) -> "PipeRoute":
        return cls(nodes=tuple(RouteNode.from_dict(n) for n in data.get("nodes", [])))


@dataclass(frozen=True)
class StraightRun:
    """Straight pipe between two consecutive nodes."""
    from_node_index: int
    to_node_index: int
    length_m: float
    elevation_m: float  # signed, + = up
    direction: NDArray[np.float64] = field(compare=False)  # unit vector

    def to_dict(self) -> dict:
        return {
            "from_node_index": self.from_node_index,
            "to_node_index": self.to_node_index,
            "length_m": self.length_m,
            "elevation_m": self.elevation_m,
            "direction": [float(c) for c in self.direction],
        }


@dataclass(frozen=True)
class DetectedElbow:
    """Elbow found at an interior node."""
    node_index: int
    angle_deg: float
    standard_angle: int
    fitting_id: str
    warning: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "node_index": self.node_index,
            "angle_deg": self.angle_deg,
            "standard_angle": self.standard_angle,
            "fitting_id": self.fitting_id,
            "warning": self.warning,
        }


@dataclass
class RouteConversionConfig:
    """
    Settings for converting a route into segments.
    """
    connection: ElbowConnection = ElbowConnection.WELDED
    use_90_long_radius: bool = True
    angle_tolerance: float = DEFAULT_ANGLE_TOLERANCE  # degrees

    def to_dict(self) -> dict:
        return {
            "connection": self.connection.value,
            "use_90_long_radius": self.use_90_long_radius,
            "angle_tolerance": self.angle_tolerance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RouteConversionConfig":
        return cls(
            connection=ElbowConnection(data.get("connection", "welded")),
            use_90_long_radius=data.get("use_90_long_radius", True),
            angle_tolerance=data.get("angle_tolerance", DEFAULT_ANGLE_TOLERANCE),
        )


@dataclass(frozen=True)
class RouteAnalysis:
    """Read-only route preview."""
    straight_runs: Tuple[StraightRun, ...] = ()
    detected_elbows: Tuple[DetectedElbow, ...] = ()
    total_length_m: float = 0.0
    total_elevation_m: float = 0.0
    elbow_count_90: int = 0
    elbow_count_45: int = 0
    elbow_count_180: int = 0
    warnings: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "straight_runs": [r.to_dict() for r in self.straight_runs],
            "detected_elbows": [e.to_dict() for e in self.detected_elbows],
            "total_length_m": self.total_length_m,
            "total_elevation_m": self.total_elevation_m,
            "elbow_count_90": self.elbow_count_90,
            "elbow_count_45": self.elbow_count_45,
            "elbow_count_180": self.elbow_count_180,
            "warnings": list(self.warnings),
        }
