"""
Shared value objects for pressure-drop calculations.

All internal calculations use SI units; pipe diameters and roughness are
carried in millimeters as they appear in pipe standards. Input objects are
frozen dataclasses, and result objects serialize to plain dictionaries via
to_dict() so they can be rendered or persisted by outer layers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .errors import InputValidationError
from .units import MM_PER_INCH


class FlowRegime(Enum):
    """Flow regime classification by Reynolds number."""
    LAMINAR = "laminar"
    TRANSITIONAL = "transitional"
    TURBULENT = "turbulent"


class KValueMethod(Enum):
    """How a fitting's loss coefficient was obtained."""
    CRANE_LD = "crane_ld"
    THREE_K = "3k"
    FIXED_K = "fixed_k"
    CV = "cv"


class Severity(Enum):
    """Advisory warning severity levels."""
    CAUTION = "caution"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Reference:
    """Literature source backing a computed value."""
    source: str
    page: Optional[str] = None
    equation: Optional[str] = None

    @property
    def key(self) -> Tuple[str, str, str]:
        """Identity used for de-duplication."""
        return (self.source, self.page or "", self.equation or "")

    def to_dict(self) -> dict:
        data = {"source": self.source}
        if self.page is not None:
            data["page"] = self.page
        if self.equation is not None:
            data["equation"] = self.equation
        return data


@dataclass(frozen=True)
class CalcWarning:
    """A single advisory finding attached to a successful result."""
    severity: Severity
    category: str  # friction, velocity, fittings, elevation
    message_key: str
    params: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.message_key} {self.params}"

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "category": self.category,
            "message_key": self.message_key,
            "params": dict(self.params),
        }


@dataclass(frozen=True)
class FluidState:
    """
    Fluid properties at a given state point.

    Produced fresh by every fluid-property query; never cached.
    """
    density: float        # kg/m³
    viscosity: float      # Pa·s (dynamic)
    temperature: float    # °C
    pressure: float       # kPa
    reference: Reference

    def __post_init__(self):
        if not self.density > 0:
            raise InputValidationError(f"Density must be positive (got {self.density})")
        if not self.viscosity > 0:
            raise InputValidationError(f"Viscosity must be positive (got {self.viscosity})")

    def to_dict(self) -> dict:
        return {
            "density": self.density,
            "viscosity": self.viscosity,
            "temperature": self.temperature,
            "pressure": self.pressure,
            "reference": self.reference.to_dict(),
        }


@dataclass(frozen=True)
class PipeSpec:
    """
    Pipe dimensions resolved from a pipe standard.

    All diameters in millimeters.
    """
    standard: str
    nps: str              # nominal pipe size, e.g. "2"
    od_mm: float
    wall_mm: float
    id_mm: float
    dn: Optional[int] = None
    schedule: Optional[str] = None

    def __post_init__(self):
        if self.od_mm < 0 or self.wall_mm < 0 or self.id_mm < 0:
            raise InputValidationError(
                f"Pipe diameters must be non-negative (od={self.od_mm}, "
                f"wall={self.wall_mm}, id={self.id_mm})"
            )

    @property
    def id_m(self) -> float:
        """Inner diameter in meters."""
        return self.id_mm / 1000.0

    @property
    def id_inch(self) -> float:
        """Inner diameter in inches."""
        return self.id_mm / MM_PER_INCH

    def to_dict(self) -> dict:
        return {
            "standard": self.standard,
            "nps": self.nps,
            "dn": self.dn,
            "od_mm": self.od_mm,
            "wall_mm": self.wall_mm,
            "id_mm": self.id_mm,
            "schedule": self.schedule,
        }


@dataclass(frozen=True)
class PipeMaterial:
    """Pipe material with absolute roughness (mm)."""
    id: str
    name: str
    roughness_mm: float
    reference: Reference

    def __post_init__(self):
        if self.roughness_mm < 0:
            raise InputValidationError(f"Roughness must be non-negative (got {self.roughness_mm})")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "roughness_mm": self.roughness_mm,
            "reference": self.reference.to_dict(),
        }


@dataclass(frozen=True)
class FittingRequest:
    """A fitting requested on a segment, optionally with a valve Cv."""
    fitting_id: str
    quantity: int = 1
    cv_override: Optional[float] = None

    def __post_init__(self):
        if self.quantity < 0:
            raise InputValidationError(f"Fitting quantity must be non-negative (got {self.quantity})")

    def to_dict(self) -> dict:
        data = {"fitting_id": self.fitting_id, "quantity": self.quantity}
        if self.cv_override is not None:
            data["cv_override"] = self.cv_override
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "FittingRequest":
        return cls(
            fitting_id=data["fitting_id"],
            quantity=data.get("quantity", 1),
            cv_override=data.get("cv_override"),
        )


@dataclass(frozen=True)
class FittingResult:
    """
    A resolved fitting with its loss coefficient and losses.

    dp_pa and head_loss_m are already multiplied by quantity.
    """
    id: str
    description: str
    quantity: int
    k_value: float
    method: KValueMethod
    dp_pa: float
    head_loss_m: float
    reference: Reference
    warning: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "quantity": self.quantity,
            "k_value": self.k_value,
            "method": self.method.value,
            "dp_pa": self.dp_pa,
            "head_loss_m": self.head_loss_m,
            "reference": self.reference.to_dict(),
            "warning": self.warning,
        }


@dataclass(frozen=True)
class SegmentInput:
    """
    One pipe segment: constant pipe size, material and fluid.

    elevation_m is signed; positive means the outlet is above the inlet.
    """
    pipe: PipeSpec
    material: PipeMaterial
    fluid: FluidState
    flow_rate_m3s: float
    length_m: float
    elevation_m: float = 0.0
    fittings: Tuple[FittingRequest, ...] = ()

    def __post_init__(self):
        if self.flow_rate_m3s < 0:
            raise InputValidationError(f"Flow rate must be non-negative (got {self.flow_rate_m3s})")
        if self.length_m < 0:
            raise InputValidationError(f"Length must be non-negative (got {self.length_m})")
        object.__setattr__(self, "fittings", tuple(self.fittings))


@dataclass(frozen=True)
class SegmentResult:
    """Pressure drop breakdown for one segment."""
    velocity_m_s: float
    reynolds: float
    flow_regime: FlowRegime
    friction_factor: float
    friction_factor_method: str

    dp_friction: float   # Pa
    dp_fittings: float   # Pa
    dp_elevation: float  # Pa
    dp_total: float      # Pa

    head_friction_m: float
    head_fittings_m: float
    head_elevation_m: float
    head_total_m: float

    fitting_details: Tuple[FittingResult, ...] = ()
    references: Tuple[Reference, ...] = ()
    warnings: Tuple[CalcWarning, ...] = ()

    def to_dict(self) -> dict:
        return {
            "velocity_m_s": self.velocity_m_s,
            "reynolds": self.reynolds,
            "flow_regime": self.flow_regime.value,
            "friction_factor": self.friction_factor,
            "friction_factor_method": self.friction_factor_method,
            "dp_friction": self.dp_friction,
            "dp_fittings": self.dp_fittings,
            "dp_elevation": self.dp_elevation,
            "dp_total": self.dp_total,
            "head_friction_m": self.head_friction_m,
            "head_fittings_m": self.head_fittings_m,
            "head_elevation_m": self.head_elevation_m,
            "head_total_m": self.head_total_m,
            "fitting_details": [f.to_dict() for f in self.fitting_details],
            "references": [r.to_dict() for r in self.references],
            "warnings": [w.to_dict() for w in self.warnings],
        }


@dataclass(frozen=True)
class SystemInput:
    """Segments connected in series, in flow order."""
    segments: Tuple[SegmentInput, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "segments", tuple(self.segments))


@dataclass(frozen=True)
class SystemResult:
    """Aggregated pressure drop for a series system."""
    segment_results: Tuple[SegmentResult, ...]

    dp_friction_total: float
    dp_fittings_total: float
    dp_elevation_total: float
    dp_total: float

    head_friction_total_m: float
    head_fittings_total_m: float
    head_elevation_total_m: float
    head_total_m: float

    references: Tuple[Reference, ...] = ()
    warnings: Tuple[CalcWarning, ...] = ()

    @classmethod
    def empty(cls) -> "SystemResult":
        """All-zero result for a system without segments."""
        return cls(
            segment_results=(),
            dp_friction_total=0.0,
            dp_fittings_total=0.0,
            dp_elevation_total=0.0,
            dp_total=0.0,
            head_friction_total_m=0.0,
            head_fittings_total_m=0.0,
            head_elevation_total_m=0.0,
            head_total_m=0.0,
        )

    def to_dict(self) -> dict:
        return {
            "segment_results": [s.to_dict() for s in self.segment_results],
            "dp_friction_total": self.dp_friction_total,
            "dp_fittings_total": self.dp_fittings_total,
            "dp_elevation_total": self.dp_elevation_total,
            "dp_total": self.dp_total,
            "head_friction_total_m": self.head_friction_total_m,
            "head_fittings_total_m": self.head_fittings_total_m,
            "head_elevation_total_m": self.head_elevation_total_m,
            "head_total_m": self.head_total_m,
            "references": [r.to_dict() for r in self.references],
            "warnings": [w.to_dict() for w in self.warnings],
        }
