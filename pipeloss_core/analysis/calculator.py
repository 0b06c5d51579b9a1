"""
Pressure drop calculator.

Bundles the fitting catalog, fluid model and operating conditions so that
user-level inputs (temperature, flow in m³/h, segment definitions or a
route) can be evaluated without assembling SegmentInput objects by hand.
"""

from dataclasses import dataclass, field
import logging
from typing import List, Optional, Sequence, Tuple, Union

from ..errors import InputValidationError
from ..fittings.catalog import FittingCatalog
from ..fluid.properties import FluidModel, resolve_fluid
from ..models import (
    FittingRequest,
    FluidState,
    PipeMaterial,
    PipeSpec,
    SegmentInput,
    SegmentResult,
    SystemInput,
    SystemResult,
)
from ..route.conversion import analyze_route, convert_route_to_segments
from ..route.models import PipeRoute, RouteAnalysis, RouteConversionConfig
from ..system.aggregator import calc_system_pressure_drop
from ..system.segment import calc_segment_pressure_drop
from ..units import flow_rate_to_m3s

logger = logging.getLogger(__name__)


@dataclass
class OperatingConditions:
    """
    System-wide operating point shared by every segment in series.
    """
    temperature_c: float = 20.0           # °C
    flow_rate_m3h: float = 10.0           # m³/h
    concentration: Union[float, Tuple[float, ...]] = 0.0
    concentration_unit: str = "wt%"

    @property
    def flow_rate_m3s(self) -> float:
        """Volumetric flow (m³/s)."""
        return flow_rate_to_m3s(self.flow_rate_m3h, "m3/h")

    def to_dict(self) -> dict:
        return {
            "temperature_c": self.temperature_c,
            "flow_rate_m3h": self.flow_rate_m3h,
            "concentration": self.concentration,
            "concentration_unit": self.concentration_unit,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OperatingConditions":
        concentration = data.get("concentration", 0.0)
        if isinstance(concentration, list):
            concentration = tuple(concentration)
        return cls(
            temperature_c=data.get("temperature_c", 20.0),
            flow_rate_m3h=data.get("flow_rate_m3h", 10.0),
            concentration=concentration,
            concentration_unit=data.get("concentration_unit", "wt%"),
        )


@dataclass(frozen=True)
class SegmentDefinition:
    """A segment as entered by a user; fluid and flow come from the system."""
    pipe: PipeSpec
    material: PipeMaterial
    length_m: float
    elevation_m: float = 0.0
    fittings: Tuple[FittingRequest, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "fittings", tuple(self.fittings))


class PressureDropCalculator:
    """
    Main calculator for pipe system pressure drop.

    Holds the reference data consumed by the core (fitting catalog and
    fluid model) plus the operating point and route settings. Every
    calculation is recomputed from scratch; nothing is cached.
    """

    def __init__(
        self,
        catalog: FittingCatalog,
        fluid_model: Optional[FluidModel] = None,
        operating: Optional[OperatingConditions] = None,
        conversion: Optional[RouteConversionConfig] = None,
    ):
        """
        Initialize calculator.

        Args:
            catalog: Fitting catalog (Crane L/D or Darby 3-K)
            fluid_model: Fluid correlation used by the use-case helpers
            operating: Operating point (defaults: 20 °C, 10 m³/h)
            conversion: Route conversion settings (defaults: welded, LR)
        """
        self.catalog = catalog
        self.fluid_model = fluid_model
        self.operating = operating or OperatingConditions()
        self.conversion = conversion or RouteConversionConfig()

    def resolve_fluid_state(self) -> FluidState:
        """Fluid properties at the current operating point."""
        if self.fluid_model is None:
            raise InputValidationError("No fluid model configured; pass a FluidState explicitly")
        op = self.operating
        return resolve_fluid(self.fluid_model, op.temperature_c, op.concentration, op.concentration_unit)

    def _fluid(self, fluid: Optional[FluidState]) -> FluidState:
        return fluid if fluid is not None else self.resolve_fluid_state()

    # --- domain level -------------------------------------------------

    def calc_segment(self, segment: SegmentInput) -> SegmentResult:
        """Pressure drop of one fully specified segment."""
        return calc_segment_pressure_drop(segment, self.catalog)

    def calc_system(self, system: Union[SystemInput, Sequence[SegmentInput]]) -> SystemResult:
        """Pressure drop of fully specified segments in series."""
        if not isinstance(system, SystemInput):
            system = SystemInput(segments=tuple(system))
        return calc_system_pressure_drop(system, self.catalog)

    def preview_route(self, route: PipeRoute) -> RouteAnalysis:
        """Straight runs, elbows and totals of a route without computing losses."""
        return analyze_route(route, self.conversion)

    def calc_route(
        self,
        route: PipeRoute,
        pipe: PipeSpec,
        material: PipeMaterial,
        fluid: Optional[FluidState] = None,
    ) -> SystemResult:
        """
        Pressure drop along a 3-D route with automatically detected elbows.

        Args:
            route: Ordered route nodes
            pipe: Pipe used for the whole route
            material: Pipe material used for the whole route
            fluid: Fluid override; resolved from the fluid model if omitted
        """
        segments = convert_route_to_segments(
            route,
            pipe,
            material,
            self._fluid(fluid),
            self.operating.flow_rate_m3s,
            self.conversion,
        )
        logger.debug("Route of %d nodes -> %d segments", len(route.nodes), len(segments))
        return calc_system_pressure_drop(SystemInput(segments=tuple(segments)), self.catalog)

    # --- use cases ----------------------------------------------------

    def _build_segments(
        self,
        definitions: Sequence[SegmentDefinition],
        fluid: FluidState,
    ) -> List[SegmentInput]:
        flow = self.operating.flow_rate_m3s
        return [
            SegmentInput(
                pipe=d.pipe,
                material=d.material,
                fluid=fluid,
                flow_rate_m3s=flow,
                length_m=d.length_m,
                elevation_m=d.elevation_m,
                fittings=d.fittings,
            )
            for d in definitions
        ]

    def calc_single_segment(
        self,
        definition: SegmentDefinition,
        fluid: Optional[FluidState] = None,
    ) -> SegmentResult:
        """Single segment at the current operating point."""
        segment = self._build_segments([definition], self._fluid(fluid))[0]
        return calc_segment_pressure_drop(segment, self.catalog)

    def calc_multi_segment(
        self,
        definitions: Sequence[SegmentDefinition],
        fluid: Optional[FluidState] = None,
    ) -> SystemResult:
        """Segments in series at the current operating point (one fluid, one flow)."""
        segments = self._build_segments(definitions, self._fluid(fluid))
        return calc_system_pressure_drop(SystemInput(segments=tuple(segments)), self.catalog)
