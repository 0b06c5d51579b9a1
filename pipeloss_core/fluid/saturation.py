"""
Saturated-liquid property tables (water, seawater, brines, glycols...).

Properties are linearly interpolated on temperature. Queries outside the
tabulated range raise RangeError.
"""

from dataclasses import dataclass
from typing import Tuple

from ..errors import InputValidationError
from ..models import FluidState, Reference
from .interpolate import linear_interpolate


@dataclass(frozen=True)
class SaturationRow:
    """One row of a saturated-liquid table."""
    temp_c: float
    pressure_kpa: float
    density_kg_m3: float
    viscosity_pa_s: float
    specific_heat_j_kgk: float = 0.0


@dataclass(frozen=True)
class SaturationTableModel:
    """
    Temperature-indexed saturated-liquid table.

    Attributes:
        fluid: Fluid identifier, e.g. "water"
        rows: Table rows sorted by ascending temperature
        reference: Data source
        description: Free text
    """
    fluid: str
    rows: Tuple[SaturationRow, ...]
    reference: Reference
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "rows", tuple(self.rows))
        if len(self.rows) < 2:
            raise InputValidationError(f"Saturation table for {self.fluid} needs at least 2 rows")

    @property
    def temperature_range(self) -> Tuple[float, float]:
        """Validated (min, max) temperature in °C."""
        return (self.rows[0].temp_c, self.rows[-1].temp_c)


def saturation_properties(temp_c: float, model: SaturationTableModel) -> FluidState:
    """
    Interpolate density, viscosity and saturation pressure at temp_c.

    Raises:
        RangeError: if temp_c is outside the table
    """
    temps = [r.temp_c for r in model.rows]
    return FluidState(
        density=linear_interpolate(temp_c, temps, [r.density_kg_m3 for r in model.rows]),
        viscosity=linear_interpolate(temp_c, temps, [r.viscosity_pa_s for r in model.rows]),
        temperature=temp_c,
        pressure=linear_interpolate(temp_c, temps, [r.pressure_kpa for r in model.rows]),
        reference=model.reference,
    )


def specific_heat(temp_c: float, model: SaturationTableModel) -> float:
    """Interpolated specific heat (J/(kg·K))."""
    return linear_interpolate(
        temp_c,
        [r.temp_c for r in model.rows],
        [r.specific_heat_j_kgk for r in model.rows],
    )
