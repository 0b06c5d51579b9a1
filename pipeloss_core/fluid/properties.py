"""
Fluid property resolution.

Every supported correlation family is a variant of the FluidModel union,
each carrying its own coefficient payload. resolve_fluid() is the single
dispatch point that turns (model, temperature, concentration) into a
FluidState.

Table-based variants raise RangeError outside their data; closed-form
variants extrapolate silently.
"""

import logging
from typing import Sequence, Union

from ..errors import InputValidationError
from ..models import FluidState
from .ethanol import EthanolWaterModel, ethanol_water_density, ethanol_water_viscosity
from .laliberte import ElectrolyteModel, electrolyte_density, electrolyte_viscosity
from .melinder import GlycolPolynomialModel, melinder_density, melinder_viscosity
from .methanol import AlcoholPiecewiseModel, alcohol_water_density, alcohol_water_viscosity
from .saturation import SaturationTableModel, saturation_properties
from .sucrose import SucroseModel, sucrose_density, sucrose_viscosity

logger = logging.getLogger(__name__)

FluidModel = Union[
    SaturationTableModel,
    ElectrolyteModel,
    GlycolPolynomialModel,
    AlcoholPiecewiseModel,
    SucroseModel,
    EthanolWaterModel,
]

CONCENTRATION_UNITS = ("wt%", "vol%", "mol/kg", "Brix")

# Atmospheric pressure reported for open solution models (kPa)
ATMOSPHERIC_KPA = 101.325

# Representative densities for the vol% → wt% glycol approximation (kg/m³)
_RHO_GLYCOL = 1113.0
_RHO_WATER = 998.0


def to_mass_fraction(concentration: float, unit: str) -> float:
    """
    Convert a user-facing concentration to a mass fraction (0–1).

    vol% uses a glycol approximation (within about ±2%). mol/kg needs a
    molar mass and is rejected.
    """
    if unit in ("wt%", "Brix"):
        return concentration / 100.0
    if unit == "vol%":
        vol_frac = concentration / 100.0
        return (vol_frac * _RHO_GLYCOL) / (vol_frac * _RHO_GLYCOL + (1.0 - vol_frac) * _RHO_WATER)
    if unit == "mol/kg":
        raise InputValidationError(
            "mol/kg conversion requires a molar mass; pass a mass fraction in wt% instead"
        )
    raise InputValidationError(f"Unknown concentration unit: {unit}. Use one of {CONCENTRATION_UNITS}")


def _solute_fractions(concentration: Union[float, Sequence[float]], unit: str, n_solutes: int):
    if isinstance(concentration, (int, float)):
        values = [concentration]
    else:
        values = list(concentration)
    if len(values) != n_solutes:
        raise InputValidationError(
            f"Electrolyte model has {n_solutes} solute(s) but {len(values)} concentration(s) were given"
        )
    return [to_mass_fraction(c, unit) for c in values]


def resolve_fluid(
    model: FluidModel,
    temperature_c: float,
    concentration: Union[float, Sequence[float]] = 0.0,
    unit: str = "wt%",
) -> FluidState:
    """
    Resolve density and viscosity for any supported fluid model.

    Args:
        model: One FluidModel variant with its coefficient data
        temperature_c: Temperature (°C)
        concentration: Solute concentration in `unit`; ignored for
            saturation tables; one value per solute for electrolyte models
        unit: "wt%", "vol%", "Brix" ("mol/kg" is rejected)

    Returns:
        FluidState

    Raises:
        RangeError: table-based model queried outside its data
        InputValidationError: unsupported unit or malformed concentration
    """
    t = temperature_c

    if isinstance(model, SaturationTableModel):
        state = saturation_properties(t, model)

    elif isinstance(model, ElectrolyteModel):
        w = _solute_fractions(concentration, unit, len(model.solutes))
        state = FluidState(
            density=electrolyte_density(t, w, model),
            viscosity=electrolyte_viscosity(t, w, model),
            temperature=t,
            pressure=ATMOSPHERIC_KPA,
            reference=model.reference,
        )

    elif isinstance(model, GlycolPolynomialModel):
        x = to_mass_fraction(concentration, unit)
        state = FluidState(
            density=melinder_density(x, t, model),
            viscosity=melinder_viscosity(x, t, model),
            temperature=t,
            pressure=ATMOSPHERIC_KPA,
            reference=model.reference,
        )

    elif isinstance(model, AlcoholPiecewiseModel):
        w = to_mass_fraction(concentration, unit)
        state = FluidState(
            density=alcohol_water_density(t, w, model),
            viscosity=alcohol_water_viscosity(t, w, model),
            temperature=t,
            pressure=ATMOSPHERIC_KPA,
            reference=model.reference,
        )

    elif isinstance(model, SucroseModel):
        # °Brix is sucrose wt%; volume and molal units do not apply to sugar
        if unit not in ("Brix", "wt%"):
            raise InputValidationError(f"Sucrose concentration must be given in Brix or wt% (got {unit})")
        brix = float(concentration)
        state = FluidState(
            density=sucrose_density(t, brix, model.density_20c_coefficients),
            viscosity=sucrose_viscosity(t, brix, model.viscosity_table),
            temperature=t,
            pressure=ATMOSPHERIC_KPA,
            reference=model.reference,
        )

    elif isinstance(model, EthanolWaterModel):
        w = to_mass_fraction(concentration, unit)
        state = FluidState(
            density=ethanol_water_density(t, w, model.redlich_kister),
            viscosity=ethanol_water_viscosity(t, w, model.viscosity_table),
            temperature=t,
            pressure=ATMOSPHERIC_KPA,
            reference=model.reference,
        )

    else:
        raise TypeError(f"Unsupported fluid model: {type(model).__name__}")

    logger.debug(
        "Resolved %s at %.2f°C: rho=%.3f kg/m3, mu=%.4e Pa.s",
        type(model).__name__, t, state.density, state.viscosity,
    )
    return state
