"""Fluid property module for PipeLoss core."""

from .interpolate import ViscosityPoint, linear_interpolate, interpolate_2d
from .saturation import SaturationRow, SaturationTableModel
from .laliberte import (
    LaliberteDensityCoeffs,
    LaliberteViscosityCoeffs,
    ElectrolyteSolute,
    ElectrolyteModel,
)
from .melinder import GlycolPolynomialModel
from .methanol import PiecewisePolynomial, AlcoholPiecewiseModel
from .sucrose import SucroseModel
from .ethanol import RedlichKisterCoeffs, EthanolWaterModel
from .properties import FluidModel, resolve_fluid, to_mass_fraction

__all__ = [
    "ViscosityPoint",
    "linear_interpolate",
    "interpolate_2d",
    "SaturationRow",
    "SaturationTableModel",
    "LaliberteDensityCoeffs",
    "LaliberteViscosityCoeffs",
    "ElectrolyteSolute",
    "ElectrolyteModel",
    "GlycolPolynomialModel",
    "PiecewisePolynomial",
    "AlcoholPiecewiseModel",
    "SucroseModel",
    "RedlichKisterCoeffs",
    "EthanolWaterModel",
    "FluidModel",
    "resolve_fluid",
    "to_mass_fraction",
]
