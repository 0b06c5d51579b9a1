"""
Shared fixtures: reference data as an outer layer would hand it to the core.
"""

import pytest

from pipeloss_core.fittings.catalog import (
    FittingCatalog,
    FixedKEntry,
    LDFittingEntry,
    ThreeKFittingEntry,
)
from pipeloss_core.fluid.saturation import SaturationRow, SaturationTableModel, saturation_properties
from pipeloss_core.models import KValueMethod, PipeMaterial, PipeSpec, Reference

WATER_ROWS = [
    # temp_c, pressure_kpa, density, viscosity_pa_s, cp
    SaturationRow(0.0, 0.6113, 999.84, 1.792e-3, 4217.0),
    SaturationRow(10.0, 1.2281, 999.70, 1.306e-3, 4192.0),
    SaturationRow(20.0, 2.3392, 998.21, 1.002e-3, 4182.0),
    SaturationRow(30.0, 4.2469, 995.65, 0.7972e-3, 4178.0),
    SaturationRow(40.0, 7.3851, 992.22, 0.6527e-3, 4179.0),
    SaturationRow(50.0, 12.352, 988.04, 0.5465e-3, 4181.0),
    SaturationRow(60.0, 19.946, 983.20, 0.4660e-3, 4185.0),
    SaturationRow(80.0, 47.416, 971.82, 0.3543e-3, 4197.0),
    SaturationRow(100.0, 101.42, 958.35, 0.2818e-3, 4216.0),
]

ENTRANCES = [
    FixedKEntry("entrance_sharp", "Sharp-edged entrance", 0.5),
    FixedKEntry("entrance_projecting", "Inward projecting entrance", 0.78),
    FixedKEntry("entrance_rounded", "Well-rounded entrance", 0.04),
]

EXITS = [
    FixedKEntry("exit", "Pipe exit", 1.0),
]


@pytest.fixture
def water_table():
    return SaturationTableModel(
        fluid="water",
        rows=WATER_ROWS,
        reference=Reference(source="IAPWS-IF97", page="saturated liquid"),
        description="Saturated liquid water",
    )


@pytest.fixture
def water_20c(water_table):
    return saturation_properties(20.0, water_table)


@pytest.fixture
def pipe_2in():
    """2" Schedule 40 with the rounded bore used in hand calculations."""
    return PipeSpec(
        standard="ASME B36.10M",
        nps="2",
        od_mm=60.3,
        wall_mm=3.91,
        id_mm=52.50,
        dn=50,
        schedule="40",
    )


@pytest.fixture
def carbon_steel():
    return PipeMaterial(
        id="carbon_steel_new",
        name="Carbon steel (new)",
        roughness_mm=0.046,
        reference=Reference(source="Crane TP-410", page="A-23"),
    )


@pytest.fixture
def crane_catalog():
    return FittingCatalog(
        method=KValueMethod.CRANE_LD,
        fittings=(
            LDFittingEntry("elbow_90_lr_welded", "90° long radius elbow (welded)", 14, "welded", "elbow"),
            LDFittingEntry("elbow_90_std_welded", "90° standard elbow (welded)", 30, "welded", "elbow"),
            LDFittingEntry("elbow_90_std_threaded", "90° standard elbow (threaded)", 30, "threaded", "elbow"),
            LDFittingEntry("elbow_45_std_welded", "45° standard elbow (welded)", 16, "welded", "elbow"),
            LDFittingEntry("elbow_45_std_threaded", "45° standard elbow (threaded)", 16, "threaded", "elbow"),
            LDFittingEntry("return_bend_180", "180° close return bend", 50, "", "bend"),
            LDFittingEntry("gate_valve", "Gate valve, fully open", 8, "", "valve"),
            LDFittingEntry("globe_valve", "Globe valve, fully open", 340, "", "valve"),
        ),
        entrances=ENTRANCES,
        exits=EXITS,
        ft_values={"2": 0.019},
    )


@pytest.fixture
def darby_catalog():
    return FittingCatalog(
        method=KValueMethod.THREE_K,
        fittings=(
            ThreeKFittingEntry("elbow_90_std_welded", "90° standard elbow", 800, 0.14, 4.0),
            ThreeKFittingEntry("elbow_90_lr_welded", "90° long radius elbow", 800, 0.071, 4.2),
            ThreeKFittingEntry("elbow_45_std_welded", "45° standard elbow", 500, 0.071, 4.2),
            ThreeKFittingEntry("return_bend_180", "180° return bend", 1000, 0.23, 4.0),
            ThreeKFittingEntry("gate_valve", "Gate valve, fully open", 300, 0.037, 3.9),
            ThreeKFittingEntry("globe_valve", "Globe valve, fully open", 1500, 1.7, 3.6),
        ),
        entrances=ENTRANCES,
        exits=EXITS,
    )
