"""
Physical constants and unit conversion.

All internal calculations use SI units:
- length: m (pipe diameters and roughness are carried in mm on the value objects)
- pressure: Pa
- density: kg/m³
- viscosity: Pa·s
- velocity: m/s
- flow rate: m³/s
- temperature: °C
"""

from typing import Dict

# Standard gravity (m/s²)
GRAVITY = 9.80665

MM_PER_INCH = 25.4

PRESSURE_TO_PA: Dict[str, float] = {
    "Pa": 1.0,
    "kPa": 1000.0,
    "MPa": 1e6,
    "bar": 1e5,
    "psi": 6894.757,
    "kgf/cm2": 98066.5,
    "mmH2O": 9.80665,
}

FLOW_RATE_TO_M3S: Dict[str, float] = {
    "m3/h": 1.0 / 3600.0,
    "L/min": 1.0 / 60000.0,
    "USgpm": 6.30902e-5,
}

LENGTH_TO_M: Dict[str, float] = {
    "mm": 0.001,
    "m": 1.0,
    "in": 0.0254,
    "ft": 0.3048,
}

TEMPERATURE_UNITS = ("C", "K", "F")


def _factor(table: Dict[str, float], unit: str, kind: str) -> float:
    try:
        return table[unit]
    except KeyError:
        raise ValueError(f"Unknown {kind} unit: {unit}. Use one of {sorted(table)}") from None


def convert_pressure(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a pressure between any two supported units."""
    pa = value * _factor(PRESSURE_TO_PA, from_unit, "pressure")
    return pa / _factor(PRESSURE_TO_PA, to_unit, "pressure")


def convert_flow_rate(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a volumetric flow rate between any two supported units."""
    m3s = value * _factor(FLOW_RATE_TO_M3S, from_unit, "flow rate")
    return m3s / _factor(FLOW_RATE_TO_M3S, to_unit, "flow rate")


def flow_rate_to_m3s(value: float, unit: str) -> float:
    """Convert a volumetric flow rate to m³/s."""
    return value * _factor(FLOW_RATE_TO_M3S, unit, "flow rate")


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a length between any two supported units."""
    m = value * _factor(LENGTH_TO_M, from_unit, "length")
    return m / _factor(LENGTH_TO_M, to_unit, "length")


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """
    Convert a temperature between C, K and F.

    Args:
        value: Temperature in from_unit
        from_unit: One of "C", "K", "F"
        to_unit: One of "C", "K", "F"

    Returns:
        Temperature in to_unit
    """
    if from_unit == "C":
        celsius = value
    elif from_unit == "K":
        celsius = value - 273.15
    elif from_unit == "F":
        celsius = (value - 32.0) * 5.0 / 9.0
    else:
        raise ValueError(f"Unknown temperature unit: {from_unit}. Use one of {TEMPERATURE_UNITS}")

    if to_unit == "C":
        return celsius
    if to_unit == "K":
        return celsius + 273.15
    if to_unit == "F":
        return celsius * 9.0 / 5.0 + 32.0
    raise ValueError(f"Unknown temperature unit: {to_unit}. Use one of {TEMPERATURE_UNITS}")


def pressure_to_head(dp_pa: float, density: float) -> float:
    """Convert pressure (Pa) to liquid head (m): h = ΔP / (ρg)."""
    return dp_pa / (density * GRAVITY)


def head_to_pressure(head_m: float, density: float) -> float:
    """Convert liquid head (m) to pressure (Pa): ΔP = ρgh."""
    return density * GRAVITY * head_m
