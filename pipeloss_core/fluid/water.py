"""
Closed-form pure-water correlations used as the solvent reference
by the mixture models.

- Density: Kell (1975) rational polynomial, J. Chem. Eng. Data 20(1):97.
  ±0.01 kg/m³ (0–40°C), ±0.1 kg/m³ (40–150°C).
- Viscosity: Laliberté (2007) pure-water equation, J. Chem. Eng. Data 52:321.

Both extrapolate silently outside their fitted range.
"""


def kell_water_density(t: float) -> float:
    """
    Pure water density at atmospheric pressure.

    Args:
        t: Temperature (°C), fitted for 0 ≤ t ≤ 150

    Returns:
        Density (kg/m³)
    """
    numerator = (
        999.83952
        + 16.945176 * t
        - 7.9870401e-3 * t**2
        - 4.6170461e-5 * t**3
        + 1.0556302e-7 * t**4
        - 2.8054253e-10 * t**5
    )
    return numerator / (1.0 + 1.687985e-2 * t)


def laliberte_water_viscosity(t: float) -> float:
    """
    Pure water viscosity.

    Args:
        t: Temperature (°C)

    Returns:
        Viscosity (mPa·s)
    """
    return (t + 246.0) / (0.05594 * t**2 + 5.2842 * t + 137.37)
