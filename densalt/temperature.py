"""
temperature.py – ISA deviation and moisture-corrected virtual temperature.
"""

from __future__ import annotations

from densalt.constants import (
    ISA_SEA_LEVEL_TEMP_C, ISA_LAPSE_C_PER_1000FT, M_DRY_AIR, M_WATER_VAPOR,
    KELVIN_OFFSET,
)
from densalt.moisture import vapor_pressure_wobus
from densalt.pressure import station_pressure
from densalt.validation import DomainError, require_dew_point


def isa_temperature(elevation_ft: float) -> float:
    """Standard temperature [°C] at an elevation, 1.9812 °C per 1000 ft."""
    return ISA_SEA_LEVEL_TEMP_C - elevation_ft / 1000.0 * ISA_LAPSE_C_PER_1000FT


def isa_deviation(temperature_c: float, elevation_ft: float) -> float:
    """Observed minus standard temperature [°C]."""
    return temperature_c - isa_temperature(elevation_ft)


def virtual_temperature_wobus(
    temperature_c: float,
    dew_point_c: float | None,
    elevation_ft: float,
    altimeter_inhg: float,
) -> float:
    """
    Temperature [°C] a dry parcel would need to match the density of the
    observed moist air at the same pressure.

        Tv = Tk / (1 − (1 − Mv/Md) · Vp/P) − 273.15

    Vp is the Wobus vapor pressure at the dew point, P the corrected
    station pressure.  A ``None`` dew point returns the temperature itself.
    """
    require_dew_point(temperature_c, dew_point_c)
    if dew_point_c is None:
        return temperature_c
    c1 = 1.0 - M_WATER_VAPOR / M_DRY_AIR
    temp_k = temperature_c + KELVIN_OFFSET
    vp = vapor_pressure_wobus(dew_point_c)
    p = station_pressure(elevation_ft, altimeter_inhg)
    if vp >= p:
        raise DomainError(
            f"vapor pressure {vp:.1f} mb is not below station pressure {p:.1f} mb"
        )
    return temp_k / (1.0 - c1 * (vp / p)) - KELVIN_OFFSET
