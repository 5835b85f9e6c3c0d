"""
density.py – Moist-air density from station observations.

    D = Pd / (Rd·T) + Pv / (Rv·T)

Pd : partial pressure of dry air   [Pa]  (station pressure − Pv)
Pv : partial pressure of vapor     [Pa]
T  : air temperature               [K]
Rd, Rv : specific gas constants R/Md and R/Mv  [J/(kg·K)]

Pressures arrive from the lower layers in millibars and are converted to
Pascals here; callers never pass Pascals in.
"""

from __future__ import annotations
import logging

from densalt.constants import (
    R_DRY_AIR, R_WATER_VAPOR, KELVIN_OFFSET, PA_PER_MB, RHO0_ISA,
)
from densalt.moisture import VaporPressureMethod, vapor_pressure
from densalt.pressure import station_pressure
from densalt.validation import DomainError, require_dew_point

LOGGER = logging.getLogger(__name__)


def air_density(
    temperature_c: float,
    dew_point_c: float | None,
    altimeter_inhg: float,
    elevation_ft: float,
    method: VaporPressureMethod = VaporPressureMethod.WOBUS,
) -> float:
    """
    Air density [kg/m³] at the station.

    Parameters
    ----------
    temperature_c  : station temperature  [°C]
    dew_point_c    : dew point  [°C], or None for dry air
    altimeter_inhg : altimeter setting  [inHg]
    elevation_ft   : field elevation  [ft]
    method         : vapor-pressure fit (Wobus unless told otherwise)

    Raises
    ------
    InputRangeError : dew point above temperature, bad altimeter
    DomainError     : vapor pressure at or above station pressure, or the
                      temperature is at or below absolute zero
    """
    require_dew_point(temperature_c, dew_point_c)
    p_station = station_pressure(elevation_ft, altimeter_inhg) * PA_PER_MB
    p_vapor = vapor_pressure(dew_point_c, method) * PA_PER_MB
    p_dry = p_station - p_vapor
    temp_k = temperature_c + KELVIN_OFFSET
    if p_dry <= 0:
        raise DomainError(
            f"vapor pressure {p_vapor:.0f} Pa is not below station pressure "
            f"{p_station:.0f} Pa"
        )
    if temp_k <= 0:
        raise DomainError(f"temperature {temperature_c} °C is below absolute zero")

    rho = p_dry / (R_DRY_AIR * temp_k) + p_vapor / (R_WATER_VAPOR * temp_k)
    LOGGER.debug("air density %.5f kg/m3 (Pd=%.1f Pa, Pv=%.1f Pa, T=%.2f K)",
                 rho, p_dry, p_vapor, temp_k)
    return rho


def relative_density(rho: float) -> float:
    """Density as a percentage of ISA sea-level density."""
    return 100.0 * rho / RHO0_ISA
