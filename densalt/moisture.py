"""
moisture.py – Saturation vapor pressure at the dew point.

Two curve fits are offered; callers pick one explicitly.

Wobus      : 9th-degree polynomial, Vp = e_so / p(Td)^8.  Accurate over
             −50 … 100 °C; outside that range the fit degrades silently.
Tetens     : Vp = e_so · 10^(7.5·Td / (237.3 + Td)).  Cheaper, less
             accurate at low temperature, good at high ambient temperature.

Both return millibars.

Sources
-------
https://wahiduddin.net/calc/density_altitude.htm
https://icoads.noaa.gov/software/other/profs
"""

from __future__ import annotations
from enum import Enum

from densalt.constants import E_SO, WOBUS_COEFFS, TETENS_A, TETENS_B


class VaporPressureMethod(Enum):
    WOBUS = "wobus"
    TETENS = "tetens"


def vapor_pressure_wobus(dew_point_c: float) -> float:
    """Wobus polynomial vapor pressure [mb]."""
    p = 0.0
    for c in reversed(WOBUS_COEFFS):
        p = p * dew_point_c + c
    return E_SO / p ** 8


def vapor_pressure_tetens(dew_point_c: float) -> float:
    """Tetens vapor pressure [mb]."""
    exponent = TETENS_A * dew_point_c / (TETENS_B + dew_point_c)
    return E_SO * 10.0 ** exponent


_METHODS = {
    VaporPressureMethod.WOBUS: vapor_pressure_wobus,
    VaporPressureMethod.TETENS: vapor_pressure_tetens,
}


def vapor_pressure(dew_point_c: float | None,
                   method: VaporPressureMethod) -> float:
    """Vapor pressure [mb] by the chosen fit; ``None`` dew point means dry air."""
    if dew_point_c is None:
        return 0.0
    return _METHODS[VaporPressureMethod(method)](dew_point_c)


def relative_humidity(temperature_c: float, dew_point_c: float | None,
                      method: VaporPressureMethod = VaporPressureMethod.WOBUS
                      ) -> float:
    """RH [%] = 100 · e(Td) / e(T)."""
    if dew_point_c is None:
        return 0.0
    return 100.0 * vapor_pressure(dew_point_c, method) / vapor_pressure(
        temperature_c, method)
