"""
pressure.py – Station pressure from altimeter setting and field elevation.

The altimeter setting is the station pressure reduced to sea level along
the standard atmosphere.  Undoing that reduction in closed form:

    P = (AS^k1 − k2·H)^(1/k1)

    k1 = L·R / (g·Md)
    k2 = (L/T0) · P0^k1

with H the geopotential station elevation [m].  The *uncorrected* variant
feeds the geometric elevation straight in; it is slightly lower above
sea level and is kept for quick estimates.

Reference: https://wahiduddin.net/calc/density_altitude.htm
"""

from __future__ import annotations

from densalt.constants import (
    EARTH_RADIUS_M, K1_BAROMETRIC, K2_BAROMETRIC, MB_PER_INHG,
)
from densalt.units import feet_to_meters
from densalt.validation import DomainError, require_altimeter, require_finite


# ──────────────────────────────────────────────────────────────────────
# Geometric ↔ geopotential height
# ──────────────────────────────────────────────────────────────────────

def geopotential_height(z_m: float) -> float:
    """H = Z·E / (Z + E)   [m]"""
    return z_m * EARTH_RADIUS_M / (z_m + EARTH_RADIUS_M)


def geometric_height(h_m: float) -> float:
    """Z = E·H / (E − H)   [m]  (inverse of ``geopotential_height``)"""
    return EARTH_RADIUS_M * h_m / (EARTH_RADIUS_M - h_m)


# ──────────────────────────────────────────────────────────────────────
# Altimeter setting → station pressure
# ──────────────────────────────────────────────────────────────────────

def altimeter_to_millibars(altimeter_inhg: float) -> float:
    return altimeter_inhg * MB_PER_INHG


def _invert_altimeter(altimeter_inhg: float, height_m: float) -> float:
    as_mb = altimeter_to_millibars(require_altimeter(altimeter_inhg))
    base = as_mb ** K1_BAROMETRIC - K2_BAROMETRIC * height_m
    if base < 0:
        raise DomainError(
            f"no real station pressure for altimeter {altimeter_inhg} inHg "
            f"at {height_m:.0f} m (AS^k1 − k2·H = {base:.6g})"
        )
    return base ** (1.0 / K1_BAROMETRIC)


def station_pressure(elevation_ft: float, altimeter_inhg: float) -> float:
    """
    Actual station pressure [mb], geopotential-corrected.

    Parameters
    ----------
    elevation_ft   : field (geometric) elevation  [ft]
    altimeter_inhg : reported altimeter setting  [inHg]

    Raises
    ------
    InputRangeError : altimeter ≤ 0 or non-finite input
    DomainError     : AS^k1 < k2·H (elevation far above the atmosphere)
    """
    z_m = feet_to_meters(require_finite("elevation", elevation_ft))
    return _invert_altimeter(altimeter_inhg, geopotential_height(z_m))


def station_pressure_uncorrected(elevation_ft: float,
                                 altimeter_inhg: float) -> float:
    """
    Station pressure [mb] using geometric elevation as if it were H.

    The quick estimate, offered to callers only; every formula here uses
    the geopotential-corrected ``station_pressure``.
    """
    z_m = feet_to_meters(require_finite("elevation", elevation_ft))
    return _invert_altimeter(altimeter_inhg, z_m)
