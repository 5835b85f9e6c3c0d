"""
altitude.py – Density altitude by four interchangeable formulas.

Formula.SIMPLE            : pressure altitude + 118.8 ft/°C × ISA deviation.
                            Flight-manual rule, dry, rounded to the foot.
Formula.NOAA              : NOAA power law on corrected station pressure and
                            observed temperature.  Dry.
Formula.NOAA_VIRTUAL_TEMP : NOAA power law with the Wobus virtual temperature
                            in place of the observed temperature.
Formula.GEOMETRIC         : moist air density → geopotential altitude in the
                            standard atmosphere → geometric altitude.  The
                            most complete model; the others approximate it.

None supersedes another; the report layer evaluates all of them.

Reference: https://www.weather.gov/media/epz/wxcalc/densityAltitude.pdf
"""

from __future__ import annotations
import math
from enum import Enum

from densalt.constants import (
    P0_ISA_MB, NOAA_PA_EXPONENT, NOAA_PA_SCALE_FT,
    NOAA_DA_SCALE_FT, NOAA_DA_PRESSURE_FACTOR, NOAA_DA_EXPONENT,
    DRY_DA_FT_PER_C, T0_ISA, LAPSE_RATE, R_UNIVERSAL, M_DRY_AIR,
    PA_PER_MB, K_HYPSOMETRIC, MB_PER_INHG,
)
from densalt.density import air_density
from densalt.pressure import altimeter_to_millibars, geometric_height, station_pressure
from densalt.temperature import isa_deviation, virtual_temperature_wobus
from densalt.units import celsius_to_rankine, meters_to_feet
from densalt.validation import (
    DomainError, require_altimeter, require_finite, validate_observation,
)


class Formula(Enum):
    SIMPLE = "simple"
    NOAA = "noaa"
    NOAA_VIRTUAL_TEMP = "noaa_tv"
    GEOMETRIC = "geometric"


FORMULA_LABELS = {
    Formula.SIMPLE: "Simple dry (FAA)",
    Formula.NOAA: "NOAA dry",
    Formula.NOAA_VIRTUAL_TEMP: "NOAA virtual temp (Wobus)",
    Formula.GEOMETRIC: "Geometric (Wobus)",
}


# ──────────────────────────────────────────────────────────────────────
# Pressure altitude
# ──────────────────────────────────────────────────────────────────────

def pressure_altitude(elevation_ft: float, altimeter_inhg: float) -> float:
    """
    Pressure altitude [ft] from the NOAA power law, no geopotential step.

        PA = (1 − (AS/1013.25)^0.190284) · 145366.45 + elevation

    This is the uncorrected path used by the Simple formula.  Callers that
    want the uncorrected station pressure itself use
    ``pressure.station_pressure_uncorrected``.
    """
    elevation_ft = require_finite("elevation", elevation_ft)
    as_mb = altimeter_to_millibars(require_altimeter(altimeter_inhg))
    return (1.0 - (as_mb / P0_ISA_MB) ** NOAA_PA_EXPONENT) * NOAA_PA_SCALE_FT \
        + elevation_ft


# ──────────────────────────────────────────────────────────────────────
# 1. Simple dry
# ──────────────────────────────────────────────────────────────────────

def dry_density_altitude(temperature_c: float, elevation_ft: float,
                         altimeter_inhg: float) -> float:
    """PA + 118.8 · ISA deviation, rounded to the nearest foot."""
    temperature_c = require_finite("temperature", temperature_c)
    da = pressure_altitude(elevation_ft, altimeter_inhg) \
        + DRY_DA_FT_PER_C * isa_deviation(temperature_c, elevation_ft)
    return round_half_away(da)


def round_half_away(x: float) -> float:
    """Nearest whole number, halves away from zero (2.5 → 3, −2.5 → −3)."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


# ──────────────────────────────────────────────────────────────────────
# 2./3. NOAA
# ──────────────────────────────────────────────────────────────────────

def _noaa(temperature_c: float, altimeter_inhg: float,
          elevation_ft: float) -> float:
    temperature_c = require_finite("temperature", temperature_c)
    p_inhg = station_pressure(elevation_ft, altimeter_inhg) / MB_PER_INHG
    temp_r = celsius_to_rankine(temperature_c)
    if temp_r <= 0:
        raise DomainError(f"temperature {temperature_c} °C is below absolute zero")
    return NOAA_DA_SCALE_FT * (
        1.0 - (NOAA_DA_PRESSURE_FACTOR * p_inhg / temp_r) ** NOAA_DA_EXPONENT
    )


def noaa_density_altitude(temperature_c: float, altimeter_inhg: float,
                          elevation_ft: float) -> float:
    """145442.16 · (1 − (17.326·P/T_R)^0.235), P in inHg, T in °R."""
    return _noaa(temperature_c, altimeter_inhg, elevation_ft)


def noaa_virtual_temp_density_altitude(temperature_c: float,
                                       altimeter_inhg: float,
                                       dew_point_c: float | None,
                                       elevation_ft: float) -> float:
    """NOAA density altitude with the Wobus virtual temperature."""
    t_v = virtual_temperature_wobus(temperature_c, dew_point_c,
                                    elevation_ft, altimeter_inhg)
    return _noaa(t_v, altimeter_inhg, elevation_ft)


# ──────────────────────────────────────────────────────────────────────
# 4. Geometric
# ──────────────────────────────────────────────────────────────────────

def geopotential_altitude_from_density(rho: float) -> float:
    """
    Geopotential altitude [m] at which the standard atmosphere has
    density ``rho`` [kg/m³].

        H = (T0/L) · (1 − (R·T0·ρ / (Md·P0))^(L·R / (g·Md − L·R)))
    """
    if rho <= 0:
        raise DomainError(f"air density must be > 0, got {rho}")
    ratio = R_UNIVERSAL * T0_ISA * rho / (M_DRY_AIR * P0_ISA_MB * PA_PER_MB)
    return (T0_ISA / LAPSE_RATE) * (1.0 - ratio ** K_HYPSOMETRIC)


def geometric_density_altitude(temperature_c: float, altimeter_inhg: float,
                               dew_point_c: float | None,
                               elevation_ft: float) -> float:
    """Density → geopotential H → geometric Z, returned in feet."""
    rho = air_density(temperature_c, dew_point_c, altimeter_inhg, elevation_ft)
    h_m = geopotential_altitude_from_density(rho)
    return meters_to_feet(geometric_height(h_m))


# ──────────────────────────────────────────────────────────────────────
# Explicit selection
# ──────────────────────────────────────────────────────────────────────

def density_altitude(formula: Formula, elevation_ft: float,
                     temperature_c: float, altimeter_inhg: float,
                     dew_point_c: float | None = None) -> float:
    """
    Density altitude [ft] by the named formula.

    The whole observation is validated for every formula, including the
    dew point for the dry ones that ignore it, so an inconsistent
    observation fails the same way whichever formula is asked for.

    Raises
    ------
    InputRangeError : non-finite input, altimeter ≤ 0, dew point above
                      temperature or outside the Wobus domain
    DomainError     : no real-valued result for this observation
    """
    formula = Formula(formula)
    validate_observation(elevation_ft, temperature_c, altimeter_inhg,
                         dew_point_c)
    if formula is Formula.SIMPLE:
        return dry_density_altitude(temperature_c, elevation_ft, altimeter_inhg)
    if formula is Formula.NOAA:
        return noaa_density_altitude(temperature_c, altimeter_inhg, elevation_ft)
    if formula is Formula.NOAA_VIRTUAL_TEMP:
        return noaa_virtual_temp_density_altitude(
            temperature_c, altimeter_inhg, dew_point_c, elevation_ft)
    return geometric_density_altitude(
        temperature_c, altimeter_inhg, dew_point_c, elevation_ft)


def all_density_altitudes(elevation_ft: float, temperature_c: float,
                          altimeter_inhg: float,
                          dew_point_c: float | None = None
                          ) -> dict[Formula, float]:
    """Every formula for one observation, in ``Formula`` order."""
    return {
        f: density_altitude(f, elevation_ft, temperature_c,
                            altimeter_inhg, dew_point_c)
        for f in Formula
    }
