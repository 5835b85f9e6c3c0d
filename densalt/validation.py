"""
validation.py – Error taxonomy and boundary checks for station observations.

Two failure kinds are distinguished:

DomainError     : an intermediate expression would leave the reals
                  (e.g. negative base under a fractional power in the
                  barometric inversion).
InputRangeError : an input is non-finite or physically inconsistent
                  (altimeter ≤ 0, dew point above temperature, dew point
                  outside the Wobus fit domain).

Both subclass ValueError so callers that already catch ValueError keep
working.
"""

from __future__ import annotations
import math

from densalt.constants import WOBUS_VALID_RANGE_C


class DensaltError(ValueError):
    """Base class for every error raised by the calculation engine."""


class DomainError(DensaltError):
    """An intermediate result would not be real-valued."""


class InputRangeError(DensaltError):
    """An observation is non-finite or physically inconsistent."""


def require_finite(name: str, value: float) -> float:
    if value is None or not math.isfinite(value):
        raise InputRangeError(f"{name} must be a finite number, got {value!r}")
    return float(value)


def require_altimeter(altimeter_inhg: float) -> float:
    altimeter_inhg = require_finite("altimeter setting", altimeter_inhg)
    if altimeter_inhg <= 0:
        raise InputRangeError(
            f"altimeter setting must be > 0 inHg, got {altimeter_inhg}"
        )
    return altimeter_inhg


def require_dew_point(temperature_c: float, dew_point_c: float | None) -> None:
    """Dew point may be None (dry air) but never above the temperature."""
    require_finite("temperature", temperature_c)
    if dew_point_c is None:
        return
    require_finite("dew point", dew_point_c)
    if dew_point_c > temperature_c:
        raise InputRangeError(
            f"dew point {dew_point_c} °C is above temperature {temperature_c} °C"
        )


def validate_observation(
    elevation_ft: float,
    temperature_c: float,
    altimeter_inhg: float,
    dew_point_c: float | None = None,
) -> None:
    """
    Fail fast on any observation the formulas cannot evaluate meaningfully.

    Raises
    ------
    InputRangeError
    """
    require_finite("elevation", elevation_ft)
    require_finite("temperature", temperature_c)
    require_altimeter(altimeter_inhg)
    require_dew_point(temperature_c, dew_point_c)
    if dew_point_c is not None:
        lo, hi = WOBUS_VALID_RANGE_C
        if not lo <= dew_point_c <= hi:
            raise InputRangeError(
                f"dew point {dew_point_c} °C is outside the Wobus fit "
                f"domain [{lo:g}, {hi:g}] °C"
            )
