"""
units.py – Explicit unit conversions.

The engine works in feet, °C and inHg (US aviation reporting units).
Callers holding metric or Fahrenheit observations convert here first;
nothing in the package guesses which unit a number is in.
"""

from __future__ import annotations

from densalt.constants import (
    FT_PER_M, MB_PER_INHG, KELVIN_OFFSET, RANKINE_OFFSET, LB_FT3_PER_KG_M3,
)


def feet_to_meters(ft: float) -> float:
    return ft / FT_PER_M


def meters_to_feet(m: float) -> float:
    return m * FT_PER_M


def inhg_to_hpa(inhg: float) -> float:
    """1 hPa == 1 mb."""
    return inhg * MB_PER_INHG


def hpa_to_inhg(hpa: float) -> float:
    return hpa / MB_PER_INHG


def celsius_to_fahrenheit(c: float) -> float:
    return c * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(f: float) -> float:
    return (f - 32.0) * 5.0 / 9.0


def celsius_to_kelvin(c: float) -> float:
    return c + KELVIN_OFFSET


def celsius_to_rankine(c: float) -> float:
    """°R on the NOAA worksheet's 459.69 offset."""
    return celsius_to_fahrenheit(c) + RANKINE_OFFSET


def kg_m3_to_lb_ft3(rho: float) -> float:
    return rho * LB_FT3_PER_KG_M3
