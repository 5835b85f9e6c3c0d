"""
constants.py – Physical constants and conversion factors.

Every formula in the package reads its constants from here; nothing is
re-declared locally.  Empirical fit constants are kept as the literal values
published with each method rather than re-derived from the ISA lapse rate.

Sources: WGS 84 (Earth radius), ICAO/ISA standard atmosphere,
CODATA 2018 (gas constant), NOAA density-altitude worksheet,
Wobus (1966) / Tetens (1930) vapor-pressure fits.
"""

from __future__ import annotations

# ── Earth / standard atmosphere ─────────────────────────────────────
EARTH_RADIUS_M = 6371008.8    # arithmetic mean radius (2a + b) / 3  [m]
T0_ISA = 288.15               # sea-level standard temperature  [K]
P0_ISA_MB = 1013.25           # sea-level standard pressure  [mb]
LAPSE_RATE = 0.0065           # tropospheric lapse rate  [K/m]
g0 = 9.80665                  # standard gravity  [m/s²]

# ── Gases ───────────────────────────────────────────────────────────
R_UNIVERSAL = 8.314462618     # J/(mol·K)
M_DRY_AIR = 0.02896968        # kg/mol
M_WATER_VAPOR = 0.01801528    # kg/mol
R_DRY_AIR = R_UNIVERSAL / M_DRY_AIR        # ≈ 287.01 J/(kg·K)
R_WATER_VAPOR = R_UNIVERSAL / M_WATER_VAPOR  # ≈ 461.52 J/(kg·K)

# Barometric inversion exponents, P = (AS^k1 − k2·H)^(1/k1)
K1_BAROMETRIC = LAPSE_RATE * R_UNIVERSAL / (g0 * M_DRY_AIR)          # ≈ 0.190232
K2_BAROMETRIC = (LAPSE_RATE / T0_ISA) * P0_ISA_MB ** K1_BAROMETRIC   # ≈ 8.4155e-5

# Hypsometric exponent used when inverting density → geopotential altitude
K_HYPSOMETRIC = (LAPSE_RATE * R_UNIVERSAL) / (
    g0 * M_DRY_AIR - LAPSE_RATE * R_UNIVERSAL
)

# ISA sea-level density ρ0 = P0 / (Rd·T0)  [kg/m³]
RHO0_ISA = P0_ISA_MB * 100.0 / (R_DRY_AIR * T0_ISA)

# ── Unit conversions ────────────────────────────────────────────────
MB_PER_INHG = 33.8639
FT_PER_M = 3.28084
KELVIN_OFFSET = 273.15
RANKINE_OFFSET = 459.69
PA_PER_MB = 100.0
LB_FT3_PER_KG_M3 = 0.062428

# ── Empirical fits ──────────────────────────────────────────────────
# FAA / flight-manual rule of thumb
ISA_LAPSE_C_PER_1000FT = 1.9812
ISA_SEA_LEVEL_TEMP_C = 15.0
DRY_DA_FT_PER_C = 118.8

# NOAA pressure altitude:  (1 − (P/1013.25)^0.190284) · 145366.45
NOAA_PA_EXPONENT = 0.190284
NOAA_PA_SCALE_FT = 145366.45

# NOAA density altitude:  145442.16 · (1 − (17.326·P_inHg / T_R)^0.235)
NOAA_DA_SCALE_FT = 145442.16
NOAA_DA_PRESSURE_FACTOR = 17.326
NOAA_DA_EXPONENT = 0.235

# Saturation vapor pressure over water at 0 °C  [mb]
E_SO = 6.1078

# Wobus 9th-degree polynomial, c0 … c9
WOBUS_COEFFS = (
    0.99999683,
    -9.0826951e-3,
    7.8736169e-5,
    -6.1117958e-7,
    4.3884187e-9,
    -2.9883885e-11,
    2.1874425e-13,
    -1.7892321e-15,
    1.1112018e-17,
    -3.0994571e-20,
)
WOBUS_VALID_RANGE_C = (-50.0, 100.0)

TETENS_A = 7.5
TETENS_B = 237.3

# Altitude band the single-layer troposphere model is valid for  [ft]
TROPOSPHERE_RANGE_FT = (-15000.0, 36090.0)

# AWOS reports density altitude rounded to this step  [ft]
AWOS_ROUNDING_FT = 100.0
