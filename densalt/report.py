"""
report.py – One station observation in, every derived quantity out.

Collects the engine's outputs side by side so a front end can display all
four density-altitude formulas together, together with the intermediate
pressure, moisture and density values they are built from.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field

from densalt.altitude import (
    Formula, FORMULA_LABELS, all_density_altitudes, pressure_altitude,
    round_half_away,
)
from densalt.constants import (
    AWOS_ROUNDING_FT, MB_PER_INHG, TROPOSPHERE_RANGE_FT,
)
from densalt.density import air_density, relative_density
from densalt.moisture import (
    VaporPressureMethod, relative_humidity, vapor_pressure,
)
from densalt.pressure import station_pressure
from densalt.temperature import (
    isa_deviation, isa_temperature, virtual_temperature_wobus,
)
from densalt.units import kg_m3_to_lb_ft3
from densalt.validation import validate_observation

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    """Station observation in US aviation units; defaults are a standard day."""
    elevation_ft: float = 0.0
    temperature_c: float = 15.0
    altimeter_inhg: float = 29.92
    dew_point_c: float | None = None    # None → dry air

    def __post_init__(self):
        validate_observation(self.elevation_ft, self.temperature_c,
                             self.altimeter_inhg, self.dew_point_c)


@dataclass
class DensityAltitudeReport:
    """Container for every quantity derived from one observation."""
    observation: Observation

    # temperature
    isa_temperature_c: float
    isa_deviation_c: float
    virtual_temperature_c: float

    # pressure
    pressure_altitude_ft: float
    station_pressure_mb: float
    station_pressure_inhg: float

    # moisture
    vapor_pressure_wobus_mb: float
    vapor_pressure_tetens_mb: float
    relative_humidity_pct: float

    # density
    air_density_kg_m3: float
    air_density_lb_ft3: float
    relative_density_pct: float

    # altitude
    density_altitudes: dict[Formula, float] = field(default_factory=dict)
    awos_density_altitude_ft: float = 0.0
    within_troposphere: bool = True

    @property
    def spread_ft(self) -> float:
        """Largest minus smallest density altitude over all formulas."""
        values = self.density_altitudes.values()
        return max(values) - min(values)


def compute_report(obs: Observation) -> DensityAltitudeReport:
    """
    Evaluate the whole engine for one observation.

    Parameters
    ----------
    obs : validated Observation

    Returns
    -------
    DensityAltitudeReport dataclass
    """
    elev, temp = obs.elevation_ft, obs.temperature_c
    alt, dew = obs.altimeter_inhg, obs.dew_point_c

    p_mb = station_pressure(elev, alt)
    rho = air_density(temp, dew, alt, elev)
    das = all_density_altitudes(elev, temp, alt, dew)

    # AWOS stations broadcast the NOAA estimate in 100 ft steps
    awos = round_half_away(das[Formula.NOAA] / AWOS_ROUNDING_FT) \
        * AWOS_ROUNDING_FT
    lo, hi = TROPOSPHERE_RANGE_FT
    within = lo <= das[Formula.GEOMETRIC] <= hi
    if not within:
        LOGGER.warning("geometric density altitude %.0f ft is outside the "
                       "troposphere model range", das[Formula.GEOMETRIC])

    return DensityAltitudeReport(
        observation=obs,
        isa_temperature_c=isa_temperature(elev),
        isa_deviation_c=isa_deviation(temp, elev),
        virtual_temperature_c=virtual_temperature_wobus(temp, dew, elev, alt),
        pressure_altitude_ft=pressure_altitude(elev, alt),
        station_pressure_mb=p_mb,
        station_pressure_inhg=p_mb / MB_PER_INHG,
        vapor_pressure_wobus_mb=vapor_pressure(dew, VaporPressureMethod.WOBUS),
        vapor_pressure_tetens_mb=vapor_pressure(dew, VaporPressureMethod.TETENS),
        relative_humidity_pct=relative_humidity(temp, dew),
        air_density_kg_m3=rho,
        air_density_lb_ft3=kg_m3_to_lb_ft3(rho),
        relative_density_pct=relative_density(rho),
        density_altitudes=das,
        awos_density_altitude_ft=float(awos),
        within_troposphere=within,
    )


def format_report(report: DensityAltitudeReport) -> str:
    """Plain-text summary, one quantity per line."""
    obs = report.observation
    dew = "dry" if obs.dew_point_c is None else f"{obs.dew_point_c:.1f} °C"
    lines = [
        "  ── Observation ─────────────────────────────────────────",
        f"    Field elevation   = {obs.elevation_ft:.0f} ft",
        f"    Temperature       = {obs.temperature_c:.1f} °C  "
        f"(ISA {report.isa_temperature_c:+.1f} °C, "
        f"dev {report.isa_deviation_c:+.1f} °C)",
        f"    Altimeter         = {obs.altimeter_inhg:.2f} inHg",
        f"    Dew point         = {dew}",
        "",
        "  ── Atmosphere ──────────────────────────────────────────",
        f"    Pressure altitude = {report.pressure_altitude_ft:.0f} ft",
        f"    Station pressure  = {report.station_pressure_mb:.1f} mb  "
        f"({report.station_pressure_inhg:.2f} inHg)",
        f"    Vapor pressure    = {report.vapor_pressure_wobus_mb:.2f} mb (Wobus)"
        f"  {report.vapor_pressure_tetens_mb:.2f} mb (Tetens)",
        f"    Relative humidity = {report.relative_humidity_pct:.0f} %",
        f"    Virtual temp      = {report.virtual_temperature_c:.2f} °C",
        f"    Air density       = {report.air_density_kg_m3:.4f} kg/m³  "
        f"({report.air_density_lb_ft3:.5f} lb/ft³, "
        f"{report.relative_density_pct:.1f} % of ISA)",
        "",
        "  ── Density Altitude ────────────────────────────────────",
    ]
    for formula, da in report.density_altitudes.items():
        lines.append(f"    {FORMULA_LABELS[formula]:<26s}= {da:8.0f} ft")
    lines.append(f"    {'AWOS estimate':<26s}= "
                 f"{report.awos_density_altitude_ft:8.0f} ft")
    lines.append(f"    {'Spread':<26s}= {report.spread_ft:8.0f} ft")
    if not report.within_troposphere:
        lines.append("    ⚠  Outside the troposphere model range")
    return "\n".join(lines)
