"""
export.py – CSV export for sweeps and single reports.
"""

from __future__ import annotations
from pathlib import Path

from densalt.report import DensityAltitudeReport


def _fmt(v) -> str:
    if v is None:
        return ""
    if isinstance(v, float):
        return f"{v:.6g}"
    return str(v)


def export_csv(results: list[dict], path: str | Path) -> Path:
    """
    Write sweep rows to CSV, one column per dict key.

    Returns
    -------
    Resolved Path of the written file.
    """
    path = Path(path).expanduser().resolve()
    if not results:
        raise ValueError("no rows to export")

    keys = list(results[0].keys())
    with open(path, "w") as f:
        f.write(",".join(keys) + "\n")
        for r in results:
            f.write(",".join(_fmt(r.get(k)) for k in keys) + "\n")

    return path


def export_report_csv(report: DensityAltitudeReport,
                      path: str | Path) -> Path:
    """Write one report as ``quantity,value`` rows."""
    path = Path(path).expanduser().resolve()
    obs = report.observation

    rows = [
        ("elevation_ft", obs.elevation_ft),
        ("temperature_c", obs.temperature_c),
        ("altimeter_inhg", obs.altimeter_inhg),
        ("dew_point_c", obs.dew_point_c),
        ("isa_temperature_c", report.isa_temperature_c),
        ("isa_deviation_c", report.isa_deviation_c),
        ("virtual_temperature_c", report.virtual_temperature_c),
        ("pressure_altitude_ft", report.pressure_altitude_ft),
        ("station_pressure_mb", report.station_pressure_mb),
        ("station_pressure_inhg", report.station_pressure_inhg),
        ("vapor_pressure_wobus_mb", report.vapor_pressure_wobus_mb),
        ("vapor_pressure_tetens_mb", report.vapor_pressure_tetens_mb),
        ("relative_humidity_pct", report.relative_humidity_pct),
        ("air_density_kg_m3", report.air_density_kg_m3),
        ("air_density_lb_ft3", report.air_density_lb_ft3),
        ("relative_density_pct", report.relative_density_pct),
    ]
    rows += [(f"density_altitude_{f.value}_ft", da)
             for f, da in report.density_altitudes.items()]
    rows.append(("awos_density_altitude_ft", report.awos_density_altitude_ft))

    with open(path, "w") as f:
        f.write("quantity,value\n")
        for name, value in rows:
            f.write(f"{name},{_fmt(value)}\n")

    return path
