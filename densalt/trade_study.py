"""
trade_study.py – Parameter sweeps and trade-study plotting.

Sweep one observation variable while holding the others constant.  Returns
results as a list of dicts (easily convertible to a DataFrame) with one key
per density-altitude formula, and produces comparison plots.
"""

from __future__ import annotations
import numpy as np
import matplotlib.pyplot as plt

from densalt.altitude import Formula, FORMULA_LABELS, all_density_altitudes
from densalt.density import air_density


def _row(x_key: str, x: float, elevation_ft: float, temperature_c: float,
         altimeter_inhg: float, dew_point_c: float | None) -> dict:
    das = all_density_altitudes(elevation_ft, temperature_c,
                                altimeter_inhg, dew_point_c)
    row = {x_key: float(x)}
    row.update({f.value: da for f, da in das.items()})
    row['density'] = air_density(temperature_c, dew_point_c,
                                 altimeter_inhg, elevation_ft)
    return row


def sweep_temperature(
    temperatures_c: np.ndarray | list[float],
    elevation_ft: float, altimeter_inhg: float,
    dew_point_c: float | None = None,
) -> list[dict]:
    """
    Sweep temperature [°C] and compute every formula for each.

    Returns list of dicts with keys:
        temperature_c, simple, noaa, noaa_tv, geometric, density
    """
    return [_row('temperature_c', t, elevation_ft, t, altimeter_inhg,
                 dew_point_c)
            for t in temperatures_c]


def sweep_elevation(
    elevations_ft: np.ndarray | list[float],
    temperature_c: float, altimeter_inhg: float,
    dew_point_c: float | None = None,
) -> list[dict]:
    """Sweep field elevation [ft]."""
    return [_row('elevation_ft', z, z, temperature_c, altimeter_inhg,
                 dew_point_c)
            for z in elevations_ft]


def sweep_dew_point(
    dew_points_c: np.ndarray | list[float],
    elevation_ft: float, temperature_c: float, altimeter_inhg: float,
) -> list[dict]:
    """Sweep dew point [°C]; values above the temperature fail validation."""
    return [_row('dew_point_c', td, elevation_ft, temperature_c,
                 altimeter_inhg, td)
            for td in dew_points_c]


def sweep_altimeter(
    altimeters_inhg: np.ndarray | list[float],
    elevation_ft: float, temperature_c: float,
    dew_point_c: float | None = None,
) -> list[dict]:
    """Sweep altimeter setting [inHg]."""
    return [_row('altimeter_inhg', a, elevation_ft, temperature_c, a,
                 dew_point_c)
            for a in altimeters_inhg]


SWEEPS = {
    'temperature': ('temperature_c', sweep_temperature),
    'elevation': ('elevation_ft', sweep_elevation),
    'dew_point': ('dew_point_c', sweep_dew_point),
    'altimeter': ('altimeter_inhg', sweep_altimeter),
}


def plot_trade_study(results: list[dict], x_key: str,
                     title: str = "Trade Study",
                     *, show: bool = True,
                     save_path: str | None = None) -> plt.Figure:
    """
    Two-panel trade-study plot: all formulas on top, air density below.

    Parameters
    ----------
    results : list of dicts from a sweep function
    x_key   : the key to use as the x-axis (e.g. 'temperature_c')
    title   : plot super-title
    """
    x_vals = np.array([r[x_key] for r in results])

    fig, axes = plt.subplots(2, 1, figsize=(10, 7), sharex=True,
                             gridspec_kw={'height_ratios': [2, 1]})

    colors = ['#1a73e8', '#d93025', '#0d652d', '#e8710a']
    for i, formula in enumerate(Formula):
        y_vals = [r[formula.value] for r in results]
        axes[0].plot(x_vals, y_vals, 'o-', color=colors[i % len(colors)],
                     lw=2, ms=3, label=FORMULA_LABELS[formula])
    axes[0].set_ylabel('Density altitude [ft]', fontsize=10)
    axes[0].legend(loc='best', fontsize=8)
    axes[0].grid(True, ls=':', alpha=0.4)

    axes[1].plot(x_vals, [r['density'] for r in results], '-',
                 color='#9334e6', lw=2)
    axes[1].set_ylabel('ρ [kg/m³]', fontsize=10)
    axes[1].grid(True, ls=':', alpha=0.4)

    axes[-1].set_xlabel(x_key, fontsize=11)
    fig.suptitle(title, fontsize=13, fontweight='bold')
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches='tight')
    if show:
        plt.show()
    return fig
