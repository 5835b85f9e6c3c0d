"""
plotting.py – Side-by-side visualisation of one report.
"""

from __future__ import annotations
import matplotlib.pyplot as plt

from densalt.altitude import FORMULA_LABELS
from densalt.report import DensityAltitudeReport


def plot_formula_comparison(report: DensityAltitudeReport, *,
                            show: bool = True,
                            save_path: str | None = None) -> plt.Figure:
    """
    Bar chart of every density-altitude formula for one observation, with
    field elevation and pressure altitude drawn as reference lines.

    Parameters
    ----------
    report    : result of ``compute_report``
    show      : call plt.show()
    save_path : if given, save to file

    Returns
    -------
    matplotlib Figure
    """
    formulas = list(report.density_altitudes)
    labels = [FORMULA_LABELS[f] for f in formulas]
    values = [report.density_altitudes[f] for f in formulas]
    obs = report.observation

    fig, ax = plt.subplots(figsize=(9, 5))
    colors = ['#1a73e8', '#d93025', '#0d652d', '#e8710a']
    bars = ax.bar(labels, values, color=colors[:len(values)], alpha=0.85)
    for bar, v in zip(bars, values):
        ax.annotate(f'{v:.0f} ft', xy=(bar.get_x() + bar.get_width() / 2, v),
                    xytext=(0, 3), textcoords='offset points',
                    ha='center', fontsize=8, color='#333')

    ax.axhline(obs.elevation_ft, color='grey', lw=0.8, ls='--',
               label=f'Field elevation ({obs.elevation_ft:.0f} ft)')
    ax.axhline(report.pressure_altitude_ft, color='#555', lw=0.8, ls=':',
               label=f'Pressure altitude ({report.pressure_altitude_ft:.0f} ft)')

    dew = "dry" if obs.dew_point_c is None else f"Td={obs.dew_point_c:.0f}°C"
    ax.set_title(
        f"Density altitude  —  {obs.elevation_ft:.0f} ft, "
        f"{obs.temperature_c:.0f}°C, {obs.altimeter_inhg:.2f} inHg, {dew}",
        fontsize=11, fontweight='bold',
    )
    ax.set_ylabel('Density altitude [ft]')
    ax.legend(loc='upper left', fontsize=8)
    ax.grid(True, axis='y', ls=':', alpha=0.4)
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=200, bbox_inches='tight')
    if show:
        plt.show()

    return fig
