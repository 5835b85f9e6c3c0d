"""
Tests for densalt.trade_study, densalt.plotting and densalt.export sweeps
"""

import matplotlib.pyplot as plt
import numpy as np
import pytest
from densalt.altitude import Formula
from densalt.export import export_csv
from densalt.plotting import plot_formula_comparison
from densalt.report import Observation, compute_report
from densalt.trade_study import (
    SWEEPS,
    plot_trade_study,
    sweep_altimeter,
    sweep_dew_point,
    sweep_elevation,
    sweep_temperature,
)
from densalt.validation import InputRangeError


class TestSweeps:
    def test_temperature_count_and_keys(self):
        results = sweep_temperature(np.linspace(-10, 40, 6), 2000, 29.92)
        assert len(results) == 6
        for key in ['temperature_c', 'density'] + [f.value for f in Formula]:
            assert key in results[0]

    def test_temperature_raises_density_altitude(self):
        results = sweep_temperature([0, 20, 40], 2000, 29.92, -10.0)
        assert results[-1]['geometric'] > results[0]['geometric']
        assert results[-1]['density'] < results[0]['density']

    def test_elevation(self):
        results = sweep_elevation([0, 4000, 8000], 20.0, 29.92, 5.0)
        assert [r['elevation_ft'] for r in results] == [0, 4000, 8000]
        assert results[-1]['noaa'] > results[0]['noaa']

    def test_dew_point(self):
        results = sweep_dew_point([-10, 0, 10, 20], 1000, 25.0, 29.92)
        assert results[-1]['noaa_tv'] > results[0]['noaa_tv']
        # dry formulas ignore moisture
        assert results[-1]['noaa'] == pytest.approx(results[0]['noaa'])

    def test_dew_point_above_temperature(self):
        with pytest.raises(InputRangeError):
            sweep_dew_point([20, 30], 1000, 25.0, 29.92)

    def test_altimeter(self):
        """Lower altimeter setting → thinner air → higher density altitude."""
        results = sweep_altimeter([29.0, 30.0, 31.0], 1000, 15.0)
        assert results[0]['simple'] > results[-1]['simple']

    def test_registry(self):
        assert set(SWEEPS) == {'temperature', 'elevation', 'dew_point', 'altimeter'}


class TestExportSweep:
    def test_csv(self, tmp_path):
        results = sweep_temperature([0, 10, 20], 0, 29.92)
        path = export_csv(results, tmp_path / "sweep.csv")
        lines = path.read_text().splitlines()
        assert lines[0].split(",") == list(results[0].keys())
        assert len(lines) == 4

    def test_empty(self, tmp_path):
        with pytest.raises(ValueError):
            export_csv([], tmp_path / "empty.csv")


class TestPlots:
    def test_trade_study_plot(self, tmp_path):
        results = sweep_temperature(np.linspace(-10, 40, 6), 2000, 29.92)
        out = tmp_path / "trade.png"
        fig = plot_trade_study(results, 'temperature_c', show=False,
                               save_path=str(out))
        assert out.exists()
        assert len(fig.axes) == 2
        assert len(fig.axes[0].lines) == len(Formula)
        plt.close(fig)

    def test_formula_comparison_plot(self):
        report = compute_report(Observation(5000, 30.0, 29.92, 10.0))
        fig = plot_formula_comparison(report, show=False)
        assert len(fig.axes[0].patches) == len(Formula)
        plt.close(fig)
