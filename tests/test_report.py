"""
Tests for densalt.report and densalt.export
"""

import dataclasses
import pytest
from densalt.altitude import Formula
from densalt.export import export_report_csv
from densalt.report import Observation, compute_report, format_report
from densalt.validation import InputRangeError


@pytest.fixture
def hot_high_report():
    return compute_report(Observation(5000, 30.0, 29.92, 10.0))


class TestObservation:
    def test_standard_day_defaults(self):
        obs = Observation()
        assert obs.elevation_ft == 0.0
        assert obs.temperature_c == 15.0
        assert obs.altimeter_inhg == 29.92
        assert obs.dew_point_c is None

    def test_frozen(self):
        obs = Observation()
        with pytest.raises(dataclasses.FrozenInstanceError):
            obs.temperature_c = 20.0

    def test_dew_point_above_temperature(self):
        with pytest.raises(InputRangeError):
            Observation(0, 10.0, 29.92, 11.0)

    def test_dew_point_outside_wobus_domain(self):
        with pytest.raises(InputRangeError):
            Observation(0, 15.0, 29.92, -60.0)

    def test_non_positive_altimeter(self):
        with pytest.raises(InputRangeError):
            Observation(0, 15.0, 0.0)

    def test_infinite_temperature(self):
        with pytest.raises(InputRangeError):
            Observation(0, float("inf"), 29.92)


class TestComputeReport:
    def test_all_formulas(self, hot_high_report):
        assert set(hot_high_report.density_altitudes) == set(Formula)

    def test_intermediates(self, hot_high_report):
        r = hot_high_report
        assert r.isa_temperature_c == pytest.approx(5.094)
        assert r.isa_deviation_c == pytest.approx(24.906)
        assert r.station_pressure_mb == pytest.approx(843.0, abs=0.5)
        assert r.station_pressure_inhg == pytest.approx(24.89, abs=0.02)
        assert r.vapor_pressure_wobus_mb == pytest.approx(12.27, abs=0.05)
        assert r.vapor_pressure_tetens_mb == pytest.approx(12.27, abs=0.05)
        assert r.virtual_temperature_c > 30.0
        assert r.air_density_kg_m3 == pytest.approx(0.9636, abs=2e-3)
        assert r.air_density_lb_ft3 == pytest.approx(0.06016, abs=2e-4)
        assert r.relative_density_pct == pytest.approx(78.7, abs=0.3)

    def test_awos_rounding(self, hot_high_report):
        assert hot_high_report.awos_density_altitude_ft == 7800.0
        assert hot_high_report.awos_density_altitude_ft % 100 == 0

    def test_spread(self, hot_high_report):
        das = hot_high_report.density_altitudes.values()
        assert hot_high_report.spread_ft == pytest.approx(max(das) - min(das))
        assert 0 < hot_high_report.spread_ft < 250

    def test_within_troposphere(self, hot_high_report):
        assert hot_high_report.within_troposphere

    def test_dry_observation(self):
        r = compute_report(Observation())
        assert r.vapor_pressure_wobus_mb == 0.0
        assert r.relative_humidity_pct == 0.0
        assert r.virtual_temperature_c == 15.0

    def test_format_report(self, hot_high_report):
        text = format_report(hot_high_report)
        assert "Density Altitude" in text
        assert "Geometric (Wobus)" in text
        assert "AWOS estimate" in text


class TestExportReport:
    def test_writes_rows(self, hot_high_report, tmp_path):
        path = export_report_csv(hot_high_report, tmp_path / "report.csv")
        lines = path.read_text().splitlines()
        assert lines[0] == "quantity,value"
        names = [line.split(",")[0] for line in lines[1:]]
        assert "station_pressure_mb" in names
        for f in Formula:
            assert f"density_altitude_{f.value}_ft" in names
