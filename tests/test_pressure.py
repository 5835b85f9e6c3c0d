"""
Tests for densalt.pressure

Reference values: standard day 29.92 inHg → 1013.21 mb at sea level;
the same setting at 5000 ft gives ≈ 843.0 mb station pressure.
"""

import pytest
from densalt.pressure import (
    altimeter_to_millibars,
    geopotential_height,
    geometric_height,
    station_pressure,
    station_pressure_uncorrected,
)
from densalt.validation import DomainError, InputRangeError


class TestGeopotential:
    def test_sea_level(self):
        assert geopotential_height(0.0) == 0.0

    def test_below_geometric(self):
        """Geopotential height is slightly below geometric height aloft."""
        assert geopotential_height(1524.0) < 1524.0
        assert geopotential_height(1524.0) == pytest.approx(1523.64, abs=0.01)

    def test_inverse(self):
        for z in [-400.0, 0.0, 1500.0, 11000.0]:
            assert geometric_height(geopotential_height(z)) == pytest.approx(z, abs=1e-6)


class TestStationPressure:
    def test_standard_sea_level(self):
        assert station_pressure(0, 29.92) == pytest.approx(1013.25, abs=0.1)

    def test_altimeter_conversion(self):
        assert altimeter_to_millibars(29.92) == pytest.approx(1013.208, abs=1e-3)

    def test_5000_ft(self):
        assert station_pressure(5000, 29.92) == pytest.approx(843.0, abs=0.5)

    def test_decreases_with_elevation(self):
        pressures = [station_pressure(z, 29.92) for z in range(-1000, 10001, 1000)]
        assert all(a > b for a, b in zip(pressures, pressures[1:]))

    def test_below_sea_level(self):
        assert station_pressure(-1000, 29.92) > station_pressure(0, 29.92)

    def test_uncorrected_matches_at_sea_level(self):
        assert station_pressure_uncorrected(0, 29.92) == pytest.approx(
            station_pressure(0, 29.92), rel=1e-12)

    def test_uncorrected_lower_aloft(self):
        """Using Z in place of H over-states the height, so P comes out lower."""
        corrected = station_pressure(8000, 30.10)
        uncorrected = station_pressure_uncorrected(8000, 30.10)
        assert uncorrected < corrected
        assert corrected - uncorrected < 0.5


class TestStationPressureErrors:
    def test_zero_altimeter(self):
        with pytest.raises(InputRangeError):
            station_pressure(0, 0.0)

    def test_negative_altimeter(self):
        with pytest.raises(InputRangeError):
            station_pressure_uncorrected(0, -29.92)

    def test_nan_elevation(self):
        with pytest.raises(InputRangeError):
            station_pressure(float("nan"), 29.92)

    def test_above_atmosphere_is_domain_error(self):
        """AS^k1 < k2·H once H exceeds ≈ 44 km."""
        with pytest.raises(DomainError):
            station_pressure(150000, 29.92)

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError):
            station_pressure(150000, 29.92)
