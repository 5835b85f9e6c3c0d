"""
Tests for the command-line front end.
"""

import pytest
import logging
import main
from densalt import _logging
from densalt.altitude import Formula


class TestParser:
    def test_batch_detection(self):
        args = main.build_parser().parse_args(
            ['--elevation', '5000', '--temperature', '30', '--altimeter', '29.92'])
        assert main.is_batch(args)

    def test_not_batch_without_altimeter(self):
        args = main.build_parser().parse_args(['--elevation', '5000'])
        assert not main.is_batch(args)

    def test_negative_sweep_bounds(self):
        args = main.build_parser().parse_args(
            ['--sweep', 'temperature', '-10', '40', '6'])
        assert args.sweep == ['temperature', '-10', '40', '6']


class TestLogging:
    def test_module_is_documented(self):
        assert _logging.__doc__.strip().startswith("_logging.py")

    def test_verbose_sets_debug(self):
        _logging.configure_logging(verbose=True)
        assert _logging.LOGGER.level == logging.DEBUG
        _logging.configure_logging(verbose=False)
        assert _logging.LOGGER.level == logging.WARNING


class TestBatch:
    def test_single_formula(self, capsys):
        main.main(['--elevation', '5000', '--temperature', '30',
                   '--altimeter', '29.92', '--dew-point', '10',
                   '--formula', 'simple'])
        assert capsys.readouterr().out.strip() == "7960"

    def test_metric_units_match_imperial(self):
        parser = main.build_parser()
        imperial = main.run_batch(parser.parse_args(
            ['--elevation', '5000', '--temperature', '86',
             '--temperature-units', 'F', '--altimeter', '29.92',
             '--formula', 'noaa']))
        metric = main.run_batch(parser.parse_args(
            ['--elevation', '1524', '--elevation-units', 'm',
             '--temperature', '30', '--altimeter', '1013.2',
             '--altimeter-units', 'hPa', '--formula', 'noaa']))
        assert metric.density_altitudes[Formula.NOAA] == pytest.approx(
            imperial.density_altitudes[Formula.NOAA], abs=5)

    def test_full_report_and_csv(self, tmp_path, capsys):
        out = tmp_path / "report.csv"
        main.main(['--elevation', '0', '--temperature', '15',
                   '--altimeter', '29.92', '--output', str(out)])
        assert "Density Altitude" in capsys.readouterr().out
        assert out.exists()

    def test_invalid_input_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main.main(['--elevation', '0', '--temperature', '10',
                       '--altimeter', '29.92', '--dew-point', '20'])
        assert exc.value.code == 2
        assert "invalid input" in capsys.readouterr().err


class TestSweep:
    def test_sweep_csv(self, tmp_path):
        out = tmp_path / "sweep.csv"
        main.main(['--elevation', '2000', '--altimeter', '29.92',
                   '--sweep', 'temperature', '-10', '40', '6',
                   '--output', str(out)])
        assert len(out.read_text().splitlines()) == 7

    def test_unknown_variable(self):
        with pytest.raises(SystemExit) as exc:
            main.main(['--sweep', 'humidity', '0', '1', '2'])
        assert exc.value.code == 1


class TestInteractive:
    def test_defaults_are_standard_day(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt="": "")
        report = main.run_interactive()
        assert report.observation.temperature_c == 15.0
        assert report.observation.dew_point_c is None
        assert "Density Altitude" in capsys.readouterr().out

    def test_entered_values(self, monkeypatch):
        answers = iter(["5000", "30", "29.92", "10", "n", "n"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        report = main.run_interactive()
        assert report.density_altitudes[Formula.SIMPLE] == 7960.0
