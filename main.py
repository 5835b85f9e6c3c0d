#!/usr/bin/env python3
"""
main.py – CLI for the density altitude calculator.

Usage:
    python main.py                        # interactive mode
    python main.py --help                 # show all flags
    python main.py --elevation 5000 --temperature 30 \\
        --altimeter 29.92 --dew-point 10  # batch mode (no prompts)
    python main.py --elevation 5000 --altimeter 29.92 \\
        --sweep temperature -10 40 26     # parameter sweep
"""

from __future__ import annotations
import argparse
import sys
import numpy as np

from densalt._logging import configure_logging
from densalt.altitude import Formula
from densalt.export import export_csv, export_report_csv
from densalt.plotting import plot_formula_comparison
from densalt.report import Observation, compute_report, format_report
from densalt.trade_study import SWEEPS, plot_trade_study
from densalt.units import fahrenheit_to_celsius, hpa_to_inhg, meters_to_feet
from densalt.validation import DensaltError


# ── Pretty-printing helpers ──────────────────────────────────────────

def _header():
    print()
    print("╔══════════════════════════════════════════════════════════╗")
    print("║             Density Altitude Calculator                 ║")
    print("╚══════════════════════════════════════════════════════════╝")
    print()


def _ask(prompt: str, default=None, cast=float):
    """Prompt user; return default if blank."""
    suffix = f" [{default}]" if default is not None else ""
    raw = input(f"  {prompt}{suffix}: ").strip()
    if raw == "":
        if default is None:
            raise ValueError("No default; value is required.")
        return cast(default) if cast else default
    return cast(raw)


def _ask_str(prompt: str, default: str = "") -> str:
    return _ask(prompt, default=default, cast=str)


# ── Argparse ─────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Density altitude calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  Interactive:   python main.py
  Batch:         python main.py --elevation 5000 --temperature 30 --altimeter 29.92 --dew-point 10
  Metric:        python main.py --elevation 1524 --elevation-units m \\
                     --temperature 30 --altimeter 1013 --altimeter-units hPa
  Sweep:         python main.py --elevation 5000 --altimeter 29.92 \\
                     --sweep temperature -10 40 26
""",
    )
    # ── Observation ──────────────────────────────────────────────
    p.add_argument('--elevation', type=float, default=None,
                   help='Field elevation (feet unless --elevation-units m)')
    p.add_argument('--temperature', type=float, default=None,
                   help='Temperature (°C unless --temperature-units F)')
    p.add_argument('--altimeter', type=float, default=None,
                   help='Altimeter setting (inHg unless --altimeter-units hPa)')
    p.add_argument('--dew-point', type=float, default=None,
                   help='Dew point, same units as temperature (omit for dry air)')

    # ── Units (explicit, never guessed) ──────────────────────────
    p.add_argument('--elevation-units', choices=['ft', 'm'], default='ft')
    p.add_argument('--temperature-units', choices=['C', 'F'], default='C')
    p.add_argument('--altimeter-units', choices=['inHg', 'hPa'],
                   default='inHg')

    # ── Selection ────────────────────────────────────────────────
    p.add_argument('--formula', type=str, default=None,
                   choices=[f.value for f in Formula],
                   help='Print only this formula')

    # ── Sweep mode ───────────────────────────────────────────────
    p.add_argument('--sweep', nargs=4, metavar=('VAR', 'MIN', 'MAX', 'N'),
                   help='Sweep a variable: --sweep temperature -10 40 26 '
                        f"(VAR one of {', '.join(SWEEPS)})")

    # ── Output ───────────────────────────────────────────────────
    p.add_argument('--output', '--csv', type=str, default=None,
                   help='CSV output path')
    p.add_argument('--plot', action='store_true',
                   help='Show plots')
    p.add_argument('--save-plot', type=str, default=None,
                   help='Save the plot to this path')
    p.add_argument('-v', '--verbose', action='store_true',
                   help='Debug logging')

    return p


def is_batch(args) -> bool:
    """Return True if enough args are given to skip interactive prompts."""
    return (args.elevation is not None and args.temperature is not None and
            args.altimeter is not None)


def _to_engine_units(args, elevation, temperature, altimeter, dew_point):
    """Convert CLI values to ft / °C / inHg per the explicit unit flags."""
    if elevation is not None and args.elevation_units == 'm':
        elevation = meters_to_feet(elevation)
    if args.temperature_units == 'F':
        if temperature is not None:
            temperature = fahrenheit_to_celsius(temperature)
        if dew_point is not None:
            dew_point = fahrenheit_to_celsius(dew_point)
    if altimeter is not None and args.altimeter_units == 'hPa':
        altimeter = hpa_to_inhg(altimeter)
    return elevation, temperature, altimeter, dew_point


# ── Batch mode ───────────────────────────────────────────────────────

def run_batch(args):
    """Non-interactive mode: all params from argparse."""
    elevation, temperature, altimeter, dew_point = _to_engine_units(
        args, args.elevation, args.temperature, args.altimeter, args.dew_point)
    obs = Observation(elevation, temperature, altimeter, dew_point)
    report = compute_report(obs)

    if args.formula:
        formula = Formula(args.formula)
        print(f"{report.density_altitudes[formula]:.0f}")
        return report

    _header()
    print(format_report(report))

    if args.output:
        csv_path = export_report_csv(report, args.output)
        print(f"\n  → CSV: {csv_path}")

    if args.plot or args.save_plot:
        plot_formula_comparison(report, show=args.plot,
                                save_path=args.save_plot)

    print("\n  Done.\n")
    return report


# ── Sweep mode ───────────────────────────────────────────────────────

def run_sweep(args):
    """Parameter sweep mode."""
    _header()

    var, lo, hi, n = args.sweep
    lo, hi, n = float(lo), float(hi), int(n)
    if var not in SWEEPS:
        print(f"  Unknown sweep variable '{var}'. Use: {', '.join(SWEEPS)}")
        sys.exit(1)
    x_key, sweep = SWEEPS[var]

    elevation, temperature, altimeter, dew_point = _to_engine_units(
        args, args.elevation, args.temperature, args.altimeter, args.dew_point)
    # Fixed values not given default to a standard day
    elevation = 0.0 if elevation is None else elevation
    temperature = 15.0 if temperature is None else temperature
    altimeter = 29.92 if altimeter is None else altimeter
    lo, hi = _sweep_bounds(args, var, lo, hi)
    values = np.linspace(lo, hi, n)

    print(f"  Sweeping '{var}' from {lo:g} to {hi:g} ({n} steps)...\n")

    if var == 'temperature':
        results = sweep(values, elevation, altimeter, dew_point)
    elif var == 'elevation':
        results = sweep(values, temperature, altimeter, dew_point)
    elif var == 'dew_point':
        results = sweep(values, elevation, temperature, altimeter)
    else:
        results = sweep(values, elevation, temperature, dew_point)

    # Print table header
    keys = list(results[0].keys())
    print("  " + "  ".join(f"{k:>14s}" for k in keys))
    for r in results:
        print("  " + "  ".join(f"{r[k]:14.4f}" for k in keys))

    if args.output:
        csv_path = export_csv(results, args.output)
        print(f"\n  → CSV: {csv_path}")

    if args.plot or args.save_plot:
        plot_trade_study(results, x_key,
                         title=f"Trade Study: {var} = [{lo:g}, {hi:g}]",
                         show=args.plot, save_path=args.save_plot)

    print("\n  Done.\n")
    return results


def _sweep_bounds(args, var, lo, hi):
    """Sweep bounds are given in the same units as the variable's flag."""
    if var == 'elevation' and args.elevation_units == 'm':
        return meters_to_feet(lo), meters_to_feet(hi)
    if var in ('temperature', 'dew_point') and args.temperature_units == 'F':
        return fahrenheit_to_celsius(lo), fahrenheit_to_celsius(hi)
    if var == 'altimeter' and args.altimeter_units == 'hPa':
        return hpa_to_inhg(lo), hpa_to_inhg(hi)
    return lo, hi


# ── Interactive mode ─────────────────────────────────────────────────

def run_interactive():
    """Full interactive prompting flow."""
    _header()

    elevation = _ask("Field elevation [ft]", default=0)
    temperature = _ask("Temperature [°C]", default=15)
    altimeter = _ask("Altimeter setting [inHg]", default=29.92)
    raw_dew = _ask_str("Dew point [°C] (blank for dry air)", default="")
    dew_point = float(raw_dew) if raw_dew else None

    obs = Observation(elevation, temperature, altimeter, dew_point)
    report = compute_report(obs)
    print()
    print(format_report(report))

    print()
    do_csv = _ask_str("Export CSV? [y/N]", default="n").lower()
    if do_csv.startswith("y"):
        csv_name = _ask_str("CSV file name", default="density_altitude.csv")
        csv_path = export_report_csv(report, csv_name)
        print(f"  → CSV: {csv_path}")

    do_plot = _ask_str("Show comparison plot? [y/N]", default="n").lower()
    if do_plot.startswith("y"):
        plot_formula_comparison(report, show=True)

    print("\n  Done.\n")
    return report


# ── Entry point ──────────────────────────────────────────────────────

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.sweep:
            run_sweep(args)
        elif is_batch(args):
            run_batch(args)
        else:
            run_interactive()
    except DensaltError as exc:
        print(f"  invalid input: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
