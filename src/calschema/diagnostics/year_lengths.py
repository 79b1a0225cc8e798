#!/usr/bin/env python3
"""
Year-length statistics per calendar: mean year length, number of leap
years and the drift accumulated against a reference year (the mean
tropical year for solar calendars, twelve mean synodic months for lunar
ones). With --out, plots the drift curves.
"""
from __future__ import annotations

import argparse
from typing import Any, Dict, List, Optional

import calschema

MEAN_TROPICAL_YEAR = 365.24219
MEAN_LUNAR_YEAR = 12 * 29.530589


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "calschema[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calschema[diagnostics]"') from e


def parse_calendars(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def reference_year(name: str) -> float:
    return MEAN_LUNAR_YEAR if calschema.calendar_info(name)["family"] == "lunar" else MEAN_TROPICAL_YEAR


def year_lengths(np, name: str, start_year: int, end_year: int) -> "np.ndarray":
    schema = calschema.get_calendar(name).schema
    return np.array([schema.count_days_in_year(y) for y in range(start_year, end_year + 1)], dtype=np.int64)


def drift(np, lengths: "np.ndarray", reference: float) -> "np.ndarray":
    """Cumulative days gained on the reference year, year after year."""
    return np.cumsum(lengths - reference)


def summarize(np, name: str, start_year: int, end_year: int, reference: Optional[float] = None) -> Dict[str, Any]:
    if end_year < start_year:
        raise ValueError("end_year must be >= start_year")
    ref = reference_year(name) if reference is None else reference
    lengths = year_lengths(np, name, start_year, end_year)
    min_days = calschema.get_calendar(name).schema.min_days_in_year
    return {
        "calendar": name,
        "years": int(lengths.size),
        "mean": float(lengths.mean()),
        "leap_years": int(np.count_nonzero(lengths > min_days)),
        "min": int(lengths.min()),
        "max": int(lengths.max()),
        "reference": ref,
        "drift": float(drift(np, lengths, ref)[-1]),
    }


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Year-length statistics and drift per calendar.")
    p.add_argument("--calendars", default="gregorian,julian,persian,french_republican,tabular_islamic")
    p.add_argument("--start-year", type=int, default=1)
    p.add_argument("--end-year", type=int, default=4000)
    p.add_argument("--reference", type=float, default=None, help="Reference year length in days.")
    p.add_argument("--out", default=None, help="Save a drift plot to this file.")
    args = p.parse_args(argv)

    np = _need_numpy()

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    names = parse_calendars(args.calendars)
    print(f"{'calendar':<22} {'mean':>12} {'leaps':>7} {'drift (days)':>14}")
    for name in names:
        s = summarize(np, name, args.start_year, args.end_year, args.reference)
        print(f"{name:<22} {s['mean']:>12.6f} {s['leap_years']:>7d} {s['drift']:>14.3f}")

    if args.out:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(figsize=(10, 4))
        years = np.arange(args.start_year, args.end_year + 1)
        for name in names:
            ref = reference_year(name) if args.reference is None else args.reference
            ax.plot(years, drift(np, year_lengths(np, name, args.start_year, args.end_year), ref), label=name, lw=1.0)
        ax.axhline(0.0, color="0.6", lw=0.8)
        ax.set_xlabel("year")
        ax.set_ylabel("drift (days)")
        ax.legend(frameon=False)
        fig.tight_layout()
        fig.savefig(args.out, dpi=150)
        print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
