#!/usr/bin/env python3
from __future__ import annotations

from typing import List, Optional, Tuple

import argparse

import jcal
from .new_years_table import nowruz


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "jcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "jcal[diagnostics]"') from e


def rolling_median(np, y, win: int = 11):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


def build_series(np, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    """Gregorian year of each Nowruz and its position, per Jalali year in the range."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    x = np.empty_like(years, dtype=float)
    y = np.empty_like(years, dtype=float)

    for i, Y in enumerate(years):
        d = nowruz(int(Y))
        x[i] = float(d.year)
        if metric == "doy":
            y[i] = float(d.day_of_year)
        elif metric == "march-day":
            march1 = jcal.validate(jcal.GREGORIAN, d.year, 3, 1)
            y[i] = float(d.epoch_day - march1.epoch_day + 1)
        else:
            raise ValueError("metric must be 'doy' or 'march-day'")

    return x, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of the Gregorian date of Nowruz over many years.")
    p.add_argument("--start-year", type=int, default=1200, help="First Jalali year.")
    p.add_argument("--end-year", type=int, default=1600, help="Last Jalali year.")
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=33, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="nowruz_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("march-day", "doy"),
        default="march-day",
        help="Y-axis metric (default: day of March).",
    )
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.minorticks_off()

    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Day of March")
    ax.set_title("Nowruz (1 Farvardin) on the 33-year arithmetic cycle")

    x, y = build_series(np, args.start_year, args.end_year, metric=args.metric)
    ax.scatter(x, y, s=12, marker="o", c="tab:blue", linewidths=0.0, alpha=0.45, label="1 Farvardin")

    if args.show_trend:
        y_med = rolling_median(np, y, win=int(args.trend_win))
        ax.plot(x, y_med, color="0.30", linewidth=1.8, alpha=0.95, label="rolling median")

    ax.legend(loc="upper right", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    plt.close(fig)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
