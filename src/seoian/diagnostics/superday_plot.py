#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List, Optional, Tuple

from seoian.engines.superday import bounds, ceil_minutes_to_30


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "seoian[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "seoian[diagnostics]"') from e


def build_series(np, year: int, zone_a: str, zone_b: str, *, rounded: bool) -> Tuple["np.ndarray", "np.ndarray"]:
    """Day-of-year and SuperDay length in hours for every date of ``year``."""
    d0 = date(year, 1, 1)
    n = (date(year + 1, 1, 1) - d0).days
    x = np.arange(1, n + 1, dtype=int)
    y = np.empty(n, dtype=float)
    for i in range(n):
        ms = bounds(d0 + timedelta(days=i), zone_a, zone_b).duration_ms
        y[i] = ceil_minutes_to_30(ms / 60000) / 60 if rounded else ms / 3_600_000
    return x, y


def main(argv: Optional[List[str]] = None) -> int:
    from seoian.context import DEFAULT_ZONE_EAST, DEFAULT_ZONE_WEST, resolve_zone

    p = argparse.ArgumentParser(description="Plot SuperDay length across a Gregorian year for zone pairs.")
    p.add_argument("--year", type=int, default=date.today().year)
    p.add_argument(
        "--pair",
        action="append",
        default=[],
        metavar="ZONE_A,ZONE_B",
        help=f"Zone pair (repeatable; default {DEFAULT_ZONE_EAST},{DEFAULT_ZONE_WEST})",
    )
    p.add_argument("--rounded", action="store_true", help="Round lengths up to 30 minutes, as displayed")
    p.add_argument("--outbase", default="superday_length", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    pairs = args.pair or [f"{DEFAULT_ZONE_EAST},{DEFAULT_ZONE_WEST}"]
    parsed = []
    for s in pairs:
        a, _, b = s.partition(",")
        if not b:
            raise SystemExit(f"--pair expects ZONE_A,ZONE_B, got {s!r}")
        parsed.append((resolve_zone(a.strip()), resolve_zone(b.strip())))

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 9,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel(f"Day of year {args.year} (Jan 1 = 1)")
    ax.set_ylabel("SuperDay length (hours)")
    ax.set_title("SuperDay length across the year")

    for a, b in parsed:
        x, y = build_series(np, args.year, a, b, rounded=args.rounded)
        ax.step(x, y, where="post", linewidth=1.4, label=f"{a} / {b}")
        print(f"{a} / {b}: min {y.min():.2f} h, max {y.max():.2f} h, mean {y.mean():.2f} h")

    ax.axhline(24.0, color="0.45", linewidth=0.8, linestyle="--")
    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=200)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
