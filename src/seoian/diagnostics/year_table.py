from __future__ import annotations

from datetime import date
import argparse
from pathlib import Path
from typing import Dict, List, Optional


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def month_columns(ctx, names: Optional[Dict[int, str]] = None) -> List[int]:
    nos = sorted({r.month_no for r in ctx.index.all_ranges()})
    if names:
        nos = sorted(set(nos) | set(names))
    return nos


def main(argv: list[str] | None = None) -> int:
    from seoian.cli import add_context_args, context_from_args
    from seoian.context import CONFIG_FILE, default_data_dir
    from seoian.tables import load_month_config

    p = argparse.ArgumentParser(
        description="Print the Gregorian start date of every SuperMonth, one row per Seoian year."
    )
    p.add_argument("--from-year", type=int, default=None)
    p.add_argument("--to-year", type=int, default=None)
    p.add_argument("--config", default=None, help="SuperMonth config table (monthNo -> monthName)")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    add_context_args(p)
    args = p.parse_args(argv)

    ctx = context_from_args(args)

    config = args.config
    base = Path(args.data_dir) if args.data_dir else default_data_dir()
    if config is None and base is not None and (base / CONFIG_FILE).exists():
        config = base / CONFIG_FILE
    names = load_month_config(config) if config is not None else ctx.index.month_names()

    years = ctx.index.years()
    if not years:
        print("(no ranges)")
        return 0
    Y0 = args.from_year if args.from_year is not None else years[0]
    Y1 = args.to_year if args.to_year is not None else years[-1]
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    cols = month_columns(ctx, names)
    w = 10 if args.dates == "iso" else 5
    headers = ["Year"] + [f"{n:02d}" for n in cols]
    colw = [5] + [w] * len(cols)
    line = "  ".join(h.ljust(cw) for h, cw in zip(headers, colw))
    print("  ".join(f"{n:02d}={names.get(n, '?')}" for n in cols))
    print()
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [f"{Y:04d}".ljust(colw[0])]
        for n in cols:
            r = ctx.index.get(Y, n)
            row.append((fmt(r.start) if r is not None else "").ljust(w))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
