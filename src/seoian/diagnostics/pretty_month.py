from __future__ import annotations

from datetime import date, timedelta
import argparse

import seoian
from seoian.core.time import end_of_week_sunday, parse_ymd, start_of_week_sunday
from seoian.engines import lanes


DOW = ["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"]
W = 12


def dow_header() -> str:
    return " ".join(d.ljust(W) for d in DOW)


def cell(text: str, w: int = W) -> str:
    return text[:w].ljust(w)


def bar_row(placed, lane: int) -> str:
    cols = [""] * 7
    for p in placed:
        if p.lane != lane:
            continue
        width = (p.col_end - p.col_start + 1) * (W + 1) - 1
        text = f"[{p.occurrence.label}]"[:width].ljust(width, "-")
        cols[p.col_start] = text
        for c in range(p.col_start + 1, p.col_end + 1):
            cols[c] = None
    return " ".join(c if c else " " * W for c in cols if c is not None)


def print_week(ctx, d: date, *, max_lanes: int = 3, month_range=None) -> None:
    ws = start_of_week_sunday(d)
    we = end_of_week_sunday(d)
    all_occ = seoian.occurrences(ctx, ws, we)
    layout = lanes.place(all_occ, ws, we, max_lanes)

    for lane in range(max_lanes):
        row = bar_row(layout.placed, lane)
        if row.strip():
            print(row)

    labels, gdates, more = [], [], []
    for i in range(7):
        di = ws + timedelta(days=i)
        seo = seoian.canonical_date(ctx, di)
        out = month_range is not None and not month_range.contains(di)
        labels.append(cell(("(" + seo.label + ")") if out else seo.label))
        gdates.append(cell(di.strftime("%d %b %Y")))
        n = layout.overflow_by_day.get(di, 0)
        more.append(cell(f"+{n} more" if n else ""))
    print(" ".join(labels))
    print(" ".join(gdates))
    if any(m.strip() for m in more):
        print(" ".join(more))
    print()


def print_month(ctx, d: date, *, max_lanes: int = 3) -> int:
    seo = seoian.canonical_date(ctx, d)
    r = seo.range
    if r is None:
        print(f"{d}: no Seoian date for this range.")
        return 1

    print(f"{r.month_name}, {r.seoian_year:04d}   ({r.start} .. {r.end})")
    print(dow_header())
    print("-" * len(dow_header()))

    ws = start_of_week_sunday(r.start)
    last = end_of_week_sunday(r.end)
    while ws <= last:
        print_week(ctx, ws, max_lanes=max_lanes, month_range=r)
        ws += timedelta(days=7)
    return 0


def main(argv: list[str] | None = None) -> int:
    from seoian.cli import add_context_args, context_from_args

    p = argparse.ArgumentParser(
        description="Print the SuperMonth containing a date as a Sunday-first grid with all-day lanes."
    )
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (default: today)")
    p.add_argument("--lanes", type=int, default=3)
    p.add_argument("--next", type=int, default=0, help="Step this many SuperMonths forward (negative: back)")
    add_context_args(p)
    args = p.parse_args(argv)

    ctx = context_from_args(args)
    d = parse_ymd(args.date) if args.date else ctx.today()

    step = ctx.calendar.month_start_after if args.next > 0 else ctx.calendar.month_start_before
    for _ in range(abs(args.next)):
        nd = step(d)
        if nd is None:
            break
        d = nd

    return print_month(ctx, d, max_lanes=args.lanes)


if __name__ == "__main__":
    raise SystemExit(main())
