from __future__ import annotations

import argparse


def main(argv: list[str] | None = None) -> int:
    """List breaks in range coverage. Exit status 1 when any are found."""
    from seoian.cli import add_context_args, context_from_args

    p = argparse.ArgumentParser(
        description="Report gaps and overlaps between consecutive SuperMonth ranges."
    )
    p.add_argument("--overlaps", action="store_true", help="Also list overlapping ranges")
    add_context_args(p)
    args = p.parse_args(argv)

    ctx = context_from_args(args)
    found = 0
    for g in ctx.index.gaps():
        if g.days < 0 and not args.overlaps:
            continue
        found += 1
        kind = "gap" if g.days > 0 else "overlap"
        a, b = g.before, g.after
        print(
            f"{kind:<8} {abs(g.days):3d} day(s)  "
            f"{a.seoian_year:04d}/{a.month_no:02d} ends {a.end}  ->  "
            f"{b.seoian_year:04d}/{b.month_no:02d} starts {b.start}"
        )

    if ctx.index.skipped:
        print(f"{ctx.index.skipped} incomplete range entries skipped")
    if not found:
        print("(no breaks)")
    return 1 if found else 0


if __name__ == "__main__":
    raise SystemExit(main())
