from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import seoian
from seoian.core.time import parse_ymd


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(ctx, N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        seo = seoian.canonical_date(ctx, d0)
        if not seo.is_valid:
            continue

        back = seoian.to_gregorian(ctx, seo.year, seo.month_no, seo.day)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("d0:", d0)
            print("seoian:", seo.label)
            print("back:", back)
            print("active:", [(r.seoian_year, r.month_no) for r in seoian.active_ranges(ctx, d0)])
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    from seoian.cli import add_context_args, context_from_args

    p = argparse.ArgumentParser(description="Random Gregorian -> Seoian -> Gregorian round-trip check.")
    p.add_argument("-N", type=int, default=5000)
    p.add_argument("--start", default=None, help="YYYY-MM-DD (default: first range start)")
    p.add_argument("--end", default=None, help="YYYY-MM-DD (default: last range end)")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--max-failures", type=int, default=10)
    add_context_args(p)
    args = p.parse_args(argv)

    ctx = context_from_args(args)
    rs = ctx.index.all_ranges()
    if not rs:
        print("(no ranges)")
        return 0
    start = parse_ymd(args.start) if args.start else rs[0].start
    end = parse_ymd(args.end) if args.end else max(r.end for r in rs)

    failures = roundtrip_test(ctx, args.N, start, end, args.seed, max_failures=args.max_failures)
    print(f"\n{args.N} samples in {start}..{end}: {failures} failure(s)")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
