from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys
from datetime import date

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


# ============================================================
# Shared options
# ============================================================

def add_context_args(p: argparse.ArgumentParser) -> None:
    """Options every data-backed command accepts."""
    from seoian.context import DEFAULT_ZONE_EAST, DEFAULT_ZONE_WEST

    p.add_argument("--data-dir", default=None, help="Directory holding the tables (default: $SEOIAN_DATA_DIR)")
    p.add_argument("--ranges", default=None, help="SuperMonth range table (JSON)")
    p.add_argument("--events", default=None, help="Event definition table (CSV)")
    p.add_argument("--east", default=DEFAULT_ZONE_EAST, help="First SuperDay timezone")
    p.add_argument("--west", default=DEFAULT_ZONE_WEST, help="Second SuperDay timezone")
    p.add_argument("--display-zone", default="UTC", help="Zone used for 'today' and 'now'")
    p.add_argument("--no-supermonths", action="store_true")
    p.add_argument("--no-special", action="store_true")
    p.add_argument("--no-standard", action="store_true")
    p.add_argument("-v", "--verbose", action="count", default=0)


def context_from_args(args: argparse.Namespace, *, require_tables: bool = True):
    from seoian.context import default_data_dir, load_context, make_context
    from seoian.core.types import Filters

    level = logging.WARNING - 10 * min(int(args.verbose), 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not require_tables and args.ranges is None and args.data_dir is None and default_data_dir() is None:
        return make_context([], zone_east=args.east, zone_west=args.west, display_zone=args.display_zone)

    return load_context(
        args.data_dir,
        ranges_path=args.ranges,
        events_path=args.events,
        zone_east=args.east,
        zone_west=args.west,
        display_zone=args.display_zone,
        filters=Filters(
            super_months=not args.no_supermonths,
            special_days=not args.no_special,
            standard_days=not args.no_standard,
        ),
    )


def _date_or_today(ctx, s: str | None) -> date:
    return _parse_ymd(s) if s else ctx.today()


def print_superday(b) -> None:
    from seoian.engines.superday import duration_hhmm_ceil30

    fmt = "%a %d %b %Y %H:%M"
    print(f"  Eastern TZ : {b.east_zone}")
    print(f"  Western TZ : {b.west_zone}")
    print(f"  Start      : {b.start.strftime(fmt)}")
    print(f"  End        : {b.end.strftime(fmt)}")
    print(f"  Length     : {duration_hhmm_ceil30(b.duration_ms)}")


# ============================================================
# Commands
# ============================================================

def cmd_day(argv: list[str]) -> int:
    import seoian

    p = argparse.ArgumentParser(prog="seoian day", description="Gregorian -> Seoian day snapshot")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (default: today in the display zone)")
    add_context_args(p)
    args = p.parse_args(argv)

    ctx = context_from_args(args)
    snap = seoian.day_snapshot(ctx, _date_or_today(ctx, args.date))

    print(f"{snap.seoian.label}  |  {snap.gregorian_label}")
    if snap.periods:
        print("Periods:")
        for name in snap.periods:
            print(f"  {name}")
    for title, defs in (("Special days:", snap.special_days), ("Standard days:", snap.standard_days)):
        if not defs:
            continue
        print(title)
        for d in defs:
            print(f"  {d.title}" + (f"  ({d.notes})" if d.notes else ""))
    print("SuperDay:")
    print_superday(snap.superday)
    return 0


def cmd_to_greg(argv: list[str]) -> int:
    import seoian

    p = argparse.ArgumentParser(prog="seoian to-greg", description="Seoian DD/MM/YYYY -> Gregorian date")
    p.add_argument("label", help="DD/MM/YYYY")
    add_context_args(p)
    args = p.parse_args(argv)

    ctx = context_from_args(args)
    d = seoian.parse_jump(ctx, args.label, mode="seoian")
    if d is None:
        print(f"{args.label}: no Gregorian date", file=sys.stderr)
        return 1
    print(d.isoformat())
    return 0


def cmd_events(argv: list[str]) -> int:
    import seoian

    p = argparse.ArgumentParser(prog="seoian events", description="Ordered occurrences in a date window")
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("end", help="YYYY-MM-DD (inclusive)")
    add_context_args(p)
    args = p.parse_args(argv)

    ctx = context_from_args(args)
    for o in seoian.occurrences(ctx, _parse_ymd(args.start), _parse_ymd(args.end)):
        span = o.start.isoformat() if o.start == o.end else f"{o.start.isoformat()}..{o.end.isoformat()}"
        print(f"{o.kind:<10}  {span:<22}  {o.label}")
    return 0


def cmd_week(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="seoian week", description="Lane layout of the Sunday-first week containing DATE")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (default: today)")
    p.add_argument("--lanes", type=int, default=3)
    add_context_args(p)
    args = p.parse_args(argv)

    ctx = context_from_args(args)
    from seoian.diagnostics.pretty_month import print_week

    print_week(ctx, _date_or_today(ctx, args.date), max_lanes=args.lanes)
    return 0


def cmd_superday(argv: list[str]) -> int:
    import seoian

    p = argparse.ArgumentParser(prog="seoian superday", description="SuperDay bounds for a date label")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (default: the SuperDay containing now)")
    add_context_args(p)
    args = p.parse_args(argv)

    ctx = context_from_args(args, require_tables=False)
    b = seoian.superday(ctx, _parse_ymd(args.date)) if args.date else seoian.current_superday(ctx)
    print_superday(b)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `seoian YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="seoian", description="Seoian calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Seoian day snapshot", add_help=False)
    sub.add_parser("to-greg", help="Seoian DD/MM/YYYY -> Gregorian", add_help=False)
    sub.add_parser("events", help="Ordered occurrences in a date window", add_help=False)
    sub.add_parser("week", help="Lane layout for one week", add_help=False)
    sub.add_parser("superday", help="SuperDay bounds", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print a SuperMonth grid (diagnostics)", add_help=False)
    sub.add_parser("year-table", help="Print SuperMonth start dates per Seoian year (diagnostics)", add_help=False)
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "gaps", "superday-plot"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "to-greg": cmd_to_greg,
        "events": cmd_events,
        "week": cmd_week,
        "superday": cmd_superday,
    }
    if args.cmd in commands:
        from seoian.core.errors import SeoianError
        try:
            return commands[args.cmd](rest)
        except (SeoianError, FileNotFoundError) as e:
            print(f"seoian {args.cmd}: {e}", file=sys.stderr)
            return 2

    if args.cmd == "pretty-month":
        return _run_module_main("seoian.diagnostics.pretty_month", rest)

    if args.cmd == "year-table":
        return _run_module_main("seoian.diagnostics.year_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "seoian.diagnostics.round_trip",
            "gaps": "seoian.diagnostics.gaps",
            "superday-plot": "seoian.diagnostics.superday_plot",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
