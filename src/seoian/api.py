from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from .context import CalendarContext
from .core.errors import PreconditionError
from .core.time import end_of_week_sunday, parse_dmy, start_of_week_sunday
from .core.types import (
    DaySnapshot,
    EventDefinition,
    LanePlacement,
    MonthRange,
    Occurrence,
    SeoianDate,
    SuperDayBounds,
)
from .engines import collector as _collector
from .engines import lanes as _lanes
from .engines import superday as _superday
from .engines.converter import EPOCH, seoian_year_for_gregorian
from .engines.rules import occurrence_for_year
from .engines.snapshot import day_snapshot as _day_snapshot

DEFAULT_MAX_LANES = 3

# ============================================================
# Conversion
# ============================================================

def seoian_year(d: date) -> Optional[int]:
    return seoian_year_for_gregorian(d)

def canonical_date(ctx: CalendarContext, d: date) -> SeoianDate:
    return ctx.calendar.canonical_date(d)

def to_gregorian(ctx: CalendarContext, year: int, month_no: int, day: int) -> Optional[date]:
    return ctx.calendar.gregorian_from_seoian(year, month_no, day)

def active_ranges(ctx: CalendarContext, d: date) -> List[MonthRange]:
    return ctx.calendar.active_ranges(d)

def parse_jump(ctx: CalendarContext, text: str, *, mode: str = "seoian") -> Optional[date]:
    """
    Resolve ``DD/MM/YYYY`` typed into the jump box. ``mode`` is ``seoian`` or
    ``gregorian``; Gregorian dates before Barrel Day are rejected.
    """
    if mode == "seoian":
        return ctx.calendar.parse_label(text)
    if mode != "gregorian":
        raise PreconditionError(f"mode must be 'seoian' or 'gregorian', got {mode!r}")
    parts = parse_dmy(text)
    if parts is None:
        return None
    dd, mm, yyyy = parts
    try:
        d = date(yyyy, mm, dd)
    except ValueError:
        return None
    return d if d >= EPOCH else None

def format_jump(ctx: CalendarContext, d: date, *, mode: str = "seoian") -> str:
    if mode == "gregorian":
        return d.strftime("%d/%m/") + f"{d.year:04d}"
    seo = ctx.calendar.canonical_date(d)
    return seo.label if seo.year is not None else ""

# ============================================================
# Events
# ============================================================

def occurrence(defn: EventDefinition, year: int) -> Optional[date]:
    return occurrence_for_year(defn, year)

def occurrences(ctx: CalendarContext, start: date, end: date) -> List[Occurrence]:
    return _collector.collect(ctx.calendar, ctx.catalog, start, end, ctx.filters)

def week_layout(ctx: CalendarContext, d: date, *, max_lanes: int = DEFAULT_MAX_LANES) -> LanePlacement:
    """Lane placement for the Sunday-first week containing ``d``."""
    ws = start_of_week_sunday(d)
    we = end_of_week_sunday(d)
    return _lanes.place(occurrences(ctx, ws, we), ws, we, max_lanes)

def day_snapshot(ctx: CalendarContext, d: date) -> DaySnapshot:
    return _day_snapshot(ctx, d)

# ============================================================
# SuperDay
# ============================================================

def superday(ctx: CalendarContext, d: date) -> SuperDayBounds:
    return _superday.bounds(d, ctx.zone_east, ctx.zone_west)

def current_superday(ctx: CalendarContext, now: Optional[datetime] = None) -> SuperDayBounds:
    now = now or ctx.now()
    label = _superday.label_date_for_instant(now, ctx.zone_east, ctx.zone_west, ctx.display_zone)
    return _superday.bounds(label, ctx.zone_east, ctx.zone_west)
