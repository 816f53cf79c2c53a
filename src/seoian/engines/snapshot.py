from __future__ import annotations
from datetime import date
from typing import TYPE_CHECKING, List

from ..core.types import DaySnapshot, EventDefinition
from .rules import occurrence_for_year
from .superday import bounds

if TYPE_CHECKING:
    from ..context import CalendarContext


def gregorian_label(d: date) -> str:
    return d.strftime("%a %d %b %Y")


def special_defs_for_date(ctx: "CalendarContext", d: date) -> List[EventDefinition]:
    seo = ctx.calendar.canonical_date(d)
    if not seo.is_valid or not ctx.filters.special_days:
        return []
    return [
        defn for defn in ctx.catalog.for_day(seo.month_no, seo.day)
        if ctx.filters.allows(defn.category) and seo.year >= (defn.sy_start_year or 1)
    ]


def standard_defs_for_date(ctx: "CalendarContext", d: date) -> List[EventDefinition]:
    if not ctx.filters.standard_days:
        return []
    return [
        defn for defn in ctx.catalog.gy_defs
        if ctx.filters.allows(defn.category) and occurrence_for_year(defn, d.year) == d
    ]


def day_snapshot(ctx: "CalendarContext", d: date) -> DaySnapshot:
    """Everything the inspector shows for one civil date."""
    periods = (
        tuple(r.month_name for r in ctx.calendar.active_ranges(d))
        if ctx.filters.super_months else ()
    )
    specials = tuple(
        x for x in special_defs_for_date(ctx, d)
        if x.category == "special" and x.show_in_inspector
    )
    standards = tuple(
        x for x in standard_defs_for_date(ctx, d)
        if x.category == "standard" and x.show_in_inspector
    )
    return DaySnapshot(
        date=d,
        seoian=ctx.calendar.canonical_date(d),
        gregorian_label=gregorian_label(d),
        periods=periods,
        special_days=specials,
        standard_days=standards,
        superday=bounds(d, ctx.zone_east, ctx.zone_west),
    )
