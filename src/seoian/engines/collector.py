"""
seoian.engines.collector
------------------------
Merges SuperMonth spans, Seoian-anchored special days and Gregorian-rule
standard days into one deterministically ordered occurrence list for an
inclusive date window.
"""

from __future__ import annotations

from datetime import date
from typing import List, Tuple

from ..core.time import daterange, pad2, pad4
from ..core.types import Filters, Occurrence
from .catalog import EventCatalog
from .converter import SeoianCalendar
from .rules import occurrence_for_year

KIND_PRIORITY = {"supermonth": 0, "special": 1, "standard": 2}


def kind_priority(kind: str) -> int:
    return KIND_PRIORITY.get(kind, 9)


def occurrence_order(o: Occurrence) -> Tuple[int, int, int, str, str, str]:
    """Total order: kind, rank, sequence, start (ISO), label, id."""
    return (kind_priority(o.kind), o.rank, o.sequence, o.start.isoformat(), o.label, o.id)


def supermonth_occurrences(cal: SeoianCalendar, start: date, end: date) -> List[Occurrence]:
    sy_a = cal.seoian_year(start) or 1
    sy_b = cal.seoian_year(end)
    if sy_b is None:
        return []
    out: List[Occurrence] = []
    for r in cal.index.ranges_for_years(range(sy_a - 1, sy_b + 2)):
        if r.end < start or r.start > end:
            continue
        out.append(Occurrence(
            id=f"SM_{r.seoian_year}_{pad2(r.month_no)}",
            label=r.month_name,
            notes=r.extended_name,
            start=r.start,
            end=r.end,
            kind="supermonth",
            rank=0,
            sequence=r.month_no,
        ))
    return out


def special_occurrences(
    cal: SeoianCalendar, catalog: EventCatalog, start: date, end: date, filters: Filters
) -> List[Occurrence]:
    out: List[Occurrence] = []
    if not filters.special_days:
        return out
    for d in daterange(start, end):
        seo = cal.canonical_date(d)
        if not seo.is_valid:
            continue
        for defn in catalog.for_day(seo.month_no, seo.day):
            if not defn.show_on_calendar or defn.category != "special":
                continue
            if seo.year < (defn.sy_start_year or 1):
                continue
            out.append(Occurrence(
                id=f"{defn.id}_{pad4(seo.year)}",
                label=defn.title,
                notes=defn.notes,
                start=d,
                end=d,
                kind="special",
                rank=defn.rank,
                sequence=defn.sequence,
                show_notes_on_calendar=defn.show_notes_on_calendar,
            ))
    return out


def standard_occurrences(
    catalog: EventCatalog, start: date, end: date, filters: Filters
) -> List[Occurrence]:
    out: List[Occurrence] = []
    if not filters.standard_days:
        return out
    for y in range(start.year, end.year + 1):
        for defn in catalog.gy_defs:
            if not defn.show_on_calendar or defn.category != "standard":
                continue
            occ = occurrence_for_year(defn, y)
            if occ is None or occ < start or occ > end:
                continue
            out.append(Occurrence(
                id=f"{defn.id}_{pad4(y)}",
                label=defn.title,
                notes=defn.notes,
                start=occ,
                end=occ,
                kind="standard",
                rank=defn.rank,
                sequence=defn.sequence,
                show_notes_on_calendar=defn.show_notes_on_calendar,
            ))
    return out


def collect(
    cal: SeoianCalendar,
    catalog: EventCatalog,
    start: date,
    end: date,
    filters: Filters = Filters(),
) -> List[Occurrence]:
    """All occurrences touching ``[start, end]``, sorted by ``occurrence_order``."""
    if end < start:
        return []
    events: List[Occurrence] = []
    if filters.super_months:
        events.extend(supermonth_occurrences(cal, start, end))
    events.extend(special_occurrences(cal, catalog, start, end, filters))
    events.extend(standard_occurrences(catalog, start, end, filters))
    events.sort(key=occurrence_order)
    return events
