"""
seoian.engines.rules
--------------------
Yearly occurrences of Gregorian-anchored event definitions.

All arithmetic is on zone-free civil dates, so results never move with the
viewer's timezone. Weekdays arrive as Sunday=0..Saturday=6 and are converted
once via ``sunday0_to_python``.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Callable, Dict, List, Optional

from ..core.time import last_day_of_month, sunday0_to_python
from ..core.types import EventDefinition


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (Meeus/Jones/Butcher)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31  # 3=March, 4=April
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


def _safe_date(year: int, month: Optional[int], day: Optional[int]) -> Optional[date]:
    if not month or not day:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _fixed(defn: EventDefinition, year: int) -> Optional[date]:
    return _safe_date(year, defn.gy_month, defn.gy_day)


def _nth_dow(defn: EventDefinition, year: int) -> Optional[date]:
    wd = sunday0_to_python(defn.weekday)
    first = _safe_date(year, defn.gy_month, 1)
    if first is None or wd is None or not defn.nth or defn.nth < 1:
        return None
    shift = (wd - first.weekday()) % 7
    d = first + timedelta(days=shift + 7 * (defn.nth - 1))
    # spilled into the next month: no such occurrence this year
    if d.month != first.month:
        return None
    return d


def _last_dow(defn: EventDefinition, year: int) -> Optional[date]:
    wd = sunday0_to_python(defn.weekday)
    if wd is None or _safe_date(year, defn.gy_month, 1) is None:
        return None
    last = last_day_of_month(year, defn.gy_month)
    return last - timedelta(days=(last.weekday() - wd) % 7)


def _last_dow_before_date(defn: EventDefinition, year: int) -> Optional[date]:
    wd = sunday0_to_python(defn.weekday)
    anchor = _safe_date(year, defn.gy_month, defn.gy_day)
    if anchor is None or wd is None:
        return None
    start = anchor - timedelta(days=1)
    return start - timedelta(days=(start.weekday() - wd) % 7)


def _easter(defn: EventDefinition, year: int) -> Optional[date]:
    return easter_sunday(year) + timedelta(days=defn.offset_days or 0)


RULES: Dict[str, Callable[[EventDefinition, int], Optional[date]]] = {
    "GY_FIXED": _fixed,
    "GY_NTH_DOW": _nth_dow,
    "GY_LAST_DOW": _last_dow,
    "GY_LAST_DOW_BEFORE_DATE": _last_dow_before_date,
    "GY_EASTER": _easter,
}


def occurrence_for_year(defn: EventDefinition, year: int) -> Optional[date]:
    """
    The single occurrence of ``defn`` in Gregorian ``year``, or None when the
    rule is not yet in effect, lacks parameters, or has no date that year.
    """
    if year < (defn.gregorian_start_year or 1):
        return None
    rule = RULES.get(defn.anchor_type.upper())
    if rule is None:
        return None
    try:
        return rule(defn, year)
    except (OverflowError, ValueError):
        # years or offsets outside date.min .. date.max
        return None


def occurrences_between(defn: EventDefinition, start: date, end: date) -> List[date]:
    out: List[date] = []
    for y in range(start.year, end.year + 1):
        d = occurrence_for_year(defn, y)
        if d is not None and start <= d <= end:
            out.append(d)
    return out
