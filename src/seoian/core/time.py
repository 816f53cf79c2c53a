from __future__ import annotations
from datetime import date, timedelta
from typing import Iterator, Optional


def pad2(n: int) -> str:
    return f"{n:02d}"

def pad4(n: int) -> str:
    return f"{n:04d}"

def parse_ymd(s: str) -> date:
    """Parse an ISO civil date ``YYYY-MM-DD``."""
    y, m, d = map(int, s.strip().split("-"))
    return date(y, m, d)

def parse_dmy(s: str) -> Optional[tuple[int, int, int]]:
    """
    Split a ``DD/MM/YYYY`` string into ``(day, month, year)``.

    Returns None unless the text is exactly ten characters with three
    non-zero numeric fields. No calendar validation is done here: the same
    shape is used for Gregorian and Seoian input.
    """
    s = s.strip()
    if len(s) != 10:
        return None
    parts = s.split("/")
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return None
    dd, mm, yyyy = (int(p) for p in parts)
    if not dd or not mm or not yyyy:
        return None
    return dd, mm, yyyy

def format_dmy(day: int, month: int, year: int) -> str:
    return f"{pad2(day)}/{pad2(month)}/{pad4(year)}"

def sunday0_to_python(w: Optional[int]) -> Optional[int]:
    """
    Convert a Sunday=0..Saturday=6 weekday to Python's Monday=0..Sunday=6.
    Out-of-range or missing values map to None.
    """
    if w is None or not 0 <= w <= 6:
        return None
    return (w + 6) % 7

def python_to_sunday0(w: int) -> int:
    return (w + 1) % 7

def start_of_week_sunday(d: date) -> date:
    return d - timedelta(days=python_to_sunday0(d.weekday()))

def end_of_week_sunday(d: date) -> date:
    return start_of_week_sunday(d) + timedelta(days=6)

def daterange(start: date, end: date) -> Iterator[date]:
    """Inclusive day iterator; empty when ``end < start``."""
    d = start
    while d <= end:
        yield d
        if d == end:
            break
        d += timedelta(days=1)

def last_day_of_month(year: int, month: int) -> date:
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)
