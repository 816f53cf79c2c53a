"""
seoian.engines.converter
------------------------
Bidirectional Gregorian <-> Seoian mapping over a RangeIndex.

The Seoian year turns over on Gregorian January 19 ("Barrel Day"); month
boundaries come entirely from the range table, which may contain overlaps
near transitions. Overlaps are resolved by "latest start wins", ties by the
higher month number.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional

from ..core.time import format_dmy, parse_dmy
from ..core.types import NO_DATE, MonthRange, SeoianDate
from .ranges import RangeIndex

# Barrel Day: Seoian 01/01/0001
EPOCH = date(1994, 1, 19)
EPOCH_MONTH = 1
EPOCH_DAY = 19
EPOCH_YEAR_OFFSET = 1993


def seoian_year_for_gregorian(d: date) -> Optional[int]:
    """Seoian year containing ``d``, or None before Barrel Day."""
    if d < EPOCH:
        return None
    cut = date(d.year, EPOCH_MONTH, EPOCH_DAY)
    sy = d.year - EPOCH_YEAR_OFFSET if d >= cut else d.year - EPOCH_YEAR_OFFSET - 1
    if sy < 1:
        return None
    return sy


class SeoianCalendar:
    """
    Stateless converter bound to one immutable RangeIndex.
    """
    def __init__(self, index: RangeIndex):
        self.index = index

    # ---------------------------------------------------------
    # Membership
    # ---------------------------------------------------------

    def _covering(self, d: date) -> List[MonthRange]:
        sy = seoian_year_for_gregorian(d)
        if sy is None:
            return []
        return [r for r in self.index.ranges_for_years((sy - 1, sy, sy + 1)) if r.contains(d)]

    def canonical_range(self, d: date) -> Optional[MonthRange]:
        candidates = self._covering(d)
        if not candidates:
            return None
        return max(candidates, key=lambda r: (r.start, r.month_no))

    def active_ranges(self, d: date) -> List[MonthRange]:
        """Every range covering ``d`` (not only the canonical one), by month number."""
        seen = set()
        out: List[MonthRange] = []
        for r in self._covering(d):
            key = (r.seoian_year, r.month_no)
            if key in seen:
                continue
            seen.add(key)
            out.append(r)
        out.sort(key=lambda r: (r.month_no, r.start))
        return out

    # ---------------------------------------------------------
    # Forward: Gregorian -> Seoian
    # ---------------------------------------------------------

    def seoian_year(self, d: date) -> Optional[int]:
        return seoian_year_for_gregorian(d)

    def canonical_date(self, d: date) -> SeoianDate:
        r = self.canonical_range(d)
        if r is None:
            return NO_DATE
        day = (d - r.start).days + 1
        return SeoianDate(
            year=r.seoian_year,
            month_no=r.month_no,
            day=day,
            label=format_dmy(day, r.month_no, r.seoian_year),
            month_name=r.month_name,
            range=r,
        )

    # ---------------------------------------------------------
    # Inverse: Seoian -> Gregorian
    # ---------------------------------------------------------

    def gregorian_from_seoian(self, year: int, month_no: int, day: int) -> Optional[date]:
        r = self.index.get(year, month_no)
        if r is None or day < 1:
            return None
        d = r.start + timedelta(days=day - 1)
        if d > r.end:
            return None
        return d

    def parse_label(self, label: str) -> Optional[date]:
        """``DD/MM/YYYY`` in Seoian terms -> Gregorian date, or None."""
        parts = parse_dmy(label)
        if parts is None:
            return None
        dd, mm, yyyy = parts
        return self.gregorian_from_seoian(yyyy, mm, dd)

    # ---------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------

    def month_start_before(self, d: date) -> Optional[date]:
        """Start of the SuperMonth preceding the canonical month of ``d``."""
        r = self.canonical_range(d)
        if r is None or r.start == date.min:
            return None
        prev = self.canonical_range(r.start - timedelta(days=1))
        return prev.start if prev is not None else None

    def month_start_after(self, d: date) -> Optional[date]:
        """Start of the SuperMonth following the canonical month of ``d``."""
        r = self.canonical_range(d)
        if r is None or r.end == date.max:
            return None
        nxt = self.canonical_range(r.end + timedelta(days=1))
        return nxt.start if nxt is not None else None
