"""
seoian.engines.ranges
---------------------
Read-only index over the externally supplied SuperMonth table.

The index performs no overlap or contiguity validation: overlap resolution
belongs to the converter, and gaps are only reported (see ``RangeIndex.gaps``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..core.types import MonthRange

YearMonth = Tuple[int, int]


@dataclass(frozen=True)
class RangeGap:
    """A break between two ranges that are adjacent in start order."""
    before: MonthRange
    after: MonthRange
    days: int  # > 0: uncovered days; < 0: overlapping days


@dataclass(frozen=True)
class RangeIndex:
    by_year: Mapping[int, Tuple[MonthRange, ...]]
    by_year_month: Mapping[YearMonth, MonthRange]
    skipped: int = 0

    def years(self) -> List[int]:
        return sorted(self.by_year)

    def for_year(self, year: Optional[int]) -> Tuple[MonthRange, ...]:
        if year is None:
            return ()
        return self.by_year.get(year, ())

    def ranges_for_years(self, years: Iterable[int]) -> List[MonthRange]:
        out: List[MonthRange] = []
        for y in years:
            out.extend(self.for_year(y))
        return out

    def get(self, year: int, month_no: int) -> Optional[MonthRange]:
        return self.by_year_month.get((year, month_no))

    def month_names(self) -> Dict[int, str]:
        """Month number -> first name seen for it, scanning years in order."""
        names: Dict[int, str] = {}
        for y in self.years():
            for r in self.by_year[y]:
                names.setdefault(r.month_no, r.month_name)
        return names

    def all_ranges(self) -> List[MonthRange]:
        out = self.ranges_for_years(self.years())
        out.sort(key=lambda r: (r.start, r.seoian_year, r.month_no))
        return out

    def gaps(self) -> List[RangeGap]:
        """
        Breaks in coverage between ranges consecutive by start date.

        Positive ``days`` means uncovered Gregorian days, negative means the
        ranges overlap. Whether a gap is intentional (intercalary days) or a
        data error is for the caller to decide.
        """
        out: List[RangeGap] = []
        rs = self.all_ranges()
        for a, b in zip(rs, rs[1:]):
            delta = (b.start - a.end).days - 1
            if delta != 0:
                out.append(RangeGap(before=a, after=b, days=delta))
        return out


def _coerce_date(v: Any) -> Optional[date]:
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str) and v.strip():
        try:
            return date.fromisoformat(v.strip()[:10])
        except ValueError:
            return None
    return None


def _coerce_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, str) and v.strip():
        try:
            return int(v.strip())
        except ValueError:
            return None
    return None


def coerce_range(rec: Any) -> Optional[MonthRange]:
    """
    Accept a MonthRange or a mapping with the table's field names
    (``seoianYear``, ``monthNo``, ``monthName``, ``start``, ``end``,
    ``extendedName``). Returns None when a required field is missing.
    """
    if isinstance(rec, MonthRange):
        return rec
    if not isinstance(rec, Mapping):
        return None
    year = _coerce_int(rec.get("seoianYear", rec.get("seoian_year")))
    month_no = _coerce_int(rec.get("monthNo", rec.get("month_no")))
    start = _coerce_date(rec.get("start"))
    end = _coerce_date(rec.get("end"))
    if year is None or month_no is None or start is None or end is None:
        return None
    name = rec.get("monthName", rec.get("month_name")) or f"Month {month_no}"
    ext = rec.get("extendedName", rec.get("extended_name")) or ""
    return MonthRange(
        seoian_year=year,
        month_no=month_no,
        month_name=str(name),
        start=start,
        end=end,
        extended_name=str(ext),
    )


def index_ranges(ranges: Iterable[Any]) -> RangeIndex:
    """
    Build the year and (year, month) lookups. Each year's ranges are sorted by
    start (ties by month number). Incomplete entries are skipped; when the same
    (year, month) appears twice the later entry wins the exact lookup.
    """
    by_year: Dict[int, List[MonthRange]] = {}
    by_ym: Dict[YearMonth, MonthRange] = {}
    skipped = 0

    for rec in ranges:
        r = coerce_range(rec)
        if r is None:
            skipped += 1
            continue
        by_year.setdefault(r.seoian_year, []).append(r)
        by_ym[(r.seoian_year, r.month_no)] = r

    frozen = {
        y: tuple(sorted(arr, key=lambda r: (r.start, r.month_no)))
        for y, arr in by_year.items()
    }
    return RangeIndex(
        by_year=MappingProxyType(frozen),
        by_year_month=MappingProxyType(by_ym),
        skipped=skipped,
    )
