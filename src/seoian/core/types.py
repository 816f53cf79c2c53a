from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal, Mapping, Optional, Tuple

AnchorType = Literal[
    "SY",
    "GY_FIXED",
    "GY_NTH_DOW",
    "GY_LAST_DOW",
    "GY_LAST_DOW_BEFORE_DATE",
    "GY_EASTER",
]
Category = Literal["special", "standard"]
Kind = Literal["supermonth", "special", "standard"]

NO_LABEL = "—"

@dataclass(frozen=True)
class MonthRange:
    seoian_year: int
    month_no: int
    month_name: str
    start: date
    end: date
    extended_name: str = ""

    def contains(self, d: date) -> bool:
        return self.start <= d <= self.end

@dataclass(frozen=True)
class EventDefinition:
    id: str
    title: str
    notes: str = ""
    category: Category = "special"
    anchor_type: str = "SY"
    # SY anchor
    sy_month: Optional[int] = None
    sy_day: Optional[int] = None
    sy_start_year: Optional[int] = None
    # GY anchors
    gy_month: Optional[int] = None
    gy_day: Optional[int] = None
    nth: Optional[int] = None
    weekday: Optional[int] = None  # 0=Sun..6=Sat
    offset_days: Optional[int] = None
    gregorian_start_year: Optional[int] = None
    rank: int = 1
    sequence: int = 9999
    show_on_calendar: bool = True
    show_in_inspector: bool = True
    show_notes_on_calendar: bool = False
    all_day: bool = True

    @property
    def is_gregorian(self) -> bool:
        return self.anchor_type.startswith("GY_")

@dataclass(frozen=True)
class SeoianDate:
    year: Optional[int]
    month_no: Optional[int]
    day: Optional[int]
    label: str
    month_name: Optional[str] = None
    range: Optional[MonthRange] = None

    @property
    def is_valid(self) -> bool:
        return self.month_no is not None and self.day is not None

NO_DATE = SeoianDate(year=None, month_no=None, day=None, label=NO_LABEL)

@dataclass(frozen=True)
class Occurrence:
    id: str
    label: str
    notes: str
    start: date
    end: date
    kind: Kind
    rank: int
    sequence: int
    show_notes_on_calendar: bool = False

@dataclass(frozen=True)
class PlacedOccurrence:
    occurrence: Occurrence
    lane: int
    col_start: int  # 0..6 inclusive
    col_end: int

@dataclass(frozen=True)
class LanePlacement:
    placed: Tuple[PlacedOccurrence, ...]
    overflow_by_day: Mapping[date, int]
    outside: Tuple[Occurrence, ...] = ()

@dataclass(frozen=True)
class SuperDayBounds:
    east_zone: str
    west_zone: str
    start: datetime
    end: datetime
    duration_ms: int
    identical: bool = False

@dataclass(frozen=True)
class DaySnapshot:
    date: date
    seoian: SeoianDate
    gregorian_label: str
    periods: Tuple[str, ...]
    special_days: Tuple[EventDefinition, ...]
    standard_days: Tuple[EventDefinition, ...]
    superday: SuperDayBounds

@dataclass(frozen=True)
class Filters:
    super_months: bool = True
    special_days: bool = True
    standard_days: bool = True

    def allows(self, category: str) -> bool:
        c = category.lower()
        if c == "special":
            return self.special_days
        if c == "standard":
            return self.standard_days
        return True
