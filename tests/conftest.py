# tests/conftest.py

from __future__ import annotations

import json
from datetime import date, timedelta
from typing import List

import pytest

from seoian.context import make_context
from seoian.core.types import EventDefinition, MonthRange


def month_name(n: int) -> str:
    return f"SuperMonth {n:02d}"


def build_ranges(first_year: int = 1, last_year: int = 40) -> List[MonthRange]:
    """
    Synthetic table: each Seoian year runs Jan 19 -> Jan 18, months 1..12 are
    28 days long and month 13 takes the remainder.
    """
    out: List[MonthRange] = []
    for y in range(first_year, last_year + 1):
        start = date(1993 + y, 1, 19)
        year_end = date(1994 + y, 1, 19) - timedelta(days=1)
        for m in range(1, 14):
            end = start + timedelta(days=27) if m < 13 else year_end
            out.append(MonthRange(seoian_year=y, month_no=m, month_name=month_name(m), start=start, end=end))
            start = end + timedelta(days=1)
    return out


def range_records(ranges: List[MonthRange]) -> list:
    return [
        {
            "seoianYear": r.seoian_year,
            "monthNo": r.month_no,
            "monthName": r.month_name,
            "start": r.start.isoformat(),
            "end": r.end.isoformat(),
        }
        for r in ranges
    ]


EVENTS_CSV = """ID,Title,Notes,Anchor_Type,Category,SY_Month,SY_Day,SY_Start_Year,Gergorian_First_Year,GY_Month,GY_Day,Nth,Weekday,Offset_Days,Rank,Sequence,ShowOnCalendar,ShowInInspector
BD,Barrel Day,Start of the year,SY,,1,1,,,,,,,,,1,,
LATE,Late Rite,,SY,special,1,1,40,,,,,,,,,,
NY,New Year,,GY_FIXED,,,,,,1,1,,,,,,,
GF,Good Friday,,GY_EASTER,standard,,,,,,,,,-2,,,,
MD,Mothers Day,,GY_NTH_DOW,,,,,2000,5,,2,0,,,,,
HIDE,Hidden Day,,GY_FIXED,,,,,,1,15,,,,,,false,false
,No Id,,GY_FIXED,,,,,,2,2,,,,,,,
"""


@pytest.fixture
def ranges() -> List[MonthRange]:
    return build_ranges()


@pytest.fixture
def events() -> List[EventDefinition]:
    from seoian.tables import parse_events_csv
    return parse_events_csv(EVENTS_CSV)


@pytest.fixture
def ctx(ranges, events):
    return make_context(ranges, events, zone_east="America/Phoenix", zone_west="Australia/Brisbane")


@pytest.fixture
def data_dir(tmp_path, ranges):
    (tmp_path / "supermonths_ranges_fallback.json").write_text(json.dumps(range_records(ranges)), encoding="utf-8")
    (tmp_path / "AFdS_Special_Days.csv").write_text(EVENTS_CSV, encoding="utf-8")
    (tmp_path / "supermonths_config.json").write_text(
        json.dumps([{"monthNo": n, "monthName": month_name(n)} for n in range(1, 14)]),
        encoding="utf-8",
    )
    return tmp_path
