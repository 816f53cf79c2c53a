# tests/test_api.py

from datetime import date, datetime, timezone
from unittest.mock import patch

import pytest

import seoian
from seoian.context import CalendarContext
from seoian.core.types import NO_LABEL, Filters


def test_seoian_year():
    assert seoian.seoian_year(date(2024, 1, 19)) == 31
    assert seoian.seoian_year(date(1994, 1, 18)) is None


def test_conversion_round_trip(ctx):
    seo = seoian.canonical_date(ctx, date(2024, 1, 19))
    assert seo.label == "01/01/0031"
    assert seoian.to_gregorian(ctx, 31, 1, 1) == date(2024, 1, 19)
    assert seoian.to_gregorian(ctx, 31, 1, 29) is None
    assert [r.month_no for r in seoian.active_ranges(ctx, date(2024, 1, 19))] == [1]


def test_parse_jump_seoian(ctx):
    assert seoian.parse_jump(ctx, "01/01/0031") == date(2024, 1, 19)
    assert seoian.parse_jump(ctx, " 28/01/0031 ") == date(2024, 2, 15)
    assert seoian.parse_jump(ctx, "01/14/0031") is None
    assert seoian.parse_jump(ctx, "1/1/0031") is None


def test_parse_jump_gregorian(ctx):
    assert seoian.parse_jump(ctx, "19/01/2024", mode="gregorian") == date(2024, 1, 19)
    assert seoian.parse_jump(ctx, "19/01/1994", mode="gregorian") == date(1994, 1, 19)
    assert seoian.parse_jump(ctx, "18/01/1994", mode="gregorian") is None
    assert seoian.parse_jump(ctx, "31/02/2024", mode="gregorian") is None
    assert seoian.parse_jump(ctx, "2024-01-19", mode="gregorian") is None


def test_parse_jump_unknown_mode(ctx):
    with pytest.raises(seoian.PreconditionError):
        seoian.parse_jump(ctx, "01/01/0031", mode="julian")


def test_format_jump(ctx):
    assert seoian.format_jump(ctx, date(2024, 1, 19)) == "01/01/0031"
    assert seoian.format_jump(ctx, date(2024, 1, 19), mode="gregorian") == "19/01/2024"
    assert seoian.format_jump(ctx, date(1990, 1, 1)) == ""


def test_occurrence_passthrough(events):
    gf = next(d for d in events if d.id == "GF")
    assert seoian.occurrence(gf, 2025) == date(2025, 4, 18)


def test_occurrences_use_context_filters(ctx):
    window = (date(2024, 1, 14), date(2024, 1, 20))
    assert [o.id for o in seoian.occurrences(ctx, *window)] == ["SM_31_01", "SM_30_13", "BD_0031"]
    quiet = ctx.tweak(filters=Filters(super_months=False))
    assert [o.id for o in seoian.occurrences(quiet, *window)] == ["BD_0031"]


def test_week_layout(ctx):
    layout = seoian.week_layout(ctx, date(2024, 1, 17))
    got = [(p.occurrence.id, p.lane, p.col_start, p.col_end) for p in layout.placed]
    assert got == [
        ("SM_31_01", 0, 5, 6),
        ("SM_30_13", 0, 0, 4),
        ("BD_0031", 1, 5, 5),
    ]
    assert layout.overflow_by_day == {}


def test_week_layout_overflow(ctx):
    layout = seoian.week_layout(ctx, date(2024, 1, 17), max_lanes=1)
    assert [p.occurrence.id for p in layout.placed] == ["SM_31_01", "SM_30_13"]
    assert layout.overflow_by_day == {date(2024, 1, 19): 1}


def test_day_snapshot_on_barrel_day(ctx):
    snap = seoian.day_snapshot(ctx, date(2024, 1, 19))
    assert snap.seoian.label == "01/01/0031"
    assert snap.gregorian_label == "Fri 19 Jan 2024"
    assert snap.periods == ("SuperMonth 01",)
    assert [d.id for d in snap.special_days] == ["BD"]
    assert snap.standard_days == ()
    assert snap.superday.duration_ms == 41 * 3_600_000


def test_day_snapshot_respects_start_years_and_visibility(ctx):
    assert [d.id for d in seoian.day_snapshot(ctx, date(2033, 1, 19)).special_days] == ["BD", "LATE"]
    assert [d.id for d in seoian.day_snapshot(ctx, date(2024, 1, 1)).standard_days] == ["NY"]
    # hidden from the inspector
    assert seoian.day_snapshot(ctx, date(2024, 1, 15)).standard_days == ()


def test_day_snapshot_filters(ctx):
    off = ctx.tweak(filters=Filters(False, False, False))
    snap = seoian.day_snapshot(off, date(2024, 1, 19))
    assert snap.periods == ()
    assert snap.special_days == ()
    assert snap.seoian.label == "01/01/0031"


def test_day_snapshot_before_epoch(ctx):
    snap = seoian.day_snapshot(ctx, date(1990, 1, 1))
    assert snap.seoian.label == NO_LABEL
    assert snap.periods == ()
    assert [d.id for d in snap.standard_days] == ["NY"]


def test_superday(ctx):
    b = seoian.superday(ctx, date(2024, 6, 1))
    assert b.east_zone == "Australia/Brisbane"
    assert b.duration_ms == 41 * 3_600_000


def test_current_superday(ctx):
    now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    b = seoian.current_superday(ctx, now)
    assert b.start.date() == date(2024, 6, 1)

    kiri = ctx.tweak(display_zone="Pacific/Kiritimati")
    b = seoian.current_superday(kiri, datetime(2024, 6, 1, 11, 0, tzinfo=timezone.utc))
    assert b.start.date() == date(2024, 6, 1)


def test_current_superday_defaults_to_context_clock(ctx):
    now = datetime(2024, 6, 2, 3, 0, tzinfo=timezone.utc)
    with patch.object(CalendarContext, "now", return_value=now):
        b = seoian.current_superday(ctx)
    assert b.start.date() == date(2024, 6, 2)
