# tests/test_superday.py

from datetime import date, datetime, timedelta, timezone

import pytest

from seoian.core.errors import UnknownZoneError
from seoian.engines import superday as sd

PHX = "America/Phoenix"
BNE = "Australia/Brisbane"
HOUR_MS = 3_600_000


def test_phoenix_brisbane_is_41_hours():
    b = sd.bounds(date(2024, 6, 1), PHX, BNE)
    assert b.east_zone == BNE
    assert b.west_zone == PHX
    assert not b.identical
    assert b.duration_ms == 41 * HOUR_MS
    assert sd.duration_hhmm_ceil30(b.duration_ms) == "41:00"
    assert sd.extra_hours(b) == 17


def test_east_is_rederived_regardless_of_argument_order():
    a = sd.bounds(date(2024, 6, 1), PHX, BNE)
    b = sd.bounds(date(2024, 6, 1), BNE, PHX)
    assert a == b


def test_start_and_end_instants():
    b = sd.bounds(date(2024, 6, 1), PHX, BNE)
    assert b.start.astimezone(timezone.utc) == datetime(2024, 5, 31, 14, 0, tzinfo=timezone.utc)
    end_local = b.end.astimezone(sd.zone(PHX))
    assert end_local.date() == date(2024, 6, 1)
    assert (end_local.hour, end_local.minute, end_local.second) == (23, 59, 59)
    assert end_local.microsecond == 999000
    # duration runs to the next western midnight, one millisecond past ``end``
    assert b.end - b.start == timedelta(milliseconds=b.duration_ms - 1)


def test_dst_transition_in_western_zone():
    on = sd.bounds(date(2024, 3, 10), "America/Toronto", "UTC")
    before = sd.bounds(date(2024, 3, 9), "America/Toronto", "UTC")
    assert on.east_zone == "UTC"
    assert on.duration_ms == 28 * HOUR_MS
    assert before.duration_ms == 29 * HOUR_MS


def test_identical_offsets_give_plain_day():
    b = sd.bounds(date(2024, 1, 15), "UTC", "Europe/London")
    assert b.identical
    assert b.duration_ms == sd.DAY_MS
    assert sd.duration_hhmm_ceil30(b.duration_ms) == "24:00"
    assert sd.extra_hours(b) == 0
    assert (b.east_zone, b.west_zone) == ("UTC", "Europe/London")


def test_same_zone_twice():
    b = sd.bounds(date(2024, 6, 1), PHX, PHX)
    assert b.identical
    assert b.duration_ms == sd.DAY_MS


def test_contains_and_elapsed():
    b = sd.bounds(date(2024, 6, 1), PHX, BNE)
    assert sd.contains(b, b.start)
    assert sd.contains(b, b.end)
    assert not sd.contains(b, b.start - timedelta(milliseconds=1))
    assert not sd.contains(b, b.end + timedelta(milliseconds=1))

    assert sd.elapsed_ms(b, b.start - timedelta(hours=3)) == 0
    assert sd.elapsed_ms(b, b.start + timedelta(hours=5)) == 5 * HOUR_MS
    assert sd.elapsed_ms(b, b.end + timedelta(days=2)) == b.duration_ms


def test_label_date_steps_back_when_display_zone_is_ahead():
    now = datetime(2024, 6, 1, 11, 0, tzinfo=timezone.utc)
    # Kiritimati (UTC+14) already reads 2 June
    assert sd.label_date_for_instant(now, PHX, BNE, "Pacific/Kiritimati") == date(2024, 6, 1)


def test_label_date_steps_forward_when_display_zone_is_behind():
    # Pago Pago (UTC-11) trails the western zone
    now = datetime(2024, 6, 2, 14, 30, tzinfo=timezone.utc)
    assert now.astimezone(sd.zone("Pacific/Pago_Pago")).date() == date(2024, 6, 2)
    assert sd.label_date_for_instant(now, PHX, BNE, "Pacific/Pago_Pago") == date(2024, 6, 2)

    later = datetime(2024, 6, 3, 8, 0, tzinfo=timezone.utc)
    assert later.astimezone(sd.zone("Pacific/Pago_Pago")).date() == date(2024, 6, 2)
    assert sd.label_date_for_instant(later, PHX, BNE, "Pacific/Pago_Pago") == date(2024, 6, 3)


def test_label_date_in_utc_display():
    now = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
    assert sd.label_date_for_instant(now, PHX, BNE, "UTC") == date(2024, 6, 1)


@pytest.mark.parametrize(
    "minutes,expected",
    [(0, 0), (1, 30), (30, 30), (31, 60), (59.5, 60), (61, 90)],
)
def test_ceil_minutes_to_30(minutes, expected):
    assert sd.ceil_minutes_to_30(minutes) == expected


def test_ms_formatting():
    assert sd.ms_to_hhmm(90 * 60000) == "01:30"
    assert sd.ms_to_hhmm(-5) == "00:00"
    assert sd.duration_hhmm_ceil30(24 * HOUR_MS + 1) == "24:30"


def test_unknown_zone():
    with pytest.raises(UnknownZoneError):
        sd.zone("Mars/Olympus_Mons")
    with pytest.raises(KeyError):
        sd.bounds(date(2024, 6, 1), "Mars/Olympus_Mons", BNE)
