"""
seoian.engines.superday
-----------------------
A SuperDay is one calendar date label observed across two timezones: it
starts at local midnight in the eastern zone and ends at the last instant of
the same date in the western zone.

"East" is re-derived on every call from the UTC offsets at the date's local
midnight; nothing about the zone pair is cached or swapped in place.
Durations are taken between absolute UTC instants, so DST transitions in
either zone are accounted for.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Tuple

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.errors import UnknownZoneError
from ..core.time import pad2
from ..core.types import SuperDayBounds

DAY_MS = 86_400_000
_LAST_INSTANT = timedelta(milliseconds=1)


def zone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownZoneError(f"Unknown timezone '{name}'") from e


def local_midnight(d: date, tz: tzinfo) -> datetime:
    return datetime.combine(d, time(0), tzinfo=tz)


def _utc_ms(dt: datetime) -> int:
    # aware datetimes sharing a tzinfo subtract as wall clock; go through UTC
    u = dt.astimezone(timezone.utc)
    return (u - datetime(1970, 1, 1, tzinfo=timezone.utc)) // timedelta(milliseconds=1)


def utc_offset_at_midnight(d: date, name: str) -> timedelta:
    off = local_midnight(d, zone(name)).utcoffset()
    return off if off is not None else timedelta(0)


def order_zones(d: date, zone_a: str, zone_b: str) -> Tuple[str, str, bool]:
    """
    Return ``(east, west, identical)`` for the pair on date ``d``. The east
    zone has the larger UTC offset at ``d``'s local midnight; equal offsets
    keep the given order and flag the pair as identical.
    """
    off_a = utc_offset_at_midnight(d, zone_a)
    off_b = utc_offset_at_midnight(d, zone_b)
    if off_a == off_b:
        return zone_a, zone_b, True
    if off_a > off_b:
        return zone_a, zone_b, False
    return zone_b, zone_a, False


def bounds(d: date, zone_a: str, zone_b: str) -> SuperDayBounds:
    east, west, identical = order_zones(d, zone_a, zone_b)
    start = local_midnight(d, zone(east))
    if identical:
        duration_ms = DAY_MS
        end = (start.astimezone(timezone.utc) + timedelta(milliseconds=DAY_MS) - _LAST_INSTANT).astimezone(zone(west))
    else:
        next_west = local_midnight(d + timedelta(days=1), zone(west))
        duration_ms = _utc_ms(next_west) - _utc_ms(start)
        end = (next_west.astimezone(timezone.utc) - _LAST_INSTANT).astimezone(zone(west))
    return SuperDayBounds(
        east_zone=east,
        west_zone=west,
        start=start,
        end=end,
        duration_ms=duration_ms,
        identical=identical,
    )


def contains(b: SuperDayBounds, now: datetime) -> bool:
    t = _utc_ms(now)
    return _utc_ms(b.start) <= t <= _utc_ms(b.end)


def label_date_for_instant(now: datetime, zone_a: str, zone_b: str, display_zone: str) -> date:
    """
    Date label of the SuperDay containing ``now``, starting from the display
    zone's civil date and stepping one day back or forward if ``now`` falls
    outside that SuperDay.
    """
    base = now.astimezone(zone(display_zone)).date()
    b = bounds(base, zone_a, zone_b)
    t = _utc_ms(now)
    if t < _utc_ms(b.start):
        return base - timedelta(days=1)
    if t > _utc_ms(b.end):
        return base + timedelta(days=1)
    return base


def elapsed_ms(b: SuperDayBounds, now: datetime) -> int:
    """Milliseconds since ``b.start``, clamped to ``[0, duration]``."""
    return max(0, min(_utc_ms(now) - _utc_ms(b.start), b.duration_ms))


def ceil_minutes_to_30(minutes: float) -> int:
    return int(math.ceil(minutes / 30) * 30)


def duration_hhmm_ceil30(ms: int) -> str:
    minutes = ceil_minutes_to_30(ms / 60000)
    return f"{pad2(minutes // 60)}:{pad2(minutes % 60)}"


def ms_to_hhmm(ms: int) -> str:
    mins = max(0, ms // 60000)
    return f"{pad2(mins // 60)}:{pad2(mins % 60)}"


def extra_hours(b: SuperDayBounds) -> int:
    """Whole hours beyond 24 in the 30-minute-rounded duration."""
    total_h = ceil_minutes_to_30(b.duration_ms / 60000) / 60
    return int(max(0.0, total_h - 24))
