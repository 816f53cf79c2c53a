"""
seoian.engines.lanes
--------------------
Greedy lane assignment of all-day bars inside one 7-day week.

Occurrences are admitted in the order given (the collector's priority
order). Each lane keeps a 7-bit column mask; an occurrence takes the lowest
lane whose mask does not intersect its clipped column span, or is counted as
overflow on every day of that span.
"""

from __future__ import annotations

from datetime import date, timedelta
from types import MappingProxyType
from typing import Dict, Iterable, List

from ..core.errors import PreconditionError
from ..core.types import LanePlacement, Occurrence, PlacedOccurrence

WEEK_DAYS = 7


def span_mask(c0: int, c1: int) -> int:
    """Bitmask with columns ``c0..c1`` (inclusive) set."""
    return ((1 << (c1 - c0 + 1)) - 1) << c0


def place(
    occurrences: Iterable[Occurrence],
    week_start: date,
    week_end: date,
    max_lanes: int,
) -> LanePlacement:
    if max_lanes <= 0:
        raise PreconditionError(f"max_lanes must be positive, got {max_lanes}")
    n_cols = (week_end - week_start).days + 1
    if not 1 <= n_cols <= WEEK_DAYS:
        raise PreconditionError(f"week window must span 1..7 days, got {week_start}..{week_end}")

    lanes: List[int] = [0] * max_lanes
    placed: List[PlacedOccurrence] = []
    outside: List[Occurrence] = []
    overflow: Dict[date, int] = {}

    for ev in occurrences:
        if ev.end < week_start or ev.start > week_end:
            outside.append(ev)
            continue
        c0 = (max(ev.start, week_start) - week_start).days
        c1 = (min(ev.end, week_end) - week_start).days
        mask = span_mask(c0, c1)

        for lane, used in enumerate(lanes):
            if not used & mask:
                lanes[lane] = used | mask
                placed.append(PlacedOccurrence(occurrence=ev, lane=lane, col_start=c0, col_end=c1))
                break
        else:
            for c in range(c0, c1 + 1):
                d = week_start + timedelta(days=c)
                overflow[d] = overflow.get(d, 0) + 1

    return LanePlacement(placed=tuple(placed), overflow_by_day=MappingProxyType(overflow), outside=tuple(outside))
