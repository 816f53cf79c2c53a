"""
Immutable per-call context: loaded tables, the SuperDay zone pair, the
display zone and the category filters. Nothing here is module-level mutable
state; change a setting by building a new context with ``tweak``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from .core.types import EventDefinition, Filters
from .engines.catalog import EMPTY_CATALOG, EventCatalog, index_events
from .engines.converter import SeoianCalendar
from .engines.ranges import RangeIndex, index_ranges
from .engines.superday import zone
from .tables import load_events, load_ranges

DEFAULT_ZONE_EAST = "America/Phoenix"
DEFAULT_ZONE_WEST = "Australia/Brisbane"

ZONE_ALIASES: Dict[str, str] = {
    "ET_Toronto": "America/Toronto",
    "AZ_Phoenix": "America/Phoenix",
    "QLD_Brisbane": "Australia/Brisbane",
    "ASTRONOMICAL_UTC": "UTC",
}

DATA_DIR_ENV = "SEOIAN_DATA_DIR"
RANGES_FILE = "supermonths_ranges_fallback.json"
CONFIG_FILE = "supermonths_config.json"
EVENTS_FILE = "AFdS_Special_Days.csv"


def resolve_zone(name: str) -> str:
    """Expand a short alias and check the id against the tz database."""
    full = ZONE_ALIASES.get(name, name)
    zone(full)
    return full


@dataclass(frozen=True)
class CalendarContext:
    calendar: SeoianCalendar
    catalog: EventCatalog = EMPTY_CATALOG
    zone_east: str = DEFAULT_ZONE_EAST
    zone_west: str = DEFAULT_ZONE_WEST
    display_zone: str = "UTC"
    filters: Filters = field(default_factory=Filters)

    @property
    def index(self) -> RangeIndex:
        return self.calendar.index

    def tweak(self, **kwargs) -> "CalendarContext":
        for k in ("zone_east", "zone_west", "display_zone"):
            if k in kwargs:
                kwargs[k] = resolve_zone(kwargs[k])
        return replace(self, **kwargs)

    def now(self) -> datetime:
        return datetime.now(timezone.utc).astimezone(zone(self.display_zone))

    def today(self) -> date:
        return self.now().date()


def make_context(
    ranges: Iterable,
    events: Iterable[EventDefinition] = (),
    *,
    zone_east: str = DEFAULT_ZONE_EAST,
    zone_west: str = DEFAULT_ZONE_WEST,
    display_zone: str = "UTC",
    filters: Optional[Filters] = None,
) -> CalendarContext:
    """Build a context from in-memory records (MonthRange objects or table dicts)."""
    return CalendarContext(
        calendar=SeoianCalendar(index_ranges(ranges)),
        catalog=index_events(events),
        zone_east=resolve_zone(zone_east),
        zone_west=resolve_zone(zone_west),
        display_zone=resolve_zone(display_zone),
        filters=filters or Filters(),
    )


def default_data_dir() -> Optional[Path]:
    v = os.environ.get(DATA_DIR_ENV)
    return Path(v) if v else None


def load_context(
    data_dir: Optional[Union[str, Path]] = None,
    *,
    ranges_path: Optional[Union[str, Path]] = None,
    events_path: Optional[Union[str, Path]] = None,
    zone_east: str = DEFAULT_ZONE_EAST,
    zone_west: str = DEFAULT_ZONE_WEST,
    display_zone: str = "UTC",
    filters: Optional[Filters] = None,
) -> CalendarContext:
    """
    Load tables from disk. Explicit paths win over ``data_dir``; ``data_dir``
    falls back to ``$SEOIAN_DATA_DIR``. A missing event file is not an error.
    """
    base = Path(data_dir) if data_dir is not None else default_data_dir()
    if ranges_path is None:
        if base is None:
            raise FileNotFoundError(f"No range table given and ${DATA_DIR_ENV} is not set")
        ranges_path = base / RANGES_FILE
    if events_path is None and base is not None and (base / EVENTS_FILE).exists():
        events_path = base / EVENTS_FILE

    catalog = load_events(events_path) if events_path is not None else EMPTY_CATALOG
    return CalendarContext(
        calendar=SeoianCalendar(load_ranges(ranges_path)),
        catalog=catalog,
        zone_east=resolve_zone(zone_east),
        zone_west=resolve_zone(zone_west),
        display_zone=resolve_zone(display_zone),
        filters=filters or Filters(),
    )
