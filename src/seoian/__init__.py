"""seoian public API.

Keep this surface small: users should mostly interact with functions re-exported here.
Every call takes an explicit CalendarContext; the package holds no global state.
"""

from .api import (
    seoian_year,
    canonical_date,
    to_gregorian,
    active_ranges,
    parse_jump,
    format_jump,
    occurrence,
    occurrences,
    week_layout,
    day_snapshot,
    superday,
    current_superday,
)
from .context import CalendarContext, make_context, load_context
from .core.errors import SeoianError, PreconditionError, UnknownZoneError, TableError
from .core.types import (
    MonthRange,
    EventDefinition,
    SeoianDate,
    Occurrence,
    SuperDayBounds,
    Filters,
)
from .engines.converter import EPOCH

__all__ = [
    "seoian_year",
    "canonical_date",
    "to_gregorian",
    "active_ranges",
    "parse_jump",
    "format_jump",
    "occurrence",
    "occurrences",
    "week_layout",
    "day_snapshot",
    "superday",
    "current_superday",
    "CalendarContext",
    "make_context",
    "load_context",
    "SeoianError",
    "PreconditionError",
    "UnknownZoneError",
    "TableError",
    "MonthRange",
    "EventDefinition",
    "SeoianDate",
    "Occurrence",
    "SuperDayBounds",
    "Filters",
    "EPOCH",
]
