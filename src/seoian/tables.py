"""
Loaders for the externally maintained tables.

* SuperMonth ranges: JSON list of ``{seoianYear, monthNo, monthName, start,
  end, extendedName?}``.
* SuperMonth config: JSON list of ``{monthNo, monthName}``.
* Event definitions: CSV whose headers have drifted over time. Every
  accepted spelling is listed once in ``FIELD_ALIASES`` and resolved against
  the header row before any data row is read.
"""

from __future__ import annotations

import csv
import io
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .core.errors import TableError
from .core.types import EventDefinition
from .engines.catalog import EventCatalog, index_events
from .engines.ranges import RangeIndex, index_ranges

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

# canonical field -> accepted header spellings (first match wins)
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "id": ("ID", "id"),
    "title": ("Title", "title"),
    "notes": ("Notes", "notes"),
    "anchor_type": ("Anchor_Type", "anchor_type", "AnchorType"),
    "category": ("Category", "category"),
    "sy_month": ("SY_Month", "sy_month", "syMonth"),
    "sy_day": ("SY_Day", "sy_day", "syDay"),
    "sy_start_year": ("SY_Start_Year", "sy_year_start", "syYearStart"),
    "gregorian_start_year": (
        "Gregorian_Start_Year",
        "Gregorian_First_Year",
        "Gergorian_First_Year",
        "Gergorian_Start_Year",
    ),
    "gy_month": ("GY_Month", "gy_month", "GYMonth"),
    "gy_day": ("GY_Day", "gy_day", "GYDay"),
    "nth": ("Nth", "nth"),
    "weekday": ("Weekday", "weekday"),
    "offset_days": ("Offset_Days", "offset_days", "OffsetDays"),
    "rank": ("Rank", "rank"),
    "sequence": ("Sequence", "sequence", "Seq", "seq"),
    "show_on_calendar": ("ShowOnCalendar", "showOnCalendar"),
    "show_in_inspector": ("ShowInInspector", "showInInspector"),
    "show_notes_on_calendar": ("ShowNotesOnCalendar", "showNotesOnCalendar"),
    "all_day": ("All_Day", "all_day", "AllDay"),
}

_TRUE = {"true", "t", "1", "yes", "y"}
_FALSE = {"false", "f", "0", "no", "n"}


# ============================================================
# Scalar coercion
# ============================================================

def to_bool(v: Any, default: bool = False) -> bool:
    s = str(v if v is not None else "").strip().lower()
    if s == "":
        return default
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    return False


def _num(v: Any) -> Optional[float]:
    s = str(v if v is not None else "").strip()
    if not s:
        return None
    try:
        x = float(s)
    except ValueError:
        return None
    # inf, nan and 1e999 are not table values
    return x if math.isfinite(x) else None


def positive_int(v: Any) -> Optional[int]:
    """Integer value, treating blanks, garbage and zero as missing."""
    x = _num(v)
    if x is None or x == 0:
        return None
    return int(x)


def optional_int(v: Any) -> Optional[int]:
    """Integer value where zero is meaningful (weekday, day offsets)."""
    x = _num(v)
    return None if x is None else int(x)


# ============================================================
# Header resolution
# ============================================================

def resolve_headers(headers: Sequence[str]) -> Dict[str, str]:
    """Map each canonical field to the header present in this file, if any."""
    present = {h.strip(): h for h in headers if h is not None}
    out: Dict[str, str] = {}
    for field, aliases in FIELD_ALIASES.items():
        for a in aliases:
            if a in present:
                out[field] = present[a]
                break
    return out


def normalize_row(row: Mapping[str, Any], columns: Mapping[str, str]) -> EventDefinition:
    def get(field: str) -> str:
        h = columns.get(field)
        v = row.get(h, "") if h is not None else ""
        return "" if v is None else str(v)

    anchor = get("anchor_type").strip() or "SY"
    cat_raw = get("category").strip()
    if cat_raw:
        category = cat_raw.lower()
    else:
        category = "standard" if anchor.upper().startswith("GY_") else "special"

    rank = positive_int(get("rank"))
    sequence = positive_int(get("sequence"))

    return EventDefinition(
        id=get("id").strip(),
        title=get("title").strip(),
        notes=get("notes").strip(),
        category=category,
        anchor_type=anchor.upper(),
        sy_month=positive_int(get("sy_month")),
        sy_day=positive_int(get("sy_day")),
        sy_start_year=positive_int(get("sy_start_year")),
        gy_month=positive_int(get("gy_month")),
        gy_day=positive_int(get("gy_day")),
        nth=positive_int(get("nth")),
        weekday=optional_int(get("weekday")),
        offset_days=optional_int(get("offset_days")),
        gregorian_start_year=positive_int(get("gregorian_start_year")),
        rank=rank if rank is not None else (1 if category == "special" else 2),
        sequence=sequence if sequence is not None else 9999,
        show_on_calendar=to_bool(get("show_on_calendar"), True),
        show_in_inspector=to_bool(get("show_in_inspector"), True),
        show_notes_on_calendar=to_bool(get("show_notes_on_calendar"), False),
        all_day=to_bool(get("all_day"), True),
    )


# ============================================================
# Event definitions (CSV)
# ============================================================

def parse_event_rows(rows: Iterable[Mapping[str, Any]], headers: Sequence[str]) -> List[EventDefinition]:
    columns = resolve_headers(headers)
    out: List[EventDefinition] = []
    skipped = 0
    for i, row in enumerate(rows, start=2):
        d = normalize_row(row, columns)
        if not d.id or not d.title:
            skipped += 1
            log.debug("event row %d skipped: missing id or title", i)
            continue
        out.append(d)
    if skipped:
        log.info("event table: %d rows loaded, %d skipped", len(out), skipped)
    return out


def parse_events_csv(text: str) -> List[EventDefinition]:
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    rows = list(reader)
    return parse_event_rows(rows, reader.fieldnames or [])


def load_events(path: PathLike) -> EventCatalog:
    text = Path(path).read_text(encoding="utf-8")
    return index_events(parse_events_csv(text))


# ============================================================
# SuperMonth ranges / config (JSON)
# ============================================================

def _read_json_list(path: PathLike) -> List[Any]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TableError(f"{path}: not valid JSON ({e})") from e
    if not isinstance(data, list):
        raise TableError(f"{path}: expected a JSON list, got {type(data).__name__}")
    return data


def parse_ranges(records: Iterable[Any]) -> RangeIndex:
    idx = index_ranges(records)
    if idx.skipped:
        log.info("range table: %d incomplete entries skipped", idx.skipped)
    for gap in idx.gaps():
        log.debug(
            "range table: %+d day break between %d/%02d and %d/%02d",
            gap.days, gap.before.seoian_year, gap.before.month_no,
            gap.after.seoian_year, gap.after.month_no,
        )
    return idx


def load_ranges(path: PathLike) -> RangeIndex:
    return parse_ranges(_read_json_list(path))


def load_month_config(path: PathLike) -> Dict[int, str]:
    """Month number -> month name from the SuperMonth config table."""
    out: Dict[int, str] = {}
    for rec in _read_json_list(path):
        if not isinstance(rec, Mapping):
            continue
        no = positive_int(rec.get("monthNo"))
        name = rec.get("monthName")
        if no is None or not name:
            continue
        out[no] = str(name)
    return out
