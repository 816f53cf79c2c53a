from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from ..core.types import EventDefinition

DayKey = Tuple[int, int]  # (sy_month, sy_day)


def definition_order(d: EventDefinition) -> Tuple[int, int, str]:
    return (d.rank, d.sequence, d.title)


@dataclass(frozen=True)
class EventCatalog:
    """SY definitions keyed by Seoian (month, day); GY definitions as a flat list."""
    sy_by_key: Mapping[DayKey, Tuple[EventDefinition, ...]]
    gy_defs: Tuple[EventDefinition, ...]

    def for_day(self, month_no: int, day: int) -> Tuple[EventDefinition, ...]:
        return self.sy_by_key.get((month_no, day), ())

    def __len__(self) -> int:
        return sum(len(v) for v in self.sy_by_key.values()) + len(self.gy_defs)


def index_events(defs: Iterable[EventDefinition]) -> EventCatalog:
    """
    Split definitions by anchor family. SY rows without a month or day, and
    anchors that are neither SY nor GY_*, are dropped.
    """
    sy: Dict[DayKey, List[EventDefinition]] = {}
    gy: List[EventDefinition] = []
    for d in defs:
        at = d.anchor_type.upper()
        if at == "SY":
            if not d.sy_month or not d.sy_day:
                continue
            sy.setdefault((d.sy_month, d.sy_day), []).append(d)
        elif at.startswith("GY_"):
            gy.append(d)

    return EventCatalog(
        sy_by_key=MappingProxyType({k: tuple(sorted(v, key=definition_order)) for k, v in sy.items()}),
        gy_defs=tuple(sorted(gy, key=definition_order)),
    )


EMPTY_CATALOG = index_events(())
