"""Record source protocol for swappable story readers.

Usage:
    source = MemorySource("Test", [{"name": "Hall", "id": 1, "description": ""}])
    world = init_world(source)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

from worldgraph.records.models import RoomRecord

RawRecord = RoomRecord | Mapping[str, Any]


@runtime_checkable
class RecordSource(Protocol):
    """Anything that yields room records in load order."""

    @property
    def title(self) -> str | None:
        """World title, if the source defines one."""
        ...

    def records(self) -> Iterator[RawRecord]:
        """Yield room records in file order."""
        ...


class MemorySource:
    """Record source over records already in memory."""

    def __init__(self, title: str | None, records: Iterable[RawRecord]):
        self._title = title
        self._records = list(records)

    @property
    def title(self) -> str | None:
        return self._title

    def records(self) -> Iterator[RawRecord]:
        return iter(self._records)
