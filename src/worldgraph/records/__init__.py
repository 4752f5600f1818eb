"""Record sources and validation for world construction."""

from worldgraph.records.models import (
    EntityRecord,
    ItemRecord,
    MalformedRecordError,
    RoomRecord,
    parse_room_record,
)
from worldgraph.records.protocol import MemorySource, RawRecord, RecordSource
from worldgraph.records.xml_source import XmlStorySource

__all__ = [
    "ItemRecord",
    "EntityRecord",
    "RoomRecord",
    "MalformedRecordError",
    "parse_room_record",
    "RawRecord",
    "RecordSource",
    "MemorySource",
    "XmlStorySource",
]
