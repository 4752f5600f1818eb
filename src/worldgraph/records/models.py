"""Record models: the flat, order-independent description of a world.

Records come from an external source (a story file parser, a fixture, a
database) and are validated before any room is created.

Usage:
    record = parse_room_record({
        "name": "Hall",
        "id": 1,
        "description": "A draughty hall.",
        "connections": [2],
    })
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class MalformedRecordError(ValueError):
    """Raised when a room, entity or item record is missing a required field."""

    pass


class ItemRecord(BaseModel):
    """Item description. A ``key`` value makes the item a key for that room id."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    id: int
    description: str
    key: int | None = None


class EntityRecord(BaseModel):
    """Entity description with its starting inventory and optional stats."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    inventory: list[ItemRecord] = Field(default_factory=list)
    health: int = 0
    stamina: int = 0
    intelligence: int = 0
    agility: int = 0
    strength: int = 0
    stealth: int = 0
    charisma: int = 0


class RoomRecord(BaseModel):
    """Room description: contents, occupants and neighbour identifiers."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    id: int
    description: str
    inventory: list[ItemRecord] = Field(default_factory=list)
    connections: list[int] = Field(default_factory=list)
    entities: list[EntityRecord] = Field(default_factory=list)


def parse_room_record(raw: RoomRecord | Mapping[str, Any]) -> RoomRecord:
    """Validate a raw room record.

    Args:
        raw: Already-validated record or a mapping to validate.

    Returns:
        Validated RoomRecord.

    Raises:
        MalformedRecordError: If a required field is missing or has the wrong type.
    """
    if isinstance(raw, RoomRecord):
        return raw
    try:
        return RoomRecord.model_validate(raw)
    except ValidationError as e:
        label = raw.get("name") if isinstance(raw, Mapping) else None
        raise MalformedRecordError(
            f"Malformed room record {label!r}: {e.error_count()} error(s)\n{e}"
        ) from e
