"""Item models: plain objects and keys.

Usage:
    lamp = Item(name="Lamp", item_id=7, description="A brass oil lamp.")
    key = Key(name="Iron key", item_id=8, description="Heavy and cold.", key_id=2)

    key.kind is ItemKind.KEY  # True
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ItemKind(Enum):
    """Tag distinguishing item variants without inspecting their class."""

    OBJECT = "object"
    KEY = "key"


@dataclass(frozen=True, slots=True, eq=False, weakref_slot=True)
class Item:
    """An object that can be held by exactly one entity or room.

    Identity is by instance: two items with equal fields are still distinct
    objects in the world.

    Attributes:
        name: Display name.
        item_id: Creation identifier, unique within a world.
        description: Flavour text.
    """

    name: str
    item_id: int
    description: str

    @property
    def kind(self) -> ItemKind:
        """Variant tag for this item."""
        return ItemKind.OBJECT


@dataclass(frozen=True, slots=True, eq=False)
class Key(Item):
    """An item that opens the room whose identifier equals ``key_id``."""

    key_id: int

    @property
    def kind(self) -> ItemKind:
        """Variant tag for this item."""
        return ItemKind.KEY

    def fits(self, room_id: int) -> bool:
        """Check whether this key matches a room identifier exactly."""
        return self.key_id == room_id
