"""Entity models: players and NPCs living in the world.

Usage:
    guard = Entity("Guard", stats=EntityStats(health=30, strength=12))
    guard.add_item(Owned(Item(name="Sword", item_id=3, description="Notched.")))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from worldgraph.core.item import Inventory, Item, Owned


@dataclass(slots=True)
class EntityStats:
    """Numeric attributes of an entity. Not used by graph logic."""

    health: int = 0
    stamina: int = 0
    intelligence: int = 0
    agility: int = 0
    strength: int = 0
    stealth: int = 0
    charisma: int = 0


class Entity:
    """A named actor with an inventory of exclusively owned items.

    Entities are shared: the world's population registry and the rooms they
    occupy all reference the same instance.

    Args:
        name: Immutable display name.
        stats: Numeric attributes (all zero when omitted).
    """

    __slots__ = ("_name", "_inventory", "stats", "__weakref__")

    def __init__(self, name: str, stats: EntityStats | None = None) -> None:
        self._name = name
        self._inventory = Inventory()
        self.stats = stats or EntityStats()

    @property
    def name(self) -> str:
        return self._name

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    @property
    def items(self) -> tuple[Item, ...]:
        """Snapshot of held items in acquisition order."""
        return tuple(self._inventory)

    def add_item(self, handle: Owned[Item]) -> None:
        """Move an item into this entity's inventory, spending ``handle``."""
        self._inventory.add(handle)

    def add_items(self, handles: Iterable[Owned[Item]]) -> None:
        """Move several items into this entity's inventory."""
        self._inventory.add_all(handles)

    def release(self) -> None:
        """Drop every held item (teardown)."""
        self._inventory.clear()

    def __repr__(self) -> str:
        return f"Entity({self._name!r}, items={len(self._inventory)})"
