"""Room models: graph nodes with lock state, items, occupants and exits.

Usage:
    hall = Room("Hall", 1, "A draughty entrance hall.")
    vault = Room("Vault", 2, "Steel walls on every side.")
    hall.add_neighbour(vault)

    hall.neighbours  # (Room('Vault', 2),)
    vault.neighbours  # () - connections are directed
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from worldgraph.core.entity import Entity
from worldgraph.core.item import Inventory, Item, Key, Owned


class LockStatus(Enum):
    """Room lock state. The only transition is LOCKED -> UNLOCKED."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"


class Room:
    """A node in the world graph.

    Neighbours and occupants are shared references: the same room may be a
    neighbour of many rooms, and the same entity may be listed by several rooms.
    Items are exclusively owned through the room's inventory.

    Args:
        name: Immutable display name.
        room_id: Immutable identifier used for connections and key matching.
        description: Immutable flavour text.
    """

    __slots__ = (
        "_name",
        "_room_id",
        "_description",
        "_lock",
        "_inventory",
        "_occupants",
        "_neighbours",
        "__weakref__",
    )

    def __init__(self, name: str, room_id: int, description: str) -> None:
        self._name = name
        self._room_id = room_id
        self._description = description
        self._lock = LockStatus.LOCKED
        self._inventory = Inventory()
        self._occupants: list[Entity] = []
        self._neighbours: list[Room] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def room_id(self) -> int:
        return self._room_id

    @property
    def description(self) -> str:
        return self._description

    @property
    def lock_status(self) -> LockStatus:
        return self._lock

    @property
    def is_locked(self) -> bool:
        return self._lock is LockStatus.LOCKED

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._inventory)

    @property
    def occupants(self) -> tuple[Entity, ...]:
        return tuple(self._occupants)

    @property
    def neighbours(self) -> tuple[Room, ...]:
        return tuple(self._neighbours)

    def add_item(self, handle: Owned[Item]) -> None:
        """Move an item into this room, spending ``handle``."""
        self._inventory.add(handle)

    def add_items(self, handles: Iterable[Owned[Item]]) -> None:
        """Move several items into this room."""
        self._inventory.add_all(handles)

    def add_entity(self, entity: Entity) -> None:
        """Add a shared occupant reference."""
        self._occupants.append(entity)

    def add_entities(self, entities: Iterable[Entity]) -> None:
        for entity in entities:
            self.add_entity(entity)

    def remove_entity(self, entity: Entity) -> None:
        """Drop an occupant reference.

        Raises:
            ValueError: If ``entity`` does not occupy this room.
        """
        for index, occupant in enumerate(self._occupants):
            if occupant is entity:
                del self._occupants[index]
                return
        raise ValueError(f"{entity.name!r} is not in room {self._name!r}")

    def add_neighbour(self, room: Room) -> None:
        """Add a directed, shared connection to ``room``."""
        self._neighbours.append(room)

    def add_neighbours(self, rooms: Iterable[Room]) -> None:
        for room in rooms:
            self.add_neighbour(room)

    def accepts(self, key: Key) -> bool:
        """True if ``key`` would open this room now: locked, and an exact id match."""
        return self.is_locked and key.fits(self._room_id)

    def unlock(self, key: Key) -> bool:
        """Switch to UNLOCKED if ``key`` is accepted. There is no re-lock operation.

        Returns:
            True if the room changed state.
        """
        if not self.accepts(key):
            return False
        self._lock = LockStatus.UNLOCKED
        return True

    def release(self) -> None:
        """Clear neighbour, occupant and item edges (teardown)."""
        self._neighbours.clear()
        self._occupants.clear()
        self._inventory.clear()

    def __repr__(self) -> str:
        return f"Room({self._name!r}, {self._room_id})"
