"""Ownership transfer between containers.

Items move between rooms and entities by handing an ``Owned`` handle from one
inventory to the other. Entities move between rooms by swapping shared occupant
references.
"""

from __future__ import annotations

from typing import Protocol

from worldgraph.core.entity import Entity
from worldgraph.core.item import Inventory, Item, Owned
from worldgraph.core.room import Room


class ItemContainer(Protocol):
    """Anything that exclusively holds items: a Room or an Entity."""

    @property
    def inventory(self) -> Inventory: ...

    def add_item(self, handle: Owned[Item]) -> None: ...


def transfer_item(item: Item, source: ItemContainer, target: ItemContainer) -> None:
    """Move ``item`` from ``source`` to ``target``.

    Args:
        item: Item currently held by ``source``.
        source: Container giving up the item.
        target: Container receiving the item.

    Raises:
        OwnershipError: If ``source`` does not hold ``item``.
    """
    target.add_item(source.inventory.remove(item))


def move_entity(entity: Entity, source: Room, target: Room) -> None:
    """Move an occupant from ``source`` to ``target``.

    Lock state and adjacency are not checked.

    Raises:
        ValueError: If ``entity`` does not occupy ``source``.
    """
    source.remove_entity(entity)
    target.add_entity(entity)
