"""Core world model: items, entities, rooms and the rules that move them.

Architecture Note:
    core/ holds the data containers and the stateless rules acting on them
    (lock resolution, ownership transfer). Graph assembly from records lives
    in world/.
"""

from worldgraph.core.entity import Entity, EntityStats
from worldgraph.core.item import Inventory, Item, ItemKind, Key, Owned, OwnershipError
from worldgraph.core.mission import Mission, MissionStatus
from worldgraph.core.room import LockStatus, Room, UnlockResult, try_unlock, use_key
from worldgraph.core.transfer import ItemContainer, move_entity, transfer_item

__all__ = [
    # Item
    "Item",
    "Key",
    "ItemKind",
    "Owned",
    "OwnershipError",
    "Inventory",
    # Entity
    "Entity",
    "EntityStats",
    # Room
    "Room",
    "LockStatus",
    "UnlockResult",
    "try_unlock",
    "use_key",
    # Transfer
    "ItemContainer",
    "transfer_item",
    "move_entity",
    # Mission
    "Mission",
    "MissionStatus",
]
