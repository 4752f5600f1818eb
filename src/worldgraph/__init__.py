"""WorldGraph: room graphs, exclusive item ownership and lock/key rules for text adventures.

Usage:
    from worldgraph import Owned, init_world, try_unlock, destroy_world

    world = init_world([
        {"name": "Hall", "id": 1, "description": "A draughty hall.", "connections": [2]},
        {"name": "Vault", "id": 2, "description": "Steel walls."},
    ])
    hall, vault = world.rooms
    assert hall.neighbours == (vault,)

    result = try_unlock(Owned(Key("Iron key", 10, "Cold.", key_id=2)), vault)
    assert result.success and not vault.is_locked

    destroy_world(world)
"""

__version__ = "0.1.0"

# Configuration
from worldgraph.config import WorldSettings, configure_logging, get_settings

# Core model
from worldgraph.core import (
    Entity,
    EntityStats,
    Inventory,
    Item,
    ItemContainer,
    ItemKind,
    Key,
    LockStatus,
    Mission,
    MissionStatus,
    Owned,
    OwnershipError,
    Room,
    UnlockResult,
    move_entity,
    transfer_item,
    try_unlock,
    use_key,
)

# Records
from worldgraph.records import (
    EntityRecord,
    ItemRecord,
    MalformedRecordError,
    MemorySource,
    RecordSource,
    RoomRecord,
    XmlStorySource,
)

# World
from worldgraph.world import (
    AmbiguousIdentifierError,
    WorldBuilder,
    WorldGraph,
    destroy_world,
    init_world,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Item",
    "Key",
    "ItemKind",
    "Owned",
    "OwnershipError",
    "Inventory",
    "Entity",
    "EntityStats",
    "Room",
    "LockStatus",
    "UnlockResult",
    "try_unlock",
    "use_key",
    "ItemContainer",
    "transfer_item",
    "move_entity",
    "Mission",
    "MissionStatus",
    # Records
    "ItemRecord",
    "EntityRecord",
    "RoomRecord",
    "MalformedRecordError",
    "RecordSource",
    "MemorySource",
    "XmlStorySource",
    # World
    "WorldGraph",
    "WorldBuilder",
    "AmbiguousIdentifierError",
    "init_world",
    "destroy_world",
    # Config
    "WorldSettings",
    "get_settings",
    "configure_logging",
]
