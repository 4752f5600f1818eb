"""Room functionality: graph nodes and the lock/key resolver."""

from worldgraph.core.room.lock import UnlockResult, try_unlock, use_key
from worldgraph.core.room.models import LockStatus, Room

__all__ = [
    "Room",
    "LockStatus",
    "UnlockResult",
    "try_unlock",
    "use_key",
]
