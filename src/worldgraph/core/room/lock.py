"""Lock/key resolution.

A candidate item unlocks a room only when it is tagged as a key and its key
identifier equals the room identifier. A matching key is consumed; anything
else goes back to the caller exactly as it was presented.

Usage:
    result = try_unlock(Owned(key), vault)
    if result.success:
        ...  # vault.lock_status is LockStatus.UNLOCKED, key is gone
    else:
        hand = result.remaining  # the same handle, still owning the item
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from worldgraph.config.log import get_logger
from worldgraph.core.entity import Entity
from worldgraph.core.item import Item, ItemKind, Key, Owned, OwnershipError
from worldgraph.core.room.models import Room

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class UnlockResult:
    """Outcome of an unlock attempt.

    Attributes:
        success: True if the room went from locked to unlocked.
        remaining: Handle returned to the caller on failure. None when the key
            was consumed or the presented handle was already spent.
    """

    success: bool
    remaining: Owned[Item] | None = None


def _as_key(item: Item) -> Key | None:
    if item.kind is not ItemKind.KEY:
        return None
    return cast(Key, item)


def try_unlock(candidate: Owned[Item], room: Room) -> UnlockResult:
    """Try to unlock ``room`` with the item held by ``candidate``.

    Args:
        candidate: Handle owning the item to try.
        room: Target room.

    Returns:
        UnlockResult. On success the handle is spent and the key is dropped from
        play. On failure the original handle is returned untouched.
    """
    if candidate.spent:
        return UnlockResult(success=False)

    key = _as_key(candidate.peek())
    if key is None or not room.unlock(key):
        return UnlockResult(success=False, remaining=candidate)

    candidate.take()
    logger.info("Room unlocked", room=room.name, room_id=room.room_id, key=key.name)
    return UnlockResult(success=True)


def use_key(holder: Entity, item: Item, room: Room) -> bool:
    """Try an item from ``holder``'s inventory on ``room``.

    The item only leaves the inventory when it opens the room; a failed attempt
    leaves the inventory exactly as it was.

    Raises:
        OwnershipError: If ``holder`` does not hold ``item``.
    """
    if item not in holder.inventory:
        raise OwnershipError(f"{holder.name!r} does not hold {item.name!r}")
    key = _as_key(item)
    if key is None or not room.accepts(key):
        return False
    return try_unlock(holder.inventory.remove(item), room).success
