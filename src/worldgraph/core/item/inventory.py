"""Inventory: an ordered collection of exclusively held items."""

from __future__ import annotations

import weakref
from collections.abc import Iterable, Iterator

from worldgraph.core.item.models import Item
from worldgraph.core.item.ownership import Owned, OwnershipError

# item -> inventory currently holding it. Both sides are weak so this map never
# keeps an item or its container alive.
_holders: weakref.WeakKeyDictionary[Item, weakref.ref[Inventory]] = weakref.WeakKeyDictionary()


def holder_of(item: Item) -> Inventory | None:
    """Inventory currently holding ``item``, or None."""
    ref = _holders.get(item)
    return ref() if ref is not None else None


class Inventory:
    """Ordered item collection that only accepts items through ``Owned`` handles.

    Items leave the inventory the same way they arrive: ``remove`` hands back a
    fresh ``Owned`` handle that the caller can pass on to another container. An
    item held by one inventory is refused by every other one until removed.
    """

    __slots__ = ("_items", "__weakref__")

    def __init__(self) -> None:
        self._items: list[Item] = []

    def add(self, handle: Owned[Item]) -> None:
        """Take ownership of the item in ``handle``.

        Args:
            handle: Handle to consume. Spent after this call.

        Raises:
            OwnershipError: If the handle is spent or the item is already held,
                here or by another container.
        """
        item = handle.peek()
        holder = holder_of(item)
        if holder is self:
            raise OwnershipError(f"Item {item.name!r} is already in this inventory")
        if holder is not None:
            raise OwnershipError(f"Item {item.name!r} is held by another container")
        self._items.append(handle.take())
        _holders[item] = weakref.ref(self)

    def add_all(self, handles: Iterable[Owned[Item]]) -> None:
        """Take ownership of every item in ``handles``, in order."""
        for handle in handles:
            self.add(handle)

    def remove(self, item: Item) -> Owned[Item]:
        """Give up ownership of ``item``.

        Args:
            item: Item instance currently held.

        Returns:
            New handle owning the item.

        Raises:
            OwnershipError: If the item is not held by this inventory.
        """
        for index, held in enumerate(self._items):
            if held is item:
                del self._items[index]
                _holders.pop(item, None)
                return Owned(item)
        raise OwnershipError(f"Item {item.name!r} is not in this inventory")

    def find(self, name: str) -> Item | None:
        """First item with the given name, or None."""
        return next((item for item in self._items if item.name == name), None)

    def by_id(self, item_id: int) -> Item | None:
        """First item with the given identifier, or None."""
        return next((item for item in self._items if item.item_id == item_id), None)

    def clear(self) -> None:
        """Drop every held item."""
        for item in self._items:
            _holders.pop(item, None)
        self._items.clear()

    def __contains__(self, item: object) -> bool:
        return any(held is item for held in self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Inventory({[item.name for item in self._items]!r})"
