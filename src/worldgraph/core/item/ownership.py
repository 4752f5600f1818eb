"""Move-only handles for exclusively owned items.

An ``Owned`` handle is the only way to put an item into a container. Taking the
item out of the handle spends it, so the previous holder can no longer reach the
item through that handle.

Usage:
    handle = Owned(Item(name="Sword", item_id=1, description="Sharp."))
    room.add_item(handle)
    handle.spent  # True
    handle.peek()  # raises OwnershipError
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class OwnershipError(RuntimeError):
    """Raised when an item is used through a spent handle or held twice."""

    pass


class Owned(Generic[T]):
    """Single-use handle carrying exclusive ownership of a value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value: T | None = value

    @property
    def spent(self) -> bool:
        """True once the value has been taken out of this handle."""
        return self._value is None

    def peek(self) -> T:
        """Return the held value without giving up ownership.

        Raises:
            OwnershipError: If the handle is spent.
        """
        if self._value is None:
            raise OwnershipError("Handle is spent; its item has moved elsewhere")
        return self._value

    def take(self) -> T:
        """Move the value out of this handle, leaving it spent.

        Returns:
            The held value.

        Raises:
            OwnershipError: If the handle is already spent.
        """
        value = self.peek()
        self._value = None
        return value

    def __repr__(self) -> str:
        if self._value is None:
            return "Owned(<spent>)"
        return f"Owned({self._value!r})"
