"""Item functionality: item variants, move-only handles and inventories."""

from worldgraph.core.item.inventory import Inventory, holder_of
from worldgraph.core.item.models import Item, ItemKind, Key
from worldgraph.core.item.ownership import Owned, OwnershipError

__all__ = [
    "Item",
    "Key",
    "ItemKind",
    "Owned",
    "OwnershipError",
    "Inventory",
    "holder_of",
]
