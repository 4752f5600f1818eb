"""Entity functionality: actors and their attributes."""

from worldgraph.core.entity.models import Entity, EntityStats

__all__ = [
    "Entity",
    "EntityStats",
]
