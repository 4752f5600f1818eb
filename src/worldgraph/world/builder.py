"""World construction: two-pass assembly of a room graph from flat records.

Pass 1 creates every room, its items and its entities, and records each room's
neighbour identifiers in a connection map. Pass 2 resolves those identifiers
into room references. Connections may point forward in the record stream, so
resolution waits until every room exists.

Usage:
    world = init_world("story.xml")
    world = init_world([
        {"name": "Hall", "id": 1, "description": "", "connections": [2]},
        {"name": "Vault", "id": 2, "description": ""},
    ])
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from worldgraph.config import WorldSettings, get_logger, get_settings
from worldgraph.core.entity import Entity, EntityStats
from worldgraph.core.item import Item, Key, Owned
from worldgraph.core.room import Room
from worldgraph.records import (
    EntityRecord,
    ItemRecord,
    RawRecord,
    RecordSource,
    RoomRecord,
    XmlStorySource,
    parse_room_record,
)
from worldgraph.world.graph import WorldGraph

logger = get_logger(__name__)

ConnectionMap = dict[int, list[int]]


class AmbiguousIdentifierError(ValueError):
    """Raised when two rooms or two items share an identifier."""

    pass


class WorldBuilder:
    """Builds a WorldGraph from validated room records.

    Args:
        settings: Construction settings. Cached settings are used when omitted.
    """

    def __init__(self, settings: WorldSettings | None = None):
        self._settings = settings or get_settings()

    def build(self, records: Iterable[RawRecord], title: str | None = None) -> WorldGraph:
        """Validate ``records`` and assemble a fully connected graph.

        Args:
            records: Room records in file order.
            title: World title; ``default_title`` from settings when None.

        Returns:
            WorldGraph whose rooms reference only registered neighbours.

        Raises:
            MalformedRecordError: If any record is missing a required field.
            AmbiguousIdentifierError: If identifiers repeat and
                ``reject_duplicate_ids`` is enabled.
        """
        # Validate everything up front so a bad record never leaves a partial graph.
        validated = [parse_room_record(raw) for raw in records]
        world = WorldGraph(title or self._settings.default_title)

        connections = self._instantiate(world, validated)
        resolved, omitted = self._connect(world, connections)

        logger.info(
            "World constructed",
            title=world.title,
            rooms=len(world.rooms),
            entities=len(world.population),
            connections=resolved,
            omitted_connections=omitted,
        )
        return world

    def _instantiate(self, world: WorldGraph, records: list[RoomRecord]) -> ConnectionMap:
        """Pass 1: create rooms, items and entities; collect neighbour ids."""
        connections: ConnectionMap = {}
        item_ids: set[int] = set()

        for record in records:
            if record.id in connections:
                self._on_duplicate("room", record.id, record.name)
            room = Room(record.name, record.id, record.description)
            world.add_room(room)
            room.add_items(self._make_item(rec, item_ids) for rec in record.inventory)
            # Legacy duplicate handling keeps the first room's connections.
            connections.setdefault(record.id, list(record.connections))

            loaded = self._load_entities(world, record.entities, item_ids)
            # Attach only the entities this record just added to the population.
            if loaded:
                room.add_entities(world.population[-loaded:])

            logger.debug(
                "Room loaded",
                room=room.name,
                room_id=room.room_id,
                items=len(room.items),
                entities=loaded,
            )
        return connections

    def _load_entities(
        self, world: WorldGraph, records: list[EntityRecord], item_ids: set[int]
    ) -> int:
        """Create entities, register them in the population and return the count."""
        for record in records:
            entity = Entity(
                record.name,
                stats=EntityStats(
                    health=record.health,
                    stamina=record.stamina,
                    intelligence=record.intelligence,
                    agility=record.agility,
                    strength=record.strength,
                    stealth=record.stealth,
                    charisma=record.charisma,
                ),
            )
            entity.add_items(self._make_item(rec, item_ids) for rec in record.inventory)
            world.add_entity(entity)
        return len(records)

    def _connect(self, world: WorldGraph, connections: ConnectionMap) -> tuple[int, int]:
        """Pass 2: resolve neighbour ids into room references.

        Unknown parent or neighbour ids are skipped.

        Returns:
            (connections added, connections omitted).
        """
        index: dict[int, Room] = {}
        for room in world.rooms:
            index.setdefault(room.room_id, room)

        resolved = omitted = 0
        for parent_id, neighbour_ids in connections.items():
            parent = index.get(parent_id)
            if parent is None:
                omitted += len(neighbour_ids)
                continue
            for neighbour_id in neighbour_ids:
                neighbour = index.get(neighbour_id)
                if neighbour is None:
                    omitted += 1
                    continue
                parent.add_neighbour(neighbour)
                resolved += 1
        return resolved, omitted

    def _make_item(self, record: ItemRecord, item_ids: set[int]) -> Owned[Item]:
        if record.id in item_ids:
            self._on_duplicate("item", record.id, record.name)
        item_ids.add(record.id)
        if record.key is not None:
            return Owned(Key(record.name, record.id, record.description, key_id=record.key))
        return Owned(Item(record.name, record.id, record.description))

    def _on_duplicate(self, kind: str, identifier: int, name: str) -> None:
        if self._settings.reject_duplicate_ids:
            raise AmbiguousIdentifierError(
                f"Duplicate {kind} identifier {identifier} (on {name!r})"
            )
        logger.warning(
            "Duplicate identifier; first registered wins",
            kind=kind,
            identifier=identifier,
            name=name,
        )


def init_world(
    source: str | Path | RecordSource | Iterable[RawRecord],
    *,
    title: str | None = None,
    settings: WorldSettings | None = None,
) -> WorldGraph:
    """Load and connect a world.

    Args:
        source: Story file path, a RecordSource, or room records in file order.
        title: Overrides the source's title.
        settings: Construction settings. Cached settings are used when omitted.

    Returns:
        Fully connected WorldGraph.

    Raises:
        FileNotFoundError: If ``source`` is a path that does not exist.
        MalformedRecordError: If the source or any record is malformed.
        AmbiguousIdentifierError: If identifiers repeat and duplicates are rejected.
    """
    if isinstance(source, (str, Path)):
        source = XmlStorySource(source)
    if isinstance(source, RecordSource):
        return WorldBuilder(settings).build(source.records(), title or source.title)
    return WorldBuilder(settings).build(source, title)
