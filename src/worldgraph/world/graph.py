"""WorldGraph: the rooms, entities and missions of one loaded world.

Usage:
    world = init_world("story.xml")

    hall = world.room(1)
    for room in world.reachable_from(hall):
        ...

    destroy_world(world)
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from worldgraph.core.entity import Entity
from worldgraph.core.mission import Mission
from worldgraph.core.room import Room


class WorldGraph:
    """Room registry, population registry and missions of a world.

    Registries keep load order. Rooms and entities are shared with the neighbour
    and occupant lists of other rooms; ``destroy`` clears every such edge so the
    whole graph is freed once the last outside reference goes away.

    Args:
        title: World title.
    """

    def __init__(self, title: str):
        self.title = title
        self._rooms: list[Room] = []
        self._population: list[Entity] = []
        self._missions: list[Mission] = []
        self._destroyed = False

    @property
    def rooms(self) -> tuple[Room, ...]:
        return tuple(self._rooms)

    @property
    def population(self) -> tuple[Entity, ...]:
        return tuple(self._population)

    @property
    def missions(self) -> tuple[Mission, ...]:
        return tuple(self._missions)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def add_room(self, room: Room) -> None:
        """Append a room to the registry."""
        self._rooms.append(room)

    def add_entity(self, entity: Entity) -> None:
        """Append an entity to the population registry."""
        self._population.append(entity)

    def add_mission(self, mission: Mission) -> None:
        self._missions.append(mission)

    def room(self, room_id: int) -> Room | None:
        """First registered room with ``room_id``, or None."""
        return next((room for room in self._rooms if room.room_id == room_id), None)

    def find_room(self, name: str) -> Room | None:
        return next((room for room in self._rooms if room.name == name), None)

    def find_entity(self, name: str) -> Entity | None:
        return next((ent for ent in self._population if ent.name == name), None)

    def rooms_of(self, entity: Entity) -> list[Room]:
        """Rooms listing ``entity`` as an occupant, in registry order."""
        return [
            room
            for room in self._rooms
            if any(occupant is entity for occupant in room.occupants)
        ]

    def reachable_from(self, start: Room) -> Iterator[Room]:
        """Breadth-first walk along neighbour edges, ``start`` included.

        Lock state is ignored; each room is yielded once.
        """
        seen = {id(start)}
        queue = deque([start])
        while queue:
            room = queue.popleft()
            yield room
            for neighbour in room.neighbours:
                if id(neighbour) not in seen:
                    seen.add(id(neighbour))
                    queue.append(neighbour)

    def dangling_neighbours(self) -> list[tuple[Room, Room]]:
        """(room, neighbour) pairs whose neighbour is not in the registry.

        Always empty for a graph produced by ``init_world``.
        """
        registered = {id(room) for room in self._rooms}
        return [
            (room, neighbour)
            for room in self._rooms
            for neighbour in room.neighbours
            if id(neighbour) not in registered
        ]

    def destroy(self) -> None:
        """Release every cross-reference, then empty the registries.

        Idempotent.
        """
        for room in self._rooms:
            room.release()
        for entity in self._population:
            entity.release()
        self._missions.clear()
        self._rooms.clear()
        self._population.clear()
        self._destroyed = True

    def __repr__(self) -> str:
        return (
            f"WorldGraph({self.title!r}, rooms={len(self._rooms)}, "
            f"population={len(self._population)})"
        )


def destroy_world(world: WorldGraph) -> None:
    """Tear down ``world``, releasing all room, occupant and item edges."""
    world.destroy()
