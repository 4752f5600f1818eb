"""Tests for two-pass world construction.

Critical Invariants:
- Every neighbour reference is a registered room (no dangling handles)
- Entities occupy exactly the rooms whose records declared them
- Unresolvable connections are omitted, never fatal
- Malformed records abort construction without returning a graph
"""

import pytest
from structlog.testing import capture_logs

from worldgraph import (
    AmbiguousIdentifierError,
    ItemKind,
    Key,
    MalformedRecordError,
    MemorySource,
    RoomRecord,
    WorldBuilder,
    init_world,
)


def test_scenario_hall_and_vault(settings):
    """Hall -> Vault; Vault has no exits."""
    world = init_world(
        [
            {"name": "Hall", "id": 1, "description": "", "connections": [2]},
            {"name": "Vault", "id": 2, "description": "", "connections": []},
        ],
        settings=settings,
    )

    hall, vault = world.rooms
    assert hall.neighbours == (vault,)
    assert vault.neighbours == ()


def test_forward_references_are_resolved(keep_records, settings):
    world = init_world(keep_records, settings=settings)

    hall = world.room(1)
    assert [room.name for room in hall.neighbours] == ["Vault", "Yard"]


def test_no_dangling_neighbours(keep_records, settings):
    world = init_world(keep_records, settings=settings)

    registered = {id(room) for room in world.rooms}
    for room in world.rooms:
        for neighbour in room.neighbours:
            assert id(neighbour) in registered
    assert world.dangling_neighbours() == []


def test_unknown_neighbour_is_omitted(keep_records, settings):
    """Yard lists 99, which does not exist: construction succeeds without it."""
    world = init_world(keep_records, settings=settings)

    yard = world.room(3)
    assert [room.room_id for room in yard.neighbours] == [1]


def test_neighbours_are_shared_with_registry(keep_records, settings):
    world = init_world(keep_records, settings=settings)

    assert world.room(1).neighbours[0] is world.room(2)
    assert world.room(3).neighbours[0] is world.room(1)


def test_entity_inventory_not_duplicated_in_room(keep_records, settings):
    """Guard under Hall holds exactly the Sword; Hall does not."""
    world = init_world(keep_records, settings=settings)

    hall = world.room(1)
    guard = world.find_entity("Guard")
    assert guard in hall.occupants
    assert [item.name for item in guard.items] == ["Sword"]
    assert "Sword" not in [item.name for item in hall.items]


def test_entities_attached_only_to_declaring_room(keep_records, settings):
    """CRITICAL: each entity occupies exactly the room whose record declared it.

    Why: Population is global; only the newly loaded slice may be attached.
    """
    world = init_world(keep_records, settings=settings)

    assert [e.name for e in world.population] == ["Guard", "Dog", "Groom"]
    assert [e.name for e in world.room(1).occupants] == ["Guard"]
    assert world.room(2).occupants == ()
    assert [e.name for e in world.room(3).occupants] == ["Dog", "Groom"]
    for entity in world.population:
        assert len(world.rooms_of(entity)) == 1


def test_occupants_are_population_members(keep_records, settings):
    world = init_world(keep_records, settings=settings)

    population = {id(e) for e in world.population}
    for room in world.rooms:
        assert all(id(occupant) in population for occupant in room.occupants)


def test_entity_stats_loaded(keep_records, settings):
    world = init_world(keep_records, settings=settings)

    assert world.find_entity("Guard").stats.strength == 12


def test_key_records_become_keys(keep_records, settings):
    world = init_world(keep_records, settings=settings)

    key = world.room(1).inventory.find("Iron key")
    torch = world.room(1).inventory.find("Torch")
    assert isinstance(key, Key)
    assert key.kind is ItemKind.KEY
    assert key.key_id == 2
    assert torch.kind is ItemKind.OBJECT


def test_rooms_start_locked(keep_records, settings):
    world = init_world(keep_records, settings=settings)

    assert all(room.is_locked for room in world.rooms)


def test_registry_keeps_load_order(keep_records, settings):
    world = init_world(keep_records, settings=settings)

    assert [room.room_id for room in world.rooms] == [1, 2, 3]


def test_self_connection(settings):
    world = init_world(
        [{"name": "Loop", "id": 7, "description": "", "connections": [7]}],
        settings=settings,
    )

    loop = world.room(7)
    assert loop.neighbours == (loop,)


def test_accepts_validated_records(settings):
    world = init_world([RoomRecord(name="Hall", id=1, description="")], settings=settings)

    assert world.room(1).name == "Hall"


def test_title_precedence(settings):
    source = MemorySource("From Source", [])

    assert init_world(source, settings=settings).title == "From Source"
    assert init_world(source, title="Override", settings=settings).title == "Override"
    assert init_world([], settings=settings).title == settings.default_title


def test_malformed_record_aborts_whole_load(keep_records, settings):
    """A bad record late in the stream still prevents any graph being returned."""
    keep_records.append({"name": "Attic", "id": 4})

    with pytest.raises(MalformedRecordError, match="Attic"):
        init_world(keep_records, settings=settings)


def test_malformed_nested_item_aborts(keep_records, settings):
    keep_records[1]["inventory"] = [{"name": "Ghost", "id": 30}]

    with pytest.raises(MalformedRecordError):
        init_world(keep_records, settings=settings)


class TestDuplicateIdentifiers:
    def test_duplicate_room_id_rejected(self, settings):
        records = [
            {"name": "Hall", "id": 1, "description": ""},
            {"name": "Annex", "id": 1, "description": ""},
        ]

        with pytest.raises(AmbiguousIdentifierError, match="room identifier 1"):
            init_world(records, settings=settings)

    def test_duplicate_item_id_rejected(self, settings):
        records = [
            {
                "name": "Hall",
                "id": 1,
                "description": "",
                "inventory": [{"name": "Torch", "id": 5, "description": ""}],
                "entities": [
                    {"name": "Guard", "inventory": [{"name": "Sword", "id": 5, "description": ""}]}
                ],
            },
        ]

        with pytest.raises(AmbiguousIdentifierError, match="item identifier 5"):
            init_world(records, settings=settings)

    def test_legacy_mode_first_match_wins(self, legacy_settings):
        records = [
            {"name": "Hall", "id": 1, "description": "", "connections": [2]},
            {"name": "Vault", "id": 2, "description": "", "connections": []},
            {"name": "Annex", "id": 2, "description": "", "connections": [1]},
        ]

        with capture_logs() as logs:
            world = init_world(records, settings=legacy_settings)

        vault, annex = world.rooms[1], world.rooms[2]
        assert world.room(1).neighbours == (vault,)
        assert world.room(2) is vault
        # The connection map keeps the first room's list only.
        assert vault.neighbours == ()
        assert annex.neighbours == ()
        assert any(
            entry["log_level"] == "warning" and entry["identifier"] == 2 for entry in logs
        )


def test_builder_logs_summary(keep_records, settings):
    with capture_logs() as logs:
        WorldBuilder(settings).build(keep_records, title="Keep")

    summary = next(entry for entry in logs if entry["event"] == "World constructed")
    assert summary["rooms"] == 3
    assert summary["entities"] == 3
    assert summary["connections"] == 3
    assert summary["omitted_connections"] == 1
