"""Tests for record validation."""

import pytest

from worldgraph import MalformedRecordError, RoomRecord
from worldgraph.records import parse_room_record


def test_minimal_room_record_gets_empty_lists():
    record = parse_room_record({"name": "Hall", "id": 1, "description": ""})

    assert record.inventory == []
    assert record.connections == []
    assert record.entities == []


def test_numeric_text_is_coerced():
    """Story files deliver identifiers as text."""
    record = parse_room_record(
        {"name": "Hall", "id": "1", "description": "", "connections": ["2", "3"]}
    )

    assert record.id == 1
    assert record.connections == [2, 3]


def test_validated_record_passes_through():
    record = RoomRecord(name="Hall", id=1, description="")

    assert parse_room_record(record) is record


def test_item_key_field_is_optional():
    record = parse_room_record(
        {
            "name": "Hall",
            "id": 1,
            "description": "",
            "inventory": [
                {"name": "Torch", "id": 3, "description": ""},
                {"name": "Key", "id": 4, "description": "", "key": 2},
            ],
        }
    )

    assert record.inventory[0].key is None
    assert record.inventory[1].key == 2


def test_entity_stats_default_to_zero():
    record = parse_room_record(
        {"name": "Hall", "id": 1, "description": "", "entities": [{"name": "Guard", "agility": 4}]}
    )

    entity = record.entities[0]
    assert entity.agility == 4
    assert entity.health == 0


@pytest.mark.parametrize("missing", ["name", "id", "description"])
def test_room_missing_required_field(missing):
    raw = {"name": "Hall", "id": 1, "description": ""}
    del raw[missing]

    with pytest.raises(MalformedRecordError, match=missing):
        parse_room_record(raw)


@pytest.mark.parametrize("missing", ["name", "id", "description"])
def test_item_missing_required_field(missing):
    item = {"name": "Torch", "id": 3, "description": ""}
    del item[missing]

    with pytest.raises(MalformedRecordError):
        parse_room_record({"name": "Hall", "id": 1, "description": "", "inventory": [item]})


def test_entity_without_name_is_malformed():
    with pytest.raises(MalformedRecordError):
        parse_room_record(
            {"name": "Hall", "id": 1, "description": "", "entities": [{"inventory": []}]}
        )


def test_non_numeric_identifier_is_malformed():
    with pytest.raises(MalformedRecordError):
        parse_room_record({"name": "Hall", "id": "first", "description": ""})


def test_malformed_error_chains_validation_error():
    with pytest.raises(MalformedRecordError) as info:
        parse_room_record({"id": 1, "description": ""})

    assert info.value.__cause__ is not None
    assert isinstance(info.value, ValueError)
