"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from worldgraph import Entity, Item, Key, Room, WorldSettings


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return WorldSettings(_env_file=None)


@pytest.fixture
def legacy_settings():
    """Settings that keep first-match behavior for duplicate identifiers."""
    return WorldSettings(_env_file=None, reject_duplicate_ids=False)


@pytest.fixture
def hall():
    return Room("Hall", 1, "A draughty entrance hall.")


@pytest.fixture
def vault():
    return Room("Vault", 2, "Steel walls on every side.")


@pytest.fixture
def guard():
    return Entity("Guard")


@pytest.fixture
def sword():
    return Item("Sword", 100, "Notched but sharp.")


@pytest.fixture
def vault_key():
    return Key("Iron key", 200, "Heavy and cold.", key_id=2)


@pytest.fixture
def keep_records():
    """Records for a small keep with a forward reference and a dangling exit."""
    return [
        {
            "name": "Hall",
            "id": 1,
            "description": "A draughty entrance hall.",
            "inventory": [
                {"name": "Iron key", "id": 10, "description": "Heavy.", "key": 2},
                {"name": "Torch", "id": 11, "description": "Smoking."},
            ],
            "connections": [2, 3],
            "entities": [
                {
                    "name": "Guard",
                    "strength": 12,
                    "inventory": [{"name": "Sword", "id": 20, "description": "Sharp."}],
                },
            ],
        },
        {
            "name": "Vault",
            "id": 2,
            "description": "Steel walls on every side.",
            "connections": [],
        },
        {
            "name": "Yard",
            "id": 3,
            "description": "Muddy.",
            "connections": [1, 99],
            "entities": [{"name": "Dog"}, {"name": "Groom"}],
        },
    ]
