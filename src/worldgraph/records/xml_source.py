"""XML story reader.

Reads the story file layout::

    <world title="The Keep">
      <room>
        <name>Hall</name> <id>1</id> <description>...</description>
        <inventory>
          <object><name>Key</name><id>10</id><description>...</description><key>2</key></object>
        </inventory>
        <connections><id>2</id></connections>
        <entity>
          <name>Guard</name> <health>30</health>
          <inventory>...</inventory>
        </entity>
      </room>
    </world>

Elements are turned into plain mappings; required-field checks happen in
``parse_room_record`` so every source reports missing fields the same way.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET  # nosec B405 - story files are local, trusted input
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from worldgraph.records.models import MalformedRecordError

_STAT_FIELDS = (
    "health",
    "stamina",
    "intelligence",
    "agility",
    "strength",
    "stealth",
    "charisma",
)


def _text_fields(element: ET.Element, names: tuple[str, ...]) -> dict[str, Any]:
    """Collect child element text for each present name."""
    fields: dict[str, Any] = {}
    for name in names:
        child = element.find(name)
        if child is not None:
            fields[name] = (child.text or "").strip()
    return fields


def _inventory(element: ET.Element) -> list[dict[str, Any]]:
    inventory = element.find("inventory")
    if inventory is None:
        return []
    return [
        _text_fields(obj, ("name", "id", "description", "key"))
        for obj in inventory.findall("object")
    ]


def _connections(element: ET.Element) -> list[str]:
    connections = element.find("connections")
    if connections is None:
        return []
    return [(conn.text or "").strip() for conn in connections.findall("id")]


def _entity(element: ET.Element) -> dict[str, Any]:
    record = _text_fields(element, ("name", *_STAT_FIELDS))
    record["inventory"] = _inventory(element)
    return record


def _room(element: ET.Element) -> dict[str, Any]:
    record = _text_fields(element, ("name", "id", "description"))
    record["inventory"] = _inventory(element)
    record["connections"] = _connections(element)
    record["entities"] = [_entity(ent) for ent in element.findall("entity")]
    return record


class XmlStorySource:
    """Record source reading a story XML file.

    The file is parsed eagerly so that I/O and syntax errors surface before
    world construction starts.

    Args:
        path: Path to the story file.

    Raises:
        FileNotFoundError: If the file does not exist.
        MalformedRecordError: If the XML cannot be parsed or the root element
            is not ``world``.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        try:
            tree = ET.parse(self._path)  # nosec B314
        except ET.ParseError as e:
            raise MalformedRecordError(f"Cannot parse story file {self._path}: {e}") from e
        self._root = tree.getroot()
        if self._root.tag != "world":
            raise MalformedRecordError(
                f"Story file {self._path} has root <{self._root.tag}>, expected <world>"
            )

    @property
    def path(self) -> Path:
        return self._path

    @property
    def title(self) -> str | None:
        return self._root.get("title")

    def records(self) -> Iterator[dict[str, Any]]:
        for room in self._root.findall("room"):
            yield _room(room)
