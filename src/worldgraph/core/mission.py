"""Missions: objectives with a minimal status field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from worldgraph.core.room import Room


class MissionStatus(Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass(slots=True, eq=False)
class Mission:
    """An objective pointing at a room, an item, or both.

    The target item is named by its identifier: items stay exclusively owned by
    whichever room or entity holds them.

    Raises:
        ValueError: If neither target is given.
    """

    description: str
    target_room: Room | None = None
    target_item_id: int | None = None
    status: MissionStatus = MissionStatus.IN_PROGRESS

    def __post_init__(self) -> None:
        if self.target_room is None and self.target_item_id is None:
            raise ValueError("Mission needs a target room or a target item")

    @property
    def finished(self) -> bool:
        return self.status is MissionStatus.FINISHED

    def complete(self) -> None:
        self.status = MissionStatus.FINISHED
