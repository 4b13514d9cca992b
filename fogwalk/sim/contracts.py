"""Data contracts shared by the loader, the journey loop and the run log."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

Coord = tuple[int, int]

PASSABLE = "0"
WALL = "1"


class EventKind(str, Enum):
    MOVE = "MOVE"
    BLOCKED = "BLOCKED"
    OBJECTIVE_REACHED = "OBJECTIVE_REACHED"
    OPTION_CHOSEN = "OPTION_CHOSEN"


class Event(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: EventKind
    payload: dict[str, Any] = Field(default_factory=dict)

    def to_line(self) -> str:
        """Render the human-readable progress line for this event."""
        if self.kind == EventKind.MOVE:
            return f"Moving to {self.payload['x']}-{self.payload['y']}"
        if self.kind == EventKind.BLOCKED:
            return "Path is impassable!"
        if self.kind == EventKind.OBJECTIVE_REACHED:
            return f"Objective {self.payload['index']} reached!"
        return f"Number {self.payload['option']} is chosen!"


def move_event(coord: Coord) -> Event:
    return Event(kind=EventKind.MOVE, payload={"x": coord[0], "y": coord[1]})


def blocked_event(coord: Coord) -> Event:
    return Event(kind=EventKind.BLOCKED, payload={"x": coord[0], "y": coord[1]})


class ObjectiveSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    coord: Coord
    options: list[str] = Field(default_factory=list)


class JourneySpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    radius: int
    start: Coord
    objectives: list[ObjectiveSpec] = Field(default_factory=list)

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, value: int) -> int:
        if value < 0:
            raise ValueError("radius must be non-negative")
        return value


class RunHeader(BaseModel):
    model_config = ConfigDict(extra="forbid")

    run_id: str
    width: int
    height: int
    radius: int
    start: Coord
    objectives: int
