"""Grid model, pathfinding and the objective loop."""

from fogwalk.sim.contracts import (
    PASSABLE,
    WALL,
    Coord,
    Event,
    EventKind,
    JourneySpec,
    ObjectiveSpec,
)
from fogwalk.sim.errors import (
    CoordinateOutOfBoundsError,
    DuplicateNodeError,
    FogwalkError,
    FrontierEmptyError,
    FrontierKeyError,
    GridStateError,
    HeapInvariantError,
    LoaderError,
    NodeNotFoundError,
    ReplanLimitError,
)
from fogwalk.sim.frontier import PriorityFrontier
from fogwalk.sim.grid import GridGraph, Node
from fogwalk.sim.journey import Journey
from fogwalk.sim.movement import MoveOutcome
from fogwalk.sim.pathfinding import PathEngine, SearchResult, is_passable
from fogwalk.sim.wizard import OptionChoice, OptionEvaluator

__all__ = [
    "PASSABLE",
    "WALL",
    "Coord",
    "CoordinateOutOfBoundsError",
    "DuplicateNodeError",
    "Event",
    "EventKind",
    "FogwalkError",
    "FrontierEmptyError",
    "FrontierKeyError",
    "GridGraph",
    "GridStateError",
    "HeapInvariantError",
    "Journey",
    "JourneySpec",
    "LoaderError",
    "MoveOutcome",
    "Node",
    "NodeNotFoundError",
    "ObjectiveSpec",
    "OptionChoice",
    "OptionEvaluator",
    "PathEngine",
    "PriorityFrontier",
    "ReplanLimitError",
    "SearchResult",
    "is_passable",
]
