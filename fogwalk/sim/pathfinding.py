"""Grid-based pathfinding (Dijkstra) under partial visibility."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from fogwalk.sim.contracts import PASSABLE, WALL, Coord
from fogwalk.sim.frontier import PriorityFrontier
from fogwalk.sim.grid import GridGraph, Node
from fogwalk.sim.movement import MoveOutcome, advance_along_path


@dataclass(frozen=True)
class SearchResult:
    distance: float
    path: list[Coord] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.distance)


def is_passable(node: Node, help: str | None = None) -> bool:
    """Whether the search may route through ``node``.

    Unseen obstacles are assumed walkable until revealed.
    """
    if node.type == WALL:
        return False
    if node.type == PASSABLE or node.type == help:
        return True
    return not node.seen


class PathEngine:
    def __init__(self, grid: GridGraph) -> None:
        self._grid = grid

    @property
    def grid(self) -> GridGraph:
        return self._grid

    def search(
        self,
        source: Coord,
        target: Coord,
        *,
        radius: int,
        help: str | None = None,
    ) -> SearchResult:
        grid = self._grid
        start = grid.node(source)
        goal = grid.node(target)
        grid.reveal_within_radius(start.coord, radius)

        dist: dict[Coord, float] = {start.coord: 0.0}
        prev: dict[Coord, Coord] = {}
        finalized: set[Coord] = set()
        frontier: PriorityFrontier[Coord] = PriorityFrontier()
        frontier.insert(start.coord, 0.0)

        while not frontier.is_empty():
            entry = frontier.extract_min()
            current = entry.key
            if current in finalized:
                continue
            finalized.add(current)
            if current == goal.coord:
                break

            node = grid.node(current)
            if not is_passable(node, help):
                continue
            base = dist[current]
            for neighbor_coord, weight in node.edges.items():
                if neighbor_coord in finalized:
                    continue
                neighbor = grid.node(neighbor_coord)
                if not is_passable(neighbor, help):
                    continue
                candidate = base + weight
                if candidate < dist.get(neighbor_coord, math.inf):
                    dist[neighbor_coord] = candidate
                    prev[neighbor_coord] = current
                    frontier.insert(neighbor_coord, candidate)

        distance = dist.get(goal.coord, math.inf)
        return SearchResult(
            distance=distance,
            path=self._reconstruct_path(prev, start.coord, goal.coord, distance),
        )

    def advance(self, start: Coord, path: list[Coord], radius: int) -> MoveOutcome:
        return advance_along_path(self._grid, start, path, radius)

    @staticmethod
    def _reconstruct_path(
        prev: dict[Coord, Coord],
        source: Coord,
        target: Coord,
        distance: float,
    ) -> list[Coord]:
        if math.isinf(distance):
            return []
        path = [target]
        current = target
        while current != source:
            current = prev[current]
            path.append(current)
        path.reverse()
        return path
