"""Step-by-step movement along a planned path."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from fogwalk.sim.contracts import PASSABLE, Coord
from fogwalk.sim.grid import GridGraph, within_radius


@dataclass(frozen=True)
class MoveOutcome:
    position: Coord
    steps: list[Coord] = field(default_factory=list)
    blocked: bool = False


def advance_along_path(
    grid: GridGraph, start: Coord, path: list[Coord], radius: int
) -> MoveOutcome:
    """Walk ``path`` until its end or until a revealed obstacle lies ahead.

    Before every step the traveler looks around; if any node still on the
    path is within ``radius``, seen, and not passable, movement stops on the
    current node so the caller can plan again from there.
    """
    if not path:
        return MoveOutcome(position=start)

    remaining: deque[Coord] = deque(path)
    current = remaining[0]
    steps: list[Coord] = []
    while len(remaining) > 1:
        grid.reveal_within_radius(current, radius)
        if _path_blocked(grid, current, remaining, radius):
            return MoveOutcome(position=current, steps=steps, blocked=True)
        remaining.popleft()
        current = remaining[0]
        steps.append(current)
    return MoveOutcome(position=current, steps=steps)


def _path_blocked(
    grid: GridGraph, current: Coord, remaining: deque[Coord], radius: int
) -> bool:
    for coord in remaining:
        node = grid.node(coord)
        if node.type == PASSABLE:
            continue
        if node.seen and within_radius(current, coord, radius):
            return True
    return False
