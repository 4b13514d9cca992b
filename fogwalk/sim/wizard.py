"""Pick the unlock option that most shortens the route to the next objective."""

from __future__ import annotations

from dataclasses import dataclass, field

from fogwalk.sim.contracts import PASSABLE, WALL, Coord
from fogwalk.sim.frontier import PriorityFrontier
from fogwalk.sim.grid import GridGraph
from fogwalk.sim.pathfinding import PathEngine


@dataclass(frozen=True)
class OptionChoice:
    option: str
    distance: float
    trials: dict[str, float] = field(default_factory=dict)


class OptionEvaluator:
    """Trial-run a search per option and permanently unlock the best one.

    Trial searches reveal the map around ``current`` like any other search;
    those reveals are kept. Walls are never offered as an unlock; a call
    whose options are all walls returns ``None`` and changes nothing.
    """

    def __init__(self, grid: GridGraph, engine: PathEngine | None = None) -> None:
        self._grid = grid
        self._engine = engine or PathEngine(grid)

    def choose_best(
        self,
        options: list[str],
        current: Coord,
        target: Coord,
        radius: int,
    ) -> OptionChoice | None:
        candidates = [option for option in options if option != WALL]
        if not candidates:
            return None

        ranking: PriorityFrontier[str] = PriorityFrontier()
        trials: dict[str, float] = {}
        for option in candidates:
            result = self._engine.search(current, target, radius=radius, help=option)
            trials[option] = result.distance
            ranking.insert(option, result.distance)

        best = ranking.extract_min()
        self._grid.reclassify(best.key, PASSABLE)
        options.clear()
        return OptionChoice(option=best.key, distance=best.priority, trials=trials)
