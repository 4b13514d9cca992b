"""Objective loop: plan, walk, replan on blockage, unlock options between legs."""

from __future__ import annotations

import math
from typing import Iterable, Iterator

from fogwalk.sim.contracts import (
    Coord,
    Event,
    EventKind,
    ObjectiveSpec,
    blocked_event,
    move_event,
)
from fogwalk.sim.errors import ReplanLimitError
from fogwalk.sim.grid import GridGraph
from fogwalk.sim.pathfinding import PathEngine
from fogwalk.sim.wizard import OptionEvaluator


class Journey:
    def __init__(
        self,
        grid: GridGraph,
        *,
        radius: int,
        engine: PathEngine | None = None,
        wizard: OptionEvaluator | None = None,
        max_replans: int | None = None,
    ) -> None:
        self._grid = grid
        self._radius = radius
        self._engine = engine or PathEngine(grid)
        self._wizard = wizard or OptionEvaluator(grid, self._engine)
        self._max_replans = max_replans
        self.position: Coord | None = None

    def run(
        self, start: Coord, objectives: Iterable[ObjectiveSpec]
    ) -> Iterator[Event]:
        """Yield progress events while visiting ``objectives`` in order.

        Options attached to an objective become available once it is reached
        and are spent before heading to the following objective. There is no
        bound on replanning unless ``max_replans`` is set.
        """
        self._grid.node(start)
        current = start
        self.position = current
        pending: list[str] = []

        for index, objective in enumerate(objectives, start=1):
            target = self._grid.node(objective.coord).coord

            if pending:
                choice = self._wizard.choose_best(
                    pending, current, target, self._radius
                )
                if choice is not None:
                    yield Event(
                        kind=EventKind.OPTION_CHOSEN,
                        payload={
                            "option": choice.option,
                            "distance": _finite_or_none(choice.distance),
                        },
                    )
                # Wall-only offers are left untouched by the wizard.
                pending.clear()

            replans = 0
            while current != target:
                if self._max_replans is not None and replans >= self._max_replans:
                    raise ReplanLimitError(target, self._max_replans)
                replans += 1
                result = self._engine.search(current, target, radius=self._radius)
                outcome = self._engine.advance(current, result.path, self._radius)
                for step in outcome.steps:
                    self.position = step
                    yield move_event(step)
                if outcome.blocked:
                    yield blocked_event(outcome.position)
                current = outcome.position
                self.position = current

            yield Event(
                kind=EventKind.OBJECTIVE_REACHED,
                payload={"index": index, "x": target[0], "y": target[1]},
            )
            pending.extend(objective.options)


def _finite_or_none(value: float) -> float | None:
    return None if math.isinf(value) else value
