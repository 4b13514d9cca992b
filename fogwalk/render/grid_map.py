"""Render the fogged grid as rich text."""

from __future__ import annotations

from typing import Iterable

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from fogwalk.sim.contracts import PASSABLE, WALL, Coord
from fogwalk.sim.grid import GridGraph, Node

TILE_STYLES = {
    ".": "grey70",
    "#": "bright_magenta",
    "?": "grey35",
    " ": "grey23",
}

OBSTACLE_STYLE = "yellow"
OBJECTIVE_STYLE = "bold bright_green"
TRAVELER_STYLE = "bold bright_cyan"


def tile_for(node: Node | None, *, fog: bool = True) -> str:
    if node is None:
        return " "
    if fog and not node.seen:
        return "?"
    if node.type == PASSABLE:
        return "."
    if node.type == WALL:
        return "#"
    return node.type[:1]


def render_grid_lines(
    grid: GridGraph,
    *,
    traveler: Coord | None = None,
    objectives: Iterable[Coord] = (),
    fog: bool = True,
) -> list[Text]:
    marks = {coord: "*" for coord in objectives}
    if traveler is not None:
        marks[traveler] = "@"

    lines: list[Text] = []
    for y in range(grid.height):
        line = Text()
        for x in range(grid.width):
            mark = marks.get((x, y))
            if mark == "@":
                line.append(mark, style=TRAVELER_STYLE)
                continue
            if mark == "*":
                line.append(mark, style=OBJECTIVE_STYLE)
                continue
            tile = tile_for(grid.get((x, y)), fog=fog)
            line.append(tile, style=TILE_STYLES.get(tile, OBSTACLE_STYLE))
        lines.append(line)
    return lines


def render_grid(
    grid: GridGraph,
    *,
    traveler: Coord | None = None,
    objectives: Iterable[Coord] = (),
    fog: bool = True,
) -> RenderableType:
    lines = render_grid_lines(
        grid, traveler=traveler, objectives=objectives, fog=fog
    )
    title = f"Grid {grid.width}x{grid.height} ({grid.seen_count()}/{len(grid)} seen)"
    return Panel(Group(*lines), title=title)
