"""Load grid and objective data from the plain-text world files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from fogwalk.sim.contracts import Coord, JourneySpec, ObjectiveSpec
from fogwalk.sim.errors import FogwalkError, LoaderError
from fogwalk.sim.grid import GridGraph


@dataclass(frozen=True)
class WorldPaths:
    nodes: Path
    edges: Path
    objectives: Path


def load_world(paths: WorldPaths) -> tuple[GridGraph, JourneySpec]:
    grid = load_grid(paths.nodes, paths.edges)
    journey = load_journey(paths.objectives)
    return grid, journey


def load_grid(node_path: Path, edge_path: Path) -> GridGraph:
    grid = GridGraph()
    load_nodes(node_path, grid)
    load_edges(edge_path, grid)
    return grid


def load_nodes(path: Path, grid: GridGraph) -> None:
    """Populate ``grid`` from a node file.

    The first line holds ``width height``; every following line is
    ``x y type``.
    """
    lines = _numbered_lines(path)
    first = next(lines, None)
    if first is None:
        raise LoaderError(path, 1, "missing grid size line")
    number, words = first
    width, height = _parse_ints(path, number, words, 2, "width height")
    _wrap(path, number, grid.build, width, height)

    for number, words in lines:
        if len(words) != 3:
            raise LoaderError(path, number, "expected 'x y type'")
        x, y = _parse_ints(path, number, words[:2], 2, "x y")
        _wrap(path, number, grid.add_node, (x, y), words[2])


def load_edges(path: Path, grid: GridGraph) -> None:
    """Add bidirectional edges from lines shaped ``x1-y1,x2-y2 weight``."""
    for number, words in _numbered_lines(path):
        if len(words) != 2:
            raise LoaderError(path, number, "expected 'x1-y1,x2-y2 weight'")
        ends = words[0].split(",")
        if len(ends) != 2:
            raise LoaderError(path, number, f"bad edge endpoints {words[0]!r}")
        a = _parse_coord(path, number, ends[0])
        b = _parse_coord(path, number, ends[1])
        try:
            weight = float(words[1])
        except ValueError as exc:
            raise LoaderError(path, number, f"bad weight {words[1]!r}") from exc
        _wrap(path, number, grid.add_edge, a, b, weight)


def load_journey(path: Path) -> JourneySpec:
    """Read the radius, the start coord and the ordered objectives."""
    lines = _numbered_lines(path)
    radius_line = next(lines, None)
    if radius_line is None:
        raise LoaderError(path, 1, "missing visibility radius")
    number, words = radius_line
    (radius,) = _parse_ints(path, number, words[:1], 1, "radius")

    start_line = next(lines, None)
    if start_line is None:
        raise LoaderError(path, number + 1, "missing start coordinates")
    number, words = start_line
    start = _parse_ints(path, number, words[:2], 2, "x y")

    objectives: list[ObjectiveSpec] = []
    for number, words in lines:
        coord = _parse_ints(path, number, words[:2], 2, "x y")
        objectives.append(ObjectiveSpec(coord=coord, options=words[2:]))

    try:
        return JourneySpec(radius=radius, start=start, objectives=objectives)
    except ValidationError as exc:
        raise LoaderError(path, 1, str(exc)) from exc


def _numbered_lines(path: Path) -> Iterator[tuple[int, list[str]]]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing world data file: {path}") from exc
    for number, line in enumerate(text.splitlines(), start=1):
        words = line.split()
        if words:
            yield number, words


def _parse_ints(
    path: Path, number: int, words: list[str], count: int, shape: str
) -> Coord | tuple[int]:
    if len(words) < count:
        raise LoaderError(path, number, f"expected '{shape}'")
    try:
        return tuple(int(word) for word in words[:count])  # type: ignore[return-value]
    except ValueError as exc:
        raise LoaderError(path, number, f"expected integers for '{shape}'") from exc


def _parse_coord(path: Path, number: int, raw: str) -> Coord:
    parts = raw.split("-")
    if len(parts) != 2:
        raise LoaderError(path, number, f"bad coordinate {raw!r}")
    return _parse_ints(path, number, parts, 2, "x-y")  # type: ignore[return-value]


def _wrap(path: Path, number: int, func, *args) -> None:
    try:
        func(*args)
    except FogwalkError as exc:
        raise LoaderError(path, number, str(exc)) from exc
