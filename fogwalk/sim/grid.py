"""Fixed-size 2D grid of typed nodes with monotonic visibility."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from fogwalk.sim.contracts import Coord
from fogwalk.sim.errors import (
    CoordinateOutOfBoundsError,
    DuplicateNodeError,
    GridStateError,
    NodeNotFoundError,
)


@dataclass
class Node:
    coord: Coord
    type: str
    seen: bool = False
    edges: dict[Coord, float] = field(default_factory=dict)

    @property
    def x(self) -> int:
        return self.coord[0]

    @property
    def y(self) -> int:
        return self.coord[1]


class GridGraph:
    """Coordinate-addressed node arena plus an index of nodes by type tag.

    Cells are stored in a flat list (``y * width + x``). The grid is built once
    and afterwards only mutated by visibility reveals and type reclassification.
    """

    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self._cells: list[Node | None] | None = None
        self._by_type: dict[str, list[Node]] = {}

    @classmethod
    def of_size(cls, width: int, height: int) -> "GridGraph":
        grid = cls()
        grid.build(width, height)
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_built(self) -> bool:
        return self._cells is not None

    def build(self, width: int, height: int) -> None:
        if self._cells is not None:
            raise GridStateError("Grid has already been built.")
        if width <= 0 or height <= 0:
            raise GridStateError(f"Grid size must be positive, got {width}x{height}.")
        self._width = width
        self._height = height
        self._cells = [None] * (width * height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def add_node(self, coord: Coord, type: str) -> Node:
        cells = self._require_cells()
        x, y = coord
        if not self.in_bounds(x, y):
            raise CoordinateOutOfBoundsError(coord, self._width, self._height)
        index = self._index(x, y)
        if cells[index] is not None:
            raise DuplicateNodeError(coord)
        node = Node(coord=(x, y), type=type)
        cells[index] = node
        self._by_type.setdefault(type, []).append(node)
        return node

    def add_edge(self, a: Coord, b: Coord, weight: float) -> None:
        # Weights are assumed non-negative; the search relies on it.
        node_a = self.node(a)
        node_b = self.node(b)
        node_a.edges[node_b.coord] = weight
        node_b.edges[node_a.coord] = weight

    def node(self, coord: Coord) -> Node:
        cells = self._require_cells()
        x, y = coord
        if not self.in_bounds(x, y):
            raise NodeNotFoundError(coord)
        node = cells[self._index(x, y)]
        if node is None:
            raise NodeNotFoundError(coord)
        return node

    def get(self, coord: Coord) -> Node | None:
        if self._cells is None or not self.in_bounds(*coord):
            return None
        return self._cells[self._index(*coord)]

    def contains(self, coord: Coord) -> bool:
        return self.get(coord) is not None

    def __contains__(self, coord: object) -> bool:
        if not isinstance(coord, tuple) or len(coord) != 2:
            return False
        return self.contains(coord)

    def __iter__(self) -> Iterator[Node]:
        for node in self._cells or []:
            if node is not None:
                yield node

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def nodes_of_type(self, type: str) -> list[Node]:
        return list(self._by_type.get(type, []))

    def types(self) -> list[str]:
        return sorted(tag for tag, nodes in self._by_type.items() if nodes)

    def is_seen(self, coord: Coord) -> bool:
        return self.node(coord).seen

    def seen_count(self) -> int:
        return sum(1 for node in self if node.seen)

    def reveal_within_radius(self, center: Coord, radius: int) -> list[Coord]:
        """Mark every node within ``radius`` of ``center`` as seen.

        Distance is Euclidean, compared in squared form. Returns the coords
        that were hidden before this call.
        """
        center_node = self.node(center)
        revealed: list[Coord] = []
        if not center_node.seen:
            center_node.seen = True
            revealed.append(center_node.coord)

        cx, cy = center_node.coord
        r_squared = radius * radius
        cells = self._require_cells()
        for x in range(max(0, cx - radius), min(self._width, cx + radius + 1)):
            dx = x - cx
            for y in range(max(0, cy - radius), min(self._height, cy + radius + 1)):
                dy = y - cy
                if dx * dx + dy * dy > r_squared:
                    continue
                node = cells[self._index(x, y)]
                if node is None or node.seen:
                    continue
                node.seen = True
                revealed.append(node.coord)
        return revealed

    def reclassify(self, type: str, new_type: str) -> int:
        if type == new_type:
            return len(self._by_type.get(type, []))
        nodes = self._by_type.pop(type, [])
        for node in nodes:
            node.type = new_type
        if nodes:
            self._by_type.setdefault(new_type, []).extend(nodes)
        return len(nodes)

    def _index(self, x: int, y: int) -> int:
        return y * self._width + x

    def _require_cells(self) -> list[Node | None]:
        if self._cells is None:
            raise GridStateError("Grid has not been built yet.")
        return self._cells


def within_radius(a: Coord, b: Coord, radius: int) -> bool:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy <= radius * radius
