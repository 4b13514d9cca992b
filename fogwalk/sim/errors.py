"""Error taxonomy for the grid, frontier and journey layers."""

from __future__ import annotations


class FogwalkError(Exception):
    """Base class for every error raised by fogwalk."""


class GridStateError(FogwalkError):
    """The grid was used out of its build lifecycle."""


class NodeNotFoundError(FogwalkError, KeyError):
    def __init__(self, coord: tuple[int, int]) -> None:
        super().__init__(f"Node not found at {coord[0]}-{coord[1]}.")
        self.coord = coord

    def __str__(self) -> str:
        return str(self.args[0])


class CoordinateOutOfBoundsError(FogwalkError, ValueError):
    def __init__(self, coord: tuple[int, int], width: int, height: int) -> None:
        super().__init__(
            f"Coordinate {coord[0]}-{coord[1]} is outside the {width}x{height} grid."
        )
        self.coord = coord


class DuplicateNodeError(FogwalkError, ValueError):
    def __init__(self, coord: tuple[int, int]) -> None:
        super().__init__(f"A node already exists at {coord[0]}-{coord[1]}.")
        self.coord = coord


class FrontierKeyError(FogwalkError, KeyError):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Key not found in frontier."


class FrontierEmptyError(FogwalkError, IndexError):
    """Extract or peek on an empty frontier."""


class HeapInvariantError(FogwalkError, AssertionError):
    """Heap order or the key index went out of sync (programming error)."""


class ReplanLimitError(FogwalkError):
    def __init__(self, objective: tuple[int, int], limit: int) -> None:
        super().__init__(
            f"Objective {objective[0]}-{objective[1]} not reached after "
            f"{limit} replans."
        )
        self.objective = objective
        self.limit = limit


class LoaderError(FogwalkError, ValueError):
    def __init__(self, path: object, line_number: int, reason: str) -> None:
        super().__init__(f"{path}:{line_number}: {reason}")
        self.path = path
        self.line_number = line_number
        self.reason = reason
