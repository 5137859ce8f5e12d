"""Tactical grid model.

A ``TacticalGrid`` owns one ``GridCell`` per coordinate inside
``[0, width) x [0, height)``. Cells carry static terrain plus two derived
scalars used by the search engine: ``danger`` (raised by hazard sources) and
``cover`` (set by explicit cover placement). Coordinates are ``(x, y)`` with
``y`` growing upwards in rendered output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Tuple

from .hazards import propagate_hazard

Coord = Tuple[int, int]

DEFAULT_COVER_VALUE = 0.8
DEFAULT_HAZARD_RADIUS = 3


def is_grid_index(value) -> bool:
    """True for plain integers; bools and fractional values never address a cell."""
    return isinstance(value, int) and not isinstance(value, bool)


class OutOfBoundsError(IndexError):
    """Raised when a read accessor is given coordinates outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"({x}, {y}) is outside the {width}x{height} grid")
        self.x = x
        self.y = y


class Terrain(str, Enum):
    """Static classification of a grid cell."""

    OPEN = "open"
    COVER = "cover"
    OBSTACLE = "obstacle"
    HAZARD_SOURCE = "hazard_source"


@dataclass
class GridCell:
    """State of a single grid location."""

    x: int
    y: int
    terrain: Terrain = Terrain.OPEN
    danger: float = 0.0
    cover: float = 0.0

    @property
    def coords(self) -> Coord:
        return (self.x, self.y)

    @property
    def is_passable(self) -> bool:
        return self.terrain is not Terrain.OBSTACLE


@dataclass
class TacticalGrid:
    """Rectangular grid of cells mutated only through placement helpers.

    Edits outside the grid are ignored; reads outside the grid raise
    ``OutOfBoundsError``. Later placements at the same coordinates overwrite
    the terrain tag but never clear danger or cover already recorded there.
    """

    width: int
    height: int
    _cells: Dict[Coord, GridCell] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )
        self._cells = {
            (x, y): GridCell(x=x, y=y)
            for y in range(self.height)
            for x in range(self.width)
        }

    def inside(self, x: int, y: int) -> bool:
        if not (is_grid_index(x) and is_grid_index(y)):
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> GridCell:
        if not self.inside(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self._cells[(x, y)]

    def cells(self) -> Iterator[GridCell]:
        """Yield every cell in row-major order (y outer, x inner)."""
        for y in range(self.height):
            for x in range(self.width):
                yield self._cells[(x, y)]

    def add_cover(self, x: int, y: int, value: float = DEFAULT_COVER_VALUE) -> None:
        if not self.inside(x, y):
            return
        cell = self._cells[(x, y)]
        cell.terrain = Terrain.COVER
        cell.cover = value

    def add_obstacle(self, x: int, y: int) -> None:
        if not self.inside(x, y):
            return
        self._cells[(x, y)].terrain = Terrain.OBSTACLE

    def add_hazard_source(self, x: int, y: int, radius: int = DEFAULT_HAZARD_RADIUS) -> None:
        """Mark ``(x, y)`` as a hazard source and radiate danger around it."""
        if not self.inside(x, y):
            return
        self._cells[(x, y)].terrain = Terrain.HAZARD_SOURCE
        propagate_hazard(self, (x, y), radius)
