"""Utilities for inspecting and rendering tactical grids."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

from .grid import GridCell, TacticalGrid, Terrain
from .schemas import GridCellState, TacticalGridState

Coord = Tuple[int, int]

# Danger shading thresholds used when a cell has no terrain symbol.
HIGH_DANGER_THRESHOLD = 0.7
MEDIUM_DANGER_THRESHOLD = 0.3

_DEFAULT_SYMBOLS: Dict[str, str] = {
    "start": "S ",
    "goal": "G ",
    "path": "* ",
    Terrain.OBSTACLE.value: "X ",
    Terrain.COVER.value: "# ",
    Terrain.HAZARD_SOURCE.value: "B ",
    "high_danger": "! ",
    "medium_danger": "o ",
    "open": ". ",
}


def path_danger(grid: TacticalGrid, steps: Iterable[Coord]) -> float:
    """Sum plain ``danger`` over ``steps``. Reporting metric only."""
    return sum(grid.cell_at(x, y).danger for x, y in steps)


def _cell_symbol(cell: GridCell, mapping: Dict[str, str]) -> str:
    if cell.terrain is not Terrain.OPEN:
        return mapping[cell.terrain.value]
    if cell.danger > HIGH_DANGER_THRESHOLD:
        return mapping["high_danger"]
    if cell.danger > MEDIUM_DANGER_THRESHOLD:
        return mapping["medium_danger"]
    return mapping["open"]


def render_ascii_map(
    grid: TacticalGrid,
    path: Optional[Iterable[Coord]] = None,
    *,
    start: Optional[Coord] = None,
    goal: Optional[Coord] = None,
    symbols: Optional[Dict[str, str]] = None,
) -> str:
    """Render the grid top row first (highest ``y``), two characters per cell.

    Start and goal markers win over path markers, which win over terrain and
    danger shading. Unknown keys in ``symbols`` are ignored.
    """

    mapping = {**_DEFAULT_SYMBOLS}
    if symbols:
        mapping.update(symbols)
    on_path: Set[Coord] = set(path or ())

    lines: List[str] = []
    for y in range(grid.height - 1, -1, -1):
        row: List[str] = []
        for x in range(grid.width):
            coord = (x, y)
            if coord == start:
                row.append(mapping["start"])
            elif coord == goal:
                row.append(mapping["goal"])
            elif coord in on_path:
                row.append(mapping["path"])
            else:
                row.append(_cell_symbol(grid.cell_at(x, y), mapping))
        lines.append("".join(row))
    return "\n".join(lines)


def grid_to_state(grid: TacticalGrid) -> TacticalGridState:
    """Snapshot every cell that differs from the open/zero default."""
    cells = [
        GridCellState(
            x=cell.x,
            y=cell.y,
            terrain=cell.terrain,
            danger=cell.danger,
            cover=cell.cover,
        )
        for cell in grid.cells()
        if cell.terrain is not Terrain.OPEN or cell.danger or cell.cover
    ]
    return TacticalGridState(width=grid.width, height=grid.height, cells=cells)


def grid_from_state(state: TacticalGridState) -> TacticalGrid:
    """Rebuild a grid from a snapshot without re-running hazard propagation."""
    grid = TacticalGrid(width=state.width, height=state.height)
    for snapshot in state.cells:
        # Raises OutOfBoundsError for snapshots that do not fit the grid.
        cell = grid.cell_at(snapshot.x, snapshot.y)
        cell.terrain = snapshot.terrain
        cell.danger = snapshot.danger
        cell.cover = snapshot.cover
    return grid
