"""Tactical A* search over a ``TacticalGrid``.

Moves are 4-directional. Entering a cell costs::

    1.0 + danger * danger_weight - cover * cover_weight

and the cost is always charged to the destination cell. The heuristic is the
Manhattan distance to the goal. With the default weights a move into cover can
cost as little as 0.6, so the heuristic may overestimate on cover-heavy maps
and the returned route is then not guaranteed to be optimal. The reference
outputs of the demo scenario depend on this exact heuristic, so it is kept.

The grid is only read. Best-cost and predecessor bookkeeping live in
dictionaries private to each call, so concurrent searches over a grid that is
not being edited are safe.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Sequence, Tuple

from .environment.grid import GridCell, TacticalGrid, is_grid_index
from .logging_utils import log_deterministic
from .schemas import SearchWeights

Coord = Tuple[int, int]

# Neighbour expansion order; affects which of several equal-cost routes wins.
DIRECTIONS: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class InvalidSearchInputError(ValueError):
    """Raised before searching when start or goal cannot host a path."""


@dataclass(frozen=True)
class TacticalPath:
    """Route found by ``tactical_astar``.

    ``steps`` excludes ``start`` and ends with ``goal``; it is empty when
    start and goal coincide.
    """

    start: Coord
    goal: Coord
    steps: Tuple[Coord, ...] = ()
    cost: float = 0.0          # sum of weighted move costs along steps
    danger: float = 0.0        # sum of plain danger along steps (reporting only)
    expanded: int = 0          # frontier pops, for debugging/profiling

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)

    @property
    def coordinates(self) -> List[Coord]:
        """Full route including the start cell."""
        return [self.start, *self.steps]


def move_cost(cell: GridCell, weights: Optional[SearchWeights] = None) -> float:
    """Cost of moving into ``cell``."""
    weights = weights or SearchWeights()
    return 1.0 + cell.danger * weights.danger_weight - cell.cover * weights.cover_weight


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _validate_endpoint(grid: TacticalGrid, coord: Sequence[int], label: str) -> Coord:
    if len(coord) != 2:
        raise InvalidSearchInputError(f"{label} must be an (x, y) pair, got {coord!r}")
    x, y = coord[0], coord[1]
    if not (is_grid_index(x) and is_grid_index(y)):
        raise InvalidSearchInputError(f"{label} must have integer coordinates, got {coord!r}")
    if not grid.inside(x, y):
        raise InvalidSearchInputError(
            f"{label} {(x, y)} is outside the {grid.width}x{grid.height} grid"
        )
    if not grid.cell_at(x, y).is_passable:
        raise InvalidSearchInputError(f"{label} {(x, y)} is an obstacle")
    return (x, y)


def _reconstruct(parent: Dict[Coord, Coord], current: Coord) -> Tuple[Coord, ...]:
    steps: List[Coord] = []
    while current in parent:
        steps.append(current)
        current = parent[current]
    steps.reverse()
    return tuple(steps)


def tactical_astar(
    grid: TacticalGrid,
    start: Sequence[int],
    goal: Sequence[int],
    weights: Optional[SearchWeights] = None,
) -> Optional[TacticalPath]:
    """Find a least-cost route from ``start`` to ``goal``.

    Returns ``None`` when the goal cannot be reached (for example when a wall
    of obstacles separates the endpoints). Raises ``InvalidSearchInputError``
    if either endpoint is outside the grid or on an obstacle.

    Frontier entries are ``(f, sequence, g, coord)``: entries with equal ``f``
    pop in insertion order. A neighbour is pushed only when its tentative cost
    is strictly lower than the best recorded so far.
    """

    weights = weights or SearchWeights()
    start = _validate_endpoint(grid, start, "start")
    goal = _validate_endpoint(grid, goal, "goal")

    sequence = count()
    frontier: List[Tuple[float, int, float, Coord]] = []
    heappush(frontier, (float(manhattan(start, goal)), next(sequence), 0.0, start))
    best: Dict[Coord, float] = {start: 0.0}
    parent: Dict[Coord, Coord] = {}
    expanded = 0

    while frontier:
        _, _, g, current = heappop(frontier)
        expanded += 1
        if current == goal:
            steps = _reconstruct(parent, goal)
            cells = [grid.cell_at(x, y) for x, y in steps]
            path = TacticalPath(
                start=start,
                goal=goal,
                steps=steps,
                cost=sum((move_cost(cell, weights) for cell in cells), 0.0),
                danger=sum((cell.danger for cell in cells), 0.0),
                expanded=expanded,
            )
            _debug_summary(path)
            return path

        cx, cy = current
        for dx, dy in DIRECTIONS:
            nx, ny = cx + dx, cy + dy
            if not grid.inside(nx, ny):
                continue
            cell = grid.cell_at(nx, ny)
            if not cell.is_passable:
                continue
            tentative = g + move_cost(cell, weights)
            neighbour = (nx, ny)
            if neighbour not in best or tentative < best[neighbour]:
                best[neighbour] = tentative
                parent[neighbour] = current
                heappush(
                    frontier,
                    (tentative + manhattan(neighbour, goal), next(sequence), tentative, neighbour),
                )

    if _debug_enabled():  # pragma: no cover - diagnostics only
        log_deterministic(
            f"[Search] {start} -> {goal} unreachable after {expanded} expansions"
        )
    return None


# Short alias used by callers that only care about the operation name.
search = tactical_astar


def _debug_enabled() -> bool:
    # Enable with DEBUG_TACTICAL_SEARCH=1
    return os.getenv("DEBUG_TACTICAL_SEARCH", "").lower() in ("1", "true", "yes")


def _debug_summary(path: TacticalPath) -> None:
    if not _debug_enabled():
        return
    log_deterministic(
        f"[Search] {path.start} -> {path.goal}: {len(path)} steps, "
        f"cost={path.cost:.3f} danger={path.danger:.3f} expanded={path.expanded}"
    )
