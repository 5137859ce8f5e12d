"""Grid, terrain and hazard model for tactical pathfinding."""

from .grid import (
    DEFAULT_COVER_VALUE,
    DEFAULT_HAZARD_RADIUS,
    GridCell,
    OutOfBoundsError,
    TacticalGrid,
    Terrain,
    is_grid_index,
)
from .hazards import hazard_falloff, hazard_footprint, propagate_hazard
from .schemas import GridCellState, TacticalGridState
from .helpers import (
    grid_from_state,
    grid_to_state,
    path_danger,
    render_ascii_map,
)

__all__ = [
    "DEFAULT_COVER_VALUE",
    "DEFAULT_HAZARD_RADIUS",
    "GridCell",
    "OutOfBoundsError",
    "TacticalGrid",
    "Terrain",
    "is_grid_index",
    "hazard_falloff",
    "hazard_footprint",
    "propagate_hazard",
    "GridCellState",
    "TacticalGridState",
    "grid_from_state",
    "grid_to_state",
    "path_danger",
    "render_ascii_map",
]
