"""
Tacpath - tactical pathfinding on danger-weighted grids.

Build a grid, place cover, obstacles and hazard sources, then ask the A*
engine for the cheapest route under a tactical cost function.

The search never mutates the grid. Cost weights are passed per call.
"""

__version__ = "0.1.0"

from .environment import (
    DEFAULT_COVER_VALUE,
    DEFAULT_HAZARD_RADIUS,
    GridCell,
    GridCellState,
    OutOfBoundsError,
    TacticalGrid,
    TacticalGridState,
    Terrain,
    grid_from_state,
    grid_to_state,
    hazard_falloff,
    path_danger,
    propagate_hazard,
    render_ascii_map,
)
from .schemas import SearchWeights
from .search import (
    InvalidSearchInputError,
    TacticalPath,
    manhattan,
    move_cost,
    search,
    tactical_astar,
)
from .scenario import (
    CoverPlacement,
    HazardPlacement,
    ScenarioDefinition,
    load_scenario,
    reference_scenario,
)

__all__ = [
    # Grid model
    "DEFAULT_COVER_VALUE",
    "DEFAULT_HAZARD_RADIUS",
    "GridCell",
    "OutOfBoundsError",
    "TacticalGrid",
    "Terrain",
    "hazard_falloff",
    "propagate_hazard",
    # Snapshots
    "GridCellState",
    "TacticalGridState",
    "grid_from_state",
    "grid_to_state",
    # Search
    "SearchWeights",
    "InvalidSearchInputError",
    "TacticalPath",
    "manhattan",
    "move_cost",
    "search",
    "tactical_astar",
    # Reporting
    "path_danger",
    "render_ascii_map",
    # Scenarios
    "CoverPlacement",
    "HazardPlacement",
    "ScenarioDefinition",
    "load_scenario",
    "reference_scenario",
]
