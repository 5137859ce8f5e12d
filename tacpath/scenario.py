"""
Scenario definitions for building tactical grids declaratively.

A scenario lists the grid size, the endpoints of the route to plan, and the
placements to apply. Placements are applied in a fixed order (cover, then
obstacles, then hazards) because later placements overwrite the terrain tag
of earlier ones at the same coordinates.

Scenario structure:
```python
{
  "name": "Bomb site approach",
  "description": "...",
  "width": 15,
  "height": 10,
  "start": [1, 1],
  "goal": [10, 8],
  "cover": [{"x": 3, "y": 3, "value": 0.8}],
  "obstacles": [[2, 2], [2, 3]],
  "hazards": [{"x": 8, "y": 5, "radius": 3}]
}
```

Usage:
    scenario = load_scenario(data)
    grid = scenario.build_grid()
    path = tactical_astar(grid, scenario.start, scenario.goal)
"""

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field

from .environment.grid import DEFAULT_COVER_VALUE, DEFAULT_HAZARD_RADIUS, TacticalGrid


class CoverPlacement(BaseModel):
    x: int
    y: int
    value: float = Field(DEFAULT_COVER_VALUE, ge=0.0, le=1.0)


class HazardPlacement(BaseModel):
    x: int
    y: int
    # Non-positive radii are accepted and mark the source without radiating danger.
    radius: int = DEFAULT_HAZARD_RADIUS


class ScenarioDefinition(BaseModel):
    """Declarative description of a grid plus the route to plan across it."""

    name: str
    description: str = ""
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    start: Tuple[int, int]
    goal: Tuple[int, int]
    cover: List[CoverPlacement] = Field(default_factory=list)
    obstacles: List[Tuple[int, int]] = Field(default_factory=list)
    hazards: List[HazardPlacement] = Field(default_factory=list)

    def build_grid(self, *, include_cover: bool = True) -> TacticalGrid:
        """Construct a fresh grid with every placement applied."""
        grid = TacticalGrid(width=self.width, height=self.height)
        if include_cover:
            for placement in self.cover:
                grid.add_cover(placement.x, placement.y, placement.value)
        for x, y in self.obstacles:
            grid.add_obstacle(x, y)
        for hazard in self.hazards:
            grid.add_hazard_source(hazard.x, hazard.y, hazard.radius)
        return grid


_REQUIRED_FIELDS = ["name", "width", "height", "start", "goal"]


def load_scenario(data: Dict[str, Any]) -> ScenarioDefinition:
    """Validate a scenario mapping and convert it into a ``ScenarioDefinition``.

    Raises:
        ValueError: If required fields are missing
        pydantic.ValidationError: If a field has the wrong shape or range
    """
    missing = [key for key in _REQUIRED_FIELDS if key not in data]
    if missing:
        raise ValueError(f"Scenario missing required fields: {missing}")
    return ScenarioDefinition.model_validate(data)


def reference_scenario() -> ScenarioDefinition:
    """The demo map: a wall west of the start and three overlapping bombs."""
    return ScenarioDefinition(
        name="Bomb site approach",
        description="Route around a short wall and past three bomb danger zones.",
        width=15,
        height=10,
        start=(1, 1),
        goal=(10, 8),
        cover=[
            CoverPlacement(x=3, y=3),
            CoverPlacement(x=3, y=4),
            CoverPlacement(x=7, y=6),
            CoverPlacement(x=7, y=7),
            CoverPlacement(x=11, y=2),
            CoverPlacement(x=11, y=3),
        ],
        obstacles=[(2, y) for y in range(2, 8)],
        hazards=[
            HazardPlacement(x=8, y=5, radius=3),
            HazardPlacement(x=12, y=7, radius=3),
            HazardPlacement(x=12, y=5, radius=6),
        ],
    )
