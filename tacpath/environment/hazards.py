"""Danger propagation from point hazards.

Danger falls off linearly from 1.0 at the hazard centre to 0.0 at the radius
boundary (Euclidean distance). Overlapping hazards are merged with ``max`` so
a cell's danger reflects the strongest single influence reaching it and never
exceeds 1.0.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Dict, Tuple

if TYPE_CHECKING:
    from .grid import TacticalGrid

Coord = Tuple[int, int]


def hazard_falloff(distance: float, radius: int) -> float:
    """Return the danger contribution at ``distance`` from a hazard of ``radius``.

    Distances strictly greater than the radius (and degenerate radii) yield 0.0.
    """
    if radius <= 0 or distance > radius:
        return 0.0
    return 1.0 - distance / radius


def hazard_footprint(center: Coord, radius: int) -> Dict[Coord, float]:
    """Map every absolute coordinate within ``radius`` of ``center`` to its falloff.

    The footprint is unclipped; callers drop coordinates outside their grid.
    """
    if radius <= 0:
        return {}
    cx, cy = center
    footprint: Dict[Coord, float] = {}
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            distance = math.sqrt(dx * dx + dy * dy)
            if distance > radius:
                continue
            footprint[(cx + dx, cy + dy)] = hazard_falloff(distance, radius)
    return footprint


def propagate_hazard(grid: "TacticalGrid", center: Coord, radius: int) -> int:
    """Raise danger on cells around ``center``; returns the number of cells touched."""
    touched = 0
    for (x, y), falloff in hazard_footprint(center, radius).items():
        if not grid.inside(x, y):
            continue
        cell = grid.cell_at(x, y)
        cell.danger = max(cell.danger, falloff)
        touched += 1
    return touched
