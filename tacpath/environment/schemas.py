"""Pydantic snapshots of the tactical grid.

These models mirror the dataclasses in ``grid.py`` but validate value ranges
and stay serializable, so a configured grid can be handed to other tools or
compared across searches without sharing the mutable grid itself.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .grid import Terrain


class GridCellState(BaseModel):
    """Snapshot of one cell. Cells at default values are usually omitted."""

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    terrain: Terrain = Terrain.OPEN
    danger: float = Field(0.0, ge=0.0, le=1.0, description="Max-merged hazard exposure")
    cover: float = Field(0.0, ge=0.0, le=1.0, description="Tactical protection value")


class TacticalGridState(BaseModel):
    """Sparse representation of a tactical grid."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    cells: List[GridCellState] = Field(
        default_factory=list,
        description="Cells that differ from open/zero-danger/zero-cover",
    )
