"""Tests for the tactical grid model and its placement helpers."""

import pytest

from tacpath.environment import (
    DEFAULT_COVER_VALUE,
    OutOfBoundsError,
    TacticalGrid,
    Terrain,
)


def test_grid_initializes_every_cell_open():
    grid = TacticalGrid(width=4, height=3)

    cells = list(grid.cells())
    assert len(cells) == 12
    assert all(cell.terrain is Terrain.OPEN for cell in cells)
    assert all(cell.danger == 0.0 and cell.cover == 0.0 for cell in cells)
    # Each cell remembers its own position
    assert grid.cell_at(3, 2).coords == (3, 2)
    assert [cell.coords for cell in cells[:5]] == [(0, 0), (1, 0), (2, 0), (3, 0), (0, 1)]


def test_grid_rejects_non_positive_dimensions():
    with pytest.raises(ValueError):
        TacticalGrid(width=0, height=5)
    with pytest.raises(ValueError):
        TacticalGrid(width=5, height=-1)


def test_inside_bounds():
    grid = TacticalGrid(width=5, height=4)

    assert grid.inside(0, 0)
    assert grid.inside(4, 3)
    assert not grid.inside(5, 0)
    assert not grid.inside(0, 4)
    assert not grid.inside(-1, 2)


def test_cell_at_out_of_bounds_raises():
    grid = TacticalGrid(width=3, height=3)

    with pytest.raises(OutOfBoundsError):
        grid.cell_at(3, 0)
    # OutOfBoundsError is an IndexError so generic handlers still catch it
    with pytest.raises(IndexError):
        grid.cell_at(-1, -1)


def test_add_cover_sets_terrain_and_value():
    grid = TacticalGrid(width=5, height=5)

    grid.add_cover(1, 2)
    grid.add_cover(3, 3, value=0.25)

    assert grid.cell_at(1, 2).terrain is Terrain.COVER
    assert grid.cell_at(1, 2).cover == DEFAULT_COVER_VALUE
    assert grid.cell_at(3, 3).cover == 0.25


def test_add_obstacle_blocks_cell_and_keeps_values():
    grid = TacticalGrid(width=5, height=5)
    grid.add_cover(2, 2, value=0.5)

    grid.add_obstacle(2, 2)

    cell = grid.cell_at(2, 2)
    assert cell.terrain is Terrain.OBSTACLE
    assert cell.is_passable is False
    # Earlier cover value is retained even though it no longer matters
    assert cell.cover == 0.5


def test_edits_outside_grid_are_ignored():
    grid = TacticalGrid(width=3, height=3)

    grid.add_cover(5, 5)
    grid.add_obstacle(-1, 0)
    grid.add_hazard_source(3, 1, radius=2)

    assert all(cell.terrain is Terrain.OPEN for cell in grid.cells())
    # Hazards centred outside the grid do not radiate into it
    assert all(cell.danger == 0.0 for cell in grid.cells())


def test_last_placement_wins():
    grid = TacticalGrid(width=5, height=5)

    grid.add_obstacle(1, 1)
    grid.add_cover(1, 1, value=0.3)

    cell = grid.cell_at(1, 1)
    assert cell.terrain is Terrain.COVER
    assert cell.is_passable is True

    grid.add_hazard_source(1, 1, radius=2)
    assert cell.terrain is Terrain.HAZARD_SOURCE
    assert cell.cover == 0.3
    assert cell.danger == 1.0


@pytest.mark.parametrize("x, y", [(1.5, 1), (1, 0.5), (-0.5, 0), (True, 1)])
def test_non_integer_coordinates_are_outside(x, y):
    grid = TacticalGrid(width=4, height=4)

    assert grid.inside(x, y) is False
    with pytest.raises(OutOfBoundsError):
        grid.cell_at(x, y)

    # Edits behave like any other out-of-range placement
    grid.add_cover(x, y)
    grid.add_obstacle(x, y)
    grid.add_hazard_source(x, y, radius=2)
    assert all(cell.terrain is Terrain.OPEN for cell in grid.cells())
    assert all(cell.danger == 0.0 for cell in grid.cells())
