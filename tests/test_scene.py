import pytest

from raycaster.scene import SceneGrid


def test_dimensions_and_colors():
    grid = SceneGrid([[None, "red", None], ["green", None, None]])
    assert grid.cols == 3 and grid.rows == 2
    assert grid.color_at((1, 0)) == "red"
    assert grid.color_at((0, 1)) == "green"
    assert grid.color_at((0, 0)) is None


@pytest.mark.parametrize(
    "cell",
    [(-1, 0), (0, -1), (3, 0), (0, 2), (10, 10)],
)
def test_outside_bounds(cell):
    grid = SceneGrid([[None, None, None], [None, None, None]])
    assert not grid.inside_bounds(cell)
    # Reading color outside the grid is a contract violation
    with pytest.raises(IndexError):
        grid.color_at(cell)
    # is_occupied is the safe check and never raises
    assert not grid.is_occupied(cell)


def test_is_occupied_for_wall_and_empty_cells():
    grid = SceneGrid([[None, "red"], ["red", None]])
    assert not grid.is_occupied((0, 0))
    assert grid.is_occupied((1, 0))
    assert grid.is_occupied((0, 1))
    assert not grid.is_occupied((1, 1))


def test_ragged_rows_are_rejected():
    with pytest.raises(ValueError):
        SceneGrid([[None, None], [None]])


def test_empty_grid_is_rejected():
    with pytest.raises(ValueError):
        SceneGrid([])


def test_occupied_cells_iterates_row_by_row(scenario_grid):
    cells = list(scenario_grid.occupied_cells())
    assert len(cells) == 11
    assert cells[0] == ((1, 0), "red")
    assert all(color == "green" for _, color in cells[1:])
    assert [cell for cell, _ in cells] == [(1, y) for y in range(11)]
