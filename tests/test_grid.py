import numpy as np
import pytest

from fieldpath.diagonal_movement import DiagonalMovement
from fieldpath.grid import Grid, Node


def coords(nodes):
    return [(n.x, n.y) for n in nodes]


def test_never_returns_cardinals_in_fixed_order(open_grid):
    grid = open_grid(3, 3)
    neighbors = grid.get_neighbors(Node(1, 1), DiagonalMovement.NEVER)
    assert coords(neighbors) == [(1, 0), (2, 1), (1, 2), (0, 1)]


def test_always_appends_diagonals_after_cardinals(open_grid):
    grid = open_grid(3, 3)
    neighbors = grid.get_neighbors(Node(1, 1), DiagonalMovement.ALWAYS)
    assert coords(neighbors) == [
        (1, 0), (2, 1), (1, 2), (0, 1),
        (0, 0), (2, 0), (2, 2), (0, 2),
    ]


def test_only_when_no_obstacles_drops_diagonals_next_to_a_wall(text_grid):
    grid = text_grid(
        ".#.\n"
        "...\n"
        "...\n"
    )
    neighbors = grid.get_neighbors(Node(1, 1), DiagonalMovement.ONLY_WHEN_NO_OBSTACLES)
    assert coords(neighbors) == [(2, 1), (1, 2), (0, 1), (2, 2), (0, 2)]


def test_if_at_most_one_obstacle_allows_one_blocked_side(text_grid):
    grid = text_grid(
        ".#.\n"
        "..#\n"
        "...\n"
    )
    neighbors = grid.get_neighbors(Node(1, 1), DiagonalMovement.IF_AT_MOST_ONE_OBSTACLE)
    # top-right is dropped: both up and right are blocked
    assert coords(neighbors) == [(1, 2), (0, 1), (0, 0), (2, 2), (0, 2)]


def test_blocked_and_outside_cells_are_never_neighbors(text_grid):
    grid = text_grid(
        "#.\n"
        "..\n"
    )
    neighbors = grid.get_neighbors(Node(0, 1), DiagonalMovement.ALWAYS)
    assert coords(neighbors) == [(1, 1), (1, 0)]


def test_blocked_cell_still_has_neighbors(text_grid):
    grid = text_grid(
        "...\n"
        ".#.\n"
        "...\n"
    )
    assert len(grid.get_neighbors(grid.get_node_at(1, 1), DiagonalMovement.NEVER)) == 4


def test_get_node_at_reports_walkability(text_grid):
    grid = text_grid(".#\n")
    assert grid.get_node_at(0, 0) == Node(0, 0, True)
    assert grid.get_node_at(1, 0) == Node(1, 0, False)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_get_node_at_outside_raises(open_grid, x, y):
    grid = open_grid(3, 2)
    with pytest.raises(IndexError):
        grid.get_node_at(x, y)


def test_matrix_shape_must_match():
    with pytest.raises(ValueError):
        Grid(3, 2, [[0, 0], [0, 0]])


def test_from_matrix_uses_row_major_layout():
    grid = Grid.from_matrix([[0, 0, 1], [0, 0, 0]])
    assert (grid.width, grid.height) == (3, 2)
    assert not grid.is_walkable_at(2, 0)
    assert grid.is_walkable_at(2, 1)


def test_empty_grid():
    grid = Grid(0, 0)
    assert grid.size == 0
    assert not grid.is_inside(0, 0)


def test_clone_is_independent(open_grid):
    grid = open_grid(2, 2)
    copy = grid.clone()
    copy.set_walkable_at(0, 0, False)
    assert grid.is_walkable_at(0, 0)
    assert not copy.is_walkable_at(0, 0)
    np.testing.assert_array_equal(copy.to_matrix(), [[1, 0], [0, 0]])


def test_walkable_view_is_read_only(open_grid):
    grid = open_grid(2, 2)
    with pytest.raises(ValueError):
        grid.walkable[0, 0] = False
