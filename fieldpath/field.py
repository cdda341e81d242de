"""
Potential field construction over a grid.
"""

import logging

import numpy as np

from .diagonal_movement import DiagonalMovement
from .grid import Grid, Node
from .heuristics import Heuristic

logger = logging.getLogger(__name__)


def count_walkable_neighbors(grid: Grid, diagonal_movement: DiagonalMovement) -> np.ndarray:
    """
    Count the neighbors of every cell under a diagonal movement policy.

    Args:
        grid: Grid to scan
        diagonal_movement: Policy used for neighbor lookup

    Returns:
        Integer array (height, width) of neighbor counts
    """
    counts = np.zeros((grid.height, grid.width), dtype=np.int64)
    for y in range(grid.height):
        for x in range(grid.width):
            node = grid.get_node_at(x, y)
            counts[y, x] = len(grid.get_neighbors(node, diagonal_movement))
    return counts


def build_potential_field(
    grid: Grid,
    goal: Node,
    diagonal_movement: DiagonalMovement,
    heuristic: Heuristic,
    weight: float = 1.0,
) -> np.ndarray:
    """
    Assign a potential to every cell of the grid.

    field(x, y) = -weight * heuristic(|goal.x - x|, |goal.y - y|) + neighbors(x, y)

    Cells closer to the goal score higher; the neighbor count nudges a
    walker away from narrow passages and dead ends. Each cell is computed
    independently from the grid geometry, so the result is deterministic.

    Args:
        grid: Grid providing geometry and neighbor lookup
        goal: Goal node
        diagonal_movement: Policy used for neighbor counting
        heuristic: Distance estimate on (dx, dy)
        weight: Multiplier on the heuristic term

    Returns:
        Float array (height, width) indexed [y, x]
    """
    logger.debug(
        f"build_potential_field: {grid.width}x{grid.height} grid, goal=({goal.x}, {goal.y}), "
        f"diagonal={diagonal_movement.name}"
    )
    field = np.zeros((grid.height, grid.width), dtype=np.float64)
    if grid.width == 0 or grid.height == 0:
        return field

    field -= weight * _heuristic_map(grid, goal, heuristic)
    field += count_walkable_neighbors(grid, diagonal_movement)
    return field


def _heuristic_map(grid: Grid, goal: Node, heuristic: Heuristic) -> np.ndarray:
    distances = np.empty((grid.height, grid.width), dtype=np.float64)
    for y in range(grid.height):
        dy = abs(goal.y - y)
        for x in range(grid.width):
            distances[y, x] = heuristic(abs(goal.x - x), dy)
    return distances
