"""
Path geometry utilities.
"""

import numpy as np
from typing import Sequence, Tuple

from .diagonal_movement import DiagonalMovement
from .grid import Grid, Node


def path_to_array(path: Sequence[Tuple[int, int]]) -> np.ndarray:
    """
    Convert a path to an integer array.

    Args:
        path: Sequence of (x, y) coordinates

    Returns:
        Array of points (N, 2)
    """
    if len(path) == 0:
        return np.empty((0, 2), dtype=np.int64)
    return np.asarray(path, dtype=np.int64).reshape(-1, 2)


def compute_step_lengths(path: Sequence[Tuple[int, int]]) -> np.ndarray:
    """
    Compute Euclidean length of every step along a path.

    Args:
        path: Sequence of (x, y) coordinates

    Returns:
        Step lengths (N-1,)
    """
    points = path_to_array(path)
    if len(points) < 2:
        return np.empty(0, dtype=np.float64)
    return np.linalg.norm(np.diff(points, axis=0), axis=1)


def path_length(path: Sequence[Tuple[int, int]]) -> float:
    """Total Euclidean length of a path (a diagonal step counts sqrt(2))."""
    return float(compute_step_lengths(path).sum())


def is_valid_path(path: Sequence[Tuple[int, int]], grid: Grid, diagonal_movement: DiagonalMovement) -> bool:
    """
    Check that every step is a neighbor move under the policy and that no
    cell repeats.
    """
    if len(set(map(tuple, path))) != len(path):
        return False

    for (x0, y0), (x1, y1) in zip(path, path[1:]):
        if not grid.is_inside(x0, y0):
            return False
        neighbors = grid.get_neighbors(Node(x0, y0), diagonal_movement)
        if (x1, y1) not in {(n.x, n.y) for n in neighbors}:
            return False
    return True
