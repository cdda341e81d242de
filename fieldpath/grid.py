"""
Grid topology for pathfinding.

The grid only knows which cells are walkable and who their neighbors are.
Per-query state (field values, visited flags) lives outside of it, so a
single grid can be reused across queries.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .diagonal_movement import DiagonalMovement


@dataclass(frozen=True)
class Node:
    """A grid cell."""
    x: int
    y: int
    walkable: bool = True


class Grid:
    """
    Walkability grid of width x height cells.

    The matrix is indexed [y][x]; non-zero entries are blocked
    (0=free, 1=occupied).
    """

    def __init__(self, width: int, height: int, matrix=None):
        self.width = int(width)
        self.height = int(height)

        if matrix is None:
            self._walkable = np.ones((self.height, self.width), dtype=bool)
        else:
            blocked = np.asarray(matrix)
            if blocked.size == 0 and self.width * self.height == 0:
                blocked = blocked.reshape((self.height, self.width))
            if blocked.shape != (self.height, self.width):
                raise ValueError(
                    f"Matrix shape {blocked.shape} does not fit a {self.width}x{self.height} grid"
                )
            self._walkable = blocked == 0

    @classmethod
    def from_matrix(cls, matrix) -> "Grid":
        """Build a grid from a 2D occupancy matrix indexed [y][x]."""
        blocked = np.asarray(matrix)
        if blocked.ndim != 2:
            if blocked.size == 0:
                return cls(0, 0)
            raise ValueError(f"Expected a 2D matrix, got {blocked.ndim} dimension(s)")
        height, width = blocked.shape
        return cls(width, height, blocked)

    @property
    def walkable(self) -> np.ndarray:
        """Read-only view of the walkability mask, indexed [y, x]."""
        view = self._walkable.view()
        view.flags.writeable = False
        return view

    @property
    def size(self) -> int:
        return self.width * self.height

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable_at(self, x: int, y: int) -> bool:
        return self.is_inside(x, y) and bool(self._walkable[y, x])

    def set_walkable_at(self, x: int, y: int, walkable: bool):
        if not self.is_inside(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self.width}x{self.height} grid")
        self._walkable[y, x] = walkable

    def get_node_at(self, x: int, y: int) -> Node:
        # numpy would silently wrap negative indices
        if not self.is_inside(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the {self.width}x{self.height} grid")
        return Node(int(x), int(y), bool(self._walkable[y, x]))

    def get_neighbors(self, node: Node, diagonal_movement: DiagonalMovement) -> List[Node]:
        """
        Get walkable neighbors of a node.

        Cardinal neighbors come first (up, right, down, left), followed by
        the diagonals allowed by the policy (top-left, top-right,
        bottom-right, bottom-left). The order is fixed so callers can rely
        on it to break ties.

        Args:
            node: Cell to expand
            diagonal_movement: Policy deciding which diagonals are candidates

        Returns:
            List of neighboring nodes
        """
        x, y = node.x, node.y
        neighbors = []

        s0 = s1 = s2 = s3 = False
        # ↑
        if self.is_walkable_at(x, y - 1):
            neighbors.append(Node(x, y - 1))
            s0 = True
        # →
        if self.is_walkable_at(x + 1, y):
            neighbors.append(Node(x + 1, y))
            s1 = True
        # ↓
        if self.is_walkable_at(x, y + 1):
            neighbors.append(Node(x, y + 1))
            s2 = True
        # ←
        if self.is_walkable_at(x - 1, y):
            neighbors.append(Node(x - 1, y))
            s3 = True

        if diagonal_movement == DiagonalMovement.NEVER:
            return neighbors

        if diagonal_movement == DiagonalMovement.ALWAYS:
            d0 = d1 = d2 = d3 = True
        elif diagonal_movement == DiagonalMovement.ONLY_WHEN_NO_OBSTACLES:
            d0 = s3 and s0
            d1 = s0 and s1
            d2 = s1 and s2
            d3 = s2 and s3
        elif diagonal_movement == DiagonalMovement.IF_AT_MOST_ONE_OBSTACLE:
            d0 = s3 or s0
            d1 = s0 or s1
            d2 = s1 or s2
            d3 = s2 or s3
        else:
            raise ValueError(f"Unsupported diagonal movement: {diagonal_movement!r}")

        # ↖
        if d0 and self.is_walkable_at(x - 1, y - 1):
            neighbors.append(Node(x - 1, y - 1))
        # ↗
        if d1 and self.is_walkable_at(x + 1, y - 1):
            neighbors.append(Node(x + 1, y - 1))
        # ↘
        if d2 and self.is_walkable_at(x + 1, y + 1):
            neighbors.append(Node(x + 1, y + 1))
        # ↙
        if d3 and self.is_walkable_at(x - 1, y + 1):
            neighbors.append(Node(x - 1, y + 1))

        return neighbors

    def clone(self) -> "Grid":
        return Grid(self.width, self.height, ~self._walkable)

    def to_matrix(self) -> np.ndarray:
        """Occupancy matrix (0=free, 1=occupied), indexed [y, x]."""
        return (~self._walkable).astype(np.uint8)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, walkable={int(self._walkable.sum())})"
