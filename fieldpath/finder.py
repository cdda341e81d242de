"""
Potential field path finder.

Builds a potential field toward the goal, then walks greedily from the
start to the best scoring unvisited neighbor until the goal is reached.
The walk never backtracks: when every neighbor of the current cell has
already been visited the search fails and returns an empty path.
"""

import logging
from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

import numpy as np

from .config import FinderConfig
from .diagonal_movement import DiagonalMovement
from .field import build_potential_field
from .grid import Grid, Node

logger = logging.getLogger(__name__)

Path = List[Tuple[int, int]]


class WalkStatus(Enum):
    """State of a greedy walk."""
    WALKING = "walking"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SearchResult:
    """Result of a potential field search, with its per-query state."""
    path: Path
    status: WalkStatus
    field: np.ndarray
    visited: np.ndarray
    steps: int = 0
    stuck_at: Optional[Tuple[int, int]] = None
    walked: Path = dataclass_field(default_factory=list, repr=False)

    @property
    def success(self) -> bool:
        """Whether the walk reached the goal."""
        return self.status == WalkStatus.SUCCEEDED

    def __bool__(self) -> bool:
        """Allow `if result:` to check for success."""
        return self.success

    def __iter__(self):
        return iter(self.path)

    def __len__(self) -> int:
        return len(self.path)

    def __repr__(self) -> str:
        if self.success:
            return f"SearchResult(path=[{len(self.path)} cells], status=SUCCEEDED)"
        return f"SearchResult(path=[], status=FAILED, stuck_at={self.stuck_at})"


def walk_field(
    start: Node,
    goal: Node,
    grid: Grid,
    field: np.ndarray,
    diagonal_movement: DiagonalMovement,
) -> SearchResult:
    """
    Greedily walk the potential field from start to goal.

    Args:
        start: Start node
        goal: Goal node
        grid: Grid providing neighbor lookup
        field: Potential field (height, width) from build_potential_field
        diagonal_movement: Policy used for neighbor lookup

    Returns:
        SearchResult; on failure the path is empty and `walked` holds the
        cells visited before getting stuck
    """
    visited = np.zeros((grid.height, grid.width), dtype=bool)
    current = start
    path = [(start.x, start.y)]
    visited[start.y, start.x] = True
    status = WalkStatus.WALKING
    steps = 0

    while (current.x, current.y) != (goal.x, goal.y):
        neighbors = grid.get_neighbors(current, diagonal_movement)
        # sorted() is stable, so equal fields keep the neighbor lookup order
        neighbors = sorted(neighbors, key=lambda node: field[node.y, node.x], reverse=True)
        candidates = [node for node in neighbors if not visited[node.y, node.x]]

        if not candidates:
            status = WalkStatus.FAILED
            logger.debug(
                f"walk_field: stuck at ({current.x}, {current.y}) after {steps} steps, "
                f"goal=({goal.x}, {goal.y})"
            )
            return SearchResult(
                path=[],
                status=status,
                field=field,
                visited=visited,
                steps=steps,
                stuck_at=(current.x, current.y),
                walked=path,
            )

        current = candidates[0]
        path.append((current.x, current.y))
        visited[current.y, current.x] = True
        steps += 1

    status = WalkStatus.SUCCEEDED
    logger.debug(f"walk_field: reached ({goal.x}, {goal.y}) in {steps} steps")
    return SearchResult(path=path, status=status, field=field, visited=visited, steps=steps, walked=path)


class PotentialFieldFinder:
    """
    Potential field path finder.

    Args:
        allow_diagonal: Whether diagonal movement is allowed.
            Deprecated, use diagonal_movement instead.
        dont_cross_corners: Disallow diagonal movement touching block corners.
            Deprecated, use diagonal_movement instead.
        diagonal_movement: Allowed diagonal movement (member or name)
        heuristic: Heuristic function (or name) estimating the distance;
            defaults to manhattan without diagonals and octile with them
        weight: Multiplier on the heuristic term of the field
        config: Ready FinderConfig; replaces the keyword options above
    """

    def __init__(
        self,
        allow_diagonal: bool = False,
        dont_cross_corners: bool = False,
        diagonal_movement: Optional[Union[DiagonalMovement, str]] = None,
        heuristic: Optional[Union[Callable[[float, float], float], str]] = None,
        weight: float = 1.0,
        config: Optional[FinderConfig] = None,
    ):
        if config is None:
            config = FinderConfig(
                allow_diagonal=allow_diagonal,
                dont_cross_corners=dont_cross_corners,
                diagonal_movement=diagonal_movement,
                heuristic=heuristic,
                weight=weight,
            )
        resolved = config.resolve()
        self._diagonal_movement = resolved.diagonal_movement
        self._heuristic = resolved.heuristic
        self._weight = resolved.weight

    @property
    def diagonal_movement(self) -> DiagonalMovement:
        return self._diagonal_movement

    @property
    def heuristic(self) -> Callable[[float, float], float]:
        return self._heuristic

    @property
    def weight(self) -> float:
        return self._weight

    def search(self, start_x: int, start_y: int, end_x: int, end_y: int, grid: Grid) -> SearchResult:
        """Run a query and return the full result, field and visited cells included."""
        start_node = grid.get_node_at(start_x, start_y)
        end_node = grid.get_node_at(end_x, end_y)

        field = build_potential_field(
            grid, end_node, self._diagonal_movement, self._heuristic, self._weight
        )
        return walk_field(start_node, end_node, grid, field, self._diagonal_movement)

    def find_path(self, start_x: int, start_y: int, end_x: int, end_y: int, grid: Grid) -> Path:
        """
        Find and return the path.

        Returns:
            List of (x, y) tuples including both start and end positions,
            or an empty list if the walk got stuck
        """
        return self.search(start_x, start_y, end_x, end_y, grid).path

    def __repr__(self) -> str:
        return (
            f"PotentialFieldFinder(diagonal_movement={self._diagonal_movement.name}, "
            f"heuristic={getattr(self._heuristic, '__name__', self._heuristic)!r}, weight={self._weight})"
        )
