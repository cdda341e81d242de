"""
Finder configuration and default settings.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from .diagonal_movement import DiagonalMovement
from .heuristics import Heuristic, get_heuristic, manhattan, octile


@dataclass(frozen=True)
class ResolvedFinderConfig:
    """Consistent (policy, heuristic, weight) triple used by a finder."""
    diagonal_movement: DiagonalMovement
    heuristic: Heuristic
    weight: float


@dataclass
class FinderConfig:
    """
    Options for the potential field finder.

    `allow_diagonal` and `dont_cross_corners` are deprecated aliases for
    `diagonal_movement`; an explicit policy always wins over them.
    `diagonal_movement` and `heuristic` also accept registry names.
    """
    allow_diagonal: bool = False
    dont_cross_corners: bool = False
    diagonal_movement: Optional[Union[DiagonalMovement, str]] = None
    heuristic: Optional[Union[Callable[[float, float], float], str]] = None
    weight: float = 1.0

    def resolve(self) -> ResolvedFinderConfig:
        diagonal_movement = resolve_diagonal_movement(
            self.diagonal_movement, self.allow_diagonal, self.dont_cross_corners
        )
        heuristic = resolve_heuristic(self.heuristic, diagonal_movement)
        return ResolvedFinderConfig(diagonal_movement, heuristic, self.weight or 1)


@dataclass
class VisualizationConfig:
    """Colors (RGB) used when rendering grids and paths."""
    free_color: tuple = (255, 255, 255)
    blocked_color: tuple = (40, 40, 40)
    path_color: tuple = (30, 110, 255)
    start_color: tuple = (0, 200, 0)
    goal_color: tuple = (220, 0, 0)
    path_radius: float = 0.3


# Default configurations
DEFAULT_FINDER_CONFIG = FinderConfig()
DEFAULT_VISUALIZATION_CONFIG = VisualizationConfig()


def resolve_diagonal_movement(
    diagonal_movement: Optional[Union[DiagonalMovement, str]],
    allow_diagonal: bool = False,
    dont_cross_corners: bool = False,
) -> DiagonalMovement:
    """
    Resolve the diagonal movement policy from explicit and legacy options.

    Args:
        diagonal_movement: Explicit policy or policy name, or None
        allow_diagonal: Legacy flag enabling diagonal steps
        dont_cross_corners: Legacy flag forbidding diagonals touching obstacles

    Returns:
        Resolved DiagonalMovement
    """
    if isinstance(diagonal_movement, str):
        return DiagonalMovement.from_name(diagonal_movement)
    if diagonal_movement is not None:
        return DiagonalMovement(diagonal_movement)

    if not allow_diagonal:
        return DiagonalMovement.NEVER
    if dont_cross_corners:
        return DiagonalMovement.ONLY_WHEN_NO_OBSTACLES
    return DiagonalMovement.IF_AT_MOST_ONE_OBSTACLE


def resolve_heuristic(
    heuristic: Optional[Union[Callable[[float, float], float], str]],
    diagonal_movement: DiagonalMovement,
) -> Heuristic:
    """
    Pick the heuristic for a policy.

    An explicit heuristic is always honored. Otherwise Manhattan is used
    for 4-connected movement and octile as soon as diagonals are allowed,
    since Manhattan overestimates diagonal shortcuts.
    """
    if isinstance(heuristic, str):
        return get_heuristic(heuristic)
    if heuristic is not None:
        return heuristic
    if diagonal_movement == DiagonalMovement.NEVER:
        return manhattan
    return octile
