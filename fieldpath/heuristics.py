"""
Distance heuristics on grid offsets.

Every heuristic takes the absolute offsets (dx, dy) between two cells
and returns a non-negative distance estimate.
"""

import math
from typing import Callable, Dict

SQRT2 = math.sqrt(2)

Heuristic = Callable[[float, float], float]


def manhattan(dx: float, dy: float) -> float:
    """Manhattan distance, admissible for 4-connected movement."""
    return dx + dy


def euclidean(dx: float, dy: float) -> float:
    """Straight-line distance."""
    return math.sqrt(dx * dx + dy * dy)


def octile(dx: float, dy: float) -> float:
    """Octile distance: diagonal steps cost sqrt(2), straight steps cost 1."""
    f = SQRT2 - 1
    return f * dx + dy if dx < dy else f * dy + dx


def chebyshev(dx: float, dy: float) -> float:
    """Chebyshev distance: diagonal steps cost the same as straight ones."""
    return max(dx, dy)


HEURISTICS: Dict[str, Heuristic] = {
    'manhattan': manhattan,
    'euclidean': euclidean,
    'octile': octile,
    'chebyshev': chebyshev,
}


def get_heuristic(name: str) -> Heuristic:
    """
    Look up a heuristic by name.

    Args:
        name: Registry name (case-insensitive)

    Returns:
        Heuristic function
    """
    try:
        return HEURISTICS[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(HEURISTICS))
        raise ValueError(f"Unknown heuristic '{name}' (expected one of: {known})") from None
