"""
Potential field path finding on 2D grids.
"""

from .diagonal_movement import DiagonalMovement
from .heuristics import manhattan, euclidean, octile, chebyshev, get_heuristic, HEURISTICS
from .grid import Grid, Node
from .field import build_potential_field, count_walkable_neighbors
from .finder import PotentialFieldFinder, SearchResult, WalkStatus, walk_field
from .geometry import path_to_array, compute_step_lengths, path_length, is_valid_path
from .config import (
    FinderConfig,
    ResolvedFinderConfig,
    VisualizationConfig,
    DEFAULT_FINDER_CONFIG,
    DEFAULT_VISUALIZATION_CONFIG,
    resolve_diagonal_movement,
    resolve_heuristic
)
from .io_utils import (
    parse_grid_text,
    find_marker,
    load_grid,
    load_grid_image,
    load_json,
    save_json,
    save_path_json,
    save_image
)

__all__ = [
    # Grid
    'DiagonalMovement',
    'Grid',
    'Node',
    # Heuristics
    'manhattan',
    'euclidean',
    'octile',
    'chebyshev',
    'get_heuristic',
    'HEURISTICS',
    # Field
    'build_potential_field',
    'count_walkable_neighbors',
    # Finder
    'PotentialFieldFinder',
    'SearchResult',
    'WalkStatus',
    'walk_field',
    # Geometry
    'path_to_array',
    'compute_step_lengths',
    'path_length',
    'is_valid_path',
    # Config
    'FinderConfig',
    'ResolvedFinderConfig',
    'VisualizationConfig',
    'DEFAULT_FINDER_CONFIG',
    'DEFAULT_VISUALIZATION_CONFIG',
    'resolve_diagonal_movement',
    'resolve_heuristic',
    # IO utilities
    'parse_grid_text',
    'find_marker',
    'load_grid',
    'load_grid_image',
    'load_json',
    'save_json',
    'save_path_json',
    'save_image',
]
