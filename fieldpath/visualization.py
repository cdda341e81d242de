"""
Visualization utilities for grids, potential fields and paths.
"""

import numpy as np
import rerun as rr

from .config import DEFAULT_VISUALIZATION_CONFIG


def setup_field_viewer_blueprint():
    """
    Set up the blueprint for the potential field viewer.

    Returns:
        Blueprint configuration for Rerun viewer
    """
    blueprint = rr.blueprint.Blueprint(
        rr.blueprint.Horizontal(
            rr.blueprint.Spatial2DView(name="Grid & Path", origin="query/grid"),
            rr.blueprint.Spatial2DView(name="Potential Field", origin="query/field"),
            column_shares=[1, 1]
        ),
        collapse_panels=False,
    )
    return blueprint


def create_grid_image(grid, path=None, start=None, goal=None, config=DEFAULT_VISUALIZATION_CONFIG):
    """
    Create colored visualization of a grid with an optional path.

    Args:
        grid: Grid to render
        path: Optional sequence of (x, y) cells
        start: Optional (x, y) start cell
        goal: Optional (x, y) goal cell
        config: Colors to use

    Returns:
        Colored image array (H, W, 3) with uint8 dtype
    """
    image = np.zeros((grid.height, grid.width, 3), dtype=np.uint8)
    image[grid.walkable] = config.free_color
    image[~grid.walkable] = config.blocked_color

    for x, y in path or []:
        image[y, x] = config.path_color
    if start is not None:
        image[start[1], start[0]] = config.start_color
    if goal is not None:
        image[goal[1], goal[0]] = config.goal_color
    return image


def create_field_image(field, grid=None, config=DEFAULT_VISUALIZATION_CONFIG):
    """
    Create a heat map of a potential field.

    Low potential is blue, high potential is red. Blocked cells are drawn
    with the blocked color when a grid is given.

    Args:
        field: Potential field (H, W)
        grid: Optional grid used to mask blocked cells

    Returns:
        Colored image array (H, W, 3) with uint8 dtype
    """
    field = np.asarray(field, dtype=np.float64)
    image = np.zeros((*field.shape, 3), dtype=np.uint8)
    if field.size == 0:
        return image

    low, high = field.min(), field.max()
    if high > low:
        normalized = (field - low) / (high - low)
    else:
        normalized = np.full(field.shape, 0.5)

    image[..., 0] = (normalized * 255).astype(np.uint8)
    image[..., 1] = ((1.0 - np.abs(2.0 * normalized - 1.0)) * 160).astype(np.uint8)
    image[..., 2] = ((1.0 - normalized) * 255).astype(np.uint8)

    if grid is not None:
        image[~grid.walkable] = config.blocked_color
    return image


def log_search_result(result, grid, start, goal, entity_root="query", config=DEFAULT_VISUALIZATION_CONFIG):
    """
    Log a search result to Rerun: grid, field heat map and walked path.

    Args:
        result: SearchResult from PotentialFieldFinder.search
        grid: Grid that was searched
        start: (x, y) start cell
        goal: (x, y) goal cell
        entity_root: Root entity path
    """
    rr.log(f"{entity_root}/grid", rr.Image(create_grid_image(grid, result.path, start, goal, config)))
    rr.log(f"{entity_root}/field", rr.Image(create_field_image(result.field, grid, config)))

    # Cell centers in image coordinates
    walked = np.asarray(result.walked, dtype=np.float32).reshape(-1, 2) + 0.5
    if len(walked) > 1:
        color = config.path_color if result.success else config.goal_color
        rr.log(f"{entity_root}/grid/path", rr.LineStrips2D([walked], colors=[color]))
        rr.log(f"{entity_root}/field/path", rr.LineStrips2D([walked], colors=[color]))

    endpoints = np.array([start, goal], dtype=np.float32) + 0.5
    rr.log(
        f"{entity_root}/grid/endpoints",
        rr.Points2D(
            endpoints,
            colors=[config.start_color, config.goal_color],
            radii=[config.path_radius] * 2
        )
    )
