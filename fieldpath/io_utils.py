"""
Input/Output utilities for grids, paths and field images.
"""

import json
import logging
import numpy as np
from pathlib import Path
from typing import Dict, Any, Optional, Sequence, Tuple
from PIL import Image

from .grid import Grid

logger = logging.getLogger(__name__)

BLOCKED_CHARS = {'#', 'X', 'x', '1'}
WALKABLE_CHARS = {'.', '0', ' ', 'S', 'G', 's', 'g'}

IMAGE_SUFFIXES = {'.png', '.bmp', '.jpg', '.jpeg', '.gif', '.tif', '.tiff'}


def parse_grid_text(text: str) -> Grid:
    """
    Parse an ASCII map into a grid.

    One row per line; '#', 'X' and '1' are blocked, '.', '0', ' ', 'S'
    and 'G' are walkable. Short rows are padded with walkable cells.

    Args:
        text: Map text

    Returns:
        Parsed Grid
    """
    rows = text.splitlines()
    while rows and not rows[-1].strip():
        rows.pop()

    width = max((len(row) for row in rows), default=0)
    matrix = np.zeros((len(rows), width), dtype=np.uint8)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in BLOCKED_CHARS:
                matrix[y, x] = 1
            elif char not in WALKABLE_CHARS:
                raise ValueError(f"Unexpected map character {char!r} at ({x}, {y})")
    return Grid(width, len(rows), matrix)


def find_marker(text: str, marker: str) -> Optional[Tuple[int, int]]:
    """Return the (x, y) of the first occurrence of a marker character in a map."""
    for y, row in enumerate(text.splitlines()):
        x = row.find(marker)
        if x >= 0:
            return (x, y)
    return None


def load_grid_image(image_path: Path, threshold: int = 128) -> Grid:
    """
    Load a grid from an image; dark pixels are blocked.

    Args:
        image_path: Path to image file
        threshold: Grayscale value below which a pixel is blocked

    Returns:
        Grid with one cell per pixel
    """
    gray = np.array(Image.open(image_path).convert('L'))
    return Grid.from_matrix((gray < threshold).astype(np.uint8))


def load_grid(file_path: Path) -> Optional[Grid]:
    """
    Load a grid from a text map, JSON, .npy or image file.

    Args:
        file_path: Path to the map file

    Returns:
        Grid, or None if loading fails
    """
    file_path = Path(file_path)
    suffix = file_path.suffix.lower()
    try:
        if suffix == '.json':
            data = load_json(file_path)
            if data is None:
                return None
            return Grid.from_matrix(data['matrix'])
        if suffix == '.npy':
            return Grid.from_matrix(np.load(file_path))
        if suffix in IMAGE_SUFFIXES:
            return load_grid_image(file_path)
        return parse_grid_text(file_path.read_text())
    except Exception as e:
        logger.error(f"Error loading grid from {file_path}: {e}")
        return None


def load_json(file_path: Path) -> Optional[Dict[str, Any]]:
    """
    Load JSON file safely.

    Args:
        file_path: Path to JSON file

    Returns:
        Dictionary with JSON data, or None if loading fails
    """
    try:
        with open(file_path, 'r') as f:
            return json.load(f)
    except Exception as e:
        logger.error(f"Error loading JSON from {file_path}: {e}")
        return None


def save_json(data: Dict[str, Any], file_path: Path, indent: int = 2) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Dictionary to save
        file_path: Path to save JSON file
        indent: JSON indentation

    Returns:
        True if successful, False otherwise
    """
    try:
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=indent)
        return True
    except Exception as e:
        logger.error(f"Error saving JSON to {file_path}: {e}")
        return False


def save_path_json(path: Sequence[Tuple[int, int]], file_path: Path, **metadata) -> bool:
    """
    Save a path as JSON: {"path": [[x, y], ...], "length": n, ...metadata}.
    """
    data = {
        'path': [[int(x), int(y)] for x, y in path],
        'length': len(path),
    }
    data.update(metadata)
    return save_json(data, file_path)


def save_image(image: np.ndarray, image_path: Path) -> bool:
    """
    Save numpy array as image.

    Args:
        image: Numpy array of image (H, W) or (H, W, 3)
        image_path: Path to save image

    Returns:
        True if successful, False otherwise
    """
    try:
        image_path = Path(image_path)
        image_path.parent.mkdir(parents=True, exist_ok=True)
        # Convert to uint8 if needed
        if image.dtype != np.uint8:
            if image.max() <= 1.0:
                image = (image * 255).astype(np.uint8)
            else:
                image = image.astype(np.uint8)

        Image.fromarray(image).save(image_path)
        return True
    except Exception as e:
        logger.error(f"Error saving image to {image_path}: {e}")
        return False
