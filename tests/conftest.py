"""
Pytest configuration and fixtures for potential field finder tests.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is in path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fieldpath.grid import Grid
from fieldpath.io_utils import parse_grid_text


@pytest.fixture
def open_grid():
    """Factory for grids without obstacles."""
    def _make(width, height):
        return Grid(width, height)
    return _make


@pytest.fixture
def text_grid():
    """Factory for grids from ASCII maps ('#' is blocked)."""
    return parse_grid_text


@pytest.fixture
def corridor_map():
    """
    A dead-end corridor along the top row, one wall short of the goal.

    The goal is reachable around the bottom, but the field pulls the walk
    straight into the corridor.
    """
    return (
        "S....#G\n"
        ".#####.\n"
        ".......\n"
    )
