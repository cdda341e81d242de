#!/usr/bin/env python3
"""
Example: Finding a path with the potential field finder.

This demonstrates how to build a grid from an ASCII map, run a query
with each diagonal movement policy and inspect the field in Rerun.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fieldpath import (
    DiagonalMovement,
    PotentialFieldFinder,
    parse_grid_text,
    find_marker,
    path_length,
)
from fieldpath.visualization import setup_field_viewer_blueprint, log_search_result
import rerun as rr


EXAMPLE_MAP = """\
S.........#.........
..........#.........
..####....#....###..
.....#....#......#..
.....#...........#..
.....#######.....#..
...........#.....#..
...........#.......G
"""


def potential_field_example(text: str, visualize: bool = True):
    """Example of running every diagonal movement policy on one map."""
    grid = parse_grid_text(text)
    start = find_marker(text, "S")
    goal = find_marker(text, "G")
    if start is None or goal is None:
        print("Map needs both an S and a G marker")
        return
    print(f"Map: {grid.width} x {grid.height}, start={start}, goal={goal}")

    if visualize:
        rr.init("Potential Field Example", spawn=True)
        rr.send_blueprint(setup_field_viewer_blueprint())

    for index, policy in enumerate(DiagonalMovement):
        finder = PotentialFieldFinder(diagonal_movement=policy)
        result = finder.search(start[0], start[1], goal[0], goal[1], grid)

        if result.success:
            print(f"  {policy.name:<24} {len(result.path):>3} cells, length {path_length(result.path):.2f}")
        else:
            print(f"  {policy.name:<24} stuck at {result.stuck_at} after {result.steps} steps")

        if visualize:
            # One time step per policy
            rr.set_time_sequence("policy", index)
            log_search_result(result, grid, start, goal)

    if visualize:
        print("Potential field ready! Close the window when done.")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Potential field example")
    parser.add_argument("-i", "--input", type=Path,
                       help="ASCII map with S and G markers (default: built-in map)")
    parser.add_argument("--no-viewer", action="store_true", help="Only print results")
    args = parser.parse_args()

    if args.input is not None and not args.input.exists():
        print(f"Error: {args.input} does not exist")
        sys.exit(1)

    text = args.input.read_text() if args.input else EXAMPLE_MAP
    potential_field_example(text, visualize=not args.no_viewer)
