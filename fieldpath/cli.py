#!/usr/bin/env python3
"""
Find a path on a grid map with the potential field finder.
"""

import argparse
import logging
import sys
from pathlib import Path

from .diagonal_movement import DiagonalMovement
from .finder import PotentialFieldFinder
from .geometry import path_length
from .heuristics import HEURISTICS
from .io_utils import load_grid, save_path_json, save_image

DIAGONAL_CHOICES = [member.name.lower().replace("_", "-") for member in DiagonalMovement]


def build_parser():
    parser = argparse.ArgumentParser(
        description="Find a path on a grid map using a potential field",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 4-connected search on an ASCII map
  fieldpath-find -i maze.txt --start 0 0 --goal 9 9

  # Diagonal moves that never touch obstacle corners
  fieldpath-find -i maze.txt --start 0 0 --goal 9 9 --diagonal only-when-no-obstacles

  # Export the path and a heat map of the field
  fieldpath-find -i map.png --start 3 4 --goal 40 22 -o path.json --field-image field.png

  # Inspect the query in Rerun
  fieldpath-find -i maze.txt --start 0 0 --goal 9 9 --visualize
        """
    )

    parser.add_argument("-i", "--input", type=Path, required=True,
                       help="Map file (.txt/.map ASCII, .json, .npy or image)")
    parser.add_argument("--start", nargs=2, type=int, required=True, metavar=("X", "Y"),
                       help="Start cell")
    parser.add_argument("--goal", nargs=2, type=int, required=True, metavar=("X", "Y"),
                       help="Goal cell")
    parser.add_argument("--diagonal", choices=DIAGONAL_CHOICES,
                       help="Diagonal movement policy (overrides the legacy flags)")
    parser.add_argument("--allow-diagonal", action="store_true",
                       help="Allow diagonal moves (legacy, use --diagonal)")
    parser.add_argument("--dont-cross-corners", action="store_true",
                       help="Forbid diagonal moves touching obstacles (legacy, use --diagonal)")
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS),
                       help="Heuristic (default: manhattan without diagonals, octile with)")
    parser.add_argument("--weight", type=float, default=1.0,
                       help="Weight of the heuristic term (default: 1.0)")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for the path")
    parser.add_argument("--field-image", type=Path, help="Save a heat map of the field")
    parser.add_argument("--visualize", action="store_true", help="Show the query in Rerun")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.input.exists():
        print(f"Error: {args.input} does not exist")
        return 1

    grid = load_grid(args.input)
    if grid is None:
        print(f"Error: Failed to load map from {args.input}")
        return 1

    start_x, start_y = args.start
    goal_x, goal_y = args.goal
    for name, (x, y) in (("start", args.start), ("goal", args.goal)):
        if not grid.is_inside(x, y):
            print(f"Error: {name} ({x}, {y}) is outside the {grid.width}x{grid.height} map")
            return 1

    finder = PotentialFieldFinder(
        allow_diagonal=args.allow_diagonal,
        dont_cross_corners=args.dont_cross_corners,
        diagonal_movement=args.diagonal,
        heuristic=args.heuristic,
        weight=args.weight,
    )

    print(f"Map: {grid.width} x {grid.height} ({int(grid.walkable.sum()):,} walkable cells)")
    print(f"Finder: {finder.diagonal_movement.name.lower()}, "
          f"heuristic={finder.heuristic.__name__}, weight={finder.weight}")

    result = finder.search(start_x, start_y, goal_x, goal_y, grid)

    if result.success:
        print(f"✓ Found path with {len(result.path)} cells")
        print(f"  Path length: {path_length(result.path):.2f}")
        print("  " + " -> ".join(f"({x}, {y})" for x, y in result.path))
    else:
        print(f"✗ No path found (stuck at {result.stuck_at} after {result.steps} steps)")

    if args.output:
        if save_path_json(result.path, args.output,
                          start=list(args.start), goal=list(args.goal),
                          success=result.success,
                          diagonal_movement=finder.diagonal_movement.name):
            print(f"✓ Exported path to {args.output}")

    if args.field_image:
        from .visualization import create_field_image
        if save_image(create_field_image(result.field, grid), args.field_image):
            print(f"✓ Saved field image to {args.field_image}")

    if args.visualize:
        import rerun as rr
        from .visualization import setup_field_viewer_blueprint, log_search_result

        rr.init("Potential Field Finder", spawn=True)
        rr.send_blueprint(setup_field_viewer_blueprint())
        log_search_result(result, grid, tuple(args.start), tuple(args.goal))

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
