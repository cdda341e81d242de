#!/usr/bin/env python3
"""
Benchmark the potential field finder on random grids.

Generates random obstacle maps, runs random queries for every diagonal
movement policy and reports how often the greedy walk reaches the goal.
"""

import argparse
import sys
import time
import numpy as np
from pathlib import Path
from tqdm import tqdm

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fieldpath.diagonal_movement import DiagonalMovement
from fieldpath.finder import PotentialFieldFinder
from fieldpath.geometry import path_length
from fieldpath.grid import Grid
from fieldpath.io_utils import save_json


def random_grid(rng, width, height, density):
    """Create a grid where each cell is blocked with probability `density`."""
    matrix = (rng.random((height, width)) < density).astype(np.uint8)
    return Grid(width, height, matrix)


def random_free_cell(rng, grid):
    free = np.argwhere(grid.walkable)
    y, x = free[rng.integers(len(free))]
    return int(x), int(y)


def run_benchmark(num_grids, queries_per_grid, width, height, density, seed=0):
    """
    Run random queries for every diagonal movement policy.

    Returns:
        Dictionary of per-policy statistics
    """
    rng = np.random.default_rng(seed)
    finders = {policy: PotentialFieldFinder(diagonal_movement=policy) for policy in DiagonalMovement}
    stats = {policy.name: {'queries': 0, 'succeeded': 0, 'lengths': [], 'seconds': 0.0}
             for policy in DiagonalMovement}

    for _ in tqdm(range(num_grids), desc="Benchmarking grids"):
        grid = random_grid(rng, width, height, density)
        if not grid.walkable.any():
            continue

        for _ in range(queries_per_grid):
            start = random_free_cell(rng, grid)
            goal = random_free_cell(rng, grid)

            for policy, finder in finders.items():
                t0 = time.perf_counter()
                path = finder.find_path(start[0], start[1], goal[0], goal[1], grid)
                elapsed = time.perf_counter() - t0

                entry = stats[policy.name]
                entry['queries'] += 1
                entry['seconds'] += elapsed
                if path:
                    entry['succeeded'] += 1
                    entry['lengths'].append(path_length(path))

    summary = {}
    for name, entry in stats.items():
        queries = max(entry['queries'], 1)
        summary[name] = {
            'queries': entry['queries'],
            'success_rate': entry['succeeded'] / queries,
            'mean_path_length': float(np.mean(entry['lengths'])) if entry['lengths'] else None,
            'mean_query_ms': 1000.0 * entry['seconds'] / queries,
        }
    return summary


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark the potential field finder on random grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default benchmark
  python benchmark_finder.py

  # Dense 64x64 maps, saved to JSON
  python benchmark_finder.py --size 64 64 --density 0.35 -o benchmark.json
        """
    )
    parser.add_argument("--grids", type=int, default=20, help="Number of random grids (default: 20)")
    parser.add_argument("--queries", type=int, default=10, help="Queries per grid (default: 10)")
    parser.add_argument("--size", nargs=2, type=int, default=[32, 32], metavar=("W", "H"),
                       help="Grid size (default: 32 32)")
    parser.add_argument("--density", type=float, default=0.2,
                       help="Obstacle probability per cell (default: 0.2)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed (default: 0)")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for the results")
    args = parser.parse_args()

    width, height = args.size
    print(f"Benchmarking {args.grids} grids of {width} x {height} "
          f"(density {args.density:.2f}, {args.queries} queries each)...")
    print("=" * 60)

    summary = run_benchmark(args.grids, args.queries, width, height, args.density, args.seed)

    print(f"\n{'Policy':<26}{'Success':>10}{'Length':>10}{'ms/query':>10}")
    for name, entry in summary.items():
        length = f"{entry['mean_path_length']:.1f}" if entry['mean_path_length'] is not None else "-"
        print(f"{name:<26}{100 * entry['success_rate']:>9.1f}%{length:>10}{entry['mean_query_ms']:>10.2f}")

    if args.output:
        if save_json(summary, args.output):
            print(f"\n✓ Saved results to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
