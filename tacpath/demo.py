"""
Tactical pathfinding demo.

Builds the reference bomb-site scenario, prints the map, plans a route and
prints the map again with the route plus basic statistics.

Run: python -m tacpath [--danger-weight 8] [--no-cover]
"""

import argparse
from typing import List, Optional

from pydantic import ValidationError

from .environment import render_ascii_map
from .config import Config
from .logging_utils import log_error, log_info, log_success
from .scenario import reference_scenario
from .schemas import SearchWeights
from .search import InvalidSearchInputError, tactical_astar


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Plan a least-danger route across the reference bomb-site map"
    )
    parser.add_argument(
        "--danger-weight",
        type=float,
        default=None,
        help="Penalty per unit of danger (default: TACPATH_DANGER_WEIGHT or 5.0)"
    )
    parser.add_argument(
        "--cover-weight",
        type=float,
        default=None,
        help="Discount per unit of cover, below 1.0 (default: TACPATH_COVER_WEIGHT or 0.4)"
    )
    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Override the start cell"
    )
    parser.add_argument(
        "--goal",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        default=None,
        help="Override the goal cell"
    )
    parser.add_argument(
        "--no-cover",
        action="store_true",
        help="Skip cover placements"
    )
    return parser.parse_args(argv)


def build_weights(args: argparse.Namespace) -> SearchWeights:
    weights = SearchWeights.from_config()
    overrides = {}
    if args.danger_weight is not None:
        overrides["danger_weight"] = args.danger_weight
    if args.cover_weight is not None:
        overrides["cover_weight"] = args.cover_weight
    if overrides:
        # Revalidate so out-of-range CLI values are rejected
        weights = SearchWeights(**{**weights.model_dump(), **overrides})
    return weights


def run_demo(args: argparse.Namespace) -> int:
    """Run the demo and return a process exit code."""
    try:
        Config.validate()
    except ValueError as e:
        log_error(f"Invalid configuration: {e}")
        return 2

    scenario = reference_scenario()
    grid = scenario.build_grid(include_cover=not args.no_cover)
    start = tuple(args.start) if args.start else scenario.start
    goal = tuple(args.goal) if args.goal else scenario.goal

    try:
        weights = build_weights(args)
    except ValidationError as e:
        log_error(f"Invalid search weights: {e}")
        return 2

    log_info(
        f"{scenario.name}: {grid.width}x{grid.height}, "
        f"danger_weight={weights.danger_weight} cover_weight={weights.cover_weight}"
    )
    print("=== MAP BEFORE SEARCH ===")
    print(render_ascii_map(grid, start=start, goal=goal))

    try:
        path = tactical_astar(grid, start, goal, weights)
    except InvalidSearchInputError as e:
        log_error(f"Cannot plan route: {e}")
        return 2

    if path is None:
        log_error("No path found.")
        return 1

    print("\n=== MAP WITH PATH ===")
    print(render_ascii_map(grid, path.steps, start=start, goal=goal))
    print(f"\nPath length : {len(path)}")
    print(f"Danger sum  : {path.danger:.2f}")
    log_success(f"Route cost {path.cost:.2f} after {path.expanded} expansions")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    return run_demo(args)
