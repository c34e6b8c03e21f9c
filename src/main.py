"""
Cheapest Path Finder - Main entry point.

Usage:
    python -m src.main F A
    python -m src.main F A --edges data/edges.csv --via B
    python -m src.main --help
"""

import argparse
import logging
import sys
from pathlib import Path

from src.pathfinding import (
    CostGraph,
    PathFinder,
    PathfindingError,
    format_cost,
    format_path,
)

# Default data paths
DATA_DIR = Path(__file__).parent.parent / "data"
EDGES_FILE = DATA_DIR / "edges.csv"

# Used when no edges file is available
DEFAULT_EDGES = [
    ("A", "B", 3),
    ("A", "D", 3),
    ("A", "F", 6),
    ("B", "D", 1),
    ("B", "E", 3),
    ("C", "E", 2),
    ("C", "F", 3),
    ("D", "E", 1),
    ("D", "F", 2),
    ("E", "F", 5),
]

logger = logging.getLogger(__name__)


def build_pathfinder(edges_file: Path | None) -> PathFinder:
    """
    Create a PathFinder from an edges CSV, or from the built-in edge set.

    Args:
        edges_file: CSV edge list, or None for the built-in edges
    """
    pathfinder = PathFinder()
    if edges_file is None:
        logger.info("Using built-in edge set")
        pathfinder.prepare_graph(DEFAULT_EDGES)
    else:
        logger.info("Loading edges from %s", edges_file)
        pathfinder.set_graph(CostGraph.load_edges(edges_file))
    return pathfinder


def run(args: argparse.Namespace) -> list[str]:
    """
    Answer the query described by parsed arguments.

    Returns:
        Output lines
    """
    if args.edges is not None:
        edges_file = args.edges
    elif EDGES_FILE.exists():
        edges_file = EDGES_FILE
    else:
        edges_file = None

    pathfinder = build_pathfinder(edges_file)

    if args.alternatives:
        results = pathfinder.get_alternative_paths(
            args.departure, args.destination, k=args.alternatives
        )
        return [
            f"{i}. {format_path(result.path)} ({format_cost(result.total_cost)})"
            for i, result in enumerate(results, 1)
        ]

    if args.via:
        result = pathfinder.find_path_with_waypoints(
            args.departure, args.destination, args.via
        )
    else:
        result = pathfinder.find_path(args.departure, args.destination)

    return [
        f"Total cost: {format_cost(result.total_cost)}",
        f"Path: {format_path(result.path)}",
    ]


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Cheapest Path Finder - Find the cheapest route between two nodes"
    )
    parser.add_argument("departure", help="Starting node")
    parser.add_argument("destination", help="Ending node")
    parser.add_argument(
        "--edges",
        type=Path,
        default=None,
        help=f"Path to edges CSV (default: {EDGES_FILE.name} if present, else built-in edges)",
    )
    query_mode = parser.add_mutually_exclusive_group()
    query_mode.add_argument(
        "--via",
        nargs="+",
        default=[],
        metavar="NODE",
        help="Intermediate nodes to pass through, in order",
    )
    query_mode.add_argument(
        "--alternatives",
        type=int,
        default=0,
        metavar="K",
        help="List the K cheapest loopless paths instead of a single one",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.edges is not None and not args.edges.exists():
        print(f"Error: Edges file not found: {args.edges}", file=sys.stderr)
        sys.exit(1)

    try:
        lines = run(args)
    except (PathfindingError, OSError, UnicodeDecodeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for line in lines:
        print(line)


if __name__ == "__main__":
    main()
