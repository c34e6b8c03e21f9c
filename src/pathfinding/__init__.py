"""Pathfinding module for finding cheapest routes."""

from .dijkstra import PathFinder, PathResult, SegmentInfo, format_cost, format_path
from .errors import InvalidEdgeError, NoPathError, PathfindingError
from .graph import CostGraph

__all__ = [
    "CostGraph",
    "PathFinder",
    "PathResult",
    "SegmentInfo",
    "PathfindingError",
    "InvalidEdgeError",
    "NoPathError",
    "format_cost",
    "format_path",
]
