"""Dijkstra pathfinding for cheapest routes."""

import heapq
import logging
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from itertools import count, islice

import networkx as nx

from .errors import NoPathError
from .graph import CostGraph

logger = logging.getLogger(__name__)


@dataclass
class SegmentInfo:
    """Information about a path segment."""

    from_node: Hashable
    to_node: Hashable
    cost: float


@dataclass
class PathResult:
    """Result of pathfinding."""

    path: list
    total_cost: float
    segments: list[SegmentInfo] = field(default_factory=list)  # Details per hop

    @property
    def num_hops(self) -> int:
        return len(self.path) - 1


class PathFinder:
    """
    Find the cheapest path between two nodes using Dijkstra's algorithm.

    The graph is built once from an edge list (or replaced wholesale) and
    then reused across queries. Each query keeps its own distance and
    predecessor tables, so nothing is carried over between queries.
    """

    def __init__(self, graph: CostGraph | Mapping | None = None):
        """
        Initialize pathfinder, optionally with a graph.

        Args:
            graph: CostGraph instance or adjacency mapping
        """
        self._cost_graph = CostGraph()
        self.graph = self._cost_graph.graph
        if graph is not None:
            self.set_graph(graph)

    def set_graph(self, graph: CostGraph | Mapping) -> None:
        """
        Replace the graph wholesale, without validation.

        Args:
            graph: CostGraph or mapping of node -> {neighbor: cost}
        """
        if not isinstance(graph, CostGraph):
            graph = CostGraph(graph)
        self._cost_graph = graph
        self.graph = graph.graph

    def prepare_graph(self, edges: Iterable) -> None:
        """
        Build the graph from an edge list.

        Args:
            edges: Records of the form (node_a, node_b, cost)

        Raises:
            InvalidEdgeError: if a record lacks a field. The current graph
                is kept as it was.
        """
        self.set_graph(CostGraph.from_edges(edges))

    def _shortest_paths(self, source) -> tuple[dict, dict]:
        """Run Dijkstra from source, returning distance and predecessor tables."""
        distances = {node: float("inf") for node in self.graph}
        predecessors = {node: None for node in self.graph}
        distances[source] = 0

        # Counter breaks ties so that node labels are never compared
        tie = count()
        queue = [(0, next(tie), source)]

        while queue:
            dist_u, _, u = heapq.heappop(queue)
            if dist_u > distances[u]:
                continue  # stale entry

            for v, cost in self.graph.get(u, {}).items():
                alt = dist_u + cost
                if alt < distances.get(v, float("inf")):
                    distances[v] = alt
                    predecessors[v] = u
                    heapq.heappush(queue, (alt, next(tie), v))

        return distances, predecessors

    def find_path(self, departure, destination) -> PathResult:
        """
        Find the cheapest path between two nodes.

        A node queried against itself has no path: the departure never
        gets a predecessor, so there is nothing to walk back.

        Args:
            departure: Starting node
            destination: Ending node

        Returns:
            PathResult with path, total cost and segments

        Raises:
            NoPathError: if nothing connects departure to destination
        """
        _, predecessors = self._shortest_paths(departure)

        # Walk back from the destination
        reversed_path = []
        total_cost = 0
        node = destination
        while predecessors.get(node) is not None:
            reversed_path.append(node)
            total_cost += self.graph[predecessors[node]][node]
            node = predecessors[node]

        if not reversed_path:
            logger.debug("No path from %s to %s", departure, destination)
            raise NoPathError(departure, destination)

        reversed_path.append(departure)
        path = reversed_path[::-1]

        result = PathResult(
            path=path,
            total_cost=total_cost,
            segments=self._segments(path),
        )
        logger.debug(
            "Cheapest path %s -> %s: cost %s over %d hops",
            departure,
            destination,
            total_cost,
            result.num_hops,
        )
        return result

    def _segments(self, path: list) -> list[SegmentInfo]:
        return [
            SegmentInfo(
                from_node=path[i],
                to_node=path[i + 1],
                cost=self.graph[path[i]][path[i + 1]],
            )
            for i in range(len(path) - 1)
        ]

    def find_path_with_waypoints(
        self, departure, destination, waypoints: list
    ) -> PathResult:
        """
        Find path through specified waypoints.

        Args:
            departure: Starting node
            destination: Ending node
            waypoints: List of intermediate nodes to pass through, in order

        Returns:
            PathResult with complete path

        Raises:
            NoPathError: for the first leg that cannot be completed
        """
        all_points = [departure] + list(waypoints) + [destination]
        full_path = []
        total_cost = 0
        all_segments = []

        for i in range(len(all_points) - 1):
            result = self.find_path(all_points[i], all_points[i + 1])

            # Avoid duplicating waypoints in the path
            if full_path:
                full_path.extend(result.path[1:])
            else:
                full_path.extend(result.path)

            total_cost += result.total_cost
            all_segments.extend(result.segments)

        return PathResult(path=full_path, total_cost=total_cost, segments=all_segments)

    def get_alternative_paths(self, departure, destination, k: int = 3) -> list[PathResult]:
        """
        Find up to k loopless paths between two nodes, cheapest first.

        Args:
            departure: Starting node
            destination: Ending node
            k: Number of paths to find

        Returns:
            List of PathResult, sorted by total cost

        Raises:
            NoPathError: if the nodes are unknown, identical or disconnected
            ValueError: if k is smaller than 1
        """
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        if departure == destination:
            raise NoPathError(departure, destination)

        # Neighbors that are not keys of a replaced mapping are nodes too
        g = self._cost_graph.to_networkx()
        if departure not in g or destination not in g:
            raise NoPathError(departure, destination)

        try:
            paths = list(
                islice(nx.shortest_simple_paths(g, departure, destination, weight="weight"), k)
            )
        except (nx.NetworkXNoPath, nx.NodeNotFound):
            raise NoPathError(departure, destination) from None

        results = []
        for path in paths:
            segments = [
                SegmentInfo(from_node=u, to_node=v, cost=g[u][v]["weight"])
                for u, v in zip(path[:-1], path[1:])
            ]
            results.append(PathResult(
                path=path,
                total_cost=sum(segment.cost for segment in segments),
                segments=segments,
            ))

        return results


def format_path(path: list, separator: str = " -> ") -> str:
    """Join a path into a human readable string."""
    return separator.join(str(node) for node in path)


def format_cost(cost: float) -> str:
    """Format a cost, dropping the decimal part when it is integral."""
    if isinstance(cost, float) and cost.is_integer():
        return str(int(cost))
    return str(cost)
