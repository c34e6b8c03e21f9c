"""Weighted undirected graph construction from edge lists."""

import csv
import logging
from collections.abc import Hashable, Iterable, Mapping
from pathlib import Path

import networkx as nx

from .errors import InvalidEdgeError

logger = logging.getLogger(__name__)

# Adjacency mapping: node -> {neighbor: cost}
Adjacency = dict[Hashable, dict[Hashable, float]]


def _parse_cost(text: str) -> int | float:
    """Parse a CSV cost cell, keeping integral costs as int."""
    try:
        return int(text)
    except ValueError:
        return float(text)


class CostGraph:
    """
    Undirected weighted graph held as an adjacency mapping.

    Nodes are any hashable labels, edges carry a non-negative cost.
    Each edge is stored in both directions with the same cost.
    """

    def __init__(self, adjacency: Mapping | None = None):
        """
        Wrap an adjacency mapping.

        The mapping is used as-is, without validation or copy.
        """
        self.graph = adjacency if adjacency is not None else {}

    @classmethod
    def from_edges(cls, edges: Iterable) -> "CostGraph":
        """
        Build a graph from an edge list.

        Args:
            edges: Records of the form (node_a, node_b, cost), e.g.
                [("A", "B", 1), ("B", "C", 1), ("C", "D", 3)]

        Raises:
            InvalidEdgeError: if a record lacks one of its three fields.
                Nothing is built in that case.
        """
        adjacency: Adjacency = {}

        for index, record in enumerate(edges):
            try:
                node_a, node_b, cost = record[0], record[1], record[2]
            except (IndexError, KeyError, TypeError):
                raise InvalidEdgeError(index, record) from None

            if node_a is None or node_b is None or cost is None:
                raise InvalidEdgeError(index, record)

            # Later records overwrite earlier costs for the same pair
            adjacency.setdefault(node_a, {})[node_b] = cost
            adjacency.setdefault(node_b, {})[node_a] = cost

        graph = cls(adjacency)
        logger.debug(
            "Built graph with %d nodes and %d edges", len(graph), graph.num_edges()
        )
        return graph

    @classmethod
    def load_edges(cls, filepath: str | Path) -> "CostGraph":
        """
        Load a graph from a CSV edge list.

        Expected columns: node_a, node_b, cost

        Raises:
            InvalidEdgeError: on a blank field or a cost that is not a number.
        """
        filepath = Path(filepath)
        records = []

        with open(filepath, encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for index, row in enumerate(reader):
                node_a = (row.get("node_a") or "").strip() or None
                node_b = (row.get("node_b") or "").strip() or None
                cost_text = (row.get("cost") or "").strip()

                cost = None
                if cost_text:
                    try:
                        cost = _parse_cost(cost_text)
                    except ValueError:
                        raise InvalidEdgeError(
                            index, row, f"invalid cost {cost_text!r}"
                        ) from None

                records.append((node_a, node_b, cost))

        logger.debug("Read %d edges from %s", len(records), filepath)
        return cls.from_edges(records)

    def get_nodes(self) -> list:
        """Get list of all nodes."""
        return list(self.graph)

    def has_node(self, node) -> bool:
        """Check if a node exists in the graph."""
        return node in self.graph

    def get_neighbors(self, node) -> list:
        """Get neighboring nodes."""
        if node not in self.graph:
            return []
        return list(self.graph[node])

    def get_edge_cost(self, node_a, node_b) -> float | None:
        """Get the cost between two connected nodes."""
        return self.graph.get(node_a, {}).get(node_b)

    def num_edges(self) -> int:
        """Return number of undirected edges."""
        # Self-loops are stored once, every other edge twice
        loops = sum(1 for node, adj in self.graph.items() if node in adj)
        total = sum(len(adj) for adj in self.graph.values())
        return (total - loops) // 2 + loops

    def to_networkx(self) -> nx.Graph:
        """Convert to a NetworkX graph with costs as the 'weight' attribute."""
        g = nx.Graph()
        g.add_nodes_from(self.graph)
        for node_a, adj in self.graph.items():
            for node_b, cost in adj.items():
                g.add_edge(node_a, node_b, weight=cost)
        return g

    def __contains__(self, node) -> bool:
        return node in self.graph

    def __len__(self) -> int:
        """Return number of nodes."""
        return len(self.graph)
