"""Tests for graph construction."""

import pytest

from src.pathfinding.dijkstra import PathFinder
from src.pathfinding.errors import InvalidEdgeError
from src.pathfinding.graph import CostGraph

EDGES = [
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


class TestFromEdges:
    """Tests for building a graph from an edge list."""

    @pytest.fixture
    def graph(self):
        return CostGraph.from_edges(EDGES)

    def test_nodes(self, graph):
        assert sorted(graph.get_nodes()) == ["A", "B", "C", "D", "E", "F"]
        assert len(graph) == 6
        assert graph.num_edges() == 10

    def test_symmetric(self, graph):
        for node_a, node_b, cost in EDGES:
            assert graph.get_edge_cost(node_a, node_b) == cost
            assert graph.get_edge_cost(node_b, node_a) == cost

    def test_missing_edge(self, graph):
        assert graph.get_edge_cost("A", "C") is None
        assert graph.get_edge_cost("A", "Unknown") is None

    def test_neighbors(self, graph):
        assert sorted(graph.get_neighbors("A")) == ["B", "D", "F"]
        assert graph.get_neighbors("Unknown") == []

    def test_has_node(self, graph):
        assert graph.has_node("A")
        assert "F" in graph
        assert not graph.has_node("Z")

    def test_empty(self):
        graph = CostGraph.from_edges([])
        assert len(graph) == 0
        assert graph.graph == {}

    def test_last_write_wins(self):
        graph = CostGraph.from_edges([("A", "B", 5), ("B", "A", 2)])
        assert graph.graph == {"A": {"B": 2}, "B": {"A": 2}}
        assert graph.num_edges() == 1

    def test_extra_fields_ignored(self):
        graph = CostGraph.from_edges([("A", "B", 4, "note")])
        assert graph.get_edge_cost("A", "B") == 4

    def test_idempotent(self):
        assert CostGraph.from_edges(EDGES).graph == CostGraph.from_edges(EDGES).graph

    def test_idempotent_queries(self):
        first, second = PathFinder(), PathFinder()
        first.prepare_graph(EDGES)
        second.prepare_graph(EDGES)
        for departure, destination in [("F", "A"), ("A", "C"), ("E", "B")]:
            assert first.find_path(departure, destination) == second.find_path(
                departure, destination
            )

    def test_accepts_generator(self):
        graph = CostGraph.from_edges(edge for edge in EDGES)
        assert len(graph) == 6

    def test_zero_cost_is_valid(self):
        graph = CostGraph.from_edges([("A", "B", 0)])
        assert graph.get_edge_cost("A", "B") == 0


class TestInvalidEdges:
    """Tests for edge validation."""

    @pytest.mark.parametrize(
        "record",
        [
            ("A", "B"),
            ("A",),
            (),
            ("A", "B", None),
            (None, "B", 1),
            ("A", None, 1),
            None,
        ],
    )
    def test_invalid_record(self, record):
        with pytest.raises(InvalidEdgeError):
            CostGraph.from_edges([record])

    def test_error_names_index(self):
        with pytest.raises(InvalidEdgeError) as exc_info:
            CostGraph.from_edges([("A", "B", 1), ("B", "C")])
        assert exc_info.value.index == 1
        assert exc_info.value.record == ("B", "C")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            CostGraph.from_edges([("A", "B")])


class TestLoadEdges:
    """Tests for loading a graph from CSV."""

    def write_csv(self, tmp_path, content):
        filepath = tmp_path / "edges.csv"
        filepath.write_text(content, encoding="utf-8")
        return filepath

    def test_load(self, tmp_path):
        lines = ["node_a,node_b,cost"] + [f"{a},{b},{c}" for a, b, c in EDGES]
        filepath = self.write_csv(tmp_path, "\n".join(lines) + "\n")

        graph = CostGraph.load_edges(filepath)
        assert graph.graph == CostGraph.from_edges(EDGES).graph

    def test_strips_names_and_parses_float(self, tmp_path):
        filepath = self.write_csv(tmp_path, "node_a,node_b,cost\n Paris , Lyon ,2.5\n")

        graph = CostGraph.load_edges(filepath)
        assert graph.get_edge_cost("Paris", "Lyon") == pytest.approx(2.5)

    def test_int_cost_stays_int(self, tmp_path):
        filepath = self.write_csv(tmp_path, "node_a,node_b,cost\nA,B,7\n")

        cost = CostGraph.load_edges(filepath).get_edge_cost("A", "B")
        assert cost == 7
        assert isinstance(cost, int)

    def test_blank_cost(self, tmp_path):
        filepath = self.write_csv(tmp_path, "node_a,node_b,cost\nA,B,1\nB,C,\n")

        with pytest.raises(InvalidEdgeError) as exc_info:
            CostGraph.load_edges(filepath)
        assert exc_info.value.index == 1

    def test_missing_column(self, tmp_path):
        filepath = self.write_csv(tmp_path, "node_a,node_b,cost\nA,B\n")

        with pytest.raises(InvalidEdgeError):
            CostGraph.load_edges(filepath)

    def test_invalid_cost(self, tmp_path):
        filepath = self.write_csv(tmp_path, "node_a,node_b,cost\nA,B,cheap\n")

        with pytest.raises(InvalidEdgeError, match="invalid cost"):
            CostGraph.load_edges(filepath)


class TestToNetworkx:
    """Tests for NetworkX conversion."""

    def test_weights(self):
        g = CostGraph.from_edges(EDGES).to_networkx()
        assert g.number_of_nodes() == 6
        assert g.number_of_edges() == 10
        assert g["F"]["D"]["weight"] == 2
