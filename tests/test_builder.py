"""
Unit tests for graph records and builders.
"""

import pytest

from graphkit import Edge, Graph, GraphConfig
from graphkit.operations.builder import (
    GraphData,
    build_graph_from_data,
    build_graph_from_edges,
    graph_to_data,
)


class TestGraphData:
    """Test record conversion."""

    def test_round_trip_keeps_isolated_nodes(self, triangle):
        triangle.add_node("lonely")
        data = graph_to_data(triangle, "g1", "Triangle")
        rebuilt = build_graph_from_data(data)
        assert rebuilt.get_nodes() == [1, 2, 3, "lonely"]
        assert rebuilt.get_edges() == triangle.get_edges()

    def test_round_trip_keeps_parallel_weights(self):
        graph = Graph(GraphConfig(allow_multiple_edges=True))
        graph.add_edge(1, 2, 7)
        graph.add_edge(1, 2, 3)
        graph.add_edge(2, 3)
        rebuilt = build_graph_from_data(GraphData.from_dict(graph_to_data(graph, "g", "n").to_dict()))
        assert [n.weight for n in rebuilt.get_neighbors(1)] == [7, 3]
        assert rebuilt.get_edges() == graph.get_edges()
        assert rebuilt.total_edge_count == 3

    def test_round_trip_keeps_config(self, weighted_directed):
        data = graph_to_data(weighted_directed, "g2", "Directed")
        rebuilt = build_graph_from_data(GraphData.from_dict(data.to_dict()))
        assert rebuilt.is_directed
        assert rebuilt.is_weighted
        assert rebuilt.get_edges() == weighted_directed.get_edges()

    def test_record_shape(self, weighted_directed):
        record = graph_to_data(weighted_directed, "g2", "Directed", description="demo").to_dict()
        assert record["id"] == "g2"
        assert record["description"] == "demo"
        assert record["nodes"] == [{"id": 1}, {"id": 2}, {"id": 3}]
        assert record["edges"][0] == {"from": 1, "to": 2, "weight": 5}
        assert record["config"] == {
            "directed": True,
            "weighted": True,
            "allowSelfLoops": True,
            "allowMultipleEdges": False,
        }
        assert "createdAt" in record and "updatedAt" in record

    def test_description_omitted_when_missing(self, triangle):
        assert "description" not in graph_to_data(triangle, "g", "n").to_dict()

    def test_created_at_kept(self, triangle):
        data = graph_to_data(triangle, "g", "n", created_at="2024-01-01T00:00:00+00:00")
        assert data.created_at == "2024-01-01T00:00:00+00:00"

    def test_missing_id_raises(self):
        with pytest.raises(KeyError):
            GraphData.from_dict({"name": "no id"})

    def test_defaults_for_missing_config(self):
        data = GraphData.from_dict({"id": "x", "name": "x", "edges": [{"from": 1, "to": 2}]})
        assert data.config == GraphConfig()
        assert data.edges == [Edge(1, 2)]

    def test_build_honors_self_loop_config(self):
        data = GraphData("x", "x", edges=[Edge(1, 2)], config=GraphConfig(allow_self_loops=False))
        graph = build_graph_from_data(data)
        assert isinstance(graph, Graph)
        assert not graph.configuration.allow_self_loops


class TestBuildFromEdges:
    """Test building from edge notation."""

    def test_success(self):
        result = build_graph_from_edges("1-2, 2-3")
        assert result.errors == []
        assert result.graph.total_edge_count == 2

    def test_errors_leave_graph_empty(self):
        result = build_graph_from_edges("1-2, bad")
        assert len(result.errors) == 1
        assert result.graph.node_count == 0

    def test_warnings_passed_through(self):
        result = build_graph_from_edges("1->2, 2-3")
        assert len(result.warnings) == 1
        assert result.graph.total_edge_count == 2
        assert not result.graph.is_directed

    def test_directed(self):
        result = build_graph_from_edges("1->2", directed=True, weighted=True)
        assert result.graph.is_directed
        assert result.graph.is_weighted
        assert not result.graph.has_edge(2, 1)
