"""
Integration tests for the GraphKit facade.
"""

import logging

import pytest

from graphkit import EdgeParseError, Graph, GraphKit
from graphkit.formats.parser import MIXED_NOTATION_WARNING


class TestFromEdges:
    """Test facade construction from edge notation."""

    def test_builds_graph(self):
        kit = GraphKit.from_edges("1-2, 2-3")
        assert kit.graph.total_edge_count == 2

    def test_parse_errors_raise(self):
        with pytest.raises(EdgeParseError) as excinfo:
            GraphKit.from_edges("")
        assert excinfo.value.errors == ["No edges provided"]

    def test_mixed_notation_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="graphkit"):
            kit = GraphKit.from_edges("1->2, 2-3")
        assert kit.graph.total_edge_count == 2
        assert MIXED_NOTATION_WARNING in caplog.text

    def test_empty_facade(self):
        kit = GraphKit()
        assert isinstance(kit.graph, Graph)
        assert kit.is_connected()


class TestScenarios:
    """End-to-end checks through the facade."""

    def test_triangle(self):
        kit = GraphKit.from_edges("1-2, 2-3, 3-1")
        assert kit.is_cycle()
        assert kit.is_complete()
        assert kit.is_connected()
        assert kit.density() == 1.0
        assert kit.metrics().diameter == 1

    def test_weighted_directed_shortest_path(self):
        kit = GraphKit.from_edges("1->2:5, 2->3:3, 1->3:100", directed=True, weighted=True)
        result = kit.dijkstra(1, 3)
        assert result.path == [1, 2, 3]
        assert result.distance == 8
        assert kit.floyd_warshall().distance(1, 3) == 8
        assert kit.shortest_path(1, 3).path == [1, 2, 3]

    def test_negative_cycle(self):
        kit = GraphKit.from_edges("1->2:-5, 2->1:-5", directed=True)
        assert kit.bellman_ford(1) is None

    def test_spanning_trees(self):
        kit = GraphKit.from_edges("A-B:4, A-C:1, B-C:2, B-D:5, C-D:8", weighted=True)
        assert kit.kruskal().total_weight == kit.prim().total_weight == 8

    def test_traversals(self):
        kit = GraphKit.from_edges("1-2, 1-3, 2-4")
        assert kit.bfs(1).order == [1, 2, 3, 4]
        assert kit.dfs(1).order == [1, 2, 4, 3]
        assert kit.dfs_iterative(1).order == [1, 2, 4, 3]

    def test_components(self):
        kit = GraphKit.from_edges("1-2, 3-4")
        assert kit.connected_components().count == 2
        assert not kit.is_connected()
        assert kit.diameter() is None

    def test_properties(self):
        kit = GraphKit.from_edges("1-2, 2-3, 3-4")
        properties = kit.properties()
        assert properties["path"] and properties["tree"]
        assert not properties["hasCycle"]
        assert kit.is_tree() and kit.is_path() and not kit.is_star()
        assert kit.is_bipartite().is_bipartite
        assert not kit.is_regular().regular
        assert not kit.has_cycle()
        assert not kit.check_hamiltonian_conditions().is_possible

    def test_facade_sees_later_mutation(self):
        kit = GraphKit.from_edges("1-2, 2-3")
        assert not kit.is_cycle()
        kit.graph.add_edge(3, 1)
        assert kit.is_cycle()
