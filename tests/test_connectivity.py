"""
Unit tests for connectivity analysis.
"""

from graphkit import GraphTemplates
from graphkit.analysis.connectivity import ConnectivityAnalyzer
from graphkit.classes.steps import ComponentAction, StepKind


class TestComponents:
    """Test connected components."""

    def test_disconnected(self, disconnected):
        result = ConnectivityAnalyzer(disconnected).find_connected_components()
        assert result.components == [[1, 2, 3], [4, 5]]
        assert result.count == 2
        assert not result.is_connected
        assert result.steps is None

    def test_connected(self, triangle):
        result = ConnectivityAnalyzer(triangle).find_connected_components()
        assert result.count == 1
        assert result.is_connected

    def test_empty_graph(self, empty_graph):
        result = ConnectivityAnalyzer(empty_graph).find_connected_components()
        assert result.components == []
        assert result.count == 0
        assert result.is_connected

    def test_isolated_node_is_own_component(self, triangle):
        triangle.add_node(9)
        result = ConnectivityAnalyzer(triangle).find_connected_components()
        assert result.components[-1] == [9]

    def test_steps(self, disconnected):
        result = ConnectivityAnalyzer(disconnected).find_connected_components(record_steps=True)
        assert [(s.action, s.node, s.component_index) for s in result.steps] == [
            (ComponentAction.START_COMPONENT, 1, 0),
            (ComponentAction.VISIT_NODE, 1, 0),
            (ComponentAction.VISIT_NODE, 2, 0),
            (ComponentAction.VISIT_NODE, 3, 0),
            (ComponentAction.START_COMPONENT, 4, 1),
            (ComponentAction.VISIT_NODE, 4, 1),
            (ComponentAction.VISIT_NODE, 5, 1),
        ]
        assert result.steps[4].visited == frozenset({1, 2, 3})
        assert result.steps[0].kind is StepKind.COMPONENT


class TestIsConnected:
    """Test the connectedness check."""

    def test_values(self, triangle, disconnected, empty_graph):
        assert ConnectivityAnalyzer(triangle).is_connected()
        assert not ConnectivityAnalyzer(disconnected).is_connected()
        assert ConnectivityAnalyzer(empty_graph).is_connected()


class TestBipartite:
    """Test bipartiteness."""

    def test_even_cycle(self, make_graph):
        result = ConnectivityAnalyzer(make_graph("1-2, 2-3, 3-4, 4-1")).is_bipartite()
        assert result.is_bipartite
        assert result.partitions == ([1, 3], [2, 4])

    def test_odd_cycle(self, triangle):
        result = ConnectivityAnalyzer(triangle).is_bipartite()
        assert not result.is_bipartite
        assert result.partitions is None

    def test_disconnected_components_colored(self, disconnected):
        result = ConnectivityAnalyzer(disconnected).is_bipartite()
        assert result.is_bipartite
        assert sorted(result.partitions[0] + result.partitions[1]) == [1, 2, 3, 4, 5]


class TestLargeGraphs:
    """Test connectivity on graphs deeper than the recursion limit."""

    def test_long_path_connected(self):
        graph = GraphTemplates().path(1500)
        assert ConnectivityAnalyzer(graph).is_connected()

    def test_long_cycle_components(self):
        result = ConnectivityAnalyzer(GraphTemplates().cycle(1500)).find_connected_components()
        assert result.count == 1
        assert result.components[0][:3] == [1, 2, 3]
        assert len(result.components[0]) == 1500
