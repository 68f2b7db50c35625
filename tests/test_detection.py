"""
Unit tests for structural property detection.
"""

from graphkit import GraphTemplates
from graphkit.analysis.detection import PropertyDetector
from graphkit.classes.results import RegularityResult


class TestClassifiers:
    """Test graph family predicates."""

    def test_triangle(self, triangle):
        detector = PropertyDetector(triangle)
        assert detector.is_complete()
        assert detector.is_cycle()
        assert not detector.is_path()
        assert not detector.is_tree()
        assert detector.has_cycle()

    def test_path(self, make_graph):
        detector = PropertyDetector(make_graph("1-2, 2-3, 3-4"))
        assert detector.is_path()
        assert detector.is_tree()
        assert not detector.is_cycle()
        assert not detector.is_star()
        assert not detector.has_cycle()

    def test_star(self, make_graph):
        detector = PropertyDetector(make_graph("0-1, 0-2, 0-3, 0-4"))
        assert detector.is_star()
        assert detector.is_tree()
        assert not detector.is_path()

    def test_disconnected_is_not_path_or_tree(self, make_graph):
        detector = PropertyDetector(make_graph("1-2, 3-4"))
        assert not detector.is_path()
        assert not detector.is_tree()

    def test_single_node(self):
        from graphkit import Graph
        graph = Graph()
        graph.add_node(1)
        detector = PropertyDetector(graph)
        assert detector.is_path()
        assert detector.is_tree()
        assert detector.is_complete()
        assert not detector.is_cycle()

    def test_directed_complete(self, make_graph):
        detector = PropertyDetector(make_graph("1->2, 2->1", directed=True))
        assert detector.is_complete()
        assert not detector.is_tree()

    def test_directed_not_complete(self, weighted_directed):
        assert not PropertyDetector(weighted_directed).is_complete()

    def test_regular(self, triangle, make_graph):
        assert PropertyDetector(triangle).is_regular() == RegularityResult(True, 2)
        assert PropertyDetector(make_graph("1-2, 2-3")).is_regular() == RegularityResult(False)

    def test_empty_graph_is_regular(self, empty_graph):
        assert PropertyDetector(empty_graph).is_regular() == RegularityResult(True, 0)


class TestCycles:
    """Test cycle detection."""

    def test_directed_cycle(self, make_graph):
        assert PropertyDetector(make_graph("1->2, 2->3, 3->1", directed=True)).has_cycle()

    def test_directed_acyclic(self, weighted_directed):
        assert not PropertyDetector(weighted_directed).has_cycle()

    def test_self_loop_is_cycle(self, make_graph):
        assert PropertyDetector(make_graph("1-1")).has_cycle()


class TestHamiltonian:
    """Test Dirac/Ore heuristics."""

    def test_dirac(self, triangle):
        check = PropertyDetector(triangle).check_hamiltonian_conditions()
        assert check.is_possible
        assert check.reason == "Satisfies Dirac's theorem (min degree 2 >= n/2)"

    def test_ore(self, make_graph):
        graph = make_graph("1-2, 1-3, 1-4, 2-3, 2-4, 3-4, 5-1, 5-2")
        check = PropertyDetector(graph).check_hamiltonian_conditions()
        assert check.is_possible
        assert check.reason == "Satisfies Ore's theorem"

    def test_neither(self, make_graph):
        check = PropertyDetector(make_graph("1-2, 2-3, 3-4")).check_hamiltonian_conditions()
        assert not check.is_possible
        assert "may still exist" in check.reason

    def test_too_small(self, make_graph):
        check = PropertyDetector(make_graph("1-2")).check_hamiltonian_conditions()
        assert check.reason == "Graph must have at least 3 vertices"

    def test_directed(self, weighted_directed):
        check = PropertyDetector(weighted_directed).check_hamiltonian_conditions()
        assert not check.is_possible


class TestSummary:
    """Test the combined property summary."""

    def test_keys(self, triangle):
        summary = PropertyDetector(triangle).summary()
        assert summary["complete"] and summary["cycle"]
        assert summary["bipartite"] is False
        assert summary["regularDegree"] == 2
        assert summary["hamiltonianPossible"] is True


class TestLargeGraphs:
    """Test classifiers on graphs deeper than the recursion limit."""

    def test_long_path(self):
        detector = PropertyDetector(GraphTemplates().path(1500))
        assert detector.is_path()
        assert detector.is_tree()

    def test_long_cycle(self):
        assert PropertyDetector(GraphTemplates().cycle(1500)).is_cycle()
