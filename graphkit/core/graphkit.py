"""
Main facade class for graph analysis.

This module provides the GraphKit class, which wires the analysis components
around one graph and exposes them through a single object.
"""

import logging
from typing import Any, Dict, Optional, Union

from ..classes.edge import GraphConfig
from ..classes.exceptions import EdgeParseError
from ..classes.node import NodeId
from ..classes.results import (
    BipartiteResult,
    ComponentResult,
    GraphMetrics,
    HamiltonianCheck,
    PathResult,
    RegularityResult,
    ShortestPathMatrix,
    SpanningTreeResult,
    TraversalResult,
)
from ..formats.parser import ParserOptions, parse_edge_input
from .graph import Graph
from ..analysis.traversal import GraphTraversal
from ..analysis.pathfinding import PathFinder
from ..analysis.spanning_tree import SpanningTreeFinder
from ..analysis.connectivity import ConnectivityAnalyzer
from ..analysis.detection import PropertyDetector
from ..analysis.metrics import MetricsCalculator

logger = logging.getLogger(__name__)


class GraphKit:
    """
    Main facade class for graph analysis.

    Delegates to specialized components that all share one Graph. The graph
    can still be mutated between calls; every component reads it live.
    """

    def __init__(self, graph: Optional[Graph] = None):
        """
        Initialize the facade.

        Args:
            graph: Graph to analyze, defaults to an empty undirected graph
        """
        self.graph = graph if graph is not None else Graph()

        # Initialize analysis components
        self._traversal = GraphTraversal(self.graph)
        self._pathfinder = PathFinder(self.graph)
        self._spanning_tree = SpanningTreeFinder(self.graph)
        self._connectivity = ConnectivityAnalyzer(self.graph)
        self._detector = PropertyDetector(self.graph, self._connectivity)
        self._metrics = MetricsCalculator(self.graph, self._connectivity)

    @classmethod
    def from_edges(cls, text: str, directed: bool = False, weighted: bool = False) -> "GraphKit":
        """
        Build a facade from edge notation.

        Args:
            text: Edge notation, e.g. ``"1-2:5, 2-3"``
            directed: Build a directed graph
            weighted: Mark the graph as weighted

        Returns:
            GraphKit around the parsed graph

        Raises:
            EdgeParseError: If any segment fails to parse
        """
        parsed = parse_edge_input(text, ParserOptions(assume_directed=directed))
        if parsed.errors:
            raise EdgeParseError(parsed.errors, parsed.warnings)

        for warning in parsed.warnings:
            logger.warning(warning)

        graph = Graph(GraphConfig(directed=directed, weighted=weighted))
        graph.add_edges(parsed.edges)
        return cls(graph)

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def bfs(self, start: NodeId, record_steps: bool = False) -> TraversalResult:
        """Breadth-first traversal from ``start``."""
        return self._traversal.bfs(start, record_steps)

    def dfs(self, start: NodeId, record_steps: bool = False) -> TraversalResult:
        """Recursive depth-first traversal from ``start``."""
        return self._traversal.dfs(start, record_steps)

    def dfs_iterative(self, start: NodeId, record_steps: bool = False) -> TraversalResult:
        """Explicit-stack depth-first traversal from ``start``."""
        return self._traversal.dfs_iterative(start, record_steps)

    # ========================================================================
    # SHORTEST PATHS
    # ========================================================================

    def dijkstra(self, start: NodeId, end: Optional[NodeId] = None,
                 record_steps: bool = False) -> Union[PathResult, Dict[NodeId, PathResult]]:
        """Dijkstra shortest path(s) from ``start``."""
        return self._pathfinder.dijkstra(start, end, record_steps)

    def floyd_warshall(self, record_steps: bool = False) -> ShortestPathMatrix:
        """All-pairs shortest paths."""
        return self._pathfinder.floyd_warshall(record_steps)

    def bellman_ford(self, start: NodeId) -> Optional[Dict[NodeId, PathResult]]:
        """Bellman-Ford shortest paths, None on a reachable negative cycle."""
        return self._pathfinder.bellman_ford(start)

    def shortest_path(self, start: NodeId, end: NodeId) -> PathResult:
        """Shortest path choosing Dijkstra or Bellman-Ford by the weights."""
        return self._pathfinder.shortest_path(start, end)

    # ========================================================================
    # SPANNING TREES
    # ========================================================================

    def kruskal(self, record_steps: bool = False) -> SpanningTreeResult:
        """Kruskal minimum spanning tree."""
        return self._spanning_tree.kruskal(record_steps)

    def prim(self, start: Optional[NodeId] = None, record_steps: bool = False) -> SpanningTreeResult:
        """Prim minimum spanning tree."""
        return self._spanning_tree.prim(start, record_steps)

    # ========================================================================
    # CONNECTIVITY & PROPERTIES
    # ========================================================================

    def connected_components(self, record_steps: bool = False) -> ComponentResult:
        """Connected components in discovery order."""
        return self._connectivity.find_connected_components(record_steps)

    def is_connected(self) -> bool:
        return self._connectivity.is_connected()

    def is_bipartite(self) -> BipartiteResult:
        return self._connectivity.is_bipartite()

    def is_complete(self) -> bool:
        return self._detector.is_complete()

    def is_cycle(self) -> bool:
        return self._detector.is_cycle()

    def is_path(self) -> bool:
        return self._detector.is_path()

    def is_star(self) -> bool:
        return self._detector.is_star()

    def is_tree(self) -> bool:
        return self._detector.is_tree()

    def is_regular(self) -> RegularityResult:
        return self._detector.is_regular()

    def has_cycle(self) -> bool:
        return self._detector.has_cycle()

    def check_hamiltonian_conditions(self) -> HamiltonianCheck:
        return self._detector.check_hamiltonian_conditions()

    def properties(self) -> Dict[str, Any]:
        """Every structural classifier in one dict."""
        return self._detector.summary()

    # ========================================================================
    # METRICS
    # ========================================================================

    def density(self) -> float:
        return self._metrics.density()

    def diameter(self) -> Optional[int]:
        return self._metrics.diameter()

    def metrics(self) -> GraphMetrics:
        """Aggregate graph metrics."""
        return self._metrics.calculate()
