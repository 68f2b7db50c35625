"""
Graph metrics.

This module composes the graph's degree queries with connectivity analysis
into summary statistics.
"""

import logging
from collections import deque
from typing import Dict, Optional

from ..classes.edge import DegreeInfo
from ..classes.node import NodeId
from ..classes.results import GraphMetrics
from ..core.graph import Graph
from .connectivity import ConnectivityAnalyzer

logger = logging.getLogger(__name__)


class MetricsCalculator:
    """
    Summary statistics for graphs.

    This class provides methods for:
    - Density and average degree
    - Degree distribution
    - Diameter by all-pairs BFS
    - A combined GraphMetrics bundle
    """

    def __init__(self, graph: Graph, connectivity: Optional[ConnectivityAnalyzer] = None):
        """
        Initialize the metrics calculator.

        Args:
            graph: Graph instance to measure
            connectivity: ConnectivityAnalyzer for component data
        """
        self.graph = graph
        self.connectivity = connectivity if connectivity is not None else ConnectivityAnalyzer(graph)

    def degree(self, node: NodeId) -> DegreeInfo:
        return self.graph.get_degree(node)

    def density(self) -> float:
        """
        Edge count relative to the maximum possible.

        ``2|E| / (|V|(|V|-1))`` for undirected graphs, ``|E| / (|V|(|V|-1))``
        for directed ones, 0 when there are fewer than two nodes.
        """
        n = self.graph.node_count
        if n <= 1:
            return 0.0

        max_edges = n * (n - 1)
        edges = self.graph.total_edge_count
        if self.graph.is_directed:
            return edges / max_edges
        return 2 * edges / max_edges

    def average_degree(self) -> float:
        n = self.graph.node_count
        if n == 0:
            return 0.0
        total = sum(self.graph.get_degree(node).degree for node in self.graph.get_nodes())
        return total / n

    def degree_distribution(self) -> Dict[int, int]:
        """
        Count nodes per degree.

        Returns:
            Degree -> number of nodes, ordered by ascending degree
        """
        distribution: Dict[int, int] = {}
        for node in self.graph.get_nodes():
            degree = self.graph.get_degree(node).degree
            distribution[degree] = distribution.get(degree, 0) + 1
        return dict(sorted(distribution.items()))

    def _bfs_distances(self, start: NodeId) -> Dict[NodeId, int]:
        distances = {start: 0}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for neighbor, _ in self.graph.get_neighbors(current):
                if neighbor not in distances:
                    distances[neighbor] = distances[current] + 1
                    queue.append(neighbor)

        return distances

    def diameter(self) -> Optional[int]:
        """
        Longest shortest hop count over all node pairs.

        Returns:
            The diameter, or None when the graph is empty or disconnected
        """
        nodes = self.graph.get_nodes()
        if not nodes:
            return None
        if not self.connectivity.is_connected():
            return None

        diameter = 0
        for start in nodes:
            distances = self._bfs_distances(start)
            # Directed graphs can be "connected" from the first node while
            # other nodes still miss some targets
            if len(distances) < len(nodes):
                return None
            diameter = max(diameter, max(distances.values()))

        return diameter

    def calculate(self) -> GraphMetrics:
        """Compute every metric in one bundle."""
        components = self.connectivity.find_connected_components()
        metrics = GraphMetrics(
            node_count=self.graph.node_count,
            edge_count=self.graph.total_edge_count,
            density=self.density(),
            diameter=self.diameter(),
            average_degree=self.average_degree(),
            degree_distribution=self.degree_distribution(),
            is_connected=components.is_connected,
            component_count=components.count,
        )
        logger.debug(f"Calculated metrics: {metrics}")
        return metrics
