"""
Structural property detection.

This module provides predicates that classify a graph from its degree
sequence and connectivity, plus a sufficient-condition heuristic for
Hamiltonian cycles.
"""

import logging
from typing import Any, Dict, List, Optional

from ..classes.node import NodeId
from ..classes.results import HamiltonianCheck, RegularityResult
from ..classes.utils import UnionFind, find_cycles_dfs
from ..core.graph import Graph
from .connectivity import ConnectivityAnalyzer

logger = logging.getLogger(__name__)


class PropertyDetector:
    """
    Detects structural properties of graphs.

    This class provides methods for:
    - Complete, cycle, path, star, tree and regular graph checks
    - Dirac/Ore Hamiltonian sufficiency conditions
    - Cycle detection
    """

    def __init__(self, graph: Graph, connectivity: Optional[ConnectivityAnalyzer] = None):
        """
        Initialize the property detector.

        Args:
            graph: Graph instance to analyze
            connectivity: ConnectivityAnalyzer for connectedness checks
        """
        self.graph = graph
        self.connectivity = connectivity if connectivity is not None else ConnectivityAnalyzer(graph)

    def _degrees(self) -> List[int]:
        return [self.graph.get_degree(node).degree for node in self.graph.get_nodes()]

    def is_complete(self) -> bool:
        """
        Check whether every node is adjacent to every other node.

        Directed graphs need in- and out-degree ``n - 1`` at every node.
        Graphs with fewer than two nodes are complete.
        """
        nodes = self.graph.get_nodes()
        n = len(nodes)
        if n <= 1:
            return True

        for node in nodes:
            degree = self.graph.get_degree(node)
            if self.graph.is_directed:
                if degree.in_degree != n - 1 or degree.out_degree != n - 1:
                    return False
            elif degree.degree != n - 1:
                return False

        return True

    def is_cycle(self) -> bool:
        """Check for a single cycle: ``n >= 3``, every degree 2, connected."""
        degrees = self._degrees()
        if len(degrees) < 3:
            return False
        if any(degree != 2 for degree in degrees):
            return False
        return self.connectivity.is_connected()

    def is_path(self) -> bool:
        """
        Check for a simple path: two degree-1 endpoints, the rest degree 2,
        connected. A single node is a trivial path.
        """
        degrees = self._degrees()
        n = len(degrees)
        if n < 2:
            return n == 1

        endpoints = 0
        for degree in degrees:
            if degree == 1:
                endpoints += 1
            elif degree != 2:
                return False

        if endpoints != 2:
            return False
        return self.connectivity.is_connected()

    def is_star(self) -> bool:
        """Check for one hub of degree ``n - 1`` with every other node of degree 1."""
        degrees = self._degrees()
        n = len(degrees)
        if n < 3:
            return False

        centers = 0
        for degree in degrees:
            if degree == n - 1:
                centers += 1
            elif degree != 1:
                return False

        return centers == 1

    def is_tree(self) -> bool:
        """Check for an undirected connected graph with exactly ``n - 1`` edges."""
        if self.graph.is_directed:
            return False

        n = self.graph.node_count
        if n <= 1:
            return True
        if self.graph.total_edge_count != n - 1:
            return False
        return self.connectivity.is_connected()

    def is_regular(self) -> RegularityResult:
        """
        Check whether all nodes share one degree.

        Returns:
            RegularityResult with the common degree when regular
        """
        degrees = self._degrees()
        if not degrees:
            return RegularityResult(True, 0)
        if any(degree != degrees[0] for degree in degrees):
            return RegularityResult(False)
        return RegularityResult(True, degrees[0])

    def check_hamiltonian_conditions(self) -> HamiltonianCheck:
        """
        Apply Dirac's and Ore's theorems.

        Both are sufficient but not necessary conditions, so a failed check
        never rules a Hamiltonian cycle out; exact detection is NP-complete.

        Returns:
            HamiltonianCheck with the satisfied theorem or a disclaimer
        """
        if self.graph.is_directed:
            return HamiltonianCheck(False, "Hamiltonian cycle detection not implemented for directed graphs")

        nodes = self.graph.get_nodes()
        n = len(nodes)
        if n < 3:
            return HamiltonianCheck(False, "Graph must have at least 3 vertices")

        degrees = {node: self.graph.get_degree(node).degree for node in nodes}
        min_degree = min(degrees.values())

        if min_degree >= n / 2:
            return HamiltonianCheck(True, f"Satisfies Dirac's theorem (min degree {min_degree} >= n/2)")

        if self._satisfies_ore(nodes, degrees):
            return HamiltonianCheck(True, "Satisfies Ore's theorem")

        return HamiltonianCheck(
            False,
            "Does not satisfy Dirac's or Ore's theorem (Hamiltonian cycle may still exist)",
        )

    def _satisfies_ore(self, nodes: List[NodeId], degrees: Dict[NodeId, int]) -> bool:
        n = len(nodes)
        for i, u in enumerate(nodes):
            for v in nodes[i + 1:]:
                if not self.graph.has_edge(u, v) and degrees[u] + degrees[v] < n:
                    return False
        return True

    def has_cycle(self) -> bool:
        """
        Detect whether the graph contains any cycle.

        Undirected graphs use a union-find over the edges (self-loops and
        parallel edges count as cycles); directed graphs use a DFS
        recursion-stack search.
        """
        if self.graph.is_directed:
            adjacency = {
                node: [neighbor for neighbor, _ in self.graph.get_neighbors(node)]
                for node in self.graph.get_nodes()
            }
            return len(find_cycles_dfs(adjacency)) > 0

        components: UnionFind[NodeId] = UnionFind(self.graph.get_nodes())
        for edge in self.graph.get_edges():
            if not components.union(edge.source, edge.target):
                logger.debug(f"Edge {edge.source!r} - {edge.target!r} closes a cycle")
                return True
        return False

    def summary(self) -> Dict[str, Any]:
        """Run every classifier and collect the results."""
        bipartite = self.connectivity.is_bipartite()
        regular = self.is_regular()
        hamiltonian = self.check_hamiltonian_conditions()
        return {
            "complete": self.is_complete(),
            "cycle": self.is_cycle(),
            "path": self.is_path(),
            "star": self.is_star(),
            "tree": self.is_tree(),
            "bipartite": bipartite.is_bipartite,
            "regular": regular.regular,
            "regularDegree": regular.degree,
            "hasCycle": self.has_cycle(),
            "hamiltonianPossible": hamiltonian.is_possible,
            "hamiltonianReason": hamiltonian.reason,
        }
