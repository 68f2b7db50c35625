"""
Minimum spanning tree algorithms.

Both algorithms require an undirected graph and raise DirectedGraphError
otherwise. A disconnected graph yields a spanning forest (Kruskal) or the
tree of the start node's component (Prim); neither is an error.
"""

import logging
from typing import List, Optional, Tuple

from ..classes.edge import Edge
from ..classes.exceptions import DirectedGraphError, NodeNotFoundError
from ..classes.node import NodeId
from ..classes.results import SpanningTreeResult
from ..classes.steps import SpanningTreeAction, SpanningTreeStep
from ..classes.utils import PriorityQueue, UnionFind
from ..config import DEFAULT_WEIGHT
from ..core.graph import Graph

logger = logging.getLogger(__name__)

REASON_KRUSKAL_ADD = "Edge connects two different components"
REASON_KRUSKAL_SKIP = "Edge would create a cycle"
REASON_PRIM_ADD = "Minimum weight edge connecting MST to new node"
REASON_PRIM_SKIP = "Both endpoints already in MST"


def _tree_edge(source: NodeId, target: NodeId, weight: float) -> Edge:
    return Edge(source, target, None if weight == DEFAULT_WEIGHT else weight)


class SpanningTreeFinder:
    """
    Minimum spanning tree construction.

    This class provides methods for:
    - Kruskal's algorithm with a union-find structure
    - Prim's algorithm with a priority-queue frontier
    """

    def __init__(self, graph: Graph):
        """
        Initialize the spanning tree finder.

        Args:
            graph: Undirected graph instance to analyze
        """
        self.graph = graph

    def _require_undirected(self, algorithm: str) -> None:
        if self.graph.is_directed:
            raise DirectedGraphError(algorithm)

    def kruskal(self, record_steps: bool = False) -> SpanningTreeResult:
        """
        Kruskal's minimum spanning tree.

        Edges are scanned in ascending weight; equal weights keep their
        enumeration order. The scan stops once ``n - 1`` edges are accepted.

        Args:
            record_steps: Record an ADD or SKIP step per edge considered

        Returns:
            SpanningTreeResult with the accepted edges and their total weight

        Raises:
            DirectedGraphError: If the graph is directed
        """
        self._require_undirected("Kruskal's algorithm")

        nodes = self.graph.get_nodes()
        sorted_edges = sorted(self.graph.get_edges(), key=lambda edge: edge.effective_weight)

        components: UnionFind[NodeId] = UnionFind(nodes)
        tree_edges: List[Edge] = []
        steps: List[SpanningTreeStep] = []
        total_weight = 0

        for edge in sorted_edges:
            if components.union(edge.source, edge.target):
                tree_edges.append(edge)
                total_weight += edge.effective_weight

                if record_steps:
                    steps.append(SpanningTreeStep(len(steps), SpanningTreeAction.ADD, edge, REASON_KRUSKAL_ADD))

                if len(tree_edges) == len(nodes) - 1:
                    break
            elif record_steps:
                steps.append(SpanningTreeStep(len(steps), SpanningTreeAction.SKIP, edge, REASON_KRUSKAL_SKIP))

        logger.debug(f"Kruskal selected {len(tree_edges)} edges with total weight {total_weight}")
        return SpanningTreeResult(tree_edges, total_weight, steps if record_steps else None)

    def prim(self, start: Optional[NodeId] = None, record_steps: bool = False) -> SpanningTreeResult:
        """
        Prim's minimum spanning tree grown from ``start``.

        Args:
            start: Root node, defaults to the first node of the graph
            record_steps: Record an ADD or SKIP step per candidate extracted

        Returns:
            SpanningTreeResult covering the start node's component

        Raises:
            DirectedGraphError: If the graph is directed
            NodeNotFoundError: If ``start`` is given but not in the graph
        """
        self._require_undirected("Prim's algorithm")

        nodes = self.graph.get_nodes()
        if not nodes:
            return SpanningTreeResult([], 0, [] if record_steps else None)

        if start is None:
            start = nodes[0]
        elif not self.graph.has_node(start):
            raise NodeNotFoundError(start)

        in_tree = {start}
        tree_edges: List[Edge] = []
        steps: List[SpanningTreeStep] = []
        total_weight = 0
        frontier: PriorityQueue[Tuple[NodeId, NodeId, float]] = PriorityQueue()

        def push_candidates(node: NodeId) -> None:
            for neighbor, weight in self.graph.get_neighbors(node):
                if neighbor not in in_tree:
                    frontier.push((node, neighbor, weight), weight)

        push_candidates(start)

        while frontier and len(in_tree) < len(nodes):
            source, target, weight = frontier.pop()
            edge = _tree_edge(source, target, weight)

            if target in in_tree:
                if record_steps:
                    steps.append(SpanningTreeStep(len(steps), SpanningTreeAction.SKIP, edge, REASON_PRIM_SKIP))
                continue

            in_tree.add(target)
            tree_edges.append(edge)
            total_weight += weight

            if record_steps:
                steps.append(SpanningTreeStep(len(steps), SpanningTreeAction.ADD, edge, REASON_PRIM_ADD))

            push_candidates(target)

        if len(in_tree) < len(nodes):
            logger.debug(f"Prim reached {len(in_tree)} of {len(nodes)} nodes; graph is disconnected")

        return SpanningTreeResult(tree_edges, total_weight, steps if record_steps else None)
