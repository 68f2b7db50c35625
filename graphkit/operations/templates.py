"""
Graph templates for quick creation of well-known graph families.
"""

import logging
from typing import Optional

import numpy as np

from ..classes.edge import GraphConfig
from ..classes.node import NodeId
from ..config import TEMPLATE_WEIGHT_MAX, TEMPLATE_WEIGHT_MIN
from ..core.graph import Graph

logger = logging.getLogger(__name__)


class GraphTemplates:
    """
    Factory for standard undirected graphs.

    Weighted templates draw integer weights uniformly from
    ``TEMPLATE_WEIGHT_MIN..TEMPLATE_WEIGHT_MAX``; pass a seed for
    reproducible weights.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def _new_graph(self, weighted: bool) -> Graph:
        return Graph(GraphConfig(directed=False, weighted=weighted))

    def _connect(self, graph: Graph, source: NodeId, target: NodeId) -> None:
        weight = None
        if graph.is_weighted:
            weight = int(self.rng.integers(TEMPLATE_WEIGHT_MIN, TEMPLATE_WEIGHT_MAX + 1))
        graph.add_edge(source, target, weight)

    def complete(self, n: int, weighted: bool = False) -> Graph:
        """Complete graph K_n on nodes ``1..n``."""
        graph = self._new_graph(weighted)
        for i in range(1, n + 1):
            graph.add_node(i)
        for i in range(1, n + 1):
            for j in range(i + 1, n + 1):
                self._connect(graph, i, j)
        return graph

    def cycle(self, n: int, weighted: bool = False) -> Graph:
        """Cycle graph C_n on nodes ``1..n``."""
        graph = self._new_graph(weighted)
        for i in range(1, n + 1):
            graph.add_node(i)
        for i in range(1, n + 1):
            self._connect(graph, i, 1 if i == n else i + 1)
        return graph

    def path(self, n: int, weighted: bool = False) -> Graph:
        """Path graph P_n on nodes ``1..n``."""
        graph = self._new_graph(weighted)
        for i in range(1, n + 1):
            graph.add_node(i)
        for i in range(1, n):
            self._connect(graph, i, i + 1)
        return graph

    def binary_tree(self, depth: int, weighted: bool = False) -> Graph:
        """
        Complete binary tree of the given depth.

        Nodes are numbered in heap order, so node ``i`` has children ``2i``
        and ``2i + 1``.
        """
        graph = self._new_graph(weighted)
        max_nodes = 2 ** (depth + 1) - 1
        for i in range(1, max_nodes + 1):
            graph.add_node(i)
        for i in range(1, max_nodes + 1):
            for child in (2 * i, 2 * i + 1):
                if child <= max_nodes:
                    self._connect(graph, i, child)
        return graph

    def bipartite(self, m: int, n: int, weighted: bool = False) -> Graph:
        """Complete bipartite graph K_{m,n} on nodes ``A1..Am`` and ``B1..Bn``."""
        graph = self._new_graph(weighted)
        left = [f"A{i}" for i in range(1, m + 1)]
        right = [f"B{j}" for j in range(1, n + 1)]
        for node in left + right:
            graph.add_node(node)
        for a in left:
            for b in right:
                self._connect(graph, a, b)
        return graph

    def star(self, n: int, weighted: bool = False) -> Graph:
        """Star graph with hub ``"center"`` and leaves ``1..n``."""
        graph = self._new_graph(weighted)
        graph.add_node("center")
        for i in range(1, n + 1):
            graph.add_node(i)
            self._connect(graph, "center", i)
        logger.debug(f"Built star template with {n} leaves")
        return graph
