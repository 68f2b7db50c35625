"""
Core graph data structure.

This module provides the adjacency-based graph without any algorithms on top
of it. Every analysis class works exclusively through this public contract.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

import numpy as np

from ..classes.edge import AdjacencyMatrix, DegreeInfo, Edge, GraphConfig, Neighbor
from ..classes.exceptions import SelfLoopError
from ..classes.node import NodeId
from ..config import DEFAULT_WEIGHT

logger = logging.getLogger(__name__)


class Graph:
    """
    Adjacency-list graph over number or string node ids.

    This class owns all node and edge mutation and querying. It provides:
    - Node and edge insertion/removal honoring the graph configuration
    - Neighbor, degree and weight queries
    - Edge enumeration with undirected mirrors paired off
    - Conversion to adjacency matrix and adjacency list forms
    - Cloning and reversal

    Undirected edges are stored as two slots, one in each endpoint's list.
    ``_slot_count`` counts slots, so the undirected edge count is half of it.
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config: Structural configuration, defaults to an undirected,
                unweighted graph that allows self-loops but not multi-edges
        """
        self._config = config if config is not None else GraphConfig()
        self._adjacency: Dict[NodeId, List[Neighbor]] = {}
        self._slot_count = 0

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_node(self, node: NodeId) -> None:
        """Add a node; adding an existing node is a no-op."""
        if node not in self._adjacency:
            self._adjacency[node] = []

    def add_edge(self, source: NodeId, target: NodeId, weight: Optional[float] = None) -> None:
        """
        Add an edge, creating missing endpoints.

        Args:
            source: Node the edge leaves
            target: Node the edge enters
            weight: Edge weight, None for the default weight

        Raises:
            SelfLoopError: If ``source == target`` and self-loops are disallowed
        """
        if source == target and not self._config.allow_self_loops:
            raise SelfLoopError(source)

        if weight is None:
            weight = DEFAULT_WEIGHT

        self.add_node(source)
        self.add_node(target)

        if not self._config.allow_multiple_edges and self.has_edge(source, target):
            self._overwrite_weight(source, target, weight)
            logger.debug(f"Updated weight of edge {source!r} -> {target!r} to {weight}")
            return

        self._adjacency[source].append(Neighbor(target, weight))
        self._slot_count += 1

        if not self._config.directed:
            self._adjacency[target].append(Neighbor(source, weight))
            self._slot_count += 1

    def add_edges(self, edges: Iterable[Edge]) -> None:
        for edge in edges:
            self.add_edge(edge.source, edge.target, edge.weight)

    def _overwrite_weight(self, source: NodeId, target: NodeId, weight: float) -> None:
        """Overwrite the weight of an existing edge, mirror slots included."""
        pairs = [(source, target)]
        if not self._config.directed:
            pairs.append((target, source))

        for start, end in pairs:
            slots = self._adjacency[start]
            for index, neighbor in enumerate(slots):
                if neighbor.node == end:
                    slots[index] = Neighbor(end, weight)

    def remove_node(self, node: NodeId) -> None:
        """
        Remove a node together with every edge touching it.

        Args:
            node: Node to remove; unknown nodes are ignored
        """
        if node not in self._adjacency:
            return

        removed = len(self._adjacency.pop(node))
        for other, slots in self._adjacency.items():
            kept = [neighbor for neighbor in slots if neighbor.node != node]
            removed += len(slots) - len(kept)
            self._adjacency[other] = kept

        self._slot_count -= removed
        logger.debug(f"Removed node {node!r} and {removed} adjacency slots")

    def remove_edge(self, source: NodeId, target: NodeId) -> None:
        """
        Remove one edge between two nodes.

        Args:
            source: Node the edge leaves
            target: Node the edge enters
        """
        slots = self._adjacency.get(source)
        if slots is None:
            return

        index = self._find_slot(slots, target)
        if index is None:
            return

        del slots[index]
        self._slot_count -= 1

        if not self._config.directed:
            mirror_slots = self._adjacency[target]
            mirror_index = self._find_slot(mirror_slots, source)
            if mirror_index is not None:
                del mirror_slots[mirror_index]
                self._slot_count -= 1

    @staticmethod
    def _find_slot(slots: List[Neighbor], node: NodeId) -> Optional[int]:
        for index, neighbor in enumerate(slots):
            if neighbor.node == node:
                return index
        return None

    # ========================================================================
    # QUERIES
    # ========================================================================

    def has_node(self, node: NodeId) -> bool:
        return node in self._adjacency

    def get_nodes(self) -> List[NodeId]:
        """Return all nodes in insertion order."""
        return list(self._adjacency)

    def get_neighbors(self, node: NodeId) -> List[Neighbor]:
        """
        Get the ordered adjacency slots of a node.

        Args:
            node: Node to look up

        Returns:
            Copy of the node's slots, empty for unknown nodes
        """
        return list(self._adjacency.get(node, ()))

    def has_edge(self, source: NodeId, target: NodeId) -> bool:
        return self._find_slot(self._adjacency.get(source, []), target) is not None

    def get_edge_weight(self, source: NodeId, target: NodeId) -> Optional[float]:
        """Return the weight of the first edge source -> target, or None."""
        for neighbor in self._adjacency.get(source, ()):
            if neighbor.node == target:
                return neighbor.weight
        return None

    def get_degree(self, node: NodeId) -> DegreeInfo:
        """
        Get the in-, out- and total degree of a node.

        For undirected graphs all three values equal the number of slots in
        the node's list. For directed graphs the in-degree is found by
        scanning every list for slots that target the node.

        Args:
            node: Node to look up

        Returns:
            DegreeInfo, all zero for unknown nodes
        """
        out_degree = len(self._adjacency.get(node, ()))

        if not self._config.directed:
            return DegreeInfo(out_degree, out_degree, out_degree)

        in_degree = sum(
            1
            for slots in self._adjacency.values()
            for neighbor in slots
            if neighbor.node == node
        )
        return DegreeInfo(in_degree, out_degree, in_degree + out_degree)

    def get_edges(self) -> List[Edge]:
        """
        Enumerate every logical edge exactly once.

        Undirected edges appear in both endpoints' lists; a slot is skipped
        when its target was already walked as a source. A self-loop stores
        both of its slots in one list, so every other one is skipped. A
        weight of exactly 1 is reported as None.

        Returns:
            List of edges in node insertion order
        """
        edges: List[Edge] = []
        processed: Set[NodeId] = set()

        for source, slots in self._adjacency.items():
            loop_slots = 0
            for target, weight in slots:
                if not self._config.directed:
                    if target == source:
                        loop_slots += 1
                        if loop_slots % 2 == 0:
                            continue
                    elif target in processed:
                        continue

                edges.append(Edge(source, target, None if weight == DEFAULT_WEIGHT else weight))
            processed.add(source)

        return edges

    # ========================================================================
    # CONVERSION
    # ========================================================================

    def to_adjacency_matrix(self) -> AdjacencyMatrix:
        """
        Build a dense distance-style adjacency matrix.

        The diagonal is 0, missing edges are ``inf`` and present edges carry
        their weight (the smallest one when multi-edges exist). Self-loops do
        not overwrite the diagonal.

        Returns:
            AdjacencyMatrix over ``get_nodes()`` order
        """
        nodes = self.get_nodes()
        index = {node: i for i, node in enumerate(nodes)}
        n = len(nodes)

        matrix = np.full((n, n), np.inf, dtype=float)
        np.fill_diagonal(matrix, 0.0)

        for i, node in enumerate(nodes):
            for neighbor, weight in self._adjacency[node]:
                j = index[neighbor]
                if i != j:
                    matrix[i, j] = min(matrix[i, j], weight)

        return AdjacencyMatrix(nodes, matrix)

    def to_adjacency_list(self) -> Dict[NodeId, List[Neighbor]]:
        """Return a copy of the adjacency mapping."""
        return {node: list(slots) for node, slots in self._adjacency.items()}

    def clone(self) -> "Graph":
        """Return an independent copy with the same configuration and topology."""
        copy = Graph(self._config)
        copy._adjacency = self.to_adjacency_list()
        copy._slot_count = self._slot_count
        return copy

    def reverse(self) -> "Graph":
        """
        Return a graph with every edge direction flipped.

        Undirected graphs are returned as a clone since reversal changes
        nothing.
        """
        if not self._config.directed:
            return self.clone()

        reversed_graph = Graph(self._config)
        for node in self._adjacency:
            reversed_graph.add_node(node)

        for source, slots in self._adjacency.items():
            for target, weight in slots:
                reversed_graph._adjacency[target].append(Neighbor(source, weight))
                reversed_graph._slot_count += 1

        return reversed_graph

    # ========================================================================
    # PROPERTIES
    # ========================================================================

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def total_edge_count(self) -> int:
        """Number of logical edges (half the slot count for undirected graphs)."""
        if self._config.directed:
            return self._slot_count
        return self._slot_count // 2

    @property
    def is_directed(self) -> bool:
        return self._config.directed

    @property
    def is_weighted(self) -> bool:
        return self._config.weighted

    @property
    def configuration(self) -> GraphConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __repr__(self) -> str:
        kind = "directed" if self._config.directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count}, edges={self.total_edge_count})"
