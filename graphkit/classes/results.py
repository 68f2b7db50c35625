"""
Result records returned by the analysis classes.

Results are always produced; step traces inside them are None unless the
caller asked for them.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .edge import Edge
from .node import NodeId
from .steps import (
    ComponentStep,
    DijkstraStep,
    FloydWarshallStep,
    SpanningTreeStep,
    TraversalStep,
)


@dataclass
class TraversalResult:
    """
    Outcome of a BFS or DFS.

    Attributes:
        order: Nodes in the order the traversal visited them
        steps: Execution trace, or None when not recorded
    """

    order: List[NodeId]
    steps: Optional[List[TraversalStep]] = None


@dataclass
class PathResult:
    """
    A shortest path to one target.

    ``path`` is empty and ``distance`` is ``inf`` when the target is
    unreachable.
    """

    path: List[NodeId]
    distance: float
    steps: Optional[List[DijkstraStep]] = None

    @property
    def reachable(self) -> bool:
        return len(self.path) > 0


@dataclass(eq=False)
class ShortestPathMatrix:
    """
    All-pairs shortest path distances with next-hop data for reconstruction.

    Attributes:
        nodes: Node order shared by both matrices
        distances: ``n x n`` array, ``inf`` where no path exists
        next_hop: ``next_hop[i][j]`` is the node after ``nodes[i]`` on the
            shortest path to ``nodes[j]``, or None
        steps: Execution trace, or None when not recorded
    """

    nodes: List[NodeId]
    distances: np.ndarray
    next_hop: List[List[Optional[NodeId]]]
    steps: Optional[List[FloydWarshallStep]] = None

    def distance(self, source: NodeId, target: NodeId) -> float:
        """Look up the distance between two nodes by id."""
        return float(self.distances[self.nodes.index(source)][self.nodes.index(target)])


@dataclass
class SpanningTreeResult:
    edges: List[Edge]
    total_weight: float
    steps: Optional[List[SpanningTreeStep]] = None


@dataclass
class ComponentResult:
    """
    Connected components in discovery order.

    Attributes:
        components: Node lists, one per component
        count: Number of components
        is_connected: True for zero or one component
        steps: Execution trace, or None when not recorded
    """

    components: List[List[NodeId]]
    count: int
    is_connected: bool
    steps: Optional[List[ComponentStep]] = None


@dataclass
class BipartiteResult:
    is_bipartite: bool
    partitions: Optional[Tuple[List[NodeId], List[NodeId]]] = None


@dataclass
class HamiltonianCheck:
    """Outcome of the Dirac/Ore sufficiency heuristics."""

    is_possible: bool
    reason: str


@dataclass
class RegularityResult:
    regular: bool
    degree: Optional[int] = None


@dataclass
class GraphMetrics:
    """
    Aggregate statistics of a graph.

    Attributes:
        node_count: Number of nodes
        edge_count: Number of logical edges
        density: Edge count relative to the maximum possible
        diameter: Longest shortest hop count, None if empty or disconnected
        average_degree: Mean of per-node degree
        degree_distribution: Degree -> number of nodes with that degree
        is_connected: Single component (or empty graph)
        component_count: Number of connected components
    """

    node_count: int
    edge_count: int
    density: float
    diameter: Optional[int]
    average_degree: float
    degree_distribution: Dict[int, int] = field(default_factory=dict)
    is_connected: bool = True
    component_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodeCount": self.node_count,
            "edgeCount": self.edge_count,
            "density": self.density,
            "diameter": self.diameter,
            "averageDegree": self.average_degree,
            "degreeDistribution": dict(self.degree_distribution),
            "isConnected": self.is_connected,
            "componentCount": self.component_count,
        }
