"""
Step records emitted by algorithms when step recording is enabled.

Each algorithm family has its own record type carrying a ``kind``
discriminant and an ``action`` enum, so consumers can dispatch on explicit
tags. Records are frozen and hold copies of the state they describe.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, FrozenSet, Optional, Tuple

import numpy as np

from .edge import Edge
from .node import NodeId


class StepKind(Enum):
    """Algorithm family a step record belongs to."""
    TRAVERSAL = "traversal"
    DIJKSTRA = "dijkstra"
    FLOYD_WARSHALL = "floyd_warshall"
    COMPONENT = "component"
    SPANNING_TREE = "spanning_tree"


class TraversalAction(Enum):
    VISIT = "visit"
    EXPLORE = "explore"
    BACKTRACK = "backtrack"


class DijkstraAction(Enum):
    PROCESS = "process"
    RELAX = "relax"
    SKIP = "skip"


class FloydWarshallAction(Enum):
    UPDATE = "update"
    SKIP = "skip"


class ComponentAction(Enum):
    START_COMPONENT = "start_component"
    VISIT_NODE = "visit_node"


class SpanningTreeAction(Enum):
    ADD = "add"
    SKIP = "skip"


@dataclass(frozen=True)
class TraversalStep:
    """
    One BFS/DFS state transition.

    Attributes:
        step: 0-based position in the trace
        action: What happened to ``node``
        node: Node visited, explored or backtracked from
        source: Node the traversal came from, when reached through an edge
        queue: BFS queue contents after the transition
        stack: Iterative DFS stack contents after the transition
        visited: Visited nodes in discovery order
    """

    kind: ClassVar[StepKind] = StepKind.TRAVERSAL

    step: int
    action: TraversalAction
    node: NodeId
    source: Optional[NodeId] = None
    queue: Optional[Tuple[NodeId, ...]] = None
    stack: Optional[Tuple[NodeId, ...]] = None
    visited: Tuple[NodeId, ...] = ()


@dataclass(frozen=True)
class DijkstraStep:
    """
    One Dijkstra transition: finalizing a node, or relaxing/skipping an edge.

    ``distances`` and ``visited`` are snapshots taken after the transition.
    """

    kind: ClassVar[StepKind] = StepKind.DIJKSTRA

    step: int
    action: DijkstraAction
    current_node: NodeId
    neighbor: Optional[NodeId] = None
    old_distance: Optional[float] = None
    new_distance: Optional[float] = None
    distances: Dict[NodeId, float] = field(default_factory=dict)
    visited: FrozenSet[NodeId] = frozenset()


@dataclass(frozen=True, eq=False)
class FloydWarshallStep:
    """
    One ``(k, i, j)`` relaxation considered by Floyd-Warshall.

    ``matrix`` is a copy of the distance matrix after the consideration.
    """

    kind: ClassVar[StepKind] = StepKind.FLOYD_WARSHALL

    step: int
    k: int
    i: int
    j: int
    action: FloydWarshallAction
    old_distance: float
    new_distance: Optional[float] = None
    via: Optional[NodeId] = None
    matrix: Optional[np.ndarray] = None


@dataclass(frozen=True)
class ComponentStep:
    kind: ClassVar[StepKind] = StepKind.COMPONENT

    step: int
    action: ComponentAction
    node: NodeId
    component_index: int
    visited: FrozenSet[NodeId] = frozenset()


@dataclass(frozen=True)
class SpanningTreeStep:
    kind: ClassVar[StepKind] = StepKind.SPANNING_TREE

    step: int
    action: SpanningTreeAction
    edge: Edge
    reason: str
