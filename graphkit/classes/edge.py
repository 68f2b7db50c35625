"""
Edge, adjacency and configuration records.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, NamedTuple, Optional

import numpy as np

from .node import NodeId
from ..config import DEFAULT_WEIGHT


@dataclass(frozen=True)
class Edge:
    """
    A single edge between two nodes.

    Attributes:
        source: Node the edge leaves
        target: Node the edge enters
        weight: Explicit weight, or None for the default weight of 1
    """

    source: NodeId
    target: NodeId
    weight: Optional[float] = None

    @property
    def effective_weight(self) -> float:
        return DEFAULT_WEIGHT if self.weight is None else self.weight

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the ``{from, to, weight?}`` record form."""
        record: Dict[str, Any] = {"from": self.source, "to": self.target}
        if self.weight is not None:
            record["weight"] = self.weight
        return record

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Edge":
        return cls(record["from"], record["to"], record.get("weight"))


class Neighbor(NamedTuple):
    """One adjacency slot: the neighbor and the weight of the edge to it."""

    node: NodeId
    weight: float


class DegreeInfo(NamedTuple):
    in_degree: int
    out_degree: int
    degree: int


class AdjacencyMatrix(NamedTuple):
    """Dense matrix view of a graph; ``matrix[i][j]`` is ``inf`` when there is no edge."""

    nodes: List[NodeId]
    matrix: np.ndarray


@dataclass(frozen=True)
class GraphConfig:
    """
    Structural configuration of a graph, fixed at construction time.

    Attributes:
        directed: Edges are one-way when True
        weighted: Weights are meaningful for display and analysis
        allow_self_loops: Edges from a node to itself are accepted
        allow_multiple_edges: Repeated edges add new slots instead of
            overwriting the existing weight
    """

    directed: bool = False
    weighted: bool = False
    allow_self_loops: bool = True
    allow_multiple_edges: bool = False

    def to_dict(self) -> Dict[str, bool]:
        """Convert to the camelCase form used by the graph record."""
        values = asdict(self)
        return {
            "directed": values["directed"],
            "weighted": values["weighted"],
            "allowSelfLoops": values["allow_self_loops"],
            "allowMultipleEdges": values["allow_multiple_edges"],
        }

    @classmethod
    def from_dict(cls, record: Optional[Dict[str, Any]]) -> "GraphConfig":
        """Build a config from a record, falling back to defaults for missing keys."""
        record = record or {}
        return cls(
            directed=bool(record.get("directed", False)),
            weighted=bool(record.get("weighted", False)),
            allow_self_loops=bool(record.get("allowSelfLoops", True)),
            allow_multiple_edges=bool(record.get("allowMultipleEdges", False)),
        )
