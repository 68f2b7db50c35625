"""
Core data classes for graph representation.

This module contains the plain data structures used throughout the graphkit
library: node ids, edges, configuration, step records, results and errors.
"""

from .node import NodeId, node_sort_key, canonical_pair, format_node_id
from .edge import Edge, Neighbor, DegreeInfo, AdjacencyMatrix, GraphConfig
from .exceptions import (
    GraphError,
    SelfLoopError,
    DirectedGraphError,
    NodeNotFoundError,
    NegativeCycleError,
    EdgeParseError,
)
from .utils import UnionFind, PriorityQueue

__all__ = [
    'NodeId',
    'node_sort_key',
    'canonical_pair',
    'format_node_id',
    'Edge',
    'Neighbor',
    'DegreeInfo',
    'AdjacencyMatrix',
    'GraphConfig',
    'GraphError',
    'SelfLoopError',
    'DirectedGraphError',
    'NodeNotFoundError',
    'NegativeCycleError',
    'EdgeParseError',
    'UnionFind',
    'PriorityQueue',
]
