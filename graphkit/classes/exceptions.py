"""
Exceptions raised by graphkit.

Expected negative outcomes (unreachable nodes, disconnected graphs, negative
cycles found by Bellman-Ford) are reported through sentinel values, not
exceptions. These classes cover misuse only.
"""

from typing import List, Optional

from .node import NodeId


class GraphError(Exception):
    """Base exception for graph operations."""
    pass


class SelfLoopError(GraphError, ValueError):
    """Raised when a self-loop is added to a graph that disallows them."""

    def __init__(self, node: NodeId):
        self.node = node
        super().__init__(f"Self-loops are not allowed in this graph (node {node!r})")


class DirectedGraphError(GraphError, ValueError):
    """Raised when an undirected-only algorithm is called on a directed graph."""

    def __init__(self, algorithm: str):
        self.algorithm = algorithm
        super().__init__(f"{algorithm} only works on undirected graphs")


class NodeNotFoundError(GraphError, KeyError):
    """Raised when a required node is not in the graph."""

    def __init__(self, node: NodeId):
        self.node = node
        super().__init__(f"Node not found: {node!r}")

    def __str__(self) -> str:
        return self.args[0]


class NegativeCycleError(GraphError):
    """Raised when shortest paths are requested across a negative cycle."""

    def __init__(self, start: NodeId):
        self.start = start
        super().__init__(f"Negative cycle reachable from {start!r}")


class EdgeParseError(GraphError, ValueError):
    """Raised when edge notation cannot be turned into a graph."""

    def __init__(self, errors: List[str], warnings: Optional[List[str]] = None):
        self.errors = list(errors)
        self.warnings = list(warnings or [])
        super().__init__("; ".join(self.errors) or "Invalid edge input")
