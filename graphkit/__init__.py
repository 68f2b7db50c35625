"""
graphkit - Graph Construction and Analysis Library

A Python library for building graphs from a compact edge notation and
running classic graph algorithms on them, with optional step-by-step
execution traces for visualization.

Main Classes:
    GraphKit: Main class for graph analysis (facade)
    Graph: Adjacency-list graph over number or string node ids
    GraphConfig: Structural configuration of a graph
    Edge: Edge record between two nodes
    GraphTemplates: Factory for standard graph families

Example:
    >>> from graphkit import GraphKit
    >>> kit = GraphKit.from_edges("1-2:5, 2-3:3, 1-3:100")
    >>> kit.dijkstra(1, 3).path
    [1, 2, 3]
"""

__version__ = "0.1.0"

from graphkit.classes.edge import Edge, GraphConfig
from graphkit.classes.exceptions import (
    GraphError,
    SelfLoopError,
    DirectedGraphError,
    NodeNotFoundError,
    NegativeCycleError,
    EdgeParseError,
)
from graphkit.core.graph import Graph
from graphkit.core.graphkit import GraphKit
from graphkit.formats.parser import ParserOptions, parse_edge_input, format_edges
from graphkit.formats.dot import generate_dot
from graphkit.operations.builder import GraphData, build_graph_from_data, build_graph_from_edges, graph_to_data
from graphkit.operations.templates import GraphTemplates

__all__ = [
    'GraphKit',
    'Graph',
    'GraphConfig',
    'Edge',
    'GraphError',
    'SelfLoopError',
    'DirectedGraphError',
    'NodeNotFoundError',
    'NegativeCycleError',
    'EdgeParseError',
    'ParserOptions',
    'parse_edge_input',
    'format_edges',
    'generate_dot',
    'GraphData',
    'build_graph_from_data',
    'build_graph_from_edges',
    'graph_to_data',
    'GraphTemplates',
]
