"""
Graph construction operations.

This module contains builders that turn records and edge notation into
graphs, and templates for standard graph families.
"""

from .builder import GraphData, BuildResult, build_graph_from_data, graph_to_data, build_graph_from_edges
from .templates import GraphTemplates

__all__ = [
    'GraphData',
    'BuildResult',
    'build_graph_from_data',
    'graph_to_data',
    'build_graph_from_edges',
    'GraphTemplates',
]
