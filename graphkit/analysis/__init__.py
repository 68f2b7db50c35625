"""
Graph analysis modules.

This module contains classes for traversal, shortest paths, spanning trees,
connectivity, structural property detection and metrics.
"""

from .traversal import GraphTraversal
from .pathfinding import PathFinder, reconstruct_path, reconstruct_floyd_warshall_path
from .spanning_tree import SpanningTreeFinder
from .connectivity import ConnectivityAnalyzer
from .detection import PropertyDetector
from .metrics import MetricsCalculator

__all__ = [
    'GraphTraversal',
    'PathFinder',
    'reconstruct_path',
    'reconstruct_floyd_warshall_path',
    'SpanningTreeFinder',
    'ConnectivityAnalyzer',
    'PropertyDetector',
    'MetricsCalculator',
]
