"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from graphkit import Graph, GraphConfig, GraphKit


def graph_from(text: str, directed: bool = False, weighted: bool = False) -> Graph:
    """Build a graph from edge notation, failing loudly on parse errors."""
    return GraphKit.from_edges(text, directed=directed, weighted=weighted).graph


@pytest.fixture
def triangle() -> Graph:
    """Undirected triangle 1-2-3."""
    return graph_from("1-2, 2-3, 3-1")


@pytest.fixture
def weighted_directed() -> Graph:
    """Directed graph where the two-hop path beats the direct edge."""
    return graph_from("1->2:5, 2->3:3, 1->3:100", directed=True, weighted=True)


@pytest.fixture
def weighted_undirected() -> Graph:
    """Small weighted undirected graph with a unique minimum spanning tree."""
    return graph_from("A-B:4, A-C:1, B-C:2, B-D:5, C-D:8", weighted=True)


@pytest.fixture
def disconnected() -> Graph:
    """Two components: the path 1-2-3 and the edge 4-5."""
    return graph_from("1-2, 2-3, 4-5")


@pytest.fixture
def empty_graph() -> Graph:
    return Graph()


@pytest.fixture
def directed_config() -> GraphConfig:
    return GraphConfig(directed=True)


@pytest.fixture
def make_graph():
    """Return a builder turning edge notation into a graph."""
    return graph_from
