"""
Connectivity analysis.

This module provides connected components, a connectedness check and
bipartiteness testing. Components follow adjacency lists, so on directed
graphs they are the sets reachable by repeated forward DFS in node order.
"""

import logging
from collections import deque
from typing import Dict, List, Optional, Set

from ..classes.node import NodeId
from ..classes.results import BipartiteResult, ComponentResult
from ..classes.steps import ComponentAction, ComponentStep
from ..core.graph import Graph

logger = logging.getLogger(__name__)


class ConnectivityAnalyzer:
    """
    Connectivity analysis for graphs.

    This class provides methods for:
    - Finding connected components (optionally with a step trace)
    - Checking whether the graph is connected
    - Testing bipartiteness by BFS two-coloring
    """

    def __init__(self, graph: Graph):
        """
        Initialize the connectivity analyzer.

        Args:
            graph: Graph instance to analyze
        """
        self.graph = graph

    def _dfs_visit(self, start: NodeId, visited: Set[NodeId], component: List[NodeId],
                   component_index: int = 0, steps: Optional[List[ComponentStep]] = None) -> None:
        """
        Collect everything reachable from ``start`` in depth-first order.

        Uses an explicit stack so long paths and cycles do not hit the
        recursion limit. Neighbors are pushed in reverse so nodes come out in
        adjacency order.
        """
        stack = [start]

        while stack:
            node = stack.pop()
            if node in visited:
                continue

            visited.add(node)
            component.append(node)

            if steps is not None:
                steps.append(ComponentStep(
                    step=len(steps),
                    action=ComponentAction.VISIT_NODE,
                    node=node,
                    component_index=component_index,
                    visited=frozenset(visited),
                ))

            for neighbor, _ in reversed(self.graph.get_neighbors(node)):
                if neighbor not in visited:
                    stack.append(neighbor)

    def find_connected_components(self, record_steps: bool = False) -> ComponentResult:
        """
        Find all connected components using DFS.

        Args:
            record_steps: Record START_COMPONENT and VISIT_NODE steps

        Returns:
            ComponentResult with components in discovery order
        """
        visited: Set[NodeId] = set()
        components: List[List[NodeId]] = []
        steps: Optional[List[ComponentStep]] = [] if record_steps else None

        for node in self.graph.get_nodes():
            if node in visited:
                continue

            if steps is not None:
                steps.append(ComponentStep(
                    step=len(steps),
                    action=ComponentAction.START_COMPONENT,
                    node=node,
                    component_index=len(components),
                    visited=frozenset(visited),
                ))

            component: List[NodeId] = []
            self._dfs_visit(node, visited, component, len(components), steps)
            components.append(component)

        logger.debug(f"Found {len(components)} connected components")
        return ComponentResult(
            components=components,
            count=len(components),
            is_connected=len(components) <= 1,
            steps=steps,
        )

    def is_connected(self) -> bool:
        """
        Check whether every node is reachable from the first node.

        Returns:
            True for an empty graph or a single component
        """
        nodes = self.graph.get_nodes()
        if not nodes:
            return True

        visited: Set[NodeId] = set()
        self._dfs_visit(nodes[0], visited, [])
        return len(visited) == len(nodes)

    def is_bipartite(self) -> BipartiteResult:
        """
        Test bipartiteness by two-coloring each component with BFS.

        Returns:
            BipartiteResult; partitions are given only when bipartite
        """
        color: Dict[NodeId, int] = {}

        for start in self.graph.get_nodes():
            if start in color:
                continue

            color[start] = 0
            queue = deque([start])

            while queue:
                current = queue.popleft()
                current_color = color[current]

                for neighbor, _ in self.graph.get_neighbors(current):
                    if neighbor not in color:
                        color[neighbor] = 1 - current_color
                        queue.append(neighbor)
                    elif color[neighbor] == current_color:
                        logger.debug(f"Edge {current!r} - {neighbor!r} joins same-colored nodes")
                        return BipartiteResult(False)

        first = [node for node, value in color.items() if value == 0]
        second = [node for node, value in color.items() if value == 1]
        return BipartiteResult(True, (first, second))
