"""
Breadth-first and depth-first traversal.

This module provides traversal orders with optional execution traces for
stepwise visualization.
"""

import logging
from collections import deque
from typing import List, Optional, Set

from ..classes.node import NodeId
from ..classes.results import TraversalResult
from ..classes.steps import TraversalAction, TraversalStep
from ..core.graph import Graph

logger = logging.getLogger(__name__)


class GraphTraversal:
    """
    Traversal algorithms for graphs.

    This class provides methods for:
    - Breadth-first search
    - Recursive depth-first search
    - Iterative (explicit stack) depth-first search

    A start node that is not in the graph is treated as an isolated node.
    """

    def __init__(self, graph: Graph):
        """
        Initialize the traversal helper.

        Args:
            graph: Graph instance to traverse
        """
        self.graph = graph

    def bfs(self, start: NodeId, record_steps: bool = False) -> TraversalResult:
        """
        Breadth-first search from ``start``.

        Nodes are marked visited when they are enqueued, so no node is ever
        queued twice.

        Args:
            start: Node to start from
            record_steps: Record a VISIT step per enqueue and an EXPLORE step
                per dequeue

        Returns:
            TraversalResult with the visit order
        """
        visited: Set[NodeId] = {start}
        discovered: List[NodeId] = [start]
        queue = deque([start])
        order: List[NodeId] = []
        steps: List[TraversalStep] = []

        def record(action: TraversalAction, node: NodeId, source: Optional[NodeId] = None) -> None:
            steps.append(TraversalStep(
                step=len(steps),
                action=action,
                node=node,
                source=source,
                queue=tuple(queue),
                visited=tuple(discovered),
            ))

        if record_steps:
            record(TraversalAction.VISIT, start)

        while queue:
            current = queue.popleft()
            order.append(current)

            if record_steps:
                record(TraversalAction.EXPLORE, current)

            for neighbor, _ in self.graph.get_neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    discovered.append(neighbor)
                    queue.append(neighbor)

                    if record_steps:
                        record(TraversalAction.VISIT, neighbor, current)

        logger.debug(f"BFS from {start!r} visited {len(order)} nodes")
        return TraversalResult(order, steps if record_steps else None)

    def dfs(self, start: NodeId, record_steps: bool = False) -> TraversalResult:
        """
        Recursive depth-first search from ``start``.

        Args:
            start: Node to start from
            record_steps: Record VISIT, EXPLORE and BACKTRACK steps

        Returns:
            TraversalResult with the visit order
        """
        visited: Set[NodeId] = set()
        order: List[NodeId] = []
        steps: List[TraversalStep] = []

        def record(action: TraversalAction, node: NodeId, source: Optional[NodeId] = None) -> None:
            steps.append(TraversalStep(
                step=len(steps),
                action=action,
                node=node,
                source=source,
                visited=tuple(order),
            ))

        def visit(node: NodeId, source: Optional[NodeId] = None) -> None:
            visited.add(node)
            order.append(node)

            if record_steps:
                record(TraversalAction.VISIT, node, source)

            for neighbor, _ in self.graph.get_neighbors(node):
                if neighbor not in visited:
                    if record_steps:
                        record(TraversalAction.EXPLORE, neighbor, node)
                    visit(neighbor, node)

            if record_steps:
                record(TraversalAction.BACKTRACK, node)

        visit(start)

        logger.debug(f"DFS from {start!r} visited {len(order)} nodes")
        return TraversalResult(order, steps if record_steps else None)

    def dfs_iterative(self, start: NodeId, record_steps: bool = False) -> TraversalResult:
        """
        Depth-first search with an explicit stack.

        Neighbors are pushed in reverse adjacency order so the pop order
        matches ``dfs``.

        Args:
            start: Node to start from
            record_steps: Record a VISIT step with a stack snapshot per node

        Returns:
            TraversalResult with the visit order
        """
        visited: Set[NodeId] = set()
        stack: List[NodeId] = [start]
        order: List[NodeId] = []
        steps: List[TraversalStep] = []

        while stack:
            current = stack.pop()
            if current in visited:
                continue

            visited.add(current)
            order.append(current)

            if record_steps:
                steps.append(TraversalStep(
                    step=len(steps),
                    action=TraversalAction.VISIT,
                    node=current,
                    stack=tuple(stack),
                    visited=tuple(order),
                ))

            for neighbor, _ in reversed(self.graph.get_neighbors(current)):
                if neighbor not in visited:
                    stack.append(neighbor)

        return TraversalResult(order, steps if record_steps else None)
