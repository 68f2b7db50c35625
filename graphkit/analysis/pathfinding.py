"""
Shortest path algorithms.

This module provides single-source (Dijkstra, Bellman-Ford) and all-pairs
(Floyd-Warshall) shortest paths together with path reconstruction.
"""

import logging
import math
from typing import Dict, List, Optional, Set, Union

import numpy as np

from ..classes.exceptions import NegativeCycleError
from ..classes.node import NodeId
from ..classes.results import PathResult, ShortestPathMatrix
from ..classes.steps import (
    DijkstraAction,
    DijkstraStep,
    FloydWarshallAction,
    FloydWarshallStep,
)
from ..classes.utils import PriorityQueue
from ..core.graph import Graph

logger = logging.getLogger(__name__)


def reconstruct_path(previous: Dict[NodeId, Optional[NodeId]], start: NodeId, end: NodeId) -> List[NodeId]:
    """
    Walk a predecessor map from ``end`` back to ``start``.

    Args:
        previous: Node -> predecessor on the shortest path (None for none)
        start: Source node
        end: Target node

    Returns:
        Path from start to end, or an empty list if the walk does not reach start
    """
    path: List[NodeId] = []
    current: Optional[NodeId] = end
    seen: Set[NodeId] = set()

    while current is not None and current not in seen:
        path.append(current)
        seen.add(current)
        if current == start:
            break
        current = previous.get(current)

    path.reverse()
    if not path or path[0] != start:
        return []
    return path


def reconstruct_floyd_warshall_path(result: ShortestPathMatrix, source: NodeId, target: NodeId) -> List[NodeId]:
    """
    Follow next-hop entries of a Floyd-Warshall result.

    Args:
        result: Output of ``PathFinder.floyd_warshall``
        source: Start node
        target: End node

    Returns:
        Path from source to target, ``[source]`` when they are equal, or an
        empty list when either node is unknown or no path exists
    """
    if source not in result.nodes or target not in result.nodes:
        return []

    index = {node: i for i, node in enumerate(result.nodes)}
    if source == target:
        return [source]

    current = index[source]
    target_index = index[target]
    if result.next_hop[current][target_index] is None:
        return []

    path = [source]
    # A path never needs more hops than there are nodes
    for _ in range(len(result.nodes)):
        next_node = result.next_hop[current][target_index]
        if next_node is None:
            return []
        path.append(next_node)
        current = index[next_node]
        if current == target_index:
            return path

    logger.warning(f"Next-hop walk from {source!r} to {target!r} did not terminate; negative cycle?")
    return []


class PathFinder:
    """
    Shortest path algorithms for graphs.

    This class provides methods for:
    - Dijkstra's algorithm (single pair or single source)
    - Floyd-Warshall all-pairs shortest paths
    - Bellman-Ford with negative cycle detection
    """

    def __init__(self, graph: Graph):
        """
        Initialize the path finder.

        Args:
            graph: Graph instance to analyze
        """
        self.graph = graph

    def has_negative_weights(self) -> bool:
        return any(
            weight < 0
            for node in self.graph.get_nodes()
            for _, weight in self.graph.get_neighbors(node)
        )

    def dijkstra(self, start: NodeId, end: Optional[NodeId] = None,
                 record_steps: bool = False) -> Union[PathResult, Dict[NodeId, PathResult]]:
        """
        Dijkstra's shortest paths from ``start``.

        Weights must be non-negative; negative weights are not rejected but
        give wrong answers. Frontier ties are resolved by insertion order.

        Args:
            start: Source node
            end: Optional target; the search stops once it is finalized
            record_steps: Record PROCESS, RELAX and SKIP steps

        Returns:
            PathResult for ``end`` when given, otherwise a dict mapping every
            other node to its PathResult (``inf`` and ``[]`` when unreachable)
        """
        if self.has_negative_weights():
            logger.warning("Dijkstra called on a graph with negative weights; results may be wrong")

        distances: Dict[NodeId, float] = {node: math.inf for node in self.graph.get_nodes()}
        previous: Dict[NodeId, Optional[NodeId]] = {node: None for node in distances}
        visited: Set[NodeId] = set()
        frontier: PriorityQueue[NodeId] = PriorityQueue()
        steps: List[DijkstraStep] = []

        distances[start] = 0
        frontier.push(start, 0)

        def record(action: DijkstraAction, current: NodeId, neighbor: Optional[NodeId] = None,
                   old_distance: Optional[float] = None, new_distance: Optional[float] = None) -> None:
            steps.append(DijkstraStep(
                step=len(steps),
                action=action,
                current_node=current,
                neighbor=neighbor,
                old_distance=old_distance,
                new_distance=new_distance,
                distances=dict(distances),
                visited=frozenset(visited),
            ))

        while frontier:
            current = frontier.pop()
            if current in visited:
                continue
            visited.add(current)
            current_distance = distances[current]

            if record_steps:
                record(DijkstraAction.PROCESS, current)

            if end is not None and current == end:
                break

            for neighbor, weight in self.graph.get_neighbors(current):
                new_distance = current_distance + weight
                old_distance = distances.get(neighbor, math.inf)

                if new_distance < old_distance:
                    distances[neighbor] = new_distance
                    previous[neighbor] = current
                    frontier.push(neighbor, new_distance)

                    if record_steps:
                        record(DijkstraAction.RELAX, current, neighbor, old_distance, new_distance)
                elif record_steps:
                    record(DijkstraAction.SKIP, current, neighbor, old_distance)

        logger.debug(f"Dijkstra from {start!r} finalized {len(visited)} nodes")

        if end is not None:
            return PathResult(
                path=reconstruct_path(previous, start, end),
                distance=distances.get(end, math.inf),
                steps=steps if record_steps else None,
            )

        return self._collect_paths(start, distances, previous)

    def _collect_paths(self, start: NodeId, distances: Dict[NodeId, float],
                       previous: Dict[NodeId, Optional[NodeId]]) -> Dict[NodeId, PathResult]:
        results: Dict[NodeId, PathResult] = {}
        for node in self.graph.get_nodes():
            if node == start:
                continue
            results[node] = PathResult(
                path=reconstruct_path(previous, start, node),
                distance=distances.get(node, math.inf),
            )
        return results

    def floyd_warshall(self, record_steps: bool = False) -> ShortestPathMatrix:
        """
        All-pairs shortest paths.

        Step recording stores a matrix copy for every ``(k, i, j)``
        consideration, which is O(n^3) records of O(n^2) size; only ask for it
        on small graphs.

        Args:
            record_steps: Record UPDATE and SKIP steps

        Returns:
            ShortestPathMatrix with distances and next-hop matrices
        """
        nodes, matrix = self.graph.to_adjacency_matrix()
        n = len(nodes)
        steps: List[FloydWarshallStep] = []

        next_hop: List[List[Optional[NodeId]]] = [[None] * n for _ in range(n)]
        for i in range(n):
            for j in range(n):
                if i != j and np.isfinite(matrix[i, j]):
                    next_hop[i][j] = nodes[j]

        for k in range(n):
            for i in range(n):
                for j in range(n):
                    old_distance = float(matrix[i, j])
                    new_distance = float(matrix[i, k] + matrix[k, j])

                    if new_distance < old_distance:
                        matrix[i, j] = new_distance
                        next_hop[i][j] = next_hop[i][k]

                        if record_steps:
                            steps.append(FloydWarshallStep(
                                step=len(steps), k=k, i=i, j=j,
                                action=FloydWarshallAction.UPDATE,
                                old_distance=old_distance,
                                new_distance=new_distance,
                                via=nodes[k],
                                matrix=matrix.copy(),
                            ))
                    elif record_steps:
                        steps.append(FloydWarshallStep(
                            step=len(steps), k=k, i=i, j=j,
                            action=FloydWarshallAction.SKIP,
                            old_distance=old_distance,
                            matrix=matrix.copy(),
                        ))

        logger.info(f"Floyd-Warshall computed all-pairs distances for {n} nodes")
        return ShortestPathMatrix(nodes, matrix, next_hop, steps if record_steps else None)

    def bellman_ford(self, start: NodeId) -> Optional[Dict[NodeId, PathResult]]:
        """
        Bellman-Ford single-source shortest paths.

        Every adjacency slot is relaxed, so undirected edges count in both
        directions (a negative undirected edge is therefore a negative cycle).

        Args:
            start: Source node

        Returns:
            Dict mapping every other node to its PathResult, or None when a
            negative cycle is reachable from ``start``
        """
        nodes = self.graph.get_nodes()
        distances: Dict[NodeId, float] = {node: math.inf for node in nodes}
        previous: Dict[NodeId, Optional[NodeId]] = {node: None for node in nodes}
        distances[start] = 0

        slots = [
            (source, target, weight)
            for source in nodes
            for target, weight in self.graph.get_neighbors(source)
        ]

        for _ in range(len(nodes) - 1):
            changed = False
            for source, target, weight in slots:
                if distances[source] + weight < distances[target]:
                    distances[target] = distances[source] + weight
                    previous[target] = source
                    changed = True
            if not changed:
                break

        for source, target, weight in slots:
            if distances[source] + weight < distances[target]:
                logger.warning(f"Negative cycle detected reachable from {start!r}")
                return None

        return self._collect_paths(start, distances, previous)

    def shortest_path(self, start: NodeId, end: NodeId) -> PathResult:
        """
        Shortest path between two nodes, choosing the algorithm by weights.

        Dijkstra is used unless some weight is negative, in which case
        Bellman-Ford is used.

        Raises:
            NegativeCycleError: If a negative cycle is reachable from ``start``
        """
        if not self.has_negative_weights():
            return self.dijkstra(start, end)

        results = self.bellman_ford(start)
        if results is None:
            raise NegativeCycleError(start)
        if start == end:
            return PathResult([start], 0)
        return results.get(end, PathResult([], math.inf))
