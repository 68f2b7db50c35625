"""
Utility structures for graphkit.

This module provides helpers shared across the analysis modules: a
disjoint-set forest, a stable min-priority queue and a depth-first cycle
search over plain adjacency dictionaries.
"""

import heapq
import itertools
import logging
from typing import Any, Dict, Generic, Hashable, Iterable, List, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class UnionFind(Generic[K]):
    """
    Disjoint-set forest with path compression and union by rank.

    Elements that were never registered are added lazily on first use, so
    the structure can be shared by callers that discover elements as they go.
    """

    def __init__(self, elements: Iterable[K] = ()):
        """
        Initialize one singleton set per element.

        Args:
            elements: Initial elements
        """
        self.parent: Dict[K, K] = {}
        self.rank: Dict[K, int] = {}
        for element in elements:
            self.add(element)

    def add(self, element: K) -> None:
        if element not in self.parent:
            self.parent[element] = element
            self.rank[element] = 0

    def find(self, element: K) -> K:
        """
        Find the representative of the set containing ``element``.

        Args:
            element: Element to look up

        Returns:
            Root element of its set
        """
        self.add(element)
        root = element
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression
        while self.parent[element] != root:
            next_element = self.parent[element]
            self.parent[element] = root
            element = next_element

        return root

    def union(self, first: K, second: K) -> bool:
        """
        Merge the sets containing two elements.

        Args:
            first: Element of the first set
            second: Element of the second set

        Returns:
            True if the sets were merged, False if they were already the same
        """
        root1 = self.find(first)
        root2 = self.find(second)

        if root1 == root2:
            return False

        rank1 = self.rank[root1]
        rank2 = self.rank[root2]

        if rank1 < rank2:
            self.parent[root1] = root2
        elif rank1 > rank2:
            self.parent[root2] = root1
        else:
            self.parent[root2] = root1
            self.rank[root1] = rank1 + 1

        return True

    def __contains__(self, element: Any) -> bool:
        return element in self.parent

    def __len__(self) -> int:
        return len(self.parent)


class PriorityQueue(Generic[T]):
    """
    Min-priority queue with insertion-order tie breaking.

    Items with equal priority come out in the order they were inserted, which
    keeps Dijkstra and Prim deterministic for a given adjacency order.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, T]] = []
        self._counter = itertools.count()

    def push(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> T:
        """
        Remove and return the item with the smallest priority.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        _, _, item = heapq.heappop(self._heap)
        return item

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def find_cycles_dfs(adjacency_dict: Dict[K, List[K]]) -> List[List[K]]:
    """
    Find cycles in a directed graph using depth-first search.

    Each back edge found yields one cycle, written as the path from the
    back edge's target around to itself.

    Args:
        adjacency_dict: Dictionary mapping node -> list of successor nodes

    Returns:
        List of cycles, where each cycle is a list of nodes
    """
    cycles: List[List[K]] = []
    visited = set()
    rec_stack = set()
    path: List[K] = []

    def dfs(node: K) -> None:
        visited.add(node)
        rec_stack.add(node)
        path.append(node)

        for neighbor in adjacency_dict.get(node, []):
            if neighbor in rec_stack:
                cycle_start = path.index(neighbor)
                cycles.append(path[cycle_start:] + [neighbor])
            elif neighbor not in visited:
                dfs(neighbor)

        rec_stack.remove(node)
        path.pop()

    # Start DFS from each unvisited node
    for node in adjacency_dict:
        if node not in visited:
            dfs(node)

    logger.debug(f"Cycle search found {len(cycles)} cycles")
    return cycles
