"""
Unit tests for shared utility structures.
"""

import pytest

from graphkit.classes.utils import PriorityQueue, UnionFind, find_cycles_dfs


class TestUnionFind:
    """Test the disjoint-set forest."""

    def test_union_and_find(self):
        sets = UnionFind([1, 2, 3, 4])
        assert sets.union(1, 2)
        assert sets.union(3, 4)
        assert not sets.union(2, 1)
        assert sets.find(1) == sets.find(2)
        assert sets.find(1) != sets.find(3)

    def test_lazy_add(self):
        sets = UnionFind()
        assert "x" not in sets
        sets.union("x", "y")
        assert "x" in sets
        assert len(sets) == 2

    def test_long_chain_compresses(self):
        sets = UnionFind(range(100))
        for i in range(99):
            sets.union(i, i + 1)
        root = sets.find(0)
        assert {sets.find(i) for i in range(100)} == {root}
        assert all(sets.parent[i] == root for i in range(100))


class TestPriorityQueue:
    """Test the stable min-priority queue."""

    def test_pops_in_priority_order(self):
        queue = PriorityQueue()
        queue.push("b", 2)
        queue.push("a", 1)
        queue.push("c", 3)
        assert [queue.pop() for _ in range(3)] == ["a", "b", "c"]

    def test_ties_keep_insertion_order(self):
        queue = PriorityQueue()
        for item in ["first", "second", "third"]:
            queue.push(item, 5)
        assert [queue.pop() for _ in range(3)] == ["first", "second", "third"]

    def test_unorderable_items(self):
        queue = PriorityQueue()
        queue.push({"a": 1}, 1)
        queue.push({"b": 2}, 1)
        assert queue.pop() == {"a": 1}

    def test_empty(self):
        queue = PriorityQueue()
        assert not queue
        with pytest.raises(IndexError):
            queue.pop()

    def test_len(self):
        queue = PriorityQueue()
        queue.push("x", 4)
        queue.push("y", 2)
        assert len(queue) == 2
        assert queue


class TestFindCycles:
    """Test the directed cycle search."""

    def test_cycle_found(self):
        cycles = find_cycles_dfs({1: [2], 2: [3], 3: [1]})
        assert cycles == [[1, 2, 3, 1]]

    def test_acyclic(self):
        assert find_cycles_dfs({1: [2, 3], 2: [3], 3: []}) == []
