"""Tests for frontier containers and distance metrics."""

from __future__ import annotations

import pytest

from graphlab_search import (
    DequeFrontier,
    FrontierDiscipline,
    PriorityFrontier,
    SearchNode,
    euclidean_distance,
    manhattan_distance,
    root_manhattan_distance,
)


def _node(key: str, cost: int = 0, x: int = 0, y: int = 0) -> SearchNode:
    node = SearchNode(key=key, x=x, y=y)
    node.path_cost = cost
    return node


class TestDequeFrontier:
    """FIFO and LIFO disciplines over one deque."""

    def test_fifo_order(self):
        frontier = DequeFrontier(FrontierDiscipline.FIFO)
        for key in "abc":
            frontier.push(_node(key))
        assert [frontier.pop().key for _ in range(3)] == ["a", "b", "c"]

    def test_lifo_order(self):
        frontier = DequeFrontier(FrontierDiscipline.LIFO)
        for key in "abc":
            frontier.push(_node(key))
        assert [frontier.pop().key for _ in range(3)] == ["c", "b", "a"]

    def test_len_and_bool(self):
        frontier = DequeFrontier(FrontierDiscipline.FIFO)
        assert not frontier
        frontier.push(_node("a"))
        assert frontier
        assert len(frontier) == 1

    def test_pop_empty_raises(self):
        with pytest.raises(IndexError):
            DequeFrontier(FrontierDiscipline.LIFO).pop()

    def test_discipline_property(self):
        assert DequeFrontier(FrontierDiscipline.LIFO).discipline is FrontierDiscipline.LIFO


class TestPriorityFrontier:
    """Min-cost heap with lazy invalidation."""

    def test_pops_lowest_cost(self):
        frontier = PriorityFrontier()
        frontier.push(_node("far", 9))
        frontier.push(_node("near", 1))
        frontier.push(_node("mid", 5))
        assert [frontier.pop().key for _ in range(3)] == ["near", "mid", "far"]

    def test_ties_pop_in_insertion_order(self):
        frontier = PriorityFrontier()
        for key in "xyz":
            frontier.push(_node(key, 3))
        assert [frontier.pop().key for _ in range(3)] == ["x", "y", "z"]

    def test_requeue_after_cost_increase(self):
        frontier = PriorityFrontier()
        a = _node("a", 1)
        b = _node("b", 2)
        frontier.push(a)
        frontier.push(b)
        a.path_cost = 10
        assert frontier.requeue(a) is True
        assert frontier.pop() is b
        assert frontier.pop() is a

    def test_requeue_after_cost_decrease(self):
        frontier = PriorityFrontier()
        a = _node("a", 1)
        b = _node("b", 8)
        frontier.push(a)
        frontier.push(b)
        b.path_cost = 0
        frontier.requeue(b)
        assert frontier.pop() is b

    def test_requeue_unchanged_cost_is_noop(self):
        frontier = PriorityFrontier()
        a = _node("a", 4)
        frontier.push(a)
        assert frontier.requeue(a) is False
        assert len(frontier) == 1

    def test_requeue_absent_node_is_noop(self):
        assert PriorityFrontier().requeue(_node("a", 1)) is False

    def test_stale_entries_do_not_count(self):
        frontier = PriorityFrontier()
        a = _node("a", 1)
        frontier.push(a)
        a.path_cost = 2
        frontier.requeue(a)
        a.path_cost = 3
        frontier.requeue(a)
        assert len(frontier) == 1
        assert frontier.pop() is a
        assert not frontier
        with pytest.raises(IndexError):
            frontier.pop()

    def test_contains(self):
        frontier = PriorityFrontier()
        a = _node("a", 1)
        frontier.push(a)
        assert a in frontier
        frontier.pop()
        assert a not in frontier
        assert "a" not in frontier

    def test_peek_cost_skips_stale(self):
        frontier = PriorityFrontier()
        a = _node("a", 1)
        frontier.push(a)
        frontier.push(_node("b", 4))
        a.path_cost = 7
        frontier.requeue(a)
        assert frontier.peek_cost() == 4
        assert PriorityFrontier().peek_cost() is None


class TestDistance:
    """Integer distance metrics truncate toward zero."""

    def test_root_manhattan(self):
        # sqrt(3 + 4) = 2.64...
        assert root_manhattan_distance(_node("a"), _node("b", x=3, y=4)) == 2

    def test_root_manhattan_exact_square(self):
        assert root_manhattan_distance(_node("a"), _node("b", x=0, y=4)) == 2

    def test_root_manhattan_is_symmetric(self):
        a = _node("a", x=-2, y=5)
        b = _node("b", x=7, y=-1)
        assert root_manhattan_distance(a, b) == root_manhattan_distance(b, a) == 3

    def test_euclidean(self):
        assert euclidean_distance(_node("a"), _node("b", x=3, y=4)) == 5
        assert euclidean_distance(_node("a"), _node("b", x=1, y=1)) == 1

    def test_manhattan(self):
        assert manhattan_distance(_node("a"), _node("b", x=3, y=-4)) == 7

    def test_same_point_is_zero(self):
        a = _node("a", x=5, y=5)
        assert root_manhattan_distance(a, a) == 0
        assert euclidean_distance(a, a) == 0
