"""Pytest configuration and fixtures for graphlab-search tests."""

import shutil

import pytest

from graphlab_search import SearchGraph


@pytest.fixture
def db_path(tmp_path):
    """Provide an isolated Kuzu database path, removed after the test."""
    storage_path = tmp_path / "graph_db"
    yield storage_path
    if storage_path.exists():
        shutil.rmtree(storage_path, ignore_errors=True)


@pytest.fixture
def layered_graph():
    """Three levels, edges listed left to right.

        A --> B --> D
        A --> C --> D

    A is the start node; no target is set.
    """
    graph = SearchGraph("layered")
    graph.add_node("A", 0, 0, is_start=True)
    graph.add_node("B", 1, 0)
    graph.add_node("C", 0, 1)
    graph.add_node("D", 1, 1)
    graph.add_edge("A", "B")
    graph.add_edge("A", "C")
    graph.add_edge("B", "D")
    graph.add_edge("C", "D")
    return graph


@pytest.fixture
def diamond_graph():
    """Four-node diamond on a 3x4 rectangle.

        S(0,0) --> P1(3,0) --> T(3,4)
        S(0,0) --> P2(0,4) --> T(3,4)
    """
    graph = SearchGraph("diamond")
    graph.add_node("S", 0, 0, is_start=True)
    graph.add_node("P1", 3, 0)
    graph.add_node("P2", 0, 4)
    graph.add_node("T", 3, 4, is_target=True)
    graph.add_edge("S", "P1")
    graph.add_edge("S", "P2")
    graph.add_edge("P1", "T")
    graph.add_edge("P2", "T")
    return graph


@pytest.fixture
def grid_graph():
    """4x4 grid with edges in both directions between orthogonal neighbours.

    Nodes are keyed "r,c"; "0,0" is the start and "3,3" the target.
    """
    size = 4
    graph = SearchGraph("grid")
    for r in range(size):
        for c in range(size):
            graph.add_node(f"{r},{c}", c * 10, r * 10)
    for r in range(size):
        for c in range(size):
            for dr, dc in ((0, 1), (1, 0), (0, -1), (-1, 0)):
                nr, nc = r + dr, c + dc
                if 0 <= nr < size and 0 <= nc < size:
                    graph.add_edge(f"{r},{c}", f"{nr},{nc}")
    graph.set_start("0,0")
    graph.set_target("3,3")
    return graph
