"""Tests for KuzuGraphStore persistence of search graphs.

All tests use real Kuzu databases via tmp_path.
"""

from __future__ import annotations

import pytest

from graphlab_search import (
    GraphNotFoundError,
    KuzuGraphStore,
    NodeStatus,
    SearchGraph,
    SearchRecorder,
    bfs,
    dfs,
    ucs,
)


class StoreFailure(Exception):
    pass


# ── fixtures ──────────────────────────────────────────────────


@pytest.fixture
def store(db_path):
    """Create a fresh KuzuGraphStore for each test."""
    s = KuzuGraphStore(db_path=db_path, store_id="test-store")
    yield s
    s.close()


class TestRoundTrip:
    """Saved graphs load back with the same topology and flags."""

    def test_nodes_and_flags(self, store, diamond_graph):
        store.save_graph(diamond_graph)
        loaded = store.load_graph("diamond")

        assert loaded.graph_id == "diamond"
        assert [(n.key, n.x, n.y) for n in loaded] == [
            ("S", 0, 0), ("P1", 3, 0), ("P2", 0, 4), ("T", 3, 4),
        ]
        assert loaded.start_node.key == "S"
        assert loaded.target_node.key == "T"

    def test_edge_order_preserved(self, store, layered_graph):
        layered_graph.node("A").edges.reverse()
        store.save_graph(layered_graph)
        loaded = store.load_graph("layered")

        assert [e.destination_key for e in loaded.node("A").edges] == ["C", "B"]
        before, after = SearchRecorder(), SearchRecorder()
        dfs(layered_graph, on_visited_node=before.on_visited_node)
        dfs(loaded, on_visited_node=after.on_visited_node)
        assert before.visited_keys == after.visited_keys

    def test_search_results_match(self, store, grid_graph):
        store.save_graph(grid_graph)
        loaded = store.load_graph("grid")
        assert ucs(loaded) == ucs(grid_graph)

    def test_search_state_not_persisted(self, store, layered_graph):
        bfs(layered_graph)
        store.save_graph(layered_graph)
        loaded = store.load_graph("layered")
        assert all(n.status is NodeStatus.UNKNOWN for n in loaded)
        assert all(n.parent_key is None for n in loaded)

    def test_explicit_graph_id(self, store, layered_graph):
        assert store.save_graph(layered_graph, graph_id="copy") == "copy"
        assert store.load_graph("copy").graph_id == "copy"


class TestGraphManagement:
    """list / replace / delete."""

    def test_list_graphs(self, store, layered_graph, diamond_graph):
        assert store.list_graphs() == []
        store.save_graph(layered_graph)
        store.save_graph(diamond_graph)
        assert store.list_graphs() == ["diamond", "layered"]

    def test_save_replaces(self, store, layered_graph):
        store.save_graph(layered_graph)
        layered_graph.add_node("E", 5, 5)
        layered_graph.add_edge("D", "E")
        store.save_graph(layered_graph)

        loaded = store.load_graph("layered")
        assert len(loaded) == 5
        assert len(loaded.edges) == 5

    def test_graphs_are_independent(self, store, layered_graph):
        store.save_graph(layered_graph, graph_id="one")
        store.save_graph(layered_graph, graph_id="two")
        store.delete_graph("one")
        assert len(store.load_graph("two").edges) == 4

    def test_delete_graph(self, store, layered_graph):
        store.save_graph(layered_graph)
        assert store.delete_graph("layered") is True
        assert store.delete_graph("layered") is False
        assert store.list_graphs() == []

    def test_load_missing_raises(self, store):
        with pytest.raises(GraphNotFoundError):
            store.load_graph("nope")

    def test_separator_like_ids_do_not_collide(self, store):
        left = SearchGraph("a::b")
        left.add_node("c", 1, 1)
        right = SearchGraph("a")
        right.add_node("b::c", 2, 2)

        store.save_graph(left)
        store.save_graph(right)

        assert store.list_graphs() == ["a", "a::b"]
        assert [(n.key, n.x) for n in store.load_graph("a::b")] == [("c", 1)]
        assert [(n.key, n.x) for n in store.load_graph("a")] == [("b::c", 2)]

    def test_same_node_keys_in_two_graphs(self, store, layered_graph):
        other = SearchGraph("other")
        for key in "ABCD":
            other.add_node(key)
        other.add_edge("A", "D")

        store.save_graph(layered_graph)
        store.save_graph(other)

        assert len(store.load_graph("layered").edges) == 4
        edges = store.load_graph("other").edges
        assert [(e.source_key, e.destination_key) for e in edges] == [("A", "D")]


class TestAtomicSave:
    """A save that fails partway leaves the stored graph as it was."""

    @staticmethod
    def _break_edge_writes(store, monkeypatch):
        def broken(graph_id, graph):
            raise StoreFailure("edge write failed")

        monkeypatch.setattr(store, "_insert_edges", broken)

    def test_failed_replace_keeps_previous_graph(self, store, layered_graph, monkeypatch):
        store.save_graph(layered_graph)
        layered_graph.add_node("E", 5, 5)
        layered_graph.add_edge("D", "E")

        self._break_edge_writes(store, monkeypatch)
        with pytest.raises(StoreFailure):
            store.save_graph(layered_graph)
        monkeypatch.undo()

        loaded = store.load_graph("layered")
        assert [n.key for n in loaded] == ["A", "B", "C", "D"]
        assert len(loaded.edges) == 4

    def test_failed_first_save_stores_nothing(self, store, diamond_graph, monkeypatch):
        self._break_edge_writes(store, monkeypatch)
        with pytest.raises(StoreFailure):
            store.save_graph(diamond_graph)
        monkeypatch.undo()

        assert store.list_graphs() == []
        assert store.save_graph(diamond_graph) == "diamond"
        assert len(store.load_graph("diamond").edges) == 4


class TestLifecycle:
    """Construction, reopening, context manager."""

    def test_store_id(self, db_path):
        s = KuzuGraphStore(db_path=db_path)
        assert s.store_id.startswith("kuzu-")
        s.close()

    def test_reopen_keeps_graphs(self, db_path, diamond_graph):
        with KuzuGraphStore(db_path=db_path) as s:
            s.save_graph(diamond_graph)
        with KuzuGraphStore(db_path=db_path) as s:
            assert s.list_graphs() == ["diamond"]
            assert s.load_graph("diamond").target_node.key == "T"
