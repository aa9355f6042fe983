"""KuzuGraphStore -- Kuzu-backed persistence for search graphs.

Stores node coordinates, start/target flags and edge order so a driver
can hand the traversal engine a previously saved graph.  Search state
(status, path cost, parent) is never stored.

Public API:
    KuzuGraphStore: Save, load, list and delete ``SearchGraph`` objects.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any

import kuzu

from ..exceptions import GraphNotFoundError
from .model import SearchGraph

logger = logging.getLogger(__name__)

NODE_TABLE = "SearchNode"
EDGE_TABLE = "LINKS_TO"


class KuzuGraphStore:
    """Kuzu graph database holding any number of named search graphs.

    Every node row carries the ``graph_id`` it belongs to and a random
    ``uid`` primary key; rows are matched on ``(graph_id, node_key)``, so
    any pair of graph id and node key strings can be stored.  All Cypher
    queries use parameterised bindings.

    Args:
        db_path: Filesystem path for the Kuzu database directory.
        store_id: Optional human-readable identifier; auto-generated if None.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(self, db_path: Path | str, store_id: str | None = None) -> None:
        self._db_path = Path(db_path)
        self._store_id = store_id or f"kuzu-{uuid.uuid4().hex[:8]}"
        self._db = kuzu.Database(str(self._db_path))
        self._conn = kuzu.Connection(self._db)
        self._ensure_schema()

    @property
    def store_id(self) -> str:
        return self._store_id

    def close(self) -> None:
        """Release Kuzu resources."""
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    def __enter__(self) -> KuzuGraphStore:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    # ── schema management ─────────────────────────────────────

    def _ensure_schema(self) -> None:
        """Create the node and rel tables if they do not exist yet."""
        self._conn.execute(
            f"CREATE NODE TABLE IF NOT EXISTS {NODE_TABLE}("
            "uid STRING, graph_id STRING, node_key STRING, ordinal INT64, "
            "x INT64, y INT64, is_start BOOLEAN, is_target BOOLEAN, "
            "PRIMARY KEY(uid))"
        )
        self._conn.execute(
            f"CREATE REL TABLE IF NOT EXISTS {EDGE_TABLE}"
            f"(FROM {NODE_TABLE} TO {NODE_TABLE}, ordinal INT64)"
        )

    # ── graph operations ──────────────────────────────────────

    def save_graph(self, graph: SearchGraph, graph_id: str | None = None) -> str:
        """Store *graph*, replacing any graph already saved under the id.

        The replace runs in one transaction; if any write fails the
        previously stored graph is left untouched.

        Args:
            graph: Graph to persist.
            graph_id: Storage id; defaults to ``graph.graph_id``.

        Returns:
            The id the graph was stored under.
        """
        gid = graph_id or graph.graph_id

        self._conn.execute("BEGIN TRANSACTION")
        try:
            self._delete_rows(gid)
            self._insert_nodes(gid, graph)
            edge_count = self._insert_edges(gid, graph)
            self._conn.execute("COMMIT")
        except Exception:
            self._conn.execute("ROLLBACK")
            logger.warning("Save of graph %s to %s rolled back", gid, self._store_id)
            raise

        logger.debug(
            "Saved graph %s to %s (%d nodes, %d edges)",
            gid, self._store_id, len(graph), edge_count,
        )
        return gid

    def load_graph(self, graph_id: str) -> SearchGraph:
        """Rebuild a stored graph with fresh search state.

        Raises:
            GraphNotFoundError: If nothing is stored under *graph_id*.
        """
        graph = SearchGraph(graph_id=graph_id)

        result = self._conn.execute(
            f"MATCH (n:{NODE_TABLE}) WHERE n.graph_id = $gid "
            "RETURN n.node_key, n.x, n.y, n.is_start, n.is_target "
            "ORDER BY n.ordinal",
            {"gid": graph_id},
        )
        while result.has_next():
            key, x, y, is_start, is_target = result.get_next()
            graph.add_node(
                key, int(x), int(y),
                is_start=bool(is_start), is_target=bool(is_target),
            )

        if len(graph) == 0:
            raise GraphNotFoundError(f"Graph not found: {graph_id}")

        result = self._conn.execute(
            f"MATCH (a:{NODE_TABLE})-[r:{EDGE_TABLE}]->(b:{NODE_TABLE}) "
            "WHERE a.graph_id = $gid "
            "RETURN a.node_key, b.node_key ORDER BY a.ordinal, r.ordinal",
            {"gid": graph_id},
        )
        while result.has_next():
            source_key, destination_key = result.get_next()
            graph.add_edge(source_key, destination_key)

        logger.debug("Loaded graph %s from %s (%d nodes)", graph_id, self._store_id, len(graph))
        return graph

    def list_graphs(self) -> list[str]:
        """Return the ids of all stored graphs, sorted."""
        result = self._conn.execute(
            f"MATCH (n:{NODE_TABLE}) RETURN DISTINCT n.graph_id AS gid ORDER BY gid"
        )
        ids: list[str] = []
        while result.has_next():
            ids.append(str(result.get_next()[0]))
        return ids

    def delete_graph(self, graph_id: str) -> bool:
        """Delete a stored graph. Returns True if it existed."""
        if graph_id not in self.list_graphs():
            return False
        self._delete_rows(graph_id)
        logger.debug("Deleted graph %s from %s", graph_id, self._store_id)
        return True

    # ── private helpers ───────────────────────────────────────

    def _delete_rows(self, graph_id: str) -> None:
        params: dict[str, Any] = {"gid": graph_id}
        self._conn.execute(
            f"MATCH (n:{NODE_TABLE}) WHERE n.graph_id = $gid DETACH DELETE n",
            params,
        )

    def _insert_nodes(self, graph_id: str, graph: SearchGraph) -> None:
        for position, node in enumerate(graph.nodes):
            self._conn.execute(
                f"CREATE (:{NODE_TABLE} {{uid: $uid, graph_id: $gid, node_key: $nkey, "
                "ordinal: $pos, x: $x, y: $y, is_start: $is_start, "
                "is_target: $is_target})",
                {
                    "uid": uuid.uuid4().hex,
                    "gid": graph_id,
                    "nkey": node.key,
                    "pos": position,
                    "x": int(node.x),
                    "y": int(node.y),
                    "is_start": node.is_start,
                    "is_target": node.is_target,
                },
            )

    def _insert_edges(self, graph_id: str, graph: SearchGraph) -> int:
        edge_count = 0
        for node in graph.nodes:
            for position, edge in enumerate(node.edges):
                self._conn.execute(
                    f"MATCH (a:{NODE_TABLE}), (b:{NODE_TABLE}) "
                    "WHERE a.graph_id = $gid AND a.node_key = $src "
                    "AND b.graph_id = $gid AND b.node_key = $dst "
                    f"CREATE (a)-[:{EDGE_TABLE} {{ordinal: $pos}}]->(b)",
                    {
                        "gid": graph_id,
                        "src": edge.source_key,
                        "dst": edge.destination_key,
                        "pos": position,
                    },
                )
                edge_count += 1
        return edge_count


__all__ = ["KuzuGraphStore"]
