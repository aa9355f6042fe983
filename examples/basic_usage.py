"""Basic usage example for graphlab-search."""

import sys
import tempfile
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from graphlab_search import (
    KuzuGraphStore,
    RelaxationPolicy,
    SearchGraph,
    SearchKind,
    SearchRecorder,
    SearchWorker,
    run_search,
)


def build_graph() -> SearchGraph:
    graph = SearchGraph("demo")
    for key, x, y in [("S", 0, 0), ("P1", 3, 0), ("P2", 0, 4), ("T", 3, 4), ("X", 9, 9)]:
        graph.add_node(key, x, y)
    for source, destination in [("S", "P1"), ("S", "P2"), ("P1", "T"), ("P2", "T"), ("T", "X")]:
        graph.add_edge(source, destination)
    graph.set_start("S")
    graph.set_target("T")
    return graph


def main():
    print("=" * 60)
    print("graphlab-search - Basic Usage Example")
    print("=" * 60)

    graph = build_graph()

    # 1. Run every strategy with a recording observer
    print("\n1. Running all four strategies...")
    for kind in SearchKind:
        recorder = SearchRecorder()
        result = run_search(graph, kind, observer=recorder, stop_at_target=True)
        print(
            f"   {kind.value:6s} {result.outcome.value:15s} "
            f"visited={recorder.visited_keys} cost={result.target_cost}"
        )

    # 2. Reconstruct the path found by A*
    print("\n2. Shortest path after A* (improve-only relaxation)...")
    run_search(graph, SearchKind.ASTAR, relaxation=RelaxationPolicy.IMPROVE_ONLY)
    print("   " + " -> ".join(node.key for node in graph.shortest_path()))

    # 3. Background worker with pacing
    print("\n3. Background worker...")
    worker = SearchWorker(graph, SearchKind.BFS, step_delay=0.05)
    worker.start()
    worker.join(timeout=5)
    print(f"   Outcome: {worker.result.outcome.value}")
    print(f"   Edges: {worker.recorder.edge_keys}")

    # 4. Persist and reload
    print("\n4. Saving to Kuzu...")
    with tempfile.TemporaryDirectory() as tmp:
        with KuzuGraphStore(Path(tmp) / "graphs") as store:
            store.save_graph(graph)
            loaded = store.load_graph("demo")
            print(f"   Stored graphs: {store.list_graphs()}")
            print(f"   Reloaded {len(loaded)} nodes, {len(loaded.edges)} edges")

    print("\n" + "=" * 60)
    print("Example completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
