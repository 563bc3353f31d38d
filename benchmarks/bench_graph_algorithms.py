"""Benchmark minimum spanning tree and shortest path on random graphs."""

import time
from typing import Dict

import numpy as np

from undigraph import Graph, WeightedEdge


def random_connected_graph(n_vertices: int, n_edges: int, seed: int = 0) -> Graph:
    """Random connected graph: a spanning path plus uniformly random edges."""
    rng = np.random.default_rng(seed)
    order = rng.permutation(n_vertices)
    edges = [
        WeightedEdge(int(u), int(v), float(w))
        for u, v, w in zip(order[:-1], order[1:], rng.random(n_vertices - 1))
    ]

    extra = max(n_edges - len(edges), 0)
    endpoints = rng.integers(0, n_vertices, size=(extra, 2))
    weights = rng.random(extra)
    edges.extend(WeightedEdge(int(u), int(v), float(w)) for (u, v), w in zip(endpoints, weights))

    return Graph(range(n_vertices), edges)


def benchmark_graph_algorithms(
    n_vertices: int,
    n_edges: int,
    n_queries: int = 20,
) -> Dict[str, float]:
    """Benchmark construction, MST and shortest path.

    Args:
        n_vertices: Number of vertices.
        n_edges: Number of edges (at least n_vertices - 1 are generated).
        n_queries: Number of random shortest-path queries.

    Returns:
        Dictionary with timing results.
    """
    start = time.perf_counter()
    graph = random_connected_graph(n_vertices, n_edges)
    build_time = time.perf_counter() - start

    start = time.perf_counter()
    tree = graph.minimum_spanning_tree()
    mst_time = time.perf_counter() - start
    assert len(tree) == n_vertices - 1

    rng = np.random.default_rng(1)
    pairs = rng.integers(0, n_vertices, size=(n_queries, 2))

    start = time.perf_counter()
    for s, e in pairs:
        graph.shortest_path(int(s), int(e))
    path_time = time.perf_counter() - start

    return {
        "n_vertices": n_vertices,
        "n_edges": graph.num_edges(),
        "build_time_sec": build_time,
        "mst_time_sec": mst_time,
        "time_per_path_sec": path_time / n_queries,
    }


if __name__ == "__main__":
    print("Benchmarking graph algorithms...")

    for n_vertices, n_edges in [(1_000, 5_000), (10_000, 50_000), (50_000, 250_000)]:
        results = benchmark_graph_algorithms(n_vertices, n_edges)
        print(f"Graph ({n_vertices} vertices, {results['n_edges']} edges):")
        print(f"  Build: {results['build_time_sec']*1e3:.1f} ms")
        print(f"  MST: {results['mst_time_sec']*1e3:.1f} ms")
        print(f"  Shortest path: {results['time_per_path_sec']*1e3:.1f} ms/query")
