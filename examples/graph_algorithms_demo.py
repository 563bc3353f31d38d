"""
Example: minimum spanning tree and shortest path on a small road network

Builds an undirected weighted graph of towns (with a parallel road, a
self-loop and an unreachable island), then prints its minimum spanning tree
and a few shortest routes.
"""

from undigraph import Graph, NoPathExistsError, WeightedEdge, debug_context, total_weight


def build_network() -> Graph:
    towns = ["Ashford", "Brook", "Calder", "Dunmore", "Elm", "Fenwick", "Isle"]
    roads = [
        WeightedEdge("Ashford", "Brook", 4.0),
        WeightedEdge("Ashford", "Calder", 2.0),
        WeightedEdge("Brook", "Calder", 1.0),
        WeightedEdge("Brook", "Dunmore", 5.0),
        WeightedEdge("Calder", "Dunmore", 8.0),
        WeightedEdge("Calder", "Elm", 10.0),
        WeightedEdge("Dunmore", "Elm", 2.0),
        WeightedEdge("Dunmore", "Fenwick", 6.0),
        WeightedEdge("Elm", "Fenwick", 2.0),
        # Old toll road running alongside the bypass
        WeightedEdge("Elm", "Fenwick", 3.5),
        # Ring road around Brook
        WeightedEdge("Brook", "Brook", 1.5),
    ]
    return Graph(towns, roads)


def format_edges(edges) -> str:
    return ", ".join(f"{e.vertex1}-{e.vertex2} ({e.weight:g})" for e in edges)


def example_minimum_spanning_tree(graph: Graph) -> None:
    print("=" * 60)
    print("Minimum spanning tree (Kruskal)")
    print("=" * 60)

    # Drop the island so the precondition (connected graph) holds
    mainland = Graph([v for v in graph.vertices() if v != "Isle"], graph.edges())
    tree = sorted(mainland.minimum_spanning_tree(), key=lambda e: (e.weight, e.vertex1))

    print(f"Edges ({len(tree)}): {format_edges(tree)}")
    print(f"Total weight: {total_weight(tree):g}")


def example_shortest_paths(graph: Graph) -> None:
    print("=" * 60)
    print("Shortest paths (Dijkstra)")
    print("=" * 60)

    for start, end in [("Ashford", "Fenwick"), ("Fenwick", "Brook"), ("Elm", "Elm"), ("Ashford", "Isle")]:
        try:
            path = graph.shortest_path(start, end)
        except NoPathExistsError:
            print(f"{start} -> {end}: no path")
            continue
        print(f"{start} -> {end}: [{format_edges(path)}] total {total_weight(path):g}")


def main() -> None:
    graph = build_network()
    print(f"Road network: {graph.num_vertices()} towns, {graph.num_edges()} roads\n")

    with debug_context(True):
        example_minimum_spanning_tree(graph)
        print()
        example_shortest_paths(graph)


if __name__ == "__main__":
    main()
