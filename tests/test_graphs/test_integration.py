"""Integration tests for the graphs package within undigraph."""

from concurrent.futures import ThreadPoolExecutor

from undigraph.graphs import total_weight


def test_graphs_import_from_main():
    """Test that graph types can be imported from the main package."""
    from undigraph import Graph, NoPathExistsError, WeightedEdge, dijkstra_path, kruskal_mst

    assert Graph is not None
    assert WeightedEdge is not None
    assert NoPathExistsError is not None
    assert dijkstra_path is not None
    assert kruskal_mst is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import undigraph

    graph_exports = {
        "Edge",
        "Graph",
        "WeightedEdge",
        "FrontierRecord",
        "NoPathExistsError",
        "kruskal_mst",
        "dijkstra_path",
        "node_index_map",
        "total_weight",
        "weight_matrix",
        "DisjointSet",
        "MinPriorityQueue",
        "IncidenceIndex",
    }

    assert graph_exports.issubset(set(undigraph.__all__)), "Graph exports missing from __all__"


def test_concurrent_queries_share_one_graph(random_graph):
    """Test that one graph answers concurrent queries consistently."""
    G = random_graph(60, 120)
    pairs = [(s, e) for s in range(0, 60, 7) for e in range(0, 60, 5)]

    sequential = {pair: total_weight(G.shortest_path(*pair)) for pair in pairs}
    mst_weight = total_weight(G.minimum_spanning_tree())

    def query(pair):
        return pair, total_weight(G.shortest_path(*pair))

    with ThreadPoolExecutor(max_workers=4) as pool:
        concurrent = dict(pool.map(query, pairs))
        mst_weights = list(pool.map(lambda _: total_weight(G.minimum_spanning_tree()), range(8)))

    assert concurrent == sequential
    assert all(w == mst_weight for w in mst_weights)
