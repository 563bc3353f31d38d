"""
Graph algorithms package for undigraph.

This package provides:
- The immutable undirected Graph and the Edge capability protocol
- Minimum spanning tree (Kruskal)
- Single-pair shortest path (Dijkstra with lazy deletion)
- Utilities for weight totals and dense weight matrices
"""

from .core import Edge, Graph, WeightedEdge
from .mst import kruskal_mst
from .shortest import FrontierRecord, NoPathExistsError, dijkstra_path
from .utils import node_index_map, total_weight, weight_matrix

__all__ = [
    "Edge",
    "Graph",
    "WeightedEdge",
    "kruskal_mst",
    "dijkstra_path",
    "FrontierRecord",
    "NoPathExistsError",
    "node_index_map",
    "total_weight",
    "weight_matrix",
]

# Example usage:
# from undigraph.graphs import Graph, WeightedEdge
#
# G = Graph(["A", "B", "C"], [WeightedEdge("A", "B", 1.0),
#                             WeightedEdge("B", "C", 2.0),
#                             WeightedEdge("A", "C", 4.0)])
# G.minimum_spanning_tree()   # {A-B (1.0), B-C (2.0)}
# G.shortest_path("A", "C")   # [A-B (1.0), B-C (2.0)]
