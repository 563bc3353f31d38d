"""
Minimum spanning tree: Kruskal's algorithm.

Edges are drawn from a min-heap in weight order; a disjoint-set forest over
the vertices rejects every edge that would close a cycle.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Set

from ..containers import DisjointSet, MinPriorityQueue
from ..diagnostics import assert_forest, is_debug_enabled
from ..logging import get_logger

if TYPE_CHECKING:
    from .core import Edge, Graph

logger = get_logger(__name__)


def kruskal_mst(graph: "Graph") -> Set["Edge"]:
    """
    Kruskal's algorithm for minimum spanning tree.

    Precondition: the graph is connected. On a disconnected graph the heap
    runs dry before ``|V| - 1`` edges are accepted and the minimum spanning
    forest built so far is returned, with a warning logged.

    Args:
        graph: Graph whose edges are ordered by weight via ``<``.

    Returns:
        Set of edges forming a minimum spanning tree. Ties in weight may
        yield different, equally minimal trees.

    Complexity: O(E log E) for the heap, O(E alpha(V)) for union-find.

    Example:
        >>> G = Graph(["A", "B", "C"], [WeightedEdge("A", "B", 1.0),
        ...                             WeightedEdge("B", "C", 2.0),
        ...                             WeightedEdge("A", "C", 4.0)])
        >>> sorted(e.weight for e in kruskal_mst(G))
        [1.0, 2.0]
    """
    forest = DisjointSet()
    for vertex in graph.vertices():
        # Duplicated vertices are registered once
        if vertex not in forest:
            forest.make_set(vertex)

    edge_heap: MinPriorityQueue["Edge"] = MinPriorityQueue()
    for edge in graph.edges():
        edge_heap.insert(edge)

    target = len(forest) - 1
    tree: Set["Edge"] = set()

    while len(tree) < target and not edge_heap.is_empty():
        edge = edge_heap.remove_min()
        if forest.find_set(edge.vertex1) != forest.find_set(edge.vertex2):
            forest.union(edge.vertex1, edge.vertex2)
            tree.add(edge)

    if len(tree) < target:
        logger.warning(
            "Graph is disconnected: returning spanning forest with %d edges across %d components",
            len(tree),
            forest.num_sets(),
        )
    else:
        logger.debug("Minimum spanning tree has %d edges", len(tree))

    if is_debug_enabled():
        assert_forest(graph.vertices(), tree)

    return tree
