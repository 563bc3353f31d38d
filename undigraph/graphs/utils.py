"""
Utility functions for graph algorithms.

Provides helpers for node indexing, edge weight totals, and a dense weight
matrix view used to cross-check results.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Tuple

import numpy as np

if TYPE_CHECKING:
    from .core import Edge, Graph


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are sorted by string representation for deterministic ordering.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).
        The list provides the node ordering used for indexing.

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    sorted_nodes = sorted(set(nodes), key=lambda x: str(x))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def total_weight(edges: Iterable["Edge"]) -> float:
    """
    Return the summed weight of ``edges``.

    Uses ``math.fsum`` so the total does not depend on iteration order,
    which matters when comparing sets of edges.
    """
    return math.fsum(edge.weight for edge in edges)


def weight_matrix(graph: "Graph") -> Tuple[np.ndarray, List[Hashable]]:
    """
    Build the dense symmetric weight matrix of ``graph``.

    Entry ``[i, j]`` is the weight of the lightest edge between vertices
    ``i`` and ``j``, ``inf`` where no edge exists, and 0 on the diagonal.
    Self-loops never shorten a walk and are ignored.

    Args:
        graph: Graph instance.

    Returns:
        Tuple of (matrix of shape (n, n), index_to_node list) where the
        ordering comes from :func:`node_index_map`.

    Example:
        >>> G = Graph(["A", "B"], [WeightedEdge("A", "B", 2.0)])
        >>> W, order = weight_matrix(G)
        >>> W[0, 1]
        2.0
    """
    node_to_index, index_to_node = node_index_map(graph.vertices())
    n = len(index_to_node)

    W = np.full((n, n), np.inf)
    np.fill_diagonal(W, 0.0)

    for edge in graph.edges():
        i = node_to_index[edge.vertex1]
        j = node_to_index[edge.vertex2]
        if i == j:
            continue
        w = min(W[i, j], float(edge.weight))
        W[i, j] = w
        W[j, i] = w

    return W, index_to_node
