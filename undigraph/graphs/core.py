"""
Core graph data structures.

Provides the Edge capability protocol, a WeightedEdge reference edge type,
and the immutable undirected Graph. Graphs may contain self-loops, parallel
edges and disconnected components. Construction is O(V + E).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterable, List, Protocol, Set, Tuple, runtime_checkable

from ..containers import IncidenceIndex
from ..logging import get_logger
from .mst import kruskal_mst
from .shortest import dijkstra_path

logger = get_logger(__name__)


@runtime_checkable
class Edge(Protocol):
    """
    Capabilities the graph algorithms require from an edge.

    An edge exposes its two endpoints, a non-negative weight, a way to step
    across it from one endpoint, and a ``<`` ordering by weight used by the
    heap in Kruskal's algorithm. Any class with these members qualifies; no
    subclassing is needed.
    """

    vertex1: Any
    vertex2: Any
    weight: float

    def other_endpoint(self, vertex: Any) -> Any:
        ...

    def __lt__(self, other: Any) -> bool:
        ...


@dataclass(frozen=True)
class WeightedEdge:
    """
    Undirected weighted edge between ``vertex1`` and ``vertex2``.

    Edges are equal when their endpoints and weight are equal (in the given
    orientation), and ordered by weight alone.

    Attributes:
        vertex1: First endpoint.
        vertex2: Second endpoint.
        weight: Edge weight (default 1.0).

    Example:
        >>> e = WeightedEdge("A", "B", 2.0)
        >>> e.other_endpoint("A")
        'B'
    """

    vertex1: Hashable
    vertex2: Hashable
    weight: float = 1.0

    def other_endpoint(self, vertex: Hashable) -> Hashable:
        """
        Return the endpoint opposite ``vertex``.

        For a self-loop this is ``vertex`` itself.

        Raises:
            ValueError: If ``vertex`` is not an endpoint of this edge.
        """
        if vertex == self.vertex1:
            return self.vertex2
        if vertex == self.vertex2:
            return self.vertex1
        raise ValueError(f"Vertex {vertex!r} is not an endpoint of {self!r}")

    def is_self_loop(self) -> bool:
        return self.vertex1 == self.vertex2

    def __lt__(self, other: "WeightedEdge") -> bool:
        return self.weight < other.weight

    def __le__(self, other: "WeightedEdge") -> bool:
        return self.weight <= other.weight

    def __gt__(self, other: "WeightedEdge") -> bool:
        return self.weight > other.weight

    def __ge__(self, other: "WeightedEdge") -> bool:
        return self.weight >= other.weight


class Graph:
    """
    Immutable undirected weighted graph.

    Built once from a vertex collection and an edge collection, either of
    which may be list-shaped or set-shaped. Duplicated vertices, parallel
    edges and self-loops are all accepted. Each query allocates its own
    working state, so one graph may serve concurrent read-only queries.

    Attributes:
        incidence: Vertex -> incident-edge index built at construction.

    Complexity:
        - construction: O(V + E)
        - num_vertices, num_edges: O(1)
        - incident_edges: O(deg(v))
        - minimum_spanning_tree: O(E log E)
        - shortest_path: O((V + E) log V)
    """

    def __init__(self, vertices: Iterable[Hashable], edges: Iterable[Edge]):
        """
        Build a graph from ``vertices`` and ``edges``.

        Args:
            vertices: Hashable vertices.
            edges: Edges whose endpoints are all in ``vertices``.

        Raises:
            ValueError: If an edge has a negative or NaN weight.
            ValueError: If an edge touches a vertex missing from ``vertices``.
        """
        self._vertices: Tuple[Hashable, ...] = tuple(vertices)
        self._edges: Tuple[Edge, ...] = tuple(edges)
        self._vertex_set: Set[Hashable] = set(self._vertices)

        incidence: IncidenceIndex[Edge] = IncidenceIndex()
        for edge in self._edges:
            # Also rejects NaN, which compares False both ways
            if not edge.weight >= 0.0:
                raise ValueError(f"Edge {edge!r} has negative or NaN weight {edge.weight}")
            if edge.vertex1 not in self._vertex_set or edge.vertex2 not in self._vertex_set:
                raise ValueError(f"Edge {edge!r} connects a vertex not present in the graph")

            incidence.add(edge.vertex1, edge)
            if edge.vertex2 != edge.vertex1:
                incidence.add(edge.vertex2, edge)

        self.incidence = incidence
        logger.debug(
            "Built graph with %d vertices and %d edges", len(self._vertices), len(self._edges)
        )

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._vertex_set

    def __repr__(self) -> str:
        return f"Graph(num_vertices={self.num_vertices()}, num_edges={self.num_edges()})"

    def num_vertices(self) -> int:
        """Return the number of vertices the graph was built with."""
        return len(self._vertices)

    def num_edges(self) -> int:
        """Return the number of edges the graph was built with."""
        return len(self._edges)

    def vertices(self) -> Tuple[Hashable, ...]:
        return self._vertices

    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def incident_edges(self, vertex: Hashable) -> Tuple[Edge, ...]:
        """
        Return the edges touching ``vertex``.

        Raises:
            KeyError: If ``vertex`` is not in graph.
        """
        if vertex not in self._vertex_set:
            raise KeyError(f"Vertex {vertex} not in graph")
        return self.incidence.incident(vertex)

    def minimum_spanning_tree(self) -> Set[Edge]:
        """
        Return the edges of a minimum spanning tree.

        If several MSTs exist any one of them is returned. The graph should be
        connected; otherwise a minimum spanning forest is returned.
        """
        return kruskal_mst(self)

    def shortest_path(self, start: Hashable, end: Hashable) -> List[Edge]:
        """
        Return the edges of a minimum-weight path from ``start`` to ``end``.

        The first edge leaves ``start`` and the last edge reaches ``end``;
        the list is empty when ``start == end``.

        Raises:
            ValueError: If ``start`` or ``end`` is not in graph.
            NoPathExistsError: If ``end`` is unreachable from ``start``.
        """
        return dijkstra_path(self, start, end)
