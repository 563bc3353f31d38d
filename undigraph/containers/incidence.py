"""
Vertex -> incident-edge index.

Hash-keyed adjacency store used by the graph. Incidence collections are
created lazily the first time a vertex is referenced and keep every edge
added to them, parallel edges included.
"""

from typing import Dict, Generic, Hashable, List, Tuple, TypeVar

E = TypeVar("E")


class IncidenceIndex(Generic[E]):
    """
    Mapping from vertex to the edges incident to it.

    Complexity:
        - add: O(1) amortized
        - incident: O(deg(v))
        - degree: O(1)
    """

    def __init__(self) -> None:
        self._edges: Dict[Hashable, List[E]] = {}

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def add(self, vertex: Hashable, edge: E) -> None:
        """
        Record ``edge`` as incident to ``vertex``.

        Args:
            vertex: Hashable vertex.
            edge: Edge touching ``vertex``.
        """
        if vertex not in self._edges:
            self._edges[vertex] = []
        self._edges[vertex].append(edge)

    def incident(self, vertex: Hashable) -> Tuple[E, ...]:
        """
        Return the edges incident to ``vertex``.

        A vertex that was never referenced has no incident edges.
        """
        return tuple(self._edges.get(vertex, ()))

    def degree(self, vertex: Hashable) -> int:
        """Return the number of incidence entries recorded for ``vertex``."""
        return len(self._edges.get(vertex, ()))

    def vertices(self) -> List[Hashable]:
        """Return the vertices referenced so far, in first-reference order."""
        return list(self._edges)
