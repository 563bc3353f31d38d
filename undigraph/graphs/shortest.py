"""
Single-pair shortest path: Dijkstra's algorithm with lazy deletion.

Each vertex gets one mutable frontier record. When a shorter distance is
found the record is updated in place and pushed again, so the heap may hold
stale entries for a vertex; those are skipped once the vertex has been
processed. The path is rebuilt by following each record's incoming edge
back to ``start``.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Set

from ..containers import MinPriorityQueue
from ..diagnostics import assert_connected_chain, is_debug_enabled
from ..logging import get_logger

if TYPE_CHECKING:
    from .core import Edge, Graph

logger = get_logger(__name__)


class NoPathExistsError(ValueError):
    """Raised when the end vertex is unreachable from the start vertex."""


@dataclass(eq=False)
class FrontierRecord:
    """
    Per-vertex working state of a shortest-path query.

    Attributes:
        vertex: Vertex this record tracks.
        distance: Best known distance from the start vertex.
        edge: Incoming edge that achieved ``distance`` (None until relaxed).
    """

    vertex: Hashable
    distance: float = math.inf
    edge: Optional[Any] = None

    def predecessor(self) -> Hashable:
        return self.edge.other_endpoint(self.vertex)

    def __lt__(self, other: "FrontierRecord") -> bool:
        return self.distance < other.distance


def _distance_snapshot(record: FrontierRecord) -> float:
    return record.distance


def dijkstra_path(graph: "Graph", start: Hashable, end: Hashable) -> List["Edge"]:
    """
    Dijkstra's algorithm for the shortest path between two vertices.

    Self-loops are never relaxed, so a record's incoming edge always leads
    to a different vertex and reconstruction cannot spin in place.

    Args:
        graph: Graph with non-negative edge weights.
        start: Start vertex.
        end: End vertex.

    Returns:
        Edges of a minimum-weight path, first edge incident to ``start``,
        last edge incident to ``end``. Empty if ``start == end``.

    Raises:
        ValueError: If ``start`` or ``end`` is not in graph.
        NoPathExistsError: If ``end`` is unreachable from ``start``.

    Complexity: O((V + E) log V) using binary heap priority queue.

    Example:
        >>> G = Graph(["A", "B", "C"], [WeightedEdge("A", "B", 1.0),
        ...                             WeightedEdge("B", "C", 2.0),
        ...                             WeightedEdge("A", "C", 4.0)])
        >>> [e.weight for e in dijkstra_path(G, "A", "C")]
        [1.0, 2.0]
    """
    if start not in graph:
        raise ValueError(f"Start vertex {start} not in graph")
    if end not in graph:
        raise ValueError(f"End vertex {end} not in graph")

    if start == end:
        return []

    records: Dict[Hashable, FrontierRecord] = {
        vertex: FrontierRecord(vertex) for vertex in graph.vertices()
    }
    records[start] = FrontierRecord(start, 0.0)

    processed: Set[Hashable] = set()
    # Priority is the record's distance at push time
    frontier: MinPriorityQueue[FrontierRecord] = MinPriorityQueue(key=_distance_snapshot)
    frontier.insert(records[start])

    while not frontier.is_empty():
        current = frontier.remove_min()
        if current.vertex in processed:
            continue

        for edge in graph.incidence.incident(current.vertex):
            other = edge.other_endpoint(current.vertex)
            if other == current.vertex or other in processed:
                continue

            neighbor = records[other]
            candidate = current.distance + edge.weight
            if candidate < neighbor.distance:
                neighbor.distance = candidate
                neighbor.edge = edge
                frontier.insert(neighbor)

        processed.add(current.vertex)

    path: List["Edge"] = []
    vertex = end
    while vertex != start:
        record = records[vertex]
        if record.edge is None:
            raise NoPathExistsError(f"No path exists from {start!r} to {end!r}")
        path.append(record.edge)
        vertex = record.predecessor()
    path.reverse()

    logger.debug(
        "Shortest path %r -> %r: %d edges, distance %s",
        start,
        end,
        len(path),
        records[end].distance,
    )

    if is_debug_enabled():
        assert_connected_chain(start, end, path)

    return path
