"""Core diagnostic functions for spanning trees and paths."""

from __future__ import annotations

from typing import Hashable, Iterable, Sequence

from ..containers import DisjointSet


def is_forest(vertices: Iterable[Hashable], edges: Iterable) -> bool:
    """
    Check whether ``edges`` form an acyclic subgraph over ``vertices``.

    Parameters
    ----------
    vertices:
        Vertices the edges may touch. Duplicates are ignored.
    edges:
        Objects exposing ``vertex1`` and ``vertex2``.

    Returns
    -------
    bool
        False if any edge closes a cycle (self-loops included) or touches a
        vertex outside ``vertices``.
    """
    forest = DisjointSet()
    for vertex in vertices:
        if vertex not in forest:
            forest.make_set(vertex)

    for edge in edges:
        if edge.vertex1 not in forest or edge.vertex2 not in forest:
            return False
        if forest.connected(edge.vertex1, edge.vertex2):
            return False
        forest.union(edge.vertex1, edge.vertex2)

    return True


def assert_forest(vertices: Iterable[Hashable], edges: Iterable) -> None:
    """
    Assert that ``edges`` form an acyclic subgraph over ``vertices``.

    Raises
    ------
    ValueError
        If the edges contain a cycle or an unknown endpoint.
    """
    edges = list(edges)
    if not is_forest(vertices, edges):
        raise ValueError(f"Edge set of size {len(edges)} is not a forest over the given vertices.")


def is_connected_chain(start: Hashable, end: Hashable, path: Sequence) -> bool:
    """
    Check whether ``path`` walks from ``start`` to ``end`` edge by edge.

    Each edge must touch the vertex reached so far, and no vertex may be
    visited twice. An empty path is a chain only when ``start == end``.

    Parameters
    ----------
    start:
        First vertex of the walk.
    end:
        Last vertex of the walk.
    path:
        Ordered edges exposing ``vertex1``, ``vertex2`` and
        ``other_endpoint``.

    Returns
    -------
    bool
        True if the edges form a simple path from ``start`` to ``end``.
    """
    current = start
    seen = {start}
    for edge in path:
        if current != edge.vertex1 and current != edge.vertex2:
            return False
        current = edge.other_endpoint(current)
        if current in seen:
            return False
        seen.add(current)
    return current == end


def assert_connected_chain(start: Hashable, end: Hashable, path: Sequence) -> None:
    """
    Assert that ``path`` is a simple chain of edges from ``start`` to ``end``.

    Raises
    ------
    ValueError
        If the edges do not connect ``start`` to ``end``.
    """
    if not is_connected_chain(start, end, path):
        raise ValueError(
            f"Path of {len(path)} edges does not connect {start!r} to {end!r}."
        )
