"""
Container building blocks for the graph algorithms.

- DisjointSet: strict union-find with integer set ids
- MinPriorityQueue: binary min-heap tolerating duplicate entries
- IncidenceIndex: hash-keyed vertex -> incident-edge store
"""

from .disjoint_set import DisjointSet
from .incidence import IncidenceIndex
from .priority_queue import MinPriorityQueue

__all__ = [
    "DisjointSet",
    "MinPriorityQueue",
    "IncidenceIndex",
]
