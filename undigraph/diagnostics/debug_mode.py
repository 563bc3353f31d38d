"""Debug mode for undigraph's graph algorithms.

When debug mode is on, each query re-checks its own result before handing it
back:

- ``kruskal_mst`` runs :func:`assert_forest` over the accepted edges, so an
  edge that closes a cycle raises ``ValueError``.
- ``dijkstra_path`` runs :func:`assert_connected_chain` over the rebuilt path,
  so a predecessor chain that skips a vertex or ends elsewhere raises
  ``ValueError``.

The checks cost one extra pass over the result. The flag starts from the
UNDIGRAPH_DEBUG environment variable and is process-wide.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "UNDIGRAPH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


def is_debug_enabled() -> bool:
    """
    Return whether the MST and shortest-path self-checks are active.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn the graph self-checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        Whether queries should verify their results.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch the graph self-checks, restoring the prior state on exit.

    The previous setting is restored even when a query inside the block
    raises, e.g. ``NoPathExistsError``.

    Parameters
    ----------
    enabled:
        Whether queries inside the block verify their results.

    Example
    -------
    >>> with debug_context(True):
    ...     tree = graph.minimum_spanning_tree()  # checked to be a forest
    ...     path = graph.shortest_path("A", "C")  # checked to be a chain A..C
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
