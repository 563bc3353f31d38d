"""Diagnostics and debugging utilities for undigraph."""

from .core import (
    assert_connected_chain,
    assert_forest,
    is_connected_chain,
    is_forest,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_forest",
    "assert_forest",
    "is_connected_chain",
    "assert_connected_chain",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
