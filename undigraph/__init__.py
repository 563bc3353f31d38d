"""undigraph - minimum spanning trees and shortest paths over undirected weighted graphs."""

__version__ = "0.1.0"

# Containers
from .containers import DisjointSet, IncidenceIndex, MinPriorityQueue

# Diagnostics
from .diagnostics import (
    assert_connected_chain,
    assert_forest,
    debug_context,
    is_connected_chain,
    is_debug_enabled,
    is_forest,
    set_debug_enabled,
)

# Graphs
from .graphs import (
    Edge,
    FrontierRecord,
    Graph,
    NoPathExistsError,
    WeightedEdge,
    dijkstra_path,
    kruskal_mst,
    node_index_map,
    total_weight,
    weight_matrix,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Containers
    "DisjointSet",
    "MinPriorityQueue",
    "IncidenceIndex",
    # Diagnostics
    "is_forest",
    "assert_forest",
    "is_connected_chain",
    "assert_connected_chain",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Graphs
    "Edge",
    "Graph",
    "WeightedEdge",
    "FrontierRecord",
    "NoPathExistsError",
    "kruskal_mst",
    "dijkstra_path",
    "node_index_map",
    "total_weight",
    "weight_matrix",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
