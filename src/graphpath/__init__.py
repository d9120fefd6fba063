"""Single-source shortest paths over weighted graphs."""

from .errors import (
    DuplicateNodeError,
    GraphError,
    NoPathError,
    NonPositiveWeightError,
    SelfLoopError,
    UnknownNodeError,
    UnknownSourceError,
    UnreachableDestinationError,
)
from .graph import Connection, Graph, Node, new_graph
from .path_metrics import path_weight, summarize_path
from .pathfinding import (
    ShortestPathResult,
    compute_distances,
    compute_shortest_paths,
    extract_path,
    top_k_shortest_paths,
)

__all__ = [
    "Connection",
    "DuplicateNodeError",
    "Graph",
    "GraphError",
    "NoPathError",
    "Node",
    "NonPositiveWeightError",
    "SelfLoopError",
    "ShortestPathResult",
    "UnknownNodeError",
    "UnknownSourceError",
    "UnreachableDestinationError",
    "compute_distances",
    "compute_shortest_paths",
    "extract_path",
    "new_graph",
    "path_weight",
    "summarize_path",
    "top_k_shortest_paths",
]
