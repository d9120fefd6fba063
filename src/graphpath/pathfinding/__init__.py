"""Shortest-path algorithms over a graphpath Graph."""

from .dijkstra import ShortestPathResult, compute_distances, compute_shortest_paths
from .k_shortest_paths import top_k_shortest_paths
from .reconstruct import extract_path

__all__ = [
    "ShortestPathResult",
    "compute_distances",
    "compute_shortest_paths",
    "extract_path",
    "top_k_shortest_paths",
]
