import numpy as np

from .errors import NoPathError, UnknownNodeError


def _check_nodes(graph, path):
    for name in path:
        if name not in graph:
            raise UnknownNodeError(name)


def _hop_weights(graph, path):
    weights = []
    for u, v in zip(path[:-1], path[1:]):
        candidates = [c.weight for c in graph.connections(u) if c.target == v]
        if not candidates:
            raise NoPathError(u, v, "no connection between consecutive nodes")
        weights.append(min(candidates))
    return weights


def path_weight(graph, path):
    """Sum of connection weights along ``path``, using the lightest parallel connection."""
    _check_nodes(graph, path)
    return float(sum(_hop_weights(graph, path)))


def summarize_path(graph, path):
    """
    Describe a path by its size and weight distribution.
    """
    _check_nodes(graph, path)
    if len(path) < 2:
        return {
            "path_length": len(path),
            "hops": 0,
            "total_weight": 0.0,
            "avg_weight": 0.0,
            "std_weight": 0.0,
        }

    weights = np.array(_hop_weights(graph, path))

    return {
        "path_length": len(path),
        "hops": len(weights),
        "total_weight": float(weights.sum()),
        "avg_weight": float(weights.mean()),
        "std_weight": round(float(np.std(weights)), 3),
    }
