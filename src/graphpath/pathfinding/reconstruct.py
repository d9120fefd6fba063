import logging
import math

from ..errors import NoPathError, UnknownNodeError, UnknownSourceError, UnreachableDestinationError
from .dijkstra import compute_shortest_paths

logger = logging.getLogger(__name__)


def extract_path(graph, source, destination, result=None):
    """
    Ordered node names from ``source`` to ``destination``, both included.

    ``result`` must come from a run started at ``source``; when omitted a
    fresh run is made. The walk back along predecessors takes at most
    ``len(graph)`` steps, so inconsistent state raises ``NoPathError``
    instead of looping.
    """
    if source not in graph:
        raise UnknownSourceError(source)
    if destination not in graph:
        raise UnknownNodeError(destination)

    if result is None:
        result = compute_shortest_paths(graph, source)
    elif result.source != source:
        raise NoPathError(source, destination, f"distances were computed from '{result.source}'")

    if math.isinf(result.distances.get(destination, math.inf)):
        raise UnreachableDestinationError(source, destination)

    # reconstruct path
    path = [destination]
    node = destination
    for _ in range(len(graph)):
        if node == source:
            break
        node = result.predecessors.get(node)
        if node is None:
            raise NoPathError(source, destination, "predecessor chain is broken")
        path.append(node)
    else:
        if node != source:
            raise NoPathError(source, destination, "predecessor chain does not end at the source")
    path.reverse()

    logger.debug("Path %r -> %r: %s", source, destination, " -> ".join(map(str, path)))
    return path
