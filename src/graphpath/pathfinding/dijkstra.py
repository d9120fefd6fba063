import heapq
import logging
import math

from ..errors import UnknownSourceError

logger = logging.getLogger(__name__)


class ShortestPathResult:
    """
    Distances and predecessors from one Dijkstra run.

    The graph itself is never written to; everything a run discovers lives
    here, so several runs over the same graph do not interfere.
    """

    def __init__(self, source, distances, predecessors):
        self.source = source
        self.distances = distances
        self.predecessors = predecessors

    def distance_to(self, name):
        return self.distances[name]

    def is_reachable(self, name):
        return not math.isinf(self.distances.get(name, math.inf))

    def __repr__(self):
        reached = sum(1 for d in self.distances.values() if not math.isinf(d))
        return f"ShortestPathResult(source={self.source!r}, reached={reached}/{len(self.distances)})"


def compute_shortest_paths(graph, source):
    if source not in graph:
        raise UnknownSourceError(source)

    dist = {node: math.inf for node in graph} # initial value is INF for every node in graph
    dist[source] = 0.0
    parent = {node: None for node in graph}
    finalized = set()

    # initialize min heap
    pq = [(0.0, source)] # (distance, node)

    while pq:
        current_dist, node = heapq.heappop(pq)

        # skip outdated elements
        if node in finalized or current_dist > dist[node]:
            continue
        finalized.add(node)

        for connection in graph.connections(node):
            neighbor = connection.target
            if neighbor in finalized:
                continue
            new_dist = current_dist + connection.weight
            if new_dist < dist[neighbor]: # dv > du + w
                dist[neighbor] = new_dist
                parent[neighbor] = node
                heapq.heappush(pq, (new_dist, neighbor))

    logger.debug("Dijkstra from %r reached %d of %d nodes", source, len(finalized), len(dist))
    return ShortestPathResult(source, dist, parent)


def compute_distances(graph, source):
    """Shortest distance from ``source`` to every node, ``inf`` where unreachable."""
    return dict(compute_shortest_paths(graph, source).distances)
