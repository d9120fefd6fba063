import logging
from itertools import islice

import networkx as nx

from ..errors import UnknownNodeError

logger = logging.getLogger(__name__)

DEFAULT_K_PATHS = 3

# Yen's algorithm

def top_k_shortest_paths(graph, source, target, k=DEFAULT_K_PATHS, cutoff=None):
    # k : number of paths, cutoff : maximum nodes per path
    for name in (source, target):
        if name not in graph:
            raise UnknownNodeError(name)

    if k <= 0:
        return []

    G = graph.to_networkx()

    try:
        # simple paths in order of increasing total weight
        generator = nx.shortest_simple_paths(G, source, target, weight="weight")

        if cutoff is None:
            return list(islice(generator, k))

        # limit the number of nodes per path
        result_set = []
        for path in generator:
            if len(path) <= cutoff:
                result_set.append(path)
            if len(result_set) >= k:
                break
        return result_set
    except nx.NetworkXNoPath: # path doesnt exist
        logger.debug("No path from %r to %r", source, target)
        return []
