import logging
import random

import networkx as nx

from .graph import new_graph

logger = logging.getLogger(__name__)

DEFAULT_N_NODES = 15
DEFAULT_EDGE_PROB = 0.4
DEFAULT_WEIGHT_RANGE = (1, 11)


def build_demo_graph():
    """
    Small reference network:
    A <-> B (1), B <-> C (2), A -> C (10), C <-> D (1)
    """
    graph = new_graph()
    for name in ("A", "B", "C", "D"):
        graph.add_node(name)

    graph.add_connection("A", "B", 1, two_way=True)
    graph.add_connection("B", "C", 2, two_way=True)
    graph.add_connection("A", "C", 10, two_way=False)
    graph.add_connection("C", "D", 1, two_way=True)
    return graph


def build_random_graph(n_nodes=DEFAULT_N_NODES, edge_prob=DEFAULT_EDGE_PROB,
                       weight_range=DEFAULT_WEIGHT_RANGE, two_way=False, seed=None):
    """
    Random graph on nodes "n0".."n{n_nodes-1}".

    The skeleton comes from an Erdos-Renyi draw. Each skeleton edge becomes
    one connection in a random direction, or a two-way connection when
    ``two_way`` is set. Weights are integers drawn from ``weight_range``
    (inclusive). The same seed always gives the same graph.
    """
    rng = random.Random(seed)
    skeleton = nx.erdos_renyi_graph(n=n_nodes, p=edge_prob, seed=seed)

    graph = new_graph()
    names = {n: f"n{n}" for n in skeleton.nodes()}
    for n in sorted(names):
        graph.add_node(names[n])

    for u, v in skeleton.edges():
        w = rng.randint(*weight_range)
        if not two_way and rng.random() < 0.5:
            u, v = v, u
        graph.add_connection(names[u], names[v], w, two_way=two_way)

    logger.debug("Built random graph %r (seed=%s)", graph, seed)
    return graph
