"""
Graph store: named nodes and their weighted, directed connections.

A two-way connection is stored as two independent directed connections,
one in each direction, carrying the same weight.
"""

import logging
import math
from types import MappingProxyType

import networkx as nx

from .errors import DuplicateNodeError, NonPositiveWeightError, SelfLoopError, UnknownNodeError

logger = logging.getLogger(__name__)


def _as_weight(weight) -> float:
    # text and booleans are not weights even though float() accepts them
    if isinstance(weight, (bool, str, bytes)):
        raise NonPositiveWeightError(weight)
    try:
        w = float(weight)
    except (TypeError, ValueError, OverflowError):
        raise NonPositiveWeightError(weight) from None
    if not math.isfinite(w) or w <= 0:
        raise NonPositiveWeightError(weight)
    return w


class Connection:
    __slots__ = ("_target", "_weight")

    def __init__(self, target: str, weight: float):
        self._target = target
        self._weight = float(weight)

    @property
    def target(self) -> str:
        return self._target

    @property
    def weight(self) -> float:
        return self._weight

    def __eq__(self, other):
        if not isinstance(other, Connection):
            return NotImplemented
        return self._target == other._target and self._weight == other._weight

    def __hash__(self):
        return hash((self._target, self._weight))

    def __repr__(self):
        return f"Connection(target={self._target!r}, weight={self._weight})"


class Node:
    def __init__(self, name: str):
        self._name = name
        self._connections = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def connections(self) -> tuple:
        return tuple(self._connections)

    def _connect(self, connection: Connection):
        self._connections.append(connection)

    def __repr__(self):
        return f"Node(name={self._name!r}, connections={len(self._connections)})"


class Graph:
    def __init__(self):
        self._nodes = {}

    # -----------------
    # NODE OPERATIONS
    # -----------------

    def add_node(self, name: str) -> Node:
        if name in self._nodes:
            raise DuplicateNodeError(name)

        node = Node(name)
        self._nodes[name] = node
        logger.debug("Added node %r", name)
        return node

    def node(self, name: str) -> Node:
        try:
            return self._nodes[name]
        except KeyError:
            raise UnknownNodeError(name) from None

    @property
    def nodes(self):
        return MappingProxyType(self._nodes)

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_connection(self, from_name: str, to_name: str, weight, two_way: bool = False):
        """
        Connect ``from_name`` to ``to_name`` with a positive weight.

        With ``two_way`` the mirrored connection ``to_name -> from_name`` is
        added as well. Every check runs before the graph is touched, so a
        failing call leaves it unchanged.
        """
        source = self.node(from_name)
        target = self.node(to_name)

        if from_name == to_name:
            raise SelfLoopError(from_name)

        w = _as_weight(weight)

        source._connect(Connection(to_name, w))
        if two_way:
            target._connect(Connection(from_name, w))
        logger.debug(
            "Connected %r -> %r (weight=%s, two_way=%s)", from_name, to_name, weight, two_way
        )

    def connections(self, name: str) -> tuple:
        return self.node(name).connections

    def edges(self):
        for name, node in self._nodes.items():
            for connection in node.connections:
                yield name, connection.target, connection.weight

    def to_networkx(self) -> nx.DiGraph:
        # parallel connections collapse onto the lightest one
        G = nx.DiGraph()
        G.add_nodes_from(self._nodes)
        for u, v, w in self.edges():
            if G.has_edge(u, v) and G[u][v]["weight"] <= w:
                continue
            G.add_edge(u, v, weight=w)
        return G

    def __contains__(self, name):
        return name in self._nodes

    def __iter__(self):
        return iter(self._nodes)

    def __len__(self):
        return len(self._nodes)

    def __repr__(self):
        n_edges = sum(len(node.connections) for node in self._nodes.values())
        return f"Graph(nodes={len(self._nodes)}, connections={n_edges})"


def new_graph() -> Graph:
    return Graph()
