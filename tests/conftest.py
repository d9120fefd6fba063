import pytest

from graphpath.network_builder import build_demo_graph


@pytest.fixture
def demo_graph():
    return build_demo_graph()


@pytest.fixture
def demo_graph_with_island(demo_graph):
    demo_graph.add_node("E")
    return demo_graph
