import pytest

from graphpath import (
    NoPathError,
    ShortestPathResult,
    UnknownNodeError,
    UnknownSourceError,
    UnreachableDestinationError,
    compute_distances,
    compute_shortest_paths,
    extract_path,
    new_graph,
    path_weight,
)


def test_demo_path(demo_graph):
    assert extract_path(demo_graph, "A", "D") == ["A", "B", "C", "D"]


def test_path_to_source_is_single_node(demo_graph):
    assert extract_path(demo_graph, "A", "A") == ["A"]
    assert extract_path(demo_graph, "C", "C") == ["C"]


def test_path_weight_matches_distance(demo_graph):
    for source in demo_graph:
        distances = compute_distances(demo_graph, source)
        for destination, distance in distances.items():
            path = extract_path(demo_graph, source, destination)
            assert path_weight(demo_graph, path) == distance


def test_reuses_given_result(demo_graph):
    result = compute_shortest_paths(demo_graph, "A")
    assert extract_path(demo_graph, "A", "C", result=result) == ["A", "B", "C"]


def test_unreachable_destination(demo_graph_with_island):
    with pytest.raises(UnreachableDestinationError) as exc:
        extract_path(demo_graph_with_island, "A", "E")
    assert exc.value.source == "A"
    assert exc.value.destination == "E"


def test_unknown_endpoints(demo_graph):
    with pytest.raises(UnknownSourceError):
        extract_path(demo_graph, "Z", "A")
    with pytest.raises(UnknownNodeError):
        extract_path(demo_graph, "A", "Z")


def test_result_from_other_source(demo_graph):
    result = compute_shortest_paths(demo_graph, "B")
    with pytest.raises(NoPathError):
        extract_path(demo_graph, "A", "D", result=result)


def test_broken_predecessor_chain(demo_graph):
    result = ShortestPathResult(
        "A",
        {"A": 0.0, "B": 1.0, "C": 3.0, "D": 4.0},
        {"A": None, "B": "A", "C": None, "D": "C"},
    )
    with pytest.raises(NoPathError):
        extract_path(demo_graph, "A", "D", result=result)


def test_cyclic_predecessors_do_not_loop_forever(demo_graph):
    result = ShortestPathResult(
        "A",
        {"A": 0.0, "B": 1.0, "C": 3.0, "D": 4.0},
        {"A": None, "B": "C", "C": "B", "D": "C"},
    )
    with pytest.raises(NoPathError):
        extract_path(demo_graph, "A", "D", result=result)


def test_tied_paths_return_some_shortest_path():
    g = new_graph()
    for name in "SLRT":
        g.add_node(name)
    g.add_connection("S", "L", 1)
    g.add_connection("S", "R", 1)
    g.add_connection("L", "T", 1)
    g.add_connection("R", "T", 1)

    path = extract_path(g, "S", "T")
    assert path[0] == "S" and path[-1] == "T"
    assert len(path) == 3
    assert path_weight(g, path) == 2.0
