import pytest

from journeykit.exceptions import CyclicDependencyError
from journeykit.validation import DependencyGraph


ACYCLIC = {
    "a": ["b", "c"],
    "b": ["d"],
    "c": ["d"],
    "d": [],
}


def test_acyclic_graph_has_no_cycle_from_any_node():
    graph = DependencyGraph.from_mapping(ACYCLIC)
    assert not any(graph.has_cycle(node) for node in ACYCLIC)


def test_single_back_edge_is_detected_from_every_node_on_the_cycle():
    edges = dict(ACYCLIC, d=["a"])
    graph = DependencyGraph.from_mapping(edges)

    for node in ("a", "b", "c", "d"):
        assert graph.has_cycle(node)


def test_find_cycle_returns_closed_path():
    graph = DependencyGraph.from_mapping({"a": ["b"], "b": ["c"], "c": ["a"]})
    assert graph.find_cycle("a") == ["a", "b", "c", "a"]
    assert graph.find_cycle("b") == ["b", "c", "a", "b"]


def test_dangling_edges_are_leaves():
    graph = DependencyGraph.from_mapping({"a": ["missing"]})
    assert graph.find_cycle("a") is None
    assert not graph.has_cycle("missing")


def test_self_loop():
    graph = DependencyGraph.from_mapping({"a": ["a"]})
    assert graph.find_cycle("a") == ["a", "a"]


def test_require_acyclic_raises_with_cycle():
    graph = DependencyGraph.from_mapping({"a": ["b"], "b": ["a"]})

    with pytest.raises(CyclicDependencyError) as excinfo:
        graph.require_acyclic("a")

    assert excinfo.value.cycle == ("a", "b", "a")
    assert str(excinfo.value) == "Dependency cycle detected: a -> b -> a"

    DependencyGraph.from_mapping(ACYCLIC).require_acyclic("a")
