"""Pytest fixtures for topograph tests."""

import pytest

from topograph.config import GraphConfig
from topograph.core.graph import DirectedGraph


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TOPOGRAPH_ variables from the host out of every test."""
    monkeypatch.delenv("TOPOGRAPH_SORTED_OUTPUT", raising=False)
    monkeypatch.delenv("TOPOGRAPH_LOG_TRAVERSALS", raising=False)


@pytest.fixture
def graph() -> DirectedGraph:
    """An empty graph with default configuration."""
    return DirectedGraph()


@pytest.fixture
def sorted_graph() -> DirectedGraph:
    """An empty graph returning sorted neighbor lists."""
    return DirectedGraph(config=GraphConfig(sorted_output=True))


@pytest.fixture
def diamond_graph() -> DirectedGraph:
    """Fan-out from a that reconverges at z.

    a -> x, a -> y, x -> p, x -> q, y -> r, p -> z, r -> z
    """
    g = DirectedGraph()
    for source, target in [
        ("a", "x"), ("a", "y"), ("x", "p"), ("x", "q"),
        ("y", "r"), ("p", "z"), ("r", "z"),
    ]:
        g.add_edge(source, target)
    return g


@pytest.fixture
def layered_graph() -> DirectedGraph:
    """Three fully connected layers: {a,b,c} -> {p,q,r} -> {x,y,z}."""
    g = DirectedGraph()
    for top in ["a", "b", "c"]:
        for middle in ["p", "q", "r"]:
            g.add_edge(top, middle)
    for middle in ["p", "q", "r"]:
        for bottom in ["x", "y", "z"]:
            g.add_edge(middle, bottom)
    return g


@pytest.fixture
def cyclic_graph() -> DirectedGraph:
    """a -> b -> c -> a with a tail c -> d."""
    g = DirectedGraph()
    g.add_edge("a", "b")
    g.add_edge("b", "c")
    g.add_edge("c", "a")
    g.add_edge("c", "d")
    return g
