"""Tests for the topograph utility helpers."""

import numpy as np
import pytest

from topograph.classes.utils import adjacency_matrix, ordered, to_node_set
from topograph.config import GraphConfig
from topograph.core.graph import DirectedGraph


class TestToNodeSet:
    """Test to_node_set()."""

    def test_collects_iterable(self) -> None:
        assert to_node_set(["a", "b", "a"]) == {"a", "b"}

    def test_string_is_single_identifier(self) -> None:
        assert to_node_set("abc") == {"abc"}

    def test_generator(self) -> None:
        assert to_node_set(n for n in range(3)) == {0, 1, 2}


class TestOrdered:
    """Test ordered()."""

    def test_sorts_ascending(self) -> None:
        assert ordered({"q", "a", "m"}) == ["a", "m", "q"]


class TestAdjacencyMatrix:
    """Test adjacency_matrix() and DirectedGraph.to_adjacency_matrix()."""

    def test_default_order_is_sorted(self, graph: DirectedGraph) -> None:
        graph.add_edge("b", "a")
        graph.add_edge("a", "c")
        graph.add_edge("c", "c")

        node_order, matrix = graph.to_adjacency_matrix()

        assert node_order == ["a", "b", "c"]
        assert matrix.dtype == bool
        np.testing.assert_array_equal(matrix, np.array([
            [False, False, True],
            [True, False, False],
            [False, False, True],
        ]))

    def test_explicit_order(self, graph: DirectedGraph) -> None:
        graph.add_edge("x", "y")

        node_order, matrix = adjacency_matrix(graph, order=["y", "x"])

        assert node_order == ["y", "x"]
        np.testing.assert_array_equal(matrix, np.array([[False, False], [True, False]]))

    def test_edge_count_matches(self, layered_graph: DirectedGraph) -> None:
        _, matrix = layered_graph.to_adjacency_matrix()

        assert int(matrix.sum()) == layered_graph.edge_count() == 18

    def test_empty_graph(self, graph: DirectedGraph) -> None:
        node_order, matrix = graph.to_adjacency_matrix()

        assert node_order == []
        assert matrix.shape == (0, 0)

    @pytest.mark.parametrize("order", [
        ["x"],
        ["x", "y", "z"],
        ["x", "x", "y"],
    ])
    def test_invalid_order_raises(self, graph: DirectedGraph, order: list) -> None:
        graph.add_edge("x", "y")

        with pytest.raises(ValueError):
            graph.to_adjacency_matrix(order=order)

    def test_mixed_identifiers_need_explicit_order(self) -> None:
        """Default sorted order fails on incomparable ids; an explicit order works."""
        g = DirectedGraph(config=GraphConfig(sorted_output=True))
        g.add_edge("a", 1)

        with pytest.raises(TypeError):
            g.to_adjacency_matrix()

        node_order, matrix = g.to_adjacency_matrix(order=["a", 1])

        assert node_order == ["a", 1]
        np.testing.assert_array_equal(matrix, np.array([[False, True], [False, False]]))
