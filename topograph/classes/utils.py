"""
Utility functions for topograph.

This module provides helpers shared across the package: conversion of node
identifier collections, deterministic ordering, and the dense adjacency
matrix view of a graph.
"""

import logging
from typing import TYPE_CHECKING, Hashable, Iterable, List, Optional, Set, Tuple

import numpy as np

from ..core.direction import Direction

if TYPE_CHECKING:
    from ..core.graph import DirectedGraph

logger = logging.getLogger(__name__)


def to_node_set(nodes: Iterable[Hashable]) -> Set[Hashable]:
    """
    Collect node identifiers into a set.

    A bare string is treated as a single identifier rather than as an
    iterable of characters.

    Args:
        nodes: Iterable of node identifiers, or a single string identifier

    Returns:
        Set of node identifiers
    """
    if isinstance(nodes, str):
        return {nodes}
    return set(nodes)


def ordered(nodes: Iterable[Hashable]) -> List[Hashable]:
    """
    Sort node identifiers ascending for reproducible output.

    Args:
        nodes: Iterable of comparable node identifiers

    Returns:
        Sorted list of node identifiers
    """
    return sorted(nodes)


def adjacency_matrix(graph: "DirectedGraph",
                     order: Optional[Iterable[Hashable]] = None) -> Tuple[List[Hashable], np.ndarray]:
    """
    Build a dense boolean adjacency matrix for a graph.

    Args:
        graph: DirectedGraph to convert
        order: Optional node order for rows and columns. Must name every node
               of the graph exactly once. Defaults to sorted identifiers.

    Returns:
        Tuple of (node_order, matrix) where matrix[i, j] is True iff there is
        an edge node_order[i] -> node_order[j]

    Raises:
        ValueError: If the order repeats a node, misses a node, or names a
                    node that is not in the graph
        TypeError: If no order is given and the node identifiers cannot be
                   compared with each other
    """
    if order is None:
        node_order = ordered(graph.all_nodes())
    else:
        node_order = list(order)
        if len(set(node_order)) != len(node_order):
            raise ValueError("Node order contains duplicate identifiers")
        if set(node_order) != graph.all_nodes():
            raise ValueError("Node order must list every node of the graph exactly once")

    index = {node_id: i for i, node_id in enumerate(node_order)}
    matrix = np.zeros((len(node_order), len(node_order)), dtype=bool)

    for node_id in node_order:
        for successor_id in graph._neighbour_set(node_id, Direction.SUCCESSOR):
            matrix[index[node_id], index[successor_id]] = True

    logger.debug(f"Built {len(node_order)}x{len(node_order)} adjacency matrix "
                 f"with {int(matrix.sum())} edges")
    return node_order, matrix
