"""
Core directed graph data structure.

This module provides the adjacency-set graph keyed by opaque node identifiers.
Every operation is total: absent nodes or edges give empty results or no-ops,
never errors.

The graph is not safe for concurrent mutation. Callers sharing one graph
between threads must guard all access with a single lock.
"""

import logging
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from ..analysis.reachability import ReachabilityAnalyzer
from ..classes.node_record import NodeRecord
from ..classes.utils import adjacency_matrix, ordered
from ..config import GraphConfig
from .direction import Direction

logger = logging.getLogger(__name__)


class DirectedGraph:
    """
    Directed graph of opaque, hashable node identifiers.

    Each node owns a NodeRecord holding its predecessor and successor sets.
    The mutation methods keep both ends of every edge in step, so
    b in successors(a) exactly when a in predecessors(b). Self-loops are
    allowed; multi-edges are not.

    Iteration order of nodes and neighbors is unspecified unless
    GraphConfig.sorted_output is set, in which case neighbor lists are sorted.

    Example:
        >>> graph = DirectedGraph()
        >>> graph.add_edge("a", "b")
        >>> graph.add_edge("b", "c")
        >>> sorted(graph.downstreams("a"))
        ['a', 'b', 'c']
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        """
        Initialize an empty graph.

        Args:
            config: Optional graph configuration. Defaults to GraphConfig(),
                    which reads TOPOGRAPH_ environment variables and a .env
                    file in the current working directory.

        Raises:
            pydantic.ValidationError: If config is omitted and the environment
                                      or .env file holds an invalid TOPOGRAPH_ value
        """
        self._config = config or GraphConfig()
        self._nodes: Dict[Hashable, NodeRecord] = {}
        self.reachability = ReachabilityAnalyzer(self)

    @property
    def config(self) -> GraphConfig:
        """Configuration this graph was created with."""
        return self._config

    # ========================================================================
    # NODE OPERATIONS
    # ========================================================================

    def add_node(self, node_id: Hashable) -> None:
        """
        Add a node to the graph. Nothing is done if it already exists.

        Args:
            node_id: Identifier of the node to add
        """
        if node_id not in self._nodes:
            self._nodes[node_id] = NodeRecord()
            logger.debug(f"Added node {node_id!r}")

    def del_node(self, node_id: Hashable) -> None:
        """
        Delete a node and every edge into or out of it.

        Nothing is done if the node is not in the graph. Neighboring nodes are
        kept even if they become isolated.

        Args:
            node_id: Identifier of the node to delete
        """
        if node_id not in self._nodes:
            return

        self._remove_links(node_id, Direction.PREDECESSOR)
        self._remove_links(node_id, Direction.SUCCESSOR)
        del self._nodes[node_id]
        logger.debug(f"Deleted node {node_id!r}")

    def has_node(self, node_id: Hashable) -> bool:
        """Check whether the node is in the graph."""
        return node_id in self._nodes

    def all_nodes(self) -> Set[Hashable]:
        """
        Get every node identifier in the graph.

        Returns:
            New set of node identifiers. Its iteration order is unspecified
            and must not be relied on.
        """
        return set(self._nodes)

    def get_sources(self) -> List[Hashable]:
        """Get nodes with no incoming edges."""
        return self._arrange([node_id for node_id, record in self._nodes.items()
                              if not record.neighbours(Direction.PREDECESSOR)])

    def get_sinks(self) -> List[Hashable]:
        """Get nodes with no outgoing edges."""
        return self._arrange([node_id for node_id, record in self._nodes.items()
                              if not record.neighbours(Direction.SUCCESSOR)])

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def add_edge(self, source_id: Hashable, target_id: Hashable) -> None:
        """
        Add an edge from source to target.

        Missing endpoints are added to the graph first. Adding an edge that
        already exists changes nothing.

        Args:
            source_id: Identifier of the edge's start node
            target_id: Identifier of the edge's end node
        """
        self.add_node(source_id)
        self.add_node(target_id)
        self._nodes[source_id].link(Direction.SUCCESSOR, target_id)
        self._nodes[target_id].link(Direction.PREDECESSOR, source_id)

    def del_edge(self, source_id: Hashable, target_id: Hashable) -> None:
        """
        Delete the edge from source to target.

        Nothing is done unless both nodes are in the graph. The nodes
        themselves are never deleted.

        Args:
            source_id: Identifier of the edge's start node
            target_id: Identifier of the edge's end node
        """
        if source_id in self._nodes and target_id in self._nodes:
            self._nodes[source_id].unlink(Direction.SUCCESSOR, target_id)
            self._nodes[target_id].unlink(Direction.PREDECESSOR, source_id)

    def has_edge(self, source_id: Hashable, target_id: Hashable) -> bool:
        """Check whether there is an edge from source to target."""
        record = self._nodes.get(source_id)
        return record is not None and target_id in record.neighbours(Direction.SUCCESSOR)

    def edges(self) -> Iterator[Tuple[Hashable, Hashable]]:
        """Iterate over (source, target) pairs of every edge."""
        for source_id, record in self._nodes.items():
            for target_id in record.neighbours(Direction.SUCCESSOR):
                yield source_id, target_id

    def edge_count(self) -> int:
        return sum(len(record.neighbours(Direction.SUCCESSOR)) for record in self._nodes.values())

    # ========================================================================
    # NEIGHBOR QUERIES
    # ========================================================================

    def successors(self, node_id: Hashable) -> List[Hashable]:
        """
        Get the immediate successors of a node.

        Returns:
            List of successor identifiers; empty if the node is absent
        """
        return self.neighbours(node_id, Direction.SUCCESSOR)

    def predecessors(self, node_id: Hashable) -> List[Hashable]:
        """
        Get the immediate predecessors of a node.

        Returns:
            List of predecessor identifiers; empty if the node is absent
        """
        return self.neighbours(node_id, Direction.PREDECESSOR)

    def neighbours(self, node_id: Hashable, direction: Direction) -> List[Hashable]:
        """
        Get the immediate neighbors of a node in one direction.

        Args:
            node_id: Identifier of the node
            direction: Direction.SUCCESSOR for out-neighbors,
                       Direction.PREDECESSOR for in-neighbors

        Returns:
            New list of neighbor identifiers; empty if the node is absent
        """
        record = self._nodes.get(node_id)
        if record is None:
            return []
        return self._arrange(record.neighbours(direction))

    def _neighbour_set(self, node_id: Hashable, direction: Direction) -> Iterable[Hashable]:
        """Live neighbor set for traversal; never sorted, empty if the node is absent."""
        record = self._nodes.get(node_id)
        if record is None:
            return ()
        return record.neighbours(direction)

    # ========================================================================
    # REACHABILITY QUERIES
    # ========================================================================

    def downstreams(self, node_id: Hashable) -> Set[Hashable]:
        """
        Get the node and every node reachable from it along successor edges.
        """
        return self.reachability.downstreams(node_id)

    def upstreams(self, node_id: Hashable) -> Set[Hashable]:
        """
        Get the node and every node that can reach it along successor edges.
        """
        return self.reachability.upstreams(node_id)

    def subgraph(self, initiators: Iterable[Hashable], terminators: Iterable[Hashable]) -> Set[Hashable]:
        """
        Get the nodes lying on some path from an initiator to a terminator.

        Args:
            initiators: Node identifiers where paths start
            terminators: Node identifiers where paths end

        Returns:
            Set of node identifiers spanning the two frontiers
        """
        return self.reachability.subgraph(initiators, terminators)

    # ========================================================================
    # CONVERSION
    # ========================================================================

    def copy(self) -> "DirectedGraph":
        """
        Return an independent copy of this graph sharing its configuration.
        """
        other = DirectedGraph(config=self._config)
        other._nodes = {node_id: record.copy() for node_id, record in self._nodes.items()}
        return other

    def to_adjacency_matrix(self, order: Optional[Iterable[Hashable]] = None) -> Tuple[List[Hashable], np.ndarray]:
        """
        Get the graph as a dense boolean adjacency matrix.

        Args:
            order: Optional row/column node order; defaults to sorted identifiers

        Returns:
            Tuple of (node_order, matrix); see classes.utils.adjacency_matrix
        """
        return adjacency_matrix(self, order)

    def _remove_links(self, node_id: Hashable, direction: Direction) -> None:
        """
        Detach a node from its neighbors in one direction.

        Every neighbor in the given direction drops node_id from its
        opposite-direction set. The node's own record is left untouched.
        """
        opposite = direction.opposite()
        # snapshot: a self-loop puts node_id in its own neighbor sets
        for neighbour_id in list(self._nodes[node_id].neighbours(direction)):
            self._nodes[neighbour_id].unlink(opposite, node_id)

    def _arrange(self, node_ids: Iterable[Hashable]) -> List[Hashable]:
        if self._config.sorted_output:
            return ordered(node_ids)
        return list(node_ids)

    def __len__(self):
        return len(self._nodes)

    def __contains__(self, node_id):
        return node_id in self._nodes

    def __iter__(self):
        return iter(list(self._nodes))

    def __repr__(self):
        return f"DirectedGraph(nodes={len(self._nodes)}, edges={self.edge_count()})"
