"""
Reachability analysis for directed graphs.

This module provides the closure traversal behind downstream/upstream queries
and the subgraph extraction built on top of it.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Hashable, Iterable, Set

from ..classes.utils import to_node_set
from ..core.direction import Direction

if TYPE_CHECKING:
    from ..core.graph import DirectedGraph

logger = logging.getLogger(__name__)


class ReachabilityAnalyzer:
    """
    Closure and subgraph queries over a DirectedGraph.

    This class provides methods for:
    - Tracing the closure of a set of seed nodes in either direction
    - Getting downstream/upstream closures of a single node
    - Extracting the nodes lying between two node frontiers
    """

    def __init__(self, graph: "DirectedGraph"):
        """
        Initialize the reachability analyzer.

        Args:
            graph: DirectedGraph instance to analyze
        """
        self.graph = graph

    def trace_nodes(self, seeds: Iterable[Hashable], direction: Direction) -> Set[Hashable]:
        """
        Find every node reachable from the seeds by following one direction.

        Breadth-first traversal over a FIFO worklist with a visited set, so
        cycles terminate. Seeds are always part of the result, even when they
        are not in the graph; an absent node simply has no neighbors.

        Args:
            seeds: Node identifiers to start from
            direction: Which neighbor set to follow at each node

        Returns:
            Set of reached node identifiers, seeds included
        """
        seed_set = to_node_set(seeds)
        visited: Set[Hashable] = set()
        queue = deque(seed_set)

        while queue:
            current_id = queue.popleft()

            if current_id in visited:
                continue

            visited.add(current_id)
            queue.extend(self.graph._neighbour_set(current_id, direction))

        if self.graph.config.log_traversals:
            logger.debug(f"Traced {len(visited)} nodes from {len(seed_set)} seeds "
                         f"following {direction.value} edges")
        return visited

    def downstreams(self, node_id: Hashable) -> Set[Hashable]:
        """Get the node and everything reachable along successor edges."""
        return self.trace_nodes([node_id], Direction.SUCCESSOR)

    def upstreams(self, node_id: Hashable) -> Set[Hashable]:
        """Get the node and everything that reaches it along successor edges."""
        return self.trace_nodes([node_id], Direction.PREDECESSOR)

    def subgraph(self, initiators: Iterable[Hashable], terminators: Iterable[Hashable]) -> Set[Hashable]:
        """
        Find the nodes lying on some path from an initiator to a terminator.

        This is the intersection of the downstream closure of the initiators
        and the upstream closure of the terminators. Initiators and terminators
        are included when they fall inside that intersection.

        Args:
            initiators: Node identifiers where paths start
            terminators: Node identifiers where paths end

        Returns:
            Set of node identifiers spanning the two frontiers
        """
        downstream_ids = self.trace_nodes(initiators, Direction.SUCCESSOR)
        upstream_ids = self.trace_nodes(terminators, Direction.PREDECESSOR)
        result = downstream_ids & upstream_ids

        if self.graph.config.log_traversals:
            logger.debug(f"Subgraph spans {len(result)} nodes "
                         f"({len(downstream_ids)} downstream, {len(upstream_ids)} upstream)")
        return result
