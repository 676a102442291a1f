"""
Per-node edge record.

A NodeRecord holds the identifiers of a node's direct predecessors and direct
successors. Records are owned by a DirectedGraph and are only changed through
its mutation methods, which keep both ends of every edge in step.
"""

from typing import Dict, Hashable, Set

from ..core.direction import Direction


class NodeRecord:
    """
    Neighbor sets of a single node, keyed by Direction.
    """

    __slots__ = ('links',)

    def __init__(self):
        self.links: Dict[Direction, Set[Hashable]] = {
            Direction.PREDECESSOR: set(),
            Direction.SUCCESSOR: set(),
        }

    def neighbours(self, direction: Direction) -> Set[Hashable]:
        """Get the live neighbor set for a direction."""
        return self.links[direction]

    def link(self, direction: Direction, node_id: Hashable) -> None:
        self.links[direction].add(node_id)

    def unlink(self, direction: Direction, node_id: Hashable) -> None:
        self.links[direction].discard(node_id)

    def copy(self) -> "NodeRecord":
        """Return a record with independent copies of both neighbor sets."""
        other = NodeRecord()
        other.links = {d: set(ids) for d, ids in self.links.items()}
        return other

    def __repr__(self):
        return (f"NodeRecord(predecessors={len(self.links[Direction.PREDECESSOR])}, "
                f"successors={len(self.links[Direction.SUCCESSOR])})")
