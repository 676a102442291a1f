"""
Edge direction for graph traversal.

Neighbor cleanup and closure traversal are written once against a Direction
and invoked with either value.
"""

from enum import Enum


class Direction(Enum):
    """Which neighbor set of a node to follow."""
    PREDECESSOR = "predecessor"
    SUCCESSOR = "successor"

    def opposite(self) -> "Direction":
        """
        Get the reverse direction.

        If b is a successor of a, then a is a predecessor of b; this maps
        one side of that relation to the other.

        Returns:
            The other Direction value
        """
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.PREDECESSOR: Direction.SUCCESSOR,
    Direction.SUCCESSOR: Direction.PREDECESSOR,
}
