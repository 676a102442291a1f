"""
Data classes and helpers used throughout the topograph library.
"""

from .node_record import NodeRecord
from .utils import adjacency_matrix, ordered, to_node_set

__all__ = [
    'NodeRecord',
    'adjacency_matrix',
    'ordered',
    'to_node_set',
]
