"""
Core graph data structures.

This module contains the directed graph itself and the direction concept its
mutations and traversals are parameterized by.
"""

from .direction import Direction
from .graph import DirectedGraph

__all__ = [
    'Direction',
    'DirectedGraph',
]
