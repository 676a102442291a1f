"""
Topograph - In-Memory Directed Graph Library

A Python library for building directed graphs of opaque node identifiers and
answering reachability questions about them: direct neighbors, downstream and
upstream closures, and the subgraph lying between two node frontiers.

Main Classes:
    DirectedGraph: Adjacency-set directed graph (facade)
    Direction: Predecessor/successor traversal direction
    GraphConfig: Settings read from TOPOGRAPH_ environment variables
    ReachabilityAnalyzer: Closure traversal and subgraph extraction

Example:
    >>> from topograph import DirectedGraph
    >>> graph = DirectedGraph()
    >>> graph.add_edge("x", "y")
    >>> graph.add_edge("y", "z")
    >>> sorted(graph.subgraph(["x"], ["z"]))
    ['x', 'y', 'z']
"""

__version__ = "0.1.0"

from topograph.core.direction import Direction
from topograph.core.graph import DirectedGraph
from topograph.analysis.reachability import ReachabilityAnalyzer
from topograph.config import GraphConfig

__all__ = [
    'DirectedGraph',
    'Direction',
    'GraphConfig',
    'ReachabilityAnalyzer',
]
