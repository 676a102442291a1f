"""
Reachability analysis modules.

This module contains the closure traversal and subgraph extraction used by
DirectedGraph's derived queries.
"""

from .reachability import ReachabilityAnalyzer

__all__ = [
    'ReachabilityAnalyzer',
]
