"""
Traversal algorithms built on the adjacency protocol.

This module contains the weak connectivity check and shortest path search.
"""

from .connectivity import ConnectivityAnalyzer, is_connected
from .pathfinding import PathFinder, shortest_path

__all__ = [
    'ConnectivityAnalyzer',
    'is_connected',
    'PathFinder',
    'shortest_path',
]
