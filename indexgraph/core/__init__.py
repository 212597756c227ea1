"""
Core graph data structures.

This module contains the vertex/edge store, its two edge variants and the
adjacency protocol algorithms are written against.
"""

from .graph import Graph
from .adjacency import AdjacencyGraph
from .unweighted import UnweightedGraph
from .weighted import WeightedGraph

__all__ = [
    'Graph',
    'AdjacencyGraph',
    'UnweightedGraph',
    'WeightedGraph',
]
