"""
indexgraph - In-memory directed graph library

A Python library for directed graphs whose vertices are addressed by stable
index handles. Edges may be plain (unweighted) or carry a weight; traversal
algorithms work on both through a common adjacency protocol.

Main Classes:
    UnweightedGraph: Graph whose edges are plain target handles
    WeightedGraph: Graph whose edges are (target, weight) connections
    Handle: Stable reference to a vertex
    Connection: Weighted edge payload

Example:
    >>> from indexgraph import UnweightedGraph
    >>> graph = UnweightedGraph.from_values(range(1, 11))
    >>> graph.construct_edges_from(lambda u, v: u != v and (u + v) % 10 == 0)
    >>> graph.is_connected()
    False
"""

__version__ = "0.1.0"
__author__ = "indexgraph maintainers"

from indexgraph.classes.handle import Handle
from indexgraph.classes.connection import Connection
from indexgraph.core.graph import Graph
from indexgraph.core.adjacency import AdjacencyGraph
from indexgraph.core.unweighted import UnweightedGraph
from indexgraph.core.weighted import WeightedGraph
from indexgraph.analysis.connectivity import ConnectivityAnalyzer, is_connected
from indexgraph.analysis.pathfinding import PathFinder, shortest_path
from indexgraph.builders.graph_builder import GraphBuilder
from indexgraph.formats.export_graphviz import export_graphviz, dump_graphviz
from indexgraph.exceptions import GraphError, EdgeNotFoundError, InvalidHandleError

__all__ = [
    'Handle',
    'Connection',
    'Graph',
    'AdjacencyGraph',
    'UnweightedGraph',
    'WeightedGraph',
    'ConnectivityAnalyzer',
    'is_connected',
    'PathFinder',
    'shortest_path',
    'GraphBuilder',
    'export_graphviz',
    'dump_graphviz',
    'GraphError',
    'EdgeNotFoundError',
    'InvalidHandleError',
]
