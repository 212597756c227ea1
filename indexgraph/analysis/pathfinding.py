"""
Shortest path search for unweighted traversal.

This module finds paths with the fewest edges. Edge weights, when present,
are ignored.
"""

import logging
from typing import List, Optional
from collections import deque

import numpy as np

from ..classes.handle import Handle
from ..core.adjacency import AdjacencyGraph
from ..exceptions import InvalidHandleError

logger = logging.getLogger(__name__)

NO_PREDECESSOR = -1


class PathFinder:
    """
    Breadth-first path finding for any graph implementing AdjacencyGraph.
    """

    def __init__(self, graph: AdjacencyGraph):
        """
        Initialize the path finder.

        Args:
            graph: Graph to search. It is never modified.
        """
        self.graph = graph

    def shortest_path(self, start: Handle, end: Handle) -> Optional[List[Handle]]:
        """
        Find a path from start to end with the minimum number of edges.

        Each vertex remembers the vertex that discovered it first. The search
        stops once end is taken off the queue. When several shortest paths
        exist, the one returned is whichever the queue order recorded first.

        Args:
            start: First vertex of the path
            end: Last vertex of the path

        Returns:
            Handles from start to end, both included, or None if end cannot
            be reached from start. A path from a vertex to itself is ``[start]``.
        """
        size = self.graph.size()
        for vertex in (start, end):
            if not isinstance(vertex, Handle):
                raise InvalidHandleError(f"Expected a Handle, got {type(vertex).__name__}")
            if not 0 <= vertex.index < size:
                raise InvalidHandleError(f"{vertex!r} is out of range for a graph with {size} vertices")

        visited = np.zeros(size, dtype=bool)
        predecessor = np.full(size, NO_PREDECESSOR, dtype=np.int64)

        queue = deque([start])
        visited[start.index] = True

        while queue:
            current = queue.popleft()
            if current == end:
                break

            for neighbor in self.graph.connected_neighbors(current):
                if not visited[neighbor.index]:
                    visited[neighbor.index] = True
                    predecessor[neighbor.index] = current.index
                    queue.append(neighbor)

        path = [end]
        current_index = end.index
        while current_index != start.index:
            current_index = int(predecessor[current_index])
            if current_index == NO_PREDECESSOR:
                logger.debug(f"No path from {start!r} to {end!r}")
                return None
            path.append(Handle(current_index))

        path.reverse()
        return path


def shortest_path(graph: AdjacencyGraph, start: Handle, end: Handle) -> Optional[List[Handle]]:
    """
    Find a path from start to end with the minimum number of edges.

    Args:
        graph: Weighted or unweighted graph
        start: First vertex of the path
        end: Last vertex of the path

    Returns:
        The path as a list of handles, or None if there is no path
    """
    return PathFinder(graph).shortest_path(start, end)
