"""
Unweighted graph variant.

An edge of an unweighted graph is simply the handle of its target vertex.
"""

import logging
from typing import Callable, Iterator, List, TypeVar

from ..classes.handle import Handle
from ..exceptions import EdgeNotFoundError
from .adjacency import TraversalMixin
from .graph import Graph

logger = logging.getLogger(__name__)

V = TypeVar("V")


class UnweightedGraph(Graph[V, Handle], TraversalMixin):
    """
    Directed graph whose edges carry no weight.

    Parallel edges are allowed and counted separately.
    """

    def add_edge(self, from_vertex: Handle, to_vertex: Handle) -> None:
        """
        Connect two vertices.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex
        """
        self._index(to_vertex)
        self.edges[self._index(from_vertex)].append(to_vertex)

    def construct_edges_from(self, condition: Callable[[V, V], bool]) -> None:
        """
        Connect every ordered pair of vertices that satisfies a condition.

        Every pair ``(u, v)`` is tested, ``u == v`` included, so this calls
        the condition ``size() ** 2`` times.

        Args:
            condition: Called with the two vertex values, edge u -> v is added
                when it returns a truthy value
        """
        before = self.num_edges()
        for u, from_value in enumerate(self.vertices):
            for v, to_value in enumerate(self.vertices):
                if condition(from_value, to_value):
                    self.edges[u].append(Handle(v))
        logger.debug(f"Constructed {self.num_edges() - before} edges from condition")

    def edge_exists(self, from_vertex: Handle, to_vertex: Handle) -> bool:
        """
        Check whether an edge leads from one vertex to another.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex

        Returns:
            True if to_vertex appears in the outgoing edges of from_vertex
        """
        return to_vertex in self.edges[self._index(from_vertex)]

    def neighbors(self, vertex: Handle) -> List[Handle]:
        """Get the targets of the edges leaving a vertex, in insertion order."""
        return list(self.edges[self._index(vertex)])

    def remove_edge(self, from_vertex: Handle, to_vertex: Handle) -> None:
        """
        Remove one edge between two vertices.

        The last outgoing edge of from_vertex takes the place of the removed
        one, so the order of the remaining edges changes.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex

        Raises:
            EdgeNotFoundError: If no such edge exists
        """
        outgoing = self.edges[self._index(from_vertex)]
        try:
            position = outgoing.index(to_vertex)
        except ValueError:
            raise EdgeNotFoundError(f"edge does not exist: {from_vertex!r} -> {to_vertex!r}") from None
        self._remove_at(outgoing, position)

    # ========================================================================
    # ADJACENCY PROTOCOL
    # ========================================================================

    def has_edge(self, from_vertex: Handle, to_vertex: Handle) -> bool:
        return self.edge_exists(from_vertex, to_vertex)

    def connected_neighbors(self, vertex: Handle) -> Iterator[Handle]:
        return iter(tuple(self.edges[self._index(vertex)]))

    # ========================================================================
    # CONVERSION
    # ========================================================================

    @classmethod
    def from_weighted(cls, weighted) -> "UnweightedGraph[V]":
        """
        Create an unweighted graph from a weighted one.

        An edge is kept exactly when its weight is non-zero. Zero-weight edges
        count as absent, all other weights are discarded.

        Args:
            weighted: WeightedGraph to convert. It is left unchanged.

        Returns:
            A new UnweightedGraph with the same vertices in the same order
        """
        graph = cls(weighted.vertices)
        dropped = 0
        for index, outgoing in enumerate(weighted.edges):
            for connection in outgoing:
                if connection.weight == 0:
                    dropped += 1
                    continue
                graph.edges[index].append(connection.to)
        logger.debug(f"Converted weighted graph, dropped {dropped} zero-weight edges")
        return graph
