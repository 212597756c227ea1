"""
Weighted graph variant.

An edge of a weighted graph is a Connection holding the target handle and a
weight. Weights are carried but never interpreted, except by the conversion
to an unweighted graph which treats a zero weight as no edge.
"""

import logging
from typing import Callable, Iterator, List, Optional, TypeVar

from ..classes.connection import Connection
from ..classes.handle import Handle
from ..exceptions import EdgeNotFoundError
from .adjacency import TraversalMixin
from .graph import Graph
from .unweighted import UnweightedGraph

logger = logging.getLogger(__name__)

V = TypeVar("V")
W = TypeVar("W")


class WeightedGraph(Graph[V, Connection[W]], TraversalMixin):
    """
    Directed graph whose edges carry a weight.

    Edges are matched by target handle only, the weight never takes part in
    lookups or removal.
    """

    def add_edge(self, from_vertex: Handle, to_vertex: Handle, weight: W) -> None:
        """
        Connect two vertices with an edge of the given weight.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex
            weight: Edge weight
        """
        self._index(to_vertex)
        self.edges[self._index(from_vertex)].append(Connection(to_vertex, weight))

    def construct_edges_from(self, condition: Callable[[V, V], Optional[W]]) -> None:
        """
        Connect every ordered pair of vertices for which a condition yields a weight.

        Args:
            condition: Called with the two vertex values for every ordered
                pair ``(u, v)``, ``u == v`` included. Returns None for no edge,
                or the weight of the edge u -> v. A weight of zero is still
                an edge.
        """
        before = self.num_edges()
        for u, from_value in enumerate(self.vertices):
            for v, to_value in enumerate(self.vertices):
                weight = condition(from_value, to_value)
                if weight is not None:
                    self.edges[u].append(Connection(Handle(v), weight))
        logger.debug(f"Constructed {self.num_edges() - before} weighted edges from condition")

    def edge_exists(self, from_vertex: Handle, to_vertex: Handle) -> bool:
        """Check whether an edge of any weight leads from one vertex to another."""
        return any(connection.to == to_vertex for connection in self.edges[self._index(from_vertex)])

    def get_edge(self, from_vertex: Handle, to_vertex: Handle) -> Optional[W]:
        """
        Get the weight of an edge.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex

        Returns:
            Weight of the first matching edge, or None if there is none
        """
        for connection in self.edges[self._index(from_vertex)]:
            if connection.to == to_vertex:
                return connection.weight
        return None

    def neighbors(self, vertex: Handle) -> List[Connection[W]]:
        """Get the connections leaving a vertex, in insertion order."""
        return list(self.edges[self._index(vertex)])

    def remove_edge(self, from_vertex: Handle, to_vertex: Handle) -> None:
        """
        Remove the first edge between two vertices, whatever its weight.

        The last outgoing edge of from_vertex takes the place of the removed
        one, so the order of the remaining edges changes.

        Args:
            from_vertex: Source vertex
            to_vertex: Target vertex

        Raises:
            EdgeNotFoundError: If no such edge exists
        """
        outgoing = self.edges[self._index(from_vertex)]
        for position, connection in enumerate(outgoing):
            if connection.to == to_vertex:
                self._remove_at(outgoing, position)
                return
        raise EdgeNotFoundError(f"edge does not exist: {from_vertex!r} -> {to_vertex!r}")

    def to_unweighted(self) -> UnweightedGraph[V]:
        """Convert to an unweighted graph, dropping zero-weight edges."""
        return UnweightedGraph.from_weighted(self)

    # ========================================================================
    # ADJACENCY PROTOCOL
    # ========================================================================

    def has_edge(self, from_vertex: Handle, to_vertex: Handle) -> bool:
        return self.edge_exists(from_vertex, to_vertex)

    def connected_neighbors(self, vertex: Handle) -> Iterator[Handle]:
        return iter(tuple(connection.to for connection in self.edges[self._index(vertex)]))
