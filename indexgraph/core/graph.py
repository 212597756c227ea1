"""
Core vertex/edge store shared by every graph variant.

This module provides the index-based storage without any edge semantics.
Edge shapes are layered on top in unweighted.py and weighted.py.
"""

import logging
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..classes.handle import Handle
from ..exceptions import InvalidHandleError

logger = logging.getLogger(__name__)

V = TypeVar("V")
E = TypeVar("E")


class Graph(Generic[V, E]):
    """
    Generic graph containing vertices of type ``V`` connected by edges of type ``E``.

    This class manages the storage shared by both edge variants:
    - An ordered list of vertex payloads
    - A parallel list of outgoing-edge lists, one per vertex
    - Handle creation and validation
    - Value lookups and read-only iteration

    It is rarely used directly. Use UnweightedGraph or WeightedGraph instead.
    """

    def __init__(self, values: Optional[Iterable[V]] = None, capacity: int = 0):
        """
        Initialize the graph.

        Args:
            values: Optional vertex payloads to insert, in order
            capacity: Expected number of vertices. Only a sizing hint, the
                graph behaves exactly like an empty one.
        """
        self.vertices: List[V] = []
        self.edges: List[List[E]] = []

        if values is not None:
            for value in values:
                self.add_vertex(value)

        logger.debug(f"Initialized {type(self).__name__} with {len(self.vertices)} vertices")

    @classmethod
    def from_values(cls, values: Iterable[V]):
        """
        Create a graph whose vertices are taken from ``values``.

        Equivalent to calling add_vertex for each value, preserving order.

        Args:
            values: Vertex payloads

        Returns:
            A new graph without edges
        """
        return cls(values)

    def add_vertex(self, value: V) -> Handle:
        """
        Add a vertex with the given value.

        Args:
            value: Vertex payload

        Returns:
            Handle to the inserted vertex
        """
        handle = Handle(len(self.vertices))
        self.vertices.append(value)
        self.edges.append([])
        return handle

    def size(self) -> int:
        """Get the number of vertices in the graph."""
        return len(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def num_edges(self) -> int:
        """Get the number of edges in the graph, parallel edges included."""
        return sum(len(outgoing) for outgoing in self.edges)

    def vertex_value(self, vertex: Handle) -> V:
        """
        Get the value stored at a vertex.

        Args:
            vertex: Handle to the vertex

        Returns:
            The vertex payload
        """
        return self.vertices[self._index(vertex)]

    def get_vertex(self, value: V) -> Optional[Handle]:
        """
        Find the first vertex holding a value.

        This is a linear scan in insertion order, not an index lookup.

        Args:
            value: Value to compare against with ``==``

        Returns:
            Handle to the first matching vertex, or None if no vertex matches
        """
        for index, vertex in enumerate(self.vertices):
            if vertex == value:
                return Handle(index)
        return None

    def handles(self) -> Iterator[Handle]:
        """Iterate over the handles of all vertices in index order."""
        return (Handle(index) for index in range(len(self.vertices)))

    def iter_vertices(self) -> Iterator[Tuple[Handle, V]]:
        """Iterate over ``(handle, value)`` pairs in index order."""
        return ((Handle(index), value) for index, value in enumerate(self.vertices))

    def outgoing(self, vertex: Handle) -> Tuple[E, ...]:
        """
        Get the raw edge payloads leaving a vertex.

        Args:
            vertex: Handle to the source vertex

        Returns:
            Snapshot of the outgoing edges in insertion order
        """
        return tuple(self.edges[self._index(vertex)])

    # ========================================================================
    # INTERNAL HELPERS
    # ========================================================================

    def _index(self, vertex: Handle) -> int:
        """
        Validate a handle against this graph and return its index.

        Raises:
            InvalidHandleError: If the handle is not a Handle or is out of range
        """
        if not isinstance(vertex, Handle):
            raise InvalidHandleError(f"Expected a Handle, got {type(vertex).__name__}")
        if not 0 <= vertex.index < len(self.vertices):
            raise InvalidHandleError(
                f"{vertex!r} is out of range for a graph with {len(self.vertices)} vertices"
            )
        return vertex.index

    def _remove_at(self, outgoing: List[E], position: int) -> None:
        # swap with the last edge and pop, order of the remaining edges is not kept
        outgoing[position] = outgoing[-1]
        outgoing.pop()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self.vertices)}, edges={self.num_edges()})"
