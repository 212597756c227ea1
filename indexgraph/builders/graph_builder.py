"""
Declarative construction shorthand.

This module contains a small builder that assembles a graph from edge
descriptions given by vertex value, using only the public insert and
connect operations of the graph classes.
"""

import logging
from typing import Any, Generic, Optional, TypeVar, Union

from ..classes.handle import Handle
from ..core.unweighted import UnweightedGraph
from ..core.weighted import WeightedGraph
from ..exceptions import GraphError

logger = logging.getLogger(__name__)

V = TypeVar("V")


class GraphBuilder(Generic[V]):
    """
    Build a graph by naming vertices through their values.

    Vertices are looked up with ``get_vertex`` and inserted on first use, so
    each distinct value becomes exactly one vertex.

    Example:
        >>> graph = (GraphBuilder()
        ...          .edge("hello", "bye")
        ...          .edge("hello", "no")
        ...          .build())
    """

    def __init__(self, weighted: bool = False):
        """
        Initialize the builder.

        Args:
            weighted: Build a WeightedGraph instead of an UnweightedGraph
        """
        self.weighted = weighted
        self._graph: Union[UnweightedGraph, WeightedGraph] = WeightedGraph() if weighted else UnweightedGraph()

    def vertex(self, value: V) -> "GraphBuilder[V]":
        """Add a vertex unless one with an equal value exists."""
        self._vertex(value)
        return self

    def edge(self, from_value: V, to_value: V, weight: Optional[Any] = None) -> "GraphBuilder[V]":
        """
        Add an edge between two vertices, inserting them when missing.

        Args:
            from_value: Value of the source vertex
            to_value: Value of the target vertex
            weight: Edge weight, required for weighted builders and rejected
                for unweighted ones

        Raises:
            GraphError: If the weight does not match the kind of graph built
        """
        if self.weighted and weight is None:
            raise GraphError("A weighted graph needs a weight for every edge")
        if not self.weighted and weight is not None:
            raise GraphError("An unweighted graph does not take edge weights")

        from_vertex = self._vertex(from_value)
        to_vertex = self._vertex(to_value)

        if self.weighted:
            self._graph.add_edge(from_vertex, to_vertex, weight)
        else:
            self._graph.add_edge(from_vertex, to_vertex)
        return self

    def build(self) -> Union[UnweightedGraph, WeightedGraph]:
        """
        Get the assembled graph.

        The builder keeps a reference to it, further calls keep modifying
        the same graph.
        """
        logger.debug(f"Built {self._graph!r}")
        return self._graph

    def _vertex(self, value: V) -> Handle:
        handle = self._graph.get_vertex(value)
        if handle is None:
            handle = self._graph.add_vertex(value)
        return handle
