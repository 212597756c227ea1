"""
Handle to a vertex stored in a graph.

A handle is nothing more than the vertex index inside the store that created
it. Vertices are never removed, so a handle stays valid for the lifetime of
its graph.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Handle:
    """
    Opaque, comparable reference to a vertex.

    Two handles are equal iff their indices are equal, and they order by
    index. Handles carry no payload; the vertex value stays in the graph.

    Attributes:
        index: Position of the vertex in the graph's vertex list
    """

    index: int

    def __repr__(self) -> str:
        return f"Handle({self.index})"
