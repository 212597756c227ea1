"""AdjacencyGraph protocol -- the read contract every edge variant implements.

Traversal algorithms depend only on this protocol, so they run unchanged on
weighted and unweighted graphs.
"""

from typing import Iterator, List, Optional, Protocol, runtime_checkable

from ..classes.handle import Handle


@runtime_checkable
class AdjacencyGraph(Protocol):
    """Read-only adjacency view of a graph."""

    def size(self) -> int:
        """Number of vertices."""
        ...

    def has_edge(self, from_vertex: Handle, to_vertex: Handle) -> bool:
        """Whether an edge leads from *from_vertex* to *to_vertex*."""
        ...

    def connected_neighbors(self, vertex: Handle) -> Iterator[Handle]:
        """Targets of the edges leaving *vertex*.

        Each call returns a fresh iterator over a snapshot of the outgoing
        edges taken at call time.
        """
        ...


class TraversalMixin:
    """Traversal algorithms offered by graphs that implement AdjacencyGraph."""

    def is_connected(self) -> bool:
        """Check whether the graph is weakly connected. See analysis.connectivity."""
        from ..analysis.connectivity import ConnectivityAnalyzer
        return ConnectivityAnalyzer(self).is_connected()

    def shortest_path(self, start: Handle, end: Handle) -> Optional[List[Handle]]:
        """Find a path with the fewest edges from start to end. See analysis.pathfinding."""
        from ..analysis.pathfinding import PathFinder
        return PathFinder(self).shortest_path(start, end)
