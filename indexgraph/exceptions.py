"""Custom exceptions for indexgraph."""


class GraphError(Exception):
    """Base exception for graph operations."""


class EdgeNotFoundError(GraphError):
    """Raised when removing an edge that does not exist.

    This is a precondition violation, not an expected outcome. Callers that
    cannot guarantee the edge is present must check ``edge_exists`` first.
    """


class InvalidHandleError(GraphError, IndexError):
    """Raised when a handle does not refer to a vertex of the graph."""
