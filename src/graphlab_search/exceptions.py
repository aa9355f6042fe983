"""Custom exceptions for graphlab-search."""


class GraphSearchError(Exception):
    """Base exception for graph and search operations."""


class NodeNotFoundError(GraphSearchError, KeyError):
    """Raised when a node key is not present in a graph."""


class DuplicateNodeError(GraphSearchError, ValueError):
    """Raised when a node key is added to a graph twice."""


class GraphNotFoundError(GraphSearchError):
    """Raised when a stored graph cannot be found."""
