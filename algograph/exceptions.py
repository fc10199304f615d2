"""Exceptions raised by graph structures and algorithms.

Every error derives from :class:`GraphError` and from the builtin exception
that matches its kind, so callers may catch either ``GraphError`` or the
usual ``KeyError`` / ``ValueError`` / ``IndexError``.
"""


class GraphError(Exception):
    """Base exception for algograph errors."""

    pass


class NotFoundError(GraphError, KeyError):
    """Raised when a lookup of a graph element fails."""

    def __str__(self) -> str:
        # Return the message without KeyError quoting
        return str(self.args[0]) if self.args else ""


class VertexNotFoundError(NotFoundError):
    """Raised when no vertex has the requested identifier."""

    pass


class EdgeNotFoundError(NotFoundError):
    """Raised when no edge joins the requested vertices."""

    pass


class ArgumentError(GraphError, ValueError):
    """Raised on structural violations.

    Duplicate vertices or edges, edges referencing vertices from another graph
    and property access for foreign elements all end up here.
    """

    pass


class GraphPartitionError(ArgumentError):
    """Raised when an edge would join two vertices of the same group."""

    pass


class GroupIndexError(GraphError, IndexError):
    """Raised when a group number is outside of a multipartite graph."""

    pass


class CyclicGraphError(GraphError, ValueError):
    """Raised when an acyclic graph is required but a cycle was found."""

    pass


class NegativeCycleError(GraphError, ValueError):
    """Raised when a graph contains a cycle of negative total weight."""

    pass


class NegativeWeightError(GraphError, ValueError):
    """Raised when an algorithm requiring non-negative weights meets a negative one."""

    pass
