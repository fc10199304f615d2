"""
Core value types of graphs: vertices, edges and edge weights.

Vertices and edges are immutable values. A vertex is identified only by its
identifier, an edge only by its ordered pair of endpoints, so objects created
independently compare equal to the ones stored in a graph.
"""

import math
from dataclasses import dataclass
from typing import Hashable, Iterator, Protocol, runtime_checkable

from ..exceptions import ArgumentError

INFINITY = math.inf


@dataclass(frozen=True)
class Vertex:
    """
    Graph vertex wrapping a hashable identifier.

    Attributes:
        id: Vertex identifier; equality and hashing follow it.

    Example:
        >>> Vertex(4) == Vertex(4)
        True
    """

    id: Hashable

    def __str__(self) -> str:
        return f"Vertex({self.id})"


@dataclass(frozen=True)
class Edge:
    """
    Graph edge as an ordered pair of vertices.

    Equality and hashing are direction-sensitive; undirected graphs store a
    single edge record for both endpoints and use :meth:`undirected_equals`
    when the direction must be ignored.

    Attributes:
        source: Source vertex.
        destination: Destination vertex.
    """

    source: Vertex
    destination: Vertex

    def get_neighbour(self, vertex: Vertex) -> Vertex:
        """
        Return the endpoint of this edge opposite to the given one.

        Args:
            vertex: Endpoint of this edge.

        Returns:
            The other endpoint (the vertex itself for a self-loop).

        Raises:
            ArgumentError: If the vertex is not an endpoint of this edge.
        """
        if self.source == vertex:
            return self.destination

        if self.destination == vertex:
            return self.source

        raise ArgumentError(f"Edge {self} is not adjacent to vertex {vertex}")

    def reversed(self) -> "Edge":
        """Return a new edge with swapped endpoints."""
        return Edge(self.destination, self.source)

    def undirected_equals(self, other: "Edge") -> bool:
        """Check whether both edges join the same vertices, ignoring direction."""
        return self == other or (
            self.source == other.destination and self.destination == other.source
        )

    def __iter__(self) -> Iterator[Vertex]:
        yield self.source
        yield self.destination

    def __str__(self) -> str:
        return f"Edge{{{self.source} -- {self.destination}}}"


@runtime_checkable
class Weighted(Protocol):
    """Edge property usable by weighted-path algorithms."""

    @property
    def weight(self) -> float:
        ...


@dataclass(frozen=True)
class Weight:
    """Plain edge property holding only a weight."""

    weight: float
