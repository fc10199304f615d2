"""
Graph contract and the simple graph base shared by directed and undirected graphs.

Every algorithm in algograph only relies on the :class:`Graph` interface, so
any conforming implementation can be passed to them.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterable, List, Optional, Union

from ..exceptions import ArgumentError
from .core import Edge, Vertex
from .representation import GraphRepresentation

VertexLike = Union[Vertex, Hashable]


def _vertex_id(vertex: VertexLike) -> Hashable:
    return vertex.id if isinstance(vertex, Vertex) else vertex


class GraphProperties:
    """
    Mapping-like view of vertex and edge properties of a graph.

    Example:
        >>> graph.properties[vertex] = "label"
        >>> graph.properties[edge] = Weight(2.5)
    """

    def __init__(self, representation: GraphRepresentation):
        self._representation = representation

    def __getitem__(self, item: Union[Vertex, Edge]) -> Any:
        if isinstance(item, Edge):
            return self._representation.get_edge_property(item)
        return self._representation.get_vertex_property(item)

    def __setitem__(self, item: Union[Vertex, Edge], value: Any) -> None:
        if isinstance(item, Edge):
            self._representation.set_edge_property(item, value)
        else:
            self._representation.set_vertex_property(item, value)


class Graph(ABC):
    """Interface of all graphs."""

    @property
    @abstractmethod
    def properties(self) -> GraphProperties:
        """Properties of vertices and edges."""

    @property
    @abstractmethod
    def vertices_count(self) -> int:
        """Number of vertices."""

    @property
    @abstractmethod
    def edges_count(self) -> int:
        """Number of edges."""

    @property
    @abstractmethod
    def vertices(self) -> List[Vertex]:
        """All vertices."""

    @property
    @abstractmethod
    def edges(self) -> List[Edge]:
        """All edges."""

    @abstractmethod
    def get_vertex(self, vertex_id: Hashable) -> Vertex:
        """
        Return the vertex with given identifier.

        Raises:
            VertexNotFoundError: If no such vertex.
        """

    @abstractmethod
    def get_edge(self, source: VertexLike, destination: VertexLike) -> Edge:
        """
        Return the edge between given vertices or vertex identifiers.

        Raises:
            EdgeNotFoundError: If no such edge.
        """

    @abstractmethod
    def get_neighbours(self, vertex: Vertex) -> List[Vertex]:
        """Return the neighbours of given vertex."""

    @abstractmethod
    def get_adjacent_edges(self, vertex: Vertex) -> List[Edge]:
        """Return the edges adjacent to given vertex."""

    @abstractmethod
    def get_output_degree(self, vertex: Vertex) -> int:
        """Return the output degree of given vertex."""

    @abstractmethod
    def get_input_degree(self, vertex: Vertex) -> int:
        """Return the input degree of given vertex."""

    def __len__(self) -> int:
        return self.vertices_count

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices


class SimpleGraph(Graph):
    """
    Base of simple graphs stored in a :class:`GraphRepresentation`.

    Subclasses decide how edges are registered and counted.
    """

    def __init__(self, vertex_ids: Optional[Iterable[Hashable]] = None):
        """
        Initialize a graph.

        Args:
            vertex_ids: Identifiers of initial vertices.
        """
        self._representation = GraphRepresentation(vertex_ids)

    @property
    def properties(self) -> GraphProperties:
        return GraphProperties(self._representation)

    @property
    def vertices_count(self) -> int:
        return len(self._representation)

    @property
    def vertices(self) -> List[Vertex]:
        return self._representation.vertices

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._representation

    def get_vertex(self, vertex_id: Hashable) -> Vertex:
        return self._representation.get_vertex(vertex_id)

    def get_edge(self, source: VertexLike, destination: VertexLike) -> Edge:
        return self._representation.get_edge(_vertex_id(source), _vertex_id(destination))

    def get_neighbours(self, vertex: Vertex) -> List[Vertex]:
        return self._representation.get_neighbours(vertex)

    def get_adjacent_edges(self, vertex: Vertex) -> List[Edge]:
        return self._representation.get_adjacent_edges(vertex)

    def add_vertex(self, vertex: VertexLike, property: Any = None) -> Vertex:
        """
        Add a new vertex with given property.

        Args:
            vertex: New vertex or its identifier.
            property: Vertex property.

        Returns:
            The new vertex.

        Raises:
            ArgumentError: If the vertex already exists.
        """
        if not isinstance(vertex, Vertex):
            vertex = Vertex(vertex)

        if not self._representation.add_vertex(vertex):
            raise ArgumentError(f"Vertex {vertex} already exists")

        self._representation.set_vertex_property(vertex, property)
        return vertex

    def add_edge_between(
        self, source: Vertex, destination: Vertex, property: Any = None
    ) -> Edge:
        """
        Add a new edge between given vertices.

        Args:
            source: Source vertex.
            destination: Destination vertex.
            property: Edge property.

        Returns:
            The new edge.

        Raises:
            ArgumentError: If the edge already exists or a vertex is foreign.
        """
        return self.add_edge(Edge(source, destination), property)

    @abstractmethod
    def add_edge(self, edge: Edge, property: Any = None) -> Edge:
        """Add a prepared edge with given property."""
