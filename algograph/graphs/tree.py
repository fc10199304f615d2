"""
Tree graphs.

A tree grows only by attaching a new vertex to an existing one, so it stays
connected and acyclic with exactly n - 1 edges without any runtime check.
"""

from typing import Any, Hashable, List

from ..exceptions import ArgumentError
from .core import Edge, Vertex
from .directed import DirectedSimpleGraph
from .graph import GraphProperties, VertexLike
from .undirected import UndirectedGraph, UndirectedSimpleGraph


class TreeGraph(UndirectedGraph):
    """
    Undirected tree built on top of an undirected simple graph.

    Example:
        >>> tree = TreeGraph(0)
        >>> _ = tree.add_vertex(1, tree.get_vertex(0))
        >>> tree.edges_count
        1
    """

    def __init__(self, vertex_id: Hashable):
        """
        Initialize a tree with a single vertex.

        Args:
            vertex_id: Identifier of the first vertex.
        """
        self._graph = UndirectedSimpleGraph([vertex_id])

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._graph

    @property
    def properties(self) -> GraphProperties:
        return self._graph.properties

    @property
    def vertices_count(self) -> int:
        return self._graph.vertices_count

    @property
    def edges_count(self) -> int:
        return self._graph.edges_count

    @property
    def vertices(self) -> List[Vertex]:
        return self._graph.vertices

    @property
    def edges(self) -> List[Edge]:
        return self._graph.edges

    def get_vertex(self, vertex_id: Hashable) -> Vertex:
        return self._graph.get_vertex(vertex_id)

    def get_edge(self, source: VertexLike, destination: VertexLike) -> Edge:
        return self._graph.get_edge(source, destination)

    def get_neighbours(self, vertex: Vertex) -> List[Vertex]:
        return self._graph.get_neighbours(vertex)

    def get_adjacent_edges(self, vertex: Vertex) -> List[Edge]:
        return self._graph.get_adjacent_edges(vertex)

    def get_output_degree(self, vertex: Vertex) -> int:
        return self._graph.get_output_degree(vertex)

    def get_input_degree(self, vertex: Vertex) -> int:
        return self._graph.get_input_degree(vertex)

    def as_directed(self) -> DirectedSimpleGraph:
        return self._graph.as_directed()

    def add_vertex(
        self,
        vertex: VertexLike,
        neighbour: Vertex,
        vertex_property: Any = None,
        edge_property: Any = None,
    ) -> Edge:
        """
        Add a new vertex and join it with an existing one.

        Args:
            vertex: New vertex or its identifier.
            neighbour: Existing vertex of this tree.
            vertex_property: Property of the new vertex.
            edge_property: Property of the new edge.

        Returns:
            The edge from the new vertex to the neighbour.

        Raises:
            ArgumentError: If the vertex already exists or the neighbour does not.
        """
        # Validate neighbour before adding the vertex
        if neighbour not in self._graph:
            raise ArgumentError(f"Vertex {neighbour} does not belong to this graph")

        new_vertex = self._graph.add_vertex(vertex, vertex_property)
        return self._graph.add_edge_between(new_vertex, neighbour, edge_property)
