"""
Directed graphs.

An edge is registered only in the adjacency of its source, so neighbours are
the destinations of outgoing edges.
"""

from abc import abstractmethod
from typing import Any, List

from ..exceptions import ArgumentError, EdgeNotFoundError
from ..logging import get_logger
from .core import Edge, Vertex
from .graph import Graph, SimpleGraph
from .representation import GraphRepresentation

logger = get_logger(__name__)


class DirectedGraph(Graph):
    """Interface of directed graphs."""

    @abstractmethod
    def reverse(self) -> None:
        """Reverse directions of all edges in place."""

    @abstractmethod
    def reversed_copy(self) -> "DirectedGraph":
        """Return a copy of this graph with directions of all edges reversed."""


class DirectedSimpleGraph(SimpleGraph, DirectedGraph):
    """
    Directed simple graph.

    At most one edge leads from a vertex to another; self-loops are allowed.

    Example:
        >>> G = DirectedSimpleGraph(range(3))
        >>> _ = G.add_edge_between(G.get_vertex(0), G.get_vertex(1))
        >>> G.get_neighbours(G.get_vertex(1))
        []
    """

    @property
    def edges_count(self) -> int:
        return sum(len(edges) for edges in self._representation.edges_sets())

    @property
    def edges(self) -> List[Edge]:
        return list(self._representation.edges())

    def get_output_degree(self, vertex: Vertex) -> int:
        return len(self._representation.get_adjacent_edges(vertex))

    def get_input_degree(self, vertex: Vertex) -> int:
        if vertex not in self._representation:
            raise ArgumentError(f"Vertex {vertex} does not belong to this graph")

        return sum(1 for edge in self._representation.edges() if edge.destination == vertex)

    def add_edge(self, edge: Edge, property: Any = None) -> Edge:
        try:
            existing_edge = self.get_edge(edge.source, edge.destination)
        except EdgeNotFoundError:
            self._representation.add_edge_to_source(edge)
            self._representation.set_edge_property(edge, property)
            return edge

        raise ArgumentError(f"Edge {existing_edge} already exists")

    def reverse(self) -> None:
        new_representation = GraphRepresentation(vertex.id for vertex in self.vertices)

        for vertex in self.vertices:
            new_representation.set_vertex_property(
                vertex, self._representation.get_vertex_property(vertex)
            )

        for edge in self.edges:
            new_edge = edge.reversed()
            new_representation.add_edge_to_source(new_edge)
            new_representation.set_edge_property(
                new_edge, self._representation.get_edge_property(edge)
            )

        logger.debug("Reversed %d edges in place", self.edges_count)
        self._representation = new_representation

    def reversed_copy(self) -> "DirectedSimpleGraph":
        reversed_graph = DirectedSimpleGraph(vertex.id for vertex in self.vertices)

        for vertex in self.vertices:
            reversed_graph.properties[vertex] = self.properties[vertex]

        for edge in self.edges:
            reversed_graph.add_edge(edge.reversed(), self.properties[edge])

        return reversed_graph
