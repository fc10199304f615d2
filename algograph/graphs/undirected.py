"""
Undirected graphs.

An edge is registered in the adjacency of both endpoints as a single record,
so it is found from either side and listed only once.
"""

from abc import abstractmethod
from typing import Any, List

from ..exceptions import ArgumentError, EdgeNotFoundError
from .core import Edge, Vertex
from .directed import DirectedSimpleGraph
from .graph import Graph, SimpleGraph


class UndirectedGraph(Graph):
    """Interface of undirected graphs."""

    @abstractmethod
    def as_directed(self) -> DirectedSimpleGraph:
        """Return a directed graph with both directions of every edge."""


class UndirectedSimpleGraph(SimpleGraph, UndirectedGraph):
    """
    Undirected simple graph.

    At most one edge joins two vertices; a self-loop is registered once and
    counts once in degree and edge count.

    Example:
        >>> G = UndirectedSimpleGraph(range(3))
        >>> edge = G.add_edge_between(G.get_vertex(0), G.get_vertex(1))
        >>> G.get_edge(1, 0) is edge
        True
    """

    @property
    def edges_count(self) -> int:
        return len(self.edges)

    @property
    def edges(self) -> List[Edge]:
        return list(dict.fromkeys(self._representation.edges()))

    def get_output_degree(self, vertex: Vertex) -> int:
        return len(self._representation.get_adjacent_edges(vertex))

    def get_input_degree(self, vertex: Vertex) -> int:
        return len(self._representation.get_adjacent_edges(vertex))

    def add_edge(self, edge: Edge, property: Any = None) -> Edge:
        try:
            existing_edge = self.get_edge(edge.source, edge.destination)
        except EdgeNotFoundError:
            self._representation.add_edge_to_source(edge)
            self._representation.add_edge_to_destination(edge)
            self._representation.set_edge_property(edge, property)
            return edge

        raise ArgumentError(f"Edge {existing_edge} already exists")

    def as_directed(self) -> DirectedSimpleGraph:
        directed_graph = DirectedSimpleGraph(vertex.id for vertex in self.vertices)

        for vertex in self.vertices:
            directed_graph.properties[vertex] = self.properties[vertex]

        for edge in self.edges:
            directed_graph.add_edge(edge, self.properties[edge])

            if edge.source != edge.destination:
                directed_graph.add_edge(edge.reversed(), self.properties[edge])

        return directed_graph
