"""
Multipartite graphs.

Vertices are split into numbered groups and edges may only join vertices from
different groups. A bipartite graph is a multipartite graph with two groups.
"""

from typing import Any, Dict, Hashable, Iterable, List, Optional

from ..exceptions import ArgumentError, GraphPartitionError, GroupIndexError
from .core import Edge, Vertex
from .directed import DirectedSimpleGraph
from .graph import GraphProperties, VertexLike
from .undirected import UndirectedGraph, UndirectedSimpleGraph


class MultipartiteGraph(UndirectedGraph):
    """
    Undirected graph with vertices partitioned into groups.

    Attributes:
        groups_count: Number of groups, numbered from 0.

    Example:
        >>> G = MultipartiteGraph(2, [[0, 2], [1, 3]])
        >>> _ = G.add_edge_between(G.get_vertex(0), G.get_vertex(1))
        >>> G.add_edge_between(G.get_vertex(0), G.get_vertex(2))
        Traceback (most recent call last):
        ...
        algograph.exceptions.GraphPartitionError: ...
    """

    def __init__(
        self, groups_count: int, vertex_ids: Optional[Iterable[Iterable[Hashable]]] = None
    ):
        """
        Initialize a multipartite graph.

        Args:
            groups_count: Number of groups.
            vertex_ids: Identifiers of initial vertices for consecutive groups.

        Raises:
            ArgumentError: If groups_count is not positive or too many groups
                of vertices are given.
        """
        if groups_count <= 0:
            raise ArgumentError("Number of groups cannot be negative nor zero")

        self.groups_count = groups_count
        self._graph = UndirectedSimpleGraph()
        self._vertex_groups: Dict[Vertex, int] = {}

        if vertex_ids is not None:
            groups = [list(group_ids) for group_ids in vertex_ids]

            if len(groups) > groups_count:
                raise ArgumentError(
                    f"Cannot add vertices to group {len(groups)}, "
                    f"graph contains only {groups_count} groups"
                )

            for group_number, group_ids in enumerate(groups):
                for vertex_id in group_ids:
                    self.add_vertex(group_number, vertex_id)

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

    def get_vertices_from_group(self, group_number: int) -> List[Vertex]:
        """
        Return the vertices of given group.

        Raises:
            GroupIndexError: If the group number is invalid.
        """
        self._validate_group(group_number)
        return [vertex for vertex, group in self._vertex_groups.items() if group == group_number]

    def add_vertex(self, group_number: int, vertex: VertexLike, property: Any = None) -> Vertex:
        """
        Add a new vertex to given group.

        Args:
            group_number: Group of the new vertex.
            vertex: New vertex or its identifier.
            property: Vertex property.

        Returns:
            The new vertex.

        Raises:
            GroupIndexError: If the group number is invalid.
            ArgumentError: If the vertex already exists.
        """
        self._validate_group(group_number)

        new_vertex = self._graph.add_vertex(vertex, property)
        self._vertex_groups[new_vertex] = group_number
        return new_vertex

    def add_edge_between(
        self, source: Vertex, destination: Vertex, property: Any = None
    ) -> Edge:
        """
        Add a new edge between vertices from different groups.

        Raises:
            GraphPartitionError: If both vertices belong to the same group.
            ArgumentError: If a vertex is foreign or the edge already exists.
        """
        return self.add_edge(Edge(source, destination), property)

    def add_edge(self, edge: Edge, property: Any = None) -> Edge:
        if self._are_in_same_group(edge.source, edge.destination):
            raise GraphPartitionError("Cannot create an edge between vertices in the same group")

        return self._graph.add_edge(edge, property)

    def _are_in_same_group(self, vertex1: Vertex, vertex2: Vertex) -> bool:
        for vertex in (vertex1, vertex2):
            if vertex not in self._vertex_groups:
                raise ArgumentError(f"Vertex {vertex} does not belong to this graph")

        return self._vertex_groups[vertex1] == self._vertex_groups[vertex2]

    def _validate_group(self, group_number: int) -> None:
        if not 0 <= group_number < self.groups_count:
            raise GroupIndexError(
                f"Invalid group number {group_number}, "
                f"graph contains only {self.groups_count} groups"
            )
