"""
Adjacency storage shared by all simple graphs.

Each vertex maps its neighbours to the edge record joining them. An undirected
edge is one record registered under both endpoints, so its property is stored
once and lookups from either side return the same object.
"""

from typing import Any, Dict, Hashable, Iterable, Iterator, List, Optional

from ..exceptions import ArgumentError, EdgeNotFoundError, VertexNotFoundError
from .core import Edge, Vertex


class GraphRepresentation:
    """
    Vertices, adjacency and property tables of a graph.

    Attributes:
        adjacency: Mapping vertex -> {neighbour: edge} in insertion order.

    Complexity:
        - add_vertex: O(1)
        - add_edge_to_source / add_edge_to_destination: O(1)
        - get_vertex / get_edge: O(1)
        - edges: O(V + E)
    """

    def __init__(self, vertex_ids: Optional[Iterable[Hashable]] = None):
        self.adjacency: Dict[Vertex, Dict[Vertex, Edge]] = {}
        self._vertex_properties: Dict[Vertex, Any] = {}
        self._edge_properties: Dict[Edge, Any] = {}

        for vertex_id in vertex_ids or ():
            self.adjacency[Vertex(vertex_id)] = {}

    def __len__(self) -> int:
        return len(self.adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adjacency

    @property
    def vertices(self) -> List[Vertex]:
        return list(self.adjacency)

    def edges(self) -> Iterator[Edge]:
        """Yield every registration of every edge (undirected edges twice)."""
        for neighbours in self.adjacency.values():
            yield from neighbours.values()

    def edges_sets(self) -> Iterator[Dict[Vertex, Edge]]:
        return iter(self.adjacency.values())

    def get_vertex(self, vertex_id: Hashable) -> Vertex:
        """
        Return the stored vertex with given identifier.

        Raises:
            VertexNotFoundError: If no such vertex.
        """
        vertex = Vertex(vertex_id)

        if vertex not in self.adjacency:
            raise VertexNotFoundError(f"Vertex not found for ID {vertex_id}")

        return vertex

    def get_edge(self, source_id: Hashable, destination_id: Hashable) -> Edge:
        """
        Return the stored edge leaving the source towards the destination.

        Raises:
            EdgeNotFoundError: If no such edge.
        """
        try:
            return self.adjacency[Vertex(source_id)][Vertex(destination_id)]
        except KeyError:
            raise EdgeNotFoundError(
                f"Edge not found for vertex IDs {source_id} and {destination_id}"
            ) from None

    def get_adjacent_edges(self, vertex: Vertex) -> List[Edge]:
        self._validate_vertex(vertex)
        return list(self.adjacency[vertex].values())

    def get_neighbours(self, vertex: Vertex) -> List[Vertex]:
        self._validate_vertex(vertex)
        return list(self.adjacency[vertex])

    def add_vertex(self, vertex: Vertex) -> bool:
        """Register a vertex; return False if it was already present."""
        if vertex in self.adjacency:
            return False

        self.adjacency[vertex] = {}
        return True

    def add_edge_to_source(self, edge: Edge) -> None:
        self._validate_edge(edge, existing=False)
        self.adjacency[edge.source][edge.destination] = edge

    def add_edge_to_destination(self, edge: Edge) -> None:
        self._validate_edge(edge, existing=False)
        self.adjacency[edge.destination][edge.source] = edge

    def get_vertex_property(self, vertex: Vertex) -> Any:
        self._validate_vertex(vertex)
        return self._vertex_properties.get(vertex)

    def set_vertex_property(self, vertex: Vertex, value: Any) -> None:
        self._validate_vertex(vertex)
        self._vertex_properties[vertex] = value

    def get_edge_property(self, edge: Edge) -> Any:
        self._validate_edge(edge, existing=True)
        return self._edge_properties.get(edge)

    def set_edge_property(self, edge: Edge, value: Any) -> None:
        self._validate_edge(edge, existing=True)
        self._edge_properties[edge] = value

    def _validate_vertex(self, vertex: Vertex) -> None:
        if vertex not in self.adjacency:
            raise ArgumentError(f"Vertex {vertex} does not belong to this graph")

    def _validate_edge(self, edge: Edge, existing: bool) -> None:
        if edge.source not in self.adjacency or edge.destination not in self.adjacency:
            raise ArgumentError(f"Edge {edge} does not belong to this graph")

        # Match the stored edge record, not its reversal
        if existing and self.adjacency[edge.source].get(edge.destination) != edge \
                and self.adjacency[edge.destination].get(edge.source) != edge:
            raise ArgumentError(f"Edge {edge} does not belong to this graph")
