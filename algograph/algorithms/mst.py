"""
Minimum spanning tree algorithms: Kruskal and Prim.

Kruskal uses disjoint sets. Prim uses a priority queue. Both return a new
undirected graph with all vertices of the input graph and the tree edges
with their properties.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal), 23.2 (Prim).
"""

import heapq
from typing import List, Set, Tuple

from ..exceptions import ArgumentError
from ..graphs import Edge, UndirectedGraph, UndirectedSimpleGraph, Vertex
from ..logging import get_logger
from ..structures import DisjointSets
from .utils import edge_weight

logger = get_logger(__name__)


def _validate_undirected(graph: UndirectedGraph) -> None:
    if not isinstance(graph, UndirectedGraph):
        raise TypeError(
            f"Minimal spanning tree requires an undirected graph, got {type(graph).__name__}"
        )


def _empty_tree(graph: UndirectedGraph) -> UndirectedSimpleGraph:
    return UndirectedSimpleGraph(vertex.id for vertex in graph.vertices)


def kruskal(graph: UndirectedGraph) -> UndirectedSimpleGraph:
    """
    Kruskal's algorithm for minimum spanning tree.

    For disconnected graphs, returns minimum spanning forest (one tree per
    component).

    Args:
        graph: Undirected graph with weighted edge properties.

    Returns:
        Undirected graph with all vertices and the edges of the tree.

    Raises:
        TypeError: If the graph is not undirected.

    Complexity: O(E log V).

    Example:
        >>> G = UndirectedSimpleGraph(['A', 'B', 'C'])
        >>> _ = G.add_edge_between(G.get_vertex('A'), G.get_vertex('B'), Weight(1.0))
        >>> _ = G.add_edge_between(G.get_vertex('B'), G.get_vertex('C'), Weight(2.0))
        >>> _ = G.add_edge_between(G.get_vertex('A'), G.get_vertex('C'), Weight(3.0))
        >>> kruskal(G).edges_count
        2
    """
    _validate_undirected(graph)

    mst = _empty_tree(graph)
    vertex_sets = DisjointSets(graph.vertices)
    # Heap entries: (weight, counter, edge); the counter keeps edges uncompared
    edge_heap: List[Tuple[float, int, Edge]] = [
        (edge_weight(graph, edge), counter, edge) for counter, edge in enumerate(graph.edges)
    ]
    heapq.heapify(edge_heap)

    while len(vertex_sets) > 1 and edge_heap:
        _, _, edge = heapq.heappop(edge_heap)

        if not vertex_sets.is_same_set(edge.source, edge.destination):
            mst.add_edge(edge, graph.properties[edge])
            vertex_sets.union_set(edge.source, edge.destination)

    logger.debug("Kruskal selected %d edges for %d vertices", mst.edges_count, mst.vertices_count)
    return mst


def prim(graph: UndirectedGraph, source: Vertex) -> UndirectedSimpleGraph:
    """
    Prim's algorithm for minimum spanning tree.

    Grows the tree from a source vertex by repeatedly taking the lightest
    edge to an unvisited vertex. Vertices not connected to the source stay
    isolated in the result.

    Args:
        graph: Undirected graph with weighted edge properties.
        source: Starting vertex.

    Returns:
        Undirected graph with all vertices and the edges of the tree.

    Raises:
        TypeError: If the graph is not undirected.
        ArgumentError: If the source does not belong to the graph.

    Complexity: O(E log V) using binary heap.
    """
    _validate_undirected(graph)

    if source not in graph:
        raise ArgumentError(f"Vertex {source} does not belong to this graph")

    mst = _empty_tree(graph)
    visited: Set[Vertex] = {source}
    # Heap entries: (weight, counter, edge, unvisited endpoint)
    heap: List[Tuple[float, int, Edge, Vertex]] = []
    counter = 0

    for edge in graph.get_adjacent_edges(source):
        neighbour = edge.get_neighbour(source)

        if neighbour != source:
            heapq.heappush(heap, (edge_weight(graph, edge), counter, edge, neighbour))
            counter += 1

    while heap:
        _, _, edge, vertex = heapq.heappop(heap)

        if vertex in visited:
            continue

        visited.add(vertex)
        mst.add_edge(edge, graph.properties[edge])

        for adjacent_edge in graph.get_adjacent_edges(vertex):
            neighbour = adjacent_edge.get_neighbour(vertex)

            if neighbour not in visited:
                heapq.heappush(heap, (edge_weight(graph, adjacent_edge), counter, adjacent_edge, neighbour))
                counter += 1

    logger.debug("Prim selected %d edges from %s", mst.edges_count, source)
    return mst
