"""
Single-source shortest paths: Bellman-Ford and Dijkstra.

Edge weights are read from edge properties, which must be :class:`Weighted`.
Unreached vertices have distance ``INFINITY``.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.1 (Bellman-Ford) and 24.3 (Dijkstra).
"""

import heapq
from typing import Dict, List, Set, Tuple

from ..exceptions import ArgumentError, NegativeCycleError, NegativeWeightError
from ..graphs import INFINITY, DirectedGraph, Graph, Vertex
from ..logging import get_logger
from .utils import edge_weight, weighted_edges

logger = get_logger(__name__)


def _initial_distances(graph: Graph, source: Vertex) -> Dict[Vertex, float]:
    if source not in graph:
        raise ArgumentError(f"Vertex {source} does not belong to this graph")

    distances = {vertex: INFINITY for vertex in graph.vertices}
    distances[source] = 0.0
    return distances


def bellman_ford(graph: DirectedGraph, source: Vertex) -> Dict[Vertex, float]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Allows negative edge weights. Undirected graphs can be processed after
    conversion with ``as_directed()``.

    Args:
        graph: Directed graph with weighted edge properties.
        source: Source vertex.

    Returns:
        Dictionary mapping vertex -> shortest distance from source.

    Raises:
        TypeError: If the graph is not directed.
        ArgumentError: If the source does not belong to the graph.
        NegativeCycleError: If a cycle with negative weight is reachable from source.

    Complexity: O(VE).

    Example:
        >>> G = DirectedSimpleGraph(range(3))
        >>> _ = G.add_edge_between(G.get_vertex(0), G.get_vertex(1), Weight(2.0))
        >>> _ = G.add_edge_between(G.get_vertex(1), G.get_vertex(2), Weight(-1.0))
        >>> bellman_ford(G, G.get_vertex(0))[G.get_vertex(2)]
        1.0
    """
    if not isinstance(graph, DirectedGraph):
        raise TypeError(f"Bellman-Ford requires a directed graph, got {type(graph).__name__}")

    distances = _initial_distances(graph, source)
    edges = list(weighted_edges(graph))

    # Relax edges n-1 times
    for _ in range(graph.vertices_count - 1):
        for edge, weight in edges:
            if distances[edge.source] + weight < distances[edge.destination]:
                distances[edge.destination] = distances[edge.source] + weight

    for edge, weight in edges:
        if distances[edge.source] < INFINITY \
                and distances[edge.source] + weight < distances[edge.destination]:
            logger.debug("Edge %s still relaxes after %d rounds", edge, graph.vertices_count - 1)
            raise NegativeCycleError("Graph contains a cycle with negative weight")

    return distances


def dijkstra(graph: Graph, source: Vertex) -> Dict[Vertex, float]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Works for directed and undirected graphs with non-negative edge weights.

    Args:
        graph: Graph with weighted edge properties.
        source: Source vertex.

    Returns:
        Dictionary mapping vertex -> shortest distance from source.

    Raises:
        ArgumentError: If the source does not belong to the graph.
        NegativeWeightError: If any edge has negative weight.

    Complexity: O(E log V) using binary heap priority queue.
    """
    for edge, weight in weighted_edges(graph):
        if weight < 0.0:
            logger.debug("Edge %s has negative weight %s", edge, weight)
            raise NegativeWeightError(f"Graph contains an edge with negative weight: {edge}")

    distances = _initial_distances(graph, source)
    visited: Set[Vertex] = set()
    # Heap entries: (distance, counter, vertex); stale entries are skipped when popped
    vertex_heap: List[Tuple[float, int, Vertex]] = [(0.0, 0, source)]
    counter = 1

    while vertex_heap:
        _, _, vertex = heapq.heappop(vertex_heap)

        if vertex in visited:
            continue

        visited.add(vertex)

        for edge in graph.get_adjacent_edges(vertex):
            neighbour = edge.get_neighbour(vertex)
            new_distance = distances[vertex] + edge_weight(graph, edge)

            if new_distance < distances[neighbour]:
                distances[neighbour] = new_distance
                heapq.heappush(vertex_heap, (new_distance, counter, neighbour))
                counter += 1

    logger.debug("Dijkstra reached %d of %d vertices", len(visited), graph.vertices_count)
    return distances
