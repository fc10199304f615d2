"""
Topological sorting of directed acyclic graphs.

Two independent algorithms are provided. Both reject cyclic graphs, but they
may produce different valid orders.

References:
    - Kahn, A. B. "Topological sorting of large networks", CACM 5(11), 1962.
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.4 (Topological sort).
"""

import heapq
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

from ..exceptions import CyclicGraphError
from ..graphs import DirectedGraph, Vertex
from ..logging import get_logger
from .searching import dfs_recursive
from .strategy import DfsStrategy

logger = get_logger(__name__)


def _validate_directed(graph: DirectedGraph) -> None:
    if not isinstance(graph, DirectedGraph):
        raise TypeError(f"Topological sort requires a directed graph, got {type(graph).__name__}")


def inputs_topological_sort(
    graph: DirectedGraph, key: Optional[Callable[[Hashable], Any]] = None
) -> List[Vertex]:
    """
    Topological sort by repeatedly removing vertices with no incoming edges.

    Among the vertices available at any step the one with the smallest key of
    its identifier is taken first, so the result is deterministic.

    Args:
        graph: Directed graph.
        key: Function mapping a vertex identifier to a comparable value.
            Defaults to the identifier itself.

    Returns:
        Vertices in topological order.

    Raises:
        TypeError: If the graph is not directed.
        CyclicGraphError: If the graph contains a cycle.

    Complexity: O((V + E) log V).

    Example:
        >>> G = DirectedSimpleGraph(range(3))
        >>> _ = G.add_edge_between(G.get_vertex(2), G.get_vertex(0))
        >>> [vertex.id for vertex in inputs_topological_sort(G)]
        [1, 2, 0]
    """
    _validate_directed(graph)

    if graph.edges_count == 0:
        return graph.vertices

    if key is None:
        key = lambda vertex_id: vertex_id  # noqa: E731

    input_degrees: Dict[Vertex, int] = {vertex: 0 for vertex in graph.vertices}

    for edge in graph.edges:
        input_degrees[edge.destination] += 1

    # Heap entries: (key, insertion counter, vertex); the counter keeps vertices uncompared
    vertex_heap: List[Tuple[Any, int, Vertex]] = []
    counter = 0

    for vertex, degree in input_degrees.items():
        if degree == 0:
            heapq.heappush(vertex_heap, (key(vertex.id), counter, vertex))
            counter += 1

    order: List[Vertex] = []

    while vertex_heap:
        _, _, vertex = heapq.heappop(vertex_heap)
        order.append(vertex)

        for neighbour in graph.get_neighbours(vertex):
            input_degrees[neighbour] -= 1

            if input_degrees[neighbour] == 0:
                heapq.heappush(vertex_heap, (key(neighbour.id), counter, neighbour))
                counter += 1

    if len(order) != graph.vertices_count:
        logger.debug("Ordered %d of %d vertices, graph is cyclic", len(order), graph.vertices_count)
        raise CyclicGraphError("Given graph contains a cycle")

    return order


class _TopologicalStrategy(DfsStrategy):
    def __init__(self):
        self.order: List[Vertex] = []

    def for_root(self, root: Vertex) -> None:
        pass

    def on_entry(self, vertex: Vertex) -> None:
        pass

    def on_next_vertex(self, vertex: Vertex, neighbour: Vertex) -> None:
        pass

    def on_exit(self, vertex: Vertex) -> None:
        self.order.append(vertex)

    def on_edge_to_visited(self, vertex: Vertex, neighbour: Vertex) -> None:
        logger.debug("Edge from %s to %s closes a cycle", vertex, neighbour)
        raise CyclicGraphError("Given graph contains a cycle")


def dfs_topological_sort(graph: DirectedGraph) -> List[Vertex]:
    """
    Topological sort as the reversed order of leaving vertices in DFS.

    Args:
        graph: Directed graph.

    Returns:
        Vertices in topological order.

    Raises:
        TypeError: If the graph is not directed.
        CyclicGraphError: If the graph contains a cycle.

    Complexity: O(V + E).
    """
    _validate_directed(graph)

    if graph.edges_count == 0:
        return graph.vertices

    strategy = _TopologicalStrategy()
    dfs_recursive(graph, strategy, graph.vertices)
    return strategy.order[::-1]
