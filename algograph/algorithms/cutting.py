"""
Cutting of undirected graphs: bridges (edge cut) and separators (vertex cut).

Both are computed from low values gathered during one recursive DFS over all
vertices. The low value of a vertex is the smallest depth reachable from its
DFS subtree with at most one back edge.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Problem 22-2 (Articulation points, bridges, and biconnected components).
"""

from typing import Dict, List

from ..graphs import Edge, UndirectedGraph, Vertex
from ..logging import get_logger
from .searching import dfs_recursive
from .strategy import DfsStrategy

logger = get_logger(__name__)


class _CuttingStrategy(DfsStrategy):
    def __init__(self):
        self.dfs_parents: Dict[Vertex, Vertex] = {}
        self.dfs_children: Dict[Vertex, List[Vertex]] = {}
        self.dfs_depths: Dict[Vertex, int] = {}
        self.low_values: Dict[Vertex, int] = {}
        self._depth = 0

    def for_root(self, root: Vertex) -> None:
        pass

    def on_entry(self, vertex: Vertex) -> None:
        self.dfs_depths[vertex] = self._depth
        self.low_values[vertex] = self._depth
        self.dfs_children.setdefault(vertex, [])
        self._depth += 1

    def on_next_vertex(self, vertex: Vertex, neighbour: Vertex) -> None:
        self.dfs_parents[neighbour] = vertex
        self.dfs_children[vertex].append(neighbour)

    def on_exit(self, vertex: Vertex) -> None:
        for child in self.dfs_children[vertex]:
            self.low_values[vertex] = min(self.low_values[vertex], self.low_values[child])

        self._depth -= 1

    def on_edge_to_visited(self, vertex: Vertex, neighbour: Vertex) -> None:
        # Skip the tree edge back to the DFS parent
        if neighbour != self.dfs_parents.get(vertex):
            self.low_values[vertex] = min(self.low_values[vertex], self.dfs_depths[neighbour])

    def has_bridge(self, vertex: Vertex) -> bool:
        return not self.is_dfs_root(vertex) and self.low_values[vertex] == self.dfs_depths[vertex]

    def is_separator(self, vertex: Vertex) -> bool:
        if self.is_dfs_root(vertex):
            return len(self.dfs_children[vertex]) > 1

        return any(
            self.low_values[child] >= self.dfs_depths[vertex]
            for child in self.dfs_children[vertex]
        )

    def is_dfs_root(self, vertex: Vertex) -> bool:
        return self.dfs_depths[vertex] == 0


def _search(graph: UndirectedGraph) -> _CuttingStrategy:
    if not isinstance(graph, UndirectedGraph):
        raise TypeError(f"Cutting requires an undirected graph, got {type(graph).__name__}")

    strategy = _CuttingStrategy()
    dfs_recursive(graph, strategy, graph.vertices)
    return strategy


def find_edge_cut(graph: UndirectedGraph) -> List[Edge]:
    """
    Find all bridges of an undirected graph.

    A bridge is an edge whose removal increases the number of connected
    components.

    Args:
        graph: Undirected graph.

    Returns:
        Bridges, in order of their lower endpoints in the graph.

    Raises:
        TypeError: If the graph is not undirected.

    Complexity: O(V + E).

    Example:
        >>> G = UndirectedSimpleGraph(range(3))
        >>> _ = G.add_edge_between(G.get_vertex(0), G.get_vertex(1))
        >>> [str(edge) for edge in find_edge_cut(G)]
        ['Edge{Vertex(0) -- Vertex(1)}']
    """
    strategy = _search(graph)
    bridges = [
        graph.get_edge(vertex, strategy.dfs_parents[vertex])
        for vertex in graph.vertices
        if strategy.has_bridge(vertex)
    ]

    logger.debug("Found %d bridges", len(bridges))
    return bridges


def find_vertex_cut(graph: UndirectedGraph) -> List[Vertex]:
    """
    Find all separators (articulation points) of an undirected graph.

    A separator is a vertex whose removal increases the number of connected
    components.

    Args:
        graph: Undirected graph.

    Returns:
        Separators, in graph order.

    Raises:
        TypeError: If the graph is not undirected.

    Complexity: O(V + E).
    """
    strategy = _search(graph)
    separators = [vertex for vertex in graph.vertices if strategy.is_separator(vertex)]

    logger.debug("Found %d separators", len(separators))
    return separators
