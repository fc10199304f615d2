"""
Strongly connected components of directed graphs (Kosaraju's algorithm).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.5 (Strongly connected components).
"""

from typing import Dict, List, Set

from ..graphs import DirectedGraph, Vertex
from ..logging import get_logger
from .searching import dfs_recursive
from .strategy import DfsStrategy

logger = get_logger(__name__)


class _PostOrderStrategy(DfsStrategy):
    def __init__(self):
        self.post_times: Dict[Vertex, int] = {}
        self._timer = 0

    def for_root(self, root: Vertex) -> None:
        pass

    def on_entry(self, vertex: Vertex) -> None:
        pass

    def on_next_vertex(self, vertex: Vertex, neighbour: Vertex) -> None:
        pass

    def on_exit(self, vertex: Vertex) -> None:
        self.post_times[vertex] = self._timer
        self._timer += 1

    def on_edge_to_visited(self, vertex: Vertex, neighbour: Vertex) -> None:
        pass


class _SccStrategy(DfsStrategy):
    def __init__(self):
        self.components: List[Set[Vertex]] = []

    def for_root(self, root: Vertex) -> None:
        self.components.append(set())

    def on_entry(self, vertex: Vertex) -> None:
        self.components[-1].add(vertex)

    def on_next_vertex(self, vertex: Vertex, neighbour: Vertex) -> None:
        pass

    def on_exit(self, vertex: Vertex) -> None:
        pass

    def on_edge_to_visited(self, vertex: Vertex, neighbour: Vertex) -> None:
        pass


def find_scc(graph: DirectedGraph) -> List[Set[Vertex]]:
    """
    Find strongly connected components of a directed graph.

    Vertices are first ordered by their DFS leaving times, then searched in
    decreasing order of these times on the reversed graph; every search pass
    collects one component.

    Args:
        graph: Directed graph.

    Returns:
        List of components, each a set of vertices.

    Raises:
        TypeError: If the graph is not directed.

    Complexity: O(V + E).

    Example:
        >>> G = DirectedSimpleGraph(range(3))
        >>> _ = G.add_edge_between(G.get_vertex(0), G.get_vertex(1))
        >>> _ = G.add_edge_between(G.get_vertex(1), G.get_vertex(0))
        >>> sorted(len(component) for component in find_scc(G))
        [1, 2]
    """
    if not isinstance(graph, DirectedGraph):
        raise TypeError(
            f"Strongly connected components require a directed graph, got {type(graph).__name__}"
        )

    post_order_strategy = _PostOrderStrategy()
    dfs_recursive(graph, post_order_strategy, graph.vertices)

    vertices = sorted(
        post_order_strategy.post_times,
        key=post_order_strategy.post_times.__getitem__,
        reverse=True,
    )
    scc_strategy = _SccStrategy()
    dfs_recursive(graph.reversed_copy(), scc_strategy, vertices)

    logger.debug("Found %d strongly connected components", len(scc_strategy.components))
    return scc_strategy.components
