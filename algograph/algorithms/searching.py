"""
Graph searching algorithms: BFS, iterative DFS and recursive DFS.

Each search launches from several roots in order, skipping roots reached by
an earlier pass, and reports its progress to a strategy.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Deque, Dict, Iterable, List, Set

from .. import config
from ..graphs import Graph, Vertex
from ..logging import get_logger
from .strategy import BfsStrategy, DfsStrategy

logger = get_logger(__name__)


def bfs(graph: Graph, strategy: BfsStrategy, roots: Iterable[Vertex]) -> Set[Vertex]:
    """
    Breadth-first search from given roots.

    Args:
        graph: Graph to search.
        strategy: Hooks called during the search.
        roots: Starting vertices; roots already reached are skipped.

    Returns:
        Set of all visited vertices.

    Complexity: O(V + E).

    Example:
        >>> G = DirectedSimpleGraph(range(3))
        >>> _ = G.add_edge_between(G.get_vertex(0), G.get_vertex(1))
        >>> sorted(v.id for v in bfs(G, EmptyStrategy(), [G.get_vertex(0)]))
        [0, 1]
    """
    reached: Set[Vertex] = set()
    vertex_queue: Deque[Vertex] = deque()

    for root in roots:
        if root in reached:
            continue

        strategy.for_root(root)
        vertex_queue.append(root)
        reached.add(root)

        while vertex_queue:
            vertex = vertex_queue.popleft()
            strategy.on_entry(vertex)

            for neighbour in graph.get_neighbours(vertex):
                if neighbour not in reached:
                    strategy.on_next_vertex(vertex, neighbour)
                    reached.add(neighbour)
                    vertex_queue.append(neighbour)

            strategy.on_exit(vertex)

    logger.debug("BFS visited %d of %d vertices", len(reached), graph.vertices_count)
    return reached


def dfs_iterative(graph: Graph, strategy: DfsStrategy, roots: Iterable[Vertex]) -> Set[Vertex]:
    """
    Depth-first search from given roots, using an explicit stack.

    A vertex is marked with the number of the pass that reached it, so
    ``on_edge_to_visited`` fires only for vertices of the current pass.
    ``on_exit`` is called as soon as the neighbours of a vertex are pushed.

    Args:
        graph: Graph to search.
        strategy: Hooks called during the search.
        roots: Starting vertices; roots already reached are skipped.

    Returns:
        Set of all visited vertices.

    Complexity: O(V + E).
    """
    reached: Dict[Vertex, int] = {}
    vertex_stack: List[Vertex] = []
    iteration = 1

    for root in roots:
        if root in reached:
            continue

        strategy.for_root(root)
        vertex_stack.append(root)

        while vertex_stack:
            vertex = vertex_stack.pop()

            if vertex in reached:
                continue

            reached[vertex] = iteration
            strategy.on_entry(vertex)

            for neighbour in graph.get_neighbours(vertex):
                if neighbour not in reached:
                    strategy.on_next_vertex(vertex, neighbour)
                    vertex_stack.append(neighbour)
                elif reached[neighbour] == iteration:
                    strategy.on_edge_to_visited(vertex, neighbour)

            strategy.on_exit(vertex)
            reached[root] = -iteration

        iteration += 1

    logger.debug("Iterative DFS visited %d vertices in %d passes", len(reached), iteration - 1)
    return set(reached)


def dfs_recursive(graph: Graph, strategy: DfsStrategy, roots: Iterable[Vertex]) -> Set[Vertex]:
    """
    Depth-first search from given roots, using recursion.

    A vertex is marked with the positive pass number while it is being
    processed and with the negated one after it is left, so
    ``on_edge_to_visited`` fires only for vertices on the current DFS path.
    The interpreter recursion limit is raised to the configured value for the
    duration of the search.

    Args:
        graph: Graph to search.
        strategy: Hooks called during the search.
        roots: Starting vertices; roots already reached are skipped.

    Returns:
        Set of all visited vertices.

    Complexity: O(V + E).

    Example:
        >>> G = UndirectedSimpleGraph(range(3))
        >>> _ = G.add_edge_between(G.get_vertex(1), G.get_vertex(2))
        >>> len(dfs_recursive(G, EmptyStrategy(), [G.get_vertex(1)]))
        2
    """
    reached: Dict[Vertex, int] = {}
    iteration = 1

    def dfs_step(vertex: Vertex) -> None:
        reached[vertex] = iteration
        strategy.on_entry(vertex)

        for neighbour in graph.get_neighbours(vertex):
            if neighbour not in reached:
                strategy.on_next_vertex(vertex, neighbour)
                dfs_step(neighbour)
            elif reached[neighbour] == iteration:
                strategy.on_edge_to_visited(vertex, neighbour)

        strategy.on_exit(vertex)
        reached[vertex] = -iteration

    with config.raised_recursion_limit():
        for root in roots:
            if root in reached:
                continue

            strategy.for_root(root)
            dfs_step(root)
            iteration += 1

    logger.debug("Recursive DFS visited %d vertices in %d passes", len(reached), iteration - 1)
    return set(reached)
