"""
Maximum matching in bipartite graphs (Hopcroft-Karp algorithm).

References:
    - Hopcroft, Karp. "An n^5/2 algorithm for maximum matchings in bipartite
      graphs", SIAM Journal on Computing 2(4), 1973.
"""

from collections import deque
from typing import Deque, Dict, List, Set

from .. import config
from ..exceptions import ArgumentError
from ..graphs import INFINITY, MultipartiteGraph, Vertex
from ..logging import get_logger

logger = get_logger(__name__)


class _MatchAugmenter:
    def __init__(self, graph: MultipartiteGraph):
        if graph.groups_count != 2:
            raise ArgumentError(f"Graph is not bipartite, it has {graph.groups_count} groups")

        self.graph = graph
        self.matching: Dict[Vertex, Vertex] = {}

    def augment_match(self) -> bool:
        visited: Set[Vertex] = set()
        distances = {vertex: INFINITY for vertex in self.graph.vertices}

        self._bfs(distances)

        was_augmented = False

        # Try to augment from every unmatched vertex
        for vertex in self._unmatched_vertices():
            was_augmented = self._dfs(vertex, visited, distances) or was_augmented

        return was_augmented

    def _unmatched_vertices(self) -> List[Vertex]:
        return [
            vertex for vertex in self.graph.get_vertices_from_group(1)
            if vertex not in self.matching
        ]

    def _bfs(self, distances: Dict[Vertex, float]) -> None:
        vertex_queue: Deque[Vertex] = deque()

        for vertex in self._unmatched_vertices():
            distances[vertex] = 0.0
            vertex_queue.append(vertex)

        while vertex_queue:
            vertex = vertex_queue.popleft()

            for neighbour in self.graph.get_neighbours(vertex):
                matched = self.matching.get(neighbour)

                if matched is not None and distances[matched] == INFINITY:
                    distances[matched] = distances[vertex] + 1
                    vertex_queue.append(matched)

    def _dfs(self, vertex: Vertex, visited: Set[Vertex], distances: Dict[Vertex, float]) -> bool:
        visited.add(vertex)

        for neighbour in self.graph.get_neighbours(vertex):
            matched = self.matching.get(neighbour)

            if matched is None or (
                matched not in visited
                and distances[matched] == distances[vertex] + 1
                and self._dfs(matched, visited, distances)
            ):
                self.matching[vertex] = neighbour
                self.matching[neighbour] = vertex
                return True

        return False


def match(graph: MultipartiteGraph) -> Dict[Vertex, Vertex]:
    """
    Find a maximum matching in a bipartite graph.

    Args:
        graph: Multipartite graph with exactly two groups.

    Returns:
        Dictionary mapping every matched vertex to its partner; both vertices
        of a matched pair are keys.

    Raises:
        ArgumentError: If the graph does not have exactly two groups.

    Complexity: O(E sqrt(V)).

    Example:
        >>> G = MultipartiteGraph(2, [[0], [1]])
        >>> _ = G.add_edge_between(G.get_vertex(0), G.get_vertex(1))
        >>> match(G)[G.get_vertex(0)]
        Vertex(id=1)
    """
    augmenter = _MatchAugmenter(graph)
    rounds = 0

    with config.raised_recursion_limit():
        while augmenter.augment_match():
            rounds += 1

    logger.debug("Matched %d pairs in %d rounds", len(augmenter.matching) // 2, rounds)
    return augmenter.matching
