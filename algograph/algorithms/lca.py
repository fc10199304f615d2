"""
Lowest common ancestors in a rooted tree with binary lifting.

References:
    - Bender, Farach-Colton. "The LCA Problem Revisited", LATIN 2000.
"""

import math
from typing import Dict, List, Optional

from ..exceptions import ArgumentError
from ..graphs import TreeGraph, Vertex
from ..logging import get_logger
from .searching import dfs_recursive
from .strategy import DfsStrategy

logger = get_logger(__name__)


class _LcaStrategy(DfsStrategy):
    def __init__(self):
        self.parents: Dict[Vertex, Vertex] = {}
        self.pre_times: Dict[Vertex, int] = {}
        self.post_times: Dict[Vertex, int] = {}
        self._timer = 0

    def for_root(self, root: Vertex) -> None:
        self.parents[root] = root

    def on_entry(self, vertex: Vertex) -> None:
        self.pre_times[vertex] = self._timer
        self._timer += 1

    def on_next_vertex(self, vertex: Vertex, neighbour: Vertex) -> None:
        self.parents[neighbour] = vertex

    def on_exit(self, vertex: Vertex) -> None:
        self.post_times[vertex] = self._timer
        self._timer += 1

    def on_edge_to_visited(self, vertex: Vertex, neighbour: Vertex) -> None:
        pass


class LowestCommonAncestor:
    """
    Lowest common ancestor queries on a tree rooted at a chosen vertex.

    The jump table is built on the first query and reused afterwards. It is
    rebuilt when vertices were added to the tree since. Not safe for
    concurrent use.

    Attributes:
        graph: The tree.
        root: Root of the tree.

    Complexity:
        - first query: O(n log n)
        - next queries: O(log n)

    Example:
        >>> tree = TreeGraph(0)
        >>> _ = tree.add_vertex(1, tree.get_vertex(0))
        >>> _ = tree.add_vertex(2, tree.get_vertex(0))
        >>> lca = LowestCommonAncestor(tree, tree.get_vertex(0))
        >>> lca.find_lca(tree.get_vertex(1), tree.get_vertex(2))
        Vertex(id=0)
    """

    def __init__(self, graph: TreeGraph, root: Vertex):
        """
        Args:
            graph: The tree.
            root: Root of the tree.

        Raises:
            ArgumentError: If the root does not belong to the tree.
        """
        if root not in graph:
            raise ArgumentError(f"Vertex {root} does not belong to this graph")

        self.graph = graph
        self.root = root
        self._strategy = _LcaStrategy()
        self._paths: Optional[Dict[Vertex, List[Vertex]]] = None

    def find_lca(self, vertex1: Vertex, vertex2: Vertex) -> Vertex:
        """
        Find the lowest common ancestor of two vertices.

        Args:
            vertex1: First vertex.
            vertex2: Second vertex.

        Returns:
            The deepest vertex having both vertices in its subtree.

        Raises:
            ArgumentError: If either vertex does not belong to the tree.
        """
        for vertex in (vertex1, vertex2):
            if vertex not in self.graph:
                raise ArgumentError(f"Vertex {vertex} does not belong to this graph")

        if self._paths is None or len(self._paths) != self.graph.vertices_count:
            self._paths = self._build_paths()

        while True:
            if self._is_offspring(vertex1, vertex2):
                return vertex2

            if self._is_offspring(vertex2, vertex1):
                return vertex1

            # Jump to the farthest ancestor not above vertex2
            path = self._paths[vertex1]
            vertex1 = next(
                (candidate for candidate in reversed(path)
                 if not self._is_offspring(vertex2, candidate)),
                path[0],
            )

    def _build_paths(self) -> Dict[Vertex, List[Vertex]]:
        self._strategy = _LcaStrategy()
        dfs_recursive(self.graph, self._strategy, [self.root])

        paths = {vertex: [self._strategy.parents[vertex]] for vertex in self.graph.vertices}

        for i in range(math.ceil(math.log2(self.graph.vertices_count)) + 3):
            for vertex in self.graph.vertices:
                paths[vertex].append(paths[paths[vertex][i]][i])

        logger.debug("Built LCA jump table for %d vertices", len(paths))
        return paths

    def _is_offspring(self, vertex1: Vertex, vertex2: Vertex) -> bool:
        return (
            self._strategy.pre_times[vertex1] >= self._strategy.pre_times[vertex2]
            and self._strategy.post_times[vertex1] <= self._strategy.post_times[vertex2]
        )
