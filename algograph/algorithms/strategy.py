"""
Visitor hooks called by the graph searching algorithms.

Algorithms built on searching (cutting, LCA, topological sort, SCC) implement
these interfaces and pass themselves to bfs / dfs_iterative / dfs_recursive.
"""

from abc import ABC, abstractmethod

from ..graphs import Vertex


class BfsStrategy(ABC):
    """Hooks of breadth-first search."""

    @abstractmethod
    def for_root(self, root: Vertex) -> None:
        """Called once for every root that starts a new search pass."""

    @abstractmethod
    def on_entry(self, vertex: Vertex) -> None:
        """Called when a vertex is entered."""

    @abstractmethod
    def on_next_vertex(self, vertex: Vertex, neighbour: Vertex) -> None:
        """Called when an unvisited neighbour is discovered from a vertex."""

    @abstractmethod
    def on_exit(self, vertex: Vertex) -> None:
        """Called when a vertex is left."""


class DfsStrategy(BfsStrategy):
    """Hooks of depth-first search."""

    @abstractmethod
    def on_edge_to_visited(self, vertex: Vertex, neighbour: Vertex) -> None:
        """Called for an edge to a vertex already visited in the current pass."""


class EmptyStrategy(DfsStrategy):
    """Strategy that does nothing, for plain reachability searches."""

    def for_root(self, root: Vertex) -> None:
        pass

    def on_entry(self, vertex: Vertex) -> None:
        pass

    def on_next_vertex(self, vertex: Vertex, neighbour: Vertex) -> None:
        pass

    def on_exit(self, vertex: Vertex) -> None:
        pass

    def on_edge_to_visited(self, vertex: Vertex, neighbour: Vertex) -> None:
        pass
