"""
Graph algorithms.

This package provides:
- Searching (BFS, iterative and recursive DFS) driven by strategies
- Cutting (bridges and separators) of undirected graphs
- Lowest common ancestors in rooted trees
- Topological sorting and strongly connected components of directed graphs
- Shortest paths: Bellman-Ford, Dijkstra, Floyd-Warshall
- Minimum spanning trees: Kruskal, Prim
- Maximum matching in bipartite graphs (Hopcroft-Karp)
- Diameter of weighted trees
"""

from .allpairs import floyd_warshall
from .cutting import find_edge_cut, find_vertex_cut
from .diameter import count_diameter
from .lca import LowestCommonAncestor
from .matching import match
from .mst import kruskal, prim
from .scc import find_scc
from .searching import bfs, dfs_iterative, dfs_recursive
from .shortest import bellman_ford, dijkstra
from .strategy import BfsStrategy, DfsStrategy, EmptyStrategy
from .topological import dfs_topological_sort, inputs_topological_sort

__all__ = [
    "BfsStrategy",
    "DfsStrategy",
    "EmptyStrategy",
    "bfs",
    "dfs_iterative",
    "dfs_recursive",
    "find_edge_cut",
    "find_vertex_cut",
    "LowestCommonAncestor",
    "inputs_topological_sort",
    "dfs_topological_sort",
    "find_scc",
    "bellman_ford",
    "dijkstra",
    "floyd_warshall",
    "kruskal",
    "prim",
    "match",
    "count_diameter",
]
