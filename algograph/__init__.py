"""algograph - graph data structures and classical graph algorithms."""

__version__ = "0.1.0"

# Algorithms
from .algorithms import (
    BfsStrategy,
    DfsStrategy,
    EmptyStrategy,
    LowestCommonAncestor,
    bellman_ford,
    bfs,
    count_diameter,
    dfs_iterative,
    dfs_recursive,
    dfs_topological_sort,
    dijkstra,
    find_edge_cut,
    find_scc,
    find_vertex_cut,
    floyd_warshall,
    inputs_topological_sort,
    kruskal,
    match,
    prim,
)

# Errors
from .exceptions import (
    ArgumentError,
    CyclicGraphError,
    EdgeNotFoundError,
    GraphError,
    GraphPartitionError,
    GroupIndexError,
    NegativeCycleError,
    NegativeWeightError,
    NotFoundError,
    VertexNotFoundError,
)

# Graph structures
from .graphs import (
    INFINITY,
    DirectedGraph,
    DirectedSimpleGraph,
    Edge,
    Graph,
    MultipartiteGraph,
    TreeGraph,
    UndirectedGraph,
    UndirectedSimpleGraph,
    Vertex,
    Weight,
    Weighted,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level
from .structures import DisjointSets

__all__ = [
    "__version__",
    # Graph structures
    "INFINITY",
    "Vertex",
    "Edge",
    "Weight",
    "Weighted",
    "Graph",
    "DirectedGraph",
    "DirectedSimpleGraph",
    "UndirectedGraph",
    "UndirectedSimpleGraph",
    "TreeGraph",
    "MultipartiteGraph",
    "DisjointSets",
    # Searching
    "BfsStrategy",
    "DfsStrategy",
    "EmptyStrategy",
    "bfs",
    "dfs_iterative",
    "dfs_recursive",
    # Algorithms
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
    # Errors
    "GraphError",
    "NotFoundError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "ArgumentError",
    "GraphPartitionError",
    "GroupIndexError",
    "CyclicGraphError",
    "NegativeCycleError",
    "NegativeWeightError",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
