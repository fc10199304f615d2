"""
All-pairs shortest paths: Floyd-Warshall.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Dict, Tuple

import numpy as np

from ..graphs import DirectedGraph, Vertex
from ..logging import get_logger
from .utils import vertex_index_map, weighted_edges

logger = get_logger(__name__)


def floyd_warshall(graph: DirectedGraph) -> Dict[Tuple[Vertex, Vertex], float]:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    Handles negative edge weights but not negative cycles (distances may be
    incorrect if negative cycles exist). Undirected graphs can be processed
    after conversion with ``as_directed()``.

    Args:
        graph: Directed graph with weighted edge properties.

    Returns:
        Dictionary mapping (source, destination) -> shortest distance
        (``INFINITY`` if unreachable).

    Raises:
        TypeError: If the graph is not directed.

    Complexity: O(n^3) where n is number of vertices.

    Example:
        >>> G = DirectedSimpleGraph(['A', 'B', 'C'])
        >>> _ = G.add_edge_between(G.get_vertex('A'), G.get_vertex('B'), Weight(1.0))
        >>> _ = G.add_edge_between(G.get_vertex('B'), G.get_vertex('C'), Weight(2.0))
        >>> floyd_warshall(G)[(G.get_vertex('A'), G.get_vertex('C'))]
        3.0
    """
    if not isinstance(graph, DirectedGraph):
        raise TypeError(f"Floyd-Warshall requires a directed graph, got {type(graph).__name__}")

    vertex_to_idx, idx_to_vertex = vertex_index_map(graph.vertices)
    n = len(idx_to_vertex)

    dist_matrix = np.full((n, n), np.inf, dtype=np.float64)
    np.fill_diagonal(dist_matrix, 0.0)

    # Direct edges override the diagonal, so a negative self-loop is kept
    for edge, weight in weighted_edges(graph):
        dist_matrix[vertex_to_idx[edge.source], vertex_to_idx[edge.destination]] = weight

    # Each pass relaxes all pairs through intermediate vertex k at once
    for k in range(n):
        np.minimum(dist_matrix, dist_matrix[:, k, np.newaxis] + dist_matrix[np.newaxis, k, :],
                   out=dist_matrix)

    logger.debug("Computed all-pairs distances for %d vertices", n)
    return {
        (idx_to_vertex[i], idx_to_vertex[j]): float(dist_matrix[i, j])
        for i in range(n)
        for j in range(n)
    }
