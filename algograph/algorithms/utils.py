"""
Utility functions for weighted graph algorithms.

Provides helpers for vertex indexing and reading edge weights.
"""

from typing import Dict, Iterable, Iterator, List, Tuple

from ..graphs import Edge, Graph, Vertex, Weighted


def vertex_index_map(vertices: Iterable[Vertex]) -> Tuple[Dict[Vertex, int], List[Vertex]]:
    """
    Create mapping from vertices to indices 0..n-1, keeping the given order.

    Args:
        vertices: Iterable of vertices.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).

    Example:
        >>> vertex_to_idx, idx_to_vertex = vertex_index_map([Vertex('c'), Vertex('a')])
        >>> vertex_to_idx[Vertex('a')]
        1
    """
    index_to_vertex = list(dict.fromkeys(vertices))
    vertex_to_index = {vertex: idx for idx, vertex in enumerate(index_to_vertex)}
    return vertex_to_index, index_to_vertex


def edge_weight(graph: Graph, edge: Edge) -> float:
    """
    Return the weight of an edge from its property.

    Raises:
        TypeError: If the edge property has no weight.
    """
    property = graph.properties[edge]

    if not isinstance(property, Weighted):
        raise TypeError(f"Property of edge {edge} has no weight: {property!r}")

    return property.weight


def weighted_edges(graph: Graph) -> Iterator[Tuple[Edge, float]]:
    """
    Yield (edge, weight) pairs of all edges in graph order.

    Raises:
        TypeError: If any edge property has no weight.
    """
    for edge in graph.edges:
        yield edge, edge_weight(graph, edge)
