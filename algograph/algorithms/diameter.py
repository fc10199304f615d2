"""
Diameter of a weighted tree.
"""

from typing import Tuple

from .. import config
from ..graphs import TreeGraph, Vertex
from ..logging import get_logger
from .utils import edge_weight

logger = get_logger(__name__)


def count_diameter(tree: TreeGraph) -> float:
    """
    Compute the length of the longest path in a tree.

    The search starts from the vertex with the highest degree and computes,
    for every subtree, the longest path going down from its root and the
    longest path inside it.

    Args:
        tree: Tree with weighted edge properties.

    Returns:
        Total weight of the longest path; 0.0 for a single vertex.

    Raises:
        TypeError: If an edge property has no weight.

    Complexity: O(n).

    Example:
        >>> tree = TreeGraph(0)
        >>> _ = tree.add_vertex(1, tree.get_vertex(0), edge_property=Weight(3.0))
        >>> count_diameter(tree)
        3.0
    """
    root = max(tree.vertices, key=tree.get_output_degree, default=None)

    if root is None:
        return 0.0

    def dfs(vertex: Vertex, parent: Vertex) -> Tuple[float, float]:
        path_from = 0.0
        path_subtree = 0.0
        path_through = 0.0

        for edge in tree.get_adjacent_edges(vertex):
            neighbour = edge.get_neighbour(vertex)

            if neighbour == parent:
                continue

            weight = edge_weight(tree, edge)
            child_from, child_subtree = dfs(neighbour, vertex)

            path_through = max(path_through, path_from + child_from + weight)
            path_subtree = max(path_subtree, child_subtree)
            path_from = max(path_from, child_from + weight)

        return path_from, max(path_through, path_subtree)

    with config.raised_recursion_limit():
        _, diameter = dfs(root, root)

    logger.debug("Diameter of tree with %d vertices is %s", tree.vertices_count, diameter)
    return diameter
