"""Pytest configuration and shared fixtures for algograph tests.

This module provides:
- Weighted directed and undirected graphs shared by shortest path tests
- A rooted tree shared by LCA and diameter tests
- Logging reset between tests
"""

import logging

import pytest

from algograph import DirectedSimpleGraph, TreeGraph, UndirectedSimpleGraph, Weight
from algograph.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default logging configuration after each test."""
    yield
    configure_logging(level=logging.WARNING)


@pytest.fixture
def directed_graph() -> DirectedSimpleGraph:
    """Provide a weighted directed graph with 10 vertices.

    Vertex 2 has no incoming edges, so it is unreachable from every other vertex.
    """
    graph = DirectedSimpleGraph(range(10))
    edges = [
        (0, 1, 4.0), (1, 4, 7.0), (1, 7, 12.0), (2, 4, 6.0), (2, 6, 8.0),
        (3, 0, 3.0), (3, 7, 5.0), (4, 5, 1.0), (4, 3, 10.0), (5, 6, 4.0),
        (5, 8, 2.0), (6, 5, 7.0), (7, 5, 2.0), (7, 8, 6.0), (8, 9, 10.0),
        (9, 6, 3.0),
    ]

    for source, destination, weight in edges:
        graph.add_edge_between(graph.get_vertex(source), graph.get_vertex(destination),
                               Weight(weight))

    return graph


@pytest.fixture
def undirected_graph() -> UndirectedSimpleGraph:
    """Provide a weighted undirected graph with 10 vertices in two components."""
    graph = UndirectedSimpleGraph(range(10))
    edges = [
        (0, 1, 4.0), (1, 4, 7.0), (1, 7, 12.0), (2, 6, 8.0), (3, 0, 3.0),
        (3, 7, 5.0), (4, 5, 1.0), (4, 3, 10.0), (5, 8, 2.0), (7, 5, 2.0),
        (7, 8, 6.0), (9, 6, 3.0),
    ]

    for source, destination, weight in edges:
        graph.add_edge_between(graph.get_vertex(source), graph.get_vertex(destination),
                               Weight(weight))

    return graph


@pytest.fixture
def tree() -> TreeGraph:
    """Provide a tree rooted at 0 with 10 vertices and unit edge weights.

    Children: 0 -> 1, 2; 1 -> 3, 4, 5; 2 -> 6; 4 -> 7; 6 -> 8, 9.
    """
    graph = TreeGraph(0)
    parents = [(1, 0), (2, 0), (3, 1), (4, 1), (5, 1), (6, 2), (7, 4), (8, 6), (9, 6)]

    for vertex_id, parent_id in parents:
        graph.add_vertex(vertex_id, graph.get_vertex(parent_id), edge_property=Weight(1.0))

    return graph
