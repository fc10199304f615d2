"""Tests for all-pairs shortest paths."""

import pytest

from algograph import INFINITY, DirectedSimpleGraph, Weight, floyd_warshall

inf = INFINITY


def from_matrix(graph, distances):
    return {
        (graph.get_vertex(i), graph.get_vertex(j)): distance
        for i, row in enumerate(distances)
        for j, distance in enumerate(row)
    }


class TestFloydWarshall:
    """Tests for Floyd-Warshall algorithm."""

    def test_directed_graph(self, directed_graph):
        """Test all distances in a directed graph."""
        expected = from_matrix(directed_graph, [
            [0.0, 4.0, inf, 21.0, 11.0, 12.0, 16.0, 16.0, 14.0, 24.0],
            [20.0, 0.0, inf, 17.0, 7.0, 8.0, 12.0, 12.0, 10.0, 20.0],
            [19.0, 23.0, 0.0, 16.0, 6.0, 7.0, 8.0, 21.0, 9.0, 19.0],
            [3.0, 7.0, inf, 0.0, 14.0, 7.0, 11.0, 5.0, 9.0, 19.0],
            [13.0, 17.0, inf, 10.0, 0.0, 1.0, 5.0, 15.0, 3.0, 13.0],
            [inf, inf, inf, inf, inf, 0.0, 4.0, inf, 2.0, 12.0],
            [inf, inf, inf, inf, inf, 7.0, 0.0, inf, 9.0, 19.0],
            [inf, inf, inf, inf, inf, 2.0, 6.0, 0.0, 4.0, 14.0],
            [inf, inf, inf, inf, inf, 20.0, 13.0, inf, 0.0, 10.0],
            [inf, inf, inf, inf, inf, 10.0, 3.0, inf, 12.0, 0.0],
        ])

        assert floyd_warshall(directed_graph) == expected

    def test_negative_edge(self, directed_graph):
        """Test that a negative edge is used in shortest paths."""
        expected = from_matrix(directed_graph, [
            [0.0, 4.0, inf, 9.0, 11.0, 12.0, 16.0, 14.0, 14.0, 24.0],
            [8.0, 0.0, inf, 5.0, 7.0, 8.0, 12.0, 10.0, 10.0, 20.0],
            [7.0, 11.0, 0.0, 4.0, 6.0, 7.0, 8.0, 9.0, 9.0, 19.0],
            [3.0, 7.0, inf, 0.0, 14.0, 7.0, 11.0, 5.0, 9.0, 19.0],
            [1.0, 5.0, inf, -2.0, 0.0, 1.0, 5.0, 3.0, 3.0, 13.0],
            [0.0, 4.0, inf, -3.0, 11.0, 0.0, 4.0, 2.0, 2.0, 12.0],
            [7.0, 11.0, inf, 4.0, 18.0, 7.0, 0.0, 9.0, 9.0, 19.0],
            [2.0, 6.0, inf, -1.0, 13.0, 2.0, 6.0, 0.0, 4.0, 14.0],
            [-2.0, 2.0, inf, -5.0, 9.0, 2.0, 6.0, 0.0, 0.0, 10.0],
            [10.0, 14.0, inf, 7.0, 21.0, 10.0, 3.0, 12.0, 12.0, 0.0],
        ])
        directed_graph.add_edge_between(directed_graph.get_vertex(8), directed_graph.get_vertex(3),
                                        Weight(-5.0))

        assert floyd_warshall(directed_graph) == expected

    def test_undirected_graph_as_directed(self, undirected_graph):
        """Test all distances in an undirected graph converted to a directed one."""
        expected = from_matrix(undirected_graph, [
            [0.0, 4.0, inf, 3.0, 11.0, 10.0, inf, 8.0, 12.0, inf],
            [4.0, 0.0, inf, 7.0, 7.0, 8.0, inf, 10.0, 10.0, inf],
            [inf, inf, 0.0, inf, inf, inf, 8.0, inf, inf, 11.0],
            [3.0, 7.0, inf, 0.0, 8.0, 7.0, inf, 5.0, 9.0, inf],
            [11.0, 7.0, inf, 8.0, 0.0, 1.0, inf, 3.0, 3.0, inf],
            [10.0, 8.0, inf, 7.0, 1.0, 0.0, inf, 2.0, 2.0, inf],
            [inf, inf, 8.0, inf, inf, inf, 0.0, inf, inf, 3.0],
            [8.0, 10.0, inf, 5.0, 3.0, 2.0, inf, 0.0, 4.0, inf],
            [12.0, 10.0, inf, 9.0, 3.0, 2.0, inf, 4.0, 0.0, inf],
            [inf, inf, 11.0, inf, inf, inf, 3.0, inf, inf, 0.0],
        ])

        assert floyd_warshall(undirected_graph.as_directed()) == expected

    def test_distances_are_floats(self, directed_graph):
        """Test that distances are plain Python floats."""
        result = floyd_warshall(directed_graph)

        assert all(type(distance) is float for distance in result.values())

    def test_empty_graph(self):
        """Test that an empty graph has no distances."""
        assert floyd_warshall(DirectedSimpleGraph()) == {}

    def test_undirected_graph(self, undirected_graph):
        """Test that an undirected graph is rejected."""
        with pytest.raises(TypeError):
            floyd_warshall(undirected_graph)
