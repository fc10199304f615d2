"""Tests for undirected simple graphs."""

import pytest

from algograph import ArgumentError, DirectedSimpleGraph, Edge, UndirectedSimpleGraph, Vertex


@pytest.fixture
def graph() -> UndirectedSimpleGraph:
    return UndirectedSimpleGraph(range(10))


def add_edges(graph, pairs):
    for source, destination in pairs:
        graph.add_edge_between(graph.get_vertex(source), graph.get_vertex(destination))


class TestUndirectedSimpleGraph:
    """Tests for UndirectedSimpleGraph."""

    def test_add_edge_between(self, graph):
        """Test that an edge is found from both endpoints as the same record."""
        edge = graph.add_edge_between(graph.get_vertex(1), graph.get_vertex(5), "e")

        assert graph.get_edge(1, 5) is edge
        assert graph.get_edge(5, 1) is edge
        assert graph.properties[edge] == "e"
        assert graph.get_neighbours(Vertex(1)) == [Vertex(5)]
        assert graph.get_neighbours(Vertex(5)) == [Vertex(1)]

    def test_add_edge_existing_in_reverse(self, graph):
        """Test that the reversed pair counts as the same edge."""
        graph.add_edge_between(graph.get_vertex(1), graph.get_vertex(5))

        with pytest.raises(ArgumentError, match="already exists"):
            graph.add_edge_between(graph.get_vertex(5), graph.get_vertex(1))

    def test_edges_count_with_self_loop(self, graph):
        """Test that a self-loop is counted once."""
        add_edges(graph, [(7, 7), (1, 5), (2, 4), (8, 0), (6, 3), (9, 3)])

        assert graph.edges_count == 6
        assert len(graph.edges) == 6
        assert set(graph.edges) == {
            Edge(Vertex(7), Vertex(7)), Edge(Vertex(1), Vertex(5)), Edge(Vertex(2), Vertex(4)),
            Edge(Vertex(8), Vertex(0)), Edge(Vertex(6), Vertex(3)), Edge(Vertex(9), Vertex(3)),
        }

    def test_degrees(self, graph):
        """Test that both degrees equal the number of adjacent edges."""
        add_edges(graph, [(1, 1), (1, 3), (1, 4), (1, 7), (1, 9), (2, 1), (6, 1)])

        assert graph.get_output_degree(Vertex(1)) == 7
        assert graph.get_input_degree(Vertex(1)) == 7
        assert graph.get_output_degree(Vertex(3)) == 1
        assert graph.get_input_degree(Vertex(0)) == 0

    def test_get_adjacent_edges(self, graph):
        """Test that incident edges are listed once with their stored direction."""
        add_edges(graph, [(1, 1), (1, 3), (2, 1), (6, 1)])

        assert graph.get_adjacent_edges(Vertex(1)) == [
            Edge(Vertex(1), Vertex(1)), Edge(Vertex(1), Vertex(3)),
            Edge(Vertex(2), Vertex(1)), Edge(Vertex(6), Vertex(1)),
        ]

    def test_neighbours_symmetric(self, graph):
        """Test that every edge makes both endpoints neighbours of each other."""
        pairs = [(0, 4), (4, 8), (8, 2), (2, 6), (3, 9)]
        add_edges(graph, pairs)

        for source, destination in pairs:
            assert Vertex(destination) in graph.get_neighbours(Vertex(source))
            assert Vertex(source) in graph.get_neighbours(Vertex(destination))

    def test_properties_reversed_edge(self, graph):
        """Test that the property of a stored edge cannot be reached by its reversal."""
        graph.add_edge_between(graph.get_vertex(2), graph.get_vertex(8), 4)

        assert graph.properties[Edge(Vertex(2), Vertex(8))] == 4

        with pytest.raises(ArgumentError):
            graph.properties[Edge(Vertex(8), Vertex(2))]

    def test_properties_missing_edge(self, graph):
        """Test that a property of a missing edge is rejected."""
        with pytest.raises(ArgumentError):
            graph.properties[Edge(Vertex(2), Vertex(8))]

    def test_as_directed(self, graph):
        """Test conversion to a directed graph with both directions."""
        add_edges(graph, [(7, 7), (1, 5), (2, 4), (8, 0)])
        graph.properties[graph.get_vertex(1)] = "a"
        graph.properties[graph.get_edge(2, 4)] = "x"

        result = graph.as_directed()

        assert isinstance(result, DirectedSimpleGraph)
        assert result.vertices == graph.vertices
        assert result.edges_count == 7
        assert set(result.edges) == {
            Edge(Vertex(7), Vertex(7)),
            Edge(Vertex(1), Vertex(5)), Edge(Vertex(5), Vertex(1)),
            Edge(Vertex(2), Vertex(4)), Edge(Vertex(4), Vertex(2)),
            Edge(Vertex(8), Vertex(0)), Edge(Vertex(0), Vertex(8)),
        }
        assert result.properties[result.get_vertex(1)] == "a"
        assert result.properties[result.get_edge(2, 4)] == "x"
        assert result.properties[result.get_edge(4, 2)] == "x"
