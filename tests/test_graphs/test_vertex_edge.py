"""Tests for vertex, edge and weight value types."""

import pytest

from algograph import ArgumentError, Edge, Vertex, Weight, Weighted


class TestVertex:
    """Tests for Vertex."""

    def test_vertex_equality_by_id(self):
        """Test that vertices with equal ids are equal and hash alike."""
        assert Vertex(4) == Vertex(4)
        assert hash(Vertex(4)) == hash(Vertex(4))
        assert Vertex(4) != Vertex(5)
        assert Vertex("4") != Vertex(4)

    def test_vertex_str(self):
        """Test string representation of a vertex."""
        assert str(Vertex(13)) == "Vertex(13)"

    def test_vertex_is_immutable(self):
        """Test that a vertex id cannot be changed."""
        vertex = Vertex(1)

        with pytest.raises(AttributeError):
            vertex.id = 2


class TestEdge:
    """Tests for Edge."""

    def test_get_neighbour(self):
        """Test that the opposite endpoint is returned."""
        edge = Edge(Vertex(2), Vertex(7))

        assert edge.get_neighbour(Vertex(2)) == Vertex(7)
        assert edge.get_neighbour(Vertex(7)) == Vertex(2)

    def test_get_neighbour_self_loop(self):
        """Test that the neighbour in a self-loop is the vertex itself."""
        edge = Edge(Vertex(3), Vertex(3))

        assert edge.get_neighbour(Vertex(3)) == Vertex(3)

    def test_get_neighbour_not_adjacent(self):
        """Test that a vertex outside the edge is rejected."""
        edge = Edge(Vertex(2), Vertex(7))

        with pytest.raises(ArgumentError):
            edge.get_neighbour(Vertex(5))

    def test_reversed(self):
        """Test that reversing swaps the endpoints."""
        edge = Edge(Vertex(2), Vertex(7))

        assert edge.reversed() == Edge(Vertex(7), Vertex(2))
        assert edge.reversed().reversed() == edge

    def test_equality_is_directed(self):
        """Test that edge equality depends on direction."""
        assert Edge(Vertex(1), Vertex(2)) == Edge(Vertex(1), Vertex(2))
        assert Edge(Vertex(1), Vertex(2)) != Edge(Vertex(2), Vertex(1))

    def test_undirected_equals(self):
        """Test that undirected equality ignores direction."""
        edge = Edge(Vertex(1), Vertex(2))

        assert edge.undirected_equals(Edge(Vertex(2), Vertex(1)))
        assert edge.undirected_equals(Edge(Vertex(1), Vertex(2)))
        assert not edge.undirected_equals(Edge(Vertex(1), Vertex(3)))

    def test_unpacking(self):
        """Test that an edge unpacks to source and destination."""
        source, destination = Edge(Vertex(1), Vertex(2))

        assert source == Vertex(1)
        assert destination == Vertex(2)

    def test_edge_str(self):
        """Test string representation of an edge."""
        assert str(Edge(Vertex(1), Vertex(2))) == "Edge{Vertex(1) -- Vertex(2)}"


class TestWeight:
    """Tests for Weight and the Weighted protocol."""

    def test_weight_is_weighted(self):
        """Test that Weight satisfies the Weighted protocol."""
        assert isinstance(Weight(2.5), Weighted)
        assert Weight(2.5).weight == 2.5

    def test_other_objects_are_not_weighted(self):
        """Test that objects without weight do not satisfy the protocol."""
        assert not isinstance("label", Weighted)
        assert not isinstance(None, Weighted)
