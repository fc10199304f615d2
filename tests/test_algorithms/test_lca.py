"""Tests for lowest common ancestors."""

import pytest

from algograph import ArgumentError, LowestCommonAncestor, TreeGraph, Vertex


@pytest.fixture
def lca(tree) -> LowestCommonAncestor:
    return LowestCommonAncestor(tree, tree.get_vertex(0))


class TestLowestCommonAncestor:
    """Tests for LowestCommonAncestor."""

    def test_attributes(self, tree, lca):
        """Test that the tree and the root are exposed."""
        assert lca.graph is tree
        assert lca.root == Vertex(0)

    def test_same_vertex(self, lca):
        """Test that a vertex is its own lowest common ancestor."""
        assert lca.find_lca(Vertex(6), Vertex(6)) == Vertex(6)

    def test_vertices_in_same_subtree(self, lca):
        """Test vertices in different subtrees of one vertex."""
        assert lca.find_lca(Vertex(5), Vertex(7)) == Vertex(1)

    def test_symmetric(self, lca):
        """Test that the order of vertices does not matter."""
        assert lca.find_lca(Vertex(7), Vertex(5)) == lca.find_lca(Vertex(5), Vertex(7))

    def test_root_is_ancestor(self, lca):
        """Test vertices in different subtrees of the root."""
        assert lca.find_lca(Vertex(3), Vertex(9)) == Vertex(0)

    def test_vertex_and_its_ancestor(self, lca):
        """Test that an ancestor of the other vertex is returned."""
        assert lca.find_lca(Vertex(8), Vertex(2)) == Vertex(2)
        assert lca.find_lca(Vertex(4), Vertex(0)) == Vertex(0)

    def test_queries_reuse_table(self, lca):
        """Test that consecutive queries return consistent results."""
        first = lca.find_lca(Vertex(9), Vertex(7))
        second = lca.find_lca(Vertex(9), Vertex(7))

        assert first == second == Vertex(0)
        assert lca.find_lca(Vertex(8), Vertex(9)) == Vertex(6)

    def test_tree_grown_after_query(self):
        """Test that vertices added after a query are found."""
        tree = TreeGraph(0)
        tree.add_vertex(1, tree.get_vertex(0))
        lca = LowestCommonAncestor(tree, tree.get_vertex(0))

        assert lca.find_lca(Vertex(1), Vertex(0)) == Vertex(0)

        tree.add_vertex(2, tree.get_vertex(1))
        tree.add_vertex(3, tree.get_vertex(0))

        assert lca.find_lca(Vertex(1), Vertex(2)) == Vertex(1)
        assert lca.find_lca(Vertex(2), Vertex(3)) == Vertex(0)

    def test_other_root(self, tree):
        """Test that ancestry follows the chosen root."""
        lca = LowestCommonAncestor(tree, tree.get_vertex(7))

        assert lca.find_lca(Vertex(3), Vertex(9)) == Vertex(1)
        assert lca.find_lca(Vertex(0), Vertex(7)) == Vertex(7)

    def test_single_vertex(self):
        """Test a tree with only the root."""
        tree = TreeGraph(5)
        lca = LowestCommonAncestor(tree, tree.get_vertex(5))

        assert lca.find_lca(Vertex(5), Vertex(5)) == Vertex(5)

    def test_long_path(self):
        """Test a path where jumps of many lengths are needed."""
        tree = TreeGraph(0)

        for i in range(1, 100):
            tree.add_vertex(i, tree.get_vertex(i - 1))

        tree.add_vertex(100, tree.get_vertex(37))
        lca = LowestCommonAncestor(tree, tree.get_vertex(0))

        assert lca.find_lca(Vertex(99), Vertex(100)) == Vertex(37)

    def test_foreign_vertex(self, lca):
        """Test that a vertex outside the tree is rejected."""
        with pytest.raises(ArgumentError):
            lca.find_lca(Vertex(3), Vertex(30))

    def test_foreign_root(self, tree):
        """Test that a root outside the tree is rejected."""
        with pytest.raises(ArgumentError):
            LowestCommonAncestor(tree, Vertex(30))
