"""Tests for vertex identity, content and adjacency bookkeeping."""
import pytest

from multigraph import pyvertex, link, GraphInvariantError
from multigraph.classes.vertex import _register_one_way_adjacency


class TestCreateVertex:
    """Tests for vertex creation."""

    def test_new_vertex_is_isolated(self):
        v = pyvertex("a")
        assert v.degree == 0
        assert v.neighbours == frozenset()
        assert v.is_isolated is True
        assert v.content == "a"

    def test_ids_are_unique(self):
        a, b = pyvertex(0), pyvertex(0)
        assert a.lVertexID != b.lVertexID

    def test_str_shows_content(self):
        assert str(pyvertex(42)) == "42"

    def test_neighbours_is_read_only(self):
        a, b = pyvertex(1), pyvertex(2)
        link(a, b)
        with pytest.raises(AttributeError):
            a.neighbours.add(b)
        with pytest.raises(AttributeError):
            a.degree = 5


class TestVertexEquality:
    """Tests for identity-based equality and hashing."""

    def test_equal_content_is_not_equal_vertex(self):
        a, b = pyvertex(7), pyvertex(7)
        assert a != b
        assert a == a

    def test_content_equals(self):
        a, b, c = pyvertex(7), pyvertex(7), pyvertex(8)
        assert a.content_equals(b)
        assert not a.content_equals(c)

    def test_hash_ignores_content_changes(self):
        v = pyvertex([1, 2])
        seen = {v}
        v.content = "changed"
        assert v in seen

    def test_unhashable_content_is_allowed(self):
        v = pyvertex({"key": "value"})
        assert hash(v) == hash(v.lVertexID)


class TestAdjacency:
    """Tests for adjacency queries."""

    def test_linked_vertices_are_adjacent(self, vertices):
        a, b, c = vertices
        link(a, b)
        assert a.is_adjacent_to(b)
        assert b.is_adjacent_to(a)
        assert not a.is_adjacent_to(c)

    def test_self_loop_makes_vertex_its_own_neighbour(self, vertices):
        a, _, _ = vertices
        assert not a.is_adjacent_to(a)
        link(a, a)
        assert a.is_adjacent_to(a)
        assert a in a.neighbours

    def test_is_isolated_after_link(self, vertices):
        a, b, c = vertices
        link(a, b)
        assert not a.is_isolated
        assert c.is_isolated

    def test_one_sided_adjacency_is_fatal(self, vertices):
        a, b, _ = vertices
        _register_one_way_adjacency(b, a)
        with pytest.raises(GraphInvariantError):
            a.is_adjacent_to(b)
        with pytest.raises(GraphInvariantError):
            b.is_adjacent_to(a)

    def test_incident_edges(self, vertices):
        a, b, c = vertices
        e1 = link(a, b)
        e2 = link(c, a)
        link(b, c)
        aEdge = a.get_incident_edges()
        assert len(aEdge) == 2
        assert aEdge[0] is e1
        assert aEdge[1] is e2


class TestRevokeAdjacency:
    """Tests for the internal revoke step."""

    def test_revoke_below_zero_is_fatal(self, vertices):
        a, b, _ = vertices
        with pytest.raises(GraphInvariantError):
            a._revoke_adjacency(b)
        assert a.degree == 0

    def test_revoke_unknown_neighbour_is_fatal(self, vertices):
        a, b, c = vertices
        link(a, b)
        with pytest.raises(GraphInvariantError):
            a._revoke_adjacency(c)
        assert a.degree == 1
