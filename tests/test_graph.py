"""Tests for graph membership, structural predicates and unlinking."""
import logging

import pytest

from multigraph import pyvertex, pygraph, link, GraphInvariantError
from multigraph.classes.vertex import _register_one_way_adjacency


class TestCreateGraph:
    """Tests for graph creation."""

    def test_empty_graph(self):
        graph = pygraph()
        assert graph.nEdge == 0
        assert graph.nVertex == 0
        assert graph.is_null_graph

    def test_initial_collections_are_copied(self, vertices):
        a, b, c = vertices
        aVertex = [a, b]
        graph = pygraph(aVertex=aVertex)
        aVertex.append(c)
        assert graph.get_vertex_count() == 2

    def test_duplicate_instances_are_held_once(self, vertices):
        a, b, _ = vertices
        edge = link(a, b)
        graph = pygraph([edge, edge], [a, a, b])
        assert graph.get_edge_count() == 1
        assert graph.get_vertex_count() == 2

    def test_parallel_edges_are_held_separately(self, vertices):
        a, b, _ = vertices
        graph = pygraph([link(a, b), link(a, b)], [a, b])
        assert graph.nEdge == 2

    def test_unlinked_edge_is_rejected(self, vertices):
        a, b, _ = vertices
        edge = link(a, b)
        edge.unlink()
        with pytest.raises(ValueError):
            pygraph([edge])

    def test_wrong_types_are_rejected(self, vertices):
        a, _, _ = vertices
        graph = pygraph()
        with pytest.raises(TypeError):
            graph.add_vertex("a")
        with pytest.raises(TypeError):
            graph.add_edge(a)

    def test_closure_adds_endpoints(self, vertices):
        a, b, c = vertices
        graph = pygraph([link(a, b)], iFlag_closure=True)
        assert graph.contains_vertex(a)
        assert graph.contains_vertex(b)
        assert not graph.contains_vertex(c)
        graph.add_edge(link(b, c))
        assert graph.nVertex == 3

    def test_without_closure_endpoints_are_not_added(self, vertices):
        a, b, _ = vertices
        graph = pygraph([link(a, b)])
        assert graph.nVertex == 0


class TestStructuralPredicates:
    """Tests for null graph and cycle graph checks."""

    def test_null_graph_with_isolated_vertices(self, vertices):
        graph = pygraph(aVertex=list(vertices))
        assert graph.is_null_graph

    def test_graph_with_edge_is_not_null(self, vertices):
        a, b, _ = vertices
        graph = pygraph([link(a, b)], [a, b])
        assert not graph.is_null_graph

    def test_triangle_is_cycle_graph(self, triangle):
        assert triangle.is_cycle_graph

    def test_path_is_not_cycle_graph(self, vertices):
        a, b, c = vertices
        graph = pygraph([link(a, b), link(b, c)], [a, b, c])
        assert not graph.is_cycle_graph

    def test_single_self_loop_is_cycle_graph(self, vertices):
        a, _, _ = vertices
        graph = pygraph([link(a, a)], [a])
        assert graph.is_cycle_graph

    def test_empty_graph_counts_as_cycle_graph(self):
        assert pygraph().is_cycle_graph

    def test_edges_between_and_incident(self, vertices):
        a, b, c = vertices
        e1, e2, e3 = link(a, b), link(b, a), link(b, c)
        graph = pygraph([e1, e2, e3], [a, b, c])
        aEdge = graph.get_edges_between(b, a)
        assert len(aEdge) == 2
        assert aEdge[0] is e1 and aEdge[1] is e2
        assert len(graph.get_incident_edges(b)) == 3
        assert graph.get_incident_edges(c)[0] is e3


class TestGraphUnlink:
    """Tests for unlinking through a graph."""

    def test_unlink_vertex_pair(self, triangle):
        a, b, c = triangle.aVertex
        assert triangle.unlink(a, b) is True
        assert triangle.nEdge == 2
        assert not a.is_adjacent_to(b)
        assert a.degree == 1
        assert b.degree == 1
        assert not triangle.is_cycle_graph

    def test_unlink_vertex_not_in_graph(self, triangle, caplog):
        a = triangle.aVertex[0]
        outsider = pyvertex(99)
        link(a, outsider)
        with caplog.at_level(logging.DEBUG, logger="multigraph"):
            assert triangle.unlink(a, outsider) is False
        assert "not found in graph" in caplog.text
        assert a.is_adjacent_to(outsider)
        assert a.degree == 3

    def test_unlink_non_adjacent_members(self, vertices):
        a, b, c = vertices
        graph = pygraph([link(a, b)], [a, b, c])
        assert graph.unlink(a, c) is False
        assert graph.nEdge == 1
        assert a.degree == 1

    def test_unlink_pair_linked_outside_graph(self, vertices):
        a, b, _ = vertices
        outside = link(a, b)
        graph = pygraph(aVertex=[a, b])
        assert graph.unlink(a, b) is False
        assert outside.is_linked
        assert a.degree == 1

    def test_unlink_removes_only_one_parallel_edge(self, vertices):
        a, b, _ = vertices
        e1, e2 = link(a, b), link(a, b)
        graph = pygraph([e1, e2], [a, b])
        assert graph.unlink(a, b) is True
        assert graph.nEdge == 1
        assert graph.aEdge[0] is e2
        assert a.is_adjacent_to(b)

    def test_unlink_edge(self, triangle):
        edge = triangle.aEdge[1]
        assert triangle.unlink_edge(edge) is True
        assert not triangle.contains_edge(edge)
        assert not edge.is_linked
        assert triangle.unlink_edge(edge) is False

    def test_unlink_edge_not_in_graph(self, triangle):
        a, b, _ = triangle.aVertex
        parallel = link(a, b)
        assert triangle.unlink_edge(parallel) is False
        assert parallel.is_linked
        assert triangle.nEdge == 3

    def test_edge_unlink_removes_from_every_graph(self, vertices):
        a, b, c = vertices
        edge = link(a, b)
        g1 = pygraph([edge], [a, b])
        g2 = pygraph([edge, link(b, c)], [a, b, c])
        edge.unlink()
        assert g1.is_null_graph
        assert g2.nEdge == 1

    def test_fatal_fault_propagates(self, vertices):
        a, b, _ = vertices
        graph = pygraph(aVertex=[a, b])
        _register_one_way_adjacency(b, a)
        with pytest.raises(GraphInvariantError):
            graph.unlink(a, b)


class TestRemoveVertex:
    """Tests for dropping vertex references."""

    def test_remove_isolated_vertex(self, vertices):
        graph = pygraph(aVertex=list(vertices))
        assert graph.remove_vertex(vertices[1]) is True
        assert graph.nVertex == 2
        assert graph.remove_vertex(vertices[1]) is False

    def test_remove_vertex_with_edges(self, triangle):
        with pytest.raises(ValueError):
            triangle.remove_vertex(triangle.aVertex[0])
