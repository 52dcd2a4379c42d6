"""
Pytest configuration for multigraph tests.
"""
import pytest

from multigraph import pyvertex, pygraph, link


@pytest.fixture
def vertices():
    """Three isolated vertices with integer content."""
    return pyvertex(1), pyvertex(2), pyvertex(3)


@pytest.fixture
def triangle(vertices):
    """A graph of three vertices linked in a triangle."""
    a, b, c = vertices
    aEdge = [link(a, b), link(b, c), link(c, a)]
    return pygraph(aEdge, [a, b, c])


def assert_symmetric(*aVertex):
    """Check adjacency is mutual for every pair among the given vertices."""
    for u in aVertex:
        for v in aVertex:
            assert u.is_adjacent_to(v) == v.is_adjacent_to(u)
