"""
PyMultigraph - Undirected Multigraph Primitives

A Python library providing vertex, edge and graph objects that keep degree
and neighbour bookkeeping consistent as vertex pairs are linked and
unlinked. Self-loops and parallel edges are supported.

Main Classes:
    pyvertex: Vertex holding arbitrary content and adjacency bookkeeping
    pyedge: Undirected edge, created only through link()
    pygraph: Collection of vertices and edges with structural queries
    GraphInvariantError: Raised when adjacency bookkeeping is corrupt

Example:
    >>> from multigraph import pyvertex, pygraph, link
    >>> a, b = pyvertex(1), pyvertex(2)
    >>> edge = link(a, b)
    >>> graph = pygraph([edge], [a, b])
    >>> graph.unlink(a, b)
    True
"""

__version__ = "0.1.0"

from multigraph.classes.vertex import pyvertex
from multigraph.classes.edge import pyedge, link, unlink, find_edge
from multigraph.classes.exceptions import GraphInvariantError
from multigraph.core.graph import pygraph
from multigraph.analysis.structure import StructureAnalyzer

__all__ = [
    'pyvertex',
    'pyedge',
    'pygraph',
    'link',
    'unlink',
    'find_edge',
    'GraphInvariantError',
    'StructureAnalyzer',
]
