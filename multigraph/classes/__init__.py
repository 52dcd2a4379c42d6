"""
Core data classes for multigraph representation.

This module contains the vertex and edge classes and the linking
protocol that keeps their adjacency bookkeeping in step.
"""

from .vertex import pyvertex
from .edge import pyedge, link, unlink, find_edge
from .exceptions import GraphInvariantError

__all__ = [
    'pyvertex',
    'pyedge',
    'link',
    'unlink',
    'find_edge',
    'GraphInvariantError',
]
