"""
Graph aggregate built on the vertex and edge classes.
"""

from .graph import pygraph

__all__ = ['pygraph']
