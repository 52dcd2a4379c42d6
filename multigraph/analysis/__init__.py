"""
Structural analysis modules for multigraphs.

This module contains read-only summaries such as degree sequences and
adjacency matrices.
"""

from .structure import StructureAnalyzer

__all__ = ['StructureAnalyzer']
