"""
Graph aggregate over vertices and edges.

A pygraph holds references to vertices and edges created elsewhere and
answers structural questions about them. It never creates vertices or
edges itself; the only mutations it drives are unlinking edges and
adding or dropping references.
"""

import logging
from typing import Generic, Iterable, List, Optional, TypeVar

import numpy as np

from ..classes.edge import pyedge, unlink, _remove_by_identity
from ..classes.vertex import pyvertex
from ..analysis.structure import StructureAnalyzer

logger = logging.getLogger(__name__)

T = TypeVar('T')


class pygraph(Generic[T]):
    """
    An undirected multigraph as a collection of edges and vertices.

    ``aVertex`` may hold vertices no edge touches. With ``iFlag_closure``
    enabled, adding an edge also adds its endpoints to ``aVertex``.
    Membership is always tested by identity, since parallel edges compare
    equal to each other.

    Callers must go through add_edge and add_vertex rather than appending
    to aEdge or aVertex directly; an edge appended directly is not removed
    from the graph when it is later unlinked.
    """

    def __init__(self, aEdge: Optional[Iterable[pyedge]] = None,
                 aVertex: Optional[Iterable[pyvertex]] = None,
                 iFlag_closure: bool = False):
        """
        Initialize the graph.

        Args:
            aEdge: Initial edges, all of which must still be linked
            aVertex: Initial vertices
            iFlag_closure: Add the endpoints of every added edge to aVertex

        Raises:
            ValueError: If an initial edge has already been unlinked
        """
        self.iFlag_closure = iFlag_closure
        self.aEdge: List[pyedge] = []
        self.aVertex: List[pyvertex] = []

        for pVertex in aVertex or []:
            self.add_vertex(pVertex)
        for pEdge in aEdge or []:
            self.add_edge(pEdge)

        self._analyzer = StructureAnalyzer(self)
        logger.debug(f"Created graph with {self.nVertex} vertices and {self.nEdge} edges")

    # ========================================================================
    # STRUCTURAL QUERIES
    # ========================================================================

    @property
    def nEdge(self) -> int:
        return len(self.aEdge)

    @property
    def nVertex(self) -> int:
        return len(self.aVertex)

    @property
    def is_null_graph(self) -> bool:
        """True if the graph has no edges; isolated vertices are allowed."""
        return len(self.aEdge) == 0

    @property
    def is_cycle_graph(self) -> bool:
        """
        True if the edge count equals the vertex count.

        This is a counting heuristic, not cycle detection.
        """
        return len(self.aEdge) == len(self.aVertex)

    def get_edge_count(self) -> int:
        return self.nEdge

    def get_vertex_count(self) -> int:
        return self.nVertex

    def contains_vertex(self, pVertex: pyvertex) -> bool:
        return any(pVertex_held is pVertex for pVertex_held in self.aVertex)

    def contains_edge(self, pEdge: pyedge) -> bool:
        return any(pEdge_held is pEdge for pEdge_held in self.aEdge)

    def get_edges_between(self, pVertex_a: pyvertex, pVertex_b: pyvertex) -> List[pyedge]:
        """
        Get every edge of this graph joining two vertices.

        Args:
            pVertex_a: One endpoint
            pVertex_b: The other endpoint, or the same vertex for self-loops

        Returns:
            Matching edges in insertion order
        """
        return [pEdge for pEdge in self.aEdge if pEdge._joins(pVertex_a, pVertex_b)]

    def get_incident_edges(self, pVertex: pyvertex) -> List[pyedge]:
        """Get every edge of this graph touching a vertex."""
        return [pEdge for pEdge in self.aEdge if pEdge.is_incident_to(pVertex)]

    # ========================================================================
    # MEMBERSHIP
    # ========================================================================

    def add_vertex(self, pVertex: pyvertex) -> bool:
        """
        Add a vertex reference.

        Returns:
            True if added, False if the graph already holds it

        Raises:
            TypeError: If ``pVertex`` is not a pyvertex
        """
        if not isinstance(pVertex, pyvertex):
            raise TypeError(f"Expected pyvertex, got {type(pVertex).__name__}")
        if self.contains_vertex(pVertex):
            logger.debug(f"{pVertex!r} already in graph")
            return False
        self.aVertex.append(pVertex)
        return True

    def add_edge(self, pEdge: pyedge) -> bool:
        """
        Add an edge reference.

        Args:
            pEdge: A linked edge

        Returns:
            True if added, False if the graph already holds this instance

        Raises:
            TypeError: If ``pEdge`` is not a pyedge
            ValueError: If the edge has been unlinked
        """
        if not isinstance(pEdge, pyedge):
            raise TypeError(f"Expected pyedge, got {type(pEdge).__name__}")
        if not pEdge.is_linked:
            raise ValueError(f"{pEdge!r} has been unlinked and can not join a graph")
        if self.contains_edge(pEdge):
            logger.debug(f"{pEdge!r} already in graph")
            return False

        self.aEdge.append(pEdge)
        pEdge._aGraph.add(self)

        if self.iFlag_closure:
            self.add_vertex(pEdge.pVertex_start)
            self.add_vertex(pEdge.pVertex_end)
        return True

    def remove_vertex(self, pVertex: pyvertex) -> bool:
        """
        Drop a vertex reference that no edge of this graph touches.

        Returns:
            True if removed, False if the graph does not hold it

        Raises:
            ValueError: If an edge of this graph is still incident to it
        """
        if not self.contains_vertex(pVertex):
            logger.debug(f"{pVertex!r} not found in graph")
            return False
        if self.get_incident_edges(pVertex):
            raise ValueError(f"{pVertex!r} still has incident edges in this graph")
        self.aVertex = [pVertex_held for pVertex_held in self.aVertex if pVertex_held is not pVertex]
        return True

    # ========================================================================
    # UNLINKING
    # ========================================================================

    def unlink(self, pVertex_a: pyvertex, pVertex_b: pyvertex) -> bool:
        """
        Unlink one edge of this graph between two of its vertices.

        Args:
            pVertex_a: One endpoint
            pVertex_b: The other endpoint

        Returns:
            True if an edge was unlinked; False if either vertex is not in
            this graph, or the graph holds no edge between them

        Raises:
            GraphInvariantError: If the pair's adjacency bookkeeping is corrupt
        """
        if not self.contains_vertex(pVertex_a) or not self.contains_vertex(pVertex_b):
            logger.debug(f"{pVertex_a!r} or {pVertex_b!r} not found in graph")
            return False
        return unlink(pVertex_a, pVertex_b, self.aEdge)

    def unlink_edge(self, pEdge: pyedge) -> bool:
        """
        Unlink a specific edge held by this graph.

        Returns:
            True if the edge was unlinked, False if this graph does not hold it

        Raises:
            GraphInvariantError: If the endpoints' bookkeeping is corrupt
        """
        if not self.contains_edge(pEdge):
            logger.debug(f"{pEdge!r} not found in graph")
            return False
        return pEdge.unlink()

    def _discard_edge(self, pEdge: pyedge) -> None:
        """Drop an edge that has been unlinked elsewhere."""
        _remove_by_identity(self.aEdge, pEdge)

    # ========================================================================
    # STRUCTURE ANALYSIS
    # ========================================================================

    def get_degree_sequence(self) -> np.ndarray:
        """Degrees of the graph's vertices in aVertex order."""
        return self._analyzer.get_degree_sequence()

    def get_adjacency_matrix(self) -> np.ndarray:
        """Edge multiplicity matrix over aVertex, self-loops counted twice."""
        return self._analyzer.get_adjacency_matrix()

    def find_parallel_edges(self) -> List[List[pyedge]]:
        """Groups of edges sharing the same endpoints."""
        return self._analyzer.find_parallel_edges()

    def find_self_loops(self) -> List[pyedge]:
        return self._analyzer.find_self_loops()

    def find_isolated_vertices(self) -> List[pyvertex]:
        return self._analyzer.find_isolated_vertices()

    def check_consistency(self) -> bool:
        """Verify adjacency bookkeeping of the graph's vertices."""
        return self._analyzer.check_consistency()

    def __repr__(self) -> str:
        return f"pygraph(nVertex={self.nVertex}, nEdge={self.nEdge})"
