"""
Structural summaries of a multigraph.

This module computes degree sequences, adjacency matrices and groupings
of special edges. Nothing here walks paths or mutates the graph.
"""

import logging
from collections import defaultdict
from typing import DefaultDict, Dict, FrozenSet, List, TYPE_CHECKING

import numpy as np

from ..classes.edge import pyedge
from ..classes.exceptions import GraphInvariantError
from ..classes.vertex import pyvertex

if TYPE_CHECKING:
    from ..core.graph import pygraph

logger = logging.getLogger(__name__)


class StructureAnalyzer:
    """
    Read-only structural analysis of a pygraph.

    This class provides methods for:
    - Degree sequences and adjacency matrices
    - Finding parallel edges and self-loops
    - Finding isolated vertices
    - Checking adjacency bookkeeping
    """

    def __init__(self, graph: 'pygraph'):
        """
        Initialize the analyzer.

        Args:
            graph: pygraph instance to analyze
        """
        self.graph = graph

    def get_degree_sequence(self) -> np.ndarray:
        """
        Get the degree of every vertex in the graph.

        Degrees are the vertices' own, so edges outside this graph count too.

        Returns:
            Integer array aligned with graph.aVertex
        """
        return np.array([pVertex.degree for pVertex in self.graph.aVertex], dtype=np.int64)

    def get_adjacency_matrix(self) -> np.ndarray:
        """
        Build the edge multiplicity matrix of the graph.

        Entry [i, j] counts edges between aVertex[i] and aVertex[j]. A
        self-loop adds 2 to the diagonal, so each row sums to the number of
        edge endpoints the graph's edges place on that vertex.

        Returns:
            Symmetric integer array of shape (nVertex, nVertex)
        """
        dIndex: Dict[int, int] = {pVertex.lVertexID: i for i, pVertex in enumerate(self.graph.aVertex)}
        nVertex = len(dIndex)
        aMatrix = np.zeros((nVertex, nVertex), dtype=np.int64)

        nSkipped = 0
        for pEdge in self.graph.aEdge:
            iStart = dIndex.get(pEdge.pVertex_start.lVertexID)
            iEnd = dIndex.get(pEdge.pVertex_end.lVertexID)
            if iStart is None or iEnd is None:
                nSkipped += 1
                continue
            if iStart == iEnd:
                aMatrix[iStart, iStart] += 2
            else:
                aMatrix[iStart, iEnd] += 1
                aMatrix[iEnd, iStart] += 1

        if nSkipped > 0:
            logger.warning(f"Skipped {nSkipped} edges with endpoints outside the graph's vertices")
        return aMatrix

    def find_parallel_edges(self) -> List[List[pyedge]]:
        """
        Find parallel edges (multiple edges between the same vertex pair).

        Returns:
            Groups of two or more edges, in order of first appearance
        """
        dGroup: DefaultDict[FrozenSet[int], List[pyedge]] = defaultdict(list)
        for pEdge in self.graph.aEdge:
            key = frozenset((pEdge.pVertex_start.lVertexID, pEdge.pVertex_end.lVertexID))
            dGroup[key].append(pEdge)

        aGroup = [aEdge for aEdge in dGroup.values() if len(aEdge) > 1]
        logger.debug(f"Found {len(aGroup)} groups of parallel edges")
        return aGroup

    def find_self_loops(self) -> List[pyedge]:
        return [pEdge for pEdge in self.graph.aEdge if pEdge.is_self_loop]

    def find_isolated_vertices(self) -> List[pyvertex]:
        return [pVertex for pVertex in self.graph.aVertex if pVertex.is_isolated]

    def check_consistency(self) -> bool:
        """
        Verify degree and neighbour bookkeeping of every vertex in the graph.

        A degree sum different from twice the edge count is only logged,
        since a graph may hold a subset of the edges of its vertices.

        Returns:
            True when no fault is found

        Raises:
            GraphInvariantError: On one-sided adjacency, a negative degree, or
                neighbours recorded on a vertex with zero degree
        """
        for pVertex in self.graph.aVertex:
            if pVertex.degree < 0:
                logger.error(f"Negative degree on {pVertex!r}")
                raise GraphInvariantError(f"{pVertex!r} has negative degree {pVertex.degree}")

            aNeighbour = pVertex.neighbours
            if aNeighbour and pVertex.degree == 0:
                logger.error(f"{pVertex!r} has {len(aNeighbour)} neighbours but zero degree")
                raise GraphInvariantError(f"{pVertex!r} has neighbours but zero degree")

            for pNeighbour in aNeighbour:
                # raises on one-sided adjacency
                pVertex.is_adjacent_to(pNeighbour)

        nDegree_sum = int(np.sum(self.get_degree_sequence()))
        nEndpoint = 2 * len(self.graph.aEdge)
        if nDegree_sum != nEndpoint:
            logger.info(f"Degree sum {nDegree_sum} differs from {nEndpoint} edge endpoints; "
                        f"graph is a partial view of its vertices' edges")
        return True
