"""
Vertex representation for undirected multigraphs.

A vertex carries an arbitrary payload and the adjacency bookkeeping
(degree and neighbour set) that edges maintain on its behalf. Only the
edge-linking protocol in ``multigraph.classes.edge`` may change that
bookkeeping, through the underscore methods below.
"""

import itertools
import logging
import weakref
from typing import Dict, FrozenSet, Generic, List, TypeVar, TYPE_CHECKING

from .exceptions import GraphInvariantError

if TYPE_CHECKING:
    from .edge import pyedge

logger = logging.getLogger(__name__)

T = TypeVar('T')

_vertex_id_counter = itertools.count()


class pyvertex(Generic[T]):
    """
    A vertex in an undirected multigraph.

    Equality is identity: two vertices holding equal content are still two
    different vertices. Use ``content_equals`` to compare payloads.

    Attributes:
        content: Arbitrary payload, free to change at any time
        lVertexID: Stable id assigned at creation, used for hashing
    """

    def __init__(self, content: T):
        """
        Create an isolated vertex.

        Args:
            content: Payload carried by the vertex
        """
        self.content = content
        self.lVertexID: int = next(_vertex_id_counter)

        self._nDegree: int = 0
        # neighbour -> number of linked edges joining the two vertices
        self._dNeighbour: Dict['pyvertex', int] = {}
        self._dEdge_incident: 'weakref.WeakValueDictionary[int, pyedge]' = weakref.WeakValueDictionary()

    @property
    def degree(self) -> int:
        """Number of edge endpoints on this vertex, self-loops counted twice."""
        return self._nDegree

    @property
    def neighbours(self) -> FrozenSet['pyvertex']:
        """Set of adjacent vertices; contains this vertex if it has a self-loop."""
        return frozenset(self._dNeighbour)

    @property
    def is_isolated(self) -> bool:
        return self._nDegree == 0

    def get_incident_edges(self) -> List['pyedge']:
        """
        Get the linked edges touching this vertex that are still referenced somewhere.

        Returns:
            Incident edges in creation order
        """
        aItem = sorted(self._dEdge_incident.items(), key=lambda item: item[0])
        return [pEdge for _, pEdge in aItem]

    def is_adjacent_to(self, other: 'pyvertex') -> bool:
        """
        Determine whether an edge joins this vertex and another.

        A vertex with a self-loop is adjacent to itself.

        Args:
            other: Vertex to test

        Returns:
            True if the two vertices are neighbours

        Raises:
            GraphInvariantError: If only one of the two vertices records the other
        """
        bForward = other in self._dNeighbour
        bBackward = self in other._dNeighbour
        if bForward != bBackward:
            logger.error(f"One-sided adjacency between {self!r} and {other!r} "
                         f"(forward={bForward}, backward={bBackward})")
            raise GraphInvariantError(
                f"adjacency between {self!r} and {other!r} is recorded on one side only")
        return bForward

    def content_equals(self, other: 'pyvertex') -> bool:
        """Compare payloads, ignoring identity."""
        return self.content == other.content

    # ------------------------------------------------------------------
    # adjacency mutation, reserved for multigraph.classes.edge
    # ------------------------------------------------------------------

    def _register_adjacency(self, other: 'pyvertex', pEdge: 'pyedge') -> None:
        """
        Record one more edge between this vertex and ``other``.

        Called once per endpoint for a regular edge and once in total for a
        self-loop, in which case the degree grows by two.

        Args:
            other: Vertex at the far end of the edge
            pEdge: The edge being linked
        """
        self._dNeighbour[other] = self._dNeighbour.get(other, 0) + 1
        self._nDegree += 2 if other is self else 1
        self._dEdge_incident[pEdge.lEdgeID] = pEdge
        logger.debug(f"Registered {other!r} as neighbour of {self!r}, degree now {self._nDegree}")

    def _revoke_adjacency(self, other: 'pyvertex', pEdge: 'pyedge' = None) -> None:
        """
        Inverse of ``_register_adjacency``.

        The neighbour entry is dropped when the last edge joining the two
        vertices goes away.

        Args:
            other: Vertex at the far end of the edge
            pEdge: The edge being unlinked, if one is known

        Raises:
            GraphInvariantError: If the degree would become negative or no
                neighbour entry exists for ``other``
        """
        nDelta = 2 if other is self else 1
        if self._nDegree - nDelta < 0:
            logger.error(f"Degree of {self!r} would drop below zero ({self._nDegree} - {nDelta})")
            raise GraphInvariantError(f"degree of {self!r} would become negative")

        nCount = self._dNeighbour.get(other, 0)
        if nCount <= 0:
            logger.error(f"No neighbour entry for {other!r} on {self!r}")
            raise GraphInvariantError(f"{other!r} is not a neighbour of {self!r}")

        if nCount == 1:
            del self._dNeighbour[other]
        else:
            self._dNeighbour[other] = nCount - 1
        self._nDegree -= nDelta
        if pEdge is not None:
            self._dEdge_incident.pop(pEdge.lEdgeID, None)
        logger.debug(f"Revoked {other!r} as neighbour of {self!r}, degree now {self._nDegree}")

    def __eq__(self, other) -> bool:
        return self is other

    def __hash__(self) -> int:
        return hash(self.lVertexID)

    def __str__(self) -> str:
        return str(self.content)

    def __repr__(self) -> str:
        return f"pyvertex({self.content!r}, id={self.lVertexID})"


def _register_one_way_adjacency(pVertex: pyvertex, pVertex_other: pyvertex,
                                iFlag_count_degree: bool = True) -> None:
    """
    Write a neighbour entry on one vertex only, bypassing the edge factory.

    This leaves the pair in a corrupted state on purpose and exists only so
    tests can exercise the fatal consistency checks.

    Args:
        pVertex: Vertex receiving the neighbour entry
        pVertex_other: Vertex recorded as neighbour
        iFlag_count_degree: Also bump the degree of ``pVertex``
    """
    pVertex._dNeighbour[pVertex_other] = pVertex._dNeighbour.get(pVertex_other, 0) + 1
    if iFlag_count_degree:
        pVertex._nDegree += 2 if pVertex_other is pVertex else 1
    logger.warning(f"Forced one-way adjacency {pVertex!r} -> {pVertex_other!r}")
