"""
Undirected edge representation and the linking protocol.

Edges are created only through ``link``, which updates the adjacency
bookkeeping of both endpoints, and retired through ``unlink`` or
``pyedge.unlink``, which reverses it. Self-loops and parallel edges are
allowed.
"""

import itertools
import logging
import weakref
from collections.abc import MutableSequence
from typing import Generic, Iterable, List, Optional, TypeVar, TYPE_CHECKING

from .exceptions import GraphInvariantError
from .vertex import pyvertex

if TYPE_CHECKING:
    from ..core.graph import pygraph

logger = logging.getLogger(__name__)

T = TypeVar('T')

_edge_id_counter = itertools.count()
_LINK_TOKEN = object()


class pyedge(Generic[T]):
    """
    An undirected edge between two vertices.

    The endpoints are kept in the order they were linked, but equality and
    hashing treat them as an unordered pair compared by vertex identity.
    Two parallel edges are therefore equal to each other while remaining
    distinct instances.
    """

    def __init__(self, pVertex_start: pyvertex, pVertex_end: pyvertex, _token: object = None):
        """
        Not for direct use; call ``link`` instead.

        Raises:
            TypeError: If called outside the linking protocol
        """
        if _token is not _LINK_TOKEN:
            raise TypeError("pyedge can not be constructed directly, use link()")

        self._pVertex_start = pVertex_start
        self._pVertex_end = pVertex_end
        self.lEdgeID: int = next(_edge_id_counter)
        self._iFlag_linked = True
        self._aGraph: 'weakref.WeakSet[pygraph]' = weakref.WeakSet()

    @property
    def pVertex_start(self) -> pyvertex:
        return self._pVertex_start

    @property
    def pVertex_end(self) -> pyvertex:
        return self._pVertex_end

    @property
    def is_linked(self) -> bool:
        """False once the edge has been unlinked."""
        return self._iFlag_linked

    @property
    def is_self_loop(self) -> bool:
        return self._pVertex_start is self._pVertex_end

    def is_parallel_to(self, other: 'pyedge') -> bool:
        """
        Determine whether another edge joins the same two vertices.

        An edge is never parallel to itself.

        Args:
            other: Edge to compare against

        Returns:
            True if ``other`` is a different instance with the same endpoints
        """
        if other is self:
            return False
        return self._same_endpoints(other)

    def is_incident_to(self, pVertex: pyvertex) -> bool:
        return pVertex is self._pVertex_start or pVertex is self._pVertex_end

    def get_opposite_vertex(self, pVertex: pyvertex) -> pyvertex:
        """
        Get the endpoint across the edge from ``pVertex``.

        Args:
            pVertex: One endpoint of this edge

        Returns:
            The other endpoint, or ``pVertex`` itself for a self-loop

        Raises:
            ValueError: If ``pVertex`` is not an endpoint of this edge
        """
        if pVertex is self._pVertex_start:
            return self._pVertex_end
        if pVertex is self._pVertex_end:
            return self._pVertex_start
        raise ValueError(f"{pVertex!r} is not an endpoint of {self!r}")

    def unlink(self) -> bool:
        """
        Unlink this specific edge.

        Reverses the adjacency update made by ``link`` and removes the edge
        from every graph holding it.

        Returns:
            True if the edge was unlinked, False if it was already unlinked

        Raises:
            GraphInvariantError: If the endpoints' bookkeeping no longer
                agrees with this edge being linked
        """
        if not self._iFlag_linked:
            logger.debug(f"{self!r} is not linked")
            return False

        if not _check_unlinkable(self._pVertex_start, self._pVertex_end):
            logger.error(f"{self!r} is linked but its endpoints are not adjacent")
            raise GraphInvariantError(f"{self!r} is linked but its endpoints are not adjacent")

        _sever(self._pVertex_start, self._pVertex_end, self)
        return True

    def _same_endpoints(self, other: 'pyedge') -> bool:
        return self._joins(other._pVertex_start, other._pVertex_end)

    def _joins(self, pVertex_a: pyvertex, pVertex_b: pyvertex) -> bool:
        # compare by identity, vertex content may repeat
        return ((self._pVertex_start is pVertex_a and self._pVertex_end is pVertex_b) or
                (self._pVertex_start is pVertex_b and self._pVertex_end is pVertex_a))

    def _retire(self) -> None:
        """Mark the edge unlinked and drop it from the graphs holding it."""
        self._iFlag_linked = False
        for pGraph in list(self._aGraph):
            pGraph._discard_edge(self)
        self._aGraph.clear()

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, pyedge):
            return NotImplemented
        return self._same_endpoints(other)

    def __hash__(self) -> int:
        # order independent so (a, b) and (b, a) hash alike
        return hash(self._pVertex_start) + hash(self._pVertex_end)

    def __repr__(self) -> str:
        return f"pyedge({self._pVertex_start} - {self._pVertex_end})"


def link(pVertex_start: pyvertex, pVertex_end: pyvertex) -> pyedge:
    """
    Create an edge between two vertices.

    Each endpoint records the other as a neighbour and gains one degree.
    A self-loop registers once and gains two degrees. No check is made for
    an existing edge, so parallel edges are created freely.

    Args:
        pVertex_start: First endpoint
        pVertex_end: Second endpoint, may be the same vertex

    Returns:
        The new edge

    Raises:
        TypeError: If either endpoint is not a pyvertex
    """
    if not isinstance(pVertex_start, pyvertex) or not isinstance(pVertex_end, pyvertex):
        raise TypeError("both endpoints must be pyvertex instances")

    pEdge = pyedge(pVertex_start, pVertex_end, _token=_LINK_TOKEN)
    if pVertex_start is pVertex_end:
        pVertex_start._register_adjacency(pVertex_start, pEdge)
    else:
        pVertex_start._register_adjacency(pVertex_end, pEdge)
        pVertex_end._register_adjacency(pVertex_start, pEdge)

    logger.debug(f"Linked {pEdge!r}")
    return pEdge


def unlink(pVertex_a: pyvertex, pVertex_b: pyvertex,
           aEdge: Optional[List[pyedge]] = None) -> bool:
    """
    Remove one edge between two vertices.

    When ``aEdge`` is given, the edge to retire is taken from that
    collection and removed from it; if the collection holds no such edge
    nothing changes. Otherwise any linked edge between the pair is retired.

    Args:
        pVertex_a: One endpoint
        pVertex_b: The other endpoint
        aEdge: Optional collection to take the edge from

    Returns:
        True if an edge was unlinked, False if the vertices are not linked

    Raises:
        GraphInvariantError: If the pair is adjacent on one side only, or
            adjacent while a degree is already exhausted
        TypeError: If ``aEdge`` is not a mutable sequence
    """
    if aEdge is not None and not isinstance(aEdge, MutableSequence):
        raise TypeError(f"aEdge must be a mutable sequence, got {type(aEdge).__name__}")

    if not _check_unlinkable(pVertex_a, pVertex_b):
        logger.debug(f"{pVertex_a!r} and {pVertex_b!r} are not linked")
        return False

    if aEdge is not None:
        pEdge = find_edge(pVertex_a, pVertex_b, aEdge)
        if pEdge is None:
            logger.debug(f"No edge between {pVertex_a!r} and {pVertex_b!r} in the given collection")
            return False
    else:
        pEdge = find_edge(pVertex_a, pVertex_b, pVertex_a.get_incident_edges())

    if aEdge is not None:
        _remove_by_identity(aEdge, pEdge)
    _sever(pVertex_a, pVertex_b, pEdge)
    return True


def find_edge(pVertex_a: pyvertex, pVertex_b: pyvertex,
              aEdge: Iterable[pyedge]) -> Optional[pyedge]:
    """
    Find the first linked edge joining two vertices.

    Args:
        pVertex_a: One endpoint
        pVertex_b: The other endpoint
        aEdge: Edges to search

    Returns:
        The matching edge, or None
    """
    for pEdge in aEdge:
        if pEdge.is_linked and pEdge._joins(pVertex_a, pVertex_b):
            return pEdge
    return None


def _check_unlinkable(pVertex_a: pyvertex, pVertex_b: pyvertex) -> bool:
    """
    Validate that an edge between the pair may be removed.

    Returns:
        False if the pair is not adjacent

    Raises:
        GraphInvariantError: If adjacency is one-sided or a degree is too low
    """
    if not pVertex_a.is_adjacent_to(pVertex_b):
        return False

    if pVertex_a is pVertex_b:
        bExhausted = pVertex_a.degree < 2
    else:
        bExhausted = pVertex_a.degree <= 0 or pVertex_b.degree <= 0
    if bExhausted:
        logger.error(f"{pVertex_a!r} and {pVertex_b!r} are adjacent but degrees are "
                     f"{pVertex_a.degree} and {pVertex_b.degree}")
        raise GraphInvariantError(
            f"{pVertex_a!r} and {pVertex_b!r} are adjacent with exhausted degree")
    return True


def _sever(pVertex_a: pyvertex, pVertex_b: pyvertex, pEdge: Optional[pyedge]) -> None:
    if pVertex_a is pVertex_b:
        pVertex_a._revoke_adjacency(pVertex_a, pEdge)
    else:
        pVertex_a._revoke_adjacency(pVertex_b, pEdge)
        pVertex_b._revoke_adjacency(pVertex_a, pEdge)

    if pEdge is not None:
        pEdge._retire()
        logger.debug(f"Unlinked {pEdge!r}")
    else:
        logger.debug(f"Unlinked {pVertex_a!r} and {pVertex_b!r} (edge no longer referenced)")


def _remove_by_identity(aEdge: List[pyedge], pEdge: pyedge) -> bool:
    # list.remove would match any parallel edge
    for i, pEdge_held in enumerate(aEdge):
        if pEdge_held is pEdge:
            del aEdge[i]
            return True
    return False
