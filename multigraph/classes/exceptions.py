"""
Exceptions raised by the multigraph package.
"""


class GraphInvariantError(RuntimeError):
    """
    Raised when degree and neighbour bookkeeping have diverged.

    This signals corrupted internal state, not a caller mistake, and is
    never caught inside the package.
    """
