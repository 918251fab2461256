"""Structural errors raised while building a tile tree.

All of them signal API misuse by the caller; none depend on the text being
laid out, so there is nothing to retry.
"""


class TileError(Exception):
    """Base class for tile tree errors."""


class InvalidLayoutOperation(TileError):
    """Child added with an operation the parent's layout does not allow."""


class TileAlreadyAttached(TileError):
    """Tile attached to a second parent, to itself, or to its own subtree."""
