"""Child placement and automatic offset computation.

``next_offset`` is the only place where the three layouts behave differently:
``ROW`` and ``COLUMN`` derive the next child's offset from the extent of the
children already placed, ``MANUAL`` refuses automatic placement altogether.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from tile_canvas.compositor import child_height, child_width
from tile_canvas.errors import InvalidLayoutOperation
from tile_canvas.types import Layout

if TYPE_CHECKING:
    from tile_canvas.tile import Tile


@dataclass(frozen=True)
class Offset:
    """Signed offset of a child inside its parent.

    Attributes:
        x: Column of the child's left edge (negative clips from the left).
        y: Row of the child's top edge (negative clips from the top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class Placement:
    """A child tile attached at ``(x, y)``."""

    x: int
    y: int
    tile: "Tile"


def next_offset(layout: Layout, children: Sequence[Placement]) -> Offset:
    """Return where ``append`` puts the next child.

    Arguments:
        layout: Layout of the parent tile.
        children: Children already attached, in insertion order.

    Raises:
        InvalidLayoutOperation: ``layout`` is ``MANUAL``.
    """
    if layout == Layout.ROW:
        return Offset(child_width(children), 0)
    if layout == Layout.COLUMN:
        return Offset(0, child_height(children))
    raise InvalidLayoutOperation(
        f"append() not allowed in '{layout}' layout, "
        "use add_at() with x,y coordinates, or use a different layout"
    )
