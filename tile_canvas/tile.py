"""Tile tree nodes.

A :class:`Tile` holds its own text, a :class:`~tile_canvas.types.Layout`, a
:class:`~tile_canvas.margin.Margin` and an ordered, append-only list of
positioned children. Tiles nest to any depth, similar to the blocks of a
newspaper page, and the whole tree flattens into terminal-ready text with
:meth:`Tile.render`.

Examples
--------
>>> from tile_canvas import Layout, Margin, Tile
>>> row = Tile(layout=Layout.ROW)
>>> _ = row.append("x")
>>> _ = row.append("yz")
>>> row.render()
'xyz'
>>> page = Tile("a\\nb\\nc")
>>> _ = page.add_at(3, 0, "1\\n2\\n3")
>>> print(page.render())
a  1
b  2
c  3

Each tile has at most one parent. The parent link is only used to refuse a
second attachment, which keeps the tree acyclic.
"""

import logging
from typing import Optional, Tuple, Union

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tile_canvas import compositor
from tile_canvas.errors import InvalidLayoutOperation, TileAlreadyAttached
from tile_canvas.layout import Placement, next_offset
from tile_canvas.margin import EMPTY_MARGIN, Margin
from tile_canvas.types import Layout
from tile_canvas.utils.text import split_lines

logger = logging.getLogger(__name__)

TileContent = Union[str, "Tile"]


class Tile:
    """Rectangular block of text with positioned children.

    Attributes:
        content_lines: The tile's own text, one entry per line.
        layout: Placement mode for children, fixed at construction.
        margin: Padding applied after children are composited.
        children: Attached children in insertion order.
        parent: Tile this one is attached to, if any.
    """

    def __init__(
        self,
        content: str = "",
        layout: Layout = Layout.MANUAL,
        margin: Margin = EMPTY_MARGIN,
    ) -> None:
        self._content_lines: Tuple[str, ...] = tuple(split_lines(content))
        self._layout = layout
        self._margin = margin
        self._children: PVector[Placement] = pvector()
        self._parent: Optional[Tile] = None

    @property
    def content_lines(self) -> Tuple[str, ...]:
        return self._content_lines

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def margin(self) -> Margin:
        return self._margin

    @property
    def children(self) -> PVector[Placement]:
        return self._children

    @property
    def parent(self) -> Optional["Tile"]:
        return self._parent

    # --- Mutation ---

    def append(self, child: TileContent, margin: Optional[Margin] = None) -> "Tile":
        """Attach ``child`` after the existing children of a ``ROW``/``COLUMN`` tile.

        Arguments:
            child: A tile, or text wrapped into a ``MANUAL`` leaf tile.
            margin: Margin for a text child; not accepted with a tile child.

        Returns:
            Tile: The attached child tile.

        Raises:
            InvalidLayoutOperation: This tile uses the ``MANUAL`` layout.
            TileAlreadyAttached: ``child`` already has a parent or is an
                ancestor of this tile.
        """
        offset = next_offset(self._layout, self._children)
        tile = _as_tile(child, margin)
        self._attach(offset.x, offset.y, tile)
        return tile

    def add_at(
        self, x: int, y: int, child: TileContent, margin: Optional[Margin] = None
    ) -> "Tile":
        """Attach ``child`` at ``(x, y)`` inside a ``MANUAL`` tile.

        Offsets may be negative; the part of the child that falls above or to
        the left of this tile is clipped when rendering.

        Raises:
            InvalidLayoutOperation: This tile uses the ``ROW`` or ``COLUMN`` layout.
            TileAlreadyAttached: ``child`` already has a parent or is an
                ancestor of this tile.
        """
        if self._layout != Layout.MANUAL:
            raise InvalidLayoutOperation(
                f"x,y positioning not allowed in '{self._layout}' layout, "
                "use append() instead, or use a different layout"
            )
        tile = _as_tile(child, margin)
        self._attach(x, y, tile)
        return tile

    def _attach(self, x: int, y: int, tile: "Tile") -> None:
        if tile._parent is not None:
            raise TileAlreadyAttached("Tile is already attached to a parent")
        ancestor: Optional[Tile] = self
        while ancestor is not None:
            if ancestor is tile:
                raise TileAlreadyAttached("Tile cannot be attached inside itself")
            ancestor = ancestor._parent
        tile._parent = self
        self._children = self._children.append(Placement(x, y, tile))
        logger.debug(
            "Attached child #%d at (%d, %d) to %s tile",
            len(self._children),
            x,
            y,
            self._layout,
        )

    # --- Queries ---

    def width(self) -> int:
        """Visible width, including left and right margin."""
        return compositor.width(self)

    def height(self) -> int:
        """Line count, including top and bottom margin."""
        return compositor.height(self)

    def render(self) -> str:
        """Flatten the tree rooted here into a ``\\n``-joined string."""
        return compositor.render(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Tile(layout={self._layout!s}, lines={len(self._content_lines)}, "
            f"children={len(self._children)}, margin={self._margin})"
        )


def _as_tile(child: TileContent, margin: Optional[Margin]) -> Tile:
    if isinstance(child, Tile):
        if margin is not None:
            raise ValueError("margin is only accepted with text content")
        return child
    return Tile(child, Layout.MANUAL, margin or EMPTY_MARGIN)
