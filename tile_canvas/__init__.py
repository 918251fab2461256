"""tile_canvas
===========

Compose rectangular blocks of terminal text into a single canvas.

A :class:`Tile` holds lines of text (which may embed ANSI color escapes), a
:class:`Layout` and a :class:`Margin`. Children are packed into a row or a
column with :meth:`Tile.append`, or placed at explicit, possibly negative,
coordinates with :meth:`Tile.add_at`. :meth:`Tile.render` flattens the tree
into one ``\\n``-joined string::

    from tile_canvas import Layout, Margin, Tile

    charts = Tile(layout=Layout.ROW)
    charts.append(views, Margin(right=4))
    charts.append(clones)
    print(charts.render())

The compositing arithmetic lives in :mod:`tile_canvas.compositor`.
"""

from .errors import InvalidLayoutOperation, TileAlreadyAttached, TileError
from .layout import Offset, Placement
from .margin import EMPTY_MARGIN, Margin
from .tile import Tile
from .types import Layout

__all__ = [
    "EMPTY_MARGIN",
    "InvalidLayoutOperation",
    "Layout",
    "Margin",
    "Offset",
    "Placement",
    "Tile",
    "TileAlreadyAttached",
    "TileError",
]
