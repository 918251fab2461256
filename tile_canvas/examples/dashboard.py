"""Dashboard layout built from pre-rendered text panels.

Panels are arranged in rows of ``columns`` panels. Inside a row each panel but
the last reserves ``gutter`` columns of right margin, which is what pushes the
next panel along; rows are stacked in a ``COLUMN`` root and every row after the
first gets ``row_spacing`` blank lines above and below it.

Usage:

``print(dashboard([panel("Views", views), panel("Clones", clones)]).render())``
"""

from typing import Sequence

from tile_canvas.colors import BOLD, YELLOW, colorize
from tile_canvas.margin import EMPTY_MARGIN, Margin
from tile_canvas.tile import Tile
from tile_canvas.types import Layout
from tile_canvas.utils.text import split_lines

DEFAULT_COLUMNS = 2
DEFAULT_GUTTER = 4
DEFAULT_ROW_SPACING = 1


def panel(title: str, body: str, color: str = YELLOW) -> str:
    """Return ``body`` headed by a bold, colored ``title`` line."""
    return "\n".join([colorize(title, BOLD, color), *split_lines(body)])


def dashboard(
    panels: Sequence[str],
    columns: int = DEFAULT_COLUMNS,
    gutter: int = DEFAULT_GUTTER,
    row_spacing: int = DEFAULT_ROW_SPACING,
) -> Tile:
    """Arrange ``panels`` into a grid of rows.

    Arguments:
        panels: Pre-rendered text blocks, placed left-to-right, top-to-bottom.
        columns: Maximum panels per row.
        gutter: Blank columns between neighbouring panels.
        row_spacing: Blank lines above and below every row after the first.

    Returns:
        Tile: ``COLUMN`` root tile holding one ``ROW`` tile per row.
    """
    if columns < 1:
        raise ValueError("columns must be at least 1")
    root = Tile(layout=Layout.COLUMN)
    for start in range(0, len(panels), columns):
        row_margin = (
            EMPTY_MARGIN
            if start == 0
            else Margin(top=row_spacing, bottom=row_spacing)
        )
        row = Tile(layout=Layout.ROW, margin=row_margin)
        chunk = panels[start : start + columns]
        for i, text in enumerate(chunk):
            last = i == len(chunk) - 1
            row.append(text, Margin(right=0 if last else gutter))
        root.append(row)
    return root
