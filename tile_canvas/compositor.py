"""Tile compositing: size queries, overlay arithmetic and margins.

Rendering is a post-order walk of the tile tree. Each tile starts from its own
content lines; every child is rendered first and then overlaid onto that
running canvas at the child's offset, in insertion order, so later children
draw over earlier ones and over the parent's content. The tile's margin is
applied last.

Overlay works line by line. For a background line ``B`` and a foreground line
``F`` placed at column ``x``:

* ``x >= len(B)``: ``F`` is appended after padding ``B`` with spaces.
* ``0 <= x < len(B)``: ``F`` overwrites columns ``[x, x + len(F))``; columns of
  ``B`` past that range survive.
* ``x < 0``: the first ``-x`` columns of ``F`` are clipped and the remainder is
  overlaid at column 0. A line clipped entirely leaves ``B`` untouched.

Lengths and columns are visible columns (see :mod:`tile_canvas.utils.ansi`).
Color escapes stay attached to the character they precede; escapes of
overwritten or clipped characters are kept as zero-width runs where those
characters were. When part of the background survives after a foreground, all
background escapes up to that point are replayed before it, so the tail keeps
the color it had even if the foreground ends with a reset.

All functions here are pure; nothing is cached.
"""

import logging
from typing import TYPE_CHECKING, List, Sequence

from tile_canvas.margin import Margin
from tile_canvas.types import Lines
from tile_canvas.utils.ansi import cell_escapes, max_visible_length, split_cells
from tile_canvas.utils.text import spaces, split_lines

if TYPE_CHECKING:
    from tile_canvas.layout import Placement
    from tile_canvas.tile import Tile

logger = logging.getLogger(__name__)


# --- Size ---


def width(tile: "Tile") -> int:
    """Visible width of ``tile`` including its left and right margin."""
    content = max_visible_length(tile.content_lines)
    return tile.margin.horizontal + max(content, child_width(tile.children))


def height(tile: "Tile") -> int:
    """Line count of ``tile`` including its top and bottom margin."""
    content = len(tile.content_lines)
    return tile.margin.vertical + max(content, child_height(tile.children))


def child_width(children: Sequence["Placement"]) -> int:
    """Rightmost extent of ``children`` (0 without children).

    Negative offsets are not clamped, so a child hanging off the left edge
    contributes less than its own width.
    """
    return max((child.x + width(child.tile) for child in children), default=0)


def child_height(children: Sequence["Placement"]) -> int:
    """Bottom extent of ``children`` (0 without children)."""
    return max((child.y + height(child.tile) for child in children), default=0)


# --- Overlay ---


def overlay_line(background: str, foreground: str, x: int) -> str:
    """Composite one ``foreground`` line onto ``background`` at column ``x``."""
    fg_cells, fg_trailing = split_cells(foreground)
    if x < 0:
        clip = -x
        if clip >= len(fg_cells):
            if fg_cells:
                logger.debug(
                    "Foreground line %r clipped entirely at x=%d", foreground, x
                )
            return background
        # Escapes of clipped characters still set the color of what follows.
        foreground = (
            cell_escapes(fg_cells[:clip]) + "".join(fg_cells[clip:]) + fg_trailing
        )
        fg_cells = fg_cells[clip:]
        x = 0

    bg_cells, bg_trailing = split_cells(background)
    if x >= len(bg_cells):
        return background + spaces(x - len(bg_cells)) + foreground

    end = x + len(fg_cells)
    tail = bg_cells[end:]
    # A surviving tail gets every background escape up to it replayed, so the
    # color active at column ``end`` is restored after the foreground.
    carried = cell_escapes(bg_cells[:end] if tail else bg_cells[x:end])
    return "".join(bg_cells[:x]) + foreground + carried + "".join(tail) + bg_trailing


def overlay_lines(background: Lines, foreground: Lines, x: int, y: int) -> Lines:
    """Composite ``foreground`` lines onto ``background`` lines at ``(x, y)``.

    Returns a new list; neither argument is modified. An empty foreground
    returns a copy of ``background`` regardless of the offset.
    """
    canvas = list(background)
    rows = list(foreground)
    if y < 0:
        rows = rows[-y:]
        y = 0
    if not rows:
        return canvas
    if len(canvas) < y:
        canvas.extend([""] * (y - len(canvas)))
    for i, row in enumerate(rows, start=y):
        if i < len(canvas):
            canvas[i] = overlay_line(canvas[i], row, x)
        else:
            canvas.append(overlay_line("", row, x))
    return canvas


def overlay(background: str, foreground: str, x: int, y: int) -> str:
    """String form of :func:`overlay_lines`.

    Both blocks are split on universal newlines; the result is joined with
    ``\\n`` and carries no trailing newline.

    Example:
        >>> overlay("a\\nb\\nc", "1\\n2\\n3", 3, 0)
        'a  1\\nb  2\\nc  3'
    """
    if not foreground:
        return background
    lines = overlay_lines(split_lines(background), split_lines(foreground), x, y)
    return "\n".join(lines)


# --- Margin ---


def apply_margin(lines: Lines, margin: Margin) -> Lines:
    """Pad ``lines`` with the top and bottom blank lines of ``margin``.

    Blank lines are as wide as the widest line plus the horizontal margin.
    Left and right margins only widen those blank lines; content lines are
    returned as they are.
    """
    if margin.is_empty:
        return list(lines)
    blank = spaces(max_visible_length(lines) + margin.horizontal)
    return [blank] * margin.top + list(lines) + [blank] * margin.bottom


# --- Render ---


def render_lines(tile: "Tile") -> Lines:
    """Render ``tile`` to a list of lines (exactly ``height(tile)`` of them)."""
    canvas: List[str] = overlay_lines([], list(tile.content_lines), 0, 0)
    for child in tile.children:
        canvas = overlay_lines(canvas, render_lines(child.tile), child.x, child.y)
        # An empty child still claims the rows above its offset.
        if len(canvas) < child.y:
            canvas.extend([""] * (child.y - len(canvas)))
    return apply_margin(canvas, tile.margin)


def render(tile: "Tile") -> str:
    """Render ``tile`` to a single string joined with ``\\n``."""
    return "\n".join(render_lines(tile))
