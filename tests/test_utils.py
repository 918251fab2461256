from typing import Sequence, Tuple

from tile_canvas import Layout, Margin, Tile
from tile_canvas.compositor import render_lines
from tile_canvas.utils.ansi import visible_length

Child = Tuple[int, int, str]


def make_manual_tile(content: str = "", children: Sequence[Child] = ()) -> Tile:
    """Manual tile with text children added at the given offsets, in order."""
    tile = Tile(content)
    for x, y, text in children:
        tile.add_at(x, y, text)
    return tile


def make_packed_tile(
    layout: Layout, *texts: str, margin: Margin = Margin()
) -> Tile:
    """Row or column tile with one text leaf appended per argument."""
    tile = Tile(layout=layout, margin=margin)
    for text in texts:
        tile.append(text)
    return tile


def assert_render_matches_size(tile: Tile) -> None:
    """Rendered block has exactly ``height`` lines, none wider than ``width``."""
    lines = render_lines(tile)
    assert len(lines) == tile.height()
    assert "\n".join(lines) == tile.render()
    for line in lines:
        assert visible_length(line) <= tile.width(), (
            f"Line {line!r} wider than {tile.width()}"
        )
