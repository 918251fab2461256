"""Property tests over randomly built tile trees."""

from hypothesis import given, strategies as st

from tile_canvas import Layout, Margin, Tile
from tile_canvas.colors import BOLD, GREEN, RED, colorize
from tile_canvas.compositor import overlay, overlay_line
from tile_canvas.utils.ansi import strip_colors, visible_length
from tests.test_utils import assert_render_matches_size

plain_text = st.text(alphabet="abc xyz.#", max_size=8)
contents = st.lists(plain_text, max_size=4).map("\n".join)
styles = st.lists(st.sampled_from([RED, GREEN, BOLD]), max_size=2)
margins = st.builds(
    Margin,
    top=st.integers(0, 2),
    left=st.integers(0, 2),
    bottom=st.integers(0, 2),
    right=st.integers(0, 2),
)
offsets = st.integers(-5, 6)


@st.composite
def tiles(draw: st.DrawFn, depth: int = 2) -> Tile:
    layout = draw(st.sampled_from(list(Layout)))
    tile = Tile(colorize(draw(contents), *draw(styles)), layout, draw(margins))
    if depth > 0:
        for _ in range(draw(st.integers(0, 3))):
            child = draw(tiles(depth=depth - 1))
            if layout == Layout.MANUAL:
                tile.add_at(draw(offsets), draw(offsets), child)
            else:
                tile.append(child)
    return tile


@given(tiles())
def test_render_matches_width_and_height(tile: Tile) -> None:
    assert_render_matches_size(tile)


@given(contents, offsets, offsets)
def test_empty_foreground_leaves_background(background: str, x: int, y: int) -> None:
    assert overlay(background, "", x, y) == background


@given(plain_text, styles)
def test_overlay_onto_matching_blank_is_foreground(text: str, style: list[str]) -> None:
    foreground = colorize(text, *style)
    blank = " " * visible_length(foreground)
    assert overlay_line(blank, foreground, 0) == foreground


@given(st.text(alphabet="abcdef", min_size=1, max_size=8), styles, st.data())
def test_negative_offset_drops_leading_columns(
    text: str, style: list[str], data: st.DataObject
) -> None:
    k = data.draw(st.integers(0, len(text) - 1))
    result = overlay_line("", colorize(text, *style), -k)
    assert strip_colors(result) == text[k:]


@given(st.text(max_size=20).filter(lambda s: "\x1b" not in s), styles)
def test_colorize_keeps_visible_length(text: str, style: list[str]) -> None:
    assert visible_length(colorize(text, *style)) == visible_length(text)
