import logging

import pytest

from tile_canvas import Layout
from tile_canvas.__main__ import SAMPLE_PANELS, main
from tile_canvas.colors import BOLD, GREEN, RESET, YELLOW
from tile_canvas.examples.dashboard import dashboard, panel
from tile_canvas.utils.ansi import strip_colors
from tests.test_utils import assert_render_matches_size


def test_panel_title_is_styled() -> None:
    text = panel("Views", "1\n2", GREEN)
    assert text == f"{BOLD}{GREEN}Views{RESET}\n1\n2"
    assert panel("Clones", "").split("\n") == [f"{BOLD}{YELLOW}Clones{RESET}"]


def test_dashboard_single_row() -> None:
    root = dashboard(["ab", "cde"], gutter=2)
    assert root.layout == Layout.COLUMN
    assert root.render() == "ab  cde"
    assert_render_matches_size(root)


def test_dashboard_wraps_rows_with_spacing() -> None:
    root = dashboard(["ab", "cde", "f"], columns=2, gutter=2, row_spacing=1)
    assert len(root.children) == 2
    assert root.render() == "ab  cde\n \nf\n "
    assert_render_matches_size(root)


def test_dashboard_uneven_panels() -> None:
    root = dashboard(["a\nb\nc", "xy"], gutter=1)
    assert root.render() == "a xy\nb\nc"


def test_dashboard_empty() -> None:
    assert dashboard([]).render() == ""


def test_dashboard_rejects_zero_columns() -> None:
    with pytest.raises(ValueError):
        dashboard(["a"], columns=0)


def test_sample_dashboard_layout() -> None:
    root = dashboard(SAMPLE_PANELS)
    lines = strip_colors(root.render()).split("\n")
    assert lines[0].startswith("Views")
    assert "Clones" in lines[0]
    assert any("New stars" in line for line in lines)
    assert_render_matches_size(root)


def test_main_prints_dashboard(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("TILE_CANVAS_LOG_LEVEL", "debug")
    logger = logging.getLogger("tile_canvas")
    try:
        main()
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
    out = strip_colors(capsys.readouterr().out)
    assert "Views" in out
    assert "+ hubot" in out
