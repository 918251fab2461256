"""ANSI color escape measurement and splitting.

Only SGR color directives (``ESC [ <digits and ;> m``) are recognized. Each
matched escape is zero columns wide; every other code point is exactly one
column. Wide glyphs and combining characters are not measured specially.

Splicing helpers work on *cells*: a cell is one visible character together
with the escapes written immediately before it. Slicing a list of cells keeps
every escape next to the character it colors, so a splice can never cut an
escape in half.

Examples
--------
>>> visible_length("\\x1b[38;5;9mred\\x1b[0m")
3
>>> split_cells("a\\x1b[1mb\\x1b[0m")
(['a', '\\x1b[1mb'], '\\x1b[0m')
"""

import re
from typing import Iterable, List, Sequence, Tuple

ANSI_COLOR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

Cell = str


def strip_colors(line: str) -> str:
    """Return ``line`` with all color escapes removed."""
    return ANSI_COLOR_PATTERN.sub("", line)


def visible_length(line: str) -> int:
    """Number of columns ``line`` occupies on a terminal."""
    return len(strip_colors(line))


def max_visible_length(lines: Iterable[str]) -> int:
    """Widest visible length among ``lines`` (0 when there are none)."""
    return max((visible_length(line) for line in lines), default=0)


def split_cells(line: str) -> Tuple[List[Cell], str]:
    """Split ``line`` into visible cells plus trailing escapes.

    Returns:
        Tuple[List[Cell], str]: One cell per visible character, each prefixed by
        the escapes that directly precede it, and the escapes that follow the
        last visible character (often a reset).
    """
    cells: List[Cell] = []
    pending = ""
    pos = 0
    for match in ANSI_COLOR_PATTERN.finditer(line):
        for char in line[pos : match.start()]:
            cells.append(pending + char)
            pending = ""
        pending += match.group()
        pos = match.end()
    for char in line[pos:]:
        cells.append(pending + char)
        pending = ""
    return cells, pending


def cell_escapes(cells: Sequence[Cell]) -> str:
    """Concatenate the escapes carried by ``cells``, dropping their characters."""
    return "".join(cell[:-1] for cell in cells)
