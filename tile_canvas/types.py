"""Common type aliases and enumerations."""

from enum import StrEnum, auto
from typing import List

Lines = List[str]


class Layout(StrEnum):
    """How a tile positions the children it receives.

    Members:
        ROW: ``append`` packs children left-to-right.
        COLUMN: ``append`` packs children top-to-bottom.
        MANUAL: Children are placed at explicit ``(x, y)`` offsets with
            ``add_at``.
    """

    ROW = auto()
    COLUMN = auto()
    MANUAL = auto()
