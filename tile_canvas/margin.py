"""Margin value object.

Margins pad a tile once, after its children have been composited. Top and
bottom margins become blank lines; left and right margins are reserved in the
tile's width (and therefore push the next sibling of a ``ROW`` further right)
but are not written into the content lines.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Margin:
    """Four-sided padding around a tile.

    Attributes:
        top: Blank lines above the content.
        left: Columns reserved before the content.
        bottom: Blank lines below the content.
        right: Columns reserved after the content.
    """

    top: int = 0
    left: int = 0
    bottom: int = 0
    right: int = 0

    def __post_init__(self) -> None:
        for name in ("top", "left", "bottom", "right"):
            if getattr(self, name) < 0:
                raise ValueError(f"Margin {name} must be non-negative")

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_MARGIN


EMPTY_MARGIN = Margin()
