"""Plain text helpers shared by the tile tree and the compositor."""

from typing import List


def split_lines(content: str) -> List[str]:
    """Split ``content`` on universal newlines.

    ``\\n``, ``\\r\\n`` and ``\\r`` (plus the other separators recognized by
    :meth:`str.splitlines`) all end a line. A single trailing newline does not
    produce an extra empty line and ``""`` yields no lines at all.
    """
    return content.splitlines()


def spaces(n: int) -> str:
    """Return ``n`` spaces (empty for ``n <= 0``)."""
    return " " * max(n, 0)
