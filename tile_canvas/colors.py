"""256-color terminal palette.

Constants are raw SGR escapes that can be embedded in tile content; the
compositor measures them as zero-width.
"""

# Foreground / background prefixes
FG = "\x1b[38;5;"
BG = "\x1b[48;5;"

BOLD = "\x1b[1m"
RESET = "\x1b[0m"

# Foreground colors
RED = FG + "9m"
COPPER = FG + "173m"
YELLOW = FG + "227m"
GREEN = FG + "36m"
BLUE = FG + "33m"
PURPLE = FG + "105m"
GREY = FG + "247m"
DKGREY = FG + "242m"
WHITE = FG + "255m"
BLACK = FG + "232m"

# Background colors
BG_WHITE = BG + "255m"


def colorize(text: str, *styles: str) -> str:
    """Wrap ``text`` in ``styles`` followed by a reset.

    Each line is wrapped separately, splitting on the same universal newlines
    as tile content, so every line of a multi-line block stays colored after it
    is split and composited. Line endings are kept as they are. Without styles
    ``text`` is returned unchanged.
    """
    if not styles:
        return text
    prefix = "".join(styles)
    wrapped = []
    for line in text.splitlines(keepends=True):
        body = line.splitlines()[0]
        wrapped.append(f"{prefix}{body}{RESET}{line[len(body):]}")
    return "".join(wrapped)

