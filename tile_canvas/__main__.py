"""Print a sample dashboard: ``python -m tile_canvas``.

Set ``TILE_CANVAS_LOG_LEVEL=DEBUG`` to see how the tree is assembled.
"""

import logging
import os

from tile_canvas.colors import BLUE, DKGREY, GREEN, PURPLE, RESET, colorize
from tile_canvas.examples.dashboard import dashboard, panel
from tile_canvas.logging_config import setup_logging

LOG_LEVEL_ENV = "TILE_CANVAS_LOG_LEVEL"

SAMPLE_PANELS = [
    panel(
        "Views",
        f"{DKGREY}Mon{RESET} {PURPLE}████████{RESET} 41\n"
        f"{DKGREY}Tue{RESET} {PURPLE}█████{RESET} 27\n"
        f"{DKGREY}Wed{RESET} {PURPLE}███████████{RESET} 58",
    ),
    panel(
        "Clones",
        f"{DKGREY}Mon{RESET} {BLUE}██{RESET} 6\n"
        f"{DKGREY}Tue{RESET} {BLUE}█{RESET} 3\n"
        f"{DKGREY}Wed{RESET} {BLUE}████{RESET} 12",
    ),
    panel("New stars", colorize("+ octocat\n+ hubot", GREEN), GREEN),
]


def main() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    setup_logging(logging.getLevelNamesMapping().get(level_name, logging.WARNING))
    print(dashboard(SAMPLE_PANELS).render())


if __name__ == "__main__":
    main()
