"""Logging setup for the ``python -m tile_canvas`` demo.

The library only emits records through module loggers and configures nothing
on import; scripts that want to see them call :func:`setup_logging`.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Send ``tile_canvas`` records at ``level`` and above to stderr.

    Calling it again replaces the handler installed by the previous call.
    Stdout is left to the rendered output.
    """
    logger = logging.getLogger("tile_canvas")
    logger.setLevel(level)
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
