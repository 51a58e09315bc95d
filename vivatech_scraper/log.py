"""Logging setup driven by the stacked -v flag."""

import logging

from rich.logging import RichHandler

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def level_for_verbosity(verbosity: int) -> int:
    """Map -v count to a log level (3 or more means TRACE)."""
    return VERBOSITY_LEVELS.get(verbosity, TRACE)


def setup_logging(verbosity: int = 0) -> logging.Logger:
    """Configure the root logger with a rich handler."""
    # Clear old handlers
    root = logging.getLogger()
    for h in root.handlers[:]:
        root.removeHandler(h)

    logging.basicConfig(
        level=level_for_verbosity(verbosity),
        format="%(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
    )
    return logging.getLogger("vivatech_scraper")
