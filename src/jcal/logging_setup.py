from __future__ import annotations

import logging
import sys
from typing import Iterable

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

# matplotlib logs font discovery at DEBUG when the scatter diagnostic runs
NOISY_LOGGERS: tuple[str, ...] = (
    "matplotlib",
    "matplotlib.font_manager",
    "PIL",
)

_configured = False


def setup_logging(
    *,
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    """
    Configure the `jcal` logger once, from the command-line entry point.

    Library modules never call this; they only use `logging.getLogger(__name__)`.
    A second call only adjusts the level.
    """
    global _configured
    logger = logging.getLogger("jcal")
    logger.setLevel(level)
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    logger.addHandler(handler)
    logger.propagate = False

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logger.debug("logging initialised (level=%s)", logging.getLevelName(level))
