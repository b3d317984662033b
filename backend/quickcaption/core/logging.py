"""Process-wide logging setup driven by ``LOG_LEVEL``."""

from __future__ import annotations

import logging
import sys

from quickcaption.core.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "quickcaption-console"


def setup_logging() -> None:
    """Attach a single console handler to the root logger.

    Safe to call more than once: an existing handler installed by a previous
    call is replaced rather than duplicated.
    """
    settings = get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers[:]:
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.set_name(_HANDLER_NAME)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    root.addHandler(console)
