import logging
import sys
from typing import Optional

from .constants import LOGGER_NAME

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger.

    Attaches a single stderr handler to the ``katharsis`` logger; calling it
    again only updates the level.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
