"""Logging setup for the StarCon crossword core.

Library modules take a ``LOGGER = get_logger(__name__)`` and log under the
``starcon`` namespace: one INFO summary per build, placements and dropped
words at DEBUG, clue fallbacks at WARNING. The CLI calls
:func:`configure_logging` with the ``--log-level`` it was given.
"""

from __future__ import annotations

import logging
from typing import Optional


ROOT_LOGGER_NAME = "starcon"

# Chatty below WARNING while Gemini requests are in flight.
QUIET_LOGGERS = ("urllib3",)


def configure_logging(level: int = logging.INFO) -> None:
    """Install a single stderr handler on the root logger at ``level``.

    HTTP transport loggers stay at WARNING even when ``level`` is DEBUG, so a
    debug run shows placement decisions rather than connection pool chatter.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``starcon`` namespace.

    Installs the default configuration when the host application has not set
    up any handlers yet.
    """

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)
