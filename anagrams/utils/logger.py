"""Logging utilities for anagram search."""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "anagrams"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging with a compact formatter.

    Only entry points call this; the library itself never touches the root
    logger, so an embedding application keeps its own handlers. Partition
    search can visit a very large number of residual profiles, so per-node
    events are only ever emitted at DEBUG level.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``anagrams`` namespace."""

    return logging.getLogger(name or PACKAGE_LOGGER)
