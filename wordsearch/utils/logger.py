"""Logging utilities scoped to the ``wordsearch`` logger hierarchy."""

from __future__ import annotations

import logging
from typing import Optional


PACKAGE_LOGGER = "wordsearch"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, *, propagate: bool = False) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Only the ``wordsearch`` logger is touched; handlers installed on the root
    logger by the host application are left alone. With ``propagate=False``
    records are not duplicated into root handlers.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package namespace.

    Until :func:`configure_logging` is called the package logger only carries
    a ``NullHandler``, so records reach whatever the application set up.
    """

    package = logging.getLogger(PACKAGE_LOGGER)
    if not package.handlers:
        package.addHandler(logging.NullHandler())
    return logging.getLogger(name or PACKAGE_LOGGER)
