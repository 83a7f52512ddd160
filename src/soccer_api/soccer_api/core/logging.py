from __future__ import annotations

import logging
import sys

# Parent of every module logger in this package (logging.getLogger(__name__)).
LOGGER_NAME = __package__.rpartition(".")[0]
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call more than once (e.g. one app per test): the handler is replaced,
    not duplicated.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    for handler in list(logger.handlers):
        if getattr(handler, "_soccer_api", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._soccer_api = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
