"""Logger setup for the ``fzolv`` namespace."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from . import config


def setup_logging(level: int = config.DEFAULT_LOG_LEVEL, log_file: str | Path | None = None) -> logging.Logger:
    """Send ``fzolv`` log records to stdout and, optionally, to ``log_file``.

    Missing parent directories of ``log_file`` are created. Repeated calls
    replace the package handlers.
    """
    logger = logging.getLogger("fzolv")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", ", ".join(type(h).__name__ for h in handlers))
    return logger
