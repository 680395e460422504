"""Logging configuration for signalign.

The engine only logs at DEBUG (per-pairing penalties, refinement results),
so :func:`setup_logging` defaults to that level. Nothing is emitted unless an
application configures handlers.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from ..exceptions import ConfigError

LOGGER_NAME = "signalign"

BRIEF_FORMAT = "%(levelname)s %(name)s: %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    level: Union[str, int] = "DEBUG",
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
    detailed: bool = False,
) -> logging.Logger:
    """Attach handlers to the package logger.

    Args:
        level: Level name or number for the package logger.
        log_file: Also write records here; parent directories are created.
        stream: Console stream, stderr when omitted.
        detailed: Include timestamps in the format.

    Calling it again replaces the handlers from the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(DETAILED_FORMAT if detailed else BRIEF_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Logger inside the ``signalign`` namespace.

    Names outside the namespace are nested under it, so ``setup_logging``
    always covers them.
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
