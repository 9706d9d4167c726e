from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


_LOGGER: logging.Logger | None = None
_FILE_HANDLER: RotatingFileHandler | None = None

LOG_FILENAME = "appsettings.log"


def get_logger(log_dir: Path | None = None, *, level: int | str | None = None) -> logging.Logger:
    """Return the package logger, optionally writing to <log_dir>/appsettings.log.

    The logger is configured once; a later call with a log directory attaches
    the rotating file handler if none is attached yet.
    """
    global _LOGGER, _FILE_HANDLER
    if _LOGGER is None:
        logger = logging.getLogger("appsettings")
        logger.propagate = False
        if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
            logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        _LOGGER = logger

    logger = _LOGGER
    if level is not None:
        logger.setLevel(level)

    if log_dir is not None and _FILE_HANDLER is None:
        base = Path(log_dir)
        base.mkdir(parents=True, exist_ok=True)
        fmt = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler = RotatingFileHandler(
            base / LOG_FILENAME, maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)
        _FILE_HANDLER = file_handler

    return logger


def get_child_logger(name: str) -> logging.Logger:
    """Return a namespaced logger under the package root logger."""

    return get_logger().getChild(name)


def reset_logger() -> None:
    """Detach the file handler so the next get_logger() call starts fresh."""
    global _LOGGER, _FILE_HANDLER
    if _LOGGER is not None and _FILE_HANDLER is not None:
        _LOGGER.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
    _FILE_HANDLER = None
    _LOGGER = None
