"""
Logging setup for the ``video_catalog_api`` package.

Only the package logger is configured; the root logger and the
loggers of uvicorn or pytest are left alone.  ``setup_logging`` may be
called once per ``create_app``: every call applies the requested
level, while handlers are attached only once (they are looked up by
name), so repeated app builds never duplicate log lines.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "video_catalog_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_CONSOLE_HANDLER = "video_catalog_api.console"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(h.get_name() == name for h in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the package logger.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Extra file to write records to.  Each distinct path gets one
        handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(logger, _CONSOLE_HANDLER):
        console_handler = logging.StreamHandler()
        console_handler.set_name(_CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        handler_name = f"{PACKAGE_LOGGER}.file:{log_path}"
        if not _has_handler(logger, handler_name):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(handler_name)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
