"""Centralized logger configuration.

Usage:
    from bizdir.utils.logger import get_logger
    logger = get_logger(__name__)

Every logger lives under the `bizdir` namespace so one level setting covers
the core package and the GUI. HTTP client chatter is held at WARNING.
"""
import logging
import os

ROOT_LOGGER = "bizdir"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LEVEL = os.getenv("BIZDIR_LOG_LEVEL", "INFO").upper()
QUIET_LOGGERS = ("urllib3", "requests")


def _level(level) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logging(level=DEFAULT_LEVEL) -> None:
    """Configure the root handler once and apply `level` to bizdir loggers."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logging.getLogger(ROOT_LOGGER).setLevel(_level(level))
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the bizdir namespace.

    Module names outside the `bizdir` package (e.g. `gui.controller`) are
    nested under `bizdir.` so they share its level.
    """
    if not logging.getLogger().handlers:
        setup_logging()
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
