"""Package-wide logging for routegraph.

Every module logs through ``get_logger(__name__)``, so all records flow to the
``routegraph`` logger. That logger owns a single stderr handler; stdout stays
free for command output.
"""

import logging
import sys

_ROOT_LOGGER_NAME = "routegraph"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def _configure_root_logger() -> logging.Logger:
    global _ROOT_LOGGER_CONFIGURED

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    if _ROOT_LOGGER_CONFIGURED:
        return root_logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.INFO)

    _ROOT_LOGGER_CONFIGURED = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``; its level follows the ``routegraph`` logger."""
    _configure_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``routegraph`` logger and its stderr handler."""
    root_logger = _configure_root_logger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the stderr handler; the next logger lookup installs a fresh one."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
