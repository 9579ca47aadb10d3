"""Logging helpers for zipview.

The package logs under the ``zipview`` logger and installs only a
``NullHandler`` on import, leaving output to the application. Call
``setup_root_logger`` to attach a console handler for ad-hoc debugging.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "zipview"

# Handler attached by setup_root_logger, if any
_installed_handler: Optional[logging.Handler] = None

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """Attach a single output handler to the ``zipview`` logger.

    Repeated calls return the already installed handler until
    ``reset_logging`` is called. Records still propagate to the root logger.

    Args:
        level: Level for the ``zipview`` logger (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).

    Returns:
        The handler in use.
    """
    global _installed_handler

    if _installed_handler is not None:
        return _installed_handler

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    _installed_handler = handler
    return handler


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a zipview module.

    The level is left untouched so it is inherited from ``zipview`` unless
    set explicitly.

    Args:
        name: Logger name (typically __name__ from calling module).
    """
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``zipview`` logger and of any installed handler."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
    if _installed_handler is not None:
        _installed_handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Remove the installed handler and let the level inherit again."""
    global _installed_handler

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _installed_handler is not None:
        root_logger.removeHandler(_installed_handler)
        _installed_handler = None
    root_logger.setLevel(logging.NOTSET)
