"""Logging configuration for the TUI.

The terminal belongs to Textual while the dashboard runs, so records go to
a log file when one is configured and are discarded otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ramenwatch.constants.defaults import LOG_FORMAT_DEFAULT
from ramenwatch.models.state.app_settings import AppSettings

PACKAGE_LOGGER = "ramenwatch"
_HANDLER_MARKER = "_ramenwatch_handler"


def configure_logging(settings: AppSettings) -> logging.Logger:
    """Attach a single file (or null) handler to the package logger.

    Calling this again replaces the handler installed by a previous call.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()

    handler: logging.Handler
    if settings.log_file:
        log_path = Path(settings.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT_DEFAULT))
    else:
        handler = logging.NullHandler()

    setattr(handler, _HANDLER_MARKER, True)
    package_logger.addHandler(handler)
    package_logger.setLevel(settings.log_level)
    return package_logger


__all__ = ["PACKAGE_LOGGER", "configure_logging"]
