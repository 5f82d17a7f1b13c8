"""
Logging utilities for the Investments UI.

Provides a simple logger factory that creates configured Python loggers
with consistent formatting across the application.
"""

import logging
import os
from pathlib import Path

# Default log level from environment or INFO
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def logger_name(name: str) -> str:
    """
    Return the logger name to use for a module name or __file__ path.

    File paths are reduced to the module stem; a package's __init__.py is
    named after its package directory instead.

    Args:
        name: Logger name or __file__ path.
    """
    if "/" not in name and "\\" not in name:
        return name
    path = Path(name)
    if path.stem == "__init__":
        return path.parent.name
    return path.stem


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    log = logging.getLogger(logger_name(name))

    # Only configure if not already configured
    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)

    return log
