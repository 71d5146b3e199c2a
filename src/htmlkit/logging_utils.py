#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/logging_utils.py
"""Logging setup for applications that want to see htmlkit's debug output.

htmlkit modules only create loggers under the ``htmlkit`` namespace and emit
nothing unless handlers are configured. :func:`configure_logging` attaches
handlers to that namespace alone; the root logger and any handlers the host
application installed are left untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "htmlkit"

# Marks handlers installed here so a repeated call can replace them
_HANDLER_FLAG = "_htmlkit_handler"


def _install(logger: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Route htmlkit log records to stderr and, optionally, a file.

    Calling this again replaces the handlers added by the previous call.
    Records handled here do not propagate to the root logger, so they are
    not printed twice when the host application has its own root handlers.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured ``htmlkit`` logger.

    """
    resolved_level = log_level if isinstance(log_level, int) else getattr(logging, str(log_level).upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved_level)
    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_FLAG, False)]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    _install(logger, logging.StreamHandler(sys.stderr), resolved_level, formatter)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            _install(logger, file_handler, resolved_level, formatter)
            logger.info("Logging to file: %s", log_file)

    return logger
