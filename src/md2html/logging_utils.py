#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/logging_utils.py
"""Logging setup for applications embedding md2html.

Every md2html module logs through ``logging.getLogger(__name__)``, so all
records flow through the ``md2html`` package logger. :func:`configure_logging`
attaches handlers there and nowhere else: the root logger and any handlers
the host application installed are left alone.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from md2html.constants import LogLevelName

PACKAGE_LOGGER_NAME = "md2html"

# Handlers named with this prefix belong to configure_logging and are replaced on each call
_HANDLER_NAME_PREFIX = f"{PACKAGE_LOGGER_NAME}."

_DEFAULT_FORMAT = "md2html %(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(log_level: int | LogLevelName | str) -> int:
    """Turn a numeric level or level name into a numeric level.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or a registered level name (case-insensitive)

    Returns
    -------
    int
        Numeric logging level

    Raises
    ------
    ValueError
        If ``log_level`` is a name the logging module does not know

    """
    if isinstance(log_level, int):
        return log_level
    resolved = logging.getLevelName(str(log_level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return resolved


def configure_logging(
    log_level: int | LogLevelName | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    propagate: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Route md2html's log records to a console stream and, optionally, a file.

    Calling this again replaces the handlers installed by the previous call;
    handlers added to the package logger by anyone else are kept.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "DEBUG").
    log_file : str, optional
        Path to a log file that receives a copy of every record.
    trace_mode : bool, default False
        When true, emit timestamps, logger names and line numbers.
    propagate : bool, default False
        Whether records continue on to the root logger's handlers as well.
    stream : TextIO, optional
        Console stream; defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The configured ``md2html`` package logger.

    Raises
    ------
    ValueError
        If ``log_level`` is an unknown level name

    """
    resolved_level = resolve_log_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolved_level)
    package_logger.propagate = propagate

    for handler in list(package_logger.handlers):
        name = handler.get_name()
        if name and name.startswith(_HANDLER_NAME_PREFIX):
            package_logger.removeHandler(handler)
            handler.close()

    if trace_mode:
        formatter = logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT)
    else:
        formatter = logging.Formatter(_DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.set_name(f"{_HANDLER_NAME_PREFIX}console")
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.set_name(f"{_HANDLER_NAME_PREFIX}file")
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.debug("Logging to file: %s", log_file)

    return package_logger
