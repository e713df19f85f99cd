#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/logging_utils.py
"""Logging setup for the docmark command line.

The library modules only create module loggers; handlers are installed here
by the CLI. Unresolved cross-references are reported at WARNING level by
``docmark.references``, so the default console level shows them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from docmark.exceptions import ValidationError

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
_TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Convert a level name or number to a numeric logging level.

    Raises
    ------
    ValidationError
        If ``log_level`` is not one of ``LOG_LEVEL_NAMES``

    """
    if isinstance(log_level, int):
        return log_level
    name = str(log_level).upper()
    if name not in LOG_LEVEL_NAMES:
        raise ValidationError(
            f"Unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVEL_NAMES)}",
            parameter_name="log_level",
            parameter_value=log_level,
        )
    return getattr(logging, name)


def _console_handler(rich_output: bool, trace_mode: bool) -> logging.Handler:
    if rich_output:
        from rich.console import Console
        from rich.logging import RichHandler

        return RichHandler(
            console=Console(stderr=True),
            show_time=trace_mode,
            show_path=trace_mode,
            markup=False,
        )

    handler = logging.StreamHandler(sys.stderr)
    if trace_mode:
        handler.setFormatter(logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    return handler


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    rich_output: bool = False,
) -> logging.Logger:
    """Install console (and optionally file) handlers on the root logger.

    Handlers from an earlier call are closed and replaced, so calling this
    once per CLI invocation is safe.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name, e.g. ``"WARNING"``
    log_file : str, optional
        Also append log records to this file. Always uses the trace format.
    trace_mode : bool, default False
        Include timestamps and logger names on the console
    rich_output : bool, default False
        Use a ``rich`` console handler instead of a plain stream handler

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_log_level(log_level)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root_logger.setLevel(level)

    console_handler = _console_handler(rich_output, trace_mode)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            root_logger.warning("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(_TRACE_FORMAT, datefmt=_TRACE_DATE_FORMAT))
            root_logger.addHandler(file_handler)
            root_logger.debug("Logging to file: %s", log_file)

    return root_logger
