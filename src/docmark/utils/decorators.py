#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/utils/decorators.py
"""Utility context managers shared by the compiler and the CLI."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Compiling guide.md")

    Yields
    ------
    None
        Control flow to the code block being timed

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Compiling"):
        ...     nodes = compiler.parse(source)
        ... # Logs: "Compiling completed in 0.01s" at DEBUG level

    Notes
    -----
    Only measures time when the logger has DEBUG enabled. An exception
    raised in the block is logged with its elapsed time and re-raised.

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    try:
        yield
    except Exception:
        logger.debug("%s failed after %.2fs", operation, time.perf_counter() - start_time)
        raise
    logger.debug("%s completed in %.2fs", operation, time.perf_counter() - start_time)
