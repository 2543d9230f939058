#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/utils/decorators.py
"""Timing helpers shared by the renderers."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Context manager for timing operations with DEBUG-level logging.

    The clock is only read when ``logger`` has DEBUG enabled, so wrapping a
    render in this context manager costs nothing in production.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "Rendering (latex)")

    Yields
    ------
    None
        Control flow to the code block being timed

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "Rendering (latex)"):
        ...     renderer.render(doc, "out.tex")
        ... # Logs: "Rendering (latex) completed in 1.23ms" at DEBUG level

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed * 1000:.2f}ms")
    else:
        yield
