#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/utils/__init__.py
"""Utility modules for the texdoc package.

This package contains output-sink handling, LaTeX escaping and the debug
timing helper used by the renderers.
"""

from texdoc.utils.escape import escape_latex
from texdoc.utils.io_utils import describe_sink, is_binary_stream, open_text_sink

__all__ = [
    "escape_latex",
    "describe_sink",
    "is_binary_stream",
    "open_text_sink",
]
