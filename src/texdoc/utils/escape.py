#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/utils/escape.py
"""LaTeX text escaping utilities."""

from __future__ import annotations

import re

from texdoc.constants import LATEX_SPECIAL_CHARS

_SPECIAL_CHAR_PATTERN = re.compile("|".join(re.escape(char) for char in LATEX_SPECIAL_CHARS))


def escape_latex(text: str) -> str:
    r"""Escape special LaTeX characters in text content.

    Every special character is replaced in a single pass, so the braces
    introduced by a replacement such as ``\textbackslash{}`` are never
    escaped a second time.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for LaTeX body text

    Examples
    --------
        >>> escape_latex("50% of $x_1$")
        '50\\% of \\$x\\_1\\$'

    """
    if not text:
        return text

    return _SPECIAL_CHAR_PATTERN.sub(lambda match: LATEX_SPECIAL_CHARS[match.group(0)], text)
