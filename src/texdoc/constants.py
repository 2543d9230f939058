#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the texdoc library.

This module centralizes the fixed LaTeX markers and the default configuration
values used across texdoc, so renderers and options share one source of truth.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. LaTeX Markers - fixed commands emitted by the renderer
3. Renderer Defaults - default values for LatexRendererOptions
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

AlignmentCode = Literal["l", "r", "c"]

# =============================================================================
# LaTeX Markers
# =============================================================================

DOCUMENT_ENVIRONMENT = "document"
ALIGN_ENVIRONMENT = "align"
TABULAR_ENVIRONMENT = "tabular"

TABLE_OF_CONTENTS_COMMAND = r"\tableofcontents"
TITLE_PAGE_COMMAND = r"\maketitle"
CLEAR_PAGE_COMMAND = r"\clearpage"
HLINE_COMMAND = r"\hline"
NONUMBER_COMMAND = r"\nonumber"

TABLE_COLUMN_SEPARATOR = " & "
ROW_TERMINATOR = r" \\"

# Special characters escaped in plain text when escaping is enabled
LATEX_SPECIAL_CHARS: dict[str, str] = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "_": r"\_",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_LATEX_ESCAPE_PLAIN_TEXT = False
DEFAULT_LATEX_ENCODING = "utf-8"
DEFAULT_LATEX_SECTION_COMMAND = "section"
