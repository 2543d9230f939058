#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/options.py
"""Configuration options for LaTeX rendering.

Options are frozen dataclasses: create a modified copy with
``create_updated`` rather than mutating an instance.
"""

from __future__ import annotations

import codecs
import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from texdoc.constants import (
    DEFAULT_LATEX_ENCODING,
    DEFAULT_LATEX_ESCAPE_PLAIN_TEXT,
    DEFAULT_LATEX_SECTION_COMMAND,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    encoding : str, default "utf-8"
        Encoding used when the output sink is a binary stream or a file path.

    """

    encoding: str = field(
        default=DEFAULT_LATEX_ENCODING,
        metadata={"help": "Text encoding for binary streams and file paths", "type": str, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the configured encoding.

        Raises
        ------
        ValueError
            If the encoding is not known to the codecs registry.

        """
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from e


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    r"""Configuration options for AST-to-LaTeX rendering.

    Parameters
    ----------
    escape_plain_text : bool, default False
        Whether to escape LaTeX special characters ($, %, &, etc.) in plain
        text runs. Off by default: plain text is emitted exactly as given.
        Raw passthrough content (user-defined lines, environment bodies,
        raw column specs) is never escaped.
    section_command : str, default "section"
        Command used for section headings, e.g. ``"chapter"`` for a book.

    """

    escape_plain_text: bool = field(
        default=DEFAULT_LATEX_ESCAPE_PLAIN_TEXT,
        metadata={"help": "Escape special LaTeX characters in plain text", "importance": "security"},
    )
    section_command: str = field(
        default=DEFAULT_LATEX_SECTION_COMMAND,
        metadata={"help": "LaTeX command used for section headings", "type": str, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation.

        Raises
        ------
        ValueError
            If the section command is empty or not a bare LaTeX command name.

        """
        super().__post_init__()

        if not self.section_command or not self.section_command.isalpha():
            raise ValueError(f"section_command must be a non-empty alphabetic name, got {self.section_command!r}")
