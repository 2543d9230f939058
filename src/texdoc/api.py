#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/api.py
"""Top-level rendering functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from texdoc.ast.nodes import Document
from texdoc.options import LatexRendererOptions
from texdoc.renderers.latex import LatexRenderer

logger = logging.getLogger(__name__)


def _resolve_options(options: Optional[LatexRendererOptions], **kwargs: Any) -> Optional[LatexRendererOptions]:
    """Merge keyword overrides into the options object."""
    if kwargs and options:
        return options.create_updated(**kwargs)
    if kwargs:
        return LatexRendererOptions(**kwargs)
    return options


def render_to_string(doc: Document, options: Optional[LatexRendererOptions] = None, **kwargs: Any) -> str:
    r"""Render a document to a LaTeX string.

    Parameters
    ----------
    doc : Document
        Document to render
    options : LatexRendererOptions, optional
        Rendering options
    kwargs : Any
        Option fields that override ``options``, e.g. ``escape_plain_text=True``

    Returns
    -------
    str
        LaTeX source

    Examples
    --------
        >>> render_to_string(Document())
        '\\documentclass{article}\n\\begin{document}\n\\end{document}\n'

    """
    renderer = LatexRenderer(_resolve_options(options, **kwargs))
    return renderer.render_to_string(doc)


def render(
    doc: Document,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    options: Optional[LatexRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render a document to LaTeX and write it to an output destination.

    Parameters
    ----------
    doc : Document
        Document to render
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. Can be:
        - None: Returns the LaTeX source as a string
        - str or Path: Writes to the file at that path
        - IO[bytes]: Writes encoded text to a binary file-like object
        - IO[str]: Writes to a text file-like object
    options : LatexRendererOptions, optional
        Rendering options
    kwargs : Any
        Option fields that override ``options``

    Returns
    -------
    str or None
        The LaTeX source if ``output`` is None, otherwise None

    Raises
    ------
    OutputWriteError
        If the destination rejects a write
    OutputEncodingError
        If the text cannot be encoded for a binary destination

    Examples
    --------
        >>> render(doc, "report.tex")
        >>> render(doc, "report.tex", encoding="latin-1")

    """
    renderer = LatexRenderer(_resolve_options(options, **kwargs))
    if output is None:
        logger.debug("No output destination given, returning LaTeX as a string")
        return renderer.render_to_string(doc)

    renderer.render(doc, output)
    return None


__all__ = ["render", "render_to_string"]
