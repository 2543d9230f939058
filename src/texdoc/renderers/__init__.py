#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/texdoc/renderers/__init__.py
r"""Renderers that serialize a document tree.

- BaseRenderer: abstract base class shared by renderers
- LatexRenderer: render to LaTeX source

Examples
--------
    >>> from texdoc.ast import Document
    >>> from texdoc.renderers import LatexRenderer
    >>> print(LatexRenderer().render_to_string(Document()), end="")
    \documentclass{article}
    \begin{document}
    \end{document}

"""

from texdoc.renderers.base import BaseRenderer
from texdoc.renderers.latex import LatexRenderer

__all__ = ["BaseRenderer", "LatexRenderer"]
