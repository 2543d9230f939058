#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/__init__.py
r"""texdoc - build LaTeX documents in Python.

texdoc provides a typed document tree for LaTeX (sections, paragraphs with
inline formatting, lists, tables, equations, raw environments) and a
renderer that serializes the tree to LaTeX source.

Examples
--------
Build and render a document:

    >>> from texdoc import Document, Section, render
    >>> doc = Document()
    >>> doc.preamble.set_title("Lab Report").use_package("amsmath")
    >>> results = Section("Results")
    >>> results.push("Everything worked.")
    >>> doc.push(results)
    >>> print(render(doc), end="")
    \documentclass{article}
    \usepackage{amsmath}
    <BLANKLINE>
    \title{Lab Report}
    \begin{document}
    \section{Results}
    <BLANKLINE>
    Everything worked.
    <BLANKLINE>
    \end{document}

Write straight to a file:

    >>> render(doc, "report.tex")

"""

from texdoc.api import render, render_to_string
from texdoc.ast import (
    Align,
    Bold,
    ClearPage,
    ColumnAlignment,
    Document,
    DocumentClass,
    DocumentStatistics,
    Environment,
    Equation,
    InlineMath,
    Input,
    Italic,
    Item,
    List,
    ListKind,
    Node,
    NodeVisitor,
    Paragraph,
    Plain,
    Preamble,
    RawColumnSettings,
    Section,
    Table,
    TableColumnSettings,
    TableHLine,
    TableOfContents,
    TableRow,
    TitlePage,
    TypedColumnSettings,
    UserDefined,
    ValidationVisitor,
)
from texdoc.exceptions import (
    InvalidOptionsError,
    OutputEncodingError,
    OutputWriteError,
    RenderingError,
    TexDocError,
    ValidationError,
)
from texdoc.options import LatexRendererOptions
from texdoc.renderers import LatexRenderer

__version__ = "0.3.0"

__all__ = [
    # Rendering
    "render",
    "render_to_string",
    "LatexRenderer",
    "LatexRendererOptions",
    # Document tree
    "Document",
    "DocumentClass",
    "Preamble",
    "Section",
    "Paragraph",
    "Plain",
    "Bold",
    "Italic",
    "InlineMath",
    "TableOfContents",
    "TitlePage",
    "ClearPage",
    "Environment",
    "UserDefined",
    "Input",
    "Align",
    "Equation",
    "List",
    "ListKind",
    "Item",
    "Table",
    "TableRow",
    "TableHLine",
    "ColumnAlignment",
    "TableColumnSettings",
    "TypedColumnSettings",
    "RawColumnSettings",
    "Node",
    # Visitors
    "NodeVisitor",
    "ValidationVisitor",
    "DocumentStatistics",
    # Exceptions
    "TexDocError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "OutputWriteError",
    "OutputEncodingError",
    # Version
    "__version__",
]
