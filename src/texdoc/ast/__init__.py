#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/ast/__init__.py
"""Abstract Syntax Tree (AST) module for LaTeX document construction.

The module consists of several components:

- nodes: the document root, preamble, sections, paragraphs and inline nodes
- equations, lists, tables: the structured block elements
- conversions: coercion of strings and tuples into nodes
- visitors: visitor pattern implementation for AST traversal

Examples
--------
Basic usage:

    >>> from texdoc.ast import Document, Section, Paragraph, Bold
    >>> from texdoc.renderers.latex import LatexRenderer
    >>>
    >>> doc = Document()
    >>> doc.preamble.set_title("Report").set_author("A. Writer")
    >>> intro = Section("Introduction")
    >>> intro.push(Paragraph().push_text("Some ").push(Bold("bold")).push_text(" text."))
    >>> doc.push(intro)
    >>>
    >>> latex = LatexRenderer().render_to_string(doc)

"""

from texdoc.ast.conversions import (
    ELEMENT_TYPES,
    INLINE_TYPES,
    Element,
    ElementLike,
    InlineLike,
    ParagraphElement,
    is_element,
    to_element,
    to_paragraph_element,
)
from texdoc.ast.equations import Align, Equation
from texdoc.ast.lists import Item, List, ListKind
from texdoc.ast.nodes import (
    Bold,
    ClearPage,
    Document,
    DocumentClass,
    Environment,
    InlineMath,
    Input,
    Italic,
    NewCommand,
    Node,
    Paragraph,
    Plain,
    Preamble,
    PreambleElement,
    PreambleUserDefined,
    Section,
    TableOfContents,
    TitlePage,
    UsePackage,
    UserDefined,
    document_class_name,
)
from texdoc.ast.tables import (
    ColumnAlignment,
    RawColumnSettings,
    Table,
    TableColumnSettings,
    TableColumnSettingsWrapper,
    TableHLine,
    TableRow,
    TypedColumnSettings,
    to_column_settings,
    to_table_row,
)
from texdoc.ast.visitors import DocumentStatistics, NodeVisitor, ValidationVisitor

__all__ = [
    # Base
    "Node",
    # Document
    "Document",
    "DocumentClass",
    "document_class_name",
    "Preamble",
    "PreambleElement",
    "UsePackage",
    "NewCommand",
    "PreambleUserDefined",
    # Block elements
    "Paragraph",
    "Section",
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
    "TableColumnSettingsWrapper",
    # Inline
    "Plain",
    "Bold",
    "Italic",
    "InlineMath",
    # Conversions
    "ELEMENT_TYPES",
    "INLINE_TYPES",
    "Element",
    "ElementLike",
    "InlineLike",
    "ParagraphElement",
    "is_element",
    "to_element",
    "to_paragraph_element",
    "to_column_settings",
    "to_table_row",
    # Visitors
    "NodeVisitor",
    "ValidationVisitor",
    "DocumentStatistics",
]
