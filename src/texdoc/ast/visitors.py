#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used by every algorithm that
walks a document tree (rendering, validation, statistics). Each node's
``accept`` method calls the matching ``visit_<kind>`` method of the visitor.

:class:`NodeVisitor` implements every ``visit_*`` method with a default that
recurses into the node's children and returns ``None``, so a subclass only
overrides the node kinds it cares about:

    >>> class SectionCollector(NodeVisitor):
    ...     def __init__(self):
    ...         self.names = []
    ...
    ...     def visit_section(self, node):
    ...         self.names.append(node.name)
    ...         super().visit_section(node)
    ...
    >>> collector = SectionCollector()
    >>> document.accept(collector)

"""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterable

from texdoc.ast.conversions import ELEMENT_TYPES, INLINE_TYPES
from texdoc.ast.equations import Align, Equation
from texdoc.ast.lists import Item, List
from texdoc.ast.nodes import (
    Bold,
    ClearPage,
    Document,
    Environment,
    InlineMath,
    Input,
    Italic,
    NewCommand,
    Node,
    Paragraph,
    Plain,
    Preamble,
    PreambleUserDefined,
    Section,
    TableOfContents,
    TitlePage,
    UsePackage,
    UserDefined,
)
from texdoc.ast.tables import Table, TableRow
from texdoc.exceptions import ValidationError


class NodeVisitor:
    """Base class for AST node visitors.

    Every ``visit_*`` method has a default implementation: container nodes
    visit their children in order, leaf nodes fall through to
    :meth:`generic_visit`. All defaults return ``None``.

    """

    # ------------------------------------------------------------------
    # Document level
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> Any:
        """Visit a Document node: its preamble, then each element.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node (default: None)

        """
        node.preamble.accept(self)
        for element in node.elements:
            self.visit_element(element)
        return None

    def visit_preamble(self, node: Preamble) -> Any:
        """Visit a Preamble node and each of its elements."""
        for element in node.elements:
            element.accept(self)
        return None

    def visit_use_package(self, node: UsePackage) -> Any:
        return self.generic_visit(node)

    def visit_new_command(self, node: NewCommand) -> Any:
        return self.generic_visit(node)

    def visit_preamble_user_defined(self, node: PreambleUserDefined) -> Any:
        return self.generic_visit(node)

    # ------------------------------------------------------------------
    # Block level
    # ------------------------------------------------------------------

    def visit_element(self, node: Node) -> Any:
        """Visit any block element by dispatching through ``node.accept``.

        Parameters
        ----------
        node : Node
            A child of a Document or Section

        Returns
        -------
        Any
            Whatever the matching ``visit_*`` method returns

        """
        return node.accept(self)

    def visit_section(self, node: Section) -> Any:
        """Visit a Section node and each of its elements."""
        for element in node.elements:
            self.visit_element(element)
        return None

    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node and each of its inline elements."""
        for element in node.content:
            element.accept(self)
        return None

    def visit_align(self, node: Align) -> Any:
        for equation in node.equations:
            equation.accept(self)
        return None

    def visit_equation(self, node: Equation) -> Any:
        return self.generic_visit(node)

    def visit_list(self, node: List) -> Any:
        for item in node.items:
            item.accept(self)
        return None

    def visit_list_item(self, node: Item) -> Any:
        return self.generic_visit(node)

    def visit_table(self, node: Table) -> Any:
        for row in node.rows:
            row.accept(self)
        return None

    def visit_table_row(self, node: TableRow) -> Any:
        return self.generic_visit(node)

    def visit_table_of_contents(self, node: TableOfContents) -> Any:
        return self.generic_visit(node)

    def visit_title_page(self, node: TitlePage) -> Any:
        return self.generic_visit(node)

    def visit_clear_page(self, node: ClearPage) -> Any:
        return self.generic_visit(node)

    def visit_environment(self, node: Environment) -> Any:
        return self.generic_visit(node)

    def visit_user_defined(self, node: UserDefined) -> Any:
        return self.generic_visit(node)

    def visit_input(self, node: Input) -> Any:
        return self.generic_visit(node)

    # ------------------------------------------------------------------
    # Inline level
    # ------------------------------------------------------------------

    def visit_plain(self, node: Plain) -> Any:
        return self.generic_visit(node)

    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold node and its wrapped inline node."""
        node.content.accept(self)
        return None

    def visit_italic(self, node: Italic) -> Any:
        """Visit an Italic node and its wrapped inline node."""
        node.content.accept(self)
        return None

    def visit_inline_math(self, node: InlineMath) -> Any:
        return self.generic_visit(node)

    def generic_visit(self, node: Node) -> Any:
        """Fallback visitor for leaf nodes.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None


class ValidationVisitor(NodeVisitor):
    """Visitor that checks a tree built by hand for structural mistakes.

    The builder API converts everything it is given, but the node lists are
    plain Python lists and can be filled directly. This visitor checks that
    every Document/Section child is a block element, every Paragraph and
    Bold/Italic child is an inline node, and every table row is a
    :class:`TableRow`.

    Parameters
    ----------
    strict : bool, default = True
        Whether to raise on the first validation failure. When False, all
        failures are collected in :attr:`errors`.

    Examples
    --------
        >>> validator = ValidationVisitor(strict=False)
        >>> doc.accept(validator)
        >>> validator.errors
        []

    """

    def __init__(self, strict: bool = True):
        """Initialize the validator with its strictness."""
        self.strict = strict
        self.errors: list[str] = []

    def _add_error(self, message: str) -> None:
        """Record a validation error, raising it in strict mode.

        Raises
        ------
        ValidationError
            In strict mode

        """
        self.errors.append(message)
        if self.strict:
            raise ValidationError(message)

    def _validate_elements(self, elements: list[Any], context: str) -> list[Node]:
        valid = []
        for i, child in enumerate(elements):
            if isinstance(child, ELEMENT_TYPES):
                valid.append(child)
            else:
                self._add_error(f"{context} can only contain block elements, but child {i} is {type(child).__name__}")
        return valid

    def visit_document(self, node: Document) -> None:
        """Validate a Document node."""
        if not isinstance(node.preamble, Preamble):
            self._add_error(f"Document preamble must be a Preamble, got {type(node.preamble).__name__}")
        else:
            node.preamble.accept(self)
        for child in self._validate_elements(node.elements, "Document"):
            self.visit_element(child)

    def visit_preamble(self, node: Preamble) -> None:
        """Validate a Preamble node."""
        for i, element in enumerate(node.elements):
            if not isinstance(element, (UsePackage, NewCommand, PreambleUserDefined)):
                self._add_error(f"Preamble element {i} is {type(element).__name__}")

    def visit_section(self, node: Section) -> None:
        """Validate a Section node."""
        for child in self._validate_elements(node.elements, f"Section {node.name!r}"):
            self.visit_element(child)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Validate a Paragraph node."""
        for i, child in enumerate(node.content):
            if isinstance(child, INLINE_TYPES):
                child.accept(self)
            else:
                self._add_error(f"Paragraph can only contain inline nodes, but child {i} is {type(child).__name__}")

    def _validate_wrapped(self, node: Bold | Italic) -> None:
        if isinstance(node.content, INLINE_TYPES):
            node.content.accept(self)
        else:
            self._add_error(f"{type(node).__name__} must wrap an inline node, got {type(node.content).__name__}")

    def visit_bold(self, node: Bold) -> None:
        self._validate_wrapped(node)

    def visit_italic(self, node: Italic) -> None:
        self._validate_wrapped(node)

    def visit_align(self, node: Align) -> None:
        """Validate an Align node."""
        for i, equation in enumerate(node.equations):
            if not isinstance(equation, Equation):
                self._add_error(f"Align equation {i} is {type(equation).__name__}")

    def visit_list(self, node: List) -> None:
        """Validate a List node."""
        for i, item in enumerate(node.items):
            if not isinstance(item, Item):
                self._add_error(f"List item {i} is {type(item).__name__}")

    def visit_table(self, node: Table) -> None:
        """Validate a Table node."""
        for i, row in enumerate(node.rows):
            if not isinstance(row, TableRow):
                self._add_error(f"Table row {i} is {type(row).__name__}")
            elif row.columns is not None and row.columns < len(row.cells):
                self._add_error(f"Table row {i} has {len(row.cells)} cells but records {row.columns} columns")


class DocumentStatistics(NodeVisitor):
    """Collect simple statistics about a document tree.

    Every node reached from the starting node is counted once, the starting
    node included. Containers count their children before descending.

    Attributes
    ----------
    node_counts : Counter
        Number of nodes visited, keyed by node class name
    section_names : list of str
        Section names in document order
    max_section_depth : int
        Deepest section nesting (0 when there are no sections)
    word_count : int
        Whitespace-separated words in plain text runs

    Examples
    --------
        >>> stats = DocumentStatistics.collect(doc)
        >>> stats.node_counts["Paragraph"]
        2

    """

    def __init__(self) -> None:
        self.node_counts: Counter[str] = Counter()
        self.section_names: list[str] = []
        self.max_section_depth = 0
        self.word_count = 0
        self._depth = 0

    @classmethod
    def collect(cls, node: Node) -> DocumentStatistics:
        """Walk ``node`` and return the populated statistics."""
        stats = cls()
        stats._count([node])
        node.accept(stats)
        return stats

    def _count(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self.node_counts[type(node).__name__] += 1

    def visit_document(self, node: Document) -> None:
        self._count([node.preamble])
        self._count(node.elements)
        super().visit_document(node)

    def visit_preamble(self, node: Preamble) -> None:
        self._count(node.elements)
        super().visit_preamble(node)

    def visit_section(self, node: Section) -> None:
        self.section_names.append(node.name)
        self._count(node.elements)
        self._depth += 1
        self.max_section_depth = max(self.max_section_depth, self._depth)
        try:
            super().visit_section(node)
        finally:
            self._depth -= 1

    def visit_paragraph(self, node: Paragraph) -> None:
        self._count(node.content)
        super().visit_paragraph(node)

    def visit_bold(self, node: Bold) -> None:
        self._count([node.content])
        super().visit_bold(node)

    def visit_italic(self, node: Italic) -> None:
        self._count([node.content])
        super().visit_italic(node)

    def visit_align(self, node: Align) -> None:
        self._count(node.equations)
        super().visit_align(node)

    def visit_list(self, node: List) -> None:
        self._count(node.items)
        super().visit_list(node)

    def visit_table(self, node: Table) -> None:
        self._count(node.rows)
        super().visit_table(node)

    def visit_plain(self, node: Plain) -> None:
        self.word_count += len(node.text.split())


__all__ = ["NodeVisitor", "ValidationVisitor", "DocumentStatistics"]
