#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/ast/nodes.py
"""Core AST node classes for LaTeX document construction.

This module defines the node base class and the nodes that make up the
skeleton of a document: the document root and its preamble, sections,
paragraphs with their inline formatting, and the simple block elements
(page markers, raw environments, user-defined lines, file inputs).

Equations, lists and tables live in their own modules
(:mod:`texdoc.ast.equations`, :mod:`texdoc.ast.lists`,
:mod:`texdoc.ast.tables`).

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Document-level nodes:
    - Document, Preamble
    - UsePackage, NewCommand, PreambleUserDefined (preamble elements)

Block-level nodes (elements of a Document or Section):
    - Paragraph, Section
    - TableOfContents, TitlePage, ClearPage
    - Environment, UserDefined, Input
    - Align, List, Table (see sibling modules)

Inline nodes (content of a Paragraph):
    - Plain, Bold, Italic, InlineMath

Containers are built with chained ``push`` calls, each of which returns the
container itself:

    >>> section = Section("Introduction")
    >>> section.push("First paragraph.").push("Second paragraph.")

"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Optional, Union

if TYPE_CHECKING:
    from texdoc.ast.conversions import ElementLike, InlineLike


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Plain(Node):
    """Plain text run, emitted as-is.

    Parameters
    ----------
    text : str
        Text content. No escaping is applied unless the renderer is
        configured to escape plain text.

    """

    text: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_plain``."""
        return visitor.visit_plain(self)


@dataclass
class Bold(Node):
    """Bold wrapper around exactly one inline node.

    Nested formatting is expressed by wrapping another wrapper, e.g.
    ``Bold(Italic("x"))``. A bare string is converted to :class:`Plain`.

    Parameters
    ----------
    content : Node
        The wrapped inline node

    """

    content: Node

    def __post_init__(self) -> None:
        """Convert a bare string child into a Plain run."""
        if isinstance(self.content, str):
            self.content = Plain(self.content)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_bold``."""
        return visitor.visit_bold(self)


@dataclass
class Italic(Node):
    """Italic wrapper around exactly one inline node.

    Parameters
    ----------
    content : Node
        The wrapped inline node

    """

    content: Node

    def __post_init__(self) -> None:
        """Convert a bare string child into a Plain run."""
        if isinstance(self.content, str):
            self.content = Plain(self.content)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_italic``."""
        return visitor.visit_italic(self)


@dataclass
class InlineMath(Node):
    r"""Inline math, emitted between single ``$`` delimiters.

    Parameters
    ----------
    text : str
        Raw LaTeX math source, e.g. ``r"\lambda"``

    """

    text: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_inline_math``."""
        return visitor.visit_inline_math(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Inline nodes are rendered back to back with no separator, followed by a
    single newline.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content

    """

    content: list[Node] = field(default_factory=list)

    def push(self, element: InlineLike) -> Paragraph:
        """Append an inline node (or a string, as a Plain run).

        Parameters
        ----------
        element : Node or str
            Inline content to append

        Returns
        -------
        Paragraph
            This paragraph, for chaining

        """
        from texdoc.ast.conversions import to_paragraph_element

        self.content.append(to_paragraph_element(element))
        return self

    def push_text(self, text: str) -> Paragraph:
        """Append a Plain run."""
        self.content.append(Plain(text))
        return self

    def __iter__(self) -> Iterator[Node]:
        return iter(self.content)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self)


@dataclass
class Section(Node):
    r"""Named section containing block elements.

    Sections may contain other sections. When rendered, every child is
    followed by a blank line, including the last one.

    Parameters
    ----------
    name : str
        Section heading text
    elements : list of Node, default = empty list
        Block elements in insertion order

    Examples
    --------
        >>> section = Section("Results")
        >>> section.push("Some text.").push(Section("Details"))

    """

    name: str
    elements: list[Node] = field(default_factory=list)

    def push(self, element: ElementLike) -> Section:
        """Append an element, converting strings and tuples as needed.

        Parameters
        ----------
        element : Node, str or (str, list of str)
            Anything accepted by :func:`texdoc.ast.conversions.to_element`

        Returns
        -------
        Section
            This section, for chaining

        """
        from texdoc.ast.conversions import to_element

        self.elements.append(to_element(element))
        return self

    def __iter__(self) -> Iterator[Node]:
        return iter(self.elements)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_section``."""
        return visitor.visit_section(self)


@dataclass
class TableOfContents(Node):
    r"""Marker rendered as ``\tableofcontents``."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_of_contents``."""
        return visitor.visit_table_of_contents(self)


@dataclass
class TitlePage(Node):
    r"""Marker rendered as ``\maketitle``."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_title_page``."""
        return visitor.visit_title_page(self)


@dataclass
class ClearPage(Node):
    r"""Marker rendered as ``\clearpage``."""

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_clear_page``."""
        return visitor.visit_clear_page(self)


@dataclass
class Environment(Node):
    r"""Generic named environment with raw body lines.

    The lines are emitted verbatim between ``\begin{name}`` and
    ``\end{name}``. Nothing is escaped: the caller is responsible for the
    validity of the content.

    Parameters
    ----------
    name : str
        Environment name, e.g. ``"verbatim"``
    lines : list of str, default = empty list
        Raw body lines

    """

    name: str
    lines: list[str] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_environment``."""
        return visitor.visit_environment(self)


@dataclass
class UserDefined(Node):
    """Raw LaTeX emitted verbatim, followed by a newline.

    Parameters
    ----------
    text : str
        Raw LaTeX source

    """

    text: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_user_defined``."""
        return visitor.visit_user_defined(self)


@dataclass
class Input(Node):
    r"""Reference to another LaTeX file, rendered as ``\input{path}``.

    Combined with a :attr:`DocumentClass.PART` document rendered to that path,
    this is how one document's body is included in another.

    Parameters
    ----------
    path : str
        Path of the file to input, as LaTeX should see it

    """

    path: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_input``."""
        return visitor.visit_input(self)


# ============================================================================
# Preamble
# ============================================================================


@dataclass
class UsePackage(Node):
    r"""Package import, rendered as ``\usepackage[argument]{package}``.

    Parameters
    ----------
    package : str
        Package name
    argument : str or None, default = None
        Optional package argument, placed in square brackets

    """

    package: str
    argument: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_use_package``."""
        return visitor.visit_use_package(self)


@dataclass
class NewCommand(Node):
    r"""Macro definition, rendered as ``\newcommand{\name}[arguments]{definition}``.

    Parameters
    ----------
    name : str
        Command name, with or without the leading backslash
    definition : str
        Raw LaTeX body of the command
    arguments : int or None, default = None
        Number of arguments the command takes

    """

    name: str
    definition: str
    arguments: Optional[int] = None

    @property
    def command(self) -> str:
        """Command name with exactly one leading backslash."""
        return "\\" + self.name.lstrip("\\")

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_new_command``."""
        return visitor.visit_new_command(self)


@dataclass
class PreambleUserDefined(Node):
    """Raw preamble line emitted verbatim."""

    line: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_preamble_user_defined``."""
        return visitor.visit_preamble_user_defined(self)


PreambleElement = Union[UsePackage, NewCommand, PreambleUserDefined]


@dataclass
class Preamble(Node):
    """Document metadata and setup directives rendered before the body.

    Elements render first, in declaration order. If there is at least one
    element and a title or author is set, one blank line separates them from
    the ``\\title``/``\\author`` lines.

    Parameters
    ----------
    title : str or None, default = None
        Document title
    author : str or None, default = None
        Document author
    elements : list of PreambleElement, default = empty list
        Package imports, command definitions and raw lines

    """

    title: Optional[str] = None
    author: Optional[str] = None
    elements: list[PreambleElement] = field(default_factory=list)

    def set_title(self, title: str) -> Preamble:
        """Set the document title, replacing any previous one."""
        self.title = title
        return self

    def set_author(self, author: str) -> Preamble:
        """Set the document author, replacing any previous one."""
        self.author = author
        return self

    def use_package(self, package: str, argument: Optional[str] = None) -> Preamble:
        """Import a package, with an optional bracketed argument."""
        self.elements.append(UsePackage(package, argument))
        return self

    def new_command(self, name: str, definition: str, arguments: Optional[int] = None) -> Preamble:
        """Define a new command (macro)."""
        self.elements.append(NewCommand(name, definition, arguments))
        return self

    def push(self, line: str) -> Preamble:
        """Append a raw preamble line."""
        self.elements.append(PreambleUserDefined(line))
        return self

    def __iter__(self) -> Iterator[PreambleElement]:
        return iter(self.elements)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_preamble``."""
        return visitor.visit_preamble(self)


# ============================================================================
# Document
# ============================================================================


class DocumentClass(str, Enum):
    """Well-known LaTeX document classes.

    Any other class is given as a plain string (e.g. ``"beamer"``).
    ``PART`` is not a LaTeX class: a part document renders only its body so
    that it can be included in another document.
    """

    ARTICLE = "article"
    BOOK = "book"
    REPORT = "report"
    PART = "part"


def document_class_name(document_class: Union[DocumentClass, str]) -> str:
    """Return the name used in ``\\documentclass{...}`` for a document class."""
    if isinstance(document_class, DocumentClass):
        return document_class.value
    return document_class


@dataclass
class Document(Node):
    r"""Root document node.

    Parameters
    ----------
    document_class : DocumentClass or str, default = DocumentClass.ARTICLE
        Document class. A string naming one of the well-known classes is
        normalized to the enum member; any other string is used as-is.
    preamble : Preamble, default = empty Preamble
        Document metadata and setup directives
    elements : list of Node, default = empty list
        Top-level block elements in render order

    Examples
    --------
        >>> doc = Document(DocumentClass.ARTICLE)
        >>> doc.preamble.set_title("Report").use_package("amsmath")
        >>> doc.push(TitlePage()).push("Hello world")

    """

    document_class: Union[DocumentClass, str] = DocumentClass.ARTICLE
    preamble: Preamble = field(default_factory=Preamble)
    elements: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Normalize well-known class names to enum members."""
        known = {member.value for member in DocumentClass}
        if not isinstance(self.document_class, DocumentClass) and self.document_class in known:
            self.document_class = DocumentClass(self.document_class)

    @property
    def is_part(self) -> bool:
        """Whether this document renders without header, preamble and footer."""
        return document_class_name(self.document_class) == DocumentClass.PART.value

    def push(self, element: ElementLike) -> Document:
        """Append an element, converting strings and tuples as needed.

        Parameters
        ----------
        element : Node, str or (str, list of str)
            Anything accepted by :func:`texdoc.ast.conversions.to_element`

        Returns
        -------
        Document
            This document, for chaining

        """
        from texdoc.ast.conversions import to_element

        self.elements.append(to_element(element))
        return self

    def push_all(self, other: Document) -> Document:
        """Copy every element of another document onto the end of this one.

        The other document's class and preamble are ignored. Elements are
        deep-copied so the two trees never share nodes.

        Parameters
        ----------
        other : Document
            Document whose elements are appended

        Returns
        -------
        Document
            This document, for chaining

        """
        self.elements.extend(copy.deepcopy(other.elements))
        return self

    def __iter__(self) -> Iterator[Node]:
        return iter(self.elements)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)
