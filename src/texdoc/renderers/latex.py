#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/renderers/latex.py
r"""LaTeX rendering from AST.

This module provides the LatexRenderer class which serializes a document
tree to LaTeX source. Output is written piece by piece to the sink while the
tree is walked, so a failing sink stops the render at the failing write and
everything written before it stays in place.

Examples
--------
    >>> doc = Document()
    >>> doc.preamble.set_title("Notes")
    >>> doc.push(TitlePage()).push("Hello")
    >>> print(LatexRenderer().render_to_string(doc))
    \documentclass{article}
    \title{Notes}
    \begin{document}
    \maketitle
    Hello
    \end{document}

"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import IO, Optional, Union

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
    document_class_name,
)
from texdoc.ast.tables import Table, TableRow
from texdoc.ast.visitors import NodeVisitor
from texdoc.constants import (
    ALIGN_ENVIRONMENT,
    CLEAR_PAGE_COMMAND,
    DOCUMENT_ENVIRONMENT,
    NONUMBER_COMMAND,
    ROW_TERMINATOR,
    TABLE_COLUMN_SEPARATOR,
    TABLE_OF_CONTENTS_COMMAND,
    TABULAR_ENVIRONMENT,
    TITLE_PAGE_COMMAND,
)
from texdoc.exceptions import OutputEncodingError, OutputWriteError
from texdoc.options import LatexRendererOptions
from texdoc.renderers.base import BaseRenderer
from texdoc.utils.decorators import debug_timer
from texdoc.utils.escape import escape_latex
from texdoc.utils.io_utils import describe_sink, open_text_sink

logger = logging.getLogger(__name__)


class LatexRenderer(NodeVisitor, BaseRenderer):
    r"""Render AST nodes to LaTeX text.

    This class implements the visitor pattern to traverse an AST and write
    LaTeX source to an output sink. A renderer can be reused for any number
    of sequential renders.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a :class:`LatexRendererOptions`

    """

    def __init__(self, options: LatexRendererOptions | None = None):
        """Initialize the LaTeX renderer with options."""
        BaseRenderer._validate_options_type(options, LatexRendererOptions, "latex")
        options = options or LatexRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: LatexRendererOptions = options
        self._sink: Optional[IO[str]] = None
        self._destination = "<none>"

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_to_string(self, doc: Node) -> str:
        """Render a document (or any single node) to a LaTeX string.

        Parameters
        ----------
        doc : Node
            Usually a :class:`Document`; any other node renders as a fragment

        Returns
        -------
        str
            LaTeX text

        """
        buffer = StringIO()
        with debug_timer(logger, "Rendering (latex)"):
            self._render_to_sink(doc, buffer, "<string>")
        return buffer.getvalue()

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render AST to LaTeX and write it to output.

        Parameters
        ----------
        doc : Node
            Usually a :class:`Document`; any other node renders as a fragment
        output : str, Path, IO[bytes] or IO[str]
            File path (created or truncated, written in the configured
            encoding), text stream, or binary stream (text is encoded with
            the configured encoding). Streams are not closed.

        Raises
        ------
        OutputWriteError
            If the destination cannot be opened or a write fails
        OutputEncodingError
            If the text cannot be represented in the configured encoding

        """
        destination = describe_sink(output)
        logger.debug("Writing LaTeX output to %s", destination)

        with debug_timer(logger, "Rendering (latex)"):
            try:
                with open_text_sink(output, self.options.encoding) as sink:
                    self._render_to_sink(doc, sink, destination)
            except OSError as e:
                # Opening or closing the destination failed; writes are wrapped in _write
                raise OutputWriteError(destination, original_error=e) from e

    def _render_to_sink(self, node: Node, sink: IO[str], destination: str) -> None:
        self._sink = sink
        self._destination = destination
        try:
            node.accept(self)
        finally:
            self._sink = None
            self._destination = "<none>"

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _write(self, text: str) -> None:
        """Write text to the current sink, translating sink failures.

        Raises
        ------
        OutputWriteError
            If the sink raises ``OSError`` or is closed
        OutputEncodingError
            If the sink cannot encode the text

        """
        assert self._sink is not None, "_write called outside of a render"
        try:
            self._sink.write(text)
        except UnicodeEncodeError as e:
            encoding = getattr(self._sink, "encoding", None) or self.options.encoding
            raise OutputEncodingError(encoding, original_error=e) from e
        except (OSError, ValueError) as e:
            # ValueError: write to a closed or detached stream
            raise OutputWriteError(self._destination, original_error=e) from e

    def _writeln(self, text: str = "") -> None:
        self._write(text + "\n")

    # ------------------------------------------------------------------
    # Document and preamble
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node.

        Part documents emit only their elements so they can be included in
        another document.

        Parameters
        ----------
        node : Document
            Document to render

        """
        logger.debug(
            "Rendering %s document with %d top-level elements",
            document_class_name(node.document_class),
            len(node.elements),
        )

        if node.is_part:
            for element in node.elements:
                self.visit_element(element)
            return

        self._writeln(f"\\documentclass{{{document_class_name(node.document_class)}}}")
        node.preamble.accept(self)
        self._writeln(f"\\begin{{{DOCUMENT_ENVIRONMENT}}}")
        for element in node.elements:
            self.visit_element(element)
        self._writeln(f"\\end{{{DOCUMENT_ENVIRONMENT}}}")

    def visit_preamble(self, node: Preamble) -> None:
        """Render preamble elements, then title and author.

        A blank line separates the elements from the title/author block when
        both are present.

        """
        for element in node.elements:
            element.accept(self)

        if node.elements and (node.title is not None or node.author is not None):
            self._writeln()

        if node.title is not None:
            self._writeln(f"\\title{{{node.title}}}")
        if node.author is not None:
            self._writeln(f"\\author{{{node.author}}}")

    def visit_use_package(self, node: UsePackage) -> None:
        argument = f"[{node.argument}]" if node.argument is not None else ""
        self._writeln(f"\\usepackage{argument}{{{node.package}}}")

    def visit_new_command(self, node: NewCommand) -> None:
        arguments = f"[{node.arguments}]" if node.arguments is not None else ""
        self._writeln(f"\\newcommand{{{node.command}}}{arguments}{{{node.definition}}}")

    def visit_preamble_user_defined(self, node: PreambleUserDefined) -> None:
        self._writeln(node.line)

    # ------------------------------------------------------------------
    # Block elements
    # ------------------------------------------------------------------

    def visit_section(self, node: Section) -> None:
        """Render a Section node.

        The heading is followed by a blank line when the section has
        children, and every child is followed by a blank line.

        Parameters
        ----------
        node : Section
            Section to render

        """
        self._writeln(f"\\{self.options.section_command}{{{node.name}}}")
        if node.elements:
            self._writeln()
        for element in node.elements:
            self.visit_element(element)
            self._writeln()

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node: inline elements, then a newline."""
        for element in node.content:
            element.accept(self)
        self._writeln()

    def visit_table_of_contents(self, node: TableOfContents) -> None:
        self._writeln(TABLE_OF_CONTENTS_COMMAND)

    def visit_title_page(self, node: TitlePage) -> None:
        self._writeln(TITLE_PAGE_COMMAND)

    def visit_clear_page(self, node: ClearPage) -> None:
        self._writeln(CLEAR_PAGE_COMMAND)

    def visit_environment(self, node: Environment) -> None:
        """Render a raw environment; lines are emitted verbatim."""
        self._writeln(f"\\begin{{{node.name}}}")
        for line in node.lines:
            self._writeln(line)
        self._writeln(f"\\end{{{node.name}}}")

    def visit_user_defined(self, node: UserDefined) -> None:
        self._writeln(node.text)

    def visit_input(self, node: Input) -> None:
        self._writeln(f"\\input{{{node.path}}}")

    def visit_align(self, node: Align) -> None:
        """Render an Align node as an ``align`` environment."""
        self._writeln(f"\\begin{{{ALIGN_ENVIRONMENT}}}")
        for equation in node.equations:
            equation.accept(self)
        self._writeln(f"\\end{{{ALIGN_ENVIRONMENT}}}")

    def visit_equation(self, node: Equation) -> None:
        """Render one row of an ``align`` environment."""
        parts = [node.text]
        if node.label is not None:
            parts.append(f"\\label{{{node.label}}}")
        if node.not_numbered:
            parts.append(NONUMBER_COMMAND)
        self._writeln(" ".join(parts) + ROW_TERMINATOR)

    def visit_list(self, node: List) -> None:
        """Render a List node as an ``enumerate`` or ``itemize`` environment."""
        environment = node.kind.environment_name
        argument = f"[{node.argument}]" if node.argument is not None else ""
        self._writeln(f"\\begin{{{environment}}}{argument}")
        for item in node.items:
            item.accept(self)
        self._writeln(f"\\end{{{environment}}}")

    def visit_list_item(self, node: Item) -> None:
        self._writeln(f"\\item {node.text}")

    def visit_table(self, node: Table) -> None:
        """Render a Table node as a ``tabular`` environment.

        Parameters
        ----------
        node : Table
            Table to render

        """
        column_spec = node.resolve_column_spec()
        logger.debug("Rendering table with %d rows, column spec %r", len(node.rows), column_spec)

        self._writeln(f"\\begin{{{TABULAR_ENVIRONMENT}}}{{{column_spec}}}")
        for row in node.rows:
            row.accept(self)
        self._writeln(f"\\end{{{TABULAR_ENVIRONMENT}}}")

    def visit_table_row(self, node: TableRow) -> None:
        line = TABLE_COLUMN_SEPARATOR.join(node.cells)
        if not node.skip_terminator:
            line += ROW_TERMINATOR
        self._writeln(line)

    # ------------------------------------------------------------------
    # Inline elements
    # ------------------------------------------------------------------

    def visit_plain(self, node: Plain) -> None:
        text = escape_latex(node.text) if self.options.escape_plain_text else node.text
        self._write(text)

    def visit_inline_math(self, node: InlineMath) -> None:
        self._write(f"${node.text}$")

    def visit_bold(self, node: Bold) -> None:
        self._write("\\textbf{")
        node.content.accept(self)
        self._write("}")

    def visit_italic(self, node: Italic) -> None:
        self._write("\\textit{")
        node.content.accept(self)
        self._write("}")
