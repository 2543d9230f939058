#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_latex_renderer.py
r"""Unit tests for LaTeX rendering from AST.

Tests cover:
- Document wrapper and part documents
- Preamble ordering and spacing
- Paragraphs and inline formatting
- Sections and nesting
- Lists, equations, tables, raw environments
- Escaping option and section command option
- Stream output and sink failures

"""

from io import BytesIO, StringIO, TextIOWrapper

import pytest

from texdoc.ast import (
    Align,
    Bold,
    ClearPage,
    ColumnAlignment,
    Document,
    DocumentClass,
    Environment,
    Equation,
    InlineMath,
    Input,
    Italic,
    List,
    ListKind,
    Paragraph,
    Plain,
    Preamble,
    Section,
    Table,
    TableColumnSettings,
    TableHLine,
    TableOfContents,
    TableRow,
    TitlePage,
    UserDefined,
)
from texdoc.exceptions import InvalidOptionsError, OutputEncodingError, OutputWriteError, RenderingError
from texdoc.options import LatexRendererOptions
from texdoc.renderers.latex import LatexRenderer


def render_fragment(node, options: LatexRendererOptions | None = None) -> str:
    """Helper to render a single node without the document wrapper.

    Parameters
    ----------
    node : Node
        Node to render
    options : LatexRendererOptions, optional
        Renderer options

    Returns
    -------
    str
        Rendered LaTeX

    """
    return LatexRenderer(options).render_to_string(node)


class FailingStream:
    """Text stream whose writes fail after a number of successful writes."""

    def __init__(self, fail_after: int = 0):
        self.fail_after = fail_after
        self.written: list[str] = []

    def write(self, text: str) -> int:
        if len(self.written) >= self.fail_after:
            raise OSError("disk full")
        self.written.append(text)
        return len(text)


@pytest.mark.unit
class TestLatexDocumentRendering:
    """Tests for the document wrapper."""

    def test_render_empty_document(self) -> None:
        """Test rendering an empty article."""
        result = LatexRenderer().render_to_string(Document(DocumentClass.ARTICLE))
        assert result == "\\documentclass{article}\n\\begin{document}\n\\end{document}\n"

    @pytest.mark.parametrize("document_class,name", [(DocumentClass.BOOK, "book"), (DocumentClass.REPORT, "report")])
    def test_document_class_names(self, document_class: DocumentClass, name: str) -> None:
        """Test the documentclass line for known classes."""
        result = LatexRenderer().render_to_string(Document(document_class))
        assert result.startswith(f"\\documentclass{{{name}}}\n")

    def test_other_document_class(self) -> None:
        """Test any other class name is emitted as-is."""
        result = LatexRenderer().render_to_string(Document("beamer"))
        assert result.startswith("\\documentclass{beamer}\n")

    def test_part_document_renders_body_only(self) -> None:
        """Test part documents skip the wrapper and the preamble."""
        doc = Document(DocumentClass.PART).push("Body text").push(ClearPage())
        doc.preamble.set_title("Ignored").use_package("amsmath")
        assert LatexRenderer().render_to_string(doc) == "Body text\n\\clearpage\n"

    def test_part_class_string_assigned_later(self) -> None:
        """Test assigning "part" after construction renders the body only."""
        doc = Document().push("Body text")
        doc.document_class = "part"
        assert LatexRenderer().render_to_string(doc) == "Body text\n"

    def test_empty_part_document(self) -> None:
        """Test an empty part document renders nothing."""
        assert LatexRenderer().render_to_string(Document(DocumentClass.PART)) == ""

    def test_full_document(self) -> None:
        """Test a document combining preamble, markers and a section."""
        doc = Document()
        doc.preamble.set_title("Sample Document").set_author("Jane Doe").use_package("amsmath")
        doc.push(TitlePage()).push(TableOfContents()).push(Section("Intro").push("Hi"))

        expected = (
            "\\documentclass{article}\n"
            "\\usepackage{amsmath}\n"
            "\n"
            "\\title{Sample Document}\n"
            "\\author{Jane Doe}\n"
            "\\begin{document}\n"
            "\\maketitle\n"
            "\\tableofcontents\n"
            "\\section{Intro}\n"
            "\n"
            "Hi\n"
            "\n"
            "\\end{document}\n"
        )
        assert LatexRenderer().render_to_string(doc) == expected

    def test_rendering_is_repeatable(self, sample_document: Document) -> None:
        """Test the same renderer gives identical output twice."""
        renderer = LatexRenderer()
        assert renderer.render_to_string(sample_document) == renderer.render_to_string(sample_document)


@pytest.mark.unit
class TestLatexPreambleRendering:
    """Tests for preamble rendering."""

    def test_empty_preamble(self) -> None:
        """Test an empty preamble renders nothing."""
        assert render_fragment(Preamble()) == ""

    def test_title_only(self) -> None:
        """Test a title-only preamble renders one line."""
        assert render_fragment(Preamble().set_title("T")) == "\\title{T}\n"

    def test_author_and_title(self) -> None:
        """Test title is emitted before author."""
        preamble = Preamble().set_author("Jane Doe").set_title("Sample Document")
        assert render_fragment(preamble) == "\\title{Sample Document}\n\\author{Jane Doe}\n"

    def test_packages_then_blank_then_title(self) -> None:
        """Test imports, one blank line, then the title."""
        preamble = Preamble().set_title("Sample Document").use_package("amsmath").use_package("graphics")
        expected = "\\usepackage{amsmath}\n\\usepackage{graphics}\n\n\\title{Sample Document}\n"
        assert render_fragment(preamble) == expected

    def test_packages_without_metadata_have_no_blank_line(self) -> None:
        """Test no blank line is emitted without title or author."""
        preamble = Preamble().use_package("amsmath")
        assert render_fragment(preamble) == "\\usepackage{amsmath}\n"

    def test_author_only_after_elements(self) -> None:
        """Test an author alone also triggers the blank line."""
        preamble = Preamble().push("% generated").set_author("A")
        assert render_fragment(preamble) == "% generated\n\n\\author{A}\n"

    def test_package_argument(self) -> None:
        """Test a package argument goes in square brackets."""
        preamble = Preamble().use_package("geometry", "margin=1in")
        assert render_fragment(preamble) == "\\usepackage[margin=1in]{geometry}\n"

    def test_new_command(self) -> None:
        """Test command definitions with and without arguments."""
        preamble = Preamble().new_command("R", "\\mathbb{R}").new_command("\\norm", "\\lVert #1 \\rVert", 1)
        expected = "\\newcommand{\\R}{\\mathbb{R}}\n\\newcommand{\\norm}[1]{\\lVert #1 \\rVert}\n"
        assert render_fragment(preamble) == expected

    def test_elements_in_declaration_order(self) -> None:
        """Test mixed preamble elements keep their order."""
        preamble = Preamble().push("\\setlength{\\parskip}{1em}").use_package("amsmath")
        assert render_fragment(preamble) == "\\setlength{\\parskip}{1em}\n\\usepackage{amsmath}\n"


@pytest.mark.unit
class TestLatexInlineRendering:
    """Tests for paragraphs and inline nodes."""

    def test_simple_paragraph(self) -> None:
        """Test a paragraph ends with a newline."""
        assert render_fragment(Paragraph().push_text("Hello World")) == "Hello World\n"

    def test_empty_paragraph(self) -> None:
        """Test an empty paragraph is a bare newline."""
        assert render_fragment(Paragraph()) == "\n"

    def test_bold_and_italic(self) -> None:
        """Test bold and italic wrappers."""
        para = Paragraph().push_text("Hello ").push(Bold("World")).push_text(" and ").push(Italic("you"))
        assert render_fragment(para) == "Hello \\textbf{World} and \\textit{you}\n"

    def test_inline_math(self) -> None:
        """Test inline math is wrapped in dollar signs."""
        para = Paragraph().push_text("Hello ").push(InlineMath("\\lambda")).push_text(" World!")
        assert render_fragment(para) == "Hello $\\lambda$ World!\n"

    def test_nested_formatting(self) -> None:
        """Test bold-italic nesting."""
        para = Paragraph([Bold(Italic(Plain("x")))])
        assert render_fragment(para) == "\\textbf{\\textit{x}}\n"

    def test_plain_text_not_escaped_by_default(self) -> None:
        """Test plain text passes through unchanged."""
        assert render_fragment(Paragraph().push_text("50% & $5")) == "50% & $5\n"

    def test_plain_text_escaped_when_enabled(self) -> None:
        """Test the escaping option."""
        options = LatexRendererOptions(escape_plain_text=True)
        para = Paragraph().push_text("50% & ").push(InlineMath("x_1"))
        assert render_fragment(para, options) == "50\\% \\& $x_1$\n"


@pytest.mark.unit
class TestLatexSectionRendering:
    """Tests for sections."""

    def test_empty_section(self) -> None:
        """Test an empty section renders only its heading."""
        assert render_fragment(Section("First Section")) == "\\section{First Section}\n"

    def test_section_with_paragraphs(self) -> None:
        """Test heading, blank line, then each child followed by a blank line."""
        section = Section("First Section").push("Lorem Ipsum...").push("Hello World!")
        expected = "\\section{First Section}\n\nLorem Ipsum...\n\nHello World!\n\n"
        assert render_fragment(section) == expected

    def test_nested_section(self) -> None:
        """Test nested sections keep their spacing."""
        section = Section("Outer").push(Section("Inner").push("text"))
        expected = "\\section{Outer}\n\n\\section{Inner}\n\ntext\n\n\n"
        assert render_fragment(section) == expected

    def test_section_command_option(self) -> None:
        """Test a custom heading command."""
        options = LatexRendererOptions(section_command="chapter")
        assert render_fragment(Section("One"), options) == "\\chapter{One}\n"


@pytest.mark.unit
class TestLatexListRendering:
    """Tests for lists."""

    def test_empty_enumerate(self) -> None:
        """Test an empty numbered list."""
        assert render_fragment(List(ListKind.ENUMERATE)) == "\\begin{enumerate}\n\\end{enumerate}\n"

    def test_empty_itemize(self) -> None:
        """Test an empty bulleted list."""
        assert render_fragment(List(ListKind.ITEMIZE)) == "\\begin{itemize}\n\\end{itemize}\n"

    def test_list_with_items(self) -> None:
        """Test items are emitted in order."""
        lst = List(ListKind.ITEMIZE).push("This").push("is").push("a").push("list!")
        expected = "\\begin{itemize}\n\\item This\n\\item is\n\\item a\n\\item list!\n\\end{itemize}\n"
        assert render_fragment(lst) == expected

    def test_list_argument(self) -> None:
        """Test the bracket argument follows the begin marker."""
        lst = List(ListKind.ENUMERATE, argument="label=(\\alph*)").push("a")
        assert render_fragment(lst) == "\\begin{enumerate}[label=(\\alph*)]\n\\item a\n\\end{enumerate}\n"


@pytest.mark.unit
class TestLatexEquationRendering:
    """Tests for align environments."""

    def test_empty_align(self) -> None:
        """Test an empty align environment."""
        assert render_fragment(Align()) == "\\begin{align}\n\\end{align}\n"

    def test_simple_equation(self) -> None:
        """Test an unlabelled equation row."""
        assert render_fragment(Equation("x &= y + \\sigma")) == "x &= y + \\sigma \\\\\n"

    def test_label_and_not_numbered(self) -> None:
        """Test label comes before the nonumber marker."""
        eq = Equation("E &= m c^2").set_label("eq:1").mark_not_numbered()
        assert render_fragment(eq) == "E &= m c^2 \\label{eq:1} \\nonumber \\\\\n"

    def test_not_numbered_only(self) -> None:
        """Test an unnumbered equation without label."""
        assert render_fragment(Equation("E &= m c^2").mark_not_numbered()) == "E &= m c^2 \\nonumber \\\\\n"

    def test_several_equations(self) -> None:
        """Test several rows in one align."""
        align = Align().push(Equation.labelled("eq:mass-energy-equivalence", "E &= m c^2")).push("y &= m x + c")
        expected = (
            "\\begin{align}\n"
            "E &= m c^2 \\label{eq:mass-energy-equivalence} \\\\\n"
            "y &= m x + c \\\\\n"
            "\\end{align}\n"
        )
        assert render_fragment(align) == expected


@pytest.mark.unit
class TestLatexTableRendering:
    """Tests for tabular environments."""

    def test_empty_table(self) -> None:
        """Test an empty table has an empty column spec."""
        assert render_fragment(Table()) == "\\begin{tabular}{}\n\\end{tabular}\n"

    def test_table_with_rules(self) -> None:
        """Test rows, rules and padded column spec."""
        table = Table(column_settings=[TableColumnSettings(ColumnAlignment.CENTER)])
        table.push_row(TableHLine()).push_row(["Name", "Score"]).push_row(TableHLine()).push_row(["Ann", 42])
        expected = (
            "\\begin{tabular}{cc}\n"
            "\\hline\n"
            "Name & Score \\\\\n"
            "\\hline\n"
            "Ann & 42 \\\\\n"
            "\\end{tabular}\n"
        )
        assert render_fragment(table) == expected

    def test_short_rows_not_padded(self) -> None:
        """Test short rows are emitted with their own cells only."""
        table = Table().push_row(["a", "b"]).push_row(["a", "b", "c"])
        expected = "\\begin{tabular}{lll}\na & b \\\\\na & b & c \\\\\n\\end{tabular}\n"
        assert render_fragment(table) == expected

    def test_hand_built_row_with_numbers(self) -> None:
        """Test a TableRow built directly from numbers renders its cells."""
        table = Table().push_row(TableRow([1, 2]))  # type: ignore[list-item]
        assert render_fragment(table) == "\\begin{tabular}{ll}\n1 & 2 \\\\\n\\end{tabular}\n"

    def test_raw_column_spec(self) -> None:
        """Test a raw spec is emitted verbatim."""
        table = Table(column_settings="|l|r|").push_row(["x", "y"])
        assert render_fragment(table).startswith("\\begin{tabular}{|l|r|}\n")

    def test_cells_not_escaped(self) -> None:
        """Test cells pass through even when plain text escaping is on."""
        options = LatexRendererOptions(escape_plain_text=True)
        table = Table().push_row(["50%", "$x$"])
        assert "50% & $x$ \\\\\n" in render_fragment(table, options)


@pytest.mark.unit
class TestLatexRawElements:
    """Tests for passthrough elements and markers."""

    def test_environment(self) -> None:
        """Test raw environment lines are emitted verbatim."""
        env = Environment("verbatim", ["a & b", "50%"])
        assert render_fragment(env) == "\\begin{verbatim}\na & b\n50%\n\\end{verbatim}\n"

    def test_user_defined(self) -> None:
        """Test raw text gets a trailing newline and no escaping."""
        options = LatexRendererOptions(escape_plain_text=True)
        assert render_fragment(UserDefined("\\vspace{1em} 100%"), options) == "\\vspace{1em} 100%\n"

    @pytest.mark.parametrize(
        "node,expected",
        [
            (TableOfContents(), "\\tableofcontents\n"),
            (TitlePage(), "\\maketitle\n"),
            (ClearPage(), "\\clearpage\n"),
            (Input("chapters/one"), "\\input{chapters/one}\n"),
        ],
    )
    def test_markers(self, node, expected: str) -> None:
        """Test single-line markers."""
        assert render_fragment(node) == expected


@pytest.mark.unit
class TestLatexOutputErrors:
    """Tests for output destinations and sink failures."""

    def test_render_to_text_stream(self) -> None:
        """Test rendering into a caller-owned text stream."""
        output = StringIO()
        LatexRenderer().render(Document().push("Stream test"), output)
        assert output.getvalue() == "\\documentclass{article}\n\\begin{document}\nStream test\n\\end{document}\n"
        assert not output.closed

    def test_render_to_binary_stream(self) -> None:
        """Test text is encoded for binary streams."""
        output = BytesIO()
        LatexRenderer().render(Document(DocumentClass.PART).push("Grüße"), output)
        assert output.getvalue() == "Grüße\n".encode("utf-8")

    def test_render_to_bytes(self) -> None:
        """Test render_to_bytes uses the configured encoding."""
        options = LatexRendererOptions(encoding="latin-1")
        result = LatexRenderer(options).render_to_bytes(Document(DocumentClass.PART).push("café"))
        assert result == "café\n".encode("latin-1")

    def test_write_failure(self) -> None:
        """Test a failing sink aborts with OutputWriteError."""
        sink = FailingStream(fail_after=0)
        with pytest.raises(OutputWriteError) as exc_info:
            LatexRenderer().render(Document().push("x"), sink)
        assert isinstance(exc_info.value.original_error, OSError)
        assert exc_info.value.rendering_stage == "write"

    def test_partial_output_kept(self) -> None:
        """Test output written before the failure stays in the sink."""
        sink = FailingStream(fail_after=2)
        with pytest.raises(RenderingError):
            LatexRenderer().render(Document().push("x"), sink)
        assert sink.written == ["\\documentclass{article}\n", "\\begin{document}\n"]

    def test_encoding_failure(self) -> None:
        """Test unencodable text raises OutputEncodingError."""
        options = LatexRendererOptions(encoding="ascii")
        with pytest.raises(OutputEncodingError) as exc_info:
            LatexRenderer(options).render(Document().push("naïve"), BytesIO())
        assert exc_info.value.encoding == "ascii"
        assert isinstance(exc_info.value.original_error, UnicodeEncodeError)

    def test_encoding_failure_names_stream_encoding(self) -> None:
        """Test the error reports the encoding of a text stream that failed."""
        sink = TextIOWrapper(BytesIO(), encoding="ascii")
        with pytest.raises(OutputEncodingError) as exc_info:
            LatexRenderer().render(Document(DocumentClass.PART).push("naïve"), sink)
        assert exc_info.value.encoding == "ascii"

    def test_closed_stream(self) -> None:
        """Test writing into a closed stream raises OutputWriteError."""
        sink = StringIO()
        sink.close()
        with pytest.raises(OutputWriteError) as exc_info:
            LatexRenderer().render(Document(), sink)
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_renderer_reusable_after_failure(self) -> None:
        """Test a failed render does not poison the renderer."""
        renderer = LatexRenderer()
        with pytest.raises(OutputWriteError):
            renderer.render(Document(), FailingStream())
        assert renderer.render_to_string(Document(DocumentClass.PART).push("ok")) == "ok\n"

    def test_options_validation_wrong_type(self) -> None:
        """Test that wrong options type raises error."""
        with pytest.raises(InvalidOptionsError):
            LatexRenderer(options="invalid")  # type: ignore[arg-type]

    def test_unsupported_output_type(self) -> None:
        """Test that unsupported output type raises error."""
        with pytest.raises(TypeError):
            LatexRenderer().render(Document(), 12345)  # type: ignore[arg-type]
