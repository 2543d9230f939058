#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/ast/tables.py
r"""Table nodes rendered as ``tabular`` environments.

A :class:`Table` holds rows of already-stringified cells plus a column
specification, which is either typed (one :class:`TableColumnSettings` per
column) or a raw LaTeX string used verbatim.

Rows may have different lengths. The table's column count is the widest
row; short rows are left as they are in the model, and the typed column
spec is padded at render time to cover every column.

Examples
--------
    >>> table = Table()
    >>> table.push_row(["a", "b"]).push_row(TableHLine()).push_row([1, 2, 3])
    >>> table.number_columns()
    3
    >>> table.resolve_column_spec()
    'lll'

"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterator, Optional, Sequence, Union, cast

from texdoc.ast.nodes import Node
from texdoc.constants import HLINE_COMMAND, AlignmentCode

logger = logging.getLogger(__name__)


class ColumnAlignment(Enum):
    """Column alignment, one code of the ``tabular`` column spec."""

    LEFT = "l"
    RIGHT = "r"
    CENTER = "c"

    @property
    def code(self) -> AlignmentCode:
        """Single-letter code used in the column spec."""
        return cast(AlignmentCode, self.value)


@dataclass(frozen=True)
class TableColumnSettings:
    """Typed settings for a single table column.

    Parameters
    ----------
    alignment : ColumnAlignment, default = ColumnAlignment.LEFT
        Alignment of the column

    """

    alignment: ColumnAlignment = ColumnAlignment.LEFT

    def with_alignment(self, alignment: ColumnAlignment) -> TableColumnSettings:
        """Return a copy with a different alignment."""
        return replace(self, alignment=alignment)


@dataclass
class TypedColumnSettings:
    """Column spec given as one settings object per column.

    Columns past the end of the list use the last entry; an empty list means
    every column uses the table's default settings.
    """

    columns: list[TableColumnSettings] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.columns


@dataclass
class RawColumnSettings:
    r"""Column spec given as raw LaTeX, emitted verbatim.

    Parameters
    ----------
    spec : str
        Raw ``tabular`` column spec, e.g. ``"|l|p{2cm}|"``

    """

    spec: str

    def is_empty(self) -> bool:
        return not self.spec


TableColumnSettingsWrapper = Union[TypedColumnSettings, RawColumnSettings]

ColumnSettingsLike = Union[TableColumnSettingsWrapper, TableColumnSettings, Sequence[TableColumnSettings], str]


def to_column_settings(value: ColumnSettingsLike) -> TableColumnSettingsWrapper:
    """Convert a user-supplied column spec into a settings wrapper.

    Parameters
    ----------
    value : wrapper, TableColumnSettings, sequence of TableColumnSettings, or str
        A single settings object applies to every column; a sequence gives
        per-column settings; a string is a raw LaTeX spec.

    Returns
    -------
    TypedColumnSettings or RawColumnSettings
        The normalized wrapper

    Raises
    ------
    TypeError
        If the value cannot be interpreted as column settings

    """
    if isinstance(value, (TypedColumnSettings, RawColumnSettings)):
        return value
    if isinstance(value, TableColumnSettings):
        return TypedColumnSettings([value])
    if isinstance(value, str):
        return RawColumnSettings(value)
    if isinstance(value, (list, tuple)):
        columns = list(value)
        for entry in columns:
            if not isinstance(entry, TableColumnSettings):
                raise TypeError(f"Expected TableColumnSettings, got {type(entry).__name__}")
        return TypedColumnSettings(columns)
    raise TypeError(f"Cannot use {type(value).__name__} as table column settings")


@dataclass
class TableRow(Node):
    """A table row of stringified cells.

    Parameters
    ----------
    cells : list, default = empty list
        Cell contents, each stringified with ``str()``
    columns : int or None, default = None
        Number of columns the row occupies. Computed from ``cells`` when not
        given, except for pseudo-rows (``skip_terminator=True``), which
        occupy no columns.
    skip_terminator : bool, default = False
        Don't emit the row terminator after this row (used for rules)

    """

    cells: list[str] = field(default_factory=list)
    columns: Optional[int] = None
    skip_terminator: bool = False

    def __post_init__(self) -> None:
        self.cells = [str(cell) for cell in self.cells]
        if self.columns is None and not self.skip_terminator:
            self.columns = len(self.cells)

    def push_item(self, item: Any) -> TableRow:
        """Append a cell, stringified with ``str()``."""
        self.cells.append(str(item))
        if self.columns is not None:
            self.columns += 1
        return self

    def __iter__(self) -> Iterator[str]:
        return iter(self.cells)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self)


@dataclass
class TableHLine:
    r"""Horizontal rule pseudo-row, rendered as ``\hline`` with no terminator."""

    def to_table_row(self) -> TableRow:
        return TableRow(cells=[HLINE_COMMAND], skip_terminator=True)


RowLike = Union[TableRow, TableHLine, Iterable[Any]]


def to_table_row(row: RowLike) -> TableRow:
    """Convert a row-like value into a :class:`TableRow`.

    Parameters
    ----------
    row : TableRow, TableHLine or iterable
        A ready-made row, a rule, or any iterable of values. Each value is
        stringified independently with ``str()``.

    Returns
    -------
    TableRow
        The converted row

    Raises
    ------
    TypeError
        If ``row`` is a bare string/bytes or not iterable

    """
    if isinstance(row, TableRow):
        return row
    if isinstance(row, TableHLine):
        return row.to_table_row()
    if isinstance(row, (str, bytes)):
        raise TypeError("A table row must be a sequence of cells, not a single string")
    if not isinstance(row, Iterable):
        raise TypeError(f"Cannot convert {type(row).__name__} to a table row")
    return TableRow(cells=[str(cell) for cell in row])


@dataclass
class Table(Node):
    """Table rendered as a ``tabular`` environment.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Rows in render order
    column_settings : TypedColumnSettings or RawColumnSettings, default = empty typed
        Column spec. Anything accepted by :func:`to_column_settings` is
        converted on construction.
    default_column_settings : TableColumnSettings, default = left-aligned
        Settings used for columns that have none

    """

    rows: list[TableRow] = field(default_factory=list)
    column_settings: TableColumnSettingsWrapper = field(default_factory=TypedColumnSettings)
    default_column_settings: TableColumnSettings = field(default_factory=TableColumnSettings)

    def __post_init__(self) -> None:
        self.column_settings = to_column_settings(self.column_settings)

    def push_row(self, row: RowLike) -> Table:
        """Append a row.

        Parameters
        ----------
        row : TableRow, TableHLine or iterable
            Anything accepted by :func:`to_table_row`

        Returns
        -------
        Table
            This table, for chaining

        """
        self.rows.append(to_table_row(row))
        return self

    def insert_row(self, index: int, row: RowLike) -> Table:
        """Insert a row before position ``index``.

        Raises
        ------
        IndexError
            If ``index`` is negative or greater than the number of rows

        """
        if not 0 <= index <= len(self.rows):
            raise IndexError(f"Row index {index} out of range for table with {len(self.rows)} rows")
        self.rows.insert(index, to_table_row(row))
        return self

    def replace_row(self, index: int, row: RowLike) -> Table:
        """Replace the row at position ``index``.

        Raises
        ------
        IndexError
            If there is no row at ``index``

        """
        if not 0 <= index < len(self.rows):
            raise IndexError(f"Row index {index} out of range for table with {len(self.rows)} rows")
        self.rows[index] = to_table_row(row)
        return self

    def iter_rows(self) -> Iterator[TableRow]:
        return iter(self.rows)

    def is_empty(self) -> bool:
        """Whether the table has no rows."""
        return not self.rows

    def number_columns(self) -> int:
        """Maximum number of columns over all rows (0 for an empty table)."""
        return max((row.columns or 0 for row in self.rows), default=0)

    def set_column_settings(self, column_settings: ColumnSettingsLike) -> Table:
        """Replace the whole column spec."""
        self.column_settings = to_column_settings(column_settings)
        return self

    def effective_column_settings(self) -> list[TableColumnSettings]:
        """Typed settings each column renders with.

        Only meaningful for typed column specs; columns past the end of the
        list use the last entry, or the default settings if the list is empty.
        """
        if isinstance(self.column_settings, RawColumnSettings):
            raise TypeError("Raw column settings have no per-column form")

        specified = self.column_settings.columns
        resolved = []
        for index in range(self.number_columns()):
            if index < len(specified):
                resolved.append(specified[index])
            elif specified:
                resolved.append(specified[-1])
            else:
                resolved.append(self.default_column_settings)
        return resolved

    def replace_column_settings(self, column: int, column_settings: TableColumnSettings) -> Table:
        """Replace the settings of a single column.

        A raw column spec is first replaced by default typed settings for
        every current column. A typed list that does not reach every column
        is extended with the settings those columns already render with, so
        only ``column`` changes in the output.

        Parameters
        ----------
        column : int
            Zero-based column index
        column_settings : TableColumnSettings
            New settings for the column

        Returns
        -------
        Table
            This table, for chaining

        Raises
        ------
        IndexError
            If the column does not exist

        """
        columns = self.number_columns()
        if not 0 <= column < columns:
            raise IndexError(f"Column {column} does not exist (table has {columns} columns)")

        if isinstance(self.column_settings, RawColumnSettings):
            logger.debug("Replacing raw column spec %r with default typed settings", self.column_settings.spec)
            current = [self.default_column_settings] * columns
        else:
            current = list(self.column_settings.columns)
            if len(current) < columns:
                current = current + self.effective_column_settings()[len(current) :]

        current[column] = column_settings
        self.column_settings = TypedColumnSettings(current)
        return self

    def resolve_column_spec(self) -> str:
        """Column spec argument for the ``tabular`` environment."""
        if isinstance(self.column_settings, RawColumnSettings):
            return self.column_settings.spec
        return "".join(settings.alignment.code for settings in self.effective_column_settings())

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self)
