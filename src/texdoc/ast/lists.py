#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/ast/lists.py
"""List nodes (numbered or bulleted)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional, Union

from texdoc.ast.nodes import Node


class ListKind(Enum):
    """Which kind of list to render."""

    ENUMERATE = "enumerate"
    ITEMIZE = "itemize"

    @property
    def environment_name(self) -> str:
        """LaTeX environment used for this kind of list."""
        return self.value


@dataclass
class Item(Node):
    r"""A single list entry, rendered as ``\item text``.

    Parameters
    ----------
    text : str
        Raw item text

    """

    text: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass
class List(Node):
    r"""A list of items.

    Parameters
    ----------
    kind : ListKind
        Numbered (``ENUMERATE``) or bulleted (``ITEMIZE``)
    items : list of Item, default = empty list
        Items in render order
    argument : str or None, default = None
        Optional argument appended to the begin marker in square brackets,
        e.g. ``"label=(\alph*)"`` for the enumitem package

    Examples
    --------
        >>> objectives = List(ListKind.ENUMERATE)
        >>> objectives.push("Gather data").push("Analyse it")

    """

    kind: ListKind
    items: list[Item] = field(default_factory=list)
    argument: Optional[str] = None

    def push(self, item: Union[Item, str]) -> List:
        """Append an item; a string is wrapped in an Item."""
        if not isinstance(item, Item):
            item = Item(item)
        self.items.append(item)
        return self

    def set_argument(self, argument: str) -> List:
        """Set the bracketed rendering argument."""
        self.argument = argument
        return self

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)
