#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/ast/conversions.py
"""Conversions from convenient Python values into AST nodes.

Every ``push`` on a container goes through one of these functions, so
callers can pass a string where a paragraph is expected, or a
``(name, lines)`` tuple where a raw environment is expected.

"""

from __future__ import annotations

from typing import Sequence, Tuple, Union

from texdoc.ast.equations import Align, Equation
from texdoc.ast.lists import List
from texdoc.ast.nodes import (
    Bold,
    ClearPage,
    Environment,
    InlineMath,
    Input,
    Italic,
    Node,
    Paragraph,
    Plain,
    Section,
    TableOfContents,
    TitlePage,
    UserDefined,
)
from texdoc.ast.tables import Table

# Closed set of nodes that may appear as children of a Document or Section
ELEMENT_TYPES: tuple[type[Node], ...] = (
    Paragraph,
    Section,
    TableOfContents,
    TitlePage,
    ClearPage,
    Align,
    Environment,
    UserDefined,
    List,
    Table,
    Input,
)

# Closed set of nodes that may appear inside a Paragraph
INLINE_TYPES: tuple[type[Node], ...] = (Plain, Bold, Italic, InlineMath)

Element = Union[
    Paragraph, Section, TableOfContents, TitlePage, ClearPage, Align, Environment, UserDefined, List, Table, Input
]
ParagraphElement = Union[Plain, Bold, Italic, InlineMath]

ElementLike = Union[Element, Equation, str, Tuple[str, Sequence[str]]]
InlineLike = Union[ParagraphElement, str]


def is_element(node: object) -> bool:
    """Whether ``node`` may be a child of a Document or Section."""
    return isinstance(node, ELEMENT_TYPES)


def to_element(value: ElementLike) -> Node:
    """Convert a value into a block element.

    Parameters
    ----------
    value : Node, Equation, str or (str, sequence of str)
        - an element node is returned unchanged
        - a string becomes a paragraph with a single plain run
        - a ``(name, lines)`` tuple becomes a raw :class:`Environment`
        - an :class:`Equation` becomes a single-equation :class:`Align`

    Returns
    -------
    Node
        The element

    Raises
    ------
    TypeError
        If the value has no element form

    """
    if isinstance(value, ELEMENT_TYPES):
        return value
    if isinstance(value, str):
        return Paragraph(content=[Plain(value)])
    if isinstance(value, Equation):
        return Align(equations=[value])
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], str):
        name, lines = value
        if isinstance(lines, str):
            raise TypeError("Environment lines must be a sequence of strings, not a single string")
        return Environment(name, list(lines))
    raise TypeError(f"Cannot convert {type(value).__name__} to a document element")


def to_paragraph_element(value: InlineLike) -> Node:
    """Convert a value into an inline node; strings become :class:`Plain`.

    Raises
    ------
    TypeError
        If the value is neither an inline node nor a string

    """
    if isinstance(value, INLINE_TYPES):
        return value
    if isinstance(value, str):
        return Plain(value)
    raise TypeError(f"Cannot convert {type(value).__name__} to inline paragraph content")
