#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/texdoc/ast/equations.py
r"""Equation nodes for ``align`` environments.

An :class:`Align` groups equations that are rendered one per row of an
``align`` environment:

    >>> equations = Align()
    >>> equations.push("y &= mx + c").push(Equation.labelled("quadratic", "y &= ax^2 + bx + c"))

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

from texdoc.ast.nodes import Node


@dataclass
class Equation(Node):
    r"""A single equation (one row of an ``align`` environment).

    Parameters
    ----------
    text : str
        Raw LaTeX source of the equation, e.g. ``"E &= m c^2"``
    label : str or None, default = None
        Label used to reference the equation, rendered as ``\label{...}``
    not_numbered : bool, default = False
        Suppress the equation number with ``\nonumber``

    """

    text: str
    label: Optional[str] = None
    not_numbered: bool = False

    @classmethod
    def labelled(cls, label: str, text: str) -> Equation:
        """Create an equation with a label already set."""
        return cls(text, label=label)

    def set_label(self, label: str) -> Equation:
        """Set the equation's label, replacing any previous one."""
        self.label = label
        return self

    def mark_not_numbered(self) -> Equation:
        """Don't number this equation."""
        self.not_numbered = True
        return self

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_equation``."""
        return visitor.visit_equation(self)


@dataclass
class Align(Node):
    """Ordered group of equations rendered as an ``align`` environment.

    Parameters
    ----------
    equations : list of Equation, default = empty list
        Equations in render order

    """

    equations: list[Equation] = field(default_factory=list)

    def push(self, equation: Union[Equation, str]) -> Align:
        """Append an equation; a string becomes an unlabelled equation.

        Raises
        ------
        TypeError
            If ``equation`` is neither an Equation nor a string

        """
        if isinstance(equation, str):
            equation = Equation(equation)
        elif not isinstance(equation, Equation):
            raise TypeError(f"Cannot add {type(equation).__name__} to an Align")
        self.equations.append(equation)
        return self

    def __iter__(self) -> Iterator[Equation]:
        return iter(self.equations)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_align``."""
        return visitor.visit_align(self)
