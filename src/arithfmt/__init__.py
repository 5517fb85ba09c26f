"""arithfmt — precedence-aware pretty-printer for arithmetic expression trees.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    from arithfmt import Atomic, Divide, Record, Times
    import arithfmt

    expr = Divide(Atomic(6), Times(Atomic(2), Atomic(3)))

    # Minimal-parenthesis text
    arithfmt.render(expr)
    '6÷(2×3)'

    # Explicit structure for debugging
    arithfmt.describe(expr)
    'Divide { lhs: 6, rhs: Times { lhs: 2, rhs: 3 } }'

    # Target value paired with its expression
    str(Record(1, expr))
    '1 == 6÷(2×3)'

    arithfmt.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from arithfmt.ast.nodes import (
    Atomic,
    Concat,
    Divide,
    Expression,
    Minus,
    Negative,
    Plus,
    Record,
    Times,
)

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from rich.tree import Tree

    from arithfmt.formatter.renderer import RenderOptions


def render(expression: Expression, options: "RenderOptions | None" = None) -> str:
    """Render an expression with minimal parentheses.

    Parameters
    ----------
    expression:
        The expression tree to render.
    options:
        Rendering options; defaults to the ``×``/``÷`` text form.

    Returns
    -------
    str
        Human-readable text, e.g. ``"-(1+2)"``.
    """
    from arithfmt.formatter.renderer import render as _render

    return _render(expression, options)


def describe(expression: Expression) -> str:
    """Dump the explicit structure of an expression.

    Parameters
    ----------
    expression:
        The expression tree to describe.

    Returns
    -------
    str
        Nested debug text, e.g. ``"Plus { lhs: 1, rhs: 2 }"``.
    """
    from arithfmt.inspector.inspector import describe as _describe

    return _describe(expression)


def format_record(record: Record, options: "RenderOptions | None" = None) -> str:
    """Render a ``Record`` as ``"<value> == <expression>"``."""
    from arithfmt.formatter.renderer import format_record as _format_record

    return _format_record(record, options)


def to_json(node: Expression | Record, indent: int = 2) -> str:
    """Dump an expression or record as a JSON document."""
    from arithfmt.ast.serializer import AstSerializer

    return AstSerializer().to_json(node, indent=indent)


def to_yaml(node: Expression | Record) -> str:
    """Dump an expression or record as a YAML document."""
    from arithfmt.ast.serializer import AstSerializer

    return AstSerializer().to_yaml(node)


def to_tree(node: Expression | Record) -> "Tree":
    """Build a ``rich`` tree renderable showing the structure of ``node``."""
    from arithfmt.inspector.inspector import to_tree as _to_tree

    return _to_tree(node)


__all__ = [
    "__version__",
    # Node types
    "Expression",
    "Atomic",
    "Negative",
    "Concat",
    "Plus",
    "Minus",
    "Times",
    "Divide",
    "Record",
    # Formatting
    "render",
    "describe",
    "format_record",
    "to_json",
    "to_yaml",
    "to_tree",
]
