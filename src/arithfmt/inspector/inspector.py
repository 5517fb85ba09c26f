"""Structural inspector: AST → explicit nested text for diagnostics.

Unlike the renderer, the inspector ignores precedence entirely and
always spells out the nesting, e.g.::

    >>> describe(Times(Plus(Atomic(1), Atomic(2)), Atomic(3)))
    'Times { lhs: Plus { lhs: 1, rhs: 2 }, rhs: 3 }'

Leaves print as their plain number text.  The output is meant for logs
and test failures, not for reading back.

``to_tree`` builds the same structure as a ``rich`` tree renderable,
labelling every branch with its variant name and rendered subtree.
"""
from __future__ import annotations

from rich.text import Text
from rich.tree import Tree

from arithfmt.ast.nodes import (
    BINARY_TYPES,
    Atomic,
    Expression,
    Negative,
    Record,
    children,
    fold,
)
from arithfmt.formatter.renderer import render

_FIELDS = ("lhs", "rhs")


def describe(node: Expression) -> str:
    """Return the structural dump of ``node``.

    Raises
    ------
    TypeError
        If ``node`` (or any descendant) is not an expression node.
    """
    return fold(node, _describe_node)


def _describe_node(node: Expression, parts: tuple[str, ...]) -> str:
    if isinstance(node, Atomic):
        return str(node.number)
    if isinstance(node, Negative):
        return f"Negative {{ lhs: {parts[0]} }}"
    if isinstance(node, BINARY_TYPES):
        lhs, rhs = parts
        return f"{type(node).__name__} {{ lhs: {lhs}, rhs: {rhs} }}"
    raise TypeError(f"Unknown expression type: {type(node)}")


def describe_record(record: Record) -> str:
    """Return the debug form of ``record``.

    Both fields are shown through their human-readable text rather than
    their structural dumps.
    """
    return f"Record {{ expression: {render(record.e)}, value: {record.n} }}"


def to_tree(node: Expression | Record) -> Tree:
    """Build a ``rich`` tree showing the structure of ``node``."""
    if isinstance(node, Record):
        tree = Tree(Text.assemble(("Record", "bold"), " ", (str(node), "dim")))
        tree.add(Text.assemble(("value: ", "italic"), str(node.n)))
        branch = tree.add(_label(node.e, "expression"))
        _populate(branch, node.e)
        return tree
    tree = Tree(_label(node))
    _populate(tree, node)
    return tree


def _label(node: Expression, field: str | None = None) -> Text:
    prefix = (f"{field}: ", "italic") if field else ""
    if isinstance(node, Atomic):
        return Text.assemble(prefix, str(node.number))
    return Text.assemble(prefix, (type(node).__name__, "bold"), " ", (render(node), "dim"))


def _populate(tree: Tree, node: Expression) -> None:
    pending = [(tree, node)]
    while pending:
        parent, current = pending.pop()
        for field, child in zip(_FIELDS, children(current)):
            pending.append((parent.add(_label(child, field)), child))
