"""AST node definitions for arithmetic expressions.

Every node is a frozen dataclass so that expression trees are immutable
and hashable (as long as the leaf numbers are).  The ``Expression``
union type covers all variants; downstream code should use
``isinstance`` checks to dispatch.

The leaf value of an ``Atomic`` node is opaque: integers, fractions,
decimals or any other object with a human-readable ``str()`` form are
accepted.  Nothing in this package evaluates an expression.

``str()`` on a node gives the precedence-aware rendering and ``repr()``
gives the structural dump, so nodes print sensibly in logs and test
failures without importing the formatter explicitly.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar, Union


# ---------------------------------------------------------------------------
# Leaf
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, repr=False)
class Atomic:
    """A number leaf, e.g. ``7`` or ``3/4``."""

    number: Any

    def __str__(self) -> str:
        return str(self.number)

    def __repr__(self) -> str:
        return str(self.number)


# ---------------------------------------------------------------------------
# Unary
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, repr=False)
class Negative:
    """Unary negation of ``base``."""

    base: "Expression"

    def __str__(self) -> str:
        return _render(self)

    def __repr__(self) -> str:
        return _describe(self)


# ---------------------------------------------------------------------------
# Binary
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, repr=False)
class Concat:
    """Juxtaposition of two operands, e.g. digits ``1`` and ``2`` forming ``12``."""

    lhs: "Expression"
    rhs: "Expression"

    def __str__(self) -> str:
        return _render(self)

    def __repr__(self) -> str:
        return _describe(self)


@dataclass(frozen=True, slots=True, repr=False)
class Plus:
    """Addition, ``lhs + rhs``."""

    lhs: "Expression"
    rhs: "Expression"

    def __str__(self) -> str:
        return _render(self)

    def __repr__(self) -> str:
        return _describe(self)


@dataclass(frozen=True, slots=True, repr=False)
class Minus:
    """Subtraction, ``lhs - rhs``."""

    lhs: "Expression"
    rhs: "Expression"

    def __str__(self) -> str:
        return _render(self)

    def __repr__(self) -> str:
        return _describe(self)


@dataclass(frozen=True, slots=True, repr=False)
class Times:
    """Multiplication, ``lhs × rhs``."""

    lhs: "Expression"
    rhs: "Expression"

    def __str__(self) -> str:
        return _render(self)

    def __repr__(self) -> str:
        return _describe(self)


@dataclass(frozen=True, slots=True, repr=False)
class Divide:
    """Division, ``lhs ÷ rhs``."""

    lhs: "Expression"
    rhs: "Expression"

    def __str__(self) -> str:
        return _render(self)

    def __repr__(self) -> str:
        return _describe(self)


Expression = Union[Atomic, Negative, Concat, Plus, Minus, Times, Divide]

# Variants carrying ``lhs`` and ``rhs`` children.
BINARY_TYPES: tuple[type, ...] = (Concat, Plus, Minus, Times, Divide)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def children(node: Expression) -> tuple[Expression, ...]:
    """Return the direct sub-expressions of ``node``, left to right.

    Raises
    ------
    TypeError
        If ``node`` is not an expression node.
    """
    if isinstance(node, Atomic):
        return ()
    if isinstance(node, Negative):
        return (node.base,)
    if isinstance(node, BINARY_TYPES):
        return (node.lhs, node.rhs)
    raise TypeError(f"Unknown expression type: {type(node)}")


def fold(node: Expression, visit: Callable[[Expression, tuple[T, ...]], T]) -> T:
    """Reduce an expression tree bottom-up with an explicit stack.

    ``visit`` is called once per node, after all of its children, with
    the node and the results already computed for its children (in
    ``children`` order).  The traversal does not recurse, so tree depth
    is bounded by memory rather than by the interpreter's recursion
    limit.

    Parameters
    ----------
    node:
        Root of the tree to reduce.
    visit:
        Combines a node with its children's results.

    Returns
    -------
    T
        The result of ``visit`` for ``node``.

    Raises
    ------
    TypeError
        If ``node`` or any descendant is not an expression node.
    """
    results: list[T] = []
    stack: list[tuple[Expression, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        kids = children(current)
        if expanded or not kids:
            start = len(results) - len(kids)
            parts = tuple(results[start:])
            del results[start:]
            results.append(visit(current, parts))
        else:
            stack.append((current, True))
            stack.extend((kid, False) for kid in reversed(kids))
    return results[0]


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, repr=False)
class Record:
    """A target value paired with an expression claimed to equal it.

    Parameters
    ----------
    n:
        The target value.  Only its ``str()`` form is used.
    e:
        The expression asserted to evaluate to ``n``.  The claim is
        never checked here.
    """

    n: Any
    e: Expression

    def __str__(self) -> str:
        from arithfmt.formatter.renderer import format_record

        return format_record(self)

    def __repr__(self) -> str:
        from arithfmt.inspector.inspector import describe_record

        return describe_record(self)


# ---------------------------------------------------------------------------
# Formatter hooks (imported lazily, the formatter depends on this module)
# ---------------------------------------------------------------------------


def _render(node: Expression) -> str:
    from arithfmt.formatter.renderer import render

    return render(node)


def _describe(node: Expression) -> str:
    from arithfmt.inspector.inspector import describe

    return describe(node)
