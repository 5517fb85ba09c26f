"""Precedence classification for expression nodes.

Both predicates look at the node's variant only, never at its children.

``binds_looser_than_product`` is the test the renderer uses to decide
whether an operand of ``×``, ``÷``, unary minus or the right side of
``-`` needs parentheses.  ``Times`` is deliberately *not* looser: a
product nested inside another product renders flat (``2×3×4``), which
reassociates the chain but never changes its value.  ``Divide`` *is*
looser, so a quotient used as an operand of ``×`` or ``÷`` is always
parenthesized: ``a÷(b÷c)`` and ``a÷b÷c`` differ.
"""
from __future__ import annotations

from arithfmt.ast.nodes import Atomic, Divide, Expression, Minus, Plus

_LOOSER_THAN_PRODUCT = (Plus, Minus, Divide)


def is_atomic_leaf(node: Expression) -> bool:
    """Return ``True`` if ``node`` is a number leaf."""
    return isinstance(node, Atomic)


def binds_looser_than_product(node: Expression) -> bool:
    """Return ``True`` if ``node`` binds looser than multiplication."""
    return isinstance(node, _LOOSER_THAN_PRODUCT)
