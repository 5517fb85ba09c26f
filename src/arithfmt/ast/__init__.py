"""Arithmetic expression AST module.

Exports all AST node types, the ``Record`` pairing, and the serializer
for dumping expression trees to JSON/YAML.
"""
from __future__ import annotations

from arithfmt.ast.nodes import (
    BINARY_TYPES,
    Atomic,
    Concat,
    Divide,
    Expression,
    Minus,
    Negative,
    Plus,
    Record,
    Times,
    children,
    fold,
)
from arithfmt.ast.serializer import AstSerializer

__all__ = [
    # Expression types
    "Expression",
    "BINARY_TYPES",
    "Atomic",
    "Negative",
    "Concat",
    "Plus",
    "Minus",
    "Times",
    "Divide",
    # Traversal
    "children",
    "fold",
    # Record
    "Record",
    # Serializer
    "AstSerializer",
]
