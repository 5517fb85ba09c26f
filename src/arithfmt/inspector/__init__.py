"""Structural inspector module.

Exports ``describe`` and ``describe_record`` for precedence-agnostic
debug text, and ``to_tree`` for a ``rich`` tree view.
"""
from __future__ import annotations

from arithfmt.inspector.inspector import describe, describe_record, to_tree

__all__ = ["describe", "describe_record", "to_tree"]
