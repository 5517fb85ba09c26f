"""Expression formatter module.

Exports the ``ExpressionRenderer`` class, its ``RenderOptions``, the
precedence predicates, and the ``render`` / ``format_record``
convenience functions.
"""
from __future__ import annotations

from arithfmt.formatter.errors import UnknownFormatError
from arithfmt.formatter.precedence import binds_looser_than_product, is_atomic_leaf
from arithfmt.formatter.renderer import (
    ExpressionRenderer,
    Glyphs,
    RenderOptions,
    available_formats,
    format_record,
    render,
)

__all__ = [
    "ExpressionRenderer",
    "Glyphs",
    "RenderOptions",
    "UnknownFormatError",
    "available_formats",
    "binds_looser_than_product",
    "format_record",
    "is_atomic_leaf",
    "render",
]
