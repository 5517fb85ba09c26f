"""AST serialization for arithmetic expressions.

Dumps ``Expression`` trees and ``Record`` objects to a plain dict/list
structure, and from there to JSON or YAML text, for diagnostics output.
The dump is one-way: leaf numbers are stored as their ``str()`` form
because the numeric type is opaque to this package.

Usage
-----
::

    from arithfmt.ast.serializer import AstSerializer

    serializer = AstSerializer()
    data = serializer.to_dict(expression)
    json_text = serializer.to_json(expression)
    yaml_text = serializer.to_yaml(expression)
"""
from __future__ import annotations

import json

import yaml

from arithfmt.ast.nodes import BINARY_TYPES, Atomic, Expression, Negative, Record, fold


class AstSerializer:
    """Converts ``Expression`` and ``Record`` objects to plain Python dicts.

    Every node dict carries a ``"kind"`` discriminator naming the
    variant.  Child fields use the structural names ``lhs`` and ``rhs``,
    the same labels ``describe`` prints.
    """

    # ------------------------------------------------------------------
    # Serialization (AST → dict)
    # ------------------------------------------------------------------

    def to_dict(self, node: Expression | Record) -> dict[str, object]:
        """Serialize an expression or record to a JSON-compatible dict."""
        if isinstance(node, Record):
            return self._record_to_dict(node)
        return self._expr_to_dict(node)

    def _record_to_dict(self, record: Record) -> dict[str, object]:
        return {
            "kind": "Record",
            "value": str(record.n),
            "expression": self._expr_to_dict(record.e),
        }

    def _expr_to_dict(self, expr: Expression) -> dict[str, object]:
        return fold(expr, self._node_to_dict)

    def _node_to_dict(
        self, expr: Expression, parts: tuple[dict[str, object], ...]
    ) -> dict[str, object]:
        if isinstance(expr, Atomic):
            return {"kind": "Atomic", "number": str(expr.number)}
        if isinstance(expr, Negative):
            return {"kind": "Negative", "lhs": parts[0]}
        if isinstance(expr, BINARY_TYPES):
            lhs, rhs = parts
            return {"kind": type(expr).__name__, "lhs": lhs, "rhs": rhs}
        raise TypeError(f"Unknown expression type: {type(expr)}")

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, node: Expression | Record, indent: int = 2) -> str:
        """Serialize an expression or record to a JSON string."""
        return json.dumps(self.to_dict(node), indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, node: Expression | Record) -> str:
        """Serialize an expression or record to a YAML string."""
        return yaml.dump(
            self.to_dict(node),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
