"""Unit tests for arithfmt.ast.serializer — AstSerializer dumps."""
from __future__ import annotations

import json
from fractions import Fraction

import pytest
import yaml

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
from arithfmt.ast.serializer import AstSerializer


def _n(value: object) -> Atomic:
    return Atomic(value)


class TestAstSerializerToDict:
    def setup_method(self) -> None:
        self.serializer = AstSerializer()

    def test_atomic(self) -> None:
        assert self.serializer.to_dict(_n(7)) == {"kind": "Atomic", "number": "7"}

    def test_atomic_number_uses_text_form(self) -> None:
        data = self.serializer.to_dict(_n(Fraction(1, 3)))
        assert data["number"] == "1/3"

    def test_negative(self) -> None:
        assert self.serializer.to_dict(Negative(_n(1))) == {
            "kind": "Negative",
            "lhs": {"kind": "Atomic", "number": "1"},
        }

    @pytest.mark.parametrize("cls", [Concat, Plus, Minus, Times, Divide])
    def test_binary_kinds(self, cls: type) -> None:
        data = self.serializer.to_dict(cls(_n(1), _n(2)))
        assert data["kind"] == cls.__name__
        assert data["lhs"] == {"kind": "Atomic", "number": "1"}
        assert data["rhs"] == {"kind": "Atomic", "number": "2"}

    def test_nested(self, mixed_expression: Expression) -> None:
        data = self.serializer.to_dict(mixed_expression)
        assert data["kind"] == "Minus"
        assert data["rhs"] == {"kind": "Negative", "lhs": {"kind": "Atomic", "number": "7"}}

    def test_record(self) -> None:
        data = self.serializer.to_dict(Record(24, Times(_n(6), _n(4))))
        assert data["kind"] == "Record"
        assert data["value"] == "24"
        assert data["expression"]["kind"] == "Times"  # type: ignore[index]

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(TypeError, match="Unknown expression type"):
            self.serializer.to_dict(Plus(_n(1), 2))  # type: ignore[arg-type]


class TestAstSerializerText:
    def setup_method(self) -> None:
        self.serializer = AstSerializer()
        self.expr = Divide(_n(6), Times(_n(2), _n(3)))

    def test_to_json_is_valid_json(self) -> None:
        data = json.loads(self.serializer.to_json(self.expr))
        assert data == self.serializer.to_dict(self.expr)

    def test_to_json_indent(self) -> None:
        text = self.serializer.to_json(self.expr, indent=4)
        assert '\n    "kind"' in text

    def test_to_json_keeps_unicode(self) -> None:
        text = self.serializer.to_json(Record("½", _n("½")))
        assert "½" in text

    def test_to_yaml_is_valid_yaml(self) -> None:
        data = yaml.safe_load(self.serializer.to_yaml(self.expr))
        assert data == self.serializer.to_dict(self.expr)

    def test_to_yaml_keeps_key_order(self) -> None:
        text = self.serializer.to_yaml(Plus(_n(1), _n(2)))
        assert text.index("kind:") < text.index("lhs:") < text.index("rhs:")


class TestAstSerializerDeepTrees:
    def test_to_dict_deep_chain(self) -> None:
        expr: Expression = _n(0)
        for _ in range(3000):
            expr = Negative(expr)
        data = AstSerializer().to_dict(expr)
        depth = 0
        while data["kind"] == "Negative":
            data = data["lhs"]  # type: ignore[assignment]
            depth += 1
        assert depth == 3000
        assert data == {"kind": "Atomic", "number": "0"}
