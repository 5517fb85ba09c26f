"""Test that the quickstart API works for arithfmt."""
from __future__ import annotations


def test_quickstart_render_import() -> None:
    import arithfmt

    assert callable(arithfmt.render)
    assert callable(arithfmt.describe)


def test_quickstart_version() -> None:
    import arithfmt

    assert arithfmt.__version__ == "0.1.0"


def test_quickstart_render_and_describe() -> None:
    import arithfmt
    from arithfmt import Atomic, Divide, Times

    expr = Divide(Atomic(6), Times(Atomic(2), Atomic(3)))
    assert arithfmt.render(expr) == "6÷(2×3)"
    assert arithfmt.describe(expr) == "Divide { lhs: 6, rhs: Times { lhs: 2, rhs: 3 } }"


def test_quickstart_record() -> None:
    import arithfmt
    from arithfmt import Atomic, Record, Times

    record = Record(24, Times(Atomic(6), Atomic(4)))
    assert str(record) == "24 == 6×4"
    assert arithfmt.format_record(record) == "24 == 6×4"


def test_quickstart_format_record_with_options() -> None:
    import arithfmt
    from arithfmt import Atomic, Record, Times
    from arithfmt.formatter import RenderOptions

    record = Record(24, Times(Atomic(6), Atomic(4)))
    assert arithfmt.format_record(record, RenderOptions(format="ascii")) == "24 == 6*4"


def test_quickstart_dumps() -> None:
    import arithfmt
    from arithfmt import Atomic, Plus

    expr = Plus(Atomic(1), Atomic(2))
    assert '"kind": "Plus"' in arithfmt.to_json(expr)
    assert "kind: Plus" in arithfmt.to_yaml(expr)
    assert arithfmt.to_tree(expr) is not None


def test_quickstart_all_exports_resolve() -> None:
    import arithfmt

    for name in arithfmt.__all__:
        assert hasattr(arithfmt, name), name
