"""Expression fixtures shared across the arithfmt test suite."""
from __future__ import annotations

import pytest

from arithfmt.ast.nodes import Atomic, Divide, Minus, Negative, Plus, Times


@pytest.fixture()
def mixed_expression() -> Minus:
    """Return a tree that renders as ``(1+2)×3-(4÷(5-6))--7``."""
    return Minus(
        Minus(
            Times(Plus(Atomic(1), Atomic(2)), Atomic(3)),
            Divide(Atomic(4), Minus(Atomic(5), Atomic(6))),
        ),
        Negative(Atomic(7)),
    )
