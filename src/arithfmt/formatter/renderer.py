"""Precedence-aware expression renderer: AST → minimal-parenthesis text.

The ``ExpressionRenderer`` turns an ``Expression`` tree into a compact
string that drops redundant parentheses while still reading back to an
equivalent value under the usual precedence (unary minus, then ``×``
and ``÷``, then ``+`` and ``-``, left to right, juxtaposition binding
tightest).

Parenthesization rules per variant:

- ``Atomic``: never wrapped in the ``text`` format.
- ``Negative``: ``-x``, or ``-(x)`` when ``x`` binds looser than a product.
- ``Concat``: ``lr``, neither side wrapped.
- ``Plus``: ``l+r``, neither side wrapped.
- ``Minus``: ``l-r``, ``r`` wrapped when it binds looser than a product.
- ``Times``: ``l×r``, each side wrapped when it binds looser than a product.
- ``Divide``: ``l÷r``, ``l`` as for ``Times``, ``r`` wrapped unless a leaf.

The same rules apply to every output format; ``RenderOptions.format``
swaps the glyphs used for ``×``, ``÷`` and the parentheses.  In the
``ascii`` and ``latex`` formats a leaf whose own text could be misread
as an operator expression (a ``1/2`` fraction, a signed ``-3``, text
containing spaces) is grouped, and ``latex`` prints rational leaves as
``\\frac{p}{q}``.

Trees are walked with ``arithfmt.ast.nodes.fold``, which uses an
explicit stack, so deeply nested chains render without hitting the
interpreter's recursion limit.

Usage
-----
::

    from arithfmt.formatter import ExpressionRenderer, RenderOptions, render

    render(expression)                                   # '6÷(2×3)'
    render(expression, RenderOptions(format="ascii"))    # '6/(2*3)'
    ExpressionRenderer(RenderOptions(format="latex")).render(expression)
"""
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from functools import lru_cache

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
    fold,
)
from arithfmt.formatter.errors import UnknownFormatError
from arithfmt.formatter.precedence import binds_looser_than_product, is_atomic_leaf

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Glyphs:
    """Operator and grouping symbols for one output format.

    ``guard_leaves`` groups leaves whose text is ambiguous in this format;
    ``latex_fractions`` prints non-integral rationals as ``\\frac{p}{q}``.
    """

    times: str
    divide: str
    open_paren: str = "("
    close_paren: str = ")"
    guard_leaves: bool = True
    latex_fractions: bool = False


_GLYPHS: dict[str, Glyphs] = {
    "text": Glyphs(times="×", divide="÷", guard_leaves=False),
    "ascii": Glyphs(times="*", divide="/"),
    "latex": Glyphs(
        times=r" \times ",
        divide=r" \div ",
        open_paren=r"\left(",
        close_paren=r"\right)",
        latex_fractions=True,
    ),
}


def available_formats() -> list[str]:
    """Return the names of all supported render formats."""
    return sorted(_GLYPHS)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Rendering configuration.

    Parameters
    ----------
    format:
        Glyph set to use: ``"text"`` (``×``/``÷``, the default),
        ``"ascii"`` (``*``/``/``) or ``"latex"`` (``\\times``/``\\div``).

    Raises
    ------
    UnknownFormatError
        If ``format`` names no known glyph set.
    """

    format: str = "text"

    def __post_init__(self) -> None:
        if self.format not in _GLYPHS:
            raise UnknownFormatError(self.format, _GLYPHS)


class ExpressionRenderer:
    """Renders ``Expression`` trees with minimal parentheses.

    Instances hold no mutable state and may be shared between threads.
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self._options = options if options is not None else RenderOptions()
        self._glyphs = _GLYPHS[self._options.format]

    @property
    def options(self) -> RenderOptions:
        """The options this renderer was built with."""
        return self._options

    def render(self, node: Expression) -> str:
        """Render ``node`` as precedence-aware text.

        Parameters
        ----------
        node:
            The expression to render.

        Returns
        -------
        str
            The rendered text, without a trailing newline.

        Raises
        ------
        TypeError
            If ``node`` (or any descendant) is not an expression node.
        """
        return fold(node, self._render_node)

    def format_record(self, record: Record) -> str:
        """Render ``record`` as ``"<value> == <expression>"``."""
        return f"{record.n} == {self.render(record.e)}"

    # ------------------------------------------------------------------
    # Per-node rules
    # ------------------------------------------------------------------

    def _render_node(self, node: Expression, parts: tuple[str, ...]) -> str:
        g = self._glyphs
        if isinstance(node, Atomic):
            return self._render_leaf(node.number)
        if isinstance(node, Negative):
            return f"-{self._group_if_looser(node.base, parts[0])}"
        lhs, rhs = parts
        if isinstance(node, Concat):
            return f"{lhs}{rhs}"
        if isinstance(node, Plus):
            return f"{lhs}+{rhs}"
        if isinstance(node, Minus):
            return f"{lhs}-{self._group_if_looser(node.rhs, rhs)}"
        if isinstance(node, Times):
            return f"{self._group_if_looser(node.lhs, lhs)}{g.times}{self._group_if_looser(node.rhs, rhs)}"
        if isinstance(node, Divide):
            # Any compound divisor is grouped, products included.
            divisor = rhs if is_atomic_leaf(node.rhs) else self._group(rhs)
            return f"{self._group_if_looser(node.lhs, lhs)}{g.divide}{divisor}"
        raise TypeError(f"Unknown expression type: {type(node)}")

    def _render_leaf(self, number: object) -> str:
        g = self._glyphs
        if g.latex_fractions and _is_fraction(number):
            sign = "-" if number < 0 else ""  # type: ignore[operator]
            text = rf"{sign}\frac{{{abs(number.numerator)}}}{{{number.denominator}}}"  # type: ignore[attr-defined]
        else:
            text = str(number)
        if g.guard_leaves and self._is_ambiguous_leaf(text):
            return self._group(text)
        return text

    def _is_ambiguous_leaf(self, text: str) -> bool:
        divide = self._glyphs.divide.strip()
        return (
            "/" in text
            or divide in text
            or any(ch.isspace() for ch in text)
            or text.startswith(("-", "+"))
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _group(self, text: str) -> str:
        g = self._glyphs
        return f"{g.open_paren}{text}{g.close_paren}"

    def _group_if_looser(self, node: Expression, text: str) -> str:
        if binds_looser_than_product(node):
            return self._group(text)
        return text


def _is_fraction(number: object) -> bool:
    return isinstance(number, numbers.Rational) and number.denominator != 1


@lru_cache(maxsize=None)
def _renderer_for(options: RenderOptions) -> ExpressionRenderer:
    logger.debug("Creating expression renderer for format %r", options.format)
    return ExpressionRenderer(options)


def render(node: Expression, options: RenderOptions | None = None) -> str:
    """Convenience function: render an expression with minimal parentheses.

    Parameters
    ----------
    node:
        The expression to render.
    options:
        Rendering options; defaults to the plain text glyph set.

    Returns
    -------
    str
        The rendered expression.
    """
    return _renderer_for(options if options is not None else RenderOptions()).render(node)


def format_record(record: Record, options: RenderOptions | None = None) -> str:
    """Convenience function: render a ``Record`` as ``"<value> == <expression>"``."""
    return _renderer_for(options if options is not None else RenderOptions()).format_record(record)
