"""Renderer abstractions: the ParameterRenderer ABC and its templates.

Every renderer answers two questions about a value:

``to_expression``
    A complete SQL expression, ready to be substituted for a placeholder.
``to_string_literal``
    Text that is valid verbatim between single quotes, or ``None`` when the
    value can only be written with a constructor call.  Containers use this
    to decide between a compact ``'{...}'`` literal and ``ARRAY[...]``.

The Template Method pattern (GoF) covers the two common shapes:
:class:`QuotedLiteralRenderer` (expression = quoted literal) and
:class:`BareLiteralRenderer` (expression = literal, e.g. numbers).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from inlineql.render.escaping import in_string_quotes

if TYPE_CHECKING:
    from inlineql.render.context import RenderContext


class ParameterRenderer(ABC):
    """Abstract base for per-kind renderers.

    Renderers are stateless; a single instance is shared by every call and
    every thread.
    """

    @abstractmethod
    def to_expression(self, value: Any, ctx: RenderContext) -> str:
        """Return ``value`` as a SQL expression.

        Args:
            value: The parameter value.
            ctx: Context used to render child values.

        Returns:
            SQL expression text.
        """

    @abstractmethod
    def to_string_literal(self, value: Any, ctx: RenderContext) -> str | None:
        """Return the unquoted literal form of ``value``, or ``None``."""


class QuotedLiteralRenderer(ParameterRenderer):
    """Renderer whose expression is its string literal in single quotes."""

    @abstractmethod
    def literal(self, value: Any, ctx: RenderContext) -> str:
        """Return the unquoted literal text."""

    def to_expression(self, value: Any, ctx: RenderContext) -> str:
        return in_string_quotes(self.literal(value, ctx))

    def to_string_literal(self, value: Any, ctx: RenderContext) -> str | None:
        return self.literal(value, ctx)


class BareLiteralRenderer(ParameterRenderer):
    """Renderer whose expression and string literal are the same token."""

    @abstractmethod
    def literal(self, value: Any, ctx: RenderContext) -> str:
        """Return the literal token."""

    def to_expression(self, value: Any, ctx: RenderContext) -> str:
        return self.literal(value, ctx)

    def to_string_literal(self, value: Any, ctx: RenderContext) -> str | None:
        return self.literal(value, ctx)
