"""List (array) and tuple (composite) renderers.

Both containers try the compact literal first and fall back to a
constructor call::

    ["Elixir", "Ecto"]           -> '{Elixir,Ecto}'
    ["Elixir", b"\\x99"]          -> ARRAY['Elixir',DECODE('mQ==','BASE64')]
    ("Elixir", "Ecto")           -> '(Elixir,Ecto)'
    ("Elixir", b"\\x99")          -> ROW('Elixir',DECODE('mQ==','BASE64'))

The literal is only possible when *every* element has a string-literal
form; a single element without one (a base64 binary, a numeric enum, an
unknown kind) forces the constructor.  A non-empty list made only of
lexemes is a ``tsvector`` and is joined with spaces instead.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from inlineql.render.base import ParameterRenderer
from inlineql.render.context import RenderContext
from inlineql.render.escaping import array_element, composite_element, in_string_quotes
from inlineql.schema.text_search import Lexeme


def all_string_literals(
    elements: Sequence[Any], ctx: RenderContext
) -> list[str] | None:
    """Return the string literal of every element, or ``None`` if any lacks one."""
    literals: list[str] = []
    for element in elements:
        literal = ctx.string_literal(element)
        if literal is None:
            return None
        literals.append(literal)
    return literals


def is_tsvector(elements: Sequence[Any]) -> bool:
    """Return ``True`` for a non-empty list made only of lexemes.

    Lists mixing lexemes with other values are ordinary arrays.
    """
    return bool(elements) and all(isinstance(element, Lexeme) for element in elements)


class ListRenderer(ParameterRenderer):
    """Lists as ``'{...}'`` array literals, ``ARRAY[...]`` or tsvector text."""

    def to_expression(self, value: list, ctx: RenderContext) -> str:
        literal = self.to_string_literal(value, ctx)
        if literal is not None:
            return in_string_quotes(literal)
        inner = ctx.descend(value)
        return "ARRAY[" + ",".join(inner.expression(element) for element in value) + "]"

    def to_string_literal(self, value: list, ctx: RenderContext) -> str | None:
        return ctx.memoized(value, self._literal)

    def _literal(self, value: list, ctx: RenderContext) -> str | None:
        inner = ctx.descend(value)
        literals = all_string_literals(value, inner)
        if literals is None:
            return None
        if is_tsvector(value):
            return " ".join(literals)
        tokens = (self._token(element, literal) for element, literal in zip(value, literals))
        return "{" + ",".join(tokens) + "}"

    @staticmethod
    def _token(element: Any, literal: str) -> str:
        if element is None:
            return literal
        # Nested arrays are written inline: {{1,2},{3,4}}.
        if isinstance(element, list) and literal.startswith("{"):
            return literal
        if literal == "":
            return '""'
        return array_element(literal)


class TupleRenderer(ParameterRenderer):
    """Tuples as ``'(...)'`` composite literals or ``ROW(...)``."""

    def to_expression(self, value: tuple, ctx: RenderContext) -> str:
        literal = self.to_string_literal(value, ctx)
        if literal is not None:
            return in_string_quotes(literal)
        inner = ctx.descend(value)
        return "ROW(" + ",".join(inner.expression(element) for element in value) + ")"

    def to_string_literal(self, value: tuple, ctx: RenderContext) -> str | None:
        return ctx.memoized(value, self._literal)

    def _literal(self, value: tuple, ctx: RenderContext) -> str | None:
        inner = ctx.descend(value)
        literals = all_string_literals(value, inner)
        if literals is None:
            return None
        tokens = (self._token(element, literal) for element, literal in zip(value, literals))
        return "(" + ",".join(tokens) + ")"

    @staticmethod
    def _token(element: Any, literal: str) -> str:
        # A NULL field is an empty slot between commas.
        if element is None:
            return ""
        if literal == "":
            return '""'
        return composite_element(literal)
