"""inlineQL – Copy-pasteable SQL literals for logged query parameters.

Log queries you can run. Don't re-encode them by hand.

Public API
----------
``render_expression``
    Render one bound parameter as a complete SQL expression.

``render_string_literal``
    Render one parameter as text valid between single quotes, or ``None``
    when it needs a constructor call.

``render_parameters``
    Render an ordered sequence of bound parameters.

Re-exported types
-----------------
``ParameterPrinter``, ``RenderConfig``, ``RendererRegistry``, the value
models (``Range``, ``Interval``, ``Inet``, ``Point``, ...) and all error
classes.

Extensibility
-------------
Kinds without a built-in renderer can be handled with a fallback::

    printer = ParameterPrinter(fallback=lambda v: f"'{v}'" if isinstance(v, Money) else None)

or with a renderer registered on a copy of the default registry, see
:mod:`inlineql.render.registry`.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from inlineql.config import RenderConfig, RenderConfigBuilder
from inlineql.errors import (
    InlineQLError,
    LexemeContextError,
    MalformedValueError,
    NestingDepthError,
    RegistryError,
    RenderError,
    UnrenderableValueError,
)
from inlineql.render.base import BareLiteralRenderer, ParameterRenderer, QuotedLiteralRenderer
from inlineql.render.context import RenderContext
from inlineql.render.defaults import DEFAULT_REGISTRY, build_default_registry
from inlineql.render.printer import Fallback, ParameterPrinter, RenderedParameter
from inlineql.render.registry import RendererRegistry
from inlineql.schema import (
    Geometry,
    GeometryCollection,
    Inet,
    Interval,
    Lexeme,
    LineString,
    MacAddress,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Multirange,
    NumericEnum,
    Point,
    Polygon,
    Range,
    RangeBound,
    Symbol,
    Weight,
)

__all__ = [
    # Core API
    "render_expression",
    "render_string_literal",
    "render_parameters",
    # Printer and configuration
    "ParameterPrinter",
    "RenderedParameter",
    "Fallback",
    "RenderConfig",
    "RenderConfigBuilder",
    # Extension points
    "ParameterRenderer",
    "QuotedLiteralRenderer",
    "BareLiteralRenderer",
    "RenderContext",
    "RendererRegistry",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    # Value models
    "Symbol",
    "NumericEnum",
    "Inet",
    "MacAddress",
    "Interval",
    "Range",
    "RangeBound",
    "Multirange",
    "Lexeme",
    "Weight",
    "Geometry",
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
    # Errors
    "InlineQLError",
    "RenderError",
    "UnrenderableValueError",
    "MalformedValueError",
    "LexemeContextError",
    "NestingDepthError",
    "RegistryError",
]

_DEFAULT_PRINTER = ParameterPrinter()


def render_expression(value: Any) -> str:
    """Render one bound parameter as a SQL expression::

        render_expression("O'Brien")           # "'O''Brien'"
        render_expression([1, 2, 3, None])     # "'{1,2,3,NULL}'"
        render_expression(("a", b"\\xff"))     # "ROW('a',DECODE('/w==','BASE64'))"

    Raises:
        RenderError: (or subclass) if the value cannot be rendered.
    """
    return _DEFAULT_PRINTER.to_expression(value)


def render_string_literal(value: Any) -> str | None:
    """Return the unquoted literal form of ``value``, or ``None``."""
    return _DEFAULT_PRINTER.to_string_literal(value)


def render_parameters(
    values: Iterable[Any],
    fallback: Fallback | None = None,
    config: RenderConfig | None = None,
) -> list[str]:
    """Render an ordered sequence of bound parameters.

    Args:
        values: Decoded parameter values, in placeholder order.
        fallback: Optional renderer for kinds without a built-in renderer.
        config: Optional rendering options; ``on_unrenderable="marker"``
            replaces failures with a ``NULL/*unrenderable ...*/`` marker.

    Returns:
        One SQL expression per value.
    """
    if fallback is None and config is None:
        return _DEFAULT_PRINTER.render_all(values)
    return ParameterPrinter(fallback=fallback, config=config).render_all(values)
