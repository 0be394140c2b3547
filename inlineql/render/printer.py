"""ParameterPrinter: dispatch from a value to its renderer.

The printer owns a frozen :class:`~inlineql.render.registry.RendererRegistry`,
an optional caller-supplied fallback for kinds the registry does not know,
and a :class:`~inlineql.config.RenderConfig`.  Rendering is pure; one printer
can be shared by any number of threads.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from inlineql.config import RenderConfig
from inlineql.errors import RenderError, UnrenderableValueError
from inlineql.render.context import RenderContext
from inlineql.render.defaults import DEFAULT_REGISTRY
from inlineql.render.registry import RendererRegistry

logger = logging.getLogger("inlineql.render.printer")

#: Caller-supplied renderer for unknown kinds: returns an expression or ``None``.
Fallback = Callable[[Any], "str | None"]


@dataclass(frozen=True)
class RenderedParameter:
    """Outcome of rendering one parameter.

    Attributes:
        value: The original value.
        expression: SQL expression, when rendering succeeded.
        error: The failure, when it did not.
    """

    value: Any
    expression: str | None = None
    error: RenderError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ParameterPrinter:
    """Renders parameter values as SQL expressions.

    Args:
        registry: Renderer registry; frozen on construction.  Defaults to
            the built-in registry.
        fallback: Called with values no registered renderer handles.  It
            returns a SQL expression, or ``None`` to report the value as
            unrenderable.  Its output is used verbatim.
        config: Rendering options; defaults to ``RenderConfig()``.
    """

    def __init__(
        self,
        registry: RendererRegistry | None = None,
        fallback: Fallback | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self._registry = (registry or DEFAULT_REGISTRY).freeze()
        self._fallback = fallback
        self._config = config or RenderConfig()

    @property
    def config(self) -> RenderConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def to_expression(self, value: Any) -> str:
        """Return ``value`` as a SQL expression.

        Raises:
            UnrenderableValueError: If neither a renderer nor the fallback
                handles the value (or a value nested inside it).
            MalformedValueError: If an extension value is inconsistent.
            NestingDepthError: If containers nest too deeply or cyclically.
        """
        return self.dispatch_expression(value, self._root_context())

    def to_string_literal(self, value: Any) -> str | None:
        """Return the unquoted literal form of ``value``, or ``None``.

        ``None`` means the value needs a constructor call (``ARRAY[...]``,
        ``DECODE(...)``, a numeric enum, an unknown kind).
        """
        return self.dispatch_string_literal(value, self._root_context())

    def render(self, value: Any) -> RenderedParameter:
        """Render ``value``, capturing a RenderError instead of raising it."""
        try:
            return RenderedParameter(value, expression=self.to_expression(value))
        except RenderError as exc:
            return RenderedParameter(value, error=exc)

    def render_all(self, values: Iterable[Any]) -> list[str]:
        """Render an ordered sequence of bound parameters.

        With ``on_unrenderable="raise"`` the first failure propagates.  With
        ``"marker"`` each failure is logged and replaced by
        ``NULL/*unrenderable <kind>*/`` so the statement stays runnable.
        """
        if self._config.on_unrenderable == "raise":
            return [self.to_expression(value) for value in values]

        expressions: list[str] = []
        for position, value in enumerate(values, start=1):
            result = self.render(value)
            if result.ok:
                expressions.append(result.expression)  # type: ignore[arg-type]
                continue
            logger.warning(
                "Parameter %d could not be rendered (%s): %s",
                position,
                result.error.code,  # type: ignore[union-attr]
                result.error,
            )
            expressions.append(f"NULL/*unrenderable {type(value).__name__}*/")
        return expressions

    # ------------------------------------------------------------------
    # Dispatch (also used by RenderContext for child values)
    # ------------------------------------------------------------------

    def has_renderer(self, value: Any) -> bool:
        """Return ``True`` if a registered renderer handles ``value``."""
        return self._registry.get(value) is not None

    def dispatch_expression(self, value: Any, ctx: RenderContext) -> str:
        renderer = self._registry.get(value)
        if renderer is not None:
            return renderer.to_expression(value, ctx)
        if self._fallback is not None:
            expression = self._fallback(value)
            if expression is not None:
                logger.debug("Rendered %s parameter with fallback", type(value).__name__)
                return expression
        raise UnrenderableValueError(value)

    def dispatch_string_literal(self, value: Any, ctx: RenderContext) -> str | None:
        renderer = self._registry.get(value)
        if renderer is None:
            return None
        return renderer.to_string_literal(value, ctx)

    def _root_context(self) -> RenderContext:
        return RenderContext(printer=self, config=self._config)
