"""Render context value object.

Carries the ``(printer, config)`` pair through recursive rendering, together
with the current nesting depth and the containers on the path from the root.
Each descent returns a new context, so the same value tree can be rendered
from several threads at once.  The container-literal memo is created per
top-level call and shared only by the contexts descended from it.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from inlineql.config import RenderConfig
from inlineql.errors import NestingDepthError

if TYPE_CHECKING:
    from inlineql.render.printer import ParameterPrinter


@dataclass(frozen=True)
class RenderContext:
    """Immutable context for a single render call.

    Attributes:
        printer: Printer that owns the registry and fallback.
        config: Rendering options.
        depth: Number of containers entered so far.
        path: ``id()`` of every container on the current path.
        memo: String literals of containers already rendered in this call,
            keyed by ``(id(container), depth)``.
    """

    printer: ParameterPrinter
    config: RenderConfig
    depth: int = 0
    path: frozenset[int] = frozenset()
    memo: dict[tuple[int, int], str | None] = field(
        default_factory=dict, compare=False, repr=False
    )

    def expression(self, value: Any) -> str:
        """Render a child value as an expression."""
        return self.printer.dispatch_expression(value, self)

    def string_literal(self, value: Any) -> str | None:
        """Render a child value as a string literal, or ``None``."""
        return self.printer.dispatch_string_literal(value, self)

    def memoized(
        self,
        container: Any,
        compute: Callable[[Any, RenderContext], str | None],
    ) -> str | None:
        """Return ``compute(container, self)``, computing it once per call.

        Failures are not stored, so they are raised again on every lookup.
        """
        key = (id(container), self.depth)
        try:
            return self.memo[key]
        except KeyError:
            pass
        literal = compute(container, self)
        self.memo[key] = literal
        return literal

    def descend(self, container: Any) -> RenderContext:
        """Return the context for the children of ``container``.

        Raises:
            NestingDepthError: If ``container`` is already on the path or the
                configured ``max_depth`` would be exceeded.
        """
        depth = self.depth + 1
        key = id(container)
        if key in self.path:
            raise NestingDepthError(depth, self.config.max_depth, cyclic=True)
        if depth > self.config.max_depth:
            raise NestingDepthError(depth, self.config.max_depth)
        return replace(self, depth=depth, path=self.path | {key})
