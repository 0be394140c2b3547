"""Renderer registry (Open/Closed Principle).

Maps Python types to :class:`~inlineql.render.base.ParameterRenderer`
instances.  Lookups try the exact type first and then walk the MRO, so a
renderer registered for ``tuple`` also handles named tuples, and one
registered for ``enum.IntEnum`` wins over ``int`` for enum members.

A registry is built once, frozen, and only read afterwards.  To customise
rendering, copy the default registry and register on the copy::

    from inlineql.render.defaults import DEFAULT_REGISTRY

    registry = DEFAULT_REGISTRY.copy()

    @registry.register(Money)
    class MoneyRenderer(QuotedLiteralRenderer):
        def literal(self, value, ctx):
            return f"{value.amount} {value.currency}"

    printer = ParameterPrinter(registry=registry)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from inlineql.errors import RegistryError
from inlineql.render.base import ParameterRenderer

logger = logging.getLogger("inlineql.render.registry")

R = TypeVar("R", bound=type[ParameterRenderer])


class RendererRegistry:
    """Registry mapping value types to renderers.

    Example::

        registry = RendererRegistry()
        registry.register_renderer(str, TextRenderer())
        registry.freeze()
        registry.get("hello")  # -> the TextRenderer instance
    """

    def __init__(self) -> None:
        self._renderers: dict[type, ParameterRenderer] = {}
        self._cache: dict[type, ParameterRenderer | None] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, *types: type) -> Callable[[R], R]:
        """Decorator that instantiates a renderer class and registers it.

        Args:
            types: One or more value types handled by the renderer.

        Returns:
            A decorator that registers and returns the renderer class.
        """

        def decorator(renderer_cls: R) -> R:
            renderer = renderer_cls()
            for type_ in types:
                self.register_renderer(type_, renderer)
            return renderer_cls

        return decorator

    def register_renderer(self, type_: type, renderer: ParameterRenderer) -> None:
        """Register a renderer instance without using the decorator form.

        Raises:
            RegistryError: If the registry is frozen, ``type_`` is not a
                class, or ``renderer`` is not a ParameterRenderer.
        """
        if self._frozen:
            raise RegistryError(
                "Cannot register renderers on a frozen registry; use copy() first.",
                type_name=getattr(type_, "__name__", repr(type_)),
            )
        if not isinstance(type_, type):
            raise RegistryError(f"Expected a type, got {type_!r}.")
        if not isinstance(renderer, ParameterRenderer):
            raise RegistryError(
                f"Expected a ParameterRenderer for {type_.__name__}, "
                f"got {type(renderer).__name__}.",
                type_name=type_.__name__,
            )
        self._renderers[type_] = renderer
        self._cache.clear()
        logger.debug("Registered %s for %s", type(renderer).__name__, type_.__qualname__)

    def freeze(self) -> RendererRegistry:
        """Make the registry read-only and return it."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> RendererRegistry:
        """Return an unfrozen registry with the same registrations."""
        clone = RendererRegistry()
        clone._renderers = dict(self._renderers)
        return clone

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, value: Any) -> ParameterRenderer | None:
        """Return the renderer for ``value``, or ``None`` if nothing matches."""
        value_type = type(value)
        try:
            return self._cache[value_type]
        except KeyError:
            pass
        renderer = self._resolve(value_type)
        self._cache[value_type] = renderer
        return renderer

    def _resolve(self, value_type: type) -> ParameterRenderer | None:
        for base in value_type.__mro__:
            renderer = self._renderers.get(base)
            if renderer is not None:
                return renderer
        return None

    def registered_types(self) -> list[str]:
        """Return the sorted qualified names of every registered type."""
        return sorted(f"{t.__module__}.{t.__qualname__}" for t in self._renderers)
