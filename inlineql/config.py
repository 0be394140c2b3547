"""Pydantic model for the RenderConfig used by ParameterPrinter.

Create a config directly or through the builder::

    from inlineql import RenderConfig

    config = RenderConfig(max_depth=16)

    # Replace unrenderable parameters with a marker instead of raising
    config = RenderConfig.builder().max_depth(16).markers().build()
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

#: What ``render_all`` does with a parameter that cannot be rendered.
UnrenderablePolicy = Literal["raise", "marker"]


class RenderConfig(BaseModel):
    """Rendering options shared by every call of one printer.

    Attributes:
        max_depth: Maximum list/tuple nesting depth before rendering fails
            (1-128).
        on_unrenderable: ``"raise"`` propagates the first failure from
            ``render_all``; ``"marker"`` logs it and substitutes
            ``NULL/*unrenderable <kind>*/``.
        sort_json_keys: Emit map keys in sorted order so output is stable.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_depth: int = Field(64, ge=1, le=128)
    on_unrenderable: UnrenderablePolicy = "raise"
    sort_json_keys: bool = True

    @classmethod
    def builder(cls) -> RenderConfigBuilder:
        """Return a :class:`RenderConfigBuilder` starting from the defaults."""
        return RenderConfigBuilder()


class RenderConfigBuilder:
    """Fluent builder for :class:`RenderConfig`.

    Each method returns ``self`` so calls can be chained; :meth:`build`
    validates the result.
    """

    def __init__(self) -> None:
        self._options: dict[str, object] = {}

    def max_depth(self, depth: int) -> RenderConfigBuilder:
        self._options["max_depth"] = depth
        return self

    def markers(self) -> RenderConfigBuilder:
        """Substitute a marker for unrenderable parameters instead of raising."""
        self._options["on_unrenderable"] = "marker"
        return self

    def preserve_json_key_order(self) -> RenderConfigBuilder:
        """Keep map keys in insertion order."""
        self._options["sort_json_keys"] = False
        return self

    def build(self) -> RenderConfig:
        return RenderConfig(**self._options)
