"""inlineQL rendering layer: parameter value -> SQL expression."""
from inlineql.render.base import BareLiteralRenderer, ParameterRenderer, QuotedLiteralRenderer
from inlineql.render.context import RenderContext
from inlineql.render.defaults import DEFAULT_REGISTRY, build_default_registry
from inlineql.render.printer import ParameterPrinter, RenderedParameter
from inlineql.render.registry import RendererRegistry

__all__ = [
    "BareLiteralRenderer",
    "ParameterRenderer",
    "QuotedLiteralRenderer",
    "RenderContext",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "ParameterPrinter",
    "RenderedParameter",
    "RendererRegistry",
]
