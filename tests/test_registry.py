"""Unit tests for RendererRegistry and the default registry."""
from __future__ import annotations

from collections import OrderedDict
from enum import IntEnum

import pytest

from inlineql.errors import RegistryError
from inlineql.render.base import QuotedLiteralRenderer
from inlineql.render.containers import TupleRenderer
from inlineql.render.defaults import DEFAULT_REGISTRY, build_default_registry
from inlineql.render.extensions import NumericEnumRenderer
from inlineql.render.primitives import IntegerRenderer, JsonRenderer, TextRenderer
from inlineql.render.printer import ParameterPrinter
from inlineql.render.registry import RendererRegistry


class Money:
    def __init__(self, amount: str, currency: str) -> None:
        self.amount = amount
        self.currency = currency


class Level(IntEnum):
    ONE = 1


# ---------------------------------------------------------------------------
# Default registry
# ---------------------------------------------------------------------------


def test_default_registry_is_frozen():
    assert DEFAULT_REGISTRY.frozen
    with pytest.raises(RegistryError):
        DEFAULT_REGISTRY.register_renderer(Money, TextRenderer())


def test_build_default_registry_returns_fresh_frozen_registry():
    registry = build_default_registry()
    assert registry is not DEFAULT_REGISTRY
    assert registry.frozen
    assert registry.registered_types() == DEFAULT_REGISTRY.registered_types()


def test_registered_types_lists_builtins():
    names = DEFAULT_REGISTRY.registered_types()
    assert "builtins.int" in names
    assert "builtins.list" in names
    assert "inlineql.schema.ranges.Range" in names


def test_unknown_type_has_no_renderer():
    assert DEFAULT_REGISTRY.get(Money("1", "USD")) is None


class TestMroResolution:
    def test_bool_is_not_rendered_as_int(self):
        assert not isinstance(DEFAULT_REGISTRY.get(True), IntegerRenderer)

    def test_int_enum_wins_over_int(self):
        assert isinstance(DEFAULT_REGISTRY.get(Level.ONE), NumericEnumRenderer)

    def test_dict_subclass_is_a_map(self):
        assert isinstance(DEFAULT_REGISTRY.get(OrderedDict(a=1)), JsonRenderer)

    def test_lookup_is_cached_and_stable(self):
        first = DEFAULT_REGISTRY.get(OrderedDict())
        assert DEFAULT_REGISTRY.get(OrderedDict()) is first

    def test_tuple_subclass_is_composite(self):
        class Pair(tuple):
            pass

        assert isinstance(DEFAULT_REGISTRY.get(Pair((1, 2))), TupleRenderer)


# ---------------------------------------------------------------------------
# Custom registries
# ---------------------------------------------------------------------------


def test_copy_is_unfrozen_and_independent():
    registry = DEFAULT_REGISTRY.copy()
    assert not registry.frozen
    registry.register_renderer(Money, TextRenderer())
    assert registry.get(Money("1", "USD")) is not None
    assert DEFAULT_REGISTRY.get(Money("1", "USD")) is None


def test_decorator_registration():
    registry = DEFAULT_REGISTRY.copy()

    @registry.register(Money)
    class MoneyRenderer(QuotedLiteralRenderer):
        def literal(self, value, ctx):
            return f"{value.amount} {value.currency}"

    printer = ParameterPrinter(registry=registry)
    assert printer.to_expression(Money("1.50", "USD")) == "'1.50 USD'"
    assert printer.to_expression([Money("1", "USD"), Money("2", "EUR")]) == "'{1 USD,2 EUR}'"
    assert isinstance(registry.get(Money("1", "USD")), MoneyRenderer)


def test_printer_freezes_its_registry():
    registry = RendererRegistry()
    ParameterPrinter(registry=registry)
    assert registry.frozen
    with pytest.raises(RegistryError):
        registry.register_renderer(str, TextRenderer())


def test_register_rejects_non_types():
    registry = RendererRegistry()
    with pytest.raises(RegistryError):
        registry.register_renderer("str", TextRenderer())  # type: ignore[arg-type]


def test_register_rejects_non_renderers():
    registry = RendererRegistry()
    with pytest.raises(RegistryError) as exc_info:
        registry.register_renderer(str, object())  # type: ignore[arg-type]
    assert exc_info.value.type_name == "str"


def test_registration_invalidates_cache():
    registry = RendererRegistry()
    registry.register_renderer(object, TextRenderer())
    assert isinstance(registry.get(1), TextRenderer)
    integer = IntegerRenderer()
    registry.register_renderer(int, integer)
    assert registry.get(1) is integer
