"""The built-in renderer registry.

``DEFAULT_REGISTRY`` is built once at import time and frozen; every printer
created without an explicit registry shares it.
"""
from __future__ import annotations

import ipaddress
import uuid
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum, IntEnum

from pydantic import BaseModel

from inlineql.render.binary import BinaryRenderer
from inlineql.render.containers import ListRenderer, TupleRenderer
from inlineql.render.extensions import (
    InetRenderer,
    IntervalRenderer,
    LexemeRenderer,
    MacAddressRenderer,
    MultirangeRenderer,
    NumericEnumRenderer,
    RangeRenderer,
)
from inlineql.render.geometry import GeometryRenderer
from inlineql.render.primitives import (
    BooleanRenderer,
    DateRenderer,
    DateTimeRenderer,
    DecimalRenderer,
    FloatRenderer,
    IntegerRenderer,
    JsonRenderer,
    ModelRenderer,
    NullRenderer,
    SymbolRenderer,
    TextRenderer,
    TimeRenderer,
    UuidRenderer,
)
from inlineql.render.registry import RendererRegistry
from inlineql.schema.enums import NumericEnum, Symbol
from inlineql.schema.geometry import GeometryBase
from inlineql.schema.network import Inet, MacAddress
from inlineql.schema.ranges import Multirange, Range
from inlineql.schema.temporal import Interval
from inlineql.schema.text_search import Lexeme

_IP_TYPES = (
    ipaddress.IPv4Address,
    ipaddress.IPv6Address,
    ipaddress.IPv4Interface,
    ipaddress.IPv6Interface,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
)


def build_default_registry() -> RendererRegistry:
    """Return a frozen registry holding every built-in renderer."""
    registry = RendererRegistry()

    # Scalars
    registry.register_renderer(type(None), NullRenderer())
    registry.register_renderer(bool, BooleanRenderer())
    registry.register_renderer(int, IntegerRenderer())
    registry.register_renderer(float, FloatRenderer())
    registry.register_renderer(Decimal, DecimalRenderer())
    registry.register_renderer(str, TextRenderer())
    symbol = SymbolRenderer()
    registry.register_renderer(Symbol, symbol)
    registry.register_renderer(Enum, symbol)
    binary = BinaryRenderer()
    for binary_type in (bytes, bytearray, memoryview):
        registry.register_renderer(binary_type, binary)
    registry.register_renderer(uuid.UUID, UuidRenderer())

    # Dates and times
    registry.register_renderer(date, DateRenderer())
    registry.register_renderer(time, TimeRenderer())
    registry.register_renderer(datetime, DateTimeRenderer())

    # Maps
    registry.register_renderer(dict, JsonRenderer())
    registry.register_renderer(BaseModel, ModelRenderer())

    # Containers
    registry.register_renderer(list, ListRenderer())
    registry.register_renderer(tuple, TupleRenderer())

    # Extensions
    inet = InetRenderer()
    registry.register_renderer(Inet, inet)
    for ip_type in _IP_TYPES:
        registry.register_renderer(ip_type, inet)
    registry.register_renderer(MacAddress, MacAddressRenderer())
    interval = IntervalRenderer()
    registry.register_renderer(Interval, interval)
    registry.register_renderer(timedelta, interval)
    registry.register_renderer(Range, RangeRenderer())
    registry.register_renderer(Multirange, MultirangeRenderer())
    registry.register_renderer(GeometryBase, GeometryRenderer())
    registry.register_renderer(Lexeme, LexemeRenderer())
    numeric_enum = NumericEnumRenderer()
    registry.register_renderer(NumericEnum, numeric_enum)
    registry.register_renderer(IntEnum, numeric_enum)

    return registry.freeze()


DEFAULT_REGISTRY = build_default_registry()
