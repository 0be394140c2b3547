"""inlineQL value models for driver-specific parameter kinds."""
from inlineql.schema.enums import NumericEnum, Symbol
from inlineql.schema.geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from inlineql.schema.network import Inet, MacAddress
from inlineql.schema.ranges import Multirange, Range, RangeBound
from inlineql.schema.temporal import Interval
from inlineql.schema.text_search import Lexeme, Weight

__all__ = [
    "NumericEnum",
    "Symbol",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Inet",
    "MacAddress",
    "Multirange",
    "Range",
    "RangeBound",
    "Interval",
    "Lexeme",
    "Weight",
]
