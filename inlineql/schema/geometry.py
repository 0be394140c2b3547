"""Geometry value models (PostGIS-style simple features).

Coordinates are plain tuples of ordinates (``(x, y)``, ``(x, y, z)`` or
``(x, y, z, m)``), nested the same way GeoJSON nests them::

    Point(coordinates=(44.21587, -87.5947), srid=4326)
    Polygon(coordinates=[[(0, 0), (1, 0), (1, 1), (0, 0)]])

Structural consistency (one ordinate count per geometry, closed rings,
minimum vertex counts) is checked when the value is rendered, see
:mod:`inlineql.render.geometry`.
"""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict

#: One vertex.
Position = tuple[float, ...]


class GeometryBase(BaseModel):
    """Shared fields of every geometry.

    Attributes:
        srid: Spatial reference id, or ``None`` when unspecified.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    wkt_name: ClassVar[str] = ""

    srid: int | None = None


class Point(GeometryBase):
    """A single position; ``coordinates=None`` is the empty point."""

    wkt_name: ClassVar[str] = "POINT"

    coordinates: Position | None = None


class LineString(GeometryBase):
    wkt_name: ClassVar[str] = "LINESTRING"

    coordinates: tuple[Position, ...] = ()


class Polygon(GeometryBase):
    """Exterior ring followed by interior rings (holes)."""

    wkt_name: ClassVar[str] = "POLYGON"

    coordinates: tuple[tuple[Position, ...], ...] = ()


class MultiPoint(GeometryBase):
    wkt_name: ClassVar[str] = "MULTIPOINT"

    coordinates: tuple[Position, ...] = ()


class MultiLineString(GeometryBase):
    wkt_name: ClassVar[str] = "MULTILINESTRING"

    coordinates: tuple[tuple[Position, ...], ...] = ()


class MultiPolygon(GeometryBase):
    wkt_name: ClassVar[str] = "MULTIPOLYGON"

    coordinates: tuple[tuple[tuple[Position, ...], ...], ...] = ()


class GeometryCollection(GeometryBase):
    wkt_name: ClassVar[str] = "GEOMETRYCOLLECTION"

    geometries: tuple[Geometry, ...] = ()


Geometry = Union[
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]

GeometryCollection.model_rebuild()
