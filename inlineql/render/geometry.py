"""Geometry renderer: extended well-known text (EWKT).

``SRID=4326;POINT(44.21587 -87.5947)`` is accepted verbatim by PostGIS
``geometry`` input.  Conventions:

* ``SRID=<n>;`` prefix only when ``srid`` is set on the outermost geometry;
* ISO dimension tags, ``Z`` for three ordinates and ``ZM`` for four;
* ``EMPTY`` for geometries without positions;
* ordinates that are whole numbers are written without a fraction,
  everything else uses the shortest round-trip float text;
* no space after commas.
"""
from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from typing import Any

from inlineql.errors import MalformedValueError
from inlineql.render.base import QuotedLiteralRenderer
from inlineql.render.context import RenderContext
from inlineql.schema.geometry import (
    GeometryBase,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

_DIMENSION_TAGS = {2: "", 3: "Z", 4: "ZM"}


def _positions(geometry: GeometryBase) -> Iterator[Sequence[float]]:
    """Yield every position of ``geometry``, descending into collections."""
    if isinstance(geometry, Point):
        if geometry.coordinates is not None:
            yield geometry.coordinates
    elif isinstance(geometry, (LineString, MultiPoint)):
        yield from geometry.coordinates
    elif isinstance(geometry, (Polygon, MultiLineString)):
        for ring in geometry.coordinates:
            yield from ring
    elif isinstance(geometry, MultiPolygon):
        for polygon in geometry.coordinates:
            for ring in polygon:
                yield from ring
    elif isinstance(geometry, GeometryCollection):
        for member in geometry.geometries:
            yield from _positions(member)


class _EwktWriter:
    """Writes one geometry tree with a fixed ordinate count."""

    def __init__(self, kind: str, arity: int) -> None:
        self._kind = kind
        self._tag = _DIMENSION_TAGS[arity]

    def _fail(self, message: str, **details: Any) -> MalformedValueError:
        return MalformedValueError(self._kind, message, details=details)

    def ordinate(self, value: float) -> str:
        if not math.isfinite(value):
            raise self._fail(f"Ordinate {value!r} is not finite.")
        if value.is_integer():
            return str(int(value))
        return repr(value)

    def position(self, position: Sequence[float]) -> str:
        return " ".join(self.ordinate(value) for value in position)

    def line(self, positions: Sequence[Sequence[float]], minimum: int = 2) -> str:
        if len(positions) < minimum:
            raise self._fail(
                f"Expected at least {minimum} positions, got {len(positions)}.",
                positions=len(positions),
            )
        return "(" + ",".join(self.position(p) for p in positions) + ")"

    def ring(self, positions: Sequence[Sequence[float]]) -> str:
        text = self.line(positions, minimum=4)
        if tuple(positions[0]) != tuple(positions[-1]):
            raise self._fail("Polygon ring is not closed.")
        return text

    def polygon(self, rings: Sequence[Sequence[Sequence[float]]]) -> str:
        return "(" + ",".join(self.ring(ring) for ring in rings) + ")"

    def head(self, geometry: GeometryBase) -> str:
        if self._tag:
            return f"{geometry.wkt_name} {self._tag} "
        return geometry.wkt_name

    def write(self, geometry: GeometryBase) -> str:
        body = self.body(geometry)
        if body is None:
            return f"{geometry.wkt_name} EMPTY"
        return self.head(geometry) + body

    def body(self, geometry: GeometryBase) -> str | None:
        if isinstance(geometry, Point):
            if geometry.coordinates is None:
                return None
            return "(" + self.position(geometry.coordinates) + ")"
        if isinstance(geometry, GeometryCollection):
            members = geometry.geometries
            return "(" + ",".join(self.write(m) for m in members) + ")" if members else None
        coordinates: Sequence[Any] = geometry.coordinates  # type: ignore[attr-defined]
        if not coordinates:
            return None
        if isinstance(geometry, LineString):
            return self.line(coordinates)
        if isinstance(geometry, MultiPoint):
            return "(" + ",".join(f"({self.position(p)})" for p in coordinates) + ")"
        if isinstance(geometry, Polygon):
            return self.polygon(coordinates)
        if isinstance(geometry, MultiLineString):
            return "(" + ",".join(self.line(line) for line in coordinates) + ")"
        if isinstance(geometry, MultiPolygon):
            return "(" + ",".join(self.polygon(p) for p in coordinates) + ")"
        raise self._fail(f"Unsupported geometry type {type(geometry).__name__}.")


def _check_srids(geometry: GeometryBase, srid: int | None, kind: str) -> None:
    if not isinstance(geometry, GeometryCollection):
        return
    for member in geometry.geometries:
        if member.srid is not None and member.srid != srid:
            raise MalformedValueError(
                kind,
                f"Member SRID {member.srid} differs from collection SRID {srid}.",
                details={"srid": srid, "member_srid": member.srid},
            )
        _check_srids(member, srid, kind)


def to_ewkt(geometry: GeometryBase) -> str:
    """Return ``geometry`` as EWKT.

    Raises:
        MalformedValueError: On mixed or unsupported ordinate counts, short
            lines, open or short rings, or conflicting SRIDs.
    """
    kind = type(geometry).__name__
    arities = {len(position) for position in _positions(geometry)}
    if len(arities) > 1:
        raise MalformedValueError(
            kind,
            "Positions mix different ordinate counts.",
            details={"arities": sorted(arities)},
        )
    arity = arities.pop() if arities else 2
    if arity not in _DIMENSION_TAGS:
        raise MalformedValueError(
            kind,
            f"Positions must have 2 to 4 ordinates, got {arity}.",
            details={"arity": arity},
        )
    _check_srids(geometry, geometry.srid, kind)
    text = _EwktWriter(kind, arity).write(geometry)
    if geometry.srid is not None:
        return f"SRID={geometry.srid};{text}"
    return text


class GeometryRenderer(QuotedLiteralRenderer):
    def literal(self, value: GeometryBase, ctx: RenderContext) -> str:
        return to_ewkt(value)
