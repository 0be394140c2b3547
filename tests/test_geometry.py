"""Unit tests for EWKT geometry rendering."""
from __future__ import annotations

import math

import pytest

from inlineql import render_expression, render_string_literal
from inlineql.errors import MalformedValueError
from inlineql.render.geometry import to_ewkt
from inlineql.schema.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

SQUARE = [(0, 0), (1, 0), (1, 1), (0, 0)]


def test_point_with_srid():
    value = Point(coordinates=(44.21587, -87.5947), srid=4326)
    assert render_expression(value) == "'SRID=4326;POINT(44.21587 -87.5947)'"


def test_empty_point():
    assert render_expression(Point()) == "'POINT EMPTY'"


def test_three_dimensional_point():
    assert to_ewkt(Point(coordinates=(1, 2, 3))) == "POINT Z (1 2 3)"
    assert to_ewkt(Point(coordinates=(1, 2, 3, 4))) == "POINT ZM (1 2 3 4)"


def test_line_string():
    assert to_ewkt(LineString(coordinates=[(0, 0), (1.5, 1)])) == "LINESTRING(0 0,1.5 1)"
    assert to_ewkt(LineString()) == "LINESTRING EMPTY"


def test_polygon():
    value = Polygon(
        coordinates=[
            [(2.20, 41.41), (2.13, 41.41), (2.13, 41.35), (2.20, 41.35), (2.20, 41.41)]
        ]
    )
    assert render_expression(value) == (
        "'POLYGON((2.2 41.41,2.13 41.41,2.13 41.35,2.2 41.35,2.2 41.41))'"
    )


def test_polygon_with_hole():
    hole = [(0.2, 0.2), (0.4, 0.2), (0.4, 0.4), (0.2, 0.2)]
    assert to_ewkt(Polygon(coordinates=[SQUARE, hole])) == (
        "POLYGON((0 0,1 0,1 1,0 0),(0.2 0.2,0.4 0.2,0.4 0.4,0.2 0.2))"
    )


def test_multi_geometries():
    assert to_ewkt(MultiPoint(coordinates=[(0, 0), (1, 1)])) == "MULTIPOINT((0 0),(1 1))"
    assert to_ewkt(MultiLineString(coordinates=[[(0, 0), (1, 1)], [(2, 2), (3, 3)]])) == (
        "MULTILINESTRING((0 0,1 1),(2 2,3 3))"
    )
    assert to_ewkt(MultiPolygon(coordinates=[[SQUARE]])) == "MULTIPOLYGON(((0 0,1 0,1 1,0 0)))"


def test_collection():
    value = GeometryCollection(
        geometries=[Point(coordinates=(1, 2)), LineString(coordinates=[(0, 0), (1, 1)])],
        srid=4326,
    )
    assert to_ewkt(value) == "SRID=4326;GEOMETRYCOLLECTION(POINT(1 2),LINESTRING(0 0,1 1))"
    assert to_ewkt(GeometryCollection()) == "GEOMETRYCOLLECTION EMPTY"


def test_string_literal_is_unquoted_ewkt():
    assert render_string_literal(Point(coordinates=(1, 2))) == "POINT(1 2)"


def test_geometry_inside_list_is_quoted_element():
    value = [LineString(coordinates=[(0, 0), (1, 1)])]
    assert render_expression(value) == '\'{"LINESTRING(0 0,1 1)"}\''


class TestMalformedGeometry:
    def test_mixed_ordinate_counts(self):
        with pytest.raises(MalformedValueError) as exc_info:
            to_ewkt(LineString(coordinates=[(0, 0), (1, 1, 1)]))
        assert exc_info.value.details["arities"] == [2, 3]

    def test_too_many_ordinates(self):
        with pytest.raises(MalformedValueError):
            to_ewkt(Point(coordinates=(1, 2, 3, 4, 5)))

    def test_single_position_line(self):
        with pytest.raises(MalformedValueError):
            to_ewkt(LineString(coordinates=[(0, 0)]))

    def test_open_ring(self):
        with pytest.raises(MalformedValueError):
            to_ewkt(Polygon(coordinates=[[(0, 0), (1, 0), (1, 1), (0, 1)]]))

    def test_short_ring(self):
        with pytest.raises(MalformedValueError):
            to_ewkt(Polygon(coordinates=[[(0, 0), (1, 1), (0, 0)]]))

    def test_non_finite_ordinate(self):
        with pytest.raises(MalformedValueError):
            to_ewkt(Point(coordinates=(math.nan, 1)))

    def test_conflicting_member_srid(self):
        value = GeometryCollection(
            geometries=[Point(coordinates=(1, 2), srid=3857)],
            srid=4326,
        )
        with pytest.raises(MalformedValueError):
            to_ewkt(value)

    def test_render_expression_raises_too(self):
        with pytest.raises(MalformedValueError):
            render_expression(LineString(coordinates=[(0, 0)]))
