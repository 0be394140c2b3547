"""Renderers for driver-specific kinds.

Network and hardware addresses, intervals, ranges, multiranges, lexemes and
numeric enums.  Geometries live in :mod:`inlineql.render.geometry`.
"""
from __future__ import annotations

import ipaddress
from datetime import timedelta
from enum import IntEnum
from typing import Any

from inlineql.errors import LexemeContextError, MalformedValueError, UnrenderableValueError
from inlineql.render.base import ParameterRenderer, QuotedLiteralRenderer
from inlineql.render.context import RenderContext
from inlineql.render.escaping import in_string_quotes, range_bound
from inlineql.schema.enums import NumericEnum
from inlineql.schema.network import Inet, MacAddress
from inlineql.schema.ranges import Multirange, Range, RangeBound
from inlineql.schema.temporal import Interval
from inlineql.schema.text_search import DEFAULT_WEIGHT, Lexeme

_INTERFACE_TYPES = (
    ipaddress.IPv4Interface,
    ipaddress.IPv6Interface,
    ipaddress.IPv4Network,
    ipaddress.IPv6Network,
)

# Characters that force a lexeme word into quotes.
_LEXEME_SPECIAL = frozenset(",' :")


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------


class InetRenderer(QuotedLiteralRenderer):
    """``Inet`` models and :mod:`ipaddress` objects: ``'127.0.0.1/24'``."""

    def literal(self, value: Any, ctx: RenderContext) -> str:
        if isinstance(value, Inet):
            if value.netmask is None:
                return str(value.address)
            if value.netmask > value.address.max_prefixlen:
                raise MalformedValueError(
                    "Inet",
                    f"Netmask /{value.netmask} is too wide for {value.address}.",
                    details={"netmask": value.netmask, "max": value.address.max_prefixlen},
                )
            return f"{value.address}/{value.netmask}"
        if isinstance(value, _INTERFACE_TYPES):
            return value.with_prefixlen
        return str(value)


class MacAddressRenderer(QuotedLiteralRenderer):
    """``'08:01:2B:05:07:09'``."""

    def literal(self, value: MacAddress, ctx: RenderContext) -> str:
        return ":".join(f"{octet:02X}" for octet in value.address)


# ---------------------------------------------------------------------------
# Intervals
# ---------------------------------------------------------------------------


def _interval_part(count: int, unit: str) -> str:
    if count == 0:
        return ""
    if count == 1:
        return f"1 {unit}, "
    return f"{count} {unit}s, "


def interval_text(interval: Interval) -> str:
    """Return ``'1 month, 2 days, 34 seconds'`` style text.

    Month and day parts are omitted when zero; seconds are always present,
    with a six-digit fraction when there are microseconds.
    ``secs=-1, microsecs=500000`` is half a second back: ``-0.500000``.
    """
    total = interval.secs * 1_000_000 + interval.microsecs
    whole, fraction = divmod(abs(total), 1_000_000)
    seconds = ("-" if total < 0 else "") + str(whole)
    if fraction:
        seconds += f".{fraction:06d}"
    return (
        _interval_part(interval.months, "month")
        + _interval_part(interval.days, "day")
        + f"{seconds} seconds"
    )


class IntervalRenderer(QuotedLiteralRenderer):
    """``Interval`` models and :class:`datetime.timedelta`."""

    def literal(self, value: Interval | timedelta, ctx: RenderContext) -> str:
        if isinstance(value, timedelta):
            value = Interval.from_timedelta(value)
        return interval_text(value)


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------


def _bound_text(bound: Any, side: str, ctx: RenderContext) -> str:
    if bound is RangeBound.UNBOUNDED or bound is None:
        return ""
    if not ctx.printer.has_renderer(bound):
        raise UnrenderableValueError(bound)
    literal = ctx.string_literal(bound)
    if literal is None:
        raise MalformedValueError(
            "Range",
            f"The {side} bound of kind '{type(bound).__name__}' has no literal form.",
            details={"side": side},
        )
    return range_bound(literal)


def range_body(value: Range, ctx: RenderContext) -> str:
    """Return the unquoted range text, e.g. ``[1,5)`` or ``empty``."""
    if value.is_empty:
        return "empty"
    return (
        ("[" if value.lower_inclusive else "(")
        + _bound_text(value.lower, "lower", ctx)
        + ","
        + _bound_text(value.upper, "upper", ctx)
        + ("]" if value.upper_inclusive else ")")
    )


class RangeRenderer(QuotedLiteralRenderer):
    def literal(self, value: Range, ctx: RenderContext) -> str:
        return range_body(value, ctx)


class MultirangeRenderer(QuotedLiteralRenderer):
    """``'{[1,3),(10,15]}'``."""

    def literal(self, value: Multirange, ctx: RenderContext) -> str:
        return "{" + ",".join(range_body(item, ctx) for item in value.ranges) + "}"


# ---------------------------------------------------------------------------
# Text search
# ---------------------------------------------------------------------------


class LexemeRenderer(ParameterRenderer):
    """Lexemes only render as elements of a list (a ``tsvector``)."""

    def to_expression(self, value: Lexeme, ctx: RenderContext) -> str:
        raise LexemeContextError(value.word)

    def to_string_literal(self, value: Lexeme, ctx: RenderContext) -> str | None:
        if not value.word:
            raise MalformedValueError("Lexeme", "Lexeme word must not be empty.")
        word = value.word
        if not _LEXEME_SPECIAL.isdisjoint(word):
            word = in_string_quotes(word)
        if not value.positions:
            return word
        return f"{word}:{self._positions(value)}"

    @staticmethod
    def _positions(value: Lexeme) -> str:
        seen: dict[int, Any] = {}
        parts: list[str] = []
        for position, weight in value.positions:
            weight = weight or DEFAULT_WEIGHT
            if seen.setdefault(position, weight) != weight:
                raise MalformedValueError(
                    "Lexeme",
                    f"Position {position} of {value.word!r} has conflicting weights.",
                    details={"word": value.word, "position": position},
                )
            if weight == DEFAULT_WEIGHT:
                parts.append(str(position))
            else:
                parts.append(f"{position}{weight.value}")
        return ",".join(parts)


# ---------------------------------------------------------------------------
# Numeric enums
# ---------------------------------------------------------------------------


class NumericEnumRenderer(ParameterRenderer):
    """``1/*one*/``.  Never a string literal, so containers use ARRAY/ROW."""

    def to_expression(self, value: NumericEnum | IntEnum, ctx: RenderContext) -> str:
        if isinstance(value, NumericEnum):
            integer, label = value.integer, value.label
        else:
            integer, label = int(value), value.name
        if "*/" in label:
            raise MalformedValueError(
                "NumericEnum",
                f"Label {label!r} would terminate the SQL comment.",
                details={"label": label},
            )
        return f"{integer}/*{label}*/"

    def to_string_literal(self, value: Any, ctx: RenderContext) -> str | None:
        return None
