"""Renderers for scalar kinds: NULL, booleans, symbols, numbers, text, dates and maps."""
from __future__ import annotations

import json
import math
from abc import abstractmethod
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from inlineql.errors import MalformedValueError
from inlineql.render.base import (
    BareLiteralRenderer,
    ParameterRenderer,
    QuotedLiteralRenderer,
)
from inlineql.render.context import RenderContext
from inlineql.render.escaping import in_string_quotes
from inlineql.schema.enums import Symbol

_UTC_OFFSET = timedelta(0)


class NullRenderer(BareLiteralRenderer):
    def literal(self, value: None, ctx: RenderContext) -> str:
        return "NULL"


class BooleanRenderer(BareLiteralRenderer):
    def literal(self, value: bool, ctx: RenderContext) -> str:
        return "true" if value else "false"


class SymbolRenderer(QuotedLiteralRenderer):
    """``Symbol`` models and plain ``Enum`` members, rendered by name."""

    def literal(self, value: Symbol | Enum, ctx: RenderContext) -> str:
        return value.name


class IntegerRenderer(BareLiteralRenderer):
    def literal(self, value: int, ctx: RenderContext) -> str:
        # int() strips IntFlag and other subclass __str__ overrides.
        return str(int(value))


class _NumberRenderer(ParameterRenderer):
    """Finite numbers are bare tokens; NaN and infinities must be quoted."""

    @abstractmethod
    def text(self, value: Any) -> tuple[str, bool]:
        """Return ``(text, is_finite)``."""

    def to_expression(self, value: Any, ctx: RenderContext) -> str:
        text, finite = self.text(value)
        return text if finite else in_string_quotes(text)

    def to_string_literal(self, value: Any, ctx: RenderContext) -> str | None:
        return self.text(value)[0]


def _special_number_text(is_nan: bool, negative: bool) -> str:
    if is_nan:
        return "NaN"
    return "-Infinity" if negative else "Infinity"


class FloatRenderer(_NumberRenderer):
    def text(self, value: float) -> tuple[str, bool]:
        value = float(value)
        if math.isfinite(value):
            return repr(value), True
        return _special_number_text(math.isnan(value), value < 0), False


class DecimalRenderer(_NumberRenderer):
    def text(self, value: Decimal) -> tuple[str, bool]:
        if value.is_finite():
            return str(value), True
        return _special_number_text(value.is_nan(), value.is_signed()), False


class TextRenderer(QuotedLiteralRenderer):
    def literal(self, value: str, ctx: RenderContext) -> str:
        # str.__str__ returns the raw content for str-mixin enums as well.
        return str.__str__(value)


class DateRenderer(QuotedLiteralRenderer):
    def literal(self, value: date, ctx: RenderContext) -> str:
        return value.isoformat()


def _with_offset(naive_text: str, offset: timedelta | None) -> str:
    if offset is None:
        return naive_text
    if offset == _UTC_OFFSET:
        return naive_text + "Z"
    sign = "-" if offset < _UTC_OFFSET else "+"
    total = abs(int(offset.total_seconds()))
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    suffix = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds:
        suffix += f":{seconds:02d}"
    return naive_text + suffix


class TimeRenderer(QuotedLiteralRenderer):
    """``HH:MM:SS[.ffffff]`` followed by the UTC offset for aware times."""

    def literal(self, value: time, ctx: RenderContext) -> str:
        return _with_offset(value.replace(tzinfo=None).isoformat(), value.utcoffset())


class DateTimeRenderer(QuotedLiteralRenderer):
    """Timestamps (aware) and local timestamps (naive).

    ``2022-11-04 10:40:11.362181Z`` for UTC, ``2022-11-04 12:40:11+02:00``
    for other offsets, no suffix for naive values.
    """

    def literal(self, value: datetime, ctx: RenderContext) -> str:
        naive_text = value.replace(tzinfo=None).isoformat(sep=" ")
        return _with_offset(naive_text, value.utcoffset())


class JsonRenderer(QuotedLiteralRenderer):
    """Maps, encoded as compact JSON text."""

    kind = "Map"

    def jsonable(self, value: Any) -> Any:
        return value

    def literal(self, value: Any, ctx: RenderContext) -> str:
        try:
            return json.dumps(
                self.jsonable(value),
                default=to_jsonable_python,
                sort_keys=ctx.config.sort_json_keys,
                separators=(",", ":"),
                ensure_ascii=False,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            raise MalformedValueError(
                self.kind,
                f"{self.kind} value cannot be encoded as JSON: {exc}",
            ) from exc
        except RecursionError as exc:
            raise MalformedValueError(
                self.kind,
                f"{self.kind} value is nested too deeply to encode as JSON.",
                details={"reason": "recursion"},
            ) from exc


class ModelRenderer(JsonRenderer):
    """Pydantic models without a dedicated renderer, encoded as their JSON dump."""

    kind = "Model"

    def jsonable(self, value: BaseModel) -> Any:
        return value.model_dump(mode="json")


class UuidRenderer(QuotedLiteralRenderer):
    def literal(self, value: Any, ctx: RenderContext) -> str:
        return str(value)
