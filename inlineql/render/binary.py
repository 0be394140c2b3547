"""Binary parameter classification.

Drivers hand back ``bytea``, binary UUIDs and plain text all as ``bytes``.
The renderer only sees the bytes, so it guesses, using an explicit ordered
list of classifiers evaluated top to bottom:

1. valid UTF-8 is treated as text;
2. exactly 16 bytes are treated as a binary UUID;
3. anything else becomes ``DECODE('<base64>','BASE64')``, which has no
   string-literal form.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from inlineql.render.base import ParameterRenderer
from inlineql.render.context import RenderContext
from inlineql.render.escaping import decode_base64, in_string_quotes


@dataclass(frozen=True)
class BinaryClassification:
    """Outcome of classifying one binary value.

    Attributes:
        kind: ``"text"``, ``"uuid"`` or ``"base64"``.
        expression: SQL expression for the value.
        literal: Unquoted literal form, or ``None`` for ``"base64"``.
    """

    kind: str
    expression: str
    literal: str | None


BinaryClassifier = Callable[[bytes], "BinaryClassification | None"]


def classify_as_text(data: bytes) -> BinaryClassification | None:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return None
    return BinaryClassification("text", in_string_quotes(text), text)


def classify_as_uuid(data: bytes) -> BinaryClassification | None:
    if len(data) != 16:
        return None
    text = str(UUID(bytes=data))
    return BinaryClassification("uuid", in_string_quotes(text), text)


def classify_as_base64(data: bytes) -> BinaryClassification:
    return BinaryClassification("base64", decode_base64(data), None)


#: Classifiers tried in order; the base64 decode call is the final fallback.
BINARY_CLASSIFIERS: tuple[BinaryClassifier, ...] = (classify_as_text, classify_as_uuid)


def classify_binary(data: bytes) -> BinaryClassification:
    """Return the first matching classification for ``data``."""
    for classifier in BINARY_CLASSIFIERS:
        result = classifier(data)
        if result is not None:
            return result
    return classify_as_base64(data)


class BinaryRenderer(ParameterRenderer):
    """``bytes``, ``bytearray`` and ``memoryview`` parameters."""

    def to_expression(self, value: Any, ctx: RenderContext) -> str:
        return classify_binary(bytes(value)).expression

    def to_string_literal(self, value: Any, ctx: RenderContext) -> str | None:
        return classify_binary(bytes(value)).literal
