"""Unit tests for binary classification."""
from __future__ import annotations

import uuid

from inlineql import render_expression, render_string_literal
from inlineql.render.binary import (
    BINARY_CLASSIFIERS,
    classify_as_text,
    classify_as_uuid,
    classify_binary,
)

UUID_TEXT = "dc2ec804-6ee2-4689-a8f1-be59aa80771f"


def test_valid_utf8_is_text():
    assert render_expression(b"hello") == "'hello'"
    assert render_expression(b"it's") == "'it''s'"
    assert render_string_literal("héllo".encode()) == "héllo"


def test_binary_uuid_is_dashed_text():
    data = uuid.UUID(UUID_TEXT).bytes
    assert render_expression(data) == f"'{UUID_TEXT}'"
    assert render_string_literal(data) == UUID_TEXT


def test_sixteen_bytes_of_valid_text_stay_text():
    assert render_expression(b"abcdefghijklmnop") == "'abcdefghijklmnop'"


def test_invalid_utf8_becomes_decode_call():
    data = bytes([95, 131, 49, 101, 176, 212, 77, 86])
    assert render_expression(data) == "DECODE('X4MxZbDUTVY=','BASE64')"
    assert render_expression(b"\xff") == "DECODE('/w==','BASE64')"


def test_decode_call_has_no_string_literal():
    assert render_string_literal(b"\xff") is None


def test_bytearray_and_memoryview():
    assert render_expression(bytearray(b"\xff")) == "DECODE('/w==','BASE64')"
    assert render_expression(memoryview(b"abc")) == "'abc'"


def test_empty_bytes_are_empty_text():
    assert render_expression(b"") == "''"


class TestClassifiers:
    def test_order_is_text_then_uuid(self):
        assert BINARY_CLASSIFIERS == (classify_as_text, classify_as_uuid)

    def test_text_classifier_rejects_invalid_utf8(self):
        assert classify_as_text(b"\xff") is None

    def test_uuid_classifier_requires_sixteen_bytes(self):
        assert classify_as_uuid(b"\xff" * 15) is None
        assert classify_as_uuid(b"\xff" * 16).literal == "ffffffff-ffff-ffff-ffff-ffffffffffff"

    def test_classify_binary_kinds(self):
        assert classify_binary(b"abc").kind == "text"
        assert classify_binary(uuid.UUID(UUID_TEXT).bytes).kind == "uuid"
        result = classify_binary(b"\x99")
        assert result.kind == "base64"
        assert result.expression == "DECODE('mQ==','BASE64')"
        assert result.literal is None
