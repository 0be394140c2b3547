"""Quoting helpers shared by every renderer.

Keeping the escaping rules in one place means each renderer only decides
*which* rule applies; the rules themselves are tested in isolation.
"""
from __future__ import annotations

import base64

_ARRAY_SPECIAL = frozenset(",{}")
_COMPOSITE_SPECIAL = frozenset(",()")
_RANGE_SPECIAL = frozenset(",()[]")


def in_string_quotes(text: str) -> str:
    """Wrap ``text`` in single quotes, doubling embedded single quotes."""
    return "'" + text.replace("'", "''") + "'"


def _backslash_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def array_element(text: str) -> str:
    """Return ``text`` as one element of a ``{...}`` array literal.

    Double-quoted when it contains a delimiter or brace, has leading or
    trailing whitespace (which PostgreSQL would trim), or would otherwise be
    read back as NULL.
    """
    escaped = _backslash_escape(text)
    if (
        escaped.lower() == "null"
        or not _ARRAY_SPECIAL.isdisjoint(escaped)
        or escaped != escaped.strip()
    ):
        return f'"{escaped}"'
    return escaped


def composite_element(text: str) -> str:
    """Return ``text`` as one field of a ``(...)`` composite literal."""
    escaped = _backslash_escape(text)
    if not _COMPOSITE_SPECIAL.isdisjoint(escaped):
        return f'"{escaped}"'
    return escaped


def range_bound(text: str) -> str:
    """Return ``text`` as a bound of a ``[lower,upper)`` range literal.

    An empty bound would read as unbounded, so it is always quoted.
    """
    escaped = _backslash_escape(text)
    if not escaped or not _RANGE_SPECIAL.isdisjoint(escaped):
        return f'"{escaped}"'
    return escaped


def decode_base64(data: bytes) -> str:
    """Return a ``DECODE(...)`` call producing ``data`` as ``bytea``."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"DECODE('{encoded}','BASE64')"
