"""Custom exception hierarchy for inlineQL.

All public errors inherit from InlineQLError so callers can catch the base
class for any inlineQL-specific failure.
"""
from __future__ import annotations

from typing import Any


class InlineQLError(Exception):
    """Base exception for all inlineQL errors."""


class RenderError(InlineQLError):
    """Raised when a single parameter cannot be rendered as SQL.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. UNRENDERABLE_VALUE).
        details: Extra context for diagnostics.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for diagnostic logs."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class UnrenderableValueError(RenderError):
    """Raised when no renderer and no fallback can handle a value.

    Args:
        value: The offending parameter value, kept for diagnostics.
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        self.kind = type(value).__name__
        super().__init__(
            f"Unable to render parameter of kind '{self.kind}': {value!r}",
            code="UNRENDERABLE_VALUE",
            details={"kind": self.kind},
        )


class MalformedValueError(RenderError):
    """Raised when an extension value is internally inconsistent.

    Args:
        kind: Name of the value kind (e.g. ``"Polygon"``).
        message: Human-readable description.
        details: Extra context (offending field, counts, ...).
    """

    def __init__(
        self,
        kind: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            code="MALFORMED_VALUE",
            details={"kind": kind, **(details or {})},
        )
        self.kind = kind


class LexemeContextError(MalformedValueError):
    """Raised when a lexeme is rendered on its own instead of inside a list."""

    def __init__(self, word: str) -> None:
        super().__init__(
            "Lexeme",
            f"Invalid parameter: lexeme {word!r} must be inside a list.",
            details={"word": word},
        )
        self.code = "LEXEME_OUTSIDE_LIST"


class NestingDepthError(RenderError):
    """Raised when container nesting exceeds the limit or forms a cycle.

    Args:
        depth: Depth at which rendering stopped.
        limit: Configured maximum depth.
        cyclic: ``True`` when a container contains itself.
    """

    def __init__(self, depth: int, limit: int, cyclic: bool = False) -> None:
        if cyclic:
            message = f"Container at depth {depth} contains itself."
            code = "CYCLIC_VALUE"
        else:
            message = f"Container nesting depth {depth} exceeds the limit of {limit}."
            code = "NESTING_TOO_DEEP"
        super().__init__(message, code=code, details={"depth": depth, "limit": limit})
        self.depth = depth
        self.limit = limit


class RegistryError(InlineQLError):
    """Raised when a RendererRegistry is misused.

    Detected at registration time, before any parameter is rendered, so the
    developer gets a clear message instead of a surprising dispatch result.

    Args:
        message: Human-readable description.
        type_name: The type key involved, if any.
    """

    def __init__(self, message: str, type_name: str | None = None) -> None:
        super().__init__(message)
        self.type_name = type_name
