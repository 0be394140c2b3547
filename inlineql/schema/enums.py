"""Symbolic value models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

_FROZEN = ConfigDict(frozen=True, extra="forbid")


class Symbol(BaseModel):
    """A bare symbolic name, rendered as quoted text: ``Symbol(name="hey")`` -> ``'hey'``.

    Members of a plain :class:`enum.Enum` are rendered the same way, by name.
    """

    model_config = _FROZEN

    name: str


class NumericEnum(BaseModel):
    """An enum persisted as an integer code, rendered as ``1/*one*/``.

    Members of :class:`enum.IntEnum` are rendered the same way, using the
    member name as the label.

    Attributes:
        integer: The persisted integer code.
        label: Human-readable label, emitted inside a SQL comment.
    """

    model_config = _FROZEN

    integer: int
    label: str
