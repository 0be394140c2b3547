"""Range and multirange value models.

A bound is either a regular value (rendered through the normal dispatch) or
one of the :class:`RangeBound` sentinels::

    Range(lower=1, upper=5, lower_inclusive=True, upper_inclusive=False)
    Range(lower=RangeBound.UNBOUNDED, upper=5)
    Range.empty()
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class RangeBound(Enum):
    """Sentinels for range bounds that are not values."""

    UNBOUNDED = "unbounded"
    EMPTY = "empty"


class Range(BaseModel):
    """A PostgreSQL range (``int4range``, ``tstzrange``, ``daterange``, ...).

    Attributes:
        lower: Lower bound value, ``RangeBound.UNBOUNDED`` or ``RangeBound.EMPTY``.
        upper: Upper bound value, ``RangeBound.UNBOUNDED`` or ``RangeBound.EMPTY``.
        lower_inclusive: ``[`` when true, ``(`` otherwise.
        upper_inclusive: ``]`` when true, ``)`` otherwise.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    lower: Any = RangeBound.UNBOUNDED
    upper: Any = RangeBound.UNBOUNDED
    lower_inclusive: bool = True
    upper_inclusive: bool = True

    @classmethod
    def empty(cls) -> Range:
        """Return the empty range."""
        return cls(lower=RangeBound.EMPTY, upper=RangeBound.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.lower is RangeBound.EMPTY or self.upper is RangeBound.EMPTY


class Multirange(BaseModel):
    """An ordered sequence of ranges (PostgreSQL 14+ multirange types)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ranges: tuple[Range, ...] = ()
