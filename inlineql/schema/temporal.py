"""Interval value model.

Months, days and seconds are kept as independent components, the way
PostgreSQL stores an ``interval``: ``Interval(months=1, days=30)`` is not
normalised to two months.
"""

from __future__ import annotations

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field


class Interval(BaseModel):
    """A PostgreSQL-style interval.

    Attributes:
        months: Whole months (may be negative).
        days: Whole days (may be negative).
        secs: Whole seconds (may be negative).
        microsecs: Sub-second part, always ``0 <= microsecs < 1_000_000``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    months: int = 0
    days: int = 0
    secs: int = 0
    microsecs: int = Field(0, ge=0, le=999_999)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Interval:
        """Convert a :class:`datetime.timedelta` (which has no month component)."""
        return cls(days=delta.days, secs=delta.seconds, microsecs=delta.microseconds)
