"""Full-text search lexeme model (``tsvector`` element)."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

#: Lexeme positions are limited to 1..16383 by PostgreSQL.
LexemePosition = Annotated[int, Field(ge=1, le=16383)]


class Weight(str, Enum):
    """Lexeme position weight.  ``D`` is the default and is never printed."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"


#: Weight that renders as a bare position number.
DEFAULT_WEIGHT = Weight.D


class Lexeme(BaseModel):
    """A single text-search token.

    Only meaningful as an element of a list, which renders as a ``tsvector``
    literal::

        [Lexeme(word="foo", positions=[(1, "A"), (3, None)]), Lexeme(word="bar")]
        # -> 'foo:1A,3 bar'

    Attributes:
        word: The normalised word.
        positions: Ordered ``(position, weight)`` pairs; weight may be ``None``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    word: str
    positions: tuple[tuple[LexemePosition, Weight | None], ...] = ()
