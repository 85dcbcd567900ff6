"""Grid coordinate value type."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from ..errors import MalformedCoordinate, malformed_coordinate

_FIELD = re.compile(r"[+-]?[0-9]+")


def _parse_field(chunk: str) -> int:
    if not _FIELD.fullmatch(chunk):
        raise ValueError(f"invalid integer literal {chunk!r}")
    return int(chunk)


@dataclass(frozen=True, order=True, slots=True)
class Coord:
    """Column ``x`` and row ``y`` of a grid cell.

    Ordering is lexicographic on ``(x, y)``; the search uses it to break
    ties between frontier entries with equal scores.
    """

    x: int
    y: int

    @classmethod
    def from_pair(cls, pair: Tuple[int, int]) -> "Coord":
        return cls(int(pair[0]), int(pair[1]))

    @classmethod
    def parse(cls, text: str) -> "Coord":
        """Parse ``"X:Y"`` into a :class:`Coord`.

        Raises :class:`MalformedCoordinate` for fewer or more than two
        fields, a non-integer field or a negative value.
        """

        chunks = text.split(":")
        if len(chunks) <= 1:
            raise MalformedCoordinate(text, "too few fields")
        if len(chunks) >= 3:
            raise MalformedCoordinate(text, "too many fields")

        try:
            x, y = (_parse_field(chunk) for chunk in chunks)
        except ValueError as exc:
            raise malformed_coordinate(text, exc) from exc
        if x < 0 or y < 0:
            raise MalformedCoordinate(text, "fields must be non-negative")
        return cls(x, y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def is_diagonal_to(self, other: "Coord") -> bool:
        """Return ``True`` when both axes differ between the two cells."""

        return self.x != other.x and self.y != other.y

    def __str__(self) -> str:
        return f"{self.x}:{self.y}"


__all__ = ["Coord"]
