"""Result of a successful path search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .coord import Coord


@dataclass(frozen=True)
class Path:
    """Ordered cells from start to end (inclusive) and the travel cost.

    ``dimensions`` is the ``(width, height)`` of the searched grid, kept for
    rendering context only.
    """

    coords: Tuple[Coord, ...]
    cost: float
    dimensions: Tuple[int, int]

    @property
    def start(self) -> Coord:
        return self.coords[0]

    @property
    def end(self) -> Coord:
        return self.coords[-1]

    def steps(self) -> List[Tuple[Coord, Coord]]:
        """Return consecutive ``(from, to)`` pairs along the path."""

        return list(zip(self.coords, self.coords[1:]))

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.coords)

    def __contains__(self, coord: object) -> bool:
        return coord in self.coords


__all__ = ["Path"]
