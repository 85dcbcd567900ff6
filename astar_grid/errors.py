"""Exception types raised while reading levels and coordinates."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .core.coord import Coord


class AstarGridError(Exception):
    """Base class for every input error reported by astar_grid."""


class MalformedGrid(AstarGridError):
    """Level content is empty, ragged or holds an unknown character."""


class FileUnavailable(AstarGridError):
    """A level file could not be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"cannot read level file '{path}': {reason}")
        self.path = Path(path)
        self.reason = reason


class MalformedCoordinate(AstarGridError, ValueError):
    """Coordinate text is not two colon-separated non-negative integers."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"invalid coordinate {text!r}: {reason} (expected X:Y)")
        self.text = text
        self.reason = reason


class InvalidConfig(AstarGridError, ValueError):
    """A configuration value is not usable."""


class CoordinateOutOfBounds(AstarGridError):
    """A coordinate lies outside the grid."""

    def __init__(self, coord: "Coord", dimensions: Tuple[int, int]) -> None:
        width, height = dimensions
        super().__init__(
            f"coordinate {coord} is outside the {width}x{height} level"
        )
        self.coord = coord
        self.dimensions = dimensions


# ----------------------------------------------------------------------
# Boundary conversions
# ----------------------------------------------------------------------


def file_unavailable(path: str | Path, exc: OSError) -> FileUnavailable:
    """Map an ``OSError`` from reading ``path`` to :class:`FileUnavailable`."""

    reason = exc.strerror or str(exc)
    return FileUnavailable(path, reason)


def malformed_coordinate(text: str, exc: ValueError) -> MalformedCoordinate:
    """Map an integer parse failure for ``text`` to :class:`MalformedCoordinate`."""

    return MalformedCoordinate(text, f"non-integer field ({exc})")


__all__ = [
    "AstarGridError",
    "MalformedGrid",
    "FileUnavailable",
    "MalformedCoordinate",
    "CoordinateOutOfBounds",
    "InvalidConfig",
    "file_unavailable",
    "malformed_coordinate",
]
