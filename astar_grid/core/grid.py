"""Static terrain grid used by the pathfinder."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from ..config import CONFIG, MarkerConfig
from ..errors import MalformedGrid, file_unavailable
from .coord import Coord

logger = logging.getLogger(__name__)


class Terrain(Enum):
    """Binary terrain: a cell is either walkable or not."""

    PASS = "pass"
    BLOCK = "block"

    def marker(self, markers: Optional[MarkerConfig] = None) -> str:
        markers = markers or CONFIG.markers
        return markers.passable if self is Terrain.PASS else markers.blocked


def _terrain_lookup(markers: MarkerConfig) -> dict[str, Terrain]:
    return {markers.passable: Terrain.PASS, markers.blocked: Terrain.BLOCK}


@dataclass(frozen=True)
class Grid:
    """Immutable rectangular matrix of :class:`Terrain` cells.

    Build instances with :meth:`from_rows`, :meth:`from_text` or
    :func:`load_level`; those reject ragged, empty and unknown input so a
    ``Grid`` is always rectangular.
    """

    cells: Tuple[Tuple[Terrain, ...], ...]
    width: int
    height: int

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(
        cls, rows: Iterable[str], markers: Optional[MarkerConfig] = None
    ) -> "Grid":
        lookup = _terrain_lookup(markers or CONFIG.markers)
        lines = list(rows)
        if not lines:
            raise MalformedGrid("level is empty")

        width = len(lines[0])
        if width == 0:
            raise MalformedGrid("first row of the level is empty")

        cells: List[Tuple[Terrain, ...]] = []
        for y, line in enumerate(lines):
            if len(line) != width:
                raise MalformedGrid(
                    f"row {y} has length {len(line)}, expected {width}"
                )
            row: List[Terrain] = []
            for x, char in enumerate(line):
                terrain = lookup.get(char)
                if terrain is None:
                    raise MalformedGrid(f"unknown terrain marker {char!r} at {x}:{y}")
                row.append(terrain)
            cells.append(tuple(row))

        return cls(cells=tuple(cells), width=width, height=len(cells))

    @classmethod
    def from_text(cls, text: str, markers: Optional[MarkerConfig] = None) -> "Grid":
        return cls.from_rows(text.splitlines(), markers)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def dimensions(self) -> Tuple[int, int]:
        return (self.width, self.height)

    @property
    def max_x(self) -> int:
        return self.width - 1

    @property
    def max_y(self) -> int:
        return self.height - 1

    def is_inside(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def terrain_at(self, coord: Coord) -> Terrain:
        """Return the terrain at ``coord``.

        Only call this with coordinates for which :meth:`is_inside` holds.
        Nothing is checked here.
        """

        return self.cells[coord.y][coord.x]

    def is_passable(self, coord: Coord) -> bool:
        return self.cells[coord.y][coord.x] is Terrain.PASS

    def neighbours(self, coord: Coord) -> List[Coord]:
        """Return passable cells one step away from ``coord``, diagonals included.

        Results are ordered by ascending ``y`` then ascending ``x``.
        """

        min_x = max(coord.x - 1, 0)
        min_y = max(coord.y - 1, 0)
        max_x = min(coord.x + 1, self.max_x)
        max_y = min(coord.y + 1, self.max_y)

        out: List[Coord] = []
        for y in range(min_y, max_y + 1):
            row = self.cells[y]
            for x in range(min_x, max_x + 1):
                if (x == coord.x and y == coord.y) or row[x] is not Terrain.PASS:
                    continue
                out.append(Coord(x, y))
        return out

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self, markers: Optional[MarkerConfig] = None) -> str:
        """Return the level in its file format, one line per row."""

        markers = markers or CONFIG.markers
        return "\n".join(
            "".join(cell.marker(markers) for cell in row) for row in self.cells
        )

    def __str__(self) -> str:
        return self.render()


def load_level(path: str | Path, markers: Optional[MarkerConfig] = None) -> Grid:
    """Read the level file at ``path`` and build a :class:`Grid`."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise file_unavailable(path, exc) from exc
    except UnicodeDecodeError as exc:
        raise MalformedGrid(f"level file '{path}' is not valid UTF-8 text") from exc

    grid = Grid.from_text(text, markers)
    logger.debug("Loaded level %s (%dx%d)", path, grid.width, grid.height)
    return grid


__all__ = ["Terrain", "Grid", "load_level"]
