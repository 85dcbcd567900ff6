"""ASCII terminal renderer for search results."""

from __future__ import annotations

from typing import Optional

from ...config import CONFIG, MarkerConfig
from ...core.coord import Coord
from ...core.grid import Grid
from ...core.path import Path


# Basic ANSI colour codes used when colour output is enabled
_COLOURS = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

NO_PATH_MESSAGE = "No path exists."


def describe_path(path: Path) -> str:
    """Return the one-line summary printed above a rendered path."""

    cost = f"{path.cost:.3f}".rstrip("0").rstrip(".")
    return f"Path of {len(path)} coords travels distance of {cost} units."


def render_path(
    grid: Grid,
    path: Path,
    colour: Optional[bool] = None,
    markers: Optional[MarkerConfig] = None,
) -> str:
    """Draw ``grid`` with the cells of ``path`` replaced by the path marker."""

    markers = markers or CONFIG.markers
    if colour is None:
        colour = CONFIG.render.colour

    glyph = markers.path
    if colour:
        glyph = f"{_COLOURS.get(CONFIG.render.path_colour, '')}{glyph}{_COLOURS['reset']}"

    on_path = set(path.coords)
    lines = [describe_path(path)]
    for y, row in enumerate(grid.cells):
        chars = []
        for x, cell in enumerate(row):
            if Coord(x, y) in on_path:
                chars.append(glyph)
            else:
                chars.append(cell.marker(markers))
        lines.append("".join(chars))
    return "\n".join(lines)


__all__ = ["NO_PATH_MESSAGE", "describe_path", "render_path"]
