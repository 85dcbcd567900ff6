"""Command line options for the ``astar-grid`` tool."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from ... import __version__
from ...config import CONFIG
from ...core.coord import Coord
from ...core.grid import Grid, load_level
from ...errors import CoordinateOutOfBounds, InvalidConfig, MalformedCoordinate
from ...systems.pathfinding import HEURISTICS


@dataclass
class Args:
    """Validated inputs for one search run."""

    level: Grid
    start: Coord
    end: Coord
    heuristic: str
    colour: bool
    log_level: Optional[str] = None


def _coord_arg(text: str) -> Coord:
    try:
        return Coord.parse(text)
    except MalformedCoordinate as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the ``astar-grid`` argument parser."""

    parser = argparse.ArgumentParser(
        prog="astar-grid",
        description="Find a shortest 8-directional path through a text level with A*.",
    )
    parser.add_argument(
        "-l",
        "--level",
        required=True,
        help="filename of the TXT level description",
    )
    parser.add_argument(
        "-s",
        "--start",
        required=True,
        type=_coord_arg,
        help="X:Y of start position",
    )
    parser.add_argument(
        "-e",
        "--end",
        required=True,
        type=_coord_arg,
        help="X:Y of end position",
    )
    parser.add_argument(
        "--heuristic",
        choices=sorted(HEURISTICS),
        default=CONFIG.search.heuristic,
        help="distance estimate used to order the search (default: %(default)s)",
    )
    parser.add_argument(
        "--colour",
        "--color",
        dest="colour",
        action=argparse.BooleanOptionalAction,
        default=CONFIG.render.colour,
        help="highlight the path with ANSI colours",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="override the configured root log level (e.g. DEBUG)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_args(ns: argparse.Namespace) -> Args:
    """Load the level named in ``ns`` and check both coordinates against it.

    Level, bounds and heuristic problems raise the matching
    :mod:`astar_grid.errors` exception.
    """

    if ns.heuristic not in HEURISTICS:
        known = ", ".join(sorted(HEURISTICS))
        raise InvalidConfig(f"unknown heuristic {ns.heuristic!r} (choose from {known})")

    level = load_level(ns.level)

    for coord in (ns.start, ns.end):
        if not level.is_inside(coord):
            raise CoordinateOutOfBounds(coord, level.dimensions())

    return Args(
        level=level,
        start=ns.start,
        end=ns.end,
        heuristic=ns.heuristic,
        colour=ns.colour,
        log_level=ns.log_level,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> Args:
    """Parse ``argv`` and load it with :func:`load_args`.

    Malformed options exit through argparse.
    """

    return load_args(build_arg_parser().parse_args(argv))


__all__ = ["Args", "build_arg_parser", "load_args", "parse_args"]
