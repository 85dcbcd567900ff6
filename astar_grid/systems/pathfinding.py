"""A* pathfinding over a static 8-connected :class:`Grid`."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Callable, Dict, List, Optional, Set

from ..config import CONFIG
from ..core.coord import Coord
from ..core.grid import Grid, Terrain
from ..core.path import Path

logger = logging.getLogger(__name__)


Heuristic = Callable[[Coord, Coord], float]

REGULAR_COST = 1.0
DIAGONAL_COST = 1.414


def euclidean(a: Coord, b: Coord) -> float:
    """Straight-line distance between two cells."""

    return math.hypot(a.x - b.x, a.y - b.y)


def octile(a: Coord, b: Coord) -> float:
    """Cost of the cheapest obstacle-free 8-directional route."""

    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return min(dx, dy) * DIAGONAL_COST + abs(dx - dy) * REGULAR_COST


HEURISTICS: Dict[str, Heuristic] = {
    "euclidean": euclidean,
    "octile": octile,
}


def get_heuristic(name: str) -> Heuristic:
    """Return the heuristic registered as ``name``."""

    try:
        return HEURISTICS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(HEURISTICS))
        raise ValueError(f"unknown heuristic {name!r} (choose from {known})") from None


def step_cost(a: Coord, b: Coord) -> float:
    """Cost of moving between two adjacent cells."""

    return DIAGONAL_COST if a.is_diagonal_to(b) else REGULAR_COST


@dataclass(frozen=True, order=True, slots=True)
class Candidate:
    """Frontier entry; the lowest ``cost`` pops first, ties go to the smaller coord."""

    cost: float
    coord: Coord


def _reconstruct(origin: Dict[Coord, Coord], current: Coord) -> List[Coord]:
    path = [current]
    while current in origin:
        current = origin[current]
        path.append(current)
    path.reverse()
    return path


def find_path(
    grid: Grid,
    start: Coord,
    end: Coord,
    heuristic: Heuristic | str | None = None,
) -> Optional[Path]:
    """Return the cheapest path from ``start`` to ``end`` or ``None``.

    ``start`` and ``end`` must lie inside ``grid``. A blocked endpoint or a
    goal that cannot be reached through passable cells yields ``None``.

    ``heuristic`` is a callable or the name of one in :data:`HEURISTICS`;
    it defaults to ``CONFIG.search.heuristic``. Heuristics must return
    finite values.
    """

    if isinstance(heuristic, str):
        estimate = get_heuristic(heuristic)
    elif heuristic is None:
        estimate = get_heuristic(CONFIG.search.heuristic)
    else:
        estimate = heuristic

    if grid.terrain_at(start) is Terrain.BLOCK or grid.terrain_at(end) is Terrain.BLOCK:
        logger.debug("Endpoint blocked: start=%s end=%s", start, end)
        return None

    init_cost = estimate(start, end)
    frontier: List[Candidate] = [Candidate(init_cost, start)]
    origin: Dict[Coord, Coord] = {}
    g_score: Dict[Coord, float] = {start: 0.0}
    f_score: Dict[Coord, float] = {start: init_cost}
    open_set: Set[Coord] = {start}
    closed: Set[Coord] = set()
    expanded = 0

    while frontier:
        candidate = heappop(frontier)
        current = candidate.coord

        # Superseded by a cheaper entry for the same cell.
        if current in closed or candidate.cost != f_score[current]:
            continue

        if current == end:
            coords = _reconstruct(origin, current)
            logger.debug(
                "Path %s -> %s found: %d coords, cost %.3f, %d expanded",
                start, end, len(coords), candidate.cost, expanded,
            )
            return Path(
                coords=tuple(coords),
                cost=candidate.cost,
                dimensions=grid.dimensions(),
            )

        open_set.discard(current)
        closed.add(current)
        expanded += 1

        current_g = g_score[current]
        for neighbour in grid.neighbours(current):
            if neighbour in closed:
                continue

            tentative_g = current_g + step_cost(current, neighbour)
            if neighbour in open_set and not tentative_g < g_score[neighbour]:
                continue

            f = tentative_g + estimate(neighbour, end)
            origin[neighbour] = current
            g_score[neighbour] = tentative_g
            f_score[neighbour] = f
            open_set.add(neighbour)
            heappush(frontier, Candidate(f, neighbour))

    logger.debug("No path %s -> %s after %d expanded", start, end, expanded)
    return None


__all__ = [
    "Candidate",
    "DIAGONAL_COST",
    "HEURISTICS",
    "REGULAR_COST",
    "euclidean",
    "find_path",
    "get_heuristic",
    "octile",
    "step_cost",
]
