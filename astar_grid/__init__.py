"""Grid pathfinding with A*."""

__version__ = "0.1.0"

from .core.coord import Coord
from .core.grid import Grid, Terrain, load_level
from .core.path import Path
from .systems.pathfinding import find_path

__all__ = ["Coord", "Grid", "Terrain", "Path", "find_path", "load_level", "__version__"]
