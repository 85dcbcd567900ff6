# astar-grid/astar_grid/main.py
"""Command line entry point: load a level, search it, print the result."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .config import CONFIG
from .errors import AstarGridError
from .systems.pathfinding import find_path
from .utils.cli.args import build_arg_parser, load_args
from .utils.cli.terminal_view import NO_PATH_MESSAGE, render_path

logger = logging.getLogger(__name__)  # For main.py specific logs


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the configured root level (or ``level``) and per-module levels."""

    log_level_str = (level or CONFIG.logging.global_level).upper()
    numeric_level = getattr(logging, log_level_str, None)
    logging.basicConfig(
        level=numeric_level if isinstance(numeric_level, int) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
        force=True,
    )
    if not isinstance(numeric_level, int):
        logger.warning("Invalid log level '%s', using INFO.", log_level_str)

    for module_name, module_level in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(module_level).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", module_level, module_name)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one search and return the process exit status."""

    ns = build_arg_parser().parse_args(argv)
    configure_logging(ns.log_level)
    try:
        args = load_args(ns)
    except AstarGridError as exc:
        logger.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.debug(
        "Searching %dx%d level from %s to %s (%s)",
        args.level.width, args.level.height, args.start, args.end, args.heuristic,
    )
    path = find_path(args.level, args.start, args.end, heuristic=args.heuristic)
    if path is None:
        print(NO_PATH_MESSAGE)
    else:
        print(render_path(args.level, path, colour=args.colour))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
