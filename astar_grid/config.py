"""Simple configuration loader for astar_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import InvalidConfig


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

HEURISTIC_NAMES = ("euclidean", "octile")


@dataclass
class MarkerConfig:
    """Characters used in level files and rendered output."""

    passable: str = "."
    blocked: str = "#"
    path: str = "o"


@dataclass
class SearchConfig:
    """Configuration for the A* search."""

    heuristic: str = "euclidean"


@dataclass
class RenderConfig:
    """Configuration for terminal rendering."""

    colour: bool = False
    path_colour: str = "yellow"


@dataclass
class LoggingConfig:
    """Root and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    markers: MarkerConfig
    search: SearchConfig
    render: RenderConfig
    logging: LoggingConfig


def _parse_markers(data: dict[str, Any]) -> MarkerConfig:
    markers = MarkerConfig(
        passable=str(data.get("pass", ".")),
        blocked=str(data.get("block", "#")),
        path=str(data.get("path", "o")),
    )
    for name, value in vars(markers).items():
        if len(value) != 1:
            raise InvalidConfig(f"marker '{name}' must be a single character, got {value!r}")
    if markers.passable == markers.blocked:
        raise InvalidConfig("pass and block markers must differ")
    return markers


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    markers = _parse_markers(data.get("markers") or {})

    search_data = data.get("search") or {}
    heuristic = str(search_data.get("heuristic", "euclidean")).lower()
    if heuristic not in HEURISTIC_NAMES:
        raise InvalidConfig(
            f"unknown heuristic {heuristic!r} (choose from {', '.join(HEURISTIC_NAMES)})"
        )
    search = SearchConfig(heuristic=heuristic)

    render_data = data.get("render") or {}
    render = RenderConfig(
        colour=bool(render_data.get("colour", render_data.get("color", False))),
        path_colour=str(render_data.get("path_colour", "yellow")),
    )

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(markers=markers, search=search, render=render, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "MarkerConfig",
    "SearchConfig",
    "RenderConfig",
    "LoggingConfig",
    "load_config",
]
