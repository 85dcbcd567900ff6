# tests/conftest.py
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_level(tmp_path: Path) -> Callable[..., Path]:
    """Write ``text`` to a level file under ``tmp_path`` and return its path."""

    def _write(text: str, name: str = "level.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
