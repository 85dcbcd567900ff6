from pathlib import Path

import pytest

from astar_grid.config import MarkerConfig
from astar_grid.core.coord import Coord
from astar_grid.core.grid import Grid, Terrain, load_level
from astar_grid.errors import FileUnavailable, MalformedGrid


def _grid(*rows: str) -> Grid:
    return Grid.from_rows(rows)


def test_grid_dimensions_and_terrain():
    grid = _grid("..#", "#..")
    assert grid.dimensions() == (3, 2)
    assert (grid.max_x, grid.max_y) == (2, 1)
    assert grid.terrain_at(Coord(2, 0)) is Terrain.BLOCK
    assert grid.terrain_at(Coord(0, 1)) is Terrain.BLOCK
    assert grid.terrain_at(Coord(1, 1)) is Terrain.PASS
    assert grid.is_passable(Coord(0, 0))


def test_grid_rejects_ragged_rows():
    with pytest.raises(MalformedGrid):
        _grid("...", "..", "...")


def test_grid_rejects_unknown_marker():
    with pytest.raises(MalformedGrid):
        _grid("...", ".x.")


def test_grid_rejects_empty_input():
    with pytest.raises(MalformedGrid):
        Grid.from_rows([])
    with pytest.raises(MalformedGrid):
        Grid.from_text("")
    with pytest.raises(MalformedGrid):
        _grid("")


def test_from_text_ignores_trailing_newline():
    grid = Grid.from_text("..\n#.\n")
    assert grid.dimensions() == (2, 2)


def test_custom_markers():
    markers = MarkerConfig(passable="_", blocked="X", path="*")
    grid = Grid.from_rows(["_X", "__"], markers)
    assert grid.terrain_at(Coord(1, 0)) is Terrain.BLOCK
    assert grid.render(markers) == "_X\n__"
    with pytest.raises(MalformedGrid):
        Grid.from_rows([".#"], markers)


def test_is_inside():
    grid = _grid("...", "...")
    assert grid.is_inside(Coord(0, 0))
    assert grid.is_inside(Coord(2, 1))
    assert not grid.is_inside(Coord(3, 0))
    assert not grid.is_inside(Coord(0, 2))


def test_neighbours_in_centre_are_ordered():
    grid = _grid("...", "...", "...")
    assert grid.neighbours(Coord(1, 1)) == [
        Coord(0, 0), Coord(1, 0), Coord(2, 0),
        Coord(0, 1), Coord(2, 1),
        Coord(0, 2), Coord(1, 2), Coord(2, 2),
    ]


def test_neighbours_clamped_at_corners():
    grid = _grid("...", "...", "...")
    assert grid.neighbours(Coord(0, 0)) == [Coord(1, 0), Coord(0, 1), Coord(1, 1)]
    assert grid.neighbours(Coord(2, 2)) == [Coord(1, 1), Coord(2, 1), Coord(1, 2)]


def test_neighbours_skip_blocked_cells():
    grid = _grid(".#.", "#..", "...")
    assert grid.neighbours(Coord(0, 0)) == [Coord(1, 1)]
    assert Coord(1, 0) not in grid.neighbours(Coord(1, 1))


def test_neighbours_on_single_cell_grid():
    assert _grid(".").neighbours(Coord(0, 0)) == []


def test_render_round_trips_level_text():
    text = "..#\n#..\n..."
    assert str(Grid.from_text(text)) == text


def test_load_level_reads_file(write_level):
    path = write_level("....\n.##.\n....\n")
    grid = load_level(path)
    assert grid.dimensions() == (4, 3)
    assert grid.terrain_at(Coord(1, 1)) is Terrain.BLOCK


def test_load_level_rejects_ragged_file(write_level):
    path = write_level("....\n..\n")
    with pytest.raises(MalformedGrid):
        load_level(path)


def test_load_level_missing_file(tmp_path: Path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(FileUnavailable) as exc:
        load_level(missing)
    assert exc.value.path == missing
    assert isinstance(exc.value.__cause__, OSError)


def test_load_level_directory_is_unavailable(tmp_path: Path):
    with pytest.raises(FileUnavailable):
        load_level(tmp_path)


def test_load_level_binary_file(tmp_path: Path):
    path = tmp_path / "level.bin"
    path.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(MalformedGrid):
        load_level(path)


def test_grid_is_immutable():
    grid = _grid("..")
    with pytest.raises(AttributeError):
        grid.width = 5  # type: ignore[misc]
