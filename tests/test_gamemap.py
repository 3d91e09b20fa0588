from unittest.mock import patch

import pytest

from snakegate.gamemap import HEIGHT, WIDTH, CellType, GameMap


class FakeScreen:
    def __init__(self):
        self.calls = []

    def addstr(self, y, x, text, attr=0):
        self.calls.append((y, x, text, attr))


def write_map(path, grid):
    path.write_text("\n".join(" ".join(str(int(v)) for v in row) for row in grid))
    return path


def default_like_grid():
    return [[int(GameMap().get_cell(x, y)) for x in range(WIDTH)] for y in range(HEIGHT)]


def test_dimensions_fixed_by_format():
    game_map = GameMap()
    assert len(game_map.wall_cells()) == 80
    assert game_map.get_cell(20, 20) is CellType.WALL
    assert game_map.get_cell(19, 19) is CellType.EMPTY
    assert game_map.get_cell(10, 10) is CellType.IMMUNE_WALL


def test_default_map_border_and_center():
    game_map = GameMap()
    assert game_map.get_cell(WIDTH // 2, HEIGHT // 2) is CellType.IMMUNE_WALL
    for x, y in game_map.wall_cells():
        assert x in (0, WIDTH - 1) or y in (0, HEIGHT - 1)
    for x in range(WIDTH):
        assert game_map.get_cell(x, 0) is CellType.WALL
        assert game_map.get_cell(x, HEIGHT - 1) is CellType.WALL


def test_default_map_cells_partition_grid():
    game_map = GameMap()
    total = len(game_map.empty_cells()) + len(game_map.wall_cells()) + 1
    assert total == WIDTH * HEIGHT


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (WIDTH, 3), (3, HEIGHT)])
def test_out_of_bounds_reads_as_wall(x, y):
    assert GameMap().get_cell(x, y) is CellType.WALL


def test_set_cell_round_trip():
    game_map = GameMap()
    game_map.set_cell(4, 6, CellType.GATE)
    assert game_map.get_cell(4, 6) is CellType.GATE
    assert (4, 6) not in game_map.empty_cells()


def test_set_cell_out_of_bounds_ignored():
    game_map = GameMap()
    before = game_map.empty_cells()
    game_map.set_cell(-1, 5, CellType.WALL)
    game_map.set_cell(5, HEIGHT, CellType.WALL)
    assert game_map.empty_cells() == before


def test_cell_lists_are_row_major():
    cells = GameMap().empty_cells()
    assert cells == sorted(cells, key=lambda p: (p[1], p[0]))


def test_load_from_file(tmp_path):
    grid = default_like_grid()
    grid[2][3] = int(CellType.SNAKE_HEAD)
    grid[2][4] = int(CellType.SNAKE_BODY)
    grid[7][7] = int(CellType.SPEED_ITEM)
    game_map = GameMap(write_map(tmp_path / "stage.txt", grid))
    assert game_map.get_cell(3, 2) is CellType.SNAKE_HEAD
    assert game_map.get_cell(4, 2) is CellType.SNAKE_BODY
    assert game_map.get_cell(7, 7) is CellType.SPEED_ITEM


def test_load_accepts_string_path(tmp_path):
    grid = default_like_grid()
    grid[1][1] = int(CellType.WALL)
    path = write_map(tmp_path / "stage.txt", grid)
    assert GameMap(str(path)).get_cell(1, 1) is CellType.WALL


def test_missing_file_falls_back_to_default(tmp_path):
    game_map = GameMap(tmp_path / "nope.txt")
    assert game_map.wall_cells() == GameMap().wall_cells()
    assert game_map.get_cell(WIDTH // 2, HEIGHT // 2) is CellType.IMMUNE_WALL


@pytest.mark.parametrize("bad", ["9", "-1", "x"])
def test_bad_value_falls_back_to_default(tmp_path, bad):
    lines = default_like_grid()
    text = "\n".join(" ".join(str(v) for v in row) for row in lines)
    text = text.replace("1", bad, 1)
    path = tmp_path / "bad.txt"
    path.write_text(text)
    game_map = GameMap(path)
    assert game_map.empty_cells() == GameMap().empty_cells()


def test_short_file_falls_back_to_default(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("1 1 1\n0 0 0\n")
    game_map = GameMap(path)
    assert game_map.wall_cells() == GameMap().wall_cells()


def test_draw_writes_every_cell_with_symbols():
    game_map = GameMap()
    game_map.set_cell(2, 2, CellType.GROWTH_ITEM)
    game_map.set_cell(3, 3, CellType.POISON_ITEM)
    screen = FakeScreen()
    with patch("curses.color_pair", lambda n: n):
        game_map.draw(screen)
    assert len(screen.calls) == WIDTH * HEIGHT
    by_pos = {(x, y): (text, attr) for y, x, text, attr in screen.calls}
    assert by_pos[(2, 2)] == ("+", 4)
    assert by_pos[(3, 3)] == ("-", 5)
    assert by_pos[(0, 0)][1] == 1