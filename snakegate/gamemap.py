"""Game map grid: loading from text files, cell access and drawing."""

from __future__ import annotations

import contextlib
import curses
from enum import IntEnum
from pathlib import Path

WIDTH = 21
HEIGHT = 21


class CellType(IntEnum):
    """Kinds of cell on the map grid."""

    EMPTY = 0
    WALL = 1
    IMMUNE_WALL = 2
    SNAKE_HEAD = 3
    SNAKE_BODY = 4
    GROWTH_ITEM = 5
    POISON_ITEM = 6
    GATE = 7
    SPEED_ITEM = 8


class MapFormatError(ValueError):
    """Raised when a map file does not hold a valid grid."""


_BLOCK = "\u2588"

_COLOR_PAIRS = {
    1: (curses.COLOR_WHITE, curses.COLOR_BLACK),  # wall
    2: (curses.COLOR_WHITE, curses.COLOR_BLACK),  # immune wall
    3: (curses.COLOR_BLACK, curses.COLOR_BLACK),  # empty
    4: (curses.COLOR_WHITE, curses.COLOR_GREEN),  # growth item
    5: (curses.COLOR_WHITE, curses.COLOR_RED),  # poison item
    6: (curses.COLOR_CYAN, curses.COLOR_BLACK),  # gate
    7: (curses.COLOR_YELLOW, curses.COLOR_BLACK),  # snake head
    8: (curses.COLOR_BLUE, curses.COLOR_BLACK),  # snake body
    9: (curses.COLOR_WHITE, curses.COLOR_MAGENTA),  # speed item
}

# (colour pair, symbol) used to draw each cell type.
_DRAW_STYLE = {
    CellType.WALL: (1, _BLOCK),
    CellType.IMMUNE_WALL: (2, _BLOCK),
    CellType.EMPTY: (3, _BLOCK),
    CellType.GROWTH_ITEM: (4, "+"),
    CellType.POISON_ITEM: (5, "-"),
    CellType.GATE: (6, _BLOCK),
    CellType.SNAKE_HEAD: (7, _BLOCK),
    CellType.SNAKE_BODY: (8, _BLOCK),
    CellType.SPEED_ITEM: (3, "*"),
}


def init_colors() -> None:
    """Start colour mode and register the colour pairs used for drawing."""
    curses.start_color()
    for pair, (fg, bg) in _COLOR_PAIRS.items():
        curses.init_pair(pair, fg, bg)


def _default_grid() -> list[list[CellType]]:
    grid = [
        [
            CellType.WALL
            if y in (0, HEIGHT - 1) or x in (0, WIDTH - 1)
            else CellType.EMPTY
            for x in range(WIDTH)
        ]
        for y in range(HEIGHT)
    ]
    grid[HEIGHT // 2][WIDTH // 2] = CellType.IMMUNE_WALL
    return grid


def _load_grid(file_path: str | Path) -> list[list[CellType]]:
    tokens = Path(file_path).read_text().split()
    needed = WIDTH * HEIGHT
    if len(tokens) < needed:
        raise MapFormatError(f"map file {file_path} holds too few cells")
    cells = []
    for token in tokens[:needed]:
        try:
            value = int(token)
        except ValueError as exc:
            raise MapFormatError(f"bad cell value {token!r}") from exc
        if not CellType.EMPTY <= value <= CellType.SPEED_ITEM:
            raise MapFormatError(f"cell value {value} out of range")
        cells.append(CellType(value))
    return [cells[y * WIDTH:(y + 1) * WIDTH] for y in range(HEIGHT)]


class GameMap:
    """A WIDTH x HEIGHT grid of cells."""

    def __init__(self, file_path: str | Path | None = None) -> None:
        if file_path:
            try:
                self._grid = _load_grid(file_path)
            except (OSError, UnicodeDecodeError, ValueError):
                self._grid = _default_grid()
        else:
            self._grid = _default_grid()

    def draw(self, screen) -> None:
        """Draw every cell on a curses window."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                pair, symbol = _DRAW_STYLE.get(cell, (3, _BLOCK))
                with contextlib.suppress(curses.error):
                    screen.addstr(y, x, symbol, curses.color_pair(pair))

    def get_cell(self, x: int, y: int) -> CellType:
        """Cell at (x, y); anything outside the grid counts as a wall."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            return CellType.WALL
        return self._grid[y][x]

    def set_cell(self, x: int, y: int, cell: CellType) -> None:
        """Set the cell at (x, y); positions outside the grid are ignored."""
        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            self._grid[y][x] = CellType(cell)

    def _cells_of(self, kind: CellType) -> list[tuple[int, int]]:
        return [
            (x, y)
            for y, row in enumerate(self._grid)
            for x, cell in enumerate(row)
            if cell == kind
        ]

    def empty_cells(self) -> list[tuple[int, int]]:
        """Coordinates of all empty cells, row by row."""
        return self._cells_of(CellType.EMPTY)

    def wall_cells(self) -> list[tuple[int, int]]:
        """Coordinates of all ordinary walls (immune walls excluded), row by row."""
        return self._cells_of(CellType.WALL)