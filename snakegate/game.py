"""Stage logic and the curses game loop."""

from __future__ import annotations

import argparse
import contextlib
import curses
import locale
import random
import time
from enum import Enum
from typing import Callable, Iterable

from snakegate.gamemap import HEIGHT, WIDTH, CellType, GameMap, init_colors
from snakegate.gate import Gate
from snakegate.item import Item
from snakegate.scoreboard import ScoreBoard
from snakegate.snake import Direction, Snake

INITIAL_SNAKE_LENGTH = 3
NUM_ITEMS = 3
GATE_SPAWN_DELAY_SEC = 10
FRAME_DELAY_MS = 130
STAGE_CLEAR_PAUSE_SEC = 2.0

DEFAULT_LEVELS = (
    "resources/stage1.txt",
    "resources/stage2.txt",
    "resources/stage3.txt",
    "resources/stage4.txt",
)

_BLOCK = "\u2588"
_KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.UP,
    curses.KEY_DOWN: Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    curses.KEY_RIGHT: Direction.RIGHT,
}
_QUIT_KEYS = (ord("q"), ord("Q"))


class StageOutcome(Enum):
    """State of a stage after a frame."""

    RUNNING = "running"
    QUIT = "quit"
    GAME_OVER = "game over"
    CLEAR = "clear"


def key_to_dir(key: int) -> Direction:
    """Direction for an arrow key; anything else maps to UP."""
    return _KEY_DIRECTIONS.get(key, Direction.UP)


class Stage:
    """One level: map, snake, items, gate and score board."""

    def __init__(
        self,
        map_path,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
        gate_delay_sec: int = GATE_SPAWN_DELAY_SEC,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.time
        self.game_map = GameMap(map_path)
        self.snake = Snake(self.game_map)
        for seg in self.snake.body:
            self.game_map.set_cell(seg.x, seg.y, CellType.EMPTY)
        self.gate = Gate(self.game_map, self._rng)
        self.board = ScoreBoard(INITIAL_SNAKE_LENGTH, FRAME_DELAY_MS)
        self.items = [
            Item(self.game_map, self.board, self._rng, self._clock)
            for _ in range(NUM_ITEMS)
        ]
        self.gate_delay_sec = gate_delay_sec
        self.gate_spawned = False
        self.start_time = self._clock()
        self.elapsed_sec = 0

    def step(self, key: int) -> StageOutcome:
        """Advance one frame with the key read for it (-1 for none)."""
        if key in _QUIT_KEYS:
            return StageOutcome.QUIT
        if key in _KEY_DIRECTIONS:
            self.snake.set_direction(key_to_dir(key))

        if self.snake.will_hit_wall(self.game_map) or self.snake.will_hit_self():
            return StageOutcome.GAME_OVER
        self.snake.move(False)

        died = False
        for item in self.items:
            item.update_respawn()
            if item.check_collision(self.snake):
                died = True
                break
        if died or self.board.game_over:
            return StageOutcome.GAME_OVER

        self.elapsed_sec = int(self._clock() - self.start_time)
        if not self.gate_spawned and self.elapsed_sec >= self.gate_delay_sec:
            self.gate.generate_pair()
            self.gate_spawned = True

        head = self.snake.head
        if self.gate_spawned and self.gate.is_gate(head):
            exit_pos = self.gate.other_gate(head)
            self.snake.warp_to(exit_pos.x, exit_pos.y)
            self.snake.force_direction(
                self.gate.compute_exit_direction(exit_pos, self.snake.direction)
            )
            self.board.update_gate()

        if self.snake.is_collision(self.game_map):
            return StageOutcome.GAME_OVER
        if self.board.check_mission():
            return StageOutcome.CLEAR
        return StageOutcome.RUNNING

    def render(self, screen) -> None:
        """Draw the map, the snake and the score panel."""
        screen.erase()
        self.game_map.draw(screen)
        head = self.snake.head
        with contextlib.suppress(curses.error):
            screen.addstr(head.y, head.x, _BLOCK, curses.color_pair(7))
        for seg in self.snake.body:
            if seg == head:
                continue
            with contextlib.suppress(curses.error):
                screen.addstr(seg.y, seg.x, _BLOCK, curses.color_pair(8))
        self.board.draw(screen, self.elapsed_sec)
        screen.refresh()


def _write(screen, row: int, col: int, text: str) -> None:
    with contextlib.suppress(curses.error):
        screen.addstr(row, col, text)


def _setup_terminal(screen) -> None:
    screen.keypad(True)
    screen.nodelay(True)
    for setup in (lambda: curses.curs_set(0), curses.start_color, curses.use_default_colors):
        with contextlib.suppress(curses.error):
            setup()


def _wait_for_key(screen) -> None:
    screen.nodelay(False)
    screen.getch()


def play(screen, levels: Iterable | None = None) -> StageOutcome:
    """Run the levels in order on a curses window; return how the game ended."""
    levels = list(DEFAULT_LEVELS if levels is None else levels)
    rng = random.Random()
    _setup_terminal(screen)

    mid_y, mid_x = HEIGHT // 2, WIDTH // 2
    frame_delay = FRAME_DELAY_MS
    gate_delay = GATE_SPAWN_DELAY_SEC
    quit_all = False

    for number, path in enumerate(levels, start=1):
        stage = Stage(path, rng, time.time, gate_delay)
        stage.board.frame_delay_ms = frame_delay
        with contextlib.suppress(curses.error):
            init_colors()

        outcome = StageOutcome.RUNNING
        while outcome is StageOutcome.RUNNING:
            outcome = stage.step(screen.getch())
            if outcome in (StageOutcome.RUNNING, StageOutcome.CLEAR):
                stage.render(screen)
                time.sleep(stage.board.frame_delay_ms / 1000)

        frame_delay = stage.board.frame_delay_ms
        if stage.gate_spawned:
            gate_delay += GATE_SPAWN_DELAY_SEC

        screen.erase()
        if outcome is StageOutcome.QUIT:
            _write(screen, mid_y, mid_x - 5, "Quit Game")
            quit_all = True
            break
        if outcome is StageOutcome.GAME_OVER:
            _write(screen, mid_y, mid_x - 5, "Game Over!")
            _write(screen, mid_y + 1, mid_x - 9, "Press any key to exit.")
            screen.refresh()
            _wait_for_key(screen)
            return StageOutcome.GAME_OVER
        _write(screen, mid_y, mid_x - 7, f"Stage {number} Clear!")
        screen.refresh()
        time.sleep(STAGE_CLEAR_PAUSE_SEC)

    screen.erase()
    if not quit_all:
        _write(screen, mid_y, mid_x - 6, "You Win!")
    _write(screen, mid_y + 1, mid_x - 9, "Press any key to exit.")
    _wait_for_key(screen)
    return StageOutcome.QUIT if quit_all else StageOutcome.CLEAR


def main(argv=None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="snakegate", description="Snake with teleport gates, played in the terminal."
    )
    parser.add_argument(
        "levels",
        nargs="*",
        help="map files to play in order (default: the four bundled stages)",
    )
    args = parser.parse_args(argv)
    locale.setlocale(locale.LC_ALL, "")
    curses.wrapper(play, args.levels or list(DEFAULT_LEVELS))
    return 0