"""Items that grow, poison or speed up the snake."""

from __future__ import annotations

import random
import time
from typing import Callable

from snakegate.gamemap import CellType, GameMap
from snakegate.scoreboard import ScoreBoard
from snakegate.snake import Snake, Vec2

RESPAWN_DELAY = 5

_KINDS = (CellType.GROWTH_ITEM, CellType.POISON_ITEM, CellType.SPEED_ITEM)


class Item:
    """One item on the map, moved to a fresh empty cell when eaten or stale."""

    def __init__(
        self,
        game_map: GameMap,
        board: ScoreBoard,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._map = game_map
        self._board = board
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.time
        self._position: Vec2 | None = None
        self._kind: CellType | None = None
        self._last_spawn: float | None = None
        self.spawn()

    def spawn(self) -> None:
        """Clear the old cell and place the item on a random empty cell."""
        if self._position is not None:
            self._map.set_cell(self._position.x, self._position.y, CellType.EMPTY)
        empties = self._map.empty_cells()
        if not empties:
            return
        x, y = self._rng.choice(empties)
        self._position = Vec2(x, y)
        self._kind = _KINDS[self._rng.randrange(len(_KINDS))]
        self._map.set_cell(x, y, self._kind)
        self._last_spawn = self._clock()

    def update_respawn(self) -> None:
        """Respawn once RESPAWN_DELAY seconds have passed since the last spawn."""
        if self._last_spawn is None or self._clock() - self._last_spawn >= RESPAWN_DELAY:
            self.spawn()

    def check_collision(self, snake: Snake) -> bool:
        """Apply the item's effect if the snake's head is on it.

        The item respawns after being eaten. Returns True if the snake died.
        """
        if self._position is None or snake.head != self._position:
            return False

        died = False
        if self._kind == CellType.GROWTH_ITEM:
            if len(snake.body) < Snake.MAX_LENGTH:
                snake.grow()
                self._board.update_grow()
        elif self._kind == CellType.POISON_ITEM:
            died = snake.shrink()
            self._board.update_poison()
        else:
            self._board.speed_up()

        self.spawn()
        return died

    @property
    def position(self) -> Vec2 | None:
        return self._position

    @property
    def kind(self) -> CellType | None:
        return self._kind