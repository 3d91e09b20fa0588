"""Teleport gates: a pair of wall cells that move the snake between them."""

from __future__ import annotations

import random
from itertools import combinations

from snakegate.gamemap import HEIGHT, WIDTH, CellType, GameMap
from snakegate.snake import Direction, Vec2

_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


class Gate:
    """Picks two ordinary wall cells of a map and turns them into gates."""

    def __init__(self, game_map: GameMap, rng: random.Random | None = None) -> None:
        self._map = game_map
        self._rng = rng if rng is not None else random.Random()
        self._a: Vec2 | None = None
        self._b: Vec2 | None = None

    def clear_pair(self) -> None:
        """Turn the current gates back into walls."""
        for pos in (self._a, self._b):
            if pos is not None:
                self._map.set_cell(pos.x, pos.y, CellType.WALL)
        self._a = self._b = None

    def generate_pair(self) -> None:
        """Replace the gates with two non-adjacent walls chosen at random."""
        self.clear_pair()
        valid = [
            (a, b)
            for a, b in combinations(self._map.wall_cells(), 2)
            if abs(a[0] - b[0]) + abs(a[1] - b[1]) > 1
        ]
        if not valid:
            return
        a, b = self._rng.choice(valid)
        self._a, self._b = Vec2(*a), Vec2(*b)
        for pos in (self._a, self._b):
            self._map.set_cell(pos.x, pos.y, CellType.GATE)

    def is_gate(self, pos) -> bool:
        """Whether ``pos`` is one of the two gates."""
        return Vec2(*pos) in (self._a, self._b)

    def other_gate(self, pos) -> Vec2 | None:
        """The gate opposite the one at ``pos``."""
        return self._b if Vec2(*pos) == self._a else self._a

    def compute_exit_direction(self, pos, in_dir: Direction) -> Direction:
        """Direction to leave the gate at ``pos`` after entering with ``in_dir``."""
        x, y = pos
        if y == 0:
            return Direction.DOWN
        if y == HEIGHT - 1:
            return Direction.UP
        if x == 0:
            return Direction.RIGHT
        if x == WIDTH - 1:
            return Direction.LEFT

        clockwise = _CLOCKWISE[in_dir]
        for direction in (in_dir, clockwise, clockwise.opposite(), in_dir.opposite()):
            nxt = direction.step(pos)
            if self._map.get_cell(nxt.x, nxt.y) == CellType.EMPTY:
                return direction
        return in_dir