"""The snake: its body, direction, movement and collision checks."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import NamedTuple

from snakegate.gamemap import HEIGHT, WIDTH, CellType, GameMap


class Vec2(NamedTuple):
    """A grid position."""

    x: int
    y: int


class Direction(Enum):
    """Movement direction, valued by its (dx, dy) step."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """The direction pointing the other way."""
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, pos) -> Vec2:
        """The position one cell away from ``pos`` in this direction."""
        dx, dy = self.value
        return Vec2(pos[0] + dx, pos[1] + dy)


# Neighbour search order used when tracing the body on the map.
_SEARCH_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
_BLOCKING = (CellType.WALL, CellType.IMMUNE_WALL)


class Snake:
    """A snake traced from the head and body cells of a map."""

    MAX_LENGTH = 20

    def __init__(self, game_map: GameMap) -> None:
        head = next(
            (
                Vec2(x, y)
                for y in range(HEIGHT)
                for x in range(WIDTH)
                if game_map.get_cell(x, y) == CellType.SNAKE_HEAD
            ),
            None,
        )
        if head is None:
            raise ValueError("the map has no snake head")

        body = [head]
        seen = {head}
        current = head
        while True:
            following = next(
                (
                    nxt
                    for nxt in (d.step(current) for d in _SEARCH_ORDER)
                    if nxt not in seen
                    and game_map.get_cell(nxt.x, nxt.y) == CellType.SNAKE_BODY
                ),
                None,
            )
            if following is None:
                break
            body.append(following)
            seen.add(following)
            current = following
        if len(body) < 2:
            raise ValueError("the map has no snake body next to the head")

        self._body: deque[Vec2] = deque(body)
        delta = (head.x - body[1].x, head.y - body[1].y)
        if delta == (1, 0):
            self._dir = Direction.RIGHT
        elif delta == (-1, 0):
            self._dir = Direction.LEFT
        elif delta == (0, 1):
            self._dir = Direction.DOWN
        else:
            self._dir = Direction.UP
        self._next_dir = self._dir

    def set_direction(self, direction: Direction) -> None:
        """Queue a turn; reversing onto the current direction is ignored."""
        if direction is self._dir.opposite():
            return
        self._next_dir = direction

    def force_direction(self, direction: Direction) -> None:
        """Set both the current and queued direction."""
        self._dir = self._next_dir = direction

    def move(self, grow: bool = False) -> None:
        """Advance one cell; with ``grow`` the tail is kept."""
        self._dir = self._next_dir
        self._body.appendleft(self._dir.step(self._body[0]))
        if not grow:
            self._body.pop()

    def warp_to(self, x: int, y: int) -> None:
        """Move the head to (x, y)."""
        if self._body:
            self._body[0] = Vec2(x, y)

    def shrink(self) -> bool:
        """Drop the tail segment; return True if fewer than 3 segments remain."""
        if self._body:
            self._body.pop()
        return len(self._body) < 3

    def grow(self) -> None:
        """Duplicate the tail segment, up to MAX_LENGTH."""
        if len(self._body) < self.MAX_LENGTH:
            self._body.append(self._body[-1])

    def _next_head(self) -> Vec2:
        return self._next_dir.step(self._body[0])

    def will_hit_wall(self, game_map: GameMap) -> bool:
        """Whether the next move lands on a wall or immune wall."""
        nxt = self._next_head()
        return game_map.get_cell(nxt.x, nxt.y) in _BLOCKING

    def will_hit_self(self) -> bool:
        """Whether the next move lands on any body segment."""
        return self._next_head() in self._body

    def is_collision(self, game_map: GameMap) -> bool:
        """Whether the head now sits on a wall or on another segment."""
        head = self._body[0]
        if game_map.get_cell(head.x, head.y) in _BLOCKING:
            return True
        return any(seg == head for seg in list(self._body)[1:])

    @property
    def head(self) -> Vec2:
        return self._body[0]

    @property
    def body(self) -> tuple[Vec2, ...]:
        return tuple(self._body)

    @property
    def direction(self) -> Direction:
        return self._dir