"""Score keeping, mission goals and the score panel."""

from __future__ import annotations

import contextlib
import curses

from snakegate.gamemap import WIDTH


class ScoreBoard:
    """Tracks length, item and gate counts, frame delay and mission goals."""

    MAX_MISSION_DELAY_MS = 100
    MIN_SPEEDUP_DELAY_MS = 50
    SPEEDUP_STEP_MS = 10

    def __init__(self, init_length: int = 3, frame_delay_ms: int = 130) -> None:
        self.length = init_length
        self.max_length = init_length
        self.grow_count = 0
        self.poison_count = 0
        self.gate_count = 0
        self.frame_delay_ms = frame_delay_ms

        self.target_length = 4
        self.target_grow = 0
        self.target_poison = 0
        self.target_gate = 0

        self._game_over = False

    def update_grow(self) -> None:
        """Record a growth item: one longer."""
        self.grow_count += 1
        self.length += 1
        self.max_length = max(self.max_length, self.length)

    def update_poison(self) -> None:
        """Record a poison item: one shorter; below 3 the game is over."""
        self.poison_count += 1
        if self.length > 0:
            self.length -= 1
        if self.length < 3:
            self._game_over = True

    def update_gate(self) -> None:
        """Record a pass through a gate."""
        self.gate_count += 1

    def speed_up(self) -> None:
        """Shorten the frame delay while it is still at least 50 ms."""
        if self.frame_delay_ms >= self.MIN_SPEEDUP_DELAY_MS:
            self.frame_delay_ms -= self.SPEEDUP_STEP_MS

    def _delay_ok(self) -> bool:
        return self.frame_delay_ms <= self.MAX_MISSION_DELAY_MS

    def lines(self, elapsed_sec: int) -> list[str]:
        """The panel text, one entry per row; empty strings are spacer rows."""

        def mark(done: bool) -> str:
            return "v" if done else " "

        return [
            "=== Score Board ===",
            f"B: {self.length} / {self.max_length}",
            f"+: {self.grow_count}",
            f"-: {self.poison_count}",
            f"G: {self.gate_count}",
            f"Time: {elapsed_sec} s",
            f"Frame Delay: {self.frame_delay_ms} ms",
            "",
            "=== Mission ===",
            f"Length >= {self.target_length}   "
            f"[{mark(self.length >= self.target_length)}]",
            f"Grow   >= {self.target_grow}   "
            f"[{mark(self.grow_count >= self.target_grow)}]",
            f"Poison <= {self.target_poison}   "
            f"[{mark(self.poison_count >= self.target_poison)}]",
            f"Gate   >= {self.target_gate}   "
            f"[{mark(self.gate_count >= self.target_gate)}]",
            f"Delay  <= {self.MAX_MISSION_DELAY_MS} [{mark(self._delay_ok())}]",
        ]

    def draw(self, screen, elapsed_sec: int) -> None:
        """Write the panel to the right of the map on a curses window."""
        x = WIDTH + 2
        for y, text in enumerate(self.lines(elapsed_sec), start=1):
            if text:
                with contextlib.suppress(curses.error):
                    screen.addstr(y, x, text)

    def check_mission(self) -> bool:
        """Whether every mission goal is met."""
        return (
            self.length >= self.target_length
            and self.grow_count >= self.target_grow
            and self.poison_count >= self.target_poison
            and self.gate_count >= self.target_gate
            and self._delay_ok()
        )

    @property
    def game_over(self) -> bool:
        return self._game_over