# snakegate

A snake game for the terminal, drawn with curses on a 21 × 21 board.

The snake eats items and passes through gates. It clears a stage when it meets that stage's missions. The game runs through the stages in order, and you win when the last one is cleared.

## Playing

```
snakegate [MAP ...]
```

The command plays the map files you give it, in order. If you give no files, it plays these stages, relative to the current directory:

- `resources/stage1.txt`
- `resources/stage2.txt`
- `resources/stage3.txt`
- `resources/stage4.txt`

If a map file is missing or malformed, that stage uses the default board. The default board has a wall around its edge, an immune wall at its centre, and no snake. A stage needs a snake, so a map without one cannot be played.

Controls:

- The arrow keys steer the snake. A key for the direction opposite to the current one is ignored.
- `q` or `Q` quits.

## Map files

A map file holds 21 rows of 21 integers, separated by whitespace. Each integer is a cell type (`CellType`):

| Value | Cell |
|------:|------|
| 0 | empty |
| 1 | wall (a gate can open here) |
| 2 | immune wall |
| 3 | snake head |
| 4 | snake body |
| 5 | growth item |
| 6 | poison item |
| 7 | gate |
| 8 | speed item |

A map must contain a snake head with at least one body cell next to it. The body is traced from the head through the body cells that are next to each other. At the start the snake moves in the direction that points away from its first body segment.

## Rules

- Three items are on the board at a time. An item moves to a new random empty cell when it is eaten, and also 5 seconds after it was last placed. Each time an item is placed, it becomes a growth, poison or speed item, chosen at random.
- **Growth (+)** makes the snake one segment longer, up to 20 segments.
- **Poison (-)** makes the snake one segment shorter. If the snake is then shorter than 3 segments, the game is over.
- **Speed (\*)** takes 10 ms off the frame delay, as long as the delay is still at least 50 ms. The delay starts at 130 ms and carries over from one stage to the next.
- A pair of gates opens once per stage, 10 seconds into the first stage. The wait grows by 10 seconds for each later stage that follows a stage where gates opened. The two gates are chosen at random from the ordinary wall cells (not immune walls), and they are never next to each other. When the head enters one gate, it comes out of the other one:
  - A gate on the edge of the board always sends the snake inward.
  - A gate inside the board tries four directions in this order: straight on, clockwise, counter-clockwise, then back. It takes the first one that leads to an empty cell.
- The game is over when the snake is about to move into a wall, an immune wall or its own body, or when its head ends up on one of them.
- A stage is cleared when its missions are met: length of at least 4 and a frame delay of 100 ms or less. The panel next to the board shows the following:
  - the snake's length and best length
  - the growth, poison and gate counts
  - the elapsed time
  - the frame delay
  - the mission checklist

## Using it as a library

The game parts can be used without a terminal:

- `snakegate.gamemap`: `GameMap`, `CellType`, `MapFormatError`
- `snakegate.snake`: `Snake`, `Direction`, `Vec2`
- `snakegate.scoreboard`: `ScoreBoard`
- `snakegate.gate`: `Gate`
- `snakegate.item`: `Item`
- `snakegate.game`: `Stage`, `StageOutcome`, `key_to_dir`, `play`, `main`

`Stage(map_path, rng, clock, gate_delay_sec)` sets up one stage. The random generator and the clock can be supplied, so that a stage plays the same way each time. `Stage.step(key)` advances the stage by one frame and returns a `StageOutcome`: `RUNNING`, `QUIT`, `GAME_OVER` or `CLEAR`. Pass a curses key code, or `-1` for no key. `Stage.render(screen)` draws the stage on a curses window.