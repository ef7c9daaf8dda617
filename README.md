# puyo

A small simulation library for Puyo Puyo fields. It covers placing,
moving and rotating the falling pair ("tsumo"), dropping it into the grid,
finding and erasing connected groups, applying gravity and scoring chains.
It also includes an AI that picks random moves.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
import random

from puyo.cells import CellType
from puyo.field import Field
from puyo.ai import create_random_ai

field = Field(rng=random.Random(42))

# Place a pair and drop it
field.set_active_tsumo(CellType.RED, CellType.RED)
field.drop_active_tsumo()

# Resolve a chain step by step
chain = 1
while True:
    info = field.analyze_and_erase_chains(chain)
    if not info.erased:
        break
    field.update_score(info)
    field.apply_gravity()
    chain += 1

ai = create_random_ai(random.Random(0))
move = ai.decide(field)
print(move.target_x, move.rotation)
```

## Modules

### `puyo.cells`

- `CellType`: an enum of cell contents: `EMPTY`, `WALL`, `RED`, `GREEN`,
  `YELLOW`, `BLUE`, `PURPLE`, `GARBAGE`.
- `ChainInfo`: a dataclass describing one erase pass, with `chain_count`,
  `group_sizes`, `colors`, `total_erased`, `erased` and the read-only
  property `color_count`.

### `puyo.field`

- `Field(height=14, width=6, rng=None)`: the playing grid. Row 0 is the
  top. Its attributes are `height`, `width`, `rng`, `grid`,
  `next_tsumos`, `active_tsumo`, `score`, `current_chain_size` and
  `game_over`.
  - `get_cell(x, y)` returns `CellType.WALL` for positions outside the
    grid; `set_cell(x, y, cell)` ignores them.
  - `set_active_tsumo(center, sub, x=2, y=-1, dx=0, dy=-1)` and
    `set_next_tsumos(next1, next2)` set the falling pair and the two
    queued pairs.
  - `move_active_tsumo_left()` / `move_active_tsumo_right()` shift the
    pair one column unless either half is already at the edge.
  - `rotate_active_tsumo_left()` / `rotate_active_tsumo_right()` turn the
    sub puyo around the center, pushing the pair away from a wall when
    needed.
  - `drop_active_tsumo()` drops both halves into their columns; nothing
    is placed unless both fit.
  - `ghost_position()` returns `((cx, cy), (sx, sy))`, where the pair
    would land.
  - `analyze_and_erase_chains(chain_count=1)` erases every group of four
    or more same-coloured puyos, together with garbage touching them, and
    returns a `ChainInfo`.
  - `apply_gravity()` lets every puyo fall to the bottom of its column.
  - `calculate_score(chain_info)` returns
    `total_erased * bonus * 10`, where `bonus` is the sum of the chain,
    link and colour bonuses, or 1 if that sum is 0;
    `update_score(chain_info)` adds it to `score`.
  - `generate_next_tsumo()` makes the first queued pair active, moves the
    second forward and queues a new random pair.
- `ActiveTsumo`: a dataclass for the falling pair (`x`, `y`, `dx`, `dy`,
  `center`, `sub`).
- `chain_bonus(chain)`, `link_bonus(size)`, `color_bonus(color_count)`:
  the scoring tables.
- `random_tsumo(rng)`: a random pair drawn from red, green, yellow and
  blue.

### `puyo.ai`

- `Move`: a frozen dataclass with `target_x` and `rotation`.
- `AI`: an abstract base class with `decide(field)`.
- `RandomAI(rng=None)`: returns a random column and a rotation count
  from 0 to 3.
- `create_random_ai(rng=None)`: returns a new `RandomAI`.

## What it does not do

This is a library only. It has no command to run, no game loop and no
display: it does not draw the field, and it does not read keyboard input.
It does not detect game over; `Field.game_over` is set to `False` and
never changed.