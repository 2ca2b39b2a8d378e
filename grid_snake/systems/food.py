"""Food spawning system."""

import random
from typing import Iterable

from grid_snake.components import Food, Position
from grid_snake.utils.grid import free_cells
from grid_snake.utils.random import rand_range


def spawn_food(
    rows: int, cols: int, snake_positions: Iterable[Position], rng: random.Random
) -> Food:
    """Drop food on a uniformly random cell the snake does not occupy.

    Rejection sampling: a cell is drawn at least once and redrawn while it is
    under the snake. Boards are small, so this terminates quickly whenever a
    free cell exists.

    Raises:
        ValueError: If the snake covers every cell.
    """
    occupied = set(snake_positions)
    if not free_cells(rows, cols, occupied):
        raise ValueError(f"No free cell left on a {rows}x{cols} board")
    while True:
        position = Position(rand_range(rng, 0, rows - 1), rand_range(rng, 0, cols - 1))
        if position not in occupied:
            return Food(position)
