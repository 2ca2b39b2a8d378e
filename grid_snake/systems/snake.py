"""Snake systems.

Pure functions over :class:`grid_snake.components.Snake`. An unspawned snake
(no positions) is inert: it does not move, never eats and never dies.
"""

import random
from dataclasses import replace

from pyrsistent import pvector

from grid_snake.actions import is_opposite
from grid_snake.components import UP, Position, Snake
from grid_snake.utils.grid import is_in_bounds
from grid_snake.utils.random import rand_range

SPAWN_MARGIN = 2


def spawn_snake(rows: int, cols: int, rng: random.Random) -> Snake:
    """Place a one-cell snake heading up, away from the walls.

    Row and column are drawn from ``[SPAWN_MARGIN, size - SPAWN_MARGIN]`` so
    the first moves cannot hit a wall immediately.
    """
    x = rand_range(rng, SPAWN_MARGIN, rows - SPAWN_MARGIN)
    y = rand_range(rng, SPAWN_MARGIN, cols - SPAWN_MARGIN)
    return Snake(positions=pvector([Position(x, y)]), direction=UP)


def move_snake(snake: Snake, food_position: Position) -> Snake:
    """Advance the head one cell; drop the tail unless the new head is on food."""
    head = snake.head
    if head is None:
        return snake
    new_head = head + snake.direction
    positions = pvector([new_head]).extend(snake.positions)
    if new_head != food_position:
        positions = positions.delete(len(positions) - 1)
    return replace(snake, positions=positions)


def has_eaten_food(snake: Snake, food_position: Position) -> bool:
    return snake.head is not None and snake.head == food_position


def is_out_of_bounds(snake: Snake, rows: int, cols: int) -> bool:
    return snake.head is not None and not is_in_bounds(rows, cols, snake.head)


def has_collided_with_tail(snake: Snake) -> bool:
    head = snake.head
    if head is None:
        return False
    return any(position == head for position in snake.positions[1:])


def is_dead(snake: Snake, rows: int, cols: int) -> bool:
    """Head left the board or landed on any other body cell."""
    return is_out_of_bounds(snake, rows, cols) or has_collided_with_tail(snake)


def turn_snake(snake: Snake, direction: Position) -> Snake:
    """Set a new heading unless it reverses the current one.

    Returns the same object when the turn is rejected or changes nothing.
    """
    if direction == snake.direction or is_opposite(direction, snake.direction):
        return snake
    return replace(snake, direction=direction)
