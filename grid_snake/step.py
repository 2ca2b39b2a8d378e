"""State reducer and session setup.

:func:`step` is the single gameplay transition, one tick of the snake. It is
pure given the RNG: it returns a *new* :class:`grid_snake.state.State`.

Ordering within a tick:

1. Move the snake one cell (growing if the new head lands on the food).
2. If the food was eaten: bump the score, then either declare a win (no free
    cell left) or respawn the food away from the snake.
3. Evaluate death against the post-move body.

Death is checked after the tail was dropped, so following the tail into the
cell it vacates on the same tick is legal.
"""

import random
from dataclasses import replace
from typing import Optional

from grid_snake.actions import ACTION_DIRECTIONS, MOVE_ACTIONS, Action
from grid_snake.state import State
from grid_snake.systems.food import spawn_food
from grid_snake.systems.snake import has_eaten_food, move_snake, spawn_snake, turn_snake
from grid_snake.systems.terminal import lose_system, win_system
from grid_snake.utils.terminal import is_terminal_state, is_valid_state

INITIAL_SCORE = 1


def new_state(
    rows: int, cols: int, rng: random.Random, seed: Optional[int] = None
) -> State:
    """Spawn a fresh session: snake first, then food clear of the snake."""
    snake = spawn_snake(rows, cols, rng)
    food = spawn_food(rows, cols, snake.positions, rng)
    return State(
        rows=rows, cols=cols, snake=snake, food=food, score=INITIAL_SCORE, seed=seed
    )


def step(state: State, rng: random.Random) -> State:
    """Advance the session by one tick.

    Args:
        state (State): Previous snapshot.
        rng (random.Random): Source for food respawns.

    Returns:
        State: Next snapshot. Unspawned or terminal states are returned unchanged.
    """
    if not is_valid_state(state) or is_terminal_state(state):
        return state
    assert state.snake is not None and state.food is not None

    food_position = state.food.position
    snake = move_snake(state.snake, food_position)
    state = replace(state, snake=snake, turn=state.turn + 1)

    if has_eaten_food(snake, food_position):
        state = replace(state, score=state.score + 1)
        state = win_system(state)
        if state.win:
            return replace(state, food=None)
        state = replace(
            state, food=spawn_food(state.rows, state.cols, snake.positions, rng)
        )

    return lose_system(state)


def steer(state: State, action: Action) -> State:
    """Apply a directional intent to the snake.

    Reversals, non-movement actions and unspawned snakes leave ``state``
    untouched (the same object is returned).

    Raises:
        ValueError: If ``action`` is not an ``Action``.
    """
    if not isinstance(action, Action):
        raise ValueError(f"Action is not valid: {action!r}")
    if action not in MOVE_ACTIONS or state.snake is None:
        return state
    snake = turn_snake(state.snake, ACTION_DIRECTIONS[action])
    if snake is state.snake:
        return state
    return replace(state, snake=snake)
