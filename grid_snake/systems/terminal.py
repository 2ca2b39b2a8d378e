"""Terminal condition systems.

Set ``state.lose`` or ``state.win`` exactly once. Both are side-channel flags:
the reducer short-circuits once either is raised.
"""

from dataclasses import replace

from grid_snake.state import State
from grid_snake.systems.snake import is_dead
from grid_snake.utils.terminal import is_board_full, is_terminal_state


def lose_system(state: State) -> State:
    """Set ``lose`` if the snake hit a wall or itself (idempotent)."""
    if state.snake is None or is_terminal_state(state):
        return state
    if is_dead(state.snake, state.rows, state.cols):
        return replace(state, lose=True)
    return state


def win_system(state: State) -> State:
    """Set ``win`` when the snake covers the whole board."""
    if is_terminal_state(state):
        return state
    if is_board_full(state):
        return replace(state, win=True)
    return state
