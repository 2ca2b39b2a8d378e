"""Terminal condition helper predicates."""

from grid_snake.state import State


def is_valid_state(state: State) -> bool:
    """Return True once both snake and food have been spawned."""
    return state.snake is not None and state.food is not None


def is_terminal_state(state: State) -> bool:
    return state.win or state.lose


def is_board_full(state: State) -> bool:
    if state.snake is None:
        return False
    return len(set(state.snake.positions)) >= state.rows * state.cols
