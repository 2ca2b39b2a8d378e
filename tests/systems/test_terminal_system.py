from dataclasses import replace

from grid_snake.components import UP
from grid_snake.state import State
from grid_snake.systems.terminal import lose_system, win_system
from grid_snake.utils.terminal import is_board_full, is_terminal_state, is_valid_state
from tests.test_utils import make_state


def test_lose_system_flags_out_of_bounds_head() -> None:
    state = make_state([(-1, 3), (0, 3)], UP)
    assert lose_system(state).lose


def test_lose_system_leaves_live_snake_alone() -> None:
    state = make_state([(4, 3), (5, 3)], UP)
    assert lose_system(state) is state


def test_lose_system_is_idempotent() -> None:
    state = replace(make_state([(-1, 3)], UP), lose=True)
    assert lose_system(state) is state


def test_win_system_on_full_board() -> None:
    state = make_state([(0, 0), (0, 1), (1, 1), (1, 0)], food=None, rows=2, cols=2)
    assert is_board_full(state)
    assert win_system(state).win


def test_win_system_needs_full_board() -> None:
    state = make_state([(0, 0), (0, 1)], rows=2, cols=2)
    assert win_system(state) is state


def test_validity_and_terminal_predicates() -> None:
    assert not is_valid_state(State(rows=8, cols=8))
    state = make_state([(4, 4)])
    assert is_valid_state(state)
    assert not is_terminal_state(state)
    assert is_terminal_state(replace(state, win=True))
    assert is_terminal_state(replace(state, lose=True))
