import pytest

from grid_snake.actions import (
    ACTION_DIRECTIONS,
    MOVE_ACTIONS,
    Action,
    is_opposite,
    key_to_action,
    new_keystroke,
)
from grid_snake.components import DOWN, LEFT, RIGHT, UP, Position

OPPOSITES = {(UP, DOWN), (DOWN, UP), (LEFT, RIGHT), (RIGHT, LEFT)}


@pytest.mark.parametrize("current", [UP, DOWN, LEFT, RIGHT])
@pytest.mark.parametrize("candidate", [UP, DOWN, LEFT, RIGHT])
def test_is_opposite_only_for_reversals(current: Position, candidate: Position) -> None:
    assert is_opposite(candidate, current) == ((candidate, current) in OPPOSITES)


def test_unit_vectors() -> None:
    assert UP == Position(-1, 0)
    assert DOWN == Position(1, 0)
    assert LEFT == Position(0, -1)
    assert RIGHT == Position(0, 1)


def test_every_move_action_has_a_direction() -> None:
    assert set(ACTION_DIRECTIONS) == set(MOVE_ACTIONS)
    assert Action.RESTART not in MOVE_ACTIONS


@pytest.mark.parametrize(
    "key, expected",
    [
        ("ArrowUp", Action.UP),
        ("ArrowDown", Action.DOWN),
        ("ArrowLeft", Action.LEFT),
        ("ArrowRight", Action.RIGHT),
        ("w", Action.UP),
        ("s", Action.DOWN),
        ("a", Action.LEFT),
        ("D", Action.RIGHT),
        ("r", Action.RESTART),
        ("R", Action.RESTART),
        ("x", None),
        ("Enter", None),
    ],
)
def test_key_to_action(key: str, expected: Action | None) -> None:
    assert key_to_action(key) == expected


@pytest.mark.parametrize(
    "previous, current, expected",
    [
        ("", "w", "w"),
        ("w", "wd", "d"),
        ("wd", "wdd", "d"),
        ("wasd", "wasd", None),
        ("wasd", "was", None),
        ("", "", None),
    ],
)
def test_new_keystroke(previous: str, current: str, expected: str | None) -> None:
    assert new_keystroke(previous, current) == expected
