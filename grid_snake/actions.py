"""Action enumeration and direction helpers.

``MOVE_ACTIONS`` is the canonical ordered list of movement actions; checks like
``if action in MOVE_ACTIONS`` are preferred over enum name comparisons.
"""

from collections import Counter
from enum import StrEnum, auto
from typing import Dict, List, Optional

from grid_snake.components import DOWN, LEFT, RIGHT, UP, Position


class Action(StrEnum):
    """String enum of player intents.

    Members:
        UP, DOWN, LEFT, RIGHT: Steer the snake.
        RESTART: Start a new session (only honored after the game ended).
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    RESTART = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

ACTION_DIRECTIONS: Dict[Action, Position] = {
    Action.UP: UP,
    Action.DOWN: DOWN,
    Action.LEFT: LEFT,
    Action.RIGHT: RIGHT,
}

KEY_ACTIONS: Dict[str, Action] = {
    "arrowup": Action.UP,
    "arrowdown": Action.DOWN,
    "arrowleft": Action.LEFT,
    "arrowright": Action.RIGHT,
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "r": Action.RESTART,
}


def key_to_action(key: str) -> Optional[Action]:
    """Map a browser-style key name (``ArrowUp``, ``r``...) to an ``Action``."""
    return KEY_ACTIONS.get(key.lower())


def new_keystroke(previous: str, current: str) -> Optional[str]:
    """Return the character typed between two snapshots of a text box.

    Text inputs report their whole content on every keyup, so the newest key
    is the last character present in ``current`` but not in ``previous``.
    Deletions and unchanged text yield ``None``.
    """
    if current == previous:
        return None
    added: List[str] = list((Counter(current) - Counter(previous)).elements())
    if not added:
        return None
    return added[-1]


def is_opposite(a: Position, b: Position) -> bool:
    return a.x == -b.x and a.y == -b.y
