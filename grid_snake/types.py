"""Common type aliases and enumerations.

``CellGrid`` is the contract between :class:`grid_snake.board.Board` and any
renderer: a row-major list of rows holding one :class:`CellType` per tile.
"""

from enum import StrEnum, auto
from typing import Any, Callable, List


class CellType(StrEnum):
    """Visual state of a single board tile."""

    EMPTY = auto()
    SNAKE = auto()
    SNAKE_HEAD = auto()
    FOOD = auto()


class GamePhase(StrEnum):
    """Lifecycle of a game session."""

    NOT_STARTED = auto()
    RUNNING = auto()
    LOST = auto()
    WON = auto()


CellGrid = List[List[CellType]]
RenderFn = Callable[[CellGrid], Any]
TimerCallback = Callable[[], None]
