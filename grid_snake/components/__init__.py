"""grid_snake.components
=================================

Aggregate import surface for the immutable value objects the game is built
from::

    from grid_snake.components import Position, Snake, Food

Components carry no game rules; see the ``systems`` package for the functions
that move, grow and respawn them.
"""

from .food import Food
from .position import DOWN, LEFT, RIGHT, UP, Position
from .snake import Snake

__all__ = [
    "DOWN",
    "Food",
    "LEFT",
    "Position",
    "RIGHT",
    "Snake",
    "UP",
]
