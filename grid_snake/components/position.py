"""Position component.

Immutable integer grid coordinates. The same type doubles as a unit vector for
the snake's heading (see ``UP``, ``DOWN``, ``LEFT``, ``RIGHT``).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Row index (0 at top).
        y: Column index (0 at left).
    """

    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)


UP = Position(-1, 0)
DOWN = Position(1, 0)
LEFT = Position(0, -1)
RIGHT = Position(0, 1)
