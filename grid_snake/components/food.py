"""Food component."""

from dataclasses import dataclass

from .position import Position


@dataclass(frozen=True)
class Food:
    """Single food pellet; eating it grows the snake and scores a point."""

    position: Position
