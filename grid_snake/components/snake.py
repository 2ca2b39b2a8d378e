"""Snake component.

The body is a persistent vector ordered head first. Movement never mutates an
existing ``Snake``; systems return a new instance.
"""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from .position import UP, Position


@dataclass(frozen=True)
class Snake:
    """Snake body and heading.

    Attributes:
        positions: Occupied cells, ``positions[0]`` is the head.
        direction: Unit vector applied to the head on the next move.
    """

    positions: PVector[Position] = pvector()
    direction: Position = UP

    @property
    def head(self) -> Optional[Position]:
        return self.positions[0] if len(self.positions) > 0 else None
