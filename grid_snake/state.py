"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents a whole
game session at a single tick. The reducer in :mod:`grid_snake.step` takes a
previous ``State`` and returns a *new* one; nothing is mutated in place. The
:class:`grid_snake.game.Game` orchestrator swaps its current snapshot on every
tick and every accepted input.

Design notes:

* ``snake`` and ``food`` are ``None`` until the first spawn. Systems treat an
    unspawned snake as inert (no movement, never eaten, never dead).
* ``win`` / ``lose`` are mutually exclusive terminal markers. The reducer
    short-circuits on terminal states.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, pmap

from grid_snake.components import Food, Snake


@dataclass(frozen=True)
class State:
    """Immutable game snapshot.

    Attributes:
        rows (int): Board height in tiles.
        cols (int): Board width in tiles.
        snake (Snake | None): Snake body and heading, ``None`` before spawn.
        food (Food | None): Current food pellet, ``None`` before spawn.
        turn (int): Number of ticks processed this session.
        score (int): Current score; a fresh session starts at 1.
        win (bool): True once the snake fills the whole board.
        lose (bool): True once the snake hit a wall or itself.
        seed (int | None): Seed the session RNG was created from.
    """

    rows: int
    cols: int
    snake: Optional[Snake] = None
    food: Optional[Food] = None
    turn: int = 0
    score: int = 1
    win: bool = False
    lose: bool = False
    seed: Optional[int] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Scalars that are falsy (``False``, ``None``) are skipped; positions are
        flattened to ``[x, y]`` pairs so the result can be dumped as JSON.

        Returns:
            PMap[str, Any]: Persistent map of field name to value.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, Snake):
                value = pmap(
                    {
                        "positions": [[p.x, p.y] for p in value.positions],
                        "direction": [value.direction.x, value.direction.y],
                    }
                )
            elif isinstance(value, Food):
                value = [value.position.x, value.position.y]
            elif value is None or value is False:
                continue
            description = description.set(field, value)
        return description
