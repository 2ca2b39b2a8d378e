"""Grid math helpers shared by the snake and food systems."""

from typing import Iterable, List

from grid_snake.components import Position


def is_in_bounds(rows: int, cols: int, pos: Position) -> bool:
    """Return True if ``pos`` lies within ``[0, rows) x [0, cols)``."""
    return 0 <= pos.x < rows and 0 <= pos.y < cols


def free_cells(rows: int, cols: int, occupied: Iterable[Position]) -> List[Position]:
    """List in-bounds cells not present in ``occupied`` (row-major order)."""
    taken = set(occupied)
    return [
        Position(x, y)
        for x in range(rows)
        for y in range(cols)
        if Position(x, y) not in taken
    ]
