"""Board: dimensions plus the draw step that turns game objects into cells.

The board holds no authoritative game state. :meth:`Board.draw` lays the
snake and food out on a fresh :data:`grid_snake.types.CellGrid` and passes it
to the configured renderer; the renderer's return value is kept as
``Board.frame`` for the front end to display.
"""

from typing import Any, Optional, Sequence

from grid_snake.components import Position
from grid_snake.types import CellGrid, CellType, RenderFn
from grid_snake.utils.grid import is_in_bounds


class Board:
    rows: int
    cols: int
    renderer: Optional[RenderFn]
    frame: Any

    def __init__(self, rows: int, cols: int, renderer: Optional[RenderFn] = None):
        self.rows = rows
        self.cols = cols
        self.renderer = renderer
        self.frame = None

    def resize(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols

    def layout(
        self, snake_positions: Sequence[Position], food_position: Optional[Position]
    ) -> CellGrid:
        """Build the occupancy grid.

        Food is painted last so it stays visible; cells outside the board (a
        head that just crossed a wall) are skipped.
        """
        grid: CellGrid = [
            [CellType.EMPTY for _ in range(self.cols)] for _ in range(self.rows)
        ]
        for idx, position in enumerate(snake_positions):
            if is_in_bounds(self.rows, self.cols, position):
                grid[position.x][position.y] = (
                    CellType.SNAKE_HEAD if idx == 0 else CellType.SNAKE
                )
        if food_position is not None and is_in_bounds(
            self.rows, self.cols, food_position
        ):
            grid[food_position.x][food_position.y] = CellType.FOOD
        return grid

    def draw(
        self, snake_positions: Sequence[Position], food_position: Optional[Position]
    ) -> CellGrid:
        grid = self.layout(snake_positions, food_position)
        if self.renderer is not None:
            self.frame = self.renderer(grid)
        return grid
