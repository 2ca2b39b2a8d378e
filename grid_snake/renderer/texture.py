"""Pillow rendering of a cell grid.

Each tile becomes a flat square filled from a color map; ``COLOR_MAP_REGISTRY``
lists the palettes the front end can pick from.
"""

from typing import Dict, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from grid_snake.types import CellGrid, CellType

DEFAULT_RESOLUTION = 480
DEFAULT_GAP_PERCENT = 0.08

RGBA = Tuple[int, int, int, int]
ColorMap = Dict[CellType, RGBA]
UInt8Array = npt.NDArray[np.uint8]

BACKGROUND: RGBA = (20, 20, 24, 255)

CLASSIC_COLOR_MAP: ColorMap = {
    CellType.EMPTY: (44, 44, 52, 255),
    CellType.SNAKE: (80, 200, 80, 255),
    CellType.SNAKE_HEAD: (30, 140, 40, 255),
    CellType.FOOD: (200, 70, 70, 255),
}

NEON_COLOR_MAP: ColorMap = {
    CellType.EMPTY: (10, 10, 30, 255),
    CellType.SNAKE: (0, 255, 200, 255),
    CellType.SNAKE_HEAD: (255, 255, 255, 255),
    CellType.FOOD: (255, 0, 140, 255),
}

DEFAULT_COLOR_MAP: ColorMap = CLASSIC_COLOR_MAP

COLOR_MAP_REGISTRY: Dict[str, ColorMap] = {
    "classic": CLASSIC_COLOR_MAP,
    "neon": NEON_COLOR_MAP,
}


def cell_color(cell: CellType, color_map: ColorMap) -> RGBA:
    """Look up the fill for ``cell``.

    Raises:
        ValueError: If ``cell`` is not one of the known cell states.
    """
    try:
        return color_map[CellType(cell)]
    except (KeyError, ValueError):
        raise ValueError(
            f"Invalid cell type {cell!r} (must be one of {[c.value for c in CellType]})"
        ) from None


def render(
    grid: CellGrid,
    resolution: int = DEFAULT_RESOLUTION,
    gap_percent: float = DEFAULT_GAP_PERCENT,
    color_map: Optional[ColorMap] = None,
) -> Image.Image:
    """
    Renders a cell grid as an RGBA PIL Image; ``resolution`` bounds the longer side.
    """
    if color_map is None:
        color_map = DEFAULT_COLOR_MAP

    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if rows == 0 or cols == 0:
        raise ValueError("Cannot render an empty grid")

    cell_size: int = max(1, resolution // max(rows, cols))
    gap: int = int(cell_size * gap_percent)

    pixels: UInt8Array = np.empty((rows * cell_size, cols * cell_size, 4), np.uint8)
    pixels[:, :] = BACKGROUND
    for x, row in enumerate(grid):
        if len(row) != cols:
            raise ValueError(f"Row {x} has {len(row)} cells, expected {cols}")
        for y, cell in enumerate(row):
            x0, y0 = x * cell_size, y * cell_size
            pixels[
                x0 + gap : x0 + cell_size - gap, y0 + gap : y0 + cell_size - gap
            ] = cell_color(cell, color_map)

    return Image.fromarray(pixels)


def draw_banner(img: Image.Image, text: str) -> Image.Image:
    """Dim ``img`` and write ``text`` across its middle (used for the game-over frame)."""
    overlay = Image.new("RGBA", img.size, (0, 0, 0, 140))
    out = Image.alpha_composite(img.convert("RGBA"), overlay)
    draw = ImageDraw.Draw(out)
    left, top, right, bottom = draw.textbbox((0, 0), text)
    draw.text(
        ((out.width - (right - left)) // 2, (out.height - (bottom - top)) // 2),
        text,
        fill=(240, 240, 250, 255),
    )
    return out


class TextureRenderer:
    resolution: int
    gap_percent: float
    color_map: ColorMap

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        gap_percent: float = DEFAULT_GAP_PERCENT,
        color_map: Optional[ColorMap] = None,
    ):
        self.resolution = resolution
        self.gap_percent = gap_percent
        self.color_map = color_map or DEFAULT_COLOR_MAP

    def render(self, grid: CellGrid) -> Image.Image:
        return render(
            grid,
            resolution=self.resolution,
            gap_percent=self.gap_percent,
            color_map=self.color_map,
        )

    __call__ = render
