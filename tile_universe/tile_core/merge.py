"""
Compose the full image from an assembled grid.

Adjacent tiles share identical borders, so each tile contributes only its
interior (border of width 1 stripped on every side).
"""

import numpy as np

from .orientation import apply_orientation
from .tileset import TileSet
from .types import Bitmap, TileGrid

BORDER = 1


def merge(grid: TileGrid, tileset: TileSet, side_length: int) -> Bitmap:
    """
    Build the composed image.

    Args:
        grid: Assembled placements
        tileset: Source tiles
        side_length: Tiles per grid side

    Returns:
        Read-only square bitmap of side side_length * (N - 2)
    """
    inner = tileset.tile_size - 2 * BORDER
    image = np.zeros((side_length * inner, side_length * inner), dtype=bool)

    for row, grid_row in enumerate(grid):
        for col, (tile_id, orientation) in enumerate(grid_row):
            oriented = apply_orientation(tileset.get(tile_id), orientation)
            image[
                row * inner:(row + 1) * inner,
                col * inner:(col + 1) * inner,
            ] = oriented[BORDER:-BORDER, BORDER:-BORDER]

    image.setflags(write=False)
    return image


def render(bitmap: Bitmap) -> str:
    """Text form of a bitmap: '#' for set pixels, '.' otherwise."""
    return "\n".join("".join("#" if pixel else "." for pixel in row) for row in bitmap)
