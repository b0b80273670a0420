"""
Immutable collection of square tile bitmaps keyed by tile id.

Provides:
- TileSet.load(mapping): validate and freeze raw tile grids
- get / ids / len / iteration
- tile_size (N) and side_length (S = sqrt(tile count))

Validation is fail-fast: any inconsistent grid raises MalformedTileError
before any matching work starts.
"""

import math
import numbers
from typing import Iterator, Mapping, Sequence, Union

import numpy as np

from .errors import InvalidTilingError, MalformedTileError, UnknownTileError
from .types import Bitmap

# Accepted raw grid forms: nested bool sequences or a 2-D array
RawGrid = Union[Sequence[Sequence[bool]], np.ndarray]

# Smallest tile with a non-empty interior once the border is stripped
MIN_TILE_SIZE = 3


def _freeze_bitmap(tile_id: int, grid: RawGrid) -> Bitmap:
    """Convert a raw grid to a read-only square bool array."""
    try:
        raw = np.asarray(grid)
    except ValueError as err:
        # Ragged nested lists
        raise MalformedTileError(f"Tile {tile_id}: grid is not rectangular ({err})") from err

    if raw.ndim != 2:
        raise MalformedTileError(
            f"Tile {tile_id}: expected a 2-D grid, got {raw.ndim} dimension(s)"
        )

    rows, cols = raw.shape
    if rows != cols:
        raise MalformedTileError(f"Tile {tile_id}: grid is {rows}×{cols}, not square")
    if rows < MIN_TILE_SIZE:
        raise MalformedTileError(
            f"Tile {tile_id}: grid is {rows}×{cols}, need at least {MIN_TILE_SIZE}×{MIN_TILE_SIZE}"
        )

    # Pixels must be booleans, or integers restricted to 0/1
    if raw.dtype != np.bool_:
        if raw.dtype.kind not in "iu" or not np.isin(raw, (0, 1)).all():
            raise MalformedTileError(
                f"Tile {tile_id}: pixels must be boolean, got dtype {raw.dtype}"
            )

    bitmap = raw.astype(bool)
    bitmap.setflags(write=False)
    return bitmap


class TileSet:
    """
    Read-only handle over the input tiles.

    All tiles share the same size N. Iteration order is ascending tile id so
    every downstream stage is deterministic.
    """

    def __init__(self, tiles: dict[int, Bitmap], tile_size: int):
        self._tiles = tiles
        self.tile_size = tile_size

    @classmethod
    def load(cls, mapping: Mapping[int, RawGrid]) -> "TileSet":
        """
        Validate raw tile grids and build a TileSet.

        Args:
            mapping: tile id -> N×N boolean grid

        Returns:
            TileSet with frozen bitmaps

        Raises:
            MalformedTileError: Empty input, non-integer or negative id,
                non-square or ragged grid, non-boolean pixels, or tiles of
                differing size
        """
        if not mapping:
            raise MalformedTileError("No tiles given")

        for tile_id in mapping:
            if isinstance(tile_id, bool) or not isinstance(tile_id, numbers.Integral):
                raise MalformedTileError(f"Tile id must be an integer, got {tile_id!r}")

        tiles: dict[int, Bitmap] = {}
        tile_size = None

        for tile_id in sorted(mapping):
            if tile_id < 0:
                raise MalformedTileError(f"Tile id must be unsigned, got {tile_id}")

            bitmap = _freeze_bitmap(tile_id, mapping[tile_id])

            if tile_size is None:
                tile_size = bitmap.shape[0]
            elif bitmap.shape[0] != tile_size:
                raise MalformedTileError(
                    f"Tile {tile_id}: size {bitmap.shape[0]} differs from {tile_size}"
                )

            tiles[int(tile_id)] = bitmap

        return cls(tiles, tile_size)

    def get(self, tile_id: int) -> Bitmap:
        """Return the original bitmap of a tile, or raise UnknownTileError."""
        try:
            return self._tiles[tile_id]
        except KeyError:
            raise UnknownTileError(f"Unknown tile id: {tile_id}") from None

    def ids(self) -> list[int]:
        """Tile ids in ascending order."""
        return list(self._tiles)

    def items(self) -> Iterator[tuple[int, Bitmap]]:
        return iter(self._tiles.items())

    def side_length(self) -> int:
        """
        Number of tiles along one side of the assembled grid.

        Raises:
            InvalidTilingError: If the tile count is not a perfect square
        """
        count = len(self._tiles)
        side = math.isqrt(count)
        if side * side != count:
            raise InvalidTilingError(f"{count} tiles cannot form a square grid")
        return side

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[int]:
        return iter(self._tiles)

    def __contains__(self, tile_id) -> bool:
        return tile_id in self._tiles

    def __repr__(self) -> str:
        return f"TileSet({len(self)} tiles, {self.tile_size}×{self.tile_size})"
