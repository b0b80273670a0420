"""
Core type definitions for the tile reassembly engine.

Bitmaps are numpy boolean arrays; placements pair a tile id with one of the
eight D4 orientation names.
"""

from dataclasses import dataclass, field

import numpy as np

# Bitmap representation: Bitmap[r, c] = pixel set
Bitmap = np.ndarray

# Orientation name, one of orientation.ORIENTATIONS
Orientation = str

# Motif offset (row, col) relative to the anchor
Offset = tuple[int, int]


@dataclass(frozen=True, order=True)
class Placement:
    """A tile in a specific orientation."""
    tile_id: int
    orientation: Orientation

    def __iter__(self):
        """Allow tuple unpacking: tile_id, orientation = placement"""
        return iter((self.tile_id, self.orientation))


@dataclass
class Neighbors:
    """
    Candidate neighbors of one placement.

    - right: placements whose left column equals this placement's right column
    - down: placements whose top row equals this placement's bottom row

    Both lists hold every candidate found; a well-formed puzzle has at most
    one entry in each.
    """
    right: list[Placement] = field(default_factory=list)
    down: list[Placement] = field(default_factory=list)

    def candidates(self, direction: str) -> list[Placement]:
        if direction == "right":
            return self.right
        if direction == "down":
            return self.down
        raise ValueError(f"Unknown direction: {direction}")


# Neighbor table: placement -> its right/down candidates
NeighborTable = dict[Placement, Neighbors]

# Assembled grid: TileGrid[r][c] = placement at grid row r, column c
TileGrid = list[list[Placement]]
