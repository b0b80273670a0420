"""
Grid assembly: place every tile by walking the neighbor table.

Algorithm:
1. Take the first corner (ascending id) in the first orientation that has
   both a right and a down candidate; this is the top-left cell.
2. Fill cells in row-major order. Cell (r, c>0) is the right neighbor of
   (r, c-1), and must also be the down neighbor of (r-1, c) when r > 0.
   Cell (r>0, 0) is the down neighbor of (r-1, 0).
3. Cross-check that the four grid corners hold the detected corner tiles.
"""

import logging
from typing import Optional

from .errors import AmbiguousTilingError, BrokenChainError, InvalidTilingError
from .orientation import ORIENTATIONS
from .types import NeighborTable, Neighbors, Placement, TileGrid

logger = logging.getLogger(__name__)


def _candidates(table: NeighborTable, placement: Placement, direction: str) -> list[Placement]:
    return table.get(placement, Neighbors()).candidates(direction)


def find_start(corner_id: int, table: NeighborTable) -> Placement:
    """
    Orientation of a corner tile that puts it at the top-left of the grid.

    Raises:
        BrokenChainError: If no orientation has both a right and a down neighbor
    """
    for orientation in ORIENTATIONS:
        placement = Placement(corner_id, orientation)
        neighbors = table.get(placement)
        if neighbors is not None and neighbors.right and neighbors.down:
            return placement
    raise BrokenChainError(f"Could not find neighbors of corner {corner_id}")


def _next_cell(
    table: NeighborTable,
    left: Optional[Placement],
    above: Optional[Placement],
    placed: set[int],
    row: int,
    col: int,
) -> Placement:
    """
    Resolve the single placement that fits next to `left` and below `above`.

    Only already placed cells constrain the choice; there is no backtracking,
    so a first-row or first-column cell with several candidates is an error.
    """
    if left is not None:
        candidates = _candidates(table, left, "right")
        if not candidates:
            raise BrokenChainError(f"Could not find right neighbor of {left}")
        if above is not None:
            below = set(_candidates(table, above, "down"))
            candidates = [candidate for candidate in candidates if candidate in below]
    else:
        candidates = _candidates(table, above, "down")
        if not candidates:
            raise BrokenChainError(f"Could not find down neighbor of {above}")

    candidates = [candidate for candidate in candidates if candidate.tile_id not in placed]

    if not candidates:
        raise BrokenChainError(f"No consistent tile for cell ({row}, {col})")
    if len(candidates) > 1:
        raise AmbiguousTilingError(
            f"Cell ({row}, {col}) has {len(candidates)} candidates: {candidates}"
        )
    return candidates[0]


def assemble(corner_ids: list[int], table: NeighborTable, side_length: int) -> TileGrid:
    """
    Place every tile at its grid position and orientation.

    Args:
        corner_ids: Corner tile ids from find_corners
        table: Neighbor table from resolve
        side_length: Tiles per grid side

    Returns:
        TileGrid of side_length × side_length placements

    Raises:
        BrokenChainError: A required neighbor is missing
        AmbiguousTilingError: A cell has more than one consistent candidate
        InvalidTilingError: Grid corners disagree with corner_ids

    Acceptance:
        - Every tile id appears exactly once
        - Horizontal and vertical chains are both consistent
    """
    if not corner_ids:
        raise InvalidTilingError("No corner tiles to start from")

    start = find_start(sorted(corner_ids)[0], table)
    logger.debug("Starting assembly from %s", start)

    grid: TileGrid = []
    placed = {start.tile_id}

    for row in range(side_length):
        grid_row = []
        for col in range(side_length):
            if row == 0 and col == 0:
                grid_row.append(start)
                continue

            left = grid_row[col - 1] if col > 0 else None
            above = grid[row - 1][col] if row > 0 else None
            placement = _next_cell(table, left, above, placed, row, col)

            placed.add(placement.tile_id)
            grid_row.append(placement)
        grid.append(grid_row)

    found = set(grid_corners(grid))
    if found != set(corner_ids):
        raise InvalidTilingError(
            f"Grid corners {sorted(found)} disagree with corner tiles {sorted(corner_ids)}"
        )

    logger.info("Assembled %d×%d grid", side_length, side_length)
    return grid


def grid_corners(grid: TileGrid) -> list[int]:
    """Tile ids at (0,0), (0,S-1), (S-1,0), (S-1,S-1)."""
    return [
        grid[0][0].tile_id,
        grid[0][-1].tile_id,
        grid[-1][0].tile_id,
        grid[-1][-1].tile_id,
    ]


def grid_layout(grid: TileGrid) -> list[list[list]]:
    """JSON-friendly [tile_id, orientation] layout for receipts."""
    return [[[placement.tile_id, placement.orientation] for placement in row] for row in grid]
