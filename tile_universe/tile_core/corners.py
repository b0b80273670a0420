"""
Corner detection from the neighbor table.

A tile's neighbor ids are the union, over all its orientations, of the tile
ids reachable through right/down candidates plus the tiles that list it as a
candidate. Border tiles touch 3 others, interior tiles 4, and the four grid
corners exactly 2.
"""

import logging
import math
from collections import defaultdict

from .errors import InvalidTilingError
from .types import NeighborTable

logger = logging.getLogger(__name__)


def neighbor_ids(table: NeighborTable) -> dict[int, set[int]]:
    """Map each tile id to the ids of every tile it can border."""
    ids: dict[int, set[int]] = defaultdict(set)
    for placement, neighbors in table.items():
        for other in neighbors.right + neighbors.down:
            ids[placement.tile_id].add(other.tile_id)
            # Reverse link
            ids[other.tile_id].add(placement.tile_id)
    return dict(ids)


def find_corners(table: NeighborTable) -> list[int]:
    """
    Find the four corner tiles.

    Args:
        table: Neighbor table from adjacency.resolve

    Returns:
        The 4 corner tile ids in ascending order

    Raises:
        InvalidTilingError: If the number of corners is not exactly 4
    """
    corners = sorted(
        tile_id for tile_id, others in neighbor_ids(table).items() if len(others) == 2
    )
    if len(corners) != 4:
        raise InvalidTilingError(f"Expected four corners but found {corners}")

    logger.info("Corner tiles: %s", corners)
    return corners


def corner_checksum(corners: list[int]) -> int:
    """Product of the corner tile ids."""
    return math.prod(corners)
