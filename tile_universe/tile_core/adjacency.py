"""
Neighbor table construction by exact border matching.

Provides:
- can_be_neighbors(a, b, direction): single-pair border test
- oriented_tiles(tileset): every tile in all 8 orientations
- resolve(tileset): the full neighbor table

Algorithm:
For every ordered pair of distinct tiles (A, B) and every orientation pair
(opA, opB):
- A's right column == B's left column  => (B, opB) is a right candidate of (A, opA)
- A's bottom row == B's top row        => (B, opB) is a down candidate of (A, opA)

Instead of comparing all O(tiles² × 64) pairs directly, B-side edges are
indexed by their exact pixel content, so each (A, opA) looks up its matches
in one step. The resulting table is the same union of matches.
"""

import logging
from collections import defaultdict

import numpy as np

from .errors import AmbiguousTilingError
from .orientation import (
    all_orientations,
    bottom_edge,
    edge_key,
    left_edge,
    right_edge,
    top_edge,
)
from .tileset import TileSet
from .types import Bitmap, NeighborTable, Neighbors, Placement

logger = logging.getLogger(__name__)

DIRECTIONS = ("right", "down")


def can_be_neighbors(a: Bitmap, b: Bitmap, direction: str) -> bool:
    """
    Test whether oriented bitmap b can sit immediately right of / below a.

    Args:
        a: Oriented bitmap of the first tile
        b: Oriented bitmap of the second tile
        direction: "right" or "down"

    Returns:
        True if the shared border pixels are identical
    """
    if direction == "right":
        return bool(np.array_equal(right_edge(a), left_edge(b)))
    if direction == "down":
        return bool(np.array_equal(bottom_edge(a), top_edge(b)))
    raise ValueError(f"Unknown direction: {direction}")


def oriented_tiles(tileset: TileSet) -> dict[Placement, Bitmap]:
    """Every tile in all 8 orientations, keyed by placement."""
    oriented = {}
    for tile_id, bitmap in tileset.items():
        for orientation, transformed in all_orientations(bitmap):
            oriented[Placement(tile_id, orientation)] = transformed
    return oriented


def _index_edges(oriented: dict[Placement, Bitmap]):
    """Map left-edge and top-edge pixel content to the placements exposing it."""
    by_left = defaultdict(list)
    by_top = defaultdict(list)
    for placement, bitmap in oriented.items():
        by_left[edge_key(left_edge(bitmap))].append(placement)
        by_top[edge_key(top_edge(bitmap))].append(placement)
    return by_left, by_top


def resolve(tileset: TileSet, strict: bool = False) -> NeighborTable:
    """
    Build the neighbor table for every tile in every orientation.

    Only placements with at least one candidate are stored. When a
    placement has several candidates in one direction all of them are kept
    for the assembler to resolve.

    Args:
        tileset: Input tiles
        strict: Raise on the first ambiguous edge instead of keeping all
            candidates

    Returns:
        NeighborTable: placement -> Neighbors(right, down)

    Raises:
        AmbiguousTilingError: strict mode only, when an edge matches more
            than one placement

    Acceptance:
        - Deterministic (tiles visited in ascending id, orientations in order)
        - A tile is never its own neighbor
    """
    oriented = oriented_tiles(tileset)
    by_left, by_top = _index_edges(oriented)

    table: NeighborTable = {}
    ambiguous = 0

    for placement, bitmap in oriented.items():
        right = [
            other
            for other in by_left.get(edge_key(right_edge(bitmap)), [])
            if other.tile_id != placement.tile_id
        ]
        down = [
            other
            for other in by_top.get(edge_key(bottom_edge(bitmap)), [])
            if other.tile_id != placement.tile_id
        ]

        if not right and not down:
            continue

        for direction, candidates in zip(DIRECTIONS, (right, down)):
            if len(candidates) > 1:
                ambiguous += 1
                if strict:
                    raise AmbiguousTilingError(
                        f"{direction} edge of {placement} matches {len(candidates)} "
                        f"placements: {candidates}"
                    )
                logger.debug(
                    "Ambiguous %s edge of %s: %d candidates", direction, placement, len(candidates)
                )

        table[placement] = Neighbors(right=right, down=down)

    logger.info(
        "Resolved neighbor table: %d placements with neighbors, %d ambiguous edges",
        len(table),
        ambiguous,
    )
    return table
