"""
End-to-end reassembly: tiles -> neighbor table -> corners -> grid -> image -> motif scan.
"""

import logging
from dataclasses import dataclass
from typing import Mapping

from .adjacency import resolve
from .assembly import assemble
from .corners import corner_checksum, find_corners
from .merge import merge
from .motif import SEA_MONSTER, Motif, MotifScan, scan
from .tileset import RawGrid, TileSet
from .types import Bitmap, NeighborTable, TileGrid

logger = logging.getLogger(__name__)


@dataclass
class ReassemblyResult:
    """All intermediate and final outputs of one reassembly run."""
    tileset: TileSet
    table: NeighborTable
    corners: list[int]
    checksum: int
    grid: TileGrid
    image: Bitmap
    scan: MotifScan

    @property
    def roughness(self) -> int:
        return self.scan.roughness


def reassemble(
    tiles: Mapping[int, RawGrid],
    motif: Motif = SEA_MONSTER,
    strict: bool = False,
) -> ReassemblyResult:
    """
    Run the full pipeline on raw tiles.

    Args:
        tiles: tile id -> N×N boolean grid
        motif: Motif to search for in the composed image
        strict: Fail on the first ambiguous edge while resolving neighbors

    Returns:
        ReassemblyResult

    Raises:
        TilingError: Any stage failure (see errors.py); nothing partial is
            returned
    """
    tileset = TileSet.load(tiles)
    side_length = tileset.side_length()
    logger.info("Loaded %r, grid side %d", tileset, side_length)

    table = resolve(tileset, strict=strict)
    corners = find_corners(table)
    checksum = corner_checksum(corners)

    grid = assemble(corners, table, side_length)
    image = merge(grid, tileset, side_length)
    logger.debug("Composed image %d×%d", *image.shape)

    motif_scan = scan(image, motif)

    return ReassemblyResult(
        tileset=tileset,
        table=table,
        corners=corners,
        checksum=checksum,
        grid=grid,
        image=image,
        scan=motif_scan,
    )
