"""
Loader for the text tile format.

Tiles are blocks separated by blank lines:

    Tile 2311:
    ..##.#..#.
    ##..#.....
    ...

'#' is a set pixel, '.' a clear one.
"""

import re
from pathlib import Path
from typing import Union

import numpy as np

from .errors import MalformedTileError
from .types import Bitmap

HEADER_RE = re.compile(r"^Tile (\d+):$")
PIXELS = {"#": True, ".": False}


def _finish(tiles: dict[int, Bitmap], tile_id: int, rows: list[list[bool]]) -> None:
    if not rows:
        raise MalformedTileError(f"Tile {tile_id} has no rows")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MalformedTileError(f"Tile {tile_id} has rows of differing length")
    tiles[tile_id] = np.array(rows, dtype=bool)


def parse_tiles(text: str) -> dict[int, Bitmap]:
    """
    Parse tile blocks from text.

    Args:
        text: Full input text

    Returns:
        Dict mapping tile id -> bitmap, in input order

    Raises:
        MalformedTileError: Bad header, pixel rows without a header,
            unknown pixel characters, duplicate ids or ragged rows
    """
    tiles: dict[int, Bitmap] = {}
    tile_id = None
    rows: list[list[bool]] = []

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()

        if not line:
            if tile_id is not None:
                _finish(tiles, tile_id, rows)
                tile_id, rows = None, []
            continue

        if line.startswith("Tile"):
            match = HEADER_RE.match(line)
            if match is None:
                raise MalformedTileError(
                    f"Line {line_no}: {line!r} does not match tile ID line pattern"
                )
            if tile_id is not None:
                _finish(tiles, tile_id, rows)
                rows = []
            tile_id = int(match.group(1))
            if tile_id in tiles:
                raise MalformedTileError(f"Line {line_no}: duplicate tile {tile_id}")
            continue

        if tile_id is None:
            raise MalformedTileError(f"Line {line_no}: tile definition without tile ID line")

        try:
            rows.append([PIXELS[char] for char in line])
        except KeyError as err:
            raise MalformedTileError(
                f"Line {line_no}: unexpected pixel character {err.args[0]!r}"
            ) from None

    if tile_id is not None:
        _finish(tiles, tile_id, rows)

    return tiles


def load_tiles_file(path: Union[str, Path]) -> dict[int, Bitmap]:
    """Read and parse a tile file."""
    return parse_tiles(Path(path).read_text())
