"""
Motif search over the composed image.

Provides:
- Motif: immutable set of required pixel offsets
- SEA_MONSTER: the built-in motif
- find_occurrences(image, motif): anchors where the motif matches
- scan(image, motif): pick the image orientation containing the motif and
  compute roughness

The composed image has an unknown global orientation. The motif appears in
exactly one of the 8 orientations, so the first orientation (enumeration
order) with any match is taken.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .errors import MalformedMotifError, MotifNotFoundError
from .orientation import all_orientations
from .types import Bitmap, Offset, Orientation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Motif:
    """
    Set of (row, col) offsets that must all be set at a matching anchor.

    Offsets are normalised so the minimum row and column are both 0.
    """
    offsets: frozenset[Offset]
    height: int
    width: int

    @classmethod
    def from_offsets(cls, offsets: Iterable[Offset]) -> "Motif":
        offsets = list(offsets)
        if not offsets:
            raise MalformedMotifError("Motif must have at least one pixel")
        min_row = min(r for r, _ in offsets)
        min_col = min(c for _, c in offsets)
        normalised = frozenset((r - min_row, c - min_col) for r, c in offsets)
        height = max(r for r, _ in normalised) + 1
        width = max(c for _, c in normalised) + 1
        return cls(normalised, height, width)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Motif":
        """Parse a motif drawn with '#' for required pixels (any other char is free)."""
        return cls.from_offsets(
            (r, c)
            for r, line in enumerate(lines)
            for c, char in enumerate(line)
            if char == "#"
        )

    def __len__(self) -> int:
        return len(self.offsets)


SEA_MONSTER = Motif.from_lines([
    "                  # ",
    "#    ##    ##    ###",
    " #  #  #  #  #  #   ",
])


@dataclass
class MotifScan:
    """
    Result of scanning the composed image.

    - orientation: orientation of the composed image that contains the motif
    - image: the composed image in that orientation
    - anchors: top-left anchor (row, col) of every occurrence
    - roughness: set pixels minus occurrences × motif size
    """
    orientation: Orientation
    image: Bitmap
    anchors: list[Offset]
    roughness: int

    @property
    def occurrences(self) -> int:
        return len(self.anchors)


def find_occurrences(image: Bitmap, motif: Motif) -> list[Offset]:
    """
    Anchors (row, col) where every motif offset lies in bounds and is set.

    Args:
        image: Bitmap to search (one fixed orientation)
        motif: Motif to look for

    Returns:
        Anchors in row-major order
    """
    rows, cols = image.shape
    anchor_rows = rows - motif.height + 1
    anchor_cols = cols - motif.width + 1
    if anchor_rows <= 0 or anchor_cols <= 0:
        return []

    # matches[r, c] is True iff every offset is set for anchor (r, c)
    matches = np.ones((anchor_rows, anchor_cols), dtype=bool)
    for dr, dc in motif.offsets:
        matches &= image[dr:dr + anchor_rows, dc:dc + anchor_cols]

    return [(int(r), int(c)) for r, c in np.argwhere(matches)]


def scan(image: Bitmap, motif: Motif = SEA_MONSTER) -> MotifScan:
    """
    Find the orientation containing the motif and compute roughness.

    Args:
        image: Composed image (unknown global orientation)
        motif: Motif to look for

    Returns:
        MotifScan for the first orientation with at least one occurrence

    Raises:
        MotifNotFoundError: If no orientation contains the motif
    """
    for orientation, oriented in all_orientations(image):
        anchors = find_occurrences(oriented, motif)
        if anchors:
            roughness = int(np.count_nonzero(oriented)) - len(anchors) * len(motif)
            logger.info(
                "Found %d motif occurrence(s) in orientation %s", len(anchors), orientation
            )
            return MotifScan(
                orientation=orientation,
                image=oriented,
                anchors=anchors,
                roughness=roughness,
            )

    raise MotifNotFoundError("No orientation of the image contains the motif")
