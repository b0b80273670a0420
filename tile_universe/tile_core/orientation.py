"""
D4 orientations of square bitmaps.

Provides:
- The 8 D4 transformations (4 rotations + 4 flips) on square numpy bitmaps
- apply_orientation(bitmap, name): dispatch by orientation name
- all_orientations(bitmap): every orientation in enumeration order
- Edge helpers used for border matching

Every transformation returns a fresh array; the source is never modified.
"""

from typing import Iterator

import numpy as np

from .types import Bitmap, Orientation


# ==============================================================================
# D4 Group Operations (8 transformations)
# ==============================================================================

def identity(bitmap: Bitmap) -> Bitmap:
    """(i, j) -> (i, j)."""
    return bitmap.copy()


def rot90(bitmap: Bitmap) -> Bitmap:
    """
    Rotate 90° clockwise.

    result[j][L-1-i] = bitmap[i][j]
    """
    return np.rot90(bitmap, k=-1).copy()


def rot180(bitmap: Bitmap) -> Bitmap:
    """Rotate 180°."""
    return bitmap[::-1, ::-1].copy()


def rot270(bitmap: Bitmap) -> Bitmap:
    """
    Rotate 270° clockwise (= 90° counterclockwise).

    result[L-1-j][i] = bitmap[i][j]
    """
    return np.rot90(bitmap, k=1).copy()


def flip_h(bitmap: Bitmap) -> Bitmap:
    """Flip horizontal (left-right)."""
    return bitmap[:, ::-1].copy()


def flip_v(bitmap: Bitmap) -> Bitmap:
    """Flip vertical (top-bottom)."""
    return bitmap[::-1, :].copy()


def flip_diag_main(bitmap: Bitmap) -> Bitmap:
    """Flip over main diagonal (top-left to bottom-right), i.e. transpose."""
    return bitmap.T.copy()


def flip_diag_anti(bitmap: Bitmap) -> Bitmap:
    """
    Flip over anti-diagonal (top-right to bottom-left).

    result[L-1-j][L-1-i] = bitmap[i][j]
    """
    return bitmap[::-1, ::-1].T.copy()


# D4 group in enumeration order; motif scanning takes the first match
D4_TRANSFORMATIONS = {
    "identity": identity,
    "rot90": rot90,
    "rot180": rot180,
    "rot270": rot270,
    "flip_h": flip_h,
    "flip_v": flip_v,
    "flip_diag_main": flip_diag_main,
    "flip_diag_anti": flip_diag_anti,
}

ORIENTATIONS: tuple[Orientation, ...] = tuple(D4_TRANSFORMATIONS)


def apply_orientation(bitmap: Bitmap, orientation: Orientation) -> Bitmap:
    """
    Apply one named D4 orientation to a square bitmap.

    Args:
        bitmap: Square L×L bitmap
        orientation: One of ORIENTATIONS

    Returns:
        New L×L bitmap

    Raises:
        ValueError: If the orientation name is unknown
    """
    try:
        transform = D4_TRANSFORMATIONS[orientation]
    except KeyError:
        raise ValueError(f"Unknown orientation: {orientation}") from None
    return transform(bitmap)


def all_orientations(bitmap: Bitmap) -> Iterator[tuple[Orientation, Bitmap]]:
    """Yield (name, transformed bitmap) for all 8 orientations in order."""
    for name, transform in D4_TRANSFORMATIONS.items():
        yield name, transform(bitmap)


# ==============================================================================
# Edges
# ==============================================================================

def top_edge(bitmap: Bitmap) -> Bitmap:
    return bitmap[0, :]


def bottom_edge(bitmap: Bitmap) -> Bitmap:
    return bitmap[-1, :]


def left_edge(bitmap: Bitmap) -> Bitmap:
    return bitmap[:, 0]


def right_edge(bitmap: Bitmap) -> Bitmap:
    return bitmap[:, -1]


def edge_key(edge: Bitmap) -> bytes:
    """Hashable key for an edge (exact pixel equality)."""
    return np.ascontiguousarray(edge, dtype=bool).tobytes()
