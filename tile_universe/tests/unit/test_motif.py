"""
Unit tests for tile_core/motif.py.

Acceptance criteria:
- Motif offsets normalised to a (0, 0) origin
- Anchors only where every offset is in bounds and set
- First orientation with a match wins; roughness = set pixels - hits × size
"""

import numpy as np
import pytest

from tile_core.errors import MalformedMotifError, MotifNotFoundError, TilingError
from tile_core.motif import SEA_MONSTER, Motif, find_occurrences, scan


def draw(image, motif, row, col):
    for dr, dc in motif.offsets:
        image[row + dr, col + dc] = True


class TestMotif:
    """Motif construction."""

    def test_sea_monster(self):
        assert len(SEA_MONSTER) == 15
        assert SEA_MONSTER.height == 3
        assert SEA_MONSTER.width == 20
        assert (0, 18) in SEA_MONSTER.offsets
        assert (2, 16) in SEA_MONSTER.offsets

    def test_from_lines_normalises(self):
        motif = Motif.from_lines(["", "  #.", "  ##"])
        assert motif.offsets == frozenset({(0, 0), (1, 0), (1, 1)})
        assert (motif.height, motif.width) == (2, 2)

    def test_from_offsets(self):
        motif = Motif.from_offsets([(5, 5), (6, 7)])
        assert motif.offsets == frozenset({(0, 0), (1, 2)})

    def test_empty(self):
        with pytest.raises(MalformedMotifError, match="at least one pixel"):
            Motif.from_lines(["...", "   "])

    def test_empty_is_tiling_error(self):
        with pytest.raises(TilingError):
            Motif.from_offsets([])


class TestFindOccurrences:
    """Anchors in a single orientation."""

    def test_single(self):
        image = np.zeros((6, 24), dtype=bool)
        draw(image, SEA_MONSTER, 1, 2)
        assert find_occurrences(image, SEA_MONSTER) == [(1, 2)]

    def test_at_far_corner(self):
        image = np.zeros((3, 20), dtype=bool)
        draw(image, SEA_MONSTER, 0, 0)
        assert find_occurrences(image, SEA_MONSTER) == [(0, 0)]

    def test_image_smaller_than_motif(self):
        image = np.ones((2, 30), dtype=bool)
        assert find_occurrences(image, SEA_MONSTER) == []

    def test_all_set(self):
        motif = Motif.from_lines(["##"])
        image = np.ones((2, 3), dtype=bool)
        assert find_occurrences(image, motif) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_partial_does_not_match(self):
        image = np.zeros((6, 24), dtype=bool)
        draw(image, SEA_MONSTER, 1, 2)
        image[1, 20] = False  # (0, 18) offset
        assert find_occurrences(image, SEA_MONSTER) == []


class TestScan:
    """Orientation search and roughness."""

    def test_upright(self):
        image = np.zeros((24, 24), dtype=bool)
        draw(image, SEA_MONSTER, 0, 0)
        draw(image, SEA_MONSTER, 10, 3)
        image[20, 20] = True
        image[23, 0] = True

        result = scan(image)
        assert result.orientation == "identity"
        assert result.occurrences == 2
        assert result.anchors == [(0, 0), (10, 3)]
        assert result.roughness == 2

    def test_rotated_image(self):
        upright = np.zeros((24, 24), dtype=bool)
        draw(upright, SEA_MONSTER, 4, 1)
        upright[22, 22] = True
        rotated = np.rot90(upright, -1)

        result = scan(rotated)
        assert result.orientation == "rot270"
        assert np.array_equal(result.image, upright)
        assert result.anchors == [(4, 1)]
        assert result.roughness == 1

    def test_mirrored_image(self):
        upright = np.zeros((24, 24), dtype=bool)
        draw(upright, SEA_MONSTER, 2, 2)
        result = scan(upright[:, ::-1])
        assert result.orientation == "flip_h"
        assert result.roughness == 0

    def test_not_found(self):
        with pytest.raises(MotifNotFoundError):
            scan(np.zeros((24, 24), dtype=bool))

    def test_input_not_modified(self):
        image = np.zeros((24, 24), dtype=bool)
        draw(image, SEA_MONSTER, 0, 0)
        image.setflags(write=False)
        before = image.copy()
        scan(image)
        assert np.array_equal(image, before)

    def test_custom_motif(self):
        motif = Motif.from_lines(["#.", "##"])
        image = np.zeros((4, 4), dtype=bool)
        draw(image, motif, 1, 1)
        image[0, 3] = True
        result = scan(image, motif)
        assert result.orientation == "identity"
        assert result.roughness == 1
