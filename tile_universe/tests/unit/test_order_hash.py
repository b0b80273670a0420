"""
Unit tests for tile_core/order_hash.py.

Acceptance criteria:
- hash64 stable across calls and independent of dict key order
- bitmap_hash depends on pixels and shape only
"""

import numpy as np

from tile_core.order_hash import bitmap_hash, hash64


class TestHash64:
    """Test deterministic hashing with SHA-256."""

    def test_determinism(self):
        obj = [[1951, "identity"], [2311, "rot90"]]
        assert hash64(obj) == hash64(obj)

    def test_dict_order_irrelevance(self):
        """Dict key order doesn't affect hash (canonical JSON)."""
        dict1 = {"a": 1, "b": 2, "c": 3}
        dict2 = {"c": 3, "a": 1, "b": 2}
        assert hash64(dict1) == hash64(dict2)

    def test_different_inputs_different_hashes(self):
        assert hash64([1, 2, 3]) != hash64([1, 2, 4])

    def test_returns_64bit_int(self):
        h = hash64("test")
        assert 0 <= h < 2**64


class TestBitmapHash:
    """Fingerprints of boolean bitmaps."""

    def test_equal_bitmaps(self):
        a = np.eye(5, dtype=bool)
        b = np.eye(5, dtype=bool)
        assert bitmap_hash(a) == bitmap_hash(b)

    def test_single_pixel_changes_hash(self):
        a = np.eye(5, dtype=bool)
        b = a.copy()
        b[0, 4] = True
        assert bitmap_hash(a) != bitmap_hash(b)

    def test_shape_matters(self):
        assert bitmap_hash(np.zeros((2, 8), dtype=bool)) != bitmap_hash(np.zeros((4, 4), dtype=bool))

    def test_memory_layout_irrelevant(self):
        a = np.eye(4, dtype=bool)[:, ::-1]
        b = np.ascontiguousarray(a)
        assert bitmap_hash(a) == bitmap_hash(b)

    def test_returns_64bit_int(self):
        h = bitmap_hash(np.ones((3, 3), dtype=bool))
        assert 0 <= h < 2**64
