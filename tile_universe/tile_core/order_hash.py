"""
Deterministic fingerprints for receipts and determinism checks.

Provides:
- hash64: SHA-256 canonical hash truncated to 64-bit int
- bitmap_hash: hash64 over a bitmap's shape and packed pixels

No use of Python's built-in hash() (salted per process).
"""

import hashlib
import json
from typing import Any

import numpy as np

from .types import Bitmap


def _truncate(sha) -> int:
    return int.from_bytes(sha.digest()[:8], byteorder="big", signed=False)


def hash64(obj: Any) -> int:
    """
    Deterministic 64-bit hash of a JSON-serializable object.

    Canonical JSON (sorted keys, compact separators) is hashed with SHA-256
    and the first 8 bytes are returned as an unsigned int.

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})
        True
    """
    canonical_json = json.dumps(obj, sort_keys=True, separators=(",", ":"))
    return _truncate(hashlib.sha256(canonical_json.encode("utf-8")))


def bitmap_hash(bitmap: Bitmap) -> int:
    """
    Deterministic 64-bit hash of a boolean bitmap.

    The shape is hashed along with the packed bits so bitmaps with the same
    pixel stream but different dimensions differ.
    """
    sha = hashlib.sha256()
    sha.update(json.dumps(list(bitmap.shape)).encode("utf-8"))
    sha.update(np.packbits(np.asarray(bitmap, dtype=bool)).tobytes())
    return _truncate(sha)
