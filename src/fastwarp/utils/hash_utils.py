# src/fastwarp/utils/hash_utils.py
from __future__ import annotations

import hashlib


def stable_hash32(s: str) -> int:
    """
    32-bit hash that is identical across processes (Python's hash() is salted).
    Used to derive RNG seeds from human-readable labels.
    """
    h = hashlib.sha1((s or "").encode("utf-8")).hexdigest()[:8]
    return int(h, 16) & 0xFFFFFFFF
