# src/fastwarp/dtw/coarsen.py
from __future__ import annotations

import numpy as np


def coarsen(x: np.ndarray) -> np.ndarray:
    """
    Halve the resolution of x by averaging disjoint pairs.

    Output length is len(x) // 2; a trailing unpaired sample is dropped.
    Always returns a fresh float32 array (never a view of x).
    """
    x = np.asarray(x, dtype=np.float32)
    n = (x.size // 2) * 2
    # float32 in, float32 out; the pair sum is formed in float32 as well
    return (x[0:n:2] + x[1:n:2]) * np.float32(0.5)
