# src/fastwarp/bench/synthetic.py
from __future__ import annotations

from typing import Tuple

import numpy as np

from fastwarp.errors import InvalidInputError
from fastwarp.utils.hash_utils import stable_hash32


def seed_for(label: str) -> int:
    return stable_hash32(label)


def random_walk(n: int, seed: int) -> np.ndarray:
    """Cumulative sum of N(0,1) steps, float32."""
    if n <= 0:
        raise InvalidInputError("n must be > 0")
    rng = np.random.default_rng(int(seed))
    return np.cumsum(rng.standard_normal(int(n))).astype(np.float32)


def warped_pair(n: int, seed: int, *, stretch: float = 0.25, noise: float = 0.05) -> Tuple[np.ndarray, np.ndarray]:
    """
    A base signal (two sines + noise) and a non-linearly time-warped copy.

    The copy has length round(n * (1 + stretch)) and is produced by resampling the
    base along a strictly increasing warp t -> t + a*sin(pi*t), so DTW has a real
    alignment to recover.
    """
    if n < 2:
        raise InvalidInputError("n must be >= 2")
    if stretch <= -1.0:
        raise InvalidInputError("stretch must be > -1")

    rng = np.random.default_rng(int(seed))
    t = np.linspace(0.0, 1.0, int(n))
    base = np.sin(2.0 * np.pi * 3.0 * t) + 0.5 * np.sin(2.0 * np.pi * 7.0 * t + 0.3)
    base = base + noise * rng.standard_normal(t.size)

    m = max(2, int(round(n * (1.0 + stretch))))
    u = np.linspace(0.0, 1.0, m)
    # |a| < 1/pi keeps the warp monotone
    a = 0.25 / np.pi
    warp = np.clip(u + a * np.sin(np.pi * u), 0.0, 1.0)
    warped = np.interp(warp, t, base) + noise * rng.standard_normal(m)

    return base.astype(np.float32), warped.astype(np.float32)
