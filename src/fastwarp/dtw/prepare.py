# src/fastwarp/dtw/prepare.py
from __future__ import annotations

from typing import Any

import numpy as np

from fastwarp.errors import InvalidInputError


def as_sequence(values: Any, *, name: str = "x") -> np.ndarray:
    """
    Coerce a 1-D array-like into a contiguous float32 array.

    Raises InvalidInputError for non 1-D input, empty input, or any NaN/inf sample.
    No imputation: alignment over made-up samples would hide upstream problems.
    """
    try:
        arr = np.asarray(values, dtype=np.float32)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name}: cannot convert to float32 ({e})") from e

    if arr.ndim != 1:
        raise InvalidInputError(f"{name} must be 1-D (got shape {arr.shape})")
    if arr.size == 0:
        raise InvalidInputError(f"{name} is empty")

    fin = np.isfinite(arr)
    if not fin.all():
        n_bad = int((~fin).sum())
        first = int(np.argmin(fin))
        raise InvalidInputError(f"{name} has {n_bad} non-finite samples (first at index {first})")

    return np.ascontiguousarray(arr)


def check_radius(radius: Any) -> int:
    if isinstance(radius, bool) or not isinstance(radius, (int, np.integer)):
        raise InvalidInputError(f"radius must be an integer, got {type(radius).__name__}")
    r = int(radius)
    if r < 0:
        raise InvalidInputError("radius must be >= 0")
    return r
