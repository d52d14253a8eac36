# src/fastwarp/dtw/fast.py
from __future__ import annotations

from typing import List, Tuple

import numpy as np

from fastwarp.dtw.coarsen import coarsen
from fastwarp.dtw.engine import solve
from fastwarp.dtw.metric import abs_diff
from fastwarp.dtw.prepare import check_radius
from fastwarp.dtw.window import Coord, expand_window
from fastwarp.errors import BufferAllocationError


def _is_base(len_x: int, len_y: int, radius: int) -> bool:
    return min(len_x, len_y) < radius + 2


def resolution_levels(len_x: int, len_y: int, radius: int) -> int:
    """Number of resolutions fast_dtw visits, the exact base level included."""
    radius = check_radius(radius)
    n = 1
    while not _is_base(len_x, len_y, radius):
        len_x //= 2
        len_y //= 2
        n += 1
    return n


def fast_dtw(x: np.ndarray, y: np.ndarray, radius: int, *, level: int = 0) -> Tuple[float, List[Coord]]:
    """
    Multiresolution DTW (FastDTW).

    BASE:    min(len) < radius + 2 -> exact DTW on the full grid.
    RECURSE: coarsen both inputs, solve the coarse pair, project its path into a
             window at this resolution, solve again inside the window.

    Inputs are expected to be validated float32 arrays (see dtw.prepare).
    `level` counts recursion depth from the full resolution (0) and is only
    used for error context.
    """
    len_x = int(len(x))
    len_y = int(len(y))

    if _is_base(len_x, len_y, radius):
        return solve(x, y, None, abs_diff, level=level)

    try:
        x_half = coarsen(x)
        y_half = coarsen(y)
    except MemoryError as e:
        raise BufferAllocationError("coarsened sequences", level=level + 1) from e

    # only the coarse path is reused; its distance is meaningless at this resolution
    _, coarse_path = fast_dtw(x_half, y_half, radius, level=level + 1)
    del x_half, y_half

    window = expand_window(coarse_path, len_x, len_y, radius, level=level)
    del coarse_path

    distance, path = solve(x, y, window, abs_diff, level=level)
    del window
    return distance, path
