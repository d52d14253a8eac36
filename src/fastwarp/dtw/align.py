# src/fastwarp/dtw/align.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from fastwarp.dtw.engine import solve
from fastwarp.dtw.fast import fast_dtw
from fastwarp.dtw.metric import Metric, resolve_metric
from fastwarp.dtw.prepare import as_sequence, check_radius
from fastwarp.dtw.window import Coord
from fastwarp.errors import InvalidInputError


@dataclass(frozen=True)
class AlignResult:
    dist: float
    path: np.ndarray  # (K,2) int64, start to end

    @property
    def steps(self) -> int:
        return int(self.path.shape[0])

    @property
    def dist_per_step(self) -> float:
        return float(self.dist / max(1, self.steps))

    def pairs(self) -> List[Coord]:
        return [(int(i), int(j)) for i, j in self.path.tolist()]


def _path_array(path: Sequence[Coord]) -> np.ndarray:
    arr = np.asarray(path, dtype=np.int64)
    return arr.reshape(-1, 2)


def fast_align(x: Any, y: Any, radius: int = 1) -> Tuple[float, np.ndarray]:
    """
    Approximate DTW alignment in O(N * radius) time and memory.

    Returns:
      distance (float), path (Kx2 int64 array of (i, j) indices)

    Notes:
    - Always uses the absolute-difference metric.
    - radius >= min(len(x), len(y)) collapses to exact DTW.
    """
    r = check_radius(radius)
    xx = as_sequence(x, name="x")
    yy = as_sequence(y, name="y")
    distance, path = fast_dtw(xx, yy, r)
    return float(distance), _path_array(path)


def exact_align(x: Any, y: Any, metric: Union[None, str, Metric] = None) -> Tuple[float, np.ndarray]:
    """
    Exact O(len(x) * len(y)) DTW with a pluggable scalar metric.

    `metric` may be None (absolute difference), a registered name ("abs", "sq")
    or any callable (a, b) -> non-negative float.
    """
    dist = resolve_metric(metric)
    xx = as_sequence(x, name="x")
    yy = as_sequence(y, name="y")
    distance, path = solve(xx, yy, None, dist)
    return float(distance), _path_array(path)


def align(
    x: Any,
    y: Any,
    *,
    radius: Optional[int] = 1,
    metric: Union[None, str, Metric] = None,
) -> AlignResult:
    """
    Convenience wrapper used by the CLI and benchmark.

    radius=None runs exact DTW with `metric`; otherwise FastDTW (metric must be
    the default, since the multiresolution path always uses |a - b|).
    """
    if radius is None:
        d, p = exact_align(x, y, metric)
    else:
        if metric is not None and resolve_metric(metric) is not resolve_metric(None):
            raise InvalidInputError("fast alignment only supports the default 'abs' metric; use exact mode")
        d, p = fast_align(x, y, radius)
    return AlignResult(dist=d, path=p)
