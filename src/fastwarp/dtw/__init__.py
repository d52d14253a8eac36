# src/fastwarp/dtw/__init__.py
from __future__ import annotations

"""
DTW subpackage = exact engine + FastDTW multiresolution driver.

Keep this import-light: numpy only.
"""

from .align import AlignResult, align, exact_align, fast_align
from .coarsen import coarsen
from .engine import solve
from .fast import fast_dtw, resolution_levels
from .metric import METRICS, abs_diff, resolve_metric, squared_diff
from .window import FullGrid, Window, expand_window

__all__ = [
    "AlignResult",
    "align",
    "exact_align",
    "fast_align",
    "coarsen",
    "solve",
    "fast_dtw",
    "resolution_levels",
    "METRICS",
    "abs_diff",
    "squared_diff",
    "resolve_metric",
    "FullGrid",
    "Window",
    "expand_window",
]
