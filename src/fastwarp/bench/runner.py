# src/fastwarp/bench/runner.py
from __future__ import annotations

import gc
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import numpy as np

from fastwarp.bench.synthetic import seed_for, warped_pair
from fastwarp.config.schema import BenchConfig
from fastwarp.dtw.align import exact_align, fast_align
from fastwarp.dtw.fast import resolution_levels
from fastwarp.errors import InvalidInputError
from fastwarp.utils.config import as_plain_dict
from fastwarp.utils.heartbeat import write_heartbeat


@dataclass(frozen=True)
class BenchRow:
    length: int
    radius: int
    levels: int
    fast_s: float
    fast_dist: float
    path_len: int
    exact_s: Optional[float] = None
    exact_dist: Optional[float] = None
    rel_err: Optional[float] = None


def _best_of(fn: Callable[[], Tuple[float, np.ndarray]], repeats: int) -> Tuple[float, Tuple[float, np.ndarray]]:
    best = float("inf")
    out: Tuple[float, np.ndarray] = (float("nan"), np.empty((0, 2), dtype=np.int64))
    for _ in range(max(1, int(repeats))):
        t0 = time.perf_counter()
        out = fn()
        best = min(best, time.perf_counter() - t0)
    return best, out


def _rel_err(approx: float, exact: float) -> float:
    if exact == 0.0:
        return 0.0 if approx == 0.0 else float("inf")
    return (approx - exact) / exact


def run_benchmark(
    cfg: BenchConfig,
    *,
    heartbeat_path: Optional[Path] = None,
    on_row: Optional[Callable[[BenchRow], None]] = None,
) -> List[BenchRow]:
    """
    Time fast_align (and exact_align when small enough) over cfg.lengths x cfg.radii.

    Each length gets its own deterministic warped pair (seeded from cfg.seed_label
    and the length) so every radius is measured on identical data.
    """
    if not cfg.lengths or not cfg.radii:
        raise InvalidInputError("bench needs at least one length and one radius")

    hb = heartbeat_path if heartbeat_path is not None else cfg.heartbeat
    rows: List[BenchRow] = []
    total = len(cfg.lengths) * len(cfg.radii)

    for n in cfg.lengths:
        x, y = warped_pair(int(n), seed_for(f"{cfg.seed_label}:{int(n)}"), stretch=float(cfg.stretch))

        exact_s: Optional[float] = None
        exact_dist: Optional[float] = None
        if int(n) <= int(cfg.exact_max_len):
            exact_s, (exact_dist, _) = _best_of(lambda: exact_align(x, y), cfg.repeats)

        for r in cfg.radii:
            fast_s, (fast_dist, path) = _best_of(lambda: fast_align(x, y, int(r)), cfg.repeats)
            row = BenchRow(
                length=int(n),
                radius=int(r),
                levels=resolution_levels(x.size, y.size, int(r)),
                fast_s=float(fast_s),
                fast_dist=float(fast_dist),
                path_len=int(path.shape[0]),
                exact_s=exact_s,
                exact_dist=exact_dist,
                rel_err=_rel_err(fast_dist, exact_dist) if exact_dist is not None else None,
            )
            rows.append(row)
            if on_row is not None:
                on_row(row)
            if hb is not None:
                write_heartbeat(hb, {"done": len(rows), "total": total, "last": as_plain_dict(row)})

        del x, y
        gc.collect()

    return rows
