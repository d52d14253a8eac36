# src/fastwarp/config/schema.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class AlignConfig:
    radius: int = 1
    # exact=True ignores radius and runs full-grid DTW with `metric`
    exact: bool = False
    metric: str = "abs"
    # column name for delimited inputs; None => first fully numeric column
    column: Optional[str] = None


@dataclass(frozen=True)
class BenchConfig:
    lengths: Tuple[int, ...] = (250, 1000, 4000)
    radii: Tuple[int, ...] = (1, 10)
    repeats: int = 3
    stretch: float = 0.25
    # exact DTW is O(N*M); skip it above this length
    exact_max_len: int = 1000
    seed_label: str = "fastwarp-bench"
    heartbeat: Optional[Path] = None


@dataclass(frozen=True)
class RunConfig:
    align: AlignConfig = field(default_factory=AlignConfig)
    bench: BenchConfig = field(default_factory=BenchConfig)
