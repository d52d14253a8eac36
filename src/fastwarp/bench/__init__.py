# src/fastwarp/bench/__init__.py
from __future__ import annotations

from .runner import BenchRow, run_benchmark
from .synthetic import random_walk, seed_for, warped_pair

__all__ = ["BenchRow", "run_benchmark", "random_walk", "seed_for", "warped_pair"]
