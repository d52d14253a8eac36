from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from fastwarp.bench.runner import run_benchmark
from fastwarp.bench.synthetic import random_walk, seed_for, warped_pair
from fastwarp.config.schema import BenchConfig
from fastwarp.errors import InvalidInputError


def test_seed_for_is_stable() -> None:
    assert seed_for("abc") == seed_for("abc")
    assert seed_for("abc") != seed_for("abd")
    assert 0 <= seed_for("") <= 0xFFFFFFFF


def test_random_walk_deterministic() -> None:
    a = random_walk(50, 3)
    b = random_walk(50, 3)
    assert a.dtype == np.float32
    assert np.array_equal(a, b)
    with pytest.raises(InvalidInputError):
        random_walk(0, 1)


def test_warped_pair_shapes() -> None:
    x, y = warped_pair(100, 1, stretch=0.5)
    assert x.shape == (100,)
    assert y.shape == (150,)
    assert x.dtype == y.dtype == np.float32
    assert np.isfinite(x).all() and np.isfinite(y).all()
    with pytest.raises(InvalidInputError):
        warped_pair(1, 1)


def test_run_benchmark_rows(tmp_path: Path) -> None:
    cfg = BenchConfig(lengths=(32, 48), radii=(0, 2), repeats=1, exact_max_len=32)
    seen = []
    rows = run_benchmark(cfg, heartbeat_path=tmp_path / "hb.json", on_row=seen.append)

    assert [(r.length, r.radius) for r in rows] == [(32, 0), (32, 2), (48, 0), (48, 2)]
    assert seen == rows
    assert (tmp_path / "hb.json").exists()

    for r in rows[:2]:
        assert r.exact_dist is not None
        assert r.fast_dist >= r.exact_dist - 1e-6
        assert r.rel_err is not None and r.rel_err >= -1e-6
    for r in rows[2:]:
        assert r.exact_s is None and r.rel_err is None
    assert all(r.path_len >= max(r.length, int(round(r.length * 1.25))) for r in rows)


def test_run_benchmark_needs_work() -> None:
    with pytest.raises(InvalidInputError):
        run_benchmark(BenchConfig(lengths=(), radii=(1,)))
