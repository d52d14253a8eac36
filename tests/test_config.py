from __future__ import annotations

from pathlib import Path

import pytest

from fastwarp.config import AlignConfig, BenchConfig, config_from_dict, default_config, load_config
from fastwarp.errors import InvalidInputError
from fastwarp.utils.config import as_plain_dict, deep_get


def test_defaults() -> None:
    cfg = default_config()
    assert cfg.align == AlignConfig()
    assert cfg.align.radius == 1
    assert cfg.bench.lengths == BenchConfig().lengths


def test_load_config_from_yaml(tmp_path: Path) -> None:
    p = tmp_path / "cfg.yaml"
    p.write_text(
        "align:\n  radius: 3\n  exact: true\n  unknown_key: 1\n"
        "bench:\n  lengths: [64, 128]\n  radii: [2]\n  heartbeat: hb/progress.json\n",
        encoding="utf-8",
    )
    cfg = load_config(p)
    assert cfg.align.radius == 3
    assert cfg.align.exact is True
    assert cfg.align.metric == "abs"
    assert cfg.bench.lengths == (64, 128)
    assert cfg.bench.radii == (2,)
    assert cfg.bench.heartbeat == Path("hb/progress.json")


def test_load_config_none_is_default() -> None:
    assert load_config(None) == default_config()


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_bad_yaml(tmp_path: Path) -> None:
    p = tmp_path / "bad.yaml"
    p.write_text("align: [unclosed\n", encoding="utf-8")
    with pytest.raises(InvalidInputError):
        load_config(p)


def test_config_from_dict_keeps_base() -> None:
    base = config_from_dict({"align": {"radius": 5}})
    cfg = config_from_dict({"bench": {"repeats": 1}}, base=base)
    assert cfg.align.radius == 5
    assert cfg.bench.repeats == 1


def test_dict_helpers() -> None:
    d = {"a": {"b": {"c": 1}}, "x": 2}
    assert deep_get(d, "a.b.c") == 1
    assert deep_get(d, "a.z", "dflt") == "dflt"
    plain = as_plain_dict(BenchConfig(heartbeat=Path("hb.json")))
    assert plain["lengths"] == [250, 1000, 4000]
    assert plain["heartbeat"] == "hb.json"


def test_shipped_example_config_matches_defaults() -> None:
    p = Path(__file__).resolve().parents[1] / "configs" / "fastwarp.yaml"
    assert load_config(p) == default_config()
