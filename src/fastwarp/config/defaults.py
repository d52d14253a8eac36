# src/fastwarp/config/defaults.py
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

from fastwarp.utils.config import deep_get, load_yaml

from .schema import AlignConfig, BenchConfig, RunConfig


def default_config() -> RunConfig:
    return RunConfig(align=AlignConfig(), bench=BenchConfig())


def _known(cls: Any, d: Any) -> Dict[str, Any]:
    d = d if isinstance(d, dict) else {}
    fields = set(getattr(cls, "__dataclass_fields__", {}).keys())
    return {k: v for k, v in d.items() if k in fields}


def config_from_dict(obj: Dict[str, Any], *, base: Optional[RunConfig] = None) -> RunConfig:
    """
    Apply `align:` and `bench:` sections on top of `base` (defaults if None).
    Unknown keys are ignored; list values become tuples.
    """
    cfg = base or default_config()

    a = _known(AlignConfig, deep_get(obj, "align", {}))
    if "radius" in a:
        a["radius"] = int(a["radius"])

    b = _known(BenchConfig, deep_get(obj, "bench", {}))
    for k in ("lengths", "radii"):
        if k in b:
            b[k] = tuple(int(v) for v in b[k])
    if b.get("heartbeat"):
        b["heartbeat"] = Path(b["heartbeat"])

    return replace(cfg, align=replace(cfg.align, **a), bench=replace(cfg.bench, **b))


def load_config(path: Optional[Path]) -> RunConfig:
    if path is None or str(path) == "":
        return default_config()
    return config_from_dict(load_yaml(Path(path)))
