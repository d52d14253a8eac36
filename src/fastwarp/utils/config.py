# src/fastwarp/utils/config.py
from __future__ import annotations

from dataclasses import is_dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from fastwarp.errors import InvalidInputError


def _find_project_root(start: Path) -> Path:
    """
    Walk up from start looking for pyproject.toml.
    Falls back to start if not found.
    """
    p = start.resolve()
    for _ in range(10):
        if (p / "pyproject.toml").exists():
            return p
        if p.parent == p:
            break
        p = p.parent
    return start.resolve()


def resolve_config_path(path: Path) -> Path:
    """
    Resolve a config path:
      1) as given (absolute or relative to CWD)
      2) relative to the project root (first parent holding pyproject.toml)
    """
    p = Path(path)
    if p.exists():
        return p.resolve()

    p2 = (_find_project_root(Path.cwd()) / p).resolve()
    if p2.exists():
        return p2

    return p


def load_yaml(path: Path) -> Dict[str, Any]:
    p = resolve_config_path(Path(path))
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    try:
        obj = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise InvalidInputError(f"Invalid YAML in {p}: {e}") from e
    return obj if isinstance(obj, dict) else {}


def deep_get(d: Dict[str, Any], key: str, default: Any = None) -> Any:
    cur: Any = d
    for part in key.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def as_plain_dict(x: Any) -> Any:
    """Dataclasses/tuples/paths -> JSON-friendly builtins (for manifests and heartbeats)."""
    if is_dataclass(x):
        return {k: as_plain_dict(v) for k, v in x.__dict__.items()}
    if isinstance(x, dict):
        return {k: as_plain_dict(v) for k, v in x.items()}
    if isinstance(x, (list, tuple)):
        return [as_plain_dict(v) for v in x]
    if isinstance(x, Path):
        return str(x)
    return x
