# src/fastwarp/config/__init__.py
from __future__ import annotations

from .defaults import config_from_dict, default_config, load_config
from .schema import AlignConfig, BenchConfig, RunConfig

__all__ = [
    "AlignConfig",
    "BenchConfig",
    "RunConfig",
    "default_config",
    "config_from_dict",
    "load_config",
]
