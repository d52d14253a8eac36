# src/fastwarp/utils/heartbeat.py
from __future__ import annotations

import json
import os
import resource
import sys
import time
from pathlib import Path
from typing import Any, Dict


def peak_rss_mb() -> float:
    """
    Peak resident set size of this process in MB (ru_maxrss is KB on Linux, bytes on macOS).
    """
    rss = float(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)
    if sys.platform == "darwin":
        return rss / (1024.0 * 1024.0)
    return rss / 1024.0


def write_heartbeat(path: Path, payload: Dict[str, Any]) -> None:
    """
    Atomic JSON write (tmp + replace) so a tailing reader never sees partial JSON.
    Adds ts/pid/peak_rss_mb automatically.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    obj = dict(payload)
    obj["ts"] = time.time()
    obj["pid"] = os.getpid()
    obj["peak_rss_mb"] = peak_rss_mb()

    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(obj, indent=2, sort_keys=True), encoding="utf-8")
    os.replace(tmp, path)
