# src/fastwarp/dtw/metric.py
from __future__ import annotations

from typing import Callable, Dict, Union

from fastwarp.errors import InvalidInputError

Metric = Callable[[float, float], float]


def abs_diff(a: float, b: float) -> float:
    return abs(a - b)


def squared_diff(a: float, b: float) -> float:
    d = a - b
    return d * d


METRICS: Dict[str, Metric] = {
    "abs": abs_diff,
    "sq": squared_diff,
}


def resolve_metric(metric: Union[None, str, Metric]) -> Metric:
    """
    None -> abs_diff; a registered name -> its function; any callable is used as-is.
    """
    if metric is None:
        return abs_diff
    if isinstance(metric, str):
        key = metric.strip().lower()
        if key not in METRICS:
            raise InvalidInputError(f"Unknown metric {metric!r}; expected one of {sorted(METRICS)}")
        return METRICS[key]
    if callable(metric):
        return metric
    raise InvalidInputError(f"metric must be a name or a callable, got {type(metric).__name__}")

