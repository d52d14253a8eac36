# src/fastwarp/io/sequences.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import numpy as np

from fastwarp.dtw.prepare import as_sequence
from fastwarp.errors import InvalidInputError

from .csv import read_csv_rows, to_float, write_csv

_SPLIT = re.compile(r"[,\s;]+")
_TABLE_SUFFIXES = {".csv", ".tsv"}


def _load_npy(path: Path) -> np.ndarray:
    arr = np.load(str(path), allow_pickle=False)
    # accept (N,), (N,1) and (1,N); anything else is multivariate
    if arr.ndim == 2 and 1 in arr.shape:
        arr = arr.ravel()
    return arr


def _load_text(path: Path) -> List[float]:
    out: List[float] = []
    with path.open("r", encoding="utf-8-sig", errors="replace") as f:
        for lineno, line in enumerate(f, start=1):
            s = line.split("#", 1)[0].strip()
            if not s:
                continue
            for tok in _SPLIT.split(s):
                if not tok:
                    continue
                v = to_float(tok)
                if v is None:
                    raise InvalidInputError(f"{path}:{lineno}: not a number: {tok!r}")
                out.append(v)
    return out


def _load_table(path: Path, column: Optional[str]) -> List[float]:
    rows = read_csv_rows(path)
    if not rows:
        return []

    names = list(rows[0].keys())
    if column is not None:
        if column not in names:
            raise InvalidInputError(f"{path}: no column {column!r} (have {names})")
        cands = [column]
    else:
        cands = names

    for name in cands:
        vals = [to_float(r.get(name, "")) for r in rows]
        if all(v is not None for v in vals):
            return [float(v) for v in vals]  # type: ignore[arg-type]
        if column is not None:
            bad = next(k for k, v in enumerate(vals) if v is None)
            raise InvalidInputError(f"{path}: column {column!r} has a non-numeric value at row {bad + 1}")

    raise InvalidInputError(f"{path}: no fully numeric column")


def load_sequence(path: Path, *, column: Optional[str] = None) -> np.ndarray:
    """
    Read one scalar sequence from disk as float32.

    Formats:
      .npy        -> numpy array (N,), (N,1) or (1,N)
      .csv / .tsv -> header row; `column` or the first fully numeric column
      other       -> numbers separated by whitespace/commas, '#' comments allowed
    """
    path = Path(path)
    if not path.exists():
        raise InvalidInputError(f"Sequence file not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".npy":
            values = _load_npy(path)
        elif suffix in _TABLE_SUFFIXES:
            values = _load_table(path, column)
        else:
            values = _load_text(path)
    except (OSError, ValueError) as e:
        if isinstance(e, InvalidInputError):
            raise
        raise InvalidInputError(f"Cannot read sequence from {path}: {e}") from e

    return as_sequence(values, name=path.name)


def write_path_csv(path: Path, coords: Iterable[Tuple[int, int]]) -> None:
    write_csv(path, ["i", "j"], ({"i": int(i), "j": int(j)} for i, j in coords))
