# src/fastwarp/io/csv.py
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

_DELIMS = (",", "\t", ";", "|")
_NULLS = {"NA", "N/A", "NULL", "NONE", "NAN", ""}


def _sample(path: Path, *, max_bytes: int = 32_000) -> str:
    with path.open("rb") as f:
        blob = f.read(max_bytes)
    return blob.decode("utf-8-sig", errors="replace")


def detect_delimiter(sample: str) -> str:
    """
    Pick the candidate delimiter with the most consistent per-line count.
    Comment lines (#) are ignored; falls back to ','.
    """
    lines = [ln for ln in sample.splitlines() if ln.strip() and not ln.lstrip().startswith("#")][:50]
    if not lines:
        return ","

    def _score(delim: str) -> float:
        counts = [ln.count(delim) for ln in lines]
        if max(counts) == 0:
            return 0.0
        mean = sum(counts) / len(counts)
        var = sum((c - mean) ** 2 for c in counts) / max(1, len(counts) - 1)
        return mean / (1.0 + var)

    best = max(_DELIMS, key=_score)
    return best if _score(best) > 0.0 else ","


def read_csv_rows(path: Path, *, delimiter: Optional[str] = None) -> List[Dict[str, str]]:
    """
    Read a delimited file with a header row into list[dict[str,str]].
    Missing values come back as "".
    """
    path = Path(path)
    if delimiter is None:
        delimiter = detect_delimiter(_sample(path))

    with path.open("r", encoding="utf-8-sig", errors="replace", newline="") as f:
        rdr = csv.DictReader((ln for ln in f if not ln.lstrip().startswith("#")), delimiter=delimiter)
        if rdr.fieldnames is None:
            raise ValueError(f"No header row found in {path}")
        return [{k: (v if v is not None else "") for k, v in r.items()} for r in rdr]


def write_csv(
    path: Path,
    fieldnames: Sequence[str],
    rows: Iterable[Dict[str, Any]],
    *,
    delimiter: str = ",",
) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(fieldnames), delimiter=delimiter, extrasaction="ignore")
        w.writeheader()
        for r in rows:
            w.writerow({k: r.get(k, "") for k in fieldnames})


def to_float(x: str) -> Optional[float]:
    """
    Lenient float parsing: common null spellings and NaN -> None.
    """
    s = (x or "").strip()
    if s.upper() in _NULLS:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    return None if v != v else v
