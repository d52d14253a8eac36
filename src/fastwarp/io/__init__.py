# src/fastwarp/io/__init__.py
from __future__ import annotations

from .csv import read_csv_rows, write_csv
from .sequences import load_sequence, write_path_csv

__all__ = [
    "read_csv_rows",
    "write_csv",
    "load_sequence",
    "write_path_csv",
]
