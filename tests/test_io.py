from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from fastwarp.errors import InvalidInputError
from fastwarp.io.csv import detect_delimiter, read_csv_rows, to_float
from fastwarp.io.sequences import load_sequence, write_path_csv


def _write(tmp_path: Path, name: str, text: str) -> Path:
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    return p


def test_load_plain_text_with_comments(tmp_path: Path) -> None:
    p = _write(tmp_path, "x.txt", "# header\n1 2\n3,4\n\n5  # trailing\n")
    x = load_sequence(p)
    assert x.dtype == np.float32
    assert x.tolist() == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_load_text_rejects_garbage(tmp_path: Path) -> None:
    p = _write(tmp_path, "x.txt", "1\ntwo\n3\n")
    with pytest.raises(InvalidInputError, match="x.txt:2"):
        load_sequence(p)


def test_load_empty_text_rejected(tmp_path: Path) -> None:
    p = _write(tmp_path, "x.txt", "# nothing here\n")
    with pytest.raises(InvalidInputError):
        load_sequence(p)


def test_load_csv_first_numeric_column(tmp_path: Path) -> None:
    p = _write(tmp_path, "x.csv", "label,value,other\na,1.5,\nb,2.5,7\n")
    assert load_sequence(p).tolist() == [1.5, 2.5]


def test_load_csv_named_column(tmp_path: Path) -> None:
    p = _write(tmp_path, "x.tsv", "t\tgr\n0\t10\n1\t12\n2\t11\n")
    assert load_sequence(p, column="gr").tolist() == [10.0, 12.0, 11.0]

    with pytest.raises(InvalidInputError):
        load_sequence(p, column="missing")


def test_load_csv_column_with_gap_rejected(tmp_path: Path) -> None:
    p = _write(tmp_path, "x.csv", "gr\n1\nNA\n3\n")
    with pytest.raises(InvalidInputError, match="row 2"):
        load_sequence(p, column="gr")


def test_load_npy_shapes(tmp_path: Path) -> None:
    p = tmp_path / "col.npy"
    np.save(p, np.arange(4, dtype=np.float64).reshape(4, 1))
    assert load_sequence(p).tolist() == [0.0, 1.0, 2.0, 3.0]

    q = tmp_path / "multi.npy"
    np.save(q, np.zeros((3, 2)))
    with pytest.raises(InvalidInputError):
        load_sequence(q)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InvalidInputError):
        load_sequence(tmp_path / "nope.txt")


def test_write_path_csv_roundtrip(tmp_path: Path) -> None:
    out = tmp_path / "sub" / "path.csv"
    write_path_csv(out, np.asarray([[0, 0], [1, 0], [2, 1]], dtype=np.int64))
    rows = read_csv_rows(out)
    assert rows == [{"i": "0", "j": "0"}, {"i": "1", "j": "0"}, {"i": "2", "j": "1"}]


def test_detect_delimiter_and_to_float() -> None:
    assert detect_delimiter("a;b;c\n1;2;3\n") == ";"
    assert detect_delimiter("a\tb\n1\t2\n") == "\t"
    assert detect_delimiter("single\n1\n") == ","
    assert to_float(" 2.5 ") == 2.5
    assert to_float("nan") is None
    assert to_float("N/A") is None
    assert to_float("abc") is None
