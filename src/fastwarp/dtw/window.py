# src/fastwarp/dtw/window.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from fastwarp.errors import BufferAllocationError, InvalidInputError

Coord = Tuple[int, int]


# -----------------------------------------------------------------------------
# Window variants
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FullGrid:
    """Every cell of a len_x x len_y grid, row-major (exact DTW)."""

    len_x: int
    len_y: int

    def __iter__(self) -> Iterator[Coord]:
        for i in range(self.len_x):
            for j in range(self.len_y):
                yield (i, j)

    def __len__(self) -> int:
        return self.len_x * self.len_y


@dataclass(frozen=True)
class Window:
    """
    Explicit set of reachable cells, in evaluation order.

    Order matters: for each cell, the three cells it depends on must come earlier
    (or be legitimately absent). expand_window produces row-major ascending order.
    """

    cells: Tuple[Coord, ...]

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    @classmethod
    def from_cells(cls, cells: Iterable[Coord]) -> "Window":
        return cls(tuple((int(i), int(j)) for i, j in cells))


Cells = Union[Window, FullGrid]


def as_cells(window: Optional[Cells], len_x: int, len_y: int) -> Cells:
    if window is None:
        return FullGrid(len_x, len_y)
    if isinstance(window, FullGrid):
        if (window.len_x, window.len_y) != (len_x, len_y):
            raise InvalidInputError(
                f"FullGrid is {window.len_x}x{window.len_y}, sequences are {len_x}x{len_y}"
            )
        return window
    if isinstance(window, Window):
        for i, j in window.cells:
            if not (0 <= i < len_x and 0 <= j < len_y):
                raise InvalidInputError(f"window cell {(i, j)} is outside the {len_x}x{len_y} grid")
        return window
    raise InvalidInputError(f"window must be Window, FullGrid or None, got {type(window).__name__}")


# -----------------------------------------------------------------------------
# Coarse path -> fine window
# -----------------------------------------------------------------------------

def _path_coords(path: Union[np.ndarray, Sequence[Coord]]) -> List[Coord]:
    if isinstance(path, np.ndarray):
        if path.ndim != 2 or path.shape[1] != 2:
            raise InvalidInputError("path must be (K,2)")
        return [(int(i), int(j)) for i, j in path.tolist()]
    return [(int(i), int(j)) for i, j in path]


def _dilate(path: Sequence[Coord], radius: int) -> Set[Coord]:
    # Chebyshev ball around every path cell; negative coords are kept on purpose,
    # the ordering pass never visits them.
    out: Set[Coord] = set(path)
    offsets = range(-radius, radius + 1)
    for i, j in path:
        for a in offsets:
            for b in offsets:
                out.add((i + a, j + b))
    return out


def _project(cells: Set[Coord]) -> Set[Coord]:
    out: Set[Coord] = set()
    for i, j in cells:
        i2 = 2 * i
        j2 = 2 * j
        out.add((i2, j2))
        out.add((i2, j2 + 1))
        out.add((i2 + 1, j2))
        out.add((i2 + 1, j2 + 1))
    return out


def _cover_trailing(cells: Set[Coord], len_x: int, len_y: int) -> None:
    """
    An odd target length leaves one trailing fine row (or column) with no coarse
    parent. With radius >= 1 the dilation already reaches it; with radius 0 it
    would be missing, so it inherits the cells of the row (column) before it.
    """
    odd_x = len_x % 2 == 1 and len_x >= 2
    odd_y = len_y % 2 == 1 and len_y >= 2
    extra: Set[Coord] = set()
    if odd_x:
        extra.update((len_x - 1, j) for i, j in cells if i == len_x - 2)
    if odd_y:
        extra.update((i, len_y - 1) for i, j in cells if j == len_y - 2)
    if odd_x and odd_y and (len_x - 2, len_y - 2) in cells:
        extra.add((len_x - 1, len_y - 1))
    cells.update(extra)


def _order_rows(cells: Set[Coord], len_x: int, len_y: int) -> List[Coord]:
    """
    Row-major scan. Each row's match run is contiguous, so a row starts at the
    previous row's first match and stops at the first miss after a hit.
    """
    ordered: List[Coord] = []
    start_j = 0
    for i in range(len_x):
        first_hit: Optional[int] = None
        for j in range(start_j, len_y):
            if (i, j) in cells:
                ordered.append((i, j))
                if first_hit is None:
                    first_hit = j
            elif first_hit is not None:
                break
        if first_hit is not None:
            start_j = first_hit
    return ordered


def expand_window(
    path: Union[np.ndarray, Sequence[Coord]],
    len_x: int,
    len_y: int,
    radius: int,
    *,
    level: Optional[int] = None,
) -> Window:
    """
    Project a coarse-resolution path onto the next finer (2x) resolution grid.

    Steps:
      1) dilate every path cell by `radius` (Chebyshev ball)
      2) map each dilated cell to its 2x2 block of children
         (radius 0: odd trailing rows/columns inherit their neighbour)
      3) emit cells inside [0,len_x) x [0,len_y) in row-major order

    The result is a superset of the coarse path's natural refinement and is
    ordered so the DP engine always sees a cell's predecessors first.
    """
    if radius < 0:
        raise InvalidInputError("radius must be >= 0")

    coords = _path_coords(path)
    try:
        dilated = _dilate(coords, int(radius))
        projected = _project(dilated)
        del dilated
        if radius == 0:
            _cover_trailing(projected, int(len_x), int(len_y))
        ordered = _order_rows(projected, int(len_x), int(len_y))
        del projected
        return Window(tuple(ordered))
    except MemoryError as e:
        raise BufferAllocationError("window", level=level) from e
