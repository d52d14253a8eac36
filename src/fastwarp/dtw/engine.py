# src/fastwarp/dtw/engine.py
from __future__ import annotations

import math
from typing import Dict, List, Optional, Tuple

import numpy as np

from fastwarp.dtw.metric import Metric, abs_diff
from fastwarp.dtw.window import Cells, Coord, as_cells
from fastwarp.errors import BufferAllocationError, WindowContractError

INF = math.inf

# padded (i,j) -> (cumulative cost, predecessor padded coord)
CostTable = Dict[Coord, Tuple[float, Optional[Coord]]]


def _fill_cost_table(x: np.ndarray, y: np.ndarray, cells: Cells, dist: Metric) -> CostTable:
    """
    Forward pass over the padded grid.

    DP convention (padded, 1-indexed against the inputs):
      D[0, 0] = 0
      D[i, j] = dist(x[i-1], y[j-1]) + min(D[i-1, j], D[i, j-1], D[i-1, j-1])
    Cells missing from the table are +inf.
    """
    xs = x.tolist()
    ys = y.tolist()

    table: CostTable = {(0, 0): (0.0, None)}
    get = table.get
    miss = (INF, None)

    for ci, cj in cells:
        i = ci + 1
        j = cj + 1
        dt = float(dist(xs[ci], ys[cj]))
        a = get((i - 1, j), miss)[0] + dt      # up
        b = get((i, j - 1), miss)[0] + dt      # left
        c = get((i - 1, j - 1), miss)[0] + dt  # diag

        # Tie-break order decides path shape; keep it exactly like this.
        if a < b:
            if a < c:
                table[(i, j)] = (a, (i - 1, j))
            else:
                table[(i, j)] = (c, (i - 1, j - 1))
        else:
            if b < c:
                table[(i, j)] = (b, (i, j - 1))
            else:
                table[(i, j)] = (c, (i - 1, j - 1))

    return table


def _backtrack(table: CostTable, len_x: int, len_y: int) -> List[Coord]:
    terminal = (len_x, len_y)
    if terminal not in table:
        raise WindowContractError(f"terminal cell {terminal} is not in the window", cell=terminal)
    if not math.isfinite(table[terminal][0]):
        raise WindowContractError(f"terminal cell {terminal} is unreachable from the origin", cell=terminal)

    path: List[Coord] = []
    cur: Coord = terminal
    while cur != (0, 0):
        entry = table.get(cur)
        if entry is None:
            raise WindowContractError(f"predecessor chain broken at padded cell {cur}", cell=cur)
        path.append((cur[0] - 1, cur[1] - 1))
        prev = entry[1]
        if prev is None:
            raise WindowContractError(f"cell {cur} has no predecessor", cell=cur)
        cur = prev

    path.reverse()
    return path


def solve(
    x: np.ndarray,
    y: np.ndarray,
    window: Optional[Cells] = None,
    dist: Metric = abs_diff,
    *,
    level: Optional[int] = None,
) -> Tuple[float, List[Coord]]:
    """
    DTW over the cells allowed by `window` (None/FullGrid => every cell).

    Returns:
      distance (float), path (list of (i,j), start to end)

    Notes:
    - Window cells are evaluated in the order given; expand_window guarantees a
      dependency-safe order.
    - The cost table is local to this call and released before returning.
    """
    len_x = int(len(x))
    len_y = int(len(y))
    cells = as_cells(window, len_x, len_y)

    try:
        table = _fill_cost_table(x, y, cells, dist)
    except MemoryError as e:
        raise BufferAllocationError("cost table", level=level, size=len(cells)) from e

    try:
        path = _backtrack(table, len_x, len_y)
    except MemoryError as e:
        raise BufferAllocationError("path", level=level) from e

    distance = float(table[(len_x, len_y)][0])
    del table
    return distance, path
