# src/fastwarp/errors.py
from __future__ import annotations

from typing import Optional


class FastWarpError(Exception):
    """Base class for every error raised by fastwarp."""


class InvalidInputError(FastWarpError, ValueError):
    """Bad arguments: radius, sequence shape/content, metric name, input files."""


class WindowContractError(FastWarpError, RuntimeError):
    """
    Path reconstruction could not follow the predecessor chain.

    The window expander guarantees a connected window from (0,0) to the
    terminal cell, so this only fires on an internal bug or a hand-built window.
    """

    def __init__(self, message: str, *, cell: Optional[tuple] = None) -> None:
        super().__init__(message)
        self.cell = cell


class BufferAllocationError(FastWarpError, MemoryError):
    """
    A working buffer (sequence, window, cost table, path) could not be allocated.

    Carries enough context for an embedding application to log before giving up.
    """

    def __init__(self, buffer: str, *, level: Optional[int] = None, size: Optional[int] = None) -> None:
        where = f" at level {level}" if level is not None else ""
        how_big = f" ({size} cells)" if size is not None else ""
        super().__init__(f"failed to allocate {buffer}{where}{how_big}")
        self.buffer = buffer
        self.level = level
        self.size = size
