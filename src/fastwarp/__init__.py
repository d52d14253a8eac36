# src/fastwarp/__init__.py
from __future__ import annotations

from fastwarp.dtw import AlignResult, align, exact_align, fast_align
from fastwarp.errors import BufferAllocationError, FastWarpError, InvalidInputError, WindowContractError

__version__ = "0.1.0"

__all__ = [
    "fast_align",
    "exact_align",
    "align",
    "AlignResult",
    "FastWarpError",
    "InvalidInputError",
    "WindowContractError",
    "BufferAllocationError",
    "__version__",
]
