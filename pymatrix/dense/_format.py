"""
Human-readable rendering of dense matrices.

Display aid only; the output is not meant to be parsed back.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray


def field_width(maximum: float) -> int:
    """
    Width of one formatted element, given the matrix maximum.

    One integer digit is reserved, plus one more for each time the maximum
    can be divided by ten while staying above 1; three more characters hold
    the decimal point and two decimals. A non-finite maximum reserves no
    extra digits.
    """
    digits = 1
    if not math.isfinite(maximum):
        return digits + 3
    while maximum > 1:
        maximum = maximum / 10
        digits += 1
    return digits + 3


def finite_max(grid: NDArray[np.floating[Any]]) -> float:
    """Largest finite element, or 0.0 when there is none."""
    finite = grid[np.isfinite(grid)]
    if finite.size == 0:
        return 0.0
    return float(finite.max())


def render(grid: NDArray[np.floating[Any]]) -> str:
    """
    Render a 2D array as bracketed rows.

    Each row is written as ``[ v1 v2 ... ]`` on its own line, every value
    right-aligned to a common width with two decimals. The width follows
    the largest finite element; inf and nan are printed as-is.
    """
    width = field_width(finite_max(grid))
    lines = []
    for values in grid:
        fields = "".join(f"{float(v):{width}.2f} " for v in values)
        lines.append(f"[ {fields} ]\n")
    return "".join(lines)
