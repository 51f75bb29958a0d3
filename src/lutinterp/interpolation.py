"""Interpolation primitives shared by the lookup-table code."""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np


def linear_interpolate(x0: float, y0, x1: float, y1, x: float):
    """Value at ``x`` on the line through ``(x0, y0)`` and ``(x1, y1)``.

    ``y0`` and ``y1`` may be arrays, in which case every column is
    interpolated with the same abscissae.
    """
    return y0 + (y1 - y0) * (x - x0) / (x1 - x0)


def find_bracket(values: np.ndarray, search_val: float) -> Optional[Tuple[int, int]]:
    """Return ``(lo, lo + 1)`` with ``values[lo] <= search_val < values[lo + 1]``.

    The lowest matching ``lo`` wins. ``None`` means ``search_val`` is not
    covered, which includes ``search_val == values[-1]``.
    """
    values = np.asarray(values, dtype=float)
    if values.size < 2:
        return None
    hits = np.flatnonzero((values[:-1] <= search_val) & (values[1:] > search_val))
    if hits.size == 0:
        return None
    lo = int(hits[0])
    return lo, lo + 1


def interpolate_row(table: np.ndarray, ref: np.ndarray, bracket: Tuple[int, int], search_val: float) -> np.ndarray:
    """Synthetic row of ``table`` at ``search_val`` between two bracketing rows."""
    lo, hi = bracket
    return linear_interpolate(float(ref[lo]), table[lo], float(ref[hi]), table[hi], float(search_val))
