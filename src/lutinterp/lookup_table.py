"""Interpolable look-up table.

A table stores reference values for the x and y directions plus a grid of
values measured at every (y, x) pair. :meth:`InterpolableLUT.find`
"standardizes" an ``x_input`` observed at condition ``y_input``: the grid is
first interpolated along y to build a temporary row at ``y_input``, and the
position of ``x_input`` inside that row is then mapped onto the x reference
values.

For pH measurements the inputs are the measured pH and the temperature, and
the x reference values are the buffer pH values at 25 degrees Celsius, so the
result is the pH the sample would read at 25 degrees Celsius.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import operator
from typing import Optional

import numpy as np

from .interpolation import find_bracket, interpolate_row, linear_interpolate
from .rendering import render_table

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_Y_OUT_OF_RANGE = "y_out_of_range"
STATUS_X_OUT_OF_RANGE = "x_out_of_range"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a table lookup.

    ``in_range`` is False when ``value`` is the unchanged input because one of
    the axes fell outside the table.
    """

    value: float
    in_range: bool
    status: str = STATUS_OK


def _frozen_array(values, name: str, ndim: int) -> np.ndarray:
    try:
        arr = np.array(values, dtype=float, copy=True)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a rectangular array of numbers") from exc
    if arr.ndim != ndim:
        raise ValueError(f"{name} must be {ndim}-dimensional, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class InterpolableLUT:
    """Immutable 2-D look-up table with bilinear standardization."""

    table: np.ndarray
    x_ref: np.ndarray
    y_ref: np.ndarray
    x_len: Optional[int] = None
    y_len: Optional[int] = None

    def __post_init__(self) -> None:
        table = _frozen_array(self.table, "table", 2)
        x_ref = _frozen_array(self.x_ref, "x_ref", 1)
        y_ref = _frozen_array(self.y_ref, "y_ref", 1)

        n_rows, n_cols = table.shape
        if n_rows < 2 or n_cols < 2:
            raise ValueError("table must have at least 2 rows and 2 columns")
        if self.x_len is not None and int(self.x_len) != n_cols:
            raise ValueError(f"x_len is {self.x_len} but table rows have {n_cols} columns")
        if self.y_len is not None and int(self.y_len) != n_rows:
            raise ValueError(f"y_len is {self.y_len} but table has {n_rows} rows")
        if x_ref.size != n_cols:
            raise ValueError("x_ref and table columns must have the same length")
        if y_ref.size != n_rows:
            raise ValueError("y_ref and table rows must have the same length")
        if not (np.isfinite(table).all() and np.isfinite(x_ref).all() and np.isfinite(y_ref).all()):
            raise ValueError("table, x_ref and y_ref values must be finite")
        if not np.all(np.diff(y_ref) > 0.0):
            raise ValueError("y_ref must be strictly increasing")
        bad_rows = np.flatnonzero(~np.all(np.diff(table, axis=1) > 0.0, axis=1))
        if bad_rows.size:
            raise ValueError(f"table rows must be strictly increasing (row {int(bad_rows[0])} is not)")

        object.__setattr__(self, "table", table)
        object.__setattr__(self, "x_ref", x_ref)
        object.__setattr__(self, "y_ref", y_ref)
        object.__setattr__(self, "x_len", n_cols)
        object.__setattr__(self, "y_len", n_rows)
        logger.debug("Built %dx%d look-up table", n_rows, n_cols)

    @classmethod
    def create(cls, table, x_ref, y_ref, x_len: int, y_len: int) -> "InterpolableLUT":
        """Build a table from explicit sizes, as the five-argument legacy API did."""
        return cls(table=table, x_ref=x_ref, y_ref=y_ref, x_len=x_len, y_len=y_len)

    @property
    def shape(self) -> tuple[int, int]:
        return int(self.y_len), int(self.x_len)

    def interpolated_row(self, y_input: float) -> Optional[np.ndarray]:
        """Grid row interpolated at ``y_input``, or ``None`` outside ``y_ref``."""
        bracket = find_bracket(self.y_ref, y_input)
        if bracket is None:
            return None
        return interpolate_row(self.table, self.y_ref, bracket, y_input)

    def lookup(self, x_input: float, y_input: float) -> LookupResult:
        """Standardize ``x_input`` and report whether the table covered it."""
        row = self.interpolated_row(y_input)
        if row is None:
            logger.debug("y=%r outside [%r, %r); returning x=%r unchanged", y_input, self.y_ref[0], self.y_ref[-1], x_input)
            return LookupResult(float(x_input), False, STATUS_Y_OUT_OF_RANGE)

        bracket = find_bracket(row, x_input)
        if bracket is None:
            logger.debug("x=%r outside [%r, %r) at y=%r; returning it unchanged", x_input, row[0], row[-1], y_input)
            return LookupResult(float(x_input), False, STATUS_X_OUT_OF_RANGE)

        lo, hi = bracket
        value = linear_interpolate(float(row[lo]), float(self.x_ref[lo]), float(row[hi]), float(self.x_ref[hi]), float(x_input))
        return LookupResult(float(value), True, STATUS_OK)

    def find(self, x_input: float, y_input: float) -> float:
        """Standardized value of ``x_input``; the input itself when out of range."""
        return self.lookup(x_input, y_input).value

    def find_many(self, x_inputs, y_inputs) -> np.ndarray:
        """Element-wise :meth:`find` over broadcast ``x_inputs`` and ``y_inputs``."""
        xs, ys = np.broadcast_arrays(np.asarray(x_inputs, dtype=float), np.asarray(y_inputs, dtype=float))
        out = np.empty(xs.shape, dtype=float)
        for idx in np.ndindex(xs.shape):
            out[idx] = self.find(float(xs[idx]), float(ys[idx]))
        return out

    def row(self, index: int) -> np.ndarray:
        """Copy of grid row ``index``; raises ``IndexError`` outside ``[0, y_len)``."""
        i = operator.index(index)
        if i < 0 or i >= self.y_len:
            raise IndexError(f"Row index {i} out of range for table with {self.y_len} rows")
        return self.table[i].copy()

    def __getitem__(self, index: int) -> np.ndarray:
        return self.row(index)

    def __len__(self) -> int:
        return int(self.y_len)

    def __str__(self) -> str:
        return render_table(self)
