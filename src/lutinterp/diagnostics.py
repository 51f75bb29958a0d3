"""Diagnostic summaries for look-up tables."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from .lookup_table import InterpolableLUT
from .table_io import detect_format, read_raw_table


def _range(values: np.ndarray) -> list[float] | None:
    if values.size == 0:
        return None
    return [float(np.min(values)), float(np.max(values))]


def diagnostics_from_arrays(table, x_ref, y_ref) -> dict:
    """Check raw table arrays; unlike the constructor, never raises on bad data."""
    table_np = np.atleast_2d(np.asarray(table, dtype=float))
    x_np = np.asarray(x_ref, dtype=float).ravel()
    y_np = np.asarray(y_ref, dtype=float).ravel()
    n_rows, n_cols = table_np.shape

    checks = {
        "shape_consistent": bool(x_np.size == n_cols and y_np.size == n_rows and n_rows >= 2 and n_cols >= 2),
        "all_finite": bool(np.isfinite(table_np).all() and np.isfinite(x_np).all() and np.isfinite(y_np).all()),
        "y_ref_increasing": bool(np.all(np.diff(y_np) > 0.0)),
        "rows_increasing": bool(np.all(np.diff(table_np, axis=1) > 0.0)),
    }
    return {
        "shape": [int(n_rows), int(n_cols)],
        "y_range": _range(y_np),
        "x_ref_range": _range(x_np),
        "row_coverage": [[float(row[0]), float(row[-1])] for row in table_np] if n_cols else [],
        "checks": checks,
        "all_checks_pass": bool(all(checks.values())),
    }


def table_diagnostics(lut: InterpolableLUT) -> dict:
    return diagnostics_from_arrays(lut.table, lut.x_ref, lut.y_ref)


def run_diagnostics(table_path: str | Path, *, fmt: str = "auto") -> dict:
    table, x_ref, y_ref = read_raw_table(table_path, fmt=fmt)
    diag = diagnostics_from_arrays(table, x_ref, y_ref)
    diag["format"] = detect_format(table_path) if fmt == "auto" else fmt
    return diag
