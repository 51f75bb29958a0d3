"""Text rendering of look-up tables for visual verification."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

import numpy as np

if TYPE_CHECKING:
    from .lookup_table import InterpolableLUT


def render_table(lut: "InterpolableLUT", precision: int = 2) -> str:
    """Render one line per y reference: the y value then its grid row.

    Every value is fixed-point with ``precision`` decimals and followed by a
    tab, and every line ends with a newline.
    """
    lines = []
    for i, y in enumerate(lut.y_ref):
        cells = [f"{y:.{precision}f}"] + [f"{v:.{precision}f}" for v in lut.row(i)]
        lines.append("".join(c + "\t" for c in cells) + "\n")
    return "".join(lines)


def parse_table(text: str) -> Tuple[np.ndarray, np.ndarray]:
    """Parse :func:`render_table` output back into ``(y_ref, table)``."""
    rows = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        try:
            rows.append([float(tok) for tok in tokens])
        except ValueError as exc:
            raise ValueError(f"line {lineno}: non-numeric value in table text") from exc
        if len(rows[-1]) != len(rows[0]):
            raise ValueError(f"line {lineno}: expected {len(rows[0])} values, got {len(rows[-1])}")
    if not rows:
        raise ValueError("table text contains no rows")
    if len(rows[0]) < 2:
        raise ValueError("table rows need a y value followed by grid values")
    data = np.array(rows, dtype=float)
    return data[:, 0].copy(), data[:, 1:].copy()
