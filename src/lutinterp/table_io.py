"""Reading and writing look-up tables.

The ``text`` format is the diagnostic rendering preceded by one line holding
the x reference values::

    x_ref	1.68	4.01	...
    0.0	1.67	4.01	...

The ``csv``, ``pickle`` and ``parquet`` formats store a pandas DataFrame whose
index is ``y_ref``. Column ``j`` is labelled ``x<j>=<x_ref[j]>`` so repeated
x reference values still give unique labels.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

import numpy as np

from .lookup_table import InterpolableLUT
from .rendering import parse_table

logger = logging.getLogger(__name__)

X_REF_LABEL = "x_ref"
Y_REF_LABEL = "y_ref"

_SUFFIX_FORMATS = {
    ".csv": "csv",
    ".pkl": "pickle",
    ".pickle": "pickle",
    ".parquet": "parquet",
}

RawTable = Tuple[np.ndarray, np.ndarray, np.ndarray]


def detect_format(path: str | Path) -> str:
    return _SUFFIX_FORMATS.get(Path(path).suffix.lower(), "text")


def _fmt_value(v: float, precision: int | None) -> str:
    if precision is None:
        return repr(float(v))
    return f"{v:.{precision}f}"


def _format_text(lut: InterpolableLUT, precision: int | None) -> str:
    lines = [X_REF_LABEL + "\t" + "\t".join(_fmt_value(v, precision) for v in lut.x_ref) + "\n"]
    for i, y in enumerate(lut.y_ref):
        lines.append("\t".join(_fmt_value(v, precision) for v in (y, *lut.row(i))) + "\t\n")
    return "".join(lines)


def _parse_text(text: str, source: object) -> RawTable:
    header, _, body = text.partition("\n")
    tokens = header.split()
    if not tokens or tokens[0] != X_REF_LABEL:
        raise ValueError(f"{source}: first line must start with '{X_REF_LABEL}'")
    try:
        x_ref = np.array([float(tok) for tok in tokens[1:]], dtype=float)
    except ValueError as exc:
        raise ValueError(f"{source}: non-numeric x reference value") from exc
    y_ref, table = parse_table(body)
    return table, x_ref, y_ref


def _import_pandas():
    try:
        import pandas as pd
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("csv, pickle and parquet tables require pandas installed") from exc
    return pd


def to_dataframe(lut: InterpolableLUT):
    pd = _import_pandas()
    return pd.DataFrame(
        np.array(lut.table),
        index=pd.Index(np.array(lut.y_ref), name=Y_REF_LABEL),
        columns=[f"x{j}={float(v)!r}" for j, v in enumerate(lut.x_ref)],
    )


def _dataframe_arrays(df) -> RawTable:
    try:
        x_ref = np.array([float(str(c).partition("=")[2]) for c in df.columns], dtype=float)
    except ValueError as exc:
        raise ValueError("DataFrame column labels must look like 'x<j>=<x reference value>'") from exc
    return df.to_numpy(dtype=float), x_ref, df.index.to_numpy(dtype=float)


def write_table(path: str | Path, lut: InterpolableLUT, *, fmt: str = "text", precision: int | None = None) -> Path:
    """Write ``lut`` to ``path``.

    ``precision`` only applies to text files; ``None`` keeps full float
    precision. A precision that merges neighbouring values raises
    ``ValueError`` and nothing is written.
    """
    out = Path(path)
    if fmt == "auto":
        fmt = detect_format(out)
    if fmt == "text":
        text = _format_text(lut, precision)
        if precision is not None:
            try:
                InterpolableLUT(*_parse_text(text, out))
            except ValueError as exc:
                raise ValueError(f"table does not survive rounding to {precision} decimals: {exc}") from exc
        out.parent.mkdir(parents=True, exist_ok=True)
        with open(out, "w", encoding="ascii") as f:
            f.write(text)
    elif fmt in {"csv", "pickle", "parquet"}:
        df = to_dataframe(lut)
        out.parent.mkdir(parents=True, exist_ok=True)
        if fmt == "csv":
            df.to_csv(out)
        elif fmt == "pickle":
            df.to_pickle(out)
        else:
            df.to_parquet(out)
    else:
        raise ValueError(f"Unknown table format: {fmt}")
    logger.info("Wrote %dx%d table to %s (%s)", lut.y_len, lut.x_len, out, fmt)
    return out


def read_raw_table(path: str | Path, *, fmt: str = "auto") -> RawTable:
    """Load ``(table, x_ref, y_ref)`` arrays without validating them."""
    src = Path(path)
    if fmt == "auto":
        fmt = detect_format(src)
    if fmt == "text":
        with open(src, "r", encoding="ascii") as f:
            return _parse_text(f.read(), src)
    if fmt == "csv":
        return _dataframe_arrays(_import_pandas().read_csv(src, index_col=0, float_precision="round_trip"))
    if fmt == "pickle":
        return _dataframe_arrays(_import_pandas().read_pickle(src))
    if fmt == "parquet":
        return _dataframe_arrays(_import_pandas().read_parquet(src))
    raise ValueError(f"Unknown table format: {fmt}")


def read_table(path: str | Path, *, fmt: str = "auto") -> InterpolableLUT:
    table, x_ref, y_ref = read_raw_table(path, fmt=fmt)
    lut = InterpolableLUT(table=table, x_ref=x_ref, y_ref=y_ref)
    logger.info("Read %dx%d table from %s", lut.y_len, lut.x_len, path)
    return lut
