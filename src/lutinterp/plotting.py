"""Diagnostic plotting utilities for look-up tables."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from .lookup_table import InterpolableLUT


def create_table_plots(
    lut: InterpolableLUT,
    plot_dir: str | Path,
    *,
    x_label: str = "x",
    y_label: str = "y",
    queries: tuple[tuple[float, float], ...] = (),
    n_samples: int = 200,
) -> dict[str, str]:
    """Plot the table columns and the standardization curves.

    Returns mapping of plot names to file paths.
    """
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("Plotting requires matplotlib") from exc

    out = Path(plot_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: dict[str, str] = {}

    fig, ax = plt.subplots(figsize=(7, 4))
    for j, ref in enumerate(lut.x_ref):
        ax.plot(lut.y_ref, lut.table[:, j], marker="o", ms=3, lw=1.4, label=f"{ref:.2f}")
    ax.set_xlabel(y_label)
    ax.set_ylabel(x_label)
    ax.set_title("Table Columns")
    ax.legend(frameon=False, fontsize="small", title=f"{x_label} reference")
    ax.grid(alpha=0.3)
    p = out / "columns_vs_y.png"
    fig.tight_layout()
    fig.savefig(p, dpi=140)
    plt.close(fig)
    written["columns_vs_y"] = str(p)

    fig, ax = plt.subplots(figsize=(7, 4))
    xs = np.linspace(float(lut.table.min()), float(lut.table.max()), n_samples)
    # The last y reference is excluded because lookups there fall back to the input.
    for y in lut.y_ref[:-1]:
        ax.plot(xs, lut.find_many(xs, y), lw=1.2, label=f"{y:g}")
    ax.plot(xs, xs, color="0.5", ls="--", lw=1.0)
    if queries:
        qx = np.array([q[0] for q in queries], dtype=float)
        qy = np.array([q[1] for q in queries], dtype=float)
        ax.scatter(qx, lut.find_many(qx, qy), color="k", s=14, zorder=3, label="queries")
    ax.set_xlabel(f"measured {x_label}")
    ax.set_ylabel(f"standardized {x_label}")
    ax.set_title("Standardization Curves")
    ax.legend(frameon=False, fontsize="small", title=y_label)
    ax.grid(alpha=0.3)
    p = out / "standardization_curves.png"
    fig.tight_layout()
    fig.savefig(p, dpi=140)
    plt.close(fig)
    written["standardization_curves"] = str(p)

    return written
