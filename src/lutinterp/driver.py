"""Command-line driver and example program."""

from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import logging
import sys
from typing import Sequence

from lutinterp.config import LookupConfig, TABLE_FORMATS
from lutinterp.lookup_table import InterpolableLUT
from lutinterp.plotting import create_table_plots
from lutinterp.rendering import render_table
from lutinterp.sample_tables import EXAMPLE_QUERIES, ph_buffer_table
from lutinterp.table_io import read_table

logger = logging.getLogger(__name__)


def load_lut(cfg: LookupConfig) -> InterpolableLUT:
    if cfg.table_path is None:
        return ph_buffer_table()
    return read_table(cfg.table_path, fmt=cfg.table_format)


def run_example(lut: InterpolableLUT, cfg: LookupConfig, out=None) -> None:
    """Print the example queries followed by the rendered table."""
    out = out if out is not None else sys.stdout
    for x, y in EXAMPLE_QUERIES:
        out.write(f"{cfg.label}: {lut.find(x, y):.{cfg.precision}f}\n")
    out.write(render_table(lut, precision=cfg.precision))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="lutinterp",
        description="Standardize a value with a 2-D look-up table (defaults to the pH/temperature buffer table).",
    )
    ap.add_argument("--x", type=float, help="Measured value along the x axis (e.g. pH)")
    ap.add_argument("--y", type=float, help="Measured condition along the y axis (e.g. temperature)")
    ap.add_argument("--table", help="Table file to load instead of the built-in pH table")
    ap.add_argument("--format", dest="table_format", choices=TABLE_FORMATS, default="auto")
    ap.add_argument("--precision", type=int, default=2)
    ap.add_argument("--label", default="pH")
    ap.add_argument("--json", action="store_true", help="Print the lookup result as JSON")
    ap.add_argument("--print-table", action="store_true")
    ap.add_argument("--plot-dir", help="Write diagnostic plots to this directory")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if (args.x is None) != (args.y is None):
        ap.error("--x and --y must be given together")

    try:
        cfg = LookupConfig(
            table_path=args.table,
            table_format=args.table_format,
            precision=args.precision,
            label=args.label,
            plot_dir=args.plot_dir,
            log_level="DEBUG" if args.verbose else "WARNING",
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        lut = load_lut(cfg)
    except (OSError, ValueError, RuntimeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.x is None:
        run_example(lut, cfg)
    else:
        res = lut.lookup(args.x, args.y)
        if args.json:
            print(json.dumps({"x": args.x, "y": args.y, **asdict(res)}, sort_keys=True))
        else:
            print(f"{cfg.label}: {res.value:.{cfg.precision}f}")
        if args.print_table:
            sys.stdout.write(render_table(lut, precision=cfg.precision))

    if cfg.plot_dir is not None:
        queries = EXAMPLE_QUERIES if args.x is None else ((args.x, args.y),)
        try:
            written = create_table_plots(lut, cfg.plot_dir, x_label=cfg.label, queries=queries)
        except RuntimeError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        for path in written.values():
            logger.info("Wrote %s", path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
