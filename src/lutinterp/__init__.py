"""Two-dimensional look-up tables with bilinear standardization."""

from .interpolation import find_bracket, interpolate_row, linear_interpolate
from .lookup_table import InterpolableLUT, LookupResult
from .rendering import parse_table, render_table
from .table_io import read_raw_table, read_table, write_table
from .sample_tables import ph_buffer_table
from .config import LookupConfig
from .diagnostics import diagnostics_from_arrays, run_diagnostics, table_diagnostics
from .plotting import create_table_plots

__all__ = [
    "InterpolableLUT",
    "LookupResult",
    "LookupConfig",
    "find_bracket",
    "interpolate_row",
    "linear_interpolate",
    "parse_table",
    "render_table",
    "read_raw_table",
    "read_table",
    "write_table",
    "ph_buffer_table",
    "diagnostics_from_arrays",
    "run_diagnostics",
    "table_diagnostics",
    "create_table_plots",
]
