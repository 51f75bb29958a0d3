"""Runtime configuration for table lookups."""

from __future__ import annotations

from dataclasses import dataclass

TABLE_FORMATS = ("auto", "text", "csv", "pickle", "parquet")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LookupConfig:
    """Container for user-controlled lookup settings."""

    table_path: str | None = None
    table_format: str = "auto"
    precision: int = 2
    label: str = "pH"
    plot_dir: str | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.table_path is not None and str(self.table_path).strip() == "":
            raise ValueError("table_path cannot be empty")
        if self.table_format not in TABLE_FORMATS:
            raise ValueError("table_format must be one of: auto, text, csv, pickle, parquet")
        if self.precision < 0:
            raise ValueError("precision must be >= 0")
        if str(self.label).strip() == "":
            raise ValueError("label cannot be empty")
        if self.plot_dir is not None and str(self.plot_dir).strip() == "":
            raise ValueError("plot_dir cannot be empty")
        if self.log_level not in LOG_LEVELS:
            raise ValueError("log_level must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")
