"""
sheetframes: detect the tables inside one spreadsheet grid and flatten
them into a single normalized, delimited record set.

Public API surface:

- ``extract(path, ...)`` -- Load a workbook/CSV, detect its tables and
  return the unified table (``UnifiedTable``).

- ``convert(path, ...)`` -- Same as ``extract`` but returns the CSV text.

- ``run(config)`` -- Config-driven workflow. Accepts a ``ConvertConfig``
  or a path to a YAML config, and writes the result to the configured
  destination (standard output by default).

Lower-level building blocks (``Grid``, ``detect_frames``,
``split_columns``, ``promote_headers``, ``unify_columns``,
``format_csv``) are re-exported for callers that already hold a grid.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sheetframes._pipeline import run_pipeline, run_pipeline_and_export
from sheetframes.config import (
    ConvertConfig,
    NormalizeConfig,
    OutputConfig,
    SourceConfig,
    load_config,
)
from sheetframes.detect import detect_frames, scan_ranges
from sheetframes.export import format_csv
from sheetframes.frames import FrameRange, UnifiedTable
from sheetframes.grid import Grid, load_grid
from sheetframes.transforms.header import promote_headers
from sheetframes.transforms.splitter import split_columns
from sheetframes.transforms.union import unify_columns

__all__ = [
    "extract",
    "convert",
    "run",
    "ConvertConfig",
    "FrameRange",
    "Grid",
    "UnifiedTable",
    "detect_frames",
    "format_csv",
    "load_grid",
    "promote_headers",
    "scan_ranges",
    "split_columns",
    "unify_columns",
]

logger = logging.getLogger(__name__)


def _build_config(
    path: str | Path,
    sheet: int | str,
    promote_headers: bool,
    title_field: str,
    delimiter: str = ",",
) -> ConvertConfig:
    return ConvertConfig(
        source=SourceConfig(input_path=str(path), sheet=sheet),
        normalize=NormalizeConfig(
            promote_headers=promote_headers, title_field=title_field
        ),
        output=OutputConfig(delimiter=delimiter),
    )


def extract(
    path: str | Path,
    sheet: int | str = 0,
    promote_headers: bool = True,
    title_field: str = "Title",
) -> UnifiedTable:
    """Detect and normalize the tables of one sheet.

    Args:
        path: Path to an ``.xlsx``/``.xlsm`` workbook or a ``.csv`` file.
        sheet: 0-based worksheet index or worksheet name (Excel only).
        promote_headers: If ``False``, frames keep their first row as data.
        title_field: Field name that receives each frame's first label.

    Returns:
        The unified table.

    Raises:
        MissingSourceError: If the file or sheet cannot be found.
        EmptyResultError: If the sheet contains no table.
    """
    config = _build_config(path, sheet, promote_headers, title_field)
    logger.info("extract() -- path=%s, sheet=%s", path, sheet)
    return run_pipeline(config).table


def convert(
    path: str | Path,
    sheet: int | str = 0,
    delimiter: str = ",",
    promote_headers: bool = True,
    title_field: str = "Title",
) -> str:
    """Detect and normalize the tables of one sheet and return CSV text.

    The text has a header line followed by one line per record and no
    trailing newline. Raises the same errors as ``extract()``.
    """
    config = _build_config(path, sheet, promote_headers, title_field, delimiter)
    table = run_pipeline(config).table
    return format_csv(table.records, delimiter=config.output.delimiter)


def run(config: ConvertConfig | str | Path) -> str | None:
    """Config-driven entry point: load, normalize and write.

    Args:
        config: A ``ConvertConfig`` or a path to a YAML config file.

    Returns:
        The written file path, or ``None`` when output went to stdout.

    Raises:
        FileNotFoundError: If a config path does not exist.
        pydantic.ValidationError: If the config fails validation.
        SheetFramesError: For missing sources, empty results and export
            failures.
    """
    if not isinstance(config, ConvertConfig):
        logger.info("run() -- loading config from %s", config)
        config = load_config(config)
    return run_pipeline_and_export(config)
