"""
Grid snapshot and grid loaders for sheetframes.

The ``Grid`` is the only input the detector sees: an immutable,
rectangular ``height x width`` block of cell text where blank cells are
the empty string. ``height``/``width`` are authoritative, so ragged input
is rejected with ``MalformedGridError`` at construction time.

Loaders:
- **Excel** (``.xlsx`` / ``.xlsm``): openpyxl with ``data_only=True`` so
  formula cells yield their cached values. One worksheet per run,
  selected by 0-based index or by name.
- **CSV** (``.csv`` / ``.txt``): read line by line and split on the
  delimiter. Spreadsheet tools drop trailing empty fields, so short lines
  are right-padded to the widest line before the grid is built.

Every cell is reduced to plain text; types, formulas and styles are not
carried over.
"""

from __future__ import annotations

import datetime as dt
import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence

import pandas as pd
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from sheetframes.exceptions import MalformedGridError, MissingSourceError

logger = logging.getLogger(__name__)

_EXCEL_SUFFIXES = {".xlsx", ".xlsm"}
_TEXT_SUFFIXES = {".csv", ".txt"}


@dataclass(frozen=True)
class Grid:
    """Immutable rectangular snapshot of cell text.

    Build instances with ``Grid.from_rows()`` or ``Grid.from_dataframe()``
    rather than calling the constructor directly.
    """

    cells: tuple[tuple[str, ...], ...]
    width: int

    def __post_init__(self) -> None:
        for index, row in enumerate(self.cells):
            if len(row) != self.width:
                raise MalformedGridError(
                    f"Row {index} has {len(row)} cells, expected {self.width}. "
                    "Every row of a grid must have the same width."
                )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> Grid:
        """Build a grid from row sequences of equal length.

        Raises:
            MalformedGridError: If the rows differ in length.
        """
        cells = tuple(tuple(row) for row in rows)
        width = len(cells[0]) if cells else 0
        return cls(cells=cells, width=width)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> Grid:
        """Build a grid from a DataFrame's values (column labels are ignored).

        Missing values become blank cells; everything else is ``str()``-ed.
        """
        rows = [
            [_cell_text(value) for value in record]
            for record in df.itertuples(index=False, name=None)
        ]
        return cls.from_rows(rows)

    @property
    def height(self) -> int:
        return len(self.cells)

    def cell_text(self, row: int, col: int) -> str:
        """Return the text of ``(row, col)``, ``""`` for a blank cell."""
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"Cell ({row}, {col}) is outside the {self.height}x{self.width} grid"
            )
        return self.cells[row][col]

    def rows(self) -> list[list[str]]:
        """Return a mutable copy of the cell text, row by row."""
        return [list(row) for row in self.cells]


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------

def _cell_text(value: Any) -> str:
    """Render a raw cell value the way a spreadsheet would display it."""
    if value is None or value is pd.NA or value is pd.NaT:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    if isinstance(value, dt.datetime):
        if value.time() == dt.time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, dt.date):
        return value.isoformat()
    return str(value)


def _pad_rows(rows: list[list[str]]) -> list[list[str]]:
    width = max((len(row) for row in rows), default=0)
    return [row + [""] * (width - len(row)) for row in rows]


def read_excel_grid(path: Path, sheet: int | str = 0) -> Grid:
    """Load one worksheet of an Excel workbook as a Grid.

    Args:
        path: Path to the ``.xlsx`` / ``.xlsm`` file.
        sheet: 0-based worksheet index, or the worksheet name.

    Raises:
        MissingSourceError: If the file is not a readable workbook or the
            requested worksheet does not exist.
    """
    try:
        wb = load_workbook(path, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as exc:
        raise MissingSourceError(
            f"Cannot read workbook {path.name}: {exc}"
        ) from exc
    try:
        if isinstance(sheet, int):
            if not 0 <= sheet < len(wb.worksheets):
                raise MissingSourceError(
                    f"Sheet index {sheet} not found in {path.name} "
                    f"({len(wb.worksheets)} worksheet(s))"
                )
            ws = wb.worksheets[sheet]
        else:
            if sheet not in wb.sheetnames:
                raise MissingSourceError(
                    f"Sheet '{sheet}' not found in {path.name}. "
                    f"Available sheets: {wb.sheetnames}"
                )
            ws = wb[sheet]

        height, width = ws.max_row or 0, ws.max_column or 0
        logger.info(
            "Reading sheet '%s' from %s (%d rows x %d cols)",
            ws.title, path.name, height, width,
        )
        rows = [
            [_cell_text(value) for value in row]
            for row in ws.iter_rows(
                min_row=1, max_row=height, min_col=1, max_col=width, values_only=True
            )
        ]
    finally:
        wb.close()

    if not rows:
        logger.warning("Sheet '%s' in %s reports no rows", sheet, path.name)
    return Grid.from_rows(_pad_rows(rows))


def read_csv_grid(path: Path, delimiter: str = ",") -> Grid:
    """Load a delimited text file as a Grid.

    Lines are split on *delimiter* without quote handling, cells are
    stripped, and short lines are padded with blank cells.

    Raises:
        MissingSourceError: If the file cannot be decoded as UTF-8.
    """
    rows: list[list[str]] = []
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            for line in f:
                rows.append([c.strip() for c in line.rstrip("\n\r").split(delimiter)])
    except (UnicodeDecodeError, OSError) as exc:
        raise MissingSourceError(f"Cannot read {path.name} as UTF-8 text: {exc}") from exc
    logger.info("Read %d lines from %s", len(rows), path.name)
    return Grid.from_rows(_pad_rows(rows))


def load_grid(path: str | Path, sheet: int | str = 0) -> Grid:
    """Load the grid of cell text the detector will scan.

    Args:
        path: Path to an Excel workbook or a CSV/TXT file.
        sheet: Worksheet index or name (Excel only; ignored for text files).

    Returns:
        The loaded ``Grid``.

    Raises:
        MissingSourceError: If the file does not exist, the sheet is not
            found, or the extension is not supported.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingSourceError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in _EXCEL_SUFFIXES:
        return read_excel_grid(path, sheet)
    if suffix in _TEXT_SUFFIXES:
        return read_csv_grid(path)
    raise MissingSourceError(
        f"Unsupported input type '{suffix}' for {path}. "
        f"Supported: {sorted(_EXCEL_SUFFIXES | _TEXT_SUFFIXES)}"
    )
