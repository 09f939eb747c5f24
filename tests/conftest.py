"""
Shared test fixtures for sheetframes tests.

Workbooks are generated on the fly with openpyxl into ``tmp_path`` so the
suite needs no checked-in input files. Grids used across several test
modules are defined here as module-level constants.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence

import pytest
from openpyxl import Workbook

# ---------------------------------------------------------------------------
# Sample sheet: two key-value tables stacked on the left, one on the right
# ---------------------------------------------------------------------------
#   Person | Alice | Bob |  | Total | 3
#   Age    | 30    | 25  |  |       |
#          |       |     |  |       |
#   City   | Paris |     |  |       |
_MIXED_ROWS: list[list[str]] = [
    ["Person", "Alice", "Bob", "", "Total", "3"],
    ["Age", "30", "25", "", "", ""],
    ["", "", "", "", "", ""],
    ["City", "Paris", "", "", "", ""],
]

_MIXED_CSV = "Age,Title\n30,Person\n25,Person\n,City\n,Total"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def mixed_rows() -> list[list[str]]:
    """The sample sheet above, as rows of cell text."""
    return [list(row) for row in _MIXED_ROWS]


@pytest.fixture()
def mixed_csv() -> str:
    """Expected normalized CSV for the sample sheet."""
    return _MIXED_CSV


@pytest.fixture()
def write_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing ``rows`` into a fresh .xlsx and returning its path.

    Empty strings are written as empty cells. Extra sheets can be added
    via ``sheets={"Name": rows, ...}`` (appended after the first sheet).
    """

    def _write(
        rows: Sequence[Sequence[object]],
        name: str = "book.xlsx",
        title: str = "Sheet1",
        sheets: dict[str, Sequence[Sequence[object]]] | None = None,
    ) -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = title
        for row in rows:
            ws.append([None if value == "" else value for value in row])
        for sheet_title, sheet_rows in (sheets or {}).items():
            extra = wb.create_sheet(sheet_title)
            for row in sheet_rows:
                extra.append([None if value == "" else value for value in row])
        path = tmp_path / name
        wb.save(path)
        return path

    return _write


@pytest.fixture()
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing ``rows`` as comma-joined lines and returning the path."""

    def _write(rows: Sequence[Sequence[str]], name: str = "sheet.csv") -> Path:
        path = tmp_path / name
        path.write_text("".join(",".join(row) + "\n" for row in rows), encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against generated workbooks)",
    )
