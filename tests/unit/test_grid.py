"""
Unit tests for the Grid snapshot and loaders (sheetframes.grid).

Excel workbooks are generated with openpyxl into ``tmp_path``; CSV files
are written inline.
"""

from __future__ import annotations

import datetime as dt

import numpy as np
import pandas as pd
import pytest

from sheetframes.exceptions import MalformedGridError, MissingSourceError
from sheetframes.grid import Grid, load_grid, read_csv_grid


class TestGrid:
    """Tests for the Grid model."""

    def test_dimensions_and_cell_text(self):
        grid = Grid.from_rows([["A", "1"], ["B", ""]])
        assert (grid.height, grid.width) == (2, 2)
        assert grid.cell_text(0, 0) == "A"
        assert grid.cell_text(1, 1) == ""

    def test_empty_grid(self):
        grid = Grid.from_rows([])
        assert (grid.height, grid.width) == (0, 0)

    def test_ragged_rows_raise(self):
        with pytest.raises(MalformedGridError, match="Row 1 has 1 cells, expected 2"):
            Grid.from_rows([["A", "1"], ["B"]])

    def test_out_of_bounds_raises(self):
        grid = Grid.from_rows([["A"]])
        with pytest.raises(IndexError):
            grid.cell_text(0, 1)
        with pytest.raises(IndexError):
            grid.cell_text(-1, 0)

    def test_rows_returns_copy(self):
        grid = Grid.from_rows([["A", "1"]])
        rows = grid.rows()
        rows[0][0] = "changed"
        assert grid.cell_text(0, 0) == "A"

    def test_from_dataframe(self):
        df = pd.DataFrame({"x": ["A", None, "C"], "y": [1.0, np.nan, 2.5]})
        grid = Grid.from_dataframe(df)
        assert grid.rows() == [["A", "1"], ["", ""], ["C", "2.5"]]


class TestLoadGridExcel:
    """Tests for loading .xlsx workbooks."""

    def test_reads_first_sheet(self, write_workbook):
        path = write_workbook([["A", 1], ["B", 2.5]])
        grid = load_grid(path)
        assert grid.rows() == [["A", "1"], ["B", "2.5"]]

    def test_blank_cells_are_empty_strings(self, write_workbook):
        path = write_workbook([["A", "", "C"], ["", "", ""], ["", "x", ""]])
        grid = load_grid(path)
        assert (grid.height, grid.width) == (3, 3)
        assert grid.rows()[1] == ["", "", ""]
        assert grid.cell_text(2, 1) == "x"

    def test_dates_render_as_iso_text(self, write_workbook):
        path = write_workbook([["When", dt.datetime(2024, 1, 2)]])
        grid = load_grid(path)
        assert grid.cell_text(0, 1) == "2024-01-02"

    def test_booleans_render_as_spreadsheet_text(self, write_workbook):
        path = write_workbook([["Flag", True, False]])
        assert load_grid(path).rows() == [["Flag", "TRUE", "FALSE"]]

    def test_sheet_by_index_and_name(self, write_workbook):
        path = write_workbook([["first"]], sheets={"Other": [["second"]]})
        assert load_grid(path, sheet=1).cell_text(0, 0) == "second"
        assert load_grid(path, sheet="Other").cell_text(0, 0) == "second"

    def test_missing_sheet_index(self, write_workbook):
        path = write_workbook([["A"]])
        with pytest.raises(MissingSourceError, match="Sheet index 3 not found"):
            load_grid(path, sheet=3)

    def test_missing_sheet_name(self, write_workbook):
        path = write_workbook([["A"]])
        with pytest.raises(MissingSourceError, match="Sheet 'Nope' not found"):
            load_grid(path, sheet="Nope")


class TestLoadGridCsv:
    """Tests for loading delimited text files."""

    def test_reads_csv(self, write_csv):
        path = write_csv([["A", "1"], ["B", "2"]])
        assert load_grid(path).rows() == [["A", "1"], ["B", "2"]]

    def test_short_lines_are_padded(self, tmp_path):
        path = tmp_path / "ragged.csv"
        path.write_text("A,1,2\nB\n\nC,3\n", encoding="utf-8")
        grid = read_csv_grid(path)
        assert grid.rows() == [
            ["A", "1", "2"],
            ["B", "", ""],
            ["", "", ""],
            ["C", "3", ""],
        ]

    def test_bom_and_whitespace(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_text("\ufeffA , 1\r\n", encoding="utf-8")
        assert load_grid(path).rows() == [["A", "1"]]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        grid = load_grid(path)
        assert (grid.height, grid.width) == (0, 0)


class TestLoadGridErrors:
    """Tests for load_grid() error handling."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(MissingSourceError, match="not found"):
            load_grid(tmp_path / "nope.xlsx")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "notes.pdf"
        path.write_bytes(b"%PDF")
        with pytest.raises(MissingSourceError, match="Unsupported input type"):
            load_grid(path)

    def test_corrupt_workbook(self, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"not a zip file")
        with pytest.raises(MissingSourceError, match="Cannot read workbook broken.xlsx"):
            load_grid(path)

    def test_non_utf8_text(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"A,\xe9t\xe9\n")
        with pytest.raises(MissingSourceError, match="as UTF-8 text"):
            load_grid(path)
