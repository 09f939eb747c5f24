"""
Formatter and writer for sheetframes.

``format_csv`` turns unified records into delimited text: one header line
taken from the first record's field names, then one line per record with
values in that record's own field order. The formatter trusts that the
records were unified first (every record with the same ordered field
names) and does not re-align anything.

Values are joined as-is: no quoting or escaping. A value containing the
delimiter or a line break will shift or split its line.

``write_output`` sends the result to standard output (the default) or
to a file, as CSV text or as Parquet via pandas + pyarrow. The text is
fully formatted before anything is written, so a failing run never
leaves partial output behind.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal, Sequence, TextIO

from sheetframes.exceptions import EmptyResultError, ExportError
from sheetframes.frames import Record, UnifiedTable

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def format_csv(records: Sequence[Record], delimiter: str = ",") -> str:
    """Serialize unified records to delimited text.

    Args:
        records: Records of ``(name, value)`` fields sharing one field order.
        delimiter: Field separator.

    Returns:
        Header line and record lines joined by ``\\n`` (no trailing newline).

    Raises:
        EmptyResultError: If there are no records to take a header from.
    """
    if not records:
        raise EmptyResultError("No data: no tables were found in the grid")

    header = delimiter.join(key for key, _value in records[0])
    body = [delimiter.join(value for _key, value in record) for record in records]
    return "\n".join([header, *body])


def _write_text(text: str, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text + "\n")
    except OSError as exc:
        raise ExportError(f"Failed to write {path.name} as csv: {exc}") from exc


def _write_parquet(table: UnifiedTable, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        table.to_dataframe().to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(f"Failed to write {path.name} as parquet: {exc}") from exc


def write_output(
    table: UnifiedTable,
    output_path: str | Path | None = None,
    output_format: Literal["csv", "parquet"] = "csv",
    delimiter: str = ",",
    stream: TextIO | None = None,
) -> str | None:
    """Write a unified table to standard output or to a file.

    Args:
        table: The unified table.
        output_path: Destination file. ``None`` writes CSV text to *stream*.
        output_format: ``"csv"`` or ``"parquet"`` (parquet needs a path).
        delimiter: Field separator for CSV output.
        stream: Text stream used when *output_path* is ``None``; defaults
            to ``sys.stdout``.

    Returns:
        The written file path as a string, or ``None`` for stream output.

    Raises:
        EmptyResultError: If the table has no records.
        ExportError: If the format is unsupported or the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    if output_format == "parquet":
        if output_path is None:
            raise ExportError("Parquet output requires an output path")
        if not table.records:
            raise EmptyResultError("No data: no tables were found in the grid")
        path = Path(output_path)
        _write_parquet(table, path)
        logger.info(
            "Exported %d record(s) x %d column(s) -> %s",
            len(table.records), len(table.columns), path.name,
        )
        return str(path)

    text = format_csv(table.records, delimiter=delimiter)

    if output_path is None:
        out = stream if stream is not None else sys.stdout
        out.write(text + "\n")
        return None

    path = Path(output_path)
    _write_text(text, path)
    logger.info(
        "Exported %d record(s) x %d column(s) -> %s",
        len(table.records), len(table.columns), path.name,
    )
    return str(path)
