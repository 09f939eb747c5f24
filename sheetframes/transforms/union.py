"""
Column unifier transform for sheetframes.

After splitting and header promotion each frame is one record made of
``(name, value)`` fields, but different records carry different names.
This step computes the sorted union of all field names and re-keys
every record onto it, filling absent fields with an empty string, so
the formatter can emit a single header line for all records.

Sorting is plain ``str`` ordering, which makes the column order
independent of the order tables appear in the sheet.
"""

from __future__ import annotations

import logging

from sheetframes.frames import Frame, Record, UnifiedTable

logger = logging.getLogger(__name__)


def unify_columns(frames: list[Frame], fill_value: str = "") -> UnifiedTable:
    """Re-key every record onto the sorted union of all field names.

    When a record repeats a field name, the first occurrence wins.

    Args:
        frames: Frames whose rows are ``(name, value)`` fields.
        fill_value: Value for fields a record does not have. Always ``""``
            in the shipped pipeline.

    Returns:
        A ``UnifiedTable``; empty (no columns, no records) for empty input.
    """
    column_names = sorted({key for frame in frames for key, _value in frame})

    records: list[Record] = []
    for frame in frames:
        lookup: dict[str, str] = {}
        for key, value in frame:
            lookup.setdefault(key, value)
        records.append([(name, lookup.get(name, fill_value)) for name in column_names])

    logger.debug(
        "Unified %d record(s) onto %d column(s)", len(records), len(column_names)
    )
    return UnifiedTable(columns=column_names, records=records)
