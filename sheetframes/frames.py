"""
Core data types shared by the detector and the transform steps.

A *frame* is one detected table, stored as a plain list of rows:

- Straight out of the detector a row is ``[label, value1, value2, ...]``
  where ``label`` is the leftmost cell of that row inside the frame.
- After column splitting every row is a ``(key, value)`` tuple, so each
  frame reads as a small list of named fields (a *record*).

Frames stay plain lists until the very end; ``UnifiedTable.to_dataframe()``
is the only conversion to pandas.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import pandas as pd

Row = list[str]
Field = tuple[str, str]
Frame = list[Row] | list[Field]
Record = list[Field]


@dataclass(frozen=True)
class FrameRange:
    """Bounding box of one detected table.

    Attributes:
        head: ``(row, col)`` of the origin cell (always non-blank).
        tail: ``(row, col_max)``. Both are exclusive: ``row`` is the first
            row that is not part of the frame and ``col_max`` is one past
            the widest column reached by any row of the region.
    """

    head: tuple[int, int]
    tail: tuple[int, int]

    @property
    def rows(self) -> range:
        return range(self.head[0], self.tail[0])

    @property
    def cols(self) -> range:
        return range(self.head[1], self.tail[1])

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.cols)

    def cells(self) -> set[tuple[int, int]]:
        """Every ``(row, col)`` coordinate inside the bounding box."""
        return {(r, c) for r in self.rows for c in self.cols}


@dataclass
class UnifiedTable:
    """Final record set where every record shares one ordered column list.

    Attributes:
        columns: Sorted union of all field names seen across the records.
        records: One ``[(name, value), ...]`` list per record, each in
            ``columns`` order.
    """

    columns: list[str] = field(default_factory=list)
    records: list[Record] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def values(self) -> Iterator[list[str]]:
        """Yield each record's values in column order."""
        for record in self.records:
            yield [value for _key, value in record]

    def to_dataframe(self) -> pd.DataFrame:
        """Return the table as a string-typed DataFrame."""
        return pd.DataFrame(list(self.values()), columns=self.columns, dtype=str)
