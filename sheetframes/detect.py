"""
Frame detection for sheetframes.

Discovers the individual tables ("frames") inside a single grid without
the caller pre-specifying ranges. Tables may be separated by blank rows
or blank columns, may contain internal blank cells, and may be ragged
(header rows narrower than data rows, or the other way around).

Detection algorithm (column-major: each column left -> right, each row
top -> bottom):

1. Skip cells already marked in the visitation mask.
2. Skip blank cells -- a frame never starts on a blank origin.
3. From a non-blank origin ``(i, j)`` run a region scan, walking each row
   rightwards from column ``j``:
   a. A non-blank cell extends the row and may widen the frame
      (``tj_max``), so later rows can grow the right edge.
   b. A blank cell left of ``tj_max`` is a gap inside the table; keep
      walking.
   c. A blank cell at or beyond ``tj_max`` (or the grid edge) ends the
      row. If the row had no non-blank cell at all, the region is
      complete; otherwise continue on the next row.
4. Record ``FrameRange(head=(i, j), tail=(ti, tj_max))``.
5. Materialize each range into rows of ``[label, value, ...]``.

Every cell the region scan walks over is marked, including the blank
cells of the trailing row that terminates the region. Cells inside a
recorded bounding box that the walk never reached (the outer corner of a
staircase-shaped table) stay unmarked and can seed another frame later.
"""

from __future__ import annotations

import logging

from sheetframes.frames import Frame, FrameRange
from sheetframes.grid import Grid

logger = logging.getLogger(__name__)


def _scan_region(
    grid: Grid,
    visited: list[list[bool]],
    i: int,
    j: int,
) -> FrameRange:
    """Grow one region from the non-blank origin ``(i, j)``."""
    height, width = grid.height, grid.width
    ti, tj = i, j
    tj_max = j
    row_empty = False

    while True:
        # Out of rows
        if ti >= height:
            break

        # Out of columns: next row, unless this row had nothing in it
        if tj >= width:
            if row_empty:
                break
            tj = j
            ti += 1
            row_empty = True
            continue

        visited[ti][tj] = True

        if grid.cell_text(ti, tj):
            row_empty = False
            tj += 1
            tj_max = max(tj, tj_max)
        elif tj < tj_max:
            # Gap inside the established width
            tj += 1
        else:
            if row_empty:
                break
            tj = j
            ti += 1
            row_empty = True

    return FrameRange(head=(i, j), tail=(ti, tj_max))


def scan_ranges(grid: Grid) -> list[FrameRange]:
    """Scan *grid* once and return the range of every detected table.

    The visitation mask lives only for the duration of this call.

    Returns:
        Ranges in discovery order (column-major by origin).
    """
    visited = [[False] * grid.width for _ in range(grid.height)]
    ranges: list[FrameRange] = []

    for j in range(grid.width):
        for i in range(grid.height):
            if visited[i][j]:
                continue
            if not grid.cell_text(i, j):
                continue
            rng = _scan_region(grid, visited, i, j)
            logger.debug(
                "Frame %d: head=%s tail=%s (%d rows x %d cols)",
                len(ranges), rng.head, rng.tail, rng.height, rng.width,
            )
            ranges.append(rng)

    return ranges


def materialize_frame(grid: Grid, rng: FrameRange) -> Frame:
    """Read a detected range out of the grid as ``[label, value, ...]`` rows.

    The label is the cell in the range's first column; the values are the
    remaining cells up to ``col_max`` (exclusive), blanks included.
    """
    head_row, head_col = rng.head
    tail_row, col_max = rng.tail
    frame: Frame = []
    for row in range(head_row, tail_row):
        label = grid.cell_text(row, head_col)
        values = [grid.cell_text(row, col) for col in range(head_col + 1, col_max)]
        frame.append([label, *values])
    return frame


def detect_frames(grid: Grid) -> list[Frame]:
    """Detect every table in *grid* and return them as frames.

    Args:
        grid: The grid snapshot to scan. Never mutated.

    Returns:
        One frame per detected range, in discovery order. Empty when the
        grid has no non-blank cell.
    """
    logger.info(
        "Searching for frames across %d rows and %d columns",
        grid.height, grid.width,
    )
    ranges = scan_ranges(grid)
    frames = [materialize_frame(grid, rng) for rng in ranges]
    logger.info("Detected %d frame(s)", len(frames))
    return frames
