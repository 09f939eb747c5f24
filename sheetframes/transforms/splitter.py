"""
Column splitter transform for sheetframes.

Detected frames use their leftmost column as the key column and every
other column as values. A frame with several value columns holds several
logical records side by side (e.g., one column per year or per product),
so it is melted into one two-column frame per value column, all sharing
the same label column.

After this step every row of every frame is a ``(key, value)`` tuple.
"""

from __future__ import annotations

import logging

from sheetframes.frames import Frame

logger = logging.getLogger(__name__)


def split_columns(frames: list[Frame]) -> list[Frame]:
    """Melt multi-value frames into ``(key, value)`` frames.

    The number of value columns ``N`` is taken from each frame's first row:

    - ``N == 1``: the frame passes through (rows become tuples).
    - ``N > 1``: one new frame per value column ``i`` in ``1..N``, each
      row being ``(row[0], row[i])``.
    - ``N == 0``: a single-column frame passes through as ``(label, "")``
      rows, so the output count is ``sum(max(1, N))`` over the input.

    Frames without rows have nothing to split and are dropped.

    Args:
        frames: Frames as produced by the detector (rows of
            ``[label, value, ...]``).

    Returns:
        A new list of frames whose rows are ``(key, value)`` tuples.
    """
    out_frames: list[Frame] = []

    for frame in frames:
        if not frame:
            logger.debug("Skipping frame without rows")
            continue

        n_values = len(frame[0]) - 1
        if n_values <= 1:
            out_frames.append([(row[0], row[1] if len(row) > 1 else "") for row in frame])
            continue

        for i in range(1, n_values + 1):
            out_frames.append([(row[0], row[i]) for row in frame])
        logger.debug("Split frame '%s' into %d frames", frame[0][0], n_values)

    return out_frames
