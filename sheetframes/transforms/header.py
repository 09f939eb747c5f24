"""
Header promotion transform for sheetframes.

The first row of a frame names the table rather than holding data, so
it is rewritten to ``(Title, <original first label>)``. This turns each
frame into one flat record whose ``Title`` field says which sub-table
the record came from.
"""

from __future__ import annotations

from sheetframes.frames import Frame

DEFAULT_TITLE_FIELD = "Title"


def promote_header(frame: Frame, title_field: str = DEFAULT_TITLE_FIELD) -> Frame:
    """Return a copy of *frame* with row 0 set to ``(title_field, label)``.

    Rows after the first are untouched; a frame without rows is returned
    as an (empty) copy.
    """
    out_frame = [(key, value) for key, value in frame]
    if out_frame:
        out_frame[0] = (title_field, frame[0][0])
    return out_frame


def promote_headers(
    frames: list[Frame],
    title_field: str = DEFAULT_TITLE_FIELD,
) -> list[Frame]:
    """Apply ``promote_header`` to every frame."""
    return [promote_header(frame, title_field) for frame in frames]
