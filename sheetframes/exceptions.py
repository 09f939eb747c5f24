"""
Custom exception hierarchy for sheetframes.

Callers can catch a specific failure (e.g., MissingSourceError vs
EmptyResultError) instead of a generic ValueError/RuntimeError. Every
condition below is terminal for the current run: nothing is retried and
no partial output is written.
"""


class SheetFramesError(Exception):
    """Base exception for all sheetframes errors."""


class MissingSourceError(SheetFramesError):
    """Raised when the input file or the requested sheet cannot be located.

    Also raised for input files whose extension has no grid loader.
    """


class EmptyResultError(SheetFramesError):
    """Raised when detection or unification produces nothing to emit.

    An empty grid, or a grid with only blank cells, yields zero frames;
    the formatter has no header source in that case.
    """


class MalformedGridError(SheetFramesError):
    """Raised when rows of inconsistent width are used to build a Grid.

    The detector relies on ``height``/``width`` being authoritative, so a
    ragged grid is rejected up front.
    """


class ConfigValidationError(SheetFramesError):
    """Raised when a sheetframes YAML config is unusable.

    This can happen if:
    - The config file is empty.
    - No input path is available after merging CLI arguments and config.
    """


class ExportError(SheetFramesError):
    """Raised when the writer fails to emit output.

    For example, permission errors, an unsupported format, or parquet
    requested without an output path.
    """
