"""
Internal pipeline orchestration for sheetframes.

Extracted from ``__init__.py`` so that both the public ``run()`` function
and the CLI reuse the same load -> transform -> write sequence.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from typing import TextIO

from sheetframes.config import ConvertConfig
from sheetframes.exceptions import EmptyResultError
from sheetframes.export import write_output
from sheetframes.grid import load_grid
from sheetframes.transforms.pipeline import PipelineResult, TransformPipeline

logger = logging.getLogger(__name__)


def run_pipeline(config: ConvertConfig) -> PipelineResult:
    """Load the configured grid and run the transform pipeline on it.

    Raises:
        MissingSourceError: If the input file or sheet cannot be found.
        EmptyResultError: If no table was detected in the grid.
    """
    grid = load_grid(config.source.input_path, sheet=config.source.sheet)
    result = TransformPipeline(config.normalize).run(grid)
    if result.is_empty:
        raise EmptyResultError(
            f"No data: no tables were found in {config.source.input_path}"
        )
    return result


def run_pipeline_and_export(
    config: ConvertConfig,
    stream: TextIO | None = None,
) -> str | None:
    """Run the pipeline and write the unified table.

    Steps:
      1. Load the grid (``load_grid``).
      2. Detect, split, promote and unify (``TransformPipeline``).
      3. Write to the configured destination (``write_output``).

    Args:
        config: The validated ConvertConfig.
        stream: Stream for stdout-style output (defaults to ``sys.stdout``).

    Returns:
        Path of the written file, or ``None`` when writing to a stream.
    """
    result = run_pipeline(config)
    written = write_output(
        result.table,
        output_path=config.output.output_path,
        output_format=config.output.output_format,
        delimiter=config.output.delimiter,
        stream=stream,
    )
    logger.info(
        "Pipeline complete: %d frame(s) -> %d record(s)",
        result.frames_detected, len(result.table.records),
    )
    return written
