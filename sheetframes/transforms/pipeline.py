"""
Transform pipeline orchestrator for sheetframes.

Runs the fixed sequence of steps on one grid:

1. **FrameDetector**: Find every table in the grid.
2. **ColumnSplitter**: Melt multi-value frames into (key, value) frames.
3. **HeaderPromoter**: Rewrite each frame's first row to a title field.
4. **ColumnUnifier**: Re-key all records onto the sorted field union.

The pipeline receives the ``NormalizeConfig`` so header promotion can be
switched off and the title field renamed. Detection, splitting and
unification always run.

Returns a ``PipelineResult`` carrying the unified table plus the
intermediate counts (useful for logging and tests).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sheetframes.config import NormalizeConfig
from sheetframes.detect import detect_frames
from sheetframes.frames import UnifiedTable
from sheetframes.grid import Grid
from sheetframes.transforms.header import promote_headers
from sheetframes.transforms.splitter import split_columns
from sheetframes.transforms.union import unify_columns

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Output of the transform pipeline.

    Attributes:
        table: The unified record set.
        frames_detected: Number of frames found by the detector.
        frames_split: Number of frames after column splitting.
    """

    table: UnifiedTable = field(default_factory=UnifiedTable)
    frames_detected: int = 0
    frames_split: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.table.records


class TransformPipeline:
    """Orchestrates detection and normalization of one grid.

    The pipeline is **stateless** -- each call to ``run()`` processes a
    fresh grid independently, so one instance may be reused across grids.
    """

    def __init__(self, config: NormalizeConfig | None = None) -> None:
        self.config = config or NormalizeConfig()

    def run(self, grid: Grid) -> PipelineResult:
        """Run all steps and return the unified table.

        An empty grid (or one with only blank cells) is not an error here:
        the result is simply empty and ``PipelineResult.is_empty`` is set.
        The formatter is what refuses to emit an empty table.
        """
        # -- Step 1: Frame detection (always runs) ------------------------
        logger.info("Step 1/4: Detecting frames")
        frames = detect_frames(grid)
        frames_detected = len(frames)

        # -- Step 2: Column splitting (always runs) -----------------------
        frames = split_columns(frames)
        logger.info(
            "Step 2/4: Split %d frame(s) into %d", frames_detected, len(frames)
        )
        frames_split = len(frames)

        # -- Step 3: Header promotion (configurable) ----------------------
        if self.config.promote_headers:
            logger.info(
                "Step 3/4: Promoting headers to '%s'", self.config.title_field
            )
            frames = promote_headers(frames, title_field=self.config.title_field)
        else:
            logger.info("Step 3/4: Header promotion SKIPPED (disabled in config)")

        # -- Step 4: Column unification (always runs) ---------------------
        table = unify_columns(frames)
        logger.info(
            "Step 4/4: Unified %d record(s) x %d column(s)",
            len(table.records), len(table.columns),
        )

        return PipelineResult(
            table=table,
            frames_detected=frames_detected,
            frames_split=frames_split,
        )
