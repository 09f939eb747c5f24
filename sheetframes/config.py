"""
Configuration models and YAML I/O for sheetframes.

This module defines the Pydantic models that map 1:1 to a sheetframes
YAML config, plus helpers for loading, saving and generating one.

Key models:
- ConvertConfig: Top-level config (source + normalize + output).
- SourceConfig: Input file path and worksheet selection.
- NormalizeConfig: Header promotion toggle and the title field name.
- OutputConfig: Destination, format and delimiter.

Key functions:
- load_config(path) -> ConvertConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(...) -> ConvertConfig: Build a config for a file.

A config file is optional; the CLI builds the same models from its
arguments when none is given.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from sheetframes.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """Source file information."""

    input_path: str = Field(..., description="Path to the workbook or CSV file")
    sheet: int | str = Field(
        0, description="0-based worksheet index or worksheet name (Excel only)"
    )


class NormalizeConfig(BaseModel):
    """Normalization settings."""

    promote_headers: bool = Field(
        True, description="If True, rewrite each frame's first row to a title field"
    )
    title_field: str = Field("Title", min_length=1, description="Name of the title field")


class OutputConfig(BaseModel):
    """Output settings."""

    output_path: str | None = Field(
        None, description="File to write; None prints CSV to standard output"
    )
    output_format: Literal["csv", "parquet"] = Field("csv", description="Output format")
    delimiter: str = Field(",", description="Field delimiter for CSV output")

    @field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        if len(value) != 1 or value in "\r\n":
            raise ValueError(
                f"delimiter must be a single non-newline character, got {value!r}"
            )
        return value


class ConvertConfig(BaseModel):
    """Top-level configuration for sheetframes."""

    source: SourceConfig
    normalize: NormalizeConfig = Field(default_factory=NormalizeConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> ConvertConfig:
    """Load and validate a YAML config into a ConvertConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not valid YAML.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigValidationError(
            f"Config file is not valid YAML: {path}: {exc}"
        ) from exc
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ConvertConfig.model_validate(raw)


def save_config(config: ConvertConfig, path: str | Path) -> None:
    """Serialize a ConvertConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# sheetframes configuration\n")
        f.write("# Edit this file to change the sheet, title field, output, etc.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def generate_default_config(
    input_path: str,
    sheet: int | str = 0,
    output_path: str | None = None,
) -> ConvertConfig:
    """Build a ConvertConfig with default normalization for *input_path*."""
    return ConvertConfig(
        source=SourceConfig(input_path=input_path, sheet=sheet),
        output=OutputConfig(output_path=output_path),
    )
