"""
Command-line entry point for sheetframes.

Usage:
    sheetframes report.xlsx                      # CSV to stdout
    sheetframes report.xlsx --sheet Summary -v   # pick a sheet, log progress
    sheetframes --file report.xlsx --output out/report.parquet --format parquet
    sheetframes --config sheetframes.yaml        # everything from a YAML config
    sheetframes report.xlsx --save-config sheetframes.yaml

The input path may be given positionally or with ``--file``; the
positional form wins when both are present. Command-line flags override
values loaded from ``--config``.

Exit status is 0 on success and 1 on any sheetframes or config error,
with the message on stderr. Standard output only ever carries data.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from pydantic import ValidationError

from sheetframes._pipeline import run_pipeline_and_export
from sheetframes.config import (
    ConvertConfig,
    generate_default_config,
    load_config,
    save_config,
)
from sheetframes.exceptions import ConfigValidationError, SheetFramesError

log = logging.getLogger("sheetframes.cli")


def _sheet_arg(value: str) -> int | str:
    """Numeric sheets are indices, anything else is a sheet name."""
    return int(value) if value.isdigit() else value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetframes",
        description=(
            "Detect the tables in one spreadsheet sheet and print them as a "
            "single normalized CSV."
        ),
    )
    parser.add_argument("input", nargs="?", help="Path to an .xlsx/.xlsm or .csv file")
    parser.add_argument("--file", dest="file", help="Same as the positional input")
    parser.add_argument(
        "--sheet", type=_sheet_arg, help="0-based worksheet index or worksheet name"
    )
    parser.add_argument("--config", help="Path to a sheetframes YAML config")
    parser.add_argument("--delimiter", help="Output field delimiter (default: ',')")
    parser.add_argument(
        "--title-field", help="Field name for each table's title (default: 'Title')"
    )
    parser.add_argument(
        "--no-header-promotion",
        action="store_true",
        help="Keep each table's first row as data instead of a title field",
    )
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    parser.add_argument(
        "--format", choices=["csv", "parquet"], help="Output format (default: csv)"
    )
    parser.add_argument(
        "--save-config",
        help="Write the effective config to this YAML path after a successful run",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logs")
    return parser


def resolve_config(args: argparse.Namespace) -> ConvertConfig:
    """Merge a YAML config (if any) with command-line overrides.

    Raises:
        ConfigValidationError: If no input path is available.
    """
    input_path = args.input or args.file

    if args.config:
        config = load_config(args.config)
        if input_path:
            config.source.input_path = input_path
    elif input_path:
        config = generate_default_config(input_path)
    else:
        raise ConfigValidationError(
            "No input file given. Pass a path (or --file), or use --config."
        )

    data = config.model_dump()
    if args.sheet is not None:
        data["source"]["sheet"] = args.sheet
    if args.title_field is not None:
        data["normalize"]["title_field"] = args.title_field
    if args.no_header_promotion:
        data["normalize"]["promote_headers"] = False
    if args.output is not None:
        data["output"]["output_path"] = args.output
    if args.format is not None:
        data["output"]["output_format"] = args.format
    if args.delimiter is not None:
        data["output"]["delimiter"] = args.delimiter

    # Re-validate so overrides go through the same checks as YAML values
    return ConvertConfig.model_validate(data)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    try:
        config = resolve_config(args)
        run_pipeline_and_export(config)
        if args.save_config:
            save_config(config, args.save_config)
    except (SheetFramesError, ValidationError, FileNotFoundError) as exc:
        log.debug("Run failed", exc_info=True)
        print(f"sheetframes: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
