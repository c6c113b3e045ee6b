"""Command line entry point for the Evidence Sheet Builder.

Usage:
    evidence-sheet -folder shots/ -sheet Results -excel report.xlsx
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from evidence_toolkit import __version__
from evidence_toolkit.sheet_builder import (
    BreakPolicy,
    BuilderConfig,
    PlacementConfig,
    SheetBuilderError,
    build_report,
    validate_inputs,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evidence-sheet",
        description="Insert a folder of screenshots into an Excel template sheet",
    )
    parser.add_argument("-folder", "--folder", default="",
                        help="Path to the folder containing images")
    parser.add_argument("-sheet", "--sheet", default="",
                        help="Name of the sheet")
    parser.add_argument("-excel", "--excel", default="",
                        help="Path to the Excel template, updated in place")
    parser.add_argument("--legacy-png-tag", action="store_true",
                        help="Store every image as .png regardless of its real format")
    parser.add_argument("--break-between-slots", action="store_true",
                        help="Put a page break between every pair of images")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    try:
        validate_inputs(args.folder, args.sheet, args.excel)
        placement = PlacementConfig(
            legacy_png_tag=args.legacy_png_tag,
            break_policy=(
                BreakPolicy.BETWEEN_SLOTS if args.break_between_slots
                else BreakPolicy.EXCEPT_FIRST
            ),
        )
        config = BuilderConfig(
            folder=Path(args.folder),
            sheet=args.sheet,
            workbook_path=Path(args.excel),
            placement=placement,
        )
        result = build_report(config)
    except SheetBuilderError as e:
        print(e)
        return 1

    print("Images inserted successfully into the template file:", result.workbook_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
