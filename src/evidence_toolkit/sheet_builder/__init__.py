"""
Module: sheet_builder

Purpose:
    Assemble visual test-evidence reports: place a folder of screenshots,
    in a fixed order, into horizontal slots of an existing worksheet,
    scaled to a uniform footprint and separated by page breaks.

Key Functions:
    - discover_images(): Ordered image paths of a folder
    - plan_placements(): Slot, scale and page break per image
    - build_report(): Main entry point

Key Classes:
    - BuilderConfig: Configuration for a run
    - PlacementConfig: Slot geometry
    - WorkbookSink: openpyxl document sink

Dependencies:
    - PIL: Image decoding
    - openpyxl: Workbook editing

Used By:
    - evidence_toolkit.cli: Command line entry point
"""

from .config import BuilderConfig
from .controller import BuildResult, build_report, validate_inputs
from .errors import (
    DocumentWriteError,
    FilesystemError,
    ImageDecodeError,
    SheetBuilderError,
    ValidationError,
)
from .layout import BreakPolicy, PlacementConfig, PlacementPlan, plan_placements
from .loading import discover_images
from .output import DocumentSink, WorkbookSink

__all__ = [
    # Config
    "BuilderConfig",
    "PlacementConfig",
    "BreakPolicy",
    # Pipeline
    "discover_images",
    "plan_placements",
    "PlacementPlan",
    "build_report",
    "validate_inputs",
    "BuildResult",
    # Output
    "DocumentSink",
    "WorkbookSink",
    # Errors
    "SheetBuilderError",
    "ValidationError",
    "FilesystemError",
    "ImageDecodeError",
    "DocumentWriteError",
]
