"""
Module: sheet_builder.controller

Purpose:
    Orchestrate the complete sheet building pipeline.
    Validate → Discover → Plan → Open → Place → Save

Key Functions:
    - validate_inputs(): Check the run inputs
    - build_report(): Main entry point for filling a template

Key Classes:
    - BuildResult: Complete build result

Dependencies:
    - sheet_builder.loading: Image discovery and ordering
    - sheet_builder.layout: Placement planning
    - sheet_builder.output: Workbook sink

Used By:
    - evidence_toolkit.cli: Command line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import BuilderConfig
from .errors import FilesystemError, ValidationError
from .images import ImageDecoder
from .layout import PlacementPlan, apply_plan, plan_placements
from .loading import discover_images
from .output import DocumentSink, WorkbookSink

logger = logging.getLogger(__name__)

PathLike = Union[str, Path, None]


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        workbook_path: Template that was updated
        sheet: Worksheet that received the images
        plan: Placement plan that was applied
        duration_s: Wall time of the run in seconds

    Example:
        >>> result = build_report(config)
        >>> print(f"Placed {result.image_count} images in {result.workbook_path}")
    """

    workbook_path: Path
    sheet: str
    plan: PlacementPlan
    duration_s: float

    @property
    def image_count(self) -> int:
        return self.plan.image_count

    @property
    def page_break_count(self) -> int:
        return self.plan.page_break_count


def validate_inputs(folder: PathLike, sheet: Optional[str], workbook_path: PathLike) -> None:
    """
    Check that all inputs are present and the image folder exists.

    Raises:
        ValidationError: If an input is missing
        FilesystemError: If the image folder does not exist
    """
    if not folder:
        raise ValidationError("Please provide the image folder path using the -folder flag.")
    if not sheet:
        raise ValidationError("Please provide the sheet name using the -sheet flag.")
    if not workbook_path:
        raise ValidationError("Please provide the excel file path using the -excel flag.")
    if not Path(folder).exists():
        raise FilesystemError(f"The folder path does not exist: {folder}")


def build_report(
    config: BuilderConfig,
    *,
    sink: Optional[DocumentSink] = None,
    decoder: Optional[ImageDecoder] = None,
) -> BuildResult:
    """
    Fill a template worksheet with a folder of screenshots.

    Pipeline:
    1. Validate inputs
    2. Discover and order images
    3. Decode every image and plan slots and page breaks
    4. Open the template
    5. Insert images and page breaks
    6. Save the template in place

    Nothing is written to disk unless every step before save succeeds.

    Args:
        config: Run configuration
        sink: Document sink (openpyxl workbook by default)
        decoder: Image decoder (Pillow by default)

    Returns:
        BuildResult with the applied plan

    Raises:
        ValidationError: Missing input
        FilesystemError: Image folder missing or unreadable
        ImageDecodeError: An image could not be decoded
        DocumentWriteError: The template rejected an open/insert/save

    Example:
        >>> result = build_report(BuilderConfig(
        ...     folder=Path("evidence"),
        ...     sheet="Results",
        ...     workbook_path=Path("report.xlsx"),
        ... ))
        >>> result.image_count
        4
    """
    start_time = time.perf_counter()
    validate_inputs(config.folder, config.sheet, config.workbook_path)

    logger.info(f"Building sheet {config.sheet!r} from {config.folder}")

    # 1. Discover images
    images = discover_images(config.folder)
    if not images:
        logger.warning(f"No files found in {config.folder}; template will be saved unchanged")

    # 2. Plan before touching the document
    plan = plan_placements(images, config.placement, decoder)

    # 3. Write
    sink = sink or WorkbookSink()
    with sink:
        sink.open(config.workbook_path)
        apply_plan(plan, sink, config.sheet)
        saved_path = sink.save()

    duration = time.perf_counter() - start_time
    logger.info(
        f"Placed {plan.image_count} images and {plan.page_break_count} page breaks "
        f"in {duration:.2f}s"
    )

    return BuildResult(
        workbook_path=saved_path,
        sheet=config.sheet,
        plan=plan,
        duration_s=duration,
    )
