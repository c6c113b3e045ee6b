"""
Module: sheet_builder.layout.planner

Purpose:
    Place ordered screenshots into fixed horizontal slots.
    Planning (decode, scale, position, page breaks) is completed for every
    image before the first write, so a bad image never leaves a partly
    filled workbook.

Key Functions:
    - plan_placements(): Build a PlacementPlan from ordered paths
    - apply_plan(): Issue the plan's inserts and breaks to a sink
    - place_images(): plan_placements() followed by apply_plan()

Algorithm:
    For image K (0-indexed), starting at (C0, R0) with stride S:
    1. Decode to get width W and height H
    2. scale_x = target_width / W, scale_y = target_height / H
    3. Place at column C0 + S*K, row R0
    4. Advance the anchor to C0 + S*(K+1)
    5. Page break at (anchor column - 1, break row) when the policy
       selects image K: all but the first (EXCEPT_FIRST) or all but the
       last (BETWEEN_SLOTS)

Dependencies:
    - sheet_builder.images: ImageDecoder
    - sheet_builder.layout.models: Anchor, ImagePlacement, PlacementPlan
    - sheet_builder.output.sink: DocumentSink

Used By:
    - sheet_builder.controller: Main build controller
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from evidence_toolkit.common.cells import CellReferenceError, coordinates_to_cell

from ..errors import DocumentWriteError
from ..images.decoder import (
    DEFAULT_EXTENSION,
    ImageDecoder,
    PillowImageDecoder,
    sheet_extension,
)
from ..output.sink import DocumentSink
from .config import BreakPolicy, PlacementConfig
from .models import Anchor, ImagePlacement, PageBreakPlacement, PlacementPlan

logger = logging.getLogger(__name__)


def plan_placements(
    images: Sequence[Path],
    config: PlacementConfig,
    decoder: Optional[ImageDecoder] = None,
) -> PlacementPlan:
    """
    Compute slot, scale and page break for every image.

    Args:
        images: Paths in placement order
        config: Placement configuration
        decoder: Image decoder (Pillow by default)

    Returns:
        PlacementPlan (empty for no images)

    Raises:
        ImageDecodeError: If any image cannot be decoded
        DocumentWriteError: If a slot falls outside the worksheet grid

    Example:
        >>> plan = plan_placements([Path("a.png"), Path("b.png")], PlacementConfig())
        >>> [p.cell for p in plan.placements]
        ['B4', 'AM4']
    """
    decoder = decoder or PillowImageDecoder()
    column, row = config.start_coordinates
    anchor = Anchor(column, row)
    total = len(images)

    placements: List[ImagePlacement] = []
    for index, path in enumerate(images):
        source = decoder.decode(path)

        scale_x = config.target_width / source.width
        scale_y = config.target_height / source.height

        if config.legacy_png_tag:
            extension = DEFAULT_EXTENSION
        else:
            extension = sheet_extension(source.format)

        current = anchor
        anchor = anchor.advance(config.column_stride)

        page_break = None
        if _wants_break(index, total, config.break_policy):
            page_break = PageBreakPlacement(anchor.column - 1, config.page_break_row)

        placement = ImagePlacement(
            index=index,
            source=source,
            anchor=current,
            scale_x=scale_x,
            scale_y=scale_y,
            extension=extension,
            page_break=page_break,
        )
        _check_cells(placement)
        placements.append(placement)

        logger.debug(
            f"Slot {index}: {source.path.name} -> {placement.cell} "
            f"(scale {scale_x:.4f} x {scale_y:.4f})"
        )

    plan = PlacementPlan(placements=tuple(placements))
    logger.info(
        f"Planned {plan.image_count} images with {plan.page_break_count} page breaks"
    )
    return plan


def apply_plan(plan: PlacementPlan, sink: DocumentSink, sheet: str) -> None:
    """
    Write a plan into an open document.

    Each image is inserted and then, if it carries one, its page break.
    The document is not saved.

    Raises:
        DocumentWriteError: If the sink rejects an insert or break
    """
    for placement in plan.placements:
        sink.insert_image(
            sheet,
            placement.cell,
            placement.source.data,
            scale_x=placement.scale_x,
            scale_y=placement.scale_y,
            extension=placement.extension,
            auto_fit=False,
        )
        if placement.page_break is not None:
            sink.insert_page_break(sheet, placement.page_break.cell)


def place_images(
    sink: DocumentSink,
    sheet: str,
    images: Sequence[Path],
    config: PlacementConfig,
    decoder: Optional[ImageDecoder] = None,
) -> PlacementPlan:
    """Plan every image, then apply the plan to the sink."""
    plan = plan_placements(images, config, decoder)
    apply_plan(plan, sink, sheet)
    return plan


def _wants_break(index: int, total: int, policy: BreakPolicy) -> bool:
    """Whether image at index is followed by a page break."""
    if policy is BreakPolicy.BETWEEN_SLOTS:
        return index < total - 1
    return index > 0


def _check_cells(placement: ImagePlacement) -> None:
    """Resolve every cell of a placement up front."""
    try:
        coordinates_to_cell(placement.anchor.column, placement.anchor.row)
        if placement.page_break is not None:
            coordinates_to_cell(placement.page_break.column, placement.page_break.row)
    except CellReferenceError as e:
        raise DocumentWriteError(
            f"failed to insert image {placement.source.path}: {e}"
        ) from e
