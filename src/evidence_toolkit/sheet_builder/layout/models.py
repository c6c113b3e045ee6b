"""
Module: sheet_builder.layout.models

Purpose:
    Data models for slot placement.
    Immutable dataclasses for the cursor, image placements, page breaks
    and the complete plan.

Key Classes:
    - Anchor: (column, row) cursor for the next slot
    - ImagePlacement: Image positioned and scaled in a slot
    - PageBreakPlacement: Manual page break position
    - PlacementPlan: Complete plan for one run

Dependencies:
    - dataclasses (std)
    - sheet_builder.images: DecodedImage

Used By:
    - sheet_builder.layout.planner: Creates plans
    - sheet_builder.controller: Reports plan totals
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from evidence_toolkit.common.cells import coordinates_to_cell

from ..images.decoder import DecodedImage


@dataclass(frozen=True)
class Anchor:
    """
    Cursor for the next slot (immutable).

    Advancing returns a new Anchor so the cursor is threaded through
    planning as a value.

    Example:
        >>> Anchor(2, 4).advance(37)
        Anchor(column=39, row=4)
    """

    column: int
    row: int

    @property
    def cell(self) -> str:
        """Cell reference of this position."""
        return coordinates_to_cell(self.column, self.row)

    def advance(self, stride: int) -> "Anchor":
        """Anchor moved right by stride columns, same row."""
        return Anchor(self.column + stride, self.row)


@dataclass(frozen=True)
class ImagePlacement:
    """
    An image positioned in a slot.

    Attributes:
        index: Position in placement order (0-indexed)
        source: Decoded image
        anchor: Slot position
        scale_x: Horizontal scale factor
        scale_y: Vertical scale factor
        extension: Media extension to store the image under
        page_break: Break inserted right after this image, if any

    Example:
        >>> placement.scaled_size
        (1115.9, 609.2)
    """

    index: int
    source: DecodedImage
    anchor: Anchor
    scale_x: float
    scale_y: float
    extension: str
    page_break: Optional["PageBreakPlacement"] = None

    @property
    def cell(self) -> str:
        """Cell reference of the slot."""
        return self.anchor.cell

    @property
    def scaled_size(self) -> tuple[float, float]:
        """(width, height) after scaling."""
        return (
            self.source.width * self.scale_x,
            self.source.height * self.scale_y,
        )


@dataclass(frozen=True)
class PageBreakPlacement:
    """A manual page break at a cell."""

    column: int
    row: int

    @property
    def cell(self) -> str:
        return coordinates_to_cell(self.column, self.row)


@dataclass(frozen=True)
class PlacementPlan:
    """
    Complete placement plan for one run.

    Attributes:
        placements: Image placements in order

    Example:
        >>> plan.image_count, plan.page_break_count
        (3, 2)
    """

    placements: tuple[ImagePlacement, ...]

    @property
    def image_count(self) -> int:
        return len(self.placements)

    @property
    def page_breaks(self) -> tuple[PageBreakPlacement, ...]:
        """Page breaks in insertion order."""
        return tuple(
            p.page_break for p in self.placements if p.page_break is not None
        )

    @property
    def page_break_count(self) -> int:
        return len(self.page_breaks)

    @property
    def is_empty(self) -> bool:
        return not self.placements
