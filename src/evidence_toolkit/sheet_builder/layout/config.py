"""
Module: sheet_builder.layout.config

Purpose:
    Configuration for horizontal slot placement.
    Defines the start cell, uniform image footprint, slot stride and
    page break row.

Key Classes:
    - PlacementConfig: Immutable placement configuration
    - BreakPolicy: Where page breaks go relative to the slots

Dependencies:
    - dataclasses (std)

Used By:
    - sheet_builder.layout.planner: Placement planning
    - sheet_builder.config: Run configuration
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from evidence_toolkit.common.cells import cell_to_coordinates, CellReferenceError


DEFAULT_START_CELL = "B4"
# Footprint in the workbook's native image units (pixels)
DEFAULT_TARGET_WIDTH = 1115.9
DEFAULT_TARGET_HEIGHT = 609.2
# Wide enough that slots never overlap at the default footprint
DEFAULT_COLUMN_STRIDE = 37
DEFAULT_PAGE_BREAK_ROW = 40


class BreakPolicy(Enum):
    """
    Page break placement.

    EXCEPT_FIRST: Every image except the first gets a break one column
        before the next slot (the historical layout).
    BETWEEN_SLOTS: A break one column before each slot after the first,
        so every adjacent pair of images is split.
    """

    EXCEPT_FIRST = "except_first"
    BETWEEN_SLOTS = "between_slots"


@dataclass(frozen=True)
class PlacementConfig:
    """
    Configuration for slot placement (immutable).

    Attributes:
        start_cell: Cell of the first slot
        target_width: Width every image is scaled to
        target_height: Height every image is scaled to
        column_stride: Columns between consecutive slots
        page_break_row: Row used for every page break
        legacy_png_tag: Tag every image as PNG regardless of its real format
        break_policy: Page break placement rule

    Example:
        >>> config = PlacementConfig()
        >>> config.start_coordinates
        (2, 4)
    """

    start_cell: str = DEFAULT_START_CELL
    target_width: float = DEFAULT_TARGET_WIDTH
    target_height: float = DEFAULT_TARGET_HEIGHT
    column_stride: int = DEFAULT_COLUMN_STRIDE
    page_break_row: int = DEFAULT_PAGE_BREAK_ROW

    # Behavior
    legacy_png_tag: bool = False
    break_policy: BreakPolicy = BreakPolicy.EXCEPT_FIRST

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        try:
            cell_to_coordinates(self.start_cell)
        except CellReferenceError as e:
            raise ValueError(f"invalid starting cell: {e}") from e
        if self.target_width <= 0:
            raise ValueError(f"target_width must be positive: {self.target_width}")
        if self.target_height <= 0:
            raise ValueError(f"target_height must be positive: {self.target_height}")
        if self.column_stride <= 0:
            raise ValueError(f"column_stride must be positive: {self.column_stride}")
        if self.page_break_row <= 0:
            raise ValueError(f"page_break_row must be positive: {self.page_break_row}")

    @property
    def start_coordinates(self) -> tuple[int, int]:
        """1-based (column, row) of the start cell."""
        return cell_to_coordinates(self.start_cell)
