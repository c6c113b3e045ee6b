"""
Module: sheet_builder.layout

Purpose:
    Slot placement for screenshots on a worksheet.
    Converts ordered image paths into positioned, scaled placements
    separated by page breaks.

Key Functions:
    - plan_placements(): Compute the placement plan
    - apply_plan(): Write a plan through a document sink
    - place_images(): Plan and apply in one call

Key Classes:
    - PlacementConfig: Start cell, footprint, stride, break row
    - BreakPolicy: Page break placement rule
    - Anchor, ImagePlacement, PageBreakPlacement, PlacementPlan: Plan models

Used By:
    - sheet_builder.controller: Main build controller
"""

from .config import BreakPolicy, PlacementConfig
from .models import Anchor, ImagePlacement, PageBreakPlacement, PlacementPlan
from .planner import apply_plan, place_images, plan_placements

__all__ = [
    # Config
    "BreakPolicy",
    "PlacementConfig",
    # Models
    "Anchor",
    "ImagePlacement",
    "PageBreakPlacement",
    "PlacementPlan",
    # Functions
    "apply_plan",
    "place_images",
    "plan_placements",
]
