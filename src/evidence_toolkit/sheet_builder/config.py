"""
Module: sheet_builder.config

Purpose:
    Configuration dataclass for one sheet building run. Immutable
    configuration with validation on construction.

Key Classes:
    - BuilderConfig: Inputs of a run

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - sheet_builder.controller: Main build controller
    - evidence_toolkit.cli: Command line entry point
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .layout.config import PlacementConfig


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for filling a template (immutable).

    Attributes:
        folder: Folder of screenshots (walked recursively)
        sheet: Existing worksheet to fill
        workbook_path: Template workbook, overwritten on success
        placement: Slot geometry and page break settings

    Example:
        >>> config = BuilderConfig(
        ...     folder=Path("evidence/run_12"),
        ...     sheet="Results",
        ...     workbook_path=Path("report.xlsx"),
        ... )
    """

    folder: Path
    sheet: str
    workbook_path: Path
    placement: PlacementConfig = field(default_factory=PlacementConfig)

    def __post_init__(self) -> None:
        """Normalize paths on construction; empty values are left for validation."""
        if self.folder:
            object.__setattr__(self, "folder", Path(self.folder))
        if self.workbook_path:
            object.__setattr__(self, "workbook_path", Path(self.workbook_path))
