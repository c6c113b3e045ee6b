"""
Module: sheet_builder.output.sink

Purpose:
    Abstract interface for the spreadsheet document being filled.
    Implementations must keep every change in memory until save(), so a
    failed run leaves the file on disk untouched.

Key Classes:
    - DocumentSink: Abstract open/insert/break/save capability

Used By:
    - sheet_builder.layout.planner: apply_plan()
    - sheet_builder.controller: Main build controller
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class DocumentSink(ABC):
    """
    Abstract spreadsheet document.

    Cells are A1-style references ("B4"). All methods raise
    DocumentWriteError when the document rejects the request.
    """

    @abstractmethod
    def open(self, path: Path) -> None:
        """
        Open an existing document for editing.

        Args:
            path: Spreadsheet file, later overwritten by save()
        """

    @abstractmethod
    def insert_image(
        self,
        sheet: str,
        cell: str,
        data: bytes,
        *,
        scale_x: float,
        scale_y: float,
        extension: str,
        auto_fit: bool = False,
    ) -> None:
        """
        Insert an image anchored at a cell.

        Args:
            sheet: Existing worksheet name
            cell: Top-left anchor cell
            data: Raw image bytes
            scale_x: Horizontal scale applied to the pixel width
            scale_y: Vertical scale applied to the pixel height
            extension: Media extension (".png", ".jpeg", ...) to store under
            auto_fit: Fit the image to the cell instead of scaling
        """

    @abstractmethod
    def insert_page_break(self, sheet: str, cell: str) -> None:
        """
        Insert a manual page break at a cell.

        Content before the cell prints on one page, content from the
        cell onward on the next.
        """

    @abstractmethod
    def save(self) -> Path:
        """
        Write all pending changes back to the opened file.

        Returns:
            Path written
        """

    @property
    @abstractmethod
    def sheet_names(self) -> list[str]:
        """Worksheet names of the open document."""

    def __enter__(self) -> "DocumentSink":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        """Release the document without saving."""
