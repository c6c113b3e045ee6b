"""
Module: sheet_builder.errors

Purpose:
    Error taxonomy for the sheet building pipeline. Every error is terminal
    for a run; none are retried.

Key Classes:
    - SheetBuilderError: Base class caught by the CLI
    - ValidationError: Missing or invalid run inputs
    - FilesystemError: Image folder missing or not traversable
    - ImageDecodeError: Image unreadable or not a supported raster format
    - DocumentWriteError: Workbook rejected an open/insert/break/save

Used By:
    - All sheet_builder modules
    - evidence_toolkit.cli
"""

from __future__ import annotations


class SheetBuilderError(Exception):
    """Base error for the sheet building pipeline."""
    pass


class ValidationError(SheetBuilderError):
    """Missing or invalid input."""
    pass


class FilesystemError(SheetBuilderError):
    """Image folder missing or traversal failed."""
    pass


class ImageDecodeError(SheetBuilderError):
    """Image could not be read or decoded."""
    pass


class DocumentWriteError(SheetBuilderError):
    """Workbook operation failed."""
    pass
