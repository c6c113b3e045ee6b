"""
Module: sheet_builder.output

Purpose:
    Spreadsheet document access.

Key Classes:
    - DocumentSink: Abstract document capability
    - WorkbookSink: openpyxl-backed implementation
"""

from .sink import DocumentSink
from .workbook import WorkbookSink

__all__ = [
    "DocumentSink",
    "WorkbookSink",
]
