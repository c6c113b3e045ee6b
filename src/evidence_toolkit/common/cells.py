"""Cell reference utilities.

Converts between A1-style cell references ("B4", "AM4") and 1-based
(column, row) coordinate pairs, within the limits of the xlsx format.
"""

from __future__ import annotations

from typing import Tuple

from openpyxl.utils.cell import (
    column_index_from_string,
    coordinate_from_string,
    get_column_letter,
)
from openpyxl.utils.exceptions import CellCoordinatesException

# Worksheet limits of the xlsx format
MAX_COLUMNS = 16384
MAX_ROWS = 1048576


class CellReferenceError(ValueError):
    """Cell reference or coordinates outside the worksheet grid."""
    pass


def cell_to_coordinates(cell: str) -> Tuple[int, int]:
    """Convert a cell reference to 1-based (column, row).

    Args:
        cell: Reference like "B4". Absolute markers ("$B$4") are accepted.

    Returns:
        Tuple of (column, row).

    Raises:
        CellReferenceError: If the reference is malformed or out of range.

    Examples:
        >>> cell_to_coordinates("B4")
        (2, 4)
        >>> cell_to_coordinates("AM4")
        (39, 4)
    """
    try:
        letters, row = coordinate_from_string(cell.replace("$", ""))
        column = column_index_from_string(letters)
    except (CellCoordinatesException, ValueError) as e:
        raise CellReferenceError(f"Invalid cell reference {cell!r}: {e}") from e

    _check_bounds(column, row)
    return column, row


def coordinates_to_cell(column: int, row: int) -> str:
    """Convert 1-based (column, row) to a cell reference.

    Raises:
        CellReferenceError: If either coordinate is outside the grid.

    Examples:
        >>> coordinates_to_cell(39, 4)
        'AM4'
    """
    _check_bounds(column, row)
    return f"{get_column_letter(column)}{row}"


def _check_bounds(column: int, row: int) -> None:
    if not 1 <= column <= MAX_COLUMNS:
        raise CellReferenceError(
            f"Column {column} outside 1..{MAX_COLUMNS}"
        )
    if not 1 <= row <= MAX_ROWS:
        raise CellReferenceError(f"Row {row} outside 1..{MAX_ROWS}")
