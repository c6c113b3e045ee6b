"""Shared helpers used across the evidence toolkit."""

from .cells import cell_to_coordinates, coordinates_to_cell, CellReferenceError
from .path_utils import has_digit, image_sort_key

__all__ = [
    "cell_to_coordinates",
    "coordinates_to_cell",
    "CellReferenceError",
    "has_digit",
    "image_sort_key",
]
