"""
Module: sheet_builder.loading

Purpose:
    Discover screenshot files and put them in placement order.

Key Functions:
    - discover_images(): Walk a folder and return ordered file paths
    - order_filenames(): Apply the ordering rule to existing paths
"""

from .ordering import discover_images, order_filenames

__all__ = [
    "discover_images",
    "order_filenames",
]
