"""
Module: sheet_builder.images

Purpose:
    Image decoding abstractions for the sheet building pipeline.

Key Classes:
    - ImageDecoder: Abstract interface for decoding
    - PillowImageDecoder: Standard Pillow-backed decoder
    - DecodedImage: Bytes, size and format of one file

Dependencies:
    - PIL: Image decoding
"""

from .decoder import (
    DecodedImage,
    ImageDecoder,
    PillowImageDecoder,
    sheet_extension,
)

__all__ = [
    "DecodedImage",
    "ImageDecoder",
    "PillowImageDecoder",
    "sheet_extension",
]
