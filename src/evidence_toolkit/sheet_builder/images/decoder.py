"""
Module: sheet_builder.images.decoder

Purpose:
    Read screenshot files and obtain their pixel dimensions and format.
    Decoding is complete (not header-only) so truncated files are caught
    before anything is written to the workbook.

Key Classes:
    - DecodedImage: Raw bytes plus size and format of one file
    - ImageDecoder: Abstract decoding capability
    - PillowImageDecoder: Standard decoder backed by Pillow

Key Functions:
    - sheet_extension(): Media extension a workbook should store for a format

Dependencies:
    - PIL: Image decoding

Used By:
    - sheet_builder.layout.planner: Scale computation
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ..errors import ImageDecodeError

logger = logging.getLogger(__name__)

# Formats a workbook stores byte-for-byte; anything else is re-encoded as PNG
PASSTHROUGH_FORMATS = {"PNG": ".png", "JPEG": ".jpeg", "GIF": ".gif"}
DEFAULT_EXTENSION = ".png"


@dataclass(frozen=True)
class DecodedImage:
    """
    One decoded screenshot (immutable).

    Attributes:
        path: Source file
        data: Raw file bytes, handed to the workbook unchanged
        width: Width in pixels
        height: Height in pixels
        format: Pillow format name ("PNG", "JPEG", ...) or None if unknown
    """

    path: Path
    data: bytes = field(repr=False)
    width: int
    height: int
    format: Optional[str] = None

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) in pixels."""
        return self.width, self.height


def sheet_extension(image_format: Optional[str]) -> str:
    """
    Media extension matching an image format.

    Examples:
        >>> sheet_extension("JPEG")
        '.jpeg'
        >>> sheet_extension("BMP")
        '.png'
    """
    if image_format is None:
        return DEFAULT_EXTENSION
    return PASSTHROUGH_FORMATS.get(image_format.upper(), DEFAULT_EXTENSION)


class ImageDecoder(ABC):
    """Abstract interface for obtaining image dimensions."""

    @abstractmethod
    def decode(self, path: Path) -> DecodedImage:
        """
        Read and decode an image file.

        Args:
            path: Image file

        Returns:
            DecodedImage with bytes, size and format

        Raises:
            ImageDecodeError: If the file is unreadable or not a
                supported raster image
        """


class PillowImageDecoder(ImageDecoder):
    """Decoder using Pillow; supports PNG, JPEG and the other Pillow formats."""

    def decode(self, path: Path) -> DecodedImage:
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ImageDecodeError(f"Failed to read image file {path}: {e}") from e

        try:
            with Image.open(BytesIO(data)) as img:
                img.load()
                width, height = img.size
                image_format = img.format
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError,
                Image.DecompressionBombError) as e:
            raise ImageDecodeError(
                f"Failed to get image dimensions for {path}: {e}"
            ) from e

        if width <= 0 or height <= 0:
            raise ImageDecodeError(f"Image has no pixels: {path}")

        logger.debug(f"Decoded {path.name}: {width}x{height} {image_format}")
        return DecodedImage(
            path=path,
            data=data,
            width=width,
            height=height,
            format=image_format,
        )
