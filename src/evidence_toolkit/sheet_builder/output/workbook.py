"""
Module: sheet_builder.output.workbook

Purpose:
    DocumentSink backed by openpyxl. The template is loaded into memory,
    images and page breaks are added to the in-memory workbook, and
    save() replaces the template atomically.

Key Classes:
    - WorkbookSink: openpyxl implementation of DocumentSink

Dependencies:
    - openpyxl: Workbook model and xlsx serialization
    - PIL/Pillow: Re-encoding formats a workbook cannot embed directly

Used By:
    - sheet_builder.controller: Default sink
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from io import BytesIO
from pathlib import Path
from typing import Optional
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.drawing.image import Image as SheetImage
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.pagebreak import Break
from openpyxl.worksheet.worksheet import Worksheet
from PIL import Image, UnidentifiedImageError

from evidence_toolkit.common.cells import (
    MAX_COLUMNS,
    MAX_ROWS,
    CellReferenceError,
    cell_to_coordinates,
)

from ..errors import DocumentWriteError
from .sink import DocumentSink

logger = logging.getLogger(__name__)

# Formats openpyxl writes byte-for-byte
EMBEDDABLE_FORMATS = ("png", "jpeg", "gif")
# Media extension accepted by insert_image -> stored format
MEDIA_FORMATS = {"png": "png", "jpeg": "jpeg", "jpg": "jpeg", "gif": "gif"}


class WorkbookSink(DocumentSink):
    """
    Spreadsheet document held in memory by openpyxl.

    Example:
        >>> with WorkbookSink() as sink:
        ...     sink.open(Path("evidence.xlsx"))
        ...     sink.insert_image("Results", "B4", data, scale_x=1.0,
        ...                       scale_y=1.0, extension=".png")
        ...     sink.save()
    """

    def __init__(self) -> None:
        self._workbook: Optional[Workbook] = None
        self._path: Optional[Path] = None

    def open(self, path: Path) -> None:
        path = Path(path)
        if not path.is_file():
            raise DocumentWriteError(f"Failed to open template file: {path} not found")
        try:
            self._workbook = load_workbook(
                path,
                keep_vba=path.suffix.lower() == ".xlsm",
            )
        except (InvalidFileException, BadZipFile, KeyError, ValueError, OSError) as e:
            raise DocumentWriteError(f"Failed to open template file: {e}") from e
        self._path = path
        logger.info(f"Opened {path.name} ({len(self._workbook.sheetnames)} sheets)")

    @property
    def sheet_names(self) -> list[str]:
        return list(self._require_workbook().sheetnames)

    @property
    def workbook(self) -> Workbook:
        """The open openpyxl workbook."""
        return self._require_workbook()

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
        if auto_fit:
            raise DocumentWriteError("Auto-fit image placement is not supported")
        media_format = MEDIA_FORMATS.get(extension.lstrip(".").lower())
        if media_format is None:
            raise DocumentWriteError(f"Unsupported image extension: {extension!r}")
        worksheet = self._worksheet(sheet)
        self._resolve(cell)

        try:
            picture = SheetImage(BytesIO(data))
            if picture.format not in EMBEDDABLE_FORMATS:
                picture = SheetImage(BytesIO(_reencode_png(data)))
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise DocumentWriteError(f"failed to insert image at {cell}: {e}") from e

        picture.width = picture.width * scale_x
        picture.height = picture.height * scale_y
        # Stored media name and content type follow this, whatever the bytes are
        picture.format = media_format

        worksheet.add_image(picture, cell)
        logger.debug(
            f"Inserted image at {sheet}!{cell} "
            f"({picture.width:.1f}x{picture.height:.1f}, {extension})"
        )

    def insert_page_break(self, sheet: str, cell: str) -> None:
        worksheet = self._worksheet(sheet)
        column, row = self._resolve(cell)

        # Zero-based ids: break above the row and left of the column
        row_id = row - 1
        column_id = column - 1
        if row_id == 0 and column_id == 0:
            return

        if row_id and not _has_break(worksheet.row_breaks, row_id):
            worksheet.row_breaks.append(Break(id=row_id, max=MAX_COLUMNS - 1, man=True))
        if column_id and not _has_break(worksheet.col_breaks, column_id):
            worksheet.col_breaks.append(Break(id=column_id, max=MAX_ROWS - 1, man=True))
        logger.debug(f"Inserted page break at {sheet}!{cell}")

    def save(self) -> Path:
        workbook = self._require_workbook()
        path = self._path
        # Write next to the real file so a symlinked template keeps its link
        target = path.resolve()

        with tempfile.NamedTemporaryFile(
            suffix=target.suffix,
            dir=target.parent,
            delete=False,
        ) as f:
            temp_path = Path(f.name)

        replaced = False
        try:
            workbook.save(temp_path)
            shutil.copymode(target, temp_path)
            # Use replace() instead of rename() for Windows compatibility
            temp_path.replace(target)
            replaced = True
        except (OSError, ValueError, TypeError) as e:
            raise DocumentWriteError(f"Failed to save updated file: {e}") from e
        finally:
            if not replaced:
                temp_path.unlink(missing_ok=True)

        logger.info(f"Saved {path}")
        return path

    def close(self) -> None:
        self._workbook = None
        self._path = None

    def _require_workbook(self) -> Workbook:
        if self._workbook is None:
            raise DocumentWriteError("No workbook is open")
        return self._workbook

    def _worksheet(self, sheet: str) -> Worksheet:
        workbook = self._require_workbook()
        if sheet not in workbook.sheetnames:
            raise DocumentWriteError(f"sheet {sheet} does not exist")
        worksheet = workbook[sheet]
        if not isinstance(worksheet, Worksheet):
            raise DocumentWriteError(f"sheet {sheet} is not a worksheet")
        return worksheet

    @staticmethod
    def _resolve(cell: str) -> tuple[int, int]:
        try:
            return cell_to_coordinates(cell)
        except CellReferenceError as e:
            raise DocumentWriteError(str(e)) from e


def _has_break(breaks, break_id: int) -> bool:
    return any(brk.id == break_id for brk in breaks.brk)


def _reencode_png(data: bytes) -> bytes:
    """Convert image bytes to PNG."""
    with Image.open(BytesIO(data)) as img:
        out = BytesIO()
        img.save(out, format="PNG")
    return out.getvalue()
