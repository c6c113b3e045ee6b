"""
Unit tests for the openpyxl workbook sink.
"""

import os
import stat
import zipfile
import pytest
from pathlib import Path
from unittest.mock import patch

from openpyxl import load_workbook

from evidence_toolkit.sheet_builder.errors import DocumentWriteError
from evidence_toolkit.sheet_builder.output import WorkbookSink


@pytest.fixture
def sink(template_workbook):
    sink = WorkbookSink()
    sink.open(template_workbook)
    yield sink
    sink.close()


def _media_names(path: Path) -> list[str]:
    with zipfile.ZipFile(path) as zf:
        return sorted(n for n in zf.namelist() if n.startswith("xl/media/"))


class TestOpen:

    def test_open_lists_sheets(self, sink):
        assert sink.sheet_names == ["Cover", "Results"]

    def test_missing_template_raises(self, tmp_path):
        with pytest.raises(DocumentWriteError, match="Failed to open template file"):
            WorkbookSink().open(tmp_path / "missing.xlsx")

    def test_non_workbook_raises(self, tmp_path):
        bogus = tmp_path / "bogus.xlsx"
        bogus.write_text("not a zip")

        with pytest.raises(DocumentWriteError):
            WorkbookSink().open(bogus)

    def test_use_before_open_raises(self):
        with pytest.raises(DocumentWriteError, match="No workbook is open"):
            WorkbookSink().save()


class TestInsertImage:

    def test_image_scaled_and_anchored(self, sink, sample_image):
        sink.insert_image(
            "Results", "B4", sample_image.read_bytes(),
            scale_x=1115.9 / 200, scale_y=609.2 / 100, extension=".png",
        )

        images = sink.workbook["Results"]._images
        assert len(images) == 1
        assert images[0].anchor == "B4"
        assert images[0].width == pytest.approx(1115.9)
        assert images[0].height == pytest.approx(609.2)

    def test_unknown_sheet_raises(self, sink, sample_image):
        with pytest.raises(DocumentWriteError, match="does not exist"):
            sink.insert_image("Nope", "B4", sample_image.read_bytes(),
                              scale_x=1, scale_y=1, extension=".png")

    def test_invalid_cell_raises(self, sink, sample_image):
        with pytest.raises(DocumentWriteError):
            sink.insert_image("Results", "B0", sample_image.read_bytes(),
                              scale_x=1, scale_y=1, extension=".png")

    def test_corrupt_bytes_raise(self, sink):
        with pytest.raises(DocumentWriteError):
            sink.insert_image("Results", "B4", b"garbage",
                              scale_x=1, scale_y=1, extension=".png")

    def test_auto_fit_is_rejected(self, sink, sample_image):
        with pytest.raises(DocumentWriteError):
            sink.insert_image("Results", "B4", sample_image.read_bytes(),
                              scale_x=1, scale_y=1, extension=".png", auto_fit=True)

    def test_jpeg_stored_under_true_extension(self, sink, template_workbook, make_image):
        jpeg = make_image("shot.jpg", fmt="JPEG")

        sink.insert_image("Results", "B4", jpeg.read_bytes(),
                          scale_x=1, scale_y=1, extension=".jpeg")
        sink.save()

        assert _media_names(template_workbook) == ["xl/media/image1.jpeg"]

    def test_legacy_png_tag_keeps_jpeg_bytes(self, sink, template_workbook, make_image):
        jpeg = make_image("shot.jpg", fmt="JPEG")
        data = jpeg.read_bytes()

        sink.insert_image("Results", "B4", data, scale_x=1, scale_y=1, extension=".png")
        sink.save()

        assert _media_names(template_workbook) == ["xl/media/image1.png"]
        with zipfile.ZipFile(template_workbook) as zf:
            assert zf.read("xl/media/image1.png") == data

    def test_jpg_extension_stored_as_jpeg(self, sink, template_workbook, make_image):
        jpeg = make_image("shot.jpg", fmt="JPEG")

        sink.insert_image("Results", "B4", jpeg.read_bytes(),
                          scale_x=1, scale_y=1, extension=".jpg")
        sink.save()

        assert _media_names(template_workbook) == ["xl/media/image1.jpeg"]

    def test_unsupported_extension_raises(self, sink, sample_image):
        with pytest.raises(DocumentWriteError, match="Unsupported image extension"):
            sink.insert_image("Results", "B4", sample_image.read_bytes(),
                              scale_x=1, scale_y=1, extension=".bmp")

        assert sink.workbook["Results"]._images == []

    def test_bmp_is_reencoded_as_png(self, sink, template_workbook, make_image):
        bmp = make_image("shot.bmp", fmt="BMP")

        sink.insert_image("Results", "B4", bmp.read_bytes(),
                          scale_x=1, scale_y=1, extension=".png")
        sink.save()

        with zipfile.ZipFile(template_workbook) as zf:
            assert zf.read("xl/media/image1.png").startswith(b"\x89PNG")


class TestPageBreaks:

    def test_break_adds_row_and_column_break(self, sink):
        sink.insert_page_break("Results", "BW40")

        ws = sink.workbook["Results"]
        assert [b.id for b in ws.row_breaks.brk] == [39]
        assert [b.id for b in ws.col_breaks.brk] == [74]
        assert all(b.man for b in ws.col_breaks.brk)

    def test_repeated_row_is_not_duplicated(self, sink):
        sink.insert_page_break("Results", "BW40")
        sink.insert_page_break("Results", "DH40")
        sink.insert_page_break("Results", "DH40")

        ws = sink.workbook["Results"]
        assert [b.id for b in ws.row_breaks.brk] == [39]
        assert [b.id for b in ws.col_breaks.brk] == [74, 111]

    def test_first_cell_is_ignored(self, sink):
        sink.insert_page_break("Results", "A1")

        ws = sink.workbook["Results"]
        assert list(ws.row_breaks.brk) == []
        assert list(ws.col_breaks.brk) == []

    def test_unknown_sheet_raises(self, sink):
        with pytest.raises(DocumentWriteError):
            sink.insert_page_break("Nope", "BW40")


class TestSave:

    def test_nothing_written_before_save(self, sink, template_workbook, sample_image):
        before = template_workbook.read_bytes()

        sink.insert_image("Results", "B4", sample_image.read_bytes(),
                          scale_x=1, scale_y=1, extension=".png")
        sink.insert_page_break("Results", "BW40")

        assert template_workbook.read_bytes() == before

    def test_save_updates_template_in_place(self, sink, template_workbook, sample_image):
        sink.insert_image("Results", "B4", sample_image.read_bytes(),
                          scale_x=1, scale_y=1, extension=".png")

        saved = sink.save()

        assert saved == template_workbook
        wb = load_workbook(template_workbook)
        assert wb["Results"]["A1"].value == "Test evidence"
        assert len(wb["Results"]._images) == 1
        # No temporary files left behind
        assert sorted(p.name for p in template_workbook.parent.glob("*.xlsx")) == ["template.xlsx"]

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_save_keeps_file_mode(self, template_workbook, sample_image):
        template_workbook.chmod(0o664)
        sink = WorkbookSink()
        sink.open(template_workbook)
        sink.insert_image("Results", "B4", sample_image.read_bytes(),
                          scale_x=1, scale_y=1, extension=".png")

        sink.save()

        assert stat.S_IMODE(template_workbook.stat().st_mode) == 0o664

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges")
    def test_save_through_symlink_keeps_link(self, tmp_path, template_workbook, sample_image):
        link = tmp_path / "links" / "link.xlsx"
        link.parent.mkdir()
        link.symlink_to(template_workbook)
        sink = WorkbookSink()
        sink.open(link)
        sink.insert_image("Results", "B4", sample_image.read_bytes(),
                          scale_x=1, scale_y=1, extension=".png")

        saved = sink.save()

        assert saved == link
        assert link.is_symlink()
        assert len(load_workbook(template_workbook)["Results"]._images) == 1
        assert list(link.parent.iterdir()) == [link]

    def test_failed_save_leaves_no_temporary_file(self, sink, template_workbook):
        before = template_workbook.read_bytes()

        with patch.object(sink.workbook, "save", side_effect=RuntimeError("disk gone")):
            with pytest.raises(RuntimeError):
                sink.save()

        assert sorted(p.name for p in template_workbook.parent.iterdir()
                      if p.suffix == ".xlsx") == ["template.xlsx"]
        assert template_workbook.read_bytes() == before
