import pytest
import sys
from pathlib import Path
from PIL import Image
from openpyxl import Workbook

# Add src to sys.path so we can import evidence_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from evidence_toolkit.sheet_builder.errors import DocumentWriteError
from evidence_toolkit.sheet_builder.output.sink import DocumentSink


class RecordingSink(DocumentSink):
    """In-memory sink that records every call in order."""

    def __init__(self, sheets=("Results",), fail_on_insert=None):
        self.sheets = list(sheets)
        self.fail_on_insert = fail_on_insert
        self.calls = []
        self.opened = None
        self.saved = False
        self.closed = False

    def open(self, path):
        self.opened = Path(path)
        self.calls.append(("open", Path(path)))

    def insert_image(self, sheet, cell, data, *, scale_x, scale_y, extension, auto_fit=False):
        if self.fail_on_insert is not None and cell == self.fail_on_insert:
            raise DocumentWriteError(f"rejected {cell}")
        self.calls.append(("image", sheet, cell, scale_x, scale_y, extension, auto_fit))

    def insert_page_break(self, sheet, cell):
        self.calls.append(("break", sheet, cell))

    def save(self):
        self.saved = True
        self.calls.append(("save",))
        return self.opened

    @property
    def sheet_names(self):
        return list(self.sheets)

    def close(self):
        self.closed = True

    @property
    def images(self):
        return [c for c in self.calls if c[0] == "image"]

    @property
    def breaks(self):
        return [c for c in self.calls if c[0] == "break"]


# Common test fixtures
@pytest.fixture
def make_image(tmp_path: Path):
    """Factory writing a solid image of the given size and format."""
    def _create(name: str, size=(200, 100), fmt: str = "PNG", folder: Path = None) -> Path:
        target_dir = folder or tmp_path / "shots"
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        Image.new("RGB", size, color="white").save(path, format=fmt)
        return path
    return _create


@pytest.fixture
def sample_image(make_image):
    """Create a simple test image."""
    return make_image("sample.png")


@pytest.fixture
def template_workbook(tmp_path: Path) -> Path:
    """Create a template workbook with a 'Results' sheet."""
    wb = Workbook()
    wb.active.title = "Cover"
    ws = wb.create_sheet("Results")
    ws["A1"] = "Test evidence"
    path = tmp_path / "template.xlsx"
    wb.save(path)
    return path


@pytest.fixture
def recording_sink():
    return RecordingSink()
