"""Top-level package for the Evidence Sheet Builder.

Provides subpackages:
- evidence_toolkit.sheet_builder – ordering, placement and workbook output
- evidence_toolkit.common – cell reference and filename helpers
- evidence_toolkit.cli – command line entry point
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("evidence-toolkit")
except PackageNotFoundError:
    # Running from a source checkout without installing
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
