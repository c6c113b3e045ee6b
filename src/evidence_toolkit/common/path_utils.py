"""Path and filename utilities.

Provides the filename classification used to order screenshot folders:
names without digits (covers, summaries) sort ahead of numbered captures.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Tuple

# ASCII only: full-width or other Unicode digits do not count.
_DIGIT_RE = re.compile(r"[0-9]")


def has_digit(filename: str | Path) -> bool:
    """Check whether a filename contains at least one ASCII digit.

    Only the final path component is inspected.

    Examples:
        >>> has_digit("cover.png")
        False
        >>> has_digit("step_01.png")
        True
        >>> has_digit(Path("run2/cover.png"))
        False
    """
    if isinstance(filename, Path):
        filename = filename.name
    return _DIGIT_RE.search(filename) is not None


def image_sort_key(path: str | Path) -> Tuple[bool, str]:
    """Sort key placing digit-free names first, then plain string order.

    Comparison is lexicographic by codepoint, not numeric, so "image10"
    sorts before "image2".

    Examples:
        >>> sorted(["b.png", "a10.png", "a2.png", "cover.png"], key=image_sort_key)
        ['b.png', 'cover.png', 'a10.png', 'a2.png']
    """
    name = path.name if isinstance(path, Path) else Path(path).name
    return has_digit(name), name
