"""
Module: sheet_builder.loading.ordering

Purpose:
    Enumerate a screenshot folder and produce the deterministic placement
    order. Subdirectories are flattened; every non-directory entry is a
    candidate regardless of extension.

Key Functions:
    - discover_images(): Walk a folder and return ordered file paths
    - order_filenames(): Apply the ordering rule to a sequence of paths

Ordering Rule:
    1. Filenames without any ASCII digit come first
    2. Within each class, plain lexicographic order of the filename
    Only the filename takes part in the comparison, never the directory.
    The sort is stable, so equal filenames keep walk order.

Dependencies:
    - os, pathlib (std)
    - evidence_toolkit.common.path_utils: image_sort_key

Used By:
    - sheet_builder.controller: Main build controller
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List

from evidence_toolkit.common.path_utils import image_sort_key

from ..errors import FilesystemError

logger = logging.getLogger(__name__)


def discover_images(folder: Path) -> List[Path]:
    """
    Walk a folder recursively and return its files in placement order.

    Directory and file names are visited in sorted order so that files
    sharing a filename keep a reproducible relative order. Symlinked
    directories are followed; a directory already visited through another
    link is skipped.

    Args:
        folder: Root folder of screenshots

    Returns:
        Ordered list of file paths (may be empty)

    Raises:
        FilesystemError: If folder is missing, not a directory, or any
            part of the tree cannot be read. No partial result is returned.

    Example:
        >>> [p.name for p in discover_images(Path("evidence"))]
        ['cover.png', 'step1.png', 'step10.png', 'step2.png']
    """
    folder = Path(folder)
    if not folder.exists():
        raise FilesystemError(f"The folder path does not exist: {folder}")
    if not folder.is_dir():
        raise FilesystemError(f"Not a directory: {folder}")

    found: List[Path] = []
    visited = set()
    walker = os.walk(folder, onerror=_raise_walk_error, followlinks=True)
    for dirpath, dirnames, filenames in walker:
        real = os.path.realpath(dirpath)
        if real in visited:
            dirnames.clear()
            continue
        visited.add(real)
        dirnames.sort()
        for name in sorted(filenames):
            found.append(Path(dirpath) / name)

    ordered = order_filenames(found)
    logger.info(f"Found {len(ordered)} files in {folder}")
    return ordered


def order_filenames(paths: Iterable[Path]) -> List[Path]:
    """
    Order paths by filename: digit-free names first, then lexicographic.

    Args:
        paths: Paths in traversal order

    Returns:
        New list in placement order

    Example:
        >>> order_filenames([Path("b.png"), Path("a10.png"), Path("a2.png"), Path("cover.png")])
        [PosixPath('b.png'), PosixPath('cover.png'), PosixPath('a10.png'), PosixPath('a2.png')]
    """
    return sorted((Path(p) for p in paths), key=image_sort_key)


def _raise_walk_error(error: OSError) -> None:
    """os.walk error hook: abort the whole traversal."""
    raise FilesystemError(
        f"Error walking through the folder: {error}"
    ) from error
