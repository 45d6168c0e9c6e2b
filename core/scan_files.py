"""
scan_files.py - Folder Discovery Module

Walks the directory tree and collects Johnny Decimal folders
"""

from pathlib import Path
from typing import List, Optional, Callable
import os

from .errors import TraversalError
from .models_fs import JDFolder
from .text_match import parse_jd_name


def _raise_walk_error(err: OSError) -> None:
    raise TraversalError(f"error walking directory: {err}") from err


def scan_jd_folders(
    root: Path,
    source_prefix: str,
    progress_callback: Optional[Callable[[str], None]] = None
) -> List[JDFolder]:
    """
    Recursively collect folders named "<source_prefix>.<decimal> <remainder>"

    The walk is top-down with entries sorted by name, so the encounter
    order (JDFolder.order) is the same for every run on the same tree.
    Files are ignored and the root directory itself is never matched.

    Args:
        root: Root directory
        source_prefix: Prefix to match
        progress_callback: Called with each visited directory path

    Returns:
        Matched folders in encounter order

    Raises:
        TraversalError: Root is missing or a directory cannot be read
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise TraversalError(f"Directory does not exist: {root}")

    results: List[JDFolder] = []

    for dirpath, dirnames, _filenames in os.walk(root, onerror=_raise_walk_error):
        # Sorting in place fixes the order os.walk descends in
        dirnames.sort()

        current_dir = Path(dirpath)
        if current_dir == root:
            continue

        if progress_callback:
            progress_callback(str(current_dir))

        parsed = parse_jd_name(current_dir.name, source_prefix)
        if parsed is None:
            continue

        decimal, remainder = parsed
        results.append(JDFolder(
            path=current_dir,
            decimal=decimal,
            remainder=remainder,
            order=len(results),
        ))

    return results
