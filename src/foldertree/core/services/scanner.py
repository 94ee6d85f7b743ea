from __future__ import annotations

"""
Directory Listing Service.

Enumerates the immediate children of a directory and partitions them into
subdirectories and files, preserving the order reported by the filesystem.
Listing failures never propagate: they degrade to an empty result whose
status tells "could not open" apart from "failed mid-enumeration".
"""

import logging
import os
from typing import List

from foldertree.domain.tree_models import DirEntry, ScanResult, ScanStatus

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = (".", "..")

# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan_directory(path: str) -> ScanResult:
    """
    List the children of a directory without sorting.

    Each entry is classified from its directory attribute. An entry whose
    attributes cannot be read is listed as a file.

    Args:
        path: Absolute or process-relative directory path.

    Returns:
        ScanResult: Partitioned entries, or an empty result with status
                    UNAVAILABLE (cannot be opened) or INTERRUPTED
                    (enumeration failed after it started).
    """
    directories: List[DirEntry] = []
    files: List[DirEntry] = []

    try:
        iterator = os.scandir(path)
    except OSError as e:
        logger.debug(f"Directory unavailable '{path}': {e}")
        return ScanResult.failed(ScanStatus.UNAVAILABLE, str(e))

    try:
        with iterator:
            for entry in iterator:
                if entry.name in _PSEUDO_ENTRIES:
                    continue
                if _is_directory(entry):
                    directories.append(DirEntry(name=entry.name, is_directory=True))
                else:
                    files.append(DirEntry(name=entry.name, is_directory=False))
    except OSError as e:
        logger.warning(f"Enumeration of '{path}' failed after it started: {e}")
        return ScanResult.failed(ScanStatus.INTERRUPTED, str(e))

    return ScanResult(directories=tuple(directories), files=tuple(files))


def has_any_child_directory(path: str) -> bool:
    """
    Check whether a directory holds at least one subdirectory.

    Stops at the first match. Unavailable paths report False.

    Args:
        path: Directory to inspect.

    Returns:
        bool: True if a subdirectory exists.
    """
    try:
        with os.scandir(path) as iterator:
            for entry in iterator:
                if entry.name in _PSEUDO_ENTRIES:
                    continue
                if _is_directory(entry):
                    return True
    except OSError as e:
        logger.debug(f"Subdirectory probe failed for '{path}': {e}")
    return False

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError as e:
        logger.debug(f"Unreadable attributes for '{entry.path}', listed as file: {e}")
        return False
