from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the path handling the console driver needs around the tree engine:
root path resolution, volume identification for the banner, drive stripping
for diagnostics and persistence of rendered lines.
"""

import os
from typing import Iterable, Optional, Tuple

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def resolve_root_path(path: Optional[str], cwd: Optional[str] = None) -> str:
    """
    Normalize a user-supplied path into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%), user home
    shortcuts (~/) and '.'/'..' segments. Empty input resolves to the
    working directory.

    Args:
        path: Raw input path string.
        cwd: Base for relative paths. Defaults to the process working directory.

    Returns:
        str: Normalized absolute path.
    """
    base = cwd or os.getcwd()
    p = (path or "").strip()
    if not p:
        return os.path.abspath(base)

    p = os.path.expandvars(os.path.expanduser(p))
    if not os.path.isabs(p):
        p = os.path.join(base, p)
    return os.path.normpath(p)


def strip_drive(path: str) -> str:
    """Remove a drive or UNC share prefix from a path."""
    return os.path.splitdrive(path)[1]


def current_drive(cwd: Optional[str] = None) -> str:
    """Return the drive prefix of the working directory ('' on POSIX)."""
    return os.path.splitdrive(cwd or os.getcwd())[0]

# -----------------------------------------------------------------------------
# VOLUME INFORMATION API
# -----------------------------------------------------------------------------

def find_mount_point(path: str) -> str:
    """Walk up from a path to the mount point that contains it."""
    current = os.path.abspath(path)
    while not os.path.ismount(current):
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    return current


def volume_info(path: str) -> Tuple[str, int]:
    """
    Identify the volume holding a path.

    The label is the mount point's base name (empty for a filesystem root)
    and the serial is the device identifier truncated to 32 bits.

    Args:
        path: Any path on the volume. Falls back to its nearest existing parent.

    Returns:
        Tuple[str, int]: (Volume label, Serial number).
    """
    probe = os.path.abspath(path)
    while not os.path.exists(probe):
        parent = os.path.dirname(probe)
        if parent == probe:
            break
        probe = parent

    try:
        serial = os.stat(probe).st_dev & 0xFFFFFFFF
    except OSError:
        serial = 0

    label = os.path.basename(find_mount_point(probe).rstrip("\\/"))
    return label, serial


def format_serial(serial: int) -> str:
    """Format a volume serial as two 16-bit hex halves (e.g. 'A1B2-C3D4')."""
    return f"{serial >> 16:X}-{serial & 0xFFFF:X}"

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def save_lines(save_path: str, lines: Iterable[str]) -> Tuple[bool, Optional[str]]:
    """
    Persist text lines to a UTF-8 file, creating parent directories.

    Args:
        save_path: Target file path.
        lines: Lines to write, without terminators.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        return True, None
    except OSError as e:
        return False, str(e)
