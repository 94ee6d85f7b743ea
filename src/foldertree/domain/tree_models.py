from __future__ import annotations

"""
Directory Tree Data Models.

Provides the immutable value objects shared by the scanner and the renderer:
directory entries, scan results, per-branch drawing context, glyph sets and
the render options threaded through a traversal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# SCAN MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirEntry:
    """
    A single child of a scanned directory.

    Attributes:
        name: Entry name as returned by the filesystem enumeration.
        is_directory: True when the entry's metadata marks it as a directory.
    """
    name: str
    is_directory: bool


class ScanStatus(str, Enum):
    """Outcome of a directory enumeration."""
    COMPLETE = "complete"
    UNAVAILABLE = "unavailable"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class ScanResult:
    """
    Immediate children of a directory, partitioned by kind.

    Both sequences keep filesystem-enumeration order. Results that are not
    COMPLETE never carry entries.

    Attributes:
        directories: Subdirectory entries.
        files: Non-directory entries.
        status: Enumeration outcome.
        error: Diagnostic message for non-complete outcomes.
    """
    directories: Tuple[DirEntry, ...] = ()
    files: Tuple[DirEntry, ...] = ()
    status: ScanStatus = ScanStatus.COMPLETE
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ScanStatus.COMPLETE

    @property
    def is_empty(self) -> bool:
        return not self.directories and not self.files

    @classmethod
    def failed(cls, status: ScanStatus, error: str) -> "ScanResult":
        """Build an empty result for a failed enumeration."""
        return cls(status=status, error=error)

# -----------------------------------------------------------------------------
# RENDER MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderContext:
    """
    Drawing state of one branch of the traversal.

    ancestor_continues[d] is True when the ancestor at depth d still has
    sibling subdirectories to render below the current branch.
    """
    ancestor_continues: Tuple[bool, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.ancestor_continues)

    def descend(self, continues: bool) -> "RenderContext":
        """Return the context for a child one level deeper."""
        return RenderContext(self.ancestor_continues + (continues,))


@dataclass(frozen=True)
class GlyphSet:
    """
    Connector characters used for one whole render.

    Attributes:
        tee: Corner for a sibling followed by more siblings.
        corner: Corner for the last sibling.
        branch: Horizontal connector.
        vertical: Continuation bar.
        blank: Padding character.
    """
    tee: str
    corner: str
    branch: str
    vertical: str
    blank: str = " "

    @staticmethod
    def select(use_ascii: bool) -> "GlyphSet":
        return ASCII_GLYPHS if use_ascii else UNICODE_GLYPHS


UNICODE_GLYPHS = GlyphSet(tee="├", corner="└", branch="─", vertical="│")
ASCII_GLYPHS = GlyphSet(tee="+", corner="\\", branch="-", vertical="|")


@dataclass(frozen=True)
class TreeOptions:
    """
    Immutable render configuration, passed by value through the engine.

    Attributes:
        show_files: Emit file blocks in addition to directory lines.
        use_ascii: Draw with ASCII characters instead of box-drawing ones.
    """
    show_files: bool = False
    use_ascii: bool = False

    @property
    def glyphs(self) -> GlyphSet:
        return GlyphSet.select(self.use_ascii)
