from __future__ import annotations

"""
Tree Renderer.

Turns directory listings into console tree lines. Each directory emits its
file block (optional) followed by its subdirectory block, and every
subdirectory line is immediately followed by the full rendering of that
subdirectory (strict pre-order).

Descent is driven by an explicit stack of per-directory generators, so the
nesting depth is bounded by the filesystem rather than the interpreter
recursion limit. Every directory generator owns its RenderContext; sibling
branches never share drawing state.
"""

import logging
import os
import threading
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from foldertree.core.services.scanner import scan_directory
from foldertree.domain.tree_models import GlyphSet, RenderContext, TreeOptions

logger = logging.getLogger(__name__)

COLUMN_WIDTH = 4
SPACER_NAME = ""

# -----------------------------------------------------------------------------
# LINE FORMATTING
# -----------------------------------------------------------------------------

def format_prefix(context: RenderContext, glyphs: GlyphSet) -> str:
    """
    Build the continuation columns for a line at the context's depth.

    Args:
        context: Drawing state of the branch being rendered.
        glyphs: Active glyph set.

    Returns:
        str: One column per ancestor level, either a vertical bar or padding.
    """
    bar = glyphs.vertical + glyphs.blank * (COLUMN_WIDTH - 1)
    pad = glyphs.blank * COLUMN_WIDTH
    return "".join(bar if continues else pad for continues in context.ancestor_continues)


def directory_connector(is_last: bool, glyphs: GlyphSet) -> str:
    """Return the closing corner for the last sibling, the tee otherwise."""
    corner = glyphs.corner if is_last else glyphs.tee
    return corner + glyphs.branch * (COLUMN_WIDTH - 1)


def file_connector(has_subdirectories: bool, glyphs: GlyphSet) -> str:
    """Return the file column: open bar if subdirectories follow, padding otherwise."""
    if has_subdirectories:
        return glyphs.vertical + glyphs.blank * (COLUMN_WIDTH - 1)
    return glyphs.blank * COLUMN_WIDTH


def format_directory_line(
        name: str,
        index: int,
        total: int,
        context: RenderContext,
        glyphs: GlyphSet,
) -> str:
    """Format the line naming entry `index` of a block of `total` subdirectories."""
    is_last = index == total - 1
    return format_prefix(context, glyphs) + directory_connector(is_last, glyphs) + name


def format_file_line(
        name: str,
        context: RenderContext,
        has_subdirectories: bool,
        glyphs: GlyphSet,
) -> str:
    """Format a file line. Files never open a branch of their own."""
    return format_prefix(context, glyphs) + file_connector(has_subdirectories, glyphs) + name

# -----------------------------------------------------------------------------
# TRAVERSAL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class _Descend:
    """Request emitted by a directory step to render one of its subdirectories."""
    path: str
    context: RenderContext


_Step = Union[str, _Descend]


def render_directory(
        path: str,
        context: RenderContext,
        options: TreeOptions,
        cancel_event: Optional[threading.Event] = None,
) -> Iterator[str]:
    """
    Lazily render the contents of a directory and all its descendants.

    The returned iterator is one-shot. Directories that cannot be listed
    render as empty and do not stop their siblings.

    Args:
        path: Directory whose children are rendered.
        context: Drawing state at the directory's depth.
        options: Render configuration.
        cancel_event: Optional signal checked before every directory scan.

    Yields:
        str: Formatted tree lines in pre-order.
    """
    glyphs = options.glyphs
    stack: List[Iterator[_Step]] = []

    if _cancelled(cancel_event):
        return
    stack.append(_directory_steps(path, context, options, glyphs))

    while stack:
        try:
            step = next(stack[-1])
        except StopIteration:
            stack.pop()
            continue

        if isinstance(step, _Descend):
            if _cancelled(cancel_event):
                return
            stack.append(_directory_steps(step.path, step.context, options, glyphs))
        else:
            yield step


def _directory_steps(
        path: str,
        context: RenderContext,
        options: TreeOptions,
        glyphs: GlyphSet,
) -> Iterator[_Step]:
    """Emit one directory's lines, interleaved with descent requests."""
    scan = scan_directory(path)
    if not scan.ok:
        logger.debug(f"Rendering '{path}' as empty ({scan.status.value})")

    # Scenario A: file block, closed by a spacer line
    if options.show_files and scan.files:
        has_subdirectories = bool(scan.directories)
        for entry in scan.files:
            yield format_file_line(entry.name, context, has_subdirectories, glyphs)
        yield format_file_line(SPACER_NAME, context, has_subdirectories, glyphs)

    # Scenario B: subdirectory block, each line followed by its subtree
    total = len(scan.directories)
    for i, entry in enumerate(scan.directories):
        yield format_directory_line(entry.name, i, total, context, glyphs)
        yield _Descend(
            path=os.path.join(path, entry.name),
            context=context.descend(i != total - 1),
        )


def _cancelled(cancel_event: Optional[threading.Event]) -> bool:
    if cancel_event and cancel_event.is_set():
        logger.info("Tree rendering cancelled.")
        return True
    return False
