from __future__ import annotations

"""
Directory Tree Generator.

Engine entry points used by the console driver: the lazy tree rendering of a
root directory and the "does the root have any subfolder" query used for
the empty-tree notice.
"""

import logging
import threading
from typing import Iterator, Optional

from foldertree.core.analysis.tree_renderer import render_directory
from foldertree.core.services.scanner import has_any_child_directory
from foldertree.domain.tree_models import RenderContext, TreeOptions

logger = logging.getLogger(__name__)

__all__ = ["render_tree", "render_tree_with_options", "has_any_child_directory"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        root_path: str,
        show_files: bool = False,
        use_ascii: bool = False,
        *,
        cancel_event: Optional[threading.Event] = None,
) -> Iterator[str]:
    """
    Render the folder structure below a root directory.

    The root itself is not named; the first line is its first child.
    Lines are produced lazily and the iterator cannot be restarted.

    Args:
        root_path: Resolved directory to render.
        show_files: Also list the files of each directory.
        use_ascii: Use ASCII connectors instead of box-drawing characters.
        cancel_event: Optional signal that stops rendering between scans.

    Returns:
        Iterator[str]: Tree lines in emission order.
    """
    options = TreeOptions(show_files=show_files, use_ascii=use_ascii)
    return render_tree_with_options(root_path, options, cancel_event=cancel_event)


def render_tree_with_options(
        root_path: str,
        options: TreeOptions,
        *,
        cancel_event: Optional[threading.Event] = None,
) -> Iterator[str]:
    """Variant of render_tree taking a prepared TreeOptions value."""
    logger.info(f"Generating directory tree for: {root_path}")
    logger.debug(f"Render options: {options}")
    return render_directory(root_path, RenderContext(), options, cancel_event=cancel_event)
