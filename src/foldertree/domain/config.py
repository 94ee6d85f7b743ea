from __future__ import annotations

"""
Render Configuration Defaults.

Resolves the TreeOptions used for a run from built-in defaults and
environment overrides. Command-line switches are applied on top by the CLI.
"""

import logging
import os
from dataclasses import replace
from typing import Mapping, Optional

from foldertree.domain.tree_models import TreeOptions

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
ENV_SHOW_FILES = "FOLDERTREE_SHOW_FILES"
ENV_USE_ASCII = "FOLDERTREE_ASCII"

_TRUTHY = {"1", "true", "yes", "on"}


def get_default_options() -> TreeOptions:
    """
    Generate the default render options (directories only, box-drawing glyphs).

    Returns:
        TreeOptions: Default configuration values.
    """
    return TreeOptions(show_files=False, use_ascii=False)


def load_options_from_env(environ: Optional[Mapping[str, str]] = None) -> TreeOptions:
    """
    Apply environment overrides to the default options.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        TreeOptions: Defaults with any truthy environment flags enabled.
    """
    env = os.environ if environ is None else environ
    options = get_default_options()

    if _is_truthy(env.get(ENV_SHOW_FILES)):
        options = replace(options, show_files=True)
    if _is_truthy(env.get(ENV_USE_ASCII)):
        options = replace(options, use_ascii=True)

    logger.debug(f"Options resolved from environment: {options}")
    return options


def merge_switches(base: TreeOptions, show_files: bool, use_ascii: bool) -> TreeOptions:
    """Enable switches on top of a base configuration. Switches never disable."""
    return TreeOptions(
        show_files=base.show_files or show_files,
        use_ascii=base.use_ascii or use_ascii,
    )


def _is_truthy(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() in _TRUTHY
