from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the `tree`-style driver. Classic switches
are accepted with either '/' or '-' and in either letter case
(`/F`, `-f`, `/A`, `-a`, `/?`); unknown switches are ignored.
"""

import argparse
import os
import sys
from typing import List, Optional, Sequence, Tuple

from foldertree.domain.config import merge_switches
from foldertree.domain.tree_models import TreeOptions

USAGE = (
    "Graphically displays the folder structure of a drive or path.\n\n"
    "TREE [drive:][path] [/F] [/A]\n\n"
    "   /F   Display the names of the files in each folder.\n"
    "   /A   Use ASCII instead of extended characters.\n\n"
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the foldertree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="foldertree",
        description="Graphically displays the folder structure of a drive or path.",
        add_help=False,
        allow_abbrev=False,
    )

    # Folder paths are collected from the leftovers in parse_args so that
    # they can appear anywhere between switches.

    # --- Classic switches ---
    p.add_argument(
        "-f", "-F",
        dest="show_files",
        action="store_true",
        help="Display the names of the files in each folder.",
    )
    p.add_argument(
        "-a", "-A",
        dest="use_ascii",
        action="store_true",
        help="Use ASCII instead of extended characters.",
    )
    p.add_argument(
        "-?", "--help",
        dest="show_usage",
        action="store_true",
        help="Display usage and exit.",
    )

    # --- Output and diagnostics ---
    p.add_argument(
        "--output",
        dest="output_file",
        default=None,
        help="Also write the tree lines to this file.",
    )
    p.add_argument(
        "--no-banner",
        action="store_true",
        help="Omit the volume banner and root line.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Persist diagnostic logs to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse a command line, tolerating unknown switches.

    Args:
        argv: Arguments excluding the program name. Defaults to sys.argv[1:].

    Returns:
        Tuple[argparse.Namespace, List[str]]: (Parsed arguments with a
            `paths` list in command-line order, Ignored switches).
    """
    parser = build_parser()
    normalized = normalize_switches(sys.argv[1:] if argv is None else argv)

    args, leftovers = parser.parse_known_args(normalized)
    args.paths = [t for t in leftovers if not _is_switch(t)]
    unknown = [t for t in leftovers if _is_switch(t)]
    return args, unknown

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def normalize_switches(argv: Sequence[str]) -> List[str]:
    """
    Reduce classic switches to their first letter in dash form.

    `-fx`, `/Fxyz` and `-help` become `-f`, `-F` and `-h`; only the letter
    after the prefix counts. Long options and their values pass through.
    A slash token is a path rather than a switch when it holds another
    separator or names an existing filesystem entry (`/tmp`).
    """
    out: List[str] = []
    takes_value = False
    for token in argv:
        if takes_value:
            out.append(token)
            takes_value = False
        elif token.startswith("--"):
            out.append(token)
            takes_value = token in _VALUE_OPTIONS
        elif _is_dash_switch(token) or _is_slash_switch(token):
            out.append("-" + token[1])
        else:
            out.append(token)
    return out


def args_to_options(args: argparse.Namespace, base: Optional[TreeOptions] = None) -> TreeOptions:
    """
    Translate parsed switches into render options.

    Args:
        args: Parsed command-line arguments.
        base: Options to enable switches on top of. Defaults to all-off.

    Returns:
        TreeOptions: Effective render configuration.
    """
    return merge_switches(base or TreeOptions(), bool(args.show_files), bool(args.use_ascii))

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

_VALUE_OPTIONS = ("--output", "--log-file")


def _is_switch(token: str) -> bool:
    return len(token) > 1 and token[0] == "-"


def _is_dash_switch(token: str) -> bool:
    return len(token) > 1 and token[0] == "-" and token[1] != "-"


def _is_slash_switch(token: str) -> bool:
    if len(token) < 2 or token[0] != "/" or token[1] == "/":
        return False
    if len(token) == 2:
        return True
    return "/" not in token[1:] and "\\" not in token[1:] and not os.path.exists(token)
