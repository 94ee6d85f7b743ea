from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates a console run: argument parsing, logging bootstrap, root path
resolution, the volume banner, streaming of the rendered tree to stdout and
the trailing "no subfolders" notice.
"""

import os
import sys
from typing import List, Optional, Sequence

from foldertree.core.analysis.tree_generator import (
    has_any_child_directory,
    render_tree_with_options,
)
from foldertree.domain.config import load_options_from_env
from foldertree.domain.tree_models import TreeOptions
from foldertree.infra.fs import (
    current_drive,
    format_serial,
    resolve_root_path,
    save_lines,
    strip_drive,
    volume_info,
)
from foldertree.infra.logging import LoggingConfig, configure_logging, get_logger
from foldertree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

NO_SUBFOLDERS_MSG = "No subfolders exist"

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv[1:].

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    args, ignored = cli_args.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))
    for token in ignored:
        logger.debug(f"Ignoring unknown switch: {token}")

    if args.show_usage:
        sys.stderr.write(cli_args.USAGE)
        return EXIT_OK

    if len(args.paths) > 1:
        print(f"Too many parameters - {args.paths[1]}\n", file=sys.stderr)
        return EXIT_USAGE

    # 3. Resolve options and root path
    options = cli_args.args_to_options(args, load_options_from_env())
    path_given = bool(args.paths)
    root_path = resolve_root_path(args.paths[0] if path_given else None)
    logger.debug(f"Resolved root '{root_path}' with {options}")

    # 4. Banner and root line
    if not args.no_banner:
        _print_banner(root_path, path_given)

    if not os.path.isdir(root_path):
        print(f"Invalid path - {strip_drive(root_path)}", file=sys.stderr)
        print(f"{NO_SUBFOLDERS_MSG}\n", file=sys.stderr)
        return EXIT_USAGE

    # 5. Tree streaming phase
    try:
        lines = _stream_tree(root_path, options, keep=bool(args.output_file))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except (MemoryError, BrokenPipeError):
        raise
    except Exception as e:
        logger.critical(f"Tree rendering failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Optional persistence
    if args.output_file:
        ok, err = save_lines(args.output_file, lines)
        if not ok:
            logger.error(f"Failed to save tree to '{args.output_file}': {err}")
            print(f"ERROR: cannot write '{args.output_file}': {err}", file=sys.stderr)
            return EXIT_FAILURE
        logger.info(f"Tree saved to file: {args.output_file}")

    if not has_any_child_directory(root_path):
        print(f"{NO_SUBFOLDERS_MSG}\n", file=sys.stderr)

    return EXIT_OK

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def format_banner(root_path: str, path_given: bool) -> List[str]:
    """
    Build the heading printed above the tree.

    Args:
        root_path: Resolved root directory.
        path_given: Whether the user named the root explicitly.

    Returns:
        List[str]: Volume label line, serial line and root line.
    """
    label, serial = volume_info(root_path)
    if path_given:
        root_line = root_path.upper() if os.name == "nt" else root_path
    else:
        root_line = f"{current_drive()}."
    return [
        f"Folder PATH listing for volume {label}",
        f"Volume serial number is {format_serial(serial)}",
        root_line,
    ]


def _print_banner(root_path: str, path_given: bool) -> None:
    for line in format_banner(root_path, path_given):
        print(line)


def _stream_tree(root_path: str, options: TreeOptions, keep: bool) -> List[str]:
    """Print tree lines as they are produced; optionally keep them for saving."""
    kept: List[str] = []
    for line in render_tree_with_options(root_path, options):
        print(line)
        if keep:
            kept.append(line)
    return kept


if __name__ == "__main__":
    sys.exit(main())
