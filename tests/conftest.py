from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory directory tree that replaces the scanner, so that sibling
   order is deterministic in rendering tests.
3. Logging teardown after tests that run the CLI in-process.
"""

import os
import sys
from typing import Any, Callable, Dict, Iterator, List, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from foldertree.domain.tree_models import DirEntry, ScanResult, ScanStatus  # noqa: E402
from foldertree.infra.logging import shutdown_logging  # noqa: E402

FAKE_ROOT = os.path.join(os.sep, "R")

# Nested dicts are directories, None values are files
FakeTree = Dict[str, Any]


def build_fake_scanner(
        tree: FakeTree,
        root: str = FAKE_ROOT,
        unavailable: Tuple[str, ...] = (),
) -> Callable[[str], ScanResult]:
    """
    Index a nested dict as scan results keyed by absolute path.

    Paths listed in `unavailable` (relative to root) scan as UNAVAILABLE.
    """
    index: Dict[str, ScanResult] = {}
    pending: List[Tuple[str, FakeTree]] = [(root, tree)]

    while pending:
        path, node = pending.pop()
        dirs = tuple(DirEntry(n, True) for n, v in node.items() if isinstance(v, dict))
        files = tuple(DirEntry(n, False) for n, v in node.items() if v is None)
        index[path] = ScanResult(directories=dirs, files=files)
        for name, child in node.items():
            if isinstance(child, dict):
                pending.append((os.path.join(path, name), child))

    for rel in unavailable:
        index[os.path.join(root, rel)] = ScanResult.failed(ScanStatus.UNAVAILABLE, "denied")

    def fake_scan(path: str) -> ScanResult:
        return index.get(path, ScanResult.failed(ScanStatus.UNAVAILABLE, "missing"))

    return fake_scan


@pytest.fixture
def fake_tree(monkeypatch: pytest.MonkeyPatch) -> Callable[..., str]:
    """
    Install an in-memory tree in place of the renderer's scanner.

    Returns:
        Callable: install(tree, unavailable=()) -> fake root path.
    """
    def install(tree: FakeTree, unavailable: Tuple[str, ...] = ()) -> str:
        scanner = build_fake_scanner(tree, unavailable=unavailable)
        monkeypatch.setattr("foldertree.core.analysis.tree_renderer.scan_directory", scanner)
        return FAKE_ROOT

    return install


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Detach the handlers installed by configure_logging after a test."""
    yield
    shutdown_logging()
