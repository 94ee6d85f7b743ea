from __future__ import annotations

"""Console folder-tree renderer in the style of the classic `tree` utility."""

__version__ = "1.0.0"
