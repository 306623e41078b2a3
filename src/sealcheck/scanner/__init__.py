"""Scanner orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["scan", "scan_workspace"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name in {"scan", "scan_workspace"}:
        from .orchestrator import scan, scan_workspace

        exports = {"scan": scan, "scan_workspace": scan_workspace}
        return exports[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
