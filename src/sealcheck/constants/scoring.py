"""Constants for severity ranking and ordering."""

from __future__ import annotations

SEVERITY_RANK: dict[str, int] = {"low": 0, "medium": 1, "high": 2, "critical": 3}
SEVERITY_ORDER: tuple[str, ...] = ("critical", "high", "medium", "low")
TOP_RISKS_DEFAULT_LIMIT: int = 5
