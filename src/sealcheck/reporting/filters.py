"""Shared output-filter helpers for reporters and file writers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sealcheck.constants.scoring import SEVERITY_RANK
from sealcheck.model import Finding
from sealcheck.types import Severity


@dataclass(frozen=True)
class OutputFilters:
    """Display/output filters that do not affect scan execution."""

    min_severity: Severity | None = None

    def active(self) -> bool:
        """Whether any filter is enabled."""
        return self.min_severity is not None


def finding_passes_filters(finding: Finding, filters: OutputFilters) -> bool:
    """Return whether a finding should be shown under the configured filters."""
    if filters.min_severity is None:
        return True
    return SEVERITY_RANK[finding.severity] >= SEVERITY_RANK[filters.min_severity]


def filter_findings(findings: Sequence[Finding], filters: OutputFilters) -> list[Finding]:
    """Return findings that pass all configured output filters."""
    return [finding for finding in findings if finding_passes_filters(finding, filters)]


def build_filter_metadata(
    *,
    total: int,
    shown: int,
    filters: OutputFilters,
) -> dict[str, object] | None:
    """Build stable filter metadata for JSON/SARIF payloads."""
    if not filters.active():
        return None
    return {
        "min_severity": filters.min_severity,
        "shown": shown,
        "total": total,
        "filtered": max(0, total - shown),
    }
