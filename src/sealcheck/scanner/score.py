"""Counting and ordering utilities for findings and summaries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from sealcheck.constants.scoring import SEVERITY_ORDER, SEVERITY_RANK, TOP_RISKS_DEFAULT_LIMIT
from sealcheck.model import Finding
from sealcheck.types import Severity


def severity_counts(findings: Sequence[Finding]) -> dict[Severity, int]:
    """Count findings by severity with stable keys."""
    counts = Counter(finding.severity for finding in findings)
    return {
        "critical": int(counts.get("critical", 0)),
        "high": int(counts.get("high", 0)),
        "medium": int(counts.get("medium", 0)),
        "low": int(counts.get("low", 0)),
    }


def rule_counts(findings: Sequence[Finding]) -> dict[str, int]:
    """Count findings per rule id."""
    counts = Counter(finding.rule_id for finding in findings)
    return {rule_id: int(count) for rule_id, count in sorted(counts.items())}


def type_counts(findings: Sequence[Finding]) -> dict[str, int]:
    """Count findings per ``type`` metadata tag."""
    counts = Counter(finding.type for finding in findings)
    return {finding_type: int(count) for finding_type, count in sorted(counts.items())}


def highest_severity(findings: Sequence[Finding]) -> Severity | None:
    """Return the most severe level present, or None for no findings."""
    present = {finding.severity for finding in findings}
    for severity in SEVERITY_ORDER:
        if severity in present:
            return severity  # type: ignore[return-value]
    return None


def sorted_top_risks(
    findings: Sequence[Finding],
    limit: int = TOP_RISKS_DEFAULT_LIMIT,
) -> list[Finding]:
    """Return most severe findings sorted deterministically."""
    return sorted(findings, key=lambda finding: (-SEVERITY_RANK[finding.severity], finding.id))[:limit]
