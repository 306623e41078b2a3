"""Tests for CI exit-code gating via --fail-on."""

from __future__ import annotations

from typing import Any

import pytest

from sealcheck.cli.handlers import evaluate_fail_thresholds
from sealcheck.model import Evidence, Finding, ScanResult
from sealcheck.types import Severity


def _make_finding(severity: Severity) -> Finding:
    return Finding(
        id="0" * 16,
        rule_id="ARTINT-002",
        detector_id="UNSIGNED_ARTIFACT",
        severity=severity,
        confidence="medium",
        title="Unsigned release artifact",
        description="desc",
        evidence=Evidence(path="/tree/app.zip"),
        recommendation="Sign it",
        metadata={"type": "unsigned_artifact"},
    )


def _result(*severities: Severity, **overrides: Any) -> ScanResult:
    findings = tuple(_make_finding(severity) for severity in severities)
    defaults: dict[str, Any] = {
        "root": "/tree",
        "scanned_files": 1,
        "total_findings": len(findings),
        "counts_by_severity": {"critical": 0, "high": 0, "medium": 0, "low": 0},
        "findings": findings,
        "duration_seconds": 0.1,
    }
    defaults.update(overrides)
    return ScanResult(**defaults)


def test_no_threshold_never_fails() -> None:
    assert evaluate_fail_thresholds(_result("critical"), fail_on=None) == 0


@pytest.mark.parametrize(
    ("severities", "fail_on", "expected"),
    [
        (("medium",), "medium", 1),
        (("medium",), "high", 0),
        (("low", "critical"), "critical", 1),
        (("low",), "low", 1),
        ((), "low", 0),
    ],
)
def test_threshold_is_inclusive(severities: tuple[Severity, ...], fail_on: str, expected: int) -> None:
    assert evaluate_fail_thresholds(_result(*severities), fail_on=fail_on) == expected
