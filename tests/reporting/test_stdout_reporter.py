"""Tests for the stdout reporter."""

from __future__ import annotations

from sealcheck.constants.reporting import ANSI_MAGENTA, ANSI_RESET
from sealcheck.model import Evidence, Finding, ScanResult
from sealcheck.types import Severity


def _make_finding(
    *,
    rule_id: str = "ARTINT-003",
    severity: Severity = "critical",
    finding_id: str = "abc123",
    path: str = "/tree/SHA256SUMS",
    line: int = 2,
) -> Finding:
    return Finding(
        id=finding_id,
        rule_id=rule_id,
        detector_id="CHECKSUM_MISMATCH",
        severity=severity,
        confidence="high",
        title=f"Test {rule_id}",
        description="Checksum mismatch for app.zip",
        evidence=Evidence(path=path, line=line, end_line=line),
        recommendation="Fix it",
        metadata={"type": "checksum_mismatch"},
    )


def _make_result(findings: tuple[Finding, ...] = (), **overrides: object) -> ScanResult:
    counts: dict[Severity, int] = {"critical": 0, "high": 0, "medium": 0, "low": 0}
    for finding in findings:
        counts[finding.severity] += 1
    defaults: dict[str, object] = {
        "root": "/tree",
        "scanned_files": 5,
        "total_findings": len(findings),
        "counts_by_severity": counts,
        "findings": findings,
        "duration_seconds": 0.25,
    }
    defaults.update(overrides)
    return ScanResult(**defaults)  # type: ignore[arg-type]


def _render(result: ScanResult, **kwargs: object) -> str:
    from sealcheck.reporting.stdout import StdoutReporter

    return StdoutReporter(result, **kwargs).render()  # type: ignore[arg-type]


def test_header_for_clean_scan() -> None:
    output = _render(_make_result(), color=False)

    assert "SEALCHECK" in output
    assert "Highest     none" in output
    assert "Files       5 scanned / 0 with findings" in output
    assert "Findings    0" in output
    assert "0 critical · 0 high · 0 medium · 0 low" in output
    assert "Rules       none" in output
    assert "Duration    0.250s" in output
    assert "┌" not in output


def test_findings_table_lists_location_with_line() -> None:
    result = _make_result((_make_finding(), _make_finding(rule_id="ARTINT-002", severity="medium", line=0)))

    output = _render(result, color=False)

    assert "Highest     critical" in output
    assert "/tree/SHA256SUMS:2" in output
    assert "ARTINT-002" in output
    assert "Checksum mismatch for app.zip" in output


def test_min_severity_hides_rows_and_reports_filtered_count() -> None:
    result = _make_result((_make_finding(), _make_finding(rule_id="ARTINT-002", severity="medium")))

    output = _render(result, color=False, min_severity="high")

    assert "Findings    1 shown / 2 total (1 below high filtered)" in output
    assert "│ ARTINT-002" not in output


def test_color_wraps_severity() -> None:
    output = _render(_make_result((_make_finding(),)), color=True)

    assert f"{ANSI_MAGENTA}critical{ANSI_RESET}" in output


def test_no_color_has_no_escape_codes() -> None:
    output = _render(_make_result((_make_finding(),)), color=False)

    assert "\033[" not in output


def test_verdict_fail_and_pass() -> None:
    result = _make_result((_make_finding(severity="medium", rule_id="ARTINT-002"),))

    failing = _render(result, color=False, fail_on="medium", exit_code=1)
    passing = _render(result, color=False, fail_on="high", exit_code=0)

    assert "Verdict     FAIL (1 finding(s) >= medium)" in failing
    assert "Verdict     PASS (no findings >= high)" in passing
    assert "Verdict" not in _render(result, color=False)


def test_cancelled_and_warnings_are_shown() -> None:
    result = _make_result(warnings=("NPM_MISSING_INTEGRITY skipped package-lock.json: invalid JSON",), cancelled=True)

    quiet = _render(result, color=False)
    verbose = _render(result, color=False, verbose=True)

    assert "Status      CANCELLED (partial results)" in quiet
    assert "Warnings    1" in quiet
    assert "skipped package-lock.json" not in quiet
    assert "- NPM_MISSING_INTEGRITY skipped package-lock.json: invalid JSON" in verbose


def test_long_locations_are_truncated() -> None:
    long_path = "/tree/" + "nested/" * 20 + "SHA256SUMS"

    output = _render(_make_result((_make_finding(path=long_path),)), color=False)

    assert long_path not in output
    assert "…" in output


def test_undecodable_file_names_render_as_replacement_characters() -> None:
    path = "/tree/caf\udce9.tar.gz"
    result = _make_result(
        (_make_finding(rule_id="ARTINT-001", severity="high", path=path, line=0),),
        warnings=("GO_SUM_HASH_CONFLICT skipped caf\udce9/go.sum: cannot read go.sum",),
    )

    output = _render(result, color=False, verbose=True)

    output.encode("utf-8")
    assert "/tree/caf�.tar.gz" in output
    assert "caf�/go.sum" in output
