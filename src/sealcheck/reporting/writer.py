"""Output writers for findings and summary JSON artifacts."""

from __future__ import annotations

from pathlib import Path

from sealcheck.constants.reporting import (
    FINDINGS_FILENAME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    SCHEMA_VERSION,
    SUMMARY_FILENAME,
)
from sealcheck.io import write_json_atomic
from sealcheck.model import Finding, Summary
from sealcheck.scanner.pipeline.conversion import sort_findings
from sealcheck.scanner.score import rule_counts, severity_counts, sorted_top_risks, type_counts


def write_scan_reports(
    out_root: Path,
    *,
    root: str,
    findings: list[Finding],
    all_findings: list[Finding] | None = None,
    scanned_files: int = 0,
    output_filter: dict[str, object] | None = None,
    cancelled: bool = False,
) -> Summary:
    """Write findings and summary JSON under *out_root* and return the summary."""
    out_root.mkdir(parents=True, exist_ok=True)

    sorted_findings = sort_findings(findings)
    write_json_atomic(
        path=out_root / FINDINGS_FILENAME,
        payload=[finding.to_dict() for finding in sorted_findings],
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )

    summary = build_summary(
        root,
        sorted_findings,
        all_findings=all_findings,
        scanned_files=scanned_files,
        output_filter=output_filter,
        cancelled=cancelled,
    )
    write_json_atomic(
        path=out_root / SUMMARY_FILENAME,
        payload=summary.to_dict(),
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )

    return summary


def build_summary(
    root: str,
    findings: list[Finding],
    *,
    all_findings: list[Finding] | None = None,
    scanned_files: int = 0,
    output_filter: dict[str, object] | None = None,
    cancelled: bool = False,
) -> Summary:
    """Build a deterministic summary from findings.

    Counts always cover *all_findings* when given, so filtering the written
    findings never changes the summary totals.
    """
    source_findings = all_findings if all_findings is not None else findings

    top_risks = tuple(
        {
            "id": finding.id,
            "rule_id": finding.rule_id,
            "type": finding.type,
            "severity": finding.severity,
            "evidence": finding.evidence.to_dict(),
        }
        for finding in sorted_top_risks(source_findings)
    )

    return Summary(
        schema_version=SCHEMA_VERSION,
        root=root,
        scanned_files=scanned_files,
        finding_count=len(source_findings),
        counts_by_severity=severity_counts(source_findings),
        counts_by_rule=rule_counts(source_findings),
        counts_by_type=type_counts(source_findings),
        top_risks=top_risks,
        shown_finding_count=(len(findings) if all_findings is not None else None),
        output_filter=output_filter,
        cancelled=cancelled,
    )
