"""Tests for JSON Schema validation of findings and summary outputs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from sealcheck.constants.reporting import SCHEMA_VERSION
from sealcheck.model import Finding
from sealcheck.reporting.filters import OutputFilters, build_filter_metadata
from sealcheck.reporting.writer import build_summary, write_scan_reports
from sealcheck.scanner import scan

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "schemas"
FINDINGS_SCHEMA_PATH: Path = SCHEMAS_DIR / "findings.schema.json"
SUMMARY_SCHEMA_PATH: Path = SCHEMAS_DIR / "summary.schema.json"


def _load_schema(path: Path) -> dict[str, Any]:
    """Load a JSON Schema file from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture()
def findings_schema() -> dict[str, Any]:
    """Load the findings JSON Schema."""
    return _load_schema(FINDINGS_SCHEMA_PATH)


@pytest.fixture()
def summary_schema() -> dict[str, Any]:
    """Load the summary JSON Schema."""
    return _load_schema(SUMMARY_SCHEMA_PATH)


@pytest.fixture()
def sample_findings(release_tree: Path) -> list[Finding]:
    """Real findings spanning every rule and finding type."""
    return scan(release_tree)


def test_findings_schema_is_valid_json_schema(findings_schema: dict[str, Any]) -> None:
    """Findings schema itself must be a valid JSON Schema document."""
    jsonschema.Draft202012Validator.check_schema(findings_schema)


def test_summary_schema_is_valid_json_schema(summary_schema: dict[str, Any]) -> None:
    """Summary schema itself must be a valid JSON Schema document."""
    jsonschema.Draft202012Validator.check_schema(summary_schema)


def test_written_findings_validate(
    tmp_path: Path,
    release_tree: Path,
    sample_findings: list[Finding],
    findings_schema: dict[str, Any],
    summary_schema: dict[str, Any],
) -> None:
    out = tmp_path / "out"
    write_scan_reports(out, root=str(release_tree), findings=sample_findings, scanned_files=8)

    findings_payload = json.loads((out / "findings.json").read_text(encoding="utf-8"))
    summary_payload = json.loads((out / "summary.json").read_text(encoding="utf-8"))

    jsonschema.validate(findings_payload, findings_schema)
    jsonschema.validate(summary_payload, summary_schema)
    assert summary_payload["schema_version"] == SCHEMA_VERSION
    assert summary_payload["counts_by_type"] == {
        "checksum_mismatch": 2,
        "missing_checksum": 1,
        "missing_integrity": 1,
        "unsigned_artifact": 2,
    }


def test_empty_findings_validate(findings_schema: dict[str, Any], summary_schema: dict[str, Any]) -> None:
    jsonschema.validate([], findings_schema)
    jsonschema.validate(build_summary("/empty", []).to_dict(), summary_schema)


def test_filtered_summary_validates(sample_findings: list[Finding], summary_schema: dict[str, Any]) -> None:
    filters = OutputFilters(min_severity="high")
    shown = [finding for finding in sample_findings if finding.severity in {"high", "critical"}]
    metadata = build_filter_metadata(total=len(sample_findings), shown=len(shown), filters=filters)

    summary = build_summary(
        "/tree",
        shown,
        all_findings=sample_findings,
        output_filter=metadata,
        cancelled=True,
    )

    jsonschema.validate(summary.to_dict(), summary_schema)
    assert summary.finding_count == 6
    assert summary.shown_finding_count == 4
    assert summary.cancelled is True


def test_schema_rejects_unknown_severity(sample_findings: list[Finding], findings_schema: dict[str, Any]) -> None:
    payload = [finding.to_dict() for finding in sample_findings]
    payload[0]["severity"] = "urgent"

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(payload, findings_schema)


def test_schema_requires_type_metadata(sample_findings: list[Finding], findings_schema: dict[str, Any]) -> None:
    payload = [finding.to_dict() for finding in sample_findings]
    del payload[0]["metadata"]["type"]

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(payload, findings_schema)
