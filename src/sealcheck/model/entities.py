"""Finding, summary and scan result entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from sealcheck.types import Confidence, JsonObject, Severity


@dataclass(frozen=True)
class Evidence:
    """File location a finding points at; line ``0`` means the whole file."""

    path: str
    line: int = 0
    end_line: int = 0

    def to_dict(self) -> JsonObject:
        return {"path": self.path, "line": self.line, "end_line": self.end_line}


@dataclass(frozen=True)
class FindingCandidate:
    """Detector output before it receives a stable identifier."""

    rule_id: str
    detector_id: str
    severity: Severity
    confidence: Confidence
    title: str
    description: str
    evidence: Evidence
    recommendation: str
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Finding:
    """A reported integrity problem."""

    id: str
    rule_id: str
    detector_id: str
    severity: Severity
    confidence: Confidence
    title: str
    description: str
    evidence: Evidence
    recommendation: str
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def type(self) -> str:
        """Sub-case tag that disambiguates findings sharing a rule id."""
        return self.metadata.get("type", "")

    def to_dict(self) -> JsonObject:
        return {
            "id": self.id,
            "rule_id": self.rule_id,
            "detector_id": self.detector_id,
            "severity": self.severity,
            "confidence": self.confidence,
            "title": self.title,
            "description": self.description,
            "evidence": self.evidence.to_dict(),
            "recommendation": self.recommendation,
            "metadata": dict(sorted(self.metadata.items())),
        }


@dataclass(frozen=True)
class Summary:
    """Aggregate counts over one scan's findings."""

    schema_version: str
    root: str
    scanned_files: int
    finding_count: int
    counts_by_severity: dict[Severity, int]
    counts_by_rule: dict[str, int]
    counts_by_type: dict[str, int]
    top_risks: tuple[JsonObject, ...] = ()
    shown_finding_count: int | None = None
    output_filter: dict[str, object] | None = None
    cancelled: bool = False

    def to_dict(self) -> JsonObject:
        payload: JsonObject = {
            "schema_version": self.schema_version,
            "root": self.root,
            "scanned_files": self.scanned_files,
            "finding_count": self.finding_count,
            "counts_by_severity": dict(self.counts_by_severity),
            "counts_by_rule": dict(self.counts_by_rule),
            "counts_by_type": dict(self.counts_by_type),
            "top_risks": list(self.top_risks),
            "cancelled": self.cancelled,
        }
        if self.shown_finding_count is not None:
            payload["shown_finding_count"] = self.shown_finding_count
        if self.output_filter is not None:
            payload["output_filter"] = self.output_filter  # type: ignore[assignment]
        return payload


@dataclass(frozen=True)
class ScanResult:
    """Everything one ``scan_workspace`` call produced."""

    root: str
    scanned_files: int
    total_findings: int
    counts_by_severity: dict[Severity, int]
    findings: tuple[Finding, ...]
    duration_seconds: float
    warnings: tuple[str, ...] = ()
    counts_by_rule: dict[str, int] = field(default_factory=dict)
    rules_executed: tuple[str, ...] = ()
    cancelled: bool = False

    def to_dict(self) -> JsonObject:
        return {
            "root": self.root,
            "scanned_files": self.scanned_files,
            "total_findings": self.total_findings,
            "counts_by_severity": dict(self.counts_by_severity),
            "counts_by_rule": dict(self.counts_by_rule),
            "findings": [finding.to_dict() for finding in self.findings],
            "duration_seconds": self.duration_seconds,
            "warnings": list(self.warnings),
            "rules_executed": list(self.rules_executed),
            "cancelled": self.cancelled,
        }
