"""Finding conversion and ordering helpers for the scanner pipeline."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

from sealcheck.constants.ids import FINDING_ID_HEX_LENGTH
from sealcheck.model import Finding, FindingCandidate


def candidate_to_finding(candidate: FindingCandidate) -> Finding:
    """Convert a finding candidate into a finding with a content-derived id."""
    identity = "|".join(
        [
            candidate.rule_id,
            candidate.detector_id,
            candidate.evidence.path,
            str(candidate.evidence.line),
            candidate.description,
            *(f"{key}={value}" for key, value in sorted(candidate.metadata.items())),
        ]
    )
    # File names that are not valid UTF-8 arrive surrogate-escaped from os.scandir.
    digest = hashlib.sha256(identity.encode("utf-8", errors="surrogateescape"))
    finding_id = digest.hexdigest()[:FINDING_ID_HEX_LENGTH]

    return Finding(
        id=finding_id,
        rule_id=candidate.rule_id,
        detector_id=candidate.detector_id,
        severity=candidate.severity,
        confidence=candidate.confidence,
        title=candidate.title,
        description=candidate.description,
        evidence=candidate.evidence,
        recommendation=candidate.recommendation,
        metadata=dict(candidate.metadata),
    )


def finding_sort_key(finding: Finding) -> tuple[str, str, int, str]:
    return (finding.rule_id, finding.evidence.path, finding.evidence.line, finding.id)


def sort_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Order findings by rule id, path, line, then id."""
    return sorted(findings, key=finding_sort_key)
