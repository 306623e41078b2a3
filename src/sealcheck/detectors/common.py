"""Shared helpers for detector implementations."""

from __future__ import annotations

from sealcheck.constants.rules import RULE_CONFIDENCE, RULE_SEVERITY, RULE_TITLES
from sealcheck.model import Evidence, FindingCandidate
from sealcheck.types import FindingType


def build_candidate(
    *,
    rule_id: str,
    detector_id: str,
    finding_type: FindingType,
    description: str,
    path: str,
    recommendation: str,
    line: int = 0,
    metadata: dict[str, str] | None = None,
) -> FindingCandidate:
    """Build a candidate with the fixed severity and confidence of its rule."""
    merged = dict(metadata or {})
    merged["type"] = finding_type
    return FindingCandidate(
        rule_id=rule_id,
        detector_id=detector_id,
        severity=RULE_SEVERITY[rule_id],
        confidence=RULE_CONFIDENCE[rule_id],
        title=RULE_TITLES[rule_id],
        description=description,
        evidence=Evidence(path=path, line=line, end_line=line),
        recommendation=recommendation,
        metadata=merged,
    )
