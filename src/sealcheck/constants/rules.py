"""Fixed rule table: rule ids, severities, confidences and finding type tags."""

from __future__ import annotations

from sealcheck.types import Confidence, FindingType, Severity

RULE_MISSING_CHECKSUM: str = "ARTINT-001"
RULE_UNSIGNED_ARTIFACT: str = "ARTINT-002"
RULE_CHECKSUM_INTEGRITY: str = "ARTINT-003"

RULE_SEVERITY: dict[str, Severity] = {
    RULE_MISSING_CHECKSUM: "high",
    RULE_UNSIGNED_ARTIFACT: "medium",
    RULE_CHECKSUM_INTEGRITY: "critical",
}

RULE_CONFIDENCE: dict[str, Confidence] = {
    RULE_MISSING_CHECKSUM: "high",
    RULE_UNSIGNED_ARTIFACT: "medium",
    RULE_CHECKSUM_INTEGRITY: "high",
}

RULE_TITLES: dict[str, str] = {
    RULE_MISSING_CHECKSUM: "Release artifact without checksum",
    RULE_UNSIGNED_ARTIFACT: "Unsigned release artifact",
    RULE_CHECKSUM_INTEGRITY: "Checksum or integrity problem",
}

TYPE_MISSING_CHECKSUM: FindingType = "missing_checksum"
TYPE_UNSIGNED_ARTIFACT: FindingType = "unsigned_artifact"
TYPE_CHECKSUM_MISMATCH: FindingType = "checksum_mismatch"
TYPE_MISSING_INTEGRITY: FindingType = "missing_integrity"

DETECTOR_MISSING_CHECKSUM: str = "MISSING_CHECKSUM"
DETECTOR_UNSIGNED_ARTIFACT: str = "UNSIGNED_ARTIFACT"
DETECTOR_CHECKSUM_MISMATCH: str = "CHECKSUM_MISMATCH"
DETECTOR_NPM_MISSING_INTEGRITY: str = "NPM_MISSING_INTEGRITY"
DETECTOR_GOSUM_CONFLICT: str = "GOSUM_CONFLICT"

DEFAULT_DETECTORS: tuple[str, ...] = (
    DETECTOR_MISSING_CHECKSUM,
    DETECTOR_UNSIGNED_ARTIFACT,
    DETECTOR_CHECKSUM_MISMATCH,
    DETECTOR_NPM_MISSING_INTEGRITY,
    DETECTOR_GOSUM_CONFLICT,
)
