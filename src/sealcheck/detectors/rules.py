"""Detector implementations for the artifact integrity rule set."""

from __future__ import annotations

import logging

from sealcheck.constants.discovery import GO_SUM_NAME, NPM_LOCKFILE_NAME
from sealcheck.constants.parsing import DIGEST_PREVIEW_LENGTH
from sealcheck.constants.rules import (
    DETECTOR_CHECKSUM_MISMATCH,
    DETECTOR_GOSUM_CONFLICT,
    DETECTOR_MISSING_CHECKSUM,
    DETECTOR_NPM_MISSING_INTEGRITY,
    DETECTOR_UNSIGNED_ARTIFACT,
    RULE_CHECKSUM_INTEGRITY,
    RULE_MISSING_CHECKSUM,
    RULE_UNSIGNED_ARTIFACT,
    TYPE_CHECKSUM_MISMATCH,
    TYPE_MISSING_CHECKSUM,
    TYPE_MISSING_INTEGRITY,
    TYPE_UNSIGNED_ARTIFACT,
)
from sealcheck.detectors.base import Detector
from sealcheck.detectors.common import build_candidate
from sealcheck.model import FileEntry, FileIndex, FileKind, FindingCandidate
from sealcheck.scanner.companions import has_checksum_coverage, has_signature
from sealcheck.scanner.lockfiles import (
    find_hash_conflicts,
    find_missing_integrity,
    iter_go_sum_entries,
    load_npm_packages,
)
from sealcheck.scanner.manifest import digest_preview, find_digest_mismatches

logger = logging.getLogger(__name__)


class MissingChecksumDetector(Detector):
    """Release artifacts with neither a checksum companion nor a directory manifest."""

    detector_id = DETECTOR_MISSING_CHECKSUM
    rule_id = RULE_MISSING_CHECKSUM
    kinds = frozenset({FileKind.ARTIFACT})

    def run(self, *, entry: FileEntry, index: FileIndex) -> list[FindingCandidate]:
        if has_checksum_coverage(entry, index):
            return []
        return [
            build_candidate(
                rule_id=self.rule_id,
                detector_id=self.detector_id,
                finding_type=TYPE_MISSING_CHECKSUM,
                description=f"Release artifact {entry.name} has no corresponding checksum file",
                path=str(entry.path),
                recommendation=(
                    f"Publish {entry.name}.sha256 next to the artifact or list it in a SHA256SUMS manifest."
                ),
                metadata={"artifact": entry.name},
            )
        ]


class UnsignedArtifactDetector(Detector):
    """Release artifacts without a detached signature file."""

    detector_id = DETECTOR_UNSIGNED_ARTIFACT
    rule_id = RULE_UNSIGNED_ARTIFACT
    kinds = frozenset({FileKind.ARTIFACT})

    def run(self, *, entry: FileEntry, index: FileIndex) -> list[FindingCandidate]:
        if has_signature(entry, index):
            return []
        return [
            build_candidate(
                rule_id=self.rule_id,
                detector_id=self.detector_id,
                finding_type=TYPE_UNSIGNED_ARTIFACT,
                description=f"Release artifact {entry.name} has no signature file (.sig, .asc)",
                path=str(entry.path),
                recommendation="Sign the artifact (gpg, minisign or cosign) and ship the detached signature.",
                metadata={"artifact": entry.name},
            )
        ]


class ChecksumMismatchDetector(Detector):
    """Checksum manifest entries whose SHA-256 does not match the referenced file."""

    detector_id = DETECTOR_CHECKSUM_MISMATCH
    rule_id = RULE_CHECKSUM_INTEGRITY
    kinds = frozenset({FileKind.MANIFEST})

    def run(self, *, entry: FileEntry, index: FileIndex) -> list[FindingCandidate]:
        findings: list[FindingCandidate] = []
        for mismatch in find_digest_mismatches(entry.path):
            file_name = mismatch.entry.file_name
            declared = digest_preview(mismatch.declared_hash, DIGEST_PREVIEW_LENGTH)
            actual = digest_preview(mismatch.actual_hash, DIGEST_PREVIEW_LENGTH)
            findings.append(
                build_candidate(
                    rule_id=self.rule_id,
                    detector_id=self.detector_id,
                    finding_type=TYPE_CHECKSUM_MISMATCH,
                    description=f"Checksum mismatch for {file_name}: declared={declared} actual={actual}",
                    path=str(entry.path),
                    line=mismatch.entry.line,
                    recommendation="Rebuild or re-download the file and regenerate the manifest from trusted output.",
                    metadata={"file": file_name},
                )
            )
        return findings


class NpmMissingIntegrityDetector(Detector):
    """package-lock.json dependencies resolved from a URL without an integrity hash."""

    detector_id = DETECTOR_NPM_MISSING_INTEGRITY
    rule_id = RULE_CHECKSUM_INTEGRITY
    kinds = frozenset({FileKind.LOCKFILE})

    def run(self, *, entry: FileEntry, index: FileIndex) -> list[FindingCandidate]:
        if entry.name != NPM_LOCKFILE_NAME:
            return []
        findings: list[FindingCandidate] = []
        for package in find_missing_integrity(load_npm_packages(entry.path)):
            findings.append(
                build_candidate(
                    rule_id=self.rule_id,
                    detector_id=self.detector_id,
                    finding_type=TYPE_MISSING_INTEGRITY,
                    description=f"Lockfile entry missing integrity hash: {package.package_path}@{package.version}",
                    path=str(entry.path),
                    recommendation="Regenerate the lockfile with a current npm so every entry records `integrity`.",
                    metadata={"package": package.package_path, "version": package.version},
                )
            )
        return findings


class GoSumConflictDetector(Detector):
    """go.sum module/version pairs recorded twice with different hashes."""

    detector_id = DETECTOR_GOSUM_CONFLICT
    rule_id = RULE_CHECKSUM_INTEGRITY
    kinds = frozenset({FileKind.LOCKFILE})

    def run(self, *, entry: FileEntry, index: FileIndex) -> list[FindingCandidate]:
        if entry.name != GO_SUM_NAME:
            return []
        findings: list[FindingCandidate] = []
        for conflict in find_hash_conflicts(iter_go_sum_entries(entry.path)):
            module = conflict.entry.module
            version = conflict.entry.version
            findings.append(
                build_candidate(
                    rule_id=self.rule_id,
                    detector_id=self.detector_id,
                    finding_type=TYPE_CHECKSUM_MISMATCH,
                    description=f"Duplicate go.sum entry with different hash for {module}@{version}",
                    path=str(entry.path),
                    line=conflict.entry.line,
                    recommendation="Remove the conflicting line and run `go mod verify` against a clean module cache.",
                    metadata={"module": module, "version": version},
                )
            )
        return findings


DETECTOR_CLASSES: tuple[type[Detector], ...] = (
    MissingChecksumDetector,
    UnsignedArtifactDetector,
    ChecksumMismatchDetector,
    NpmMissingIntegrityDetector,
    GoSumConflictDetector,
)

DETECTORS_BY_ID: dict[str, type[Detector]] = {cls.detector_id: cls for cls in DETECTOR_CLASSES}


def build_detectors(detector_ids: tuple[str, ...]) -> list[Detector]:
    """Instantiate detectors in the given order, ignoring unknown ids."""
    detectors: list[Detector] = []
    for detector_id in detector_ids:
        detector_cls = DETECTORS_BY_ID.get(detector_id)
        if detector_cls is None:
            logger.warning("Unknown detector id '%s' ignored", detector_id)
            continue
        detectors.append(detector_cls())
    return detectors
