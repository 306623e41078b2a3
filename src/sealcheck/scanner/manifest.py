"""Checksum manifest parsing and SHA-256 verification.

Manifests follow the coreutils ``sha256sum`` layout: one ``<hex digest>
<whitespace> <file name>`` pair per line, optionally with a ``*`` in front
of the file name for binary mode. Blank lines, ``#`` comments and lines of
any other shape are ignored. Referenced files resolve against the
manifest's own directory.

Only 64-character digests are verified. Shorter or longer digests are parsed
but never compared.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from sealcheck.constants.parsing import (
    CHECKSUM_LINE_PATTERN,
    MANIFEST_BINARY_MARKER,
    MANIFEST_COMMENT_PREFIX,
    SHA256_HEX_LENGTH,
)
from sealcheck.exceptions import ManifestReadError
from sealcheck.io import file_sha256
from sealcheck.model import DigestMismatch, ManifestEntry

logger = logging.getLogger(__name__)


def parse_manifest_line(raw_line: str, line_number: int) -> ManifestEntry | None:
    """Parse one manifest line, returning None for anything that is not an entry."""
    line = raw_line.strip()
    if not line or line.startswith(MANIFEST_COMMENT_PREFIX):
        return None

    match = CHECKSUM_LINE_PATTERN.match(line)
    if match is None:
        return None

    file_name = match.group(2).strip().removeprefix(MANIFEST_BINARY_MARKER)
    if not file_name:
        return None
    return ManifestEntry(declared_hash=match.group(1).lower(), file_name=file_name, line=line_number)


def iter_manifest_entries(manifest_path: Path) -> Iterator[ManifestEntry]:
    """Yield manifest entries one line at a time.

    Raises ``ManifestReadError`` when the manifest itself cannot be opened.
    """
    try:
        handle = manifest_path.open("r", encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise ManifestReadError(manifest_path, str(exc)) from exc

    with handle:
        for line_number, raw_line in enumerate(handle, start=1):
            entry = parse_manifest_line(raw_line, line_number)
            if entry is not None:
                yield entry


def resolve_reference(manifest_dir: Path, file_name: str) -> Path:
    """Resolve a referenced file name against the manifest directory."""
    # Anchored to the manifest directory even for absolute names.
    return manifest_dir / file_name.lstrip("/")


def is_verifiable(entry: ManifestEntry) -> bool:
    """Whether the declared digest is a SHA-256 digest."""
    return len(entry.declared_hash) == SHA256_HEX_LENGTH


def actual_digest(target: Path) -> str | None:
    """Return the SHA-256 of *target*, or None when it cannot be read."""
    try:
        return file_sha256(target)
    except (OSError, ValueError) as exc:
        logger.debug("Nothing to verify for %s: %s", target, exc)
        return None


def find_digest_mismatches(manifest_path: Path) -> list[DigestMismatch]:
    """Return every verifiable entry whose file content disagrees with its digest.

    Referenced files that are missing or unreadable are skipped.
    """
    mismatches: list[DigestMismatch] = []
    manifest_dir = manifest_path.parent
    for entry in iter_manifest_entries(manifest_path):
        if not is_verifiable(entry):
            continue
        actual = actual_digest(resolve_reference(manifest_dir, entry.file_name))
        if actual is None:
            continue
        if actual != entry.declared_hash:
            mismatches.append(DigestMismatch(entry=entry, actual_hash=actual))
    return mismatches


def digest_preview(digest: str, length: int) -> str:
    """Truncate a digest for human-readable messages."""
    return f"{digest[:length]}..."
