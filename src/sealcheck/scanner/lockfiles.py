"""Lockfile integrity parsing for npm and Go module checksum files."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from sealcheck.constants.parsing import GO_SUM_LINE_PATTERN, NPM_ROOT_PACKAGE_KEY
from sealcheck.exceptions import LockfileParseError
from sealcheck.model import HashConflict, LockfilePackageEntry, ModuleVersionEntry

logger = logging.getLogger(__name__)


def load_npm_packages(path: Path) -> list[LockfilePackageEntry]:
    """Read the ``packages`` map of a ``package-lock.json``.

    Entries come back sorted by package path. Raises ``LockfileParseError``
    when the file cannot be read or is not a JSON object.
    """
    try:
        document = json.loads(path.read_bytes())
    except OSError as exc:
        raise LockfileParseError(path, f"cannot read lockfile: {exc}") from exc
    except (ValueError, RecursionError) as exc:
        raise LockfileParseError(path, f"invalid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise LockfileParseError(path, "lockfile must be a JSON object")

    packages = document.get("packages")
    if packages is None:
        return []
    if not isinstance(packages, dict):
        raise LockfileParseError(path, "`packages` must be a JSON object")

    entries: list[LockfilePackageEntry] = []
    for package_path in sorted(packages):
        payload = packages[package_path]
        if not isinstance(payload, dict):
            logger.debug("Ignoring non-object lockfile entry %r in %s", package_path, path)
            continue
        entries.append(
            LockfilePackageEntry(
                package_path=package_path,
                version=_string_field(payload, "version"),
                resolved=_string_field(payload, "resolved"),
                integrity=_string_field(payload, "integrity"),
            )
        )
    return entries


def _string_field(payload: dict[str, object], key: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else ""


def find_missing_integrity(entries: list[LockfilePackageEntry]) -> list[LockfilePackageEntry]:
    """Return dependency entries that have a resolved URL but no integrity hash."""
    return [
        entry for entry in entries if entry.package_path != NPM_ROOT_PACKAGE_KEY and entry.missing_integrity
    ]


def parse_go_sum_line(raw_line: str, line_number: int) -> ModuleVersionEntry | None:
    """Parse a ``module version h1:hash`` line, or return None."""
    line = raw_line.strip()
    if not line:
        return None
    match = GO_SUM_LINE_PATTERN.match(line)
    if match is None:
        return None
    return ModuleVersionEntry(module=match.group(1), version=match.group(2), hash=match.group(3), line=line_number)


def iter_go_sum_entries(path: Path) -> Iterator[ModuleVersionEntry]:
    """Yield go.sum entries in file order."""
    try:
        handle = path.open("r", encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise LockfileParseError(path, f"cannot read go.sum: {exc}") from exc

    with handle:
        for line_number, raw_line in enumerate(handle, start=1):
            entry = parse_go_sum_line(raw_line, line_number)
            if entry is not None:
                yield entry


def find_hash_conflicts(entries: Iterable[ModuleVersionEntry]) -> list[HashConflict]:
    """Detect duplicate module/version keys recorded with a different hash.

    The first occurrence of a key is never a conflict. Each later occurrence
    is compared with the most recently seen hash for that key.
    """
    seen: dict[tuple[str, str], str] = {}
    conflicts: list[HashConflict] = []
    for entry in entries:
        previous = seen.get(entry.key)
        if previous is not None and previous != entry.hash:
            conflicts.append(HashConflict(entry=entry, previous_hash=previous))
        seen[entry.key] = entry.hash
    return conflicts
