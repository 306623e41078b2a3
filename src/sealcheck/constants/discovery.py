"""Constants for workspace indexing and path classification."""

from __future__ import annotations

# Directory names never descended into during indexing.
SKIPPED_DIR_NAMES: frozenset[str] = frozenset(
    {
        ".git",
        "vendor",
        "node_modules",
        "__pycache__",
        ".venv",
    }
)

# Matched as case-insensitive suffixes of the file name.
RELEASE_ARTIFACT_EXTENSIONS: tuple[str, ...] = (
    ".tar.gz",
    ".tgz",
    ".zip",
    ".tar.bz2",
    ".tar.xz",
    ".deb",
    ".rpm",
    ".whl",
    ".gem",
    ".jar",
    ".war",
    ".apk",
)

SIGNATURE_EXTENSIONS: tuple[str, ...] = (
    ".sig",
    ".asc",
    ".sign",
    ".gpg",
    ".minisig",
)

CHECKSUM_EXTENSIONS: tuple[str, ...] = (
    ".sha256",
    ".sha512",
    ".sha256sum",
    ".sha512sum",
    ".md5",
    ".md5sum",
)

# Matched against the exact, case-sensitive base name.
CHECKSUM_MANIFEST_NAMES: frozenset[str] = frozenset(
    {
        "SHA256SUMS",
        "SHA512SUMS",
        "CHECKSUMS",
        "checksums.txt",
        "CHECKSUMS.txt",
    }
)

NPM_LOCKFILE_NAME: str = "package-lock.json"
GO_SUM_NAME: str = "go.sum"

LOCKFILE_NAMES: frozenset[str] = frozenset(
    {
        NPM_LOCKFILE_NAME,
        "yarn.lock",
        GO_SUM_NAME,
        "Gemfile.lock",
        "poetry.lock",
        "Cargo.lock",
        "composer.lock",
    }
)
