"""Parsing-related exceptions."""

from __future__ import annotations

from pathlib import Path

from sealcheck.exceptions.base import SealcheckError


class ParsingError(SealcheckError, ValueError):
    """Raised when a scanned file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class LockfileParseError(ParsingError):
    """Raised when a lockfile is not a structurally valid document."""


class ManifestReadError(ParsingError):
    """Raised when a checksum manifest cannot be opened."""
