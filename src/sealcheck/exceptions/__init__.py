"""Shared exception hierarchy for Sealcheck."""

from __future__ import annotations

from .base import SealcheckError
from .config import ConfigError
from .parsing import LockfileParseError, ManifestReadError, ParsingError

__all__ = [
    "ConfigError",
    "LockfileParseError",
    "ManifestReadError",
    "ParsingError",
    "SealcheckError",
]
