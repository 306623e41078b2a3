"""Configuration-related exceptions."""

from __future__ import annotations

from sealcheck.exceptions.base import SealcheckError


class ConfigError(SealcheckError, ValueError):
    """Raised when scanner configuration is invalid."""
