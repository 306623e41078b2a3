"""Root of the Sealcheck exception hierarchy."""

from __future__ import annotations


class SealcheckError(Exception):
    """Base exception for all Sealcheck errors."""
